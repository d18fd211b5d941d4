# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the document elements that replace rendered code blocks."""

from __future__ import annotations

import subprocess  # nosec B404
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeAlias

import panflute as pf
from bs4 import BeautifulSoup

from .constants import SOURCE_LINK_TEXT
from .errors import PlotError
from .models import BlockAttributes, FigureSpec
from .paths import figure_path, source_code_path

CaptionReader: TypeAlias = Callable[[str, str], list[pf.Inline]]


def read_caption(text: str, fmt: str) -> list[pf.Inline]:
    """Convert caption markup written in pandoc format ``fmt`` to inlines.

    Raises:
        PlotError: If pandoc cannot convert the caption.
    """

    if not text.strip():
        return []
    try:
        blocks = pf.convert_text(text, input_format=fmt)
    except (OSError, ValueError, subprocess.CalledProcessError) as exc:
        raise PlotError(f"Unable to read caption {text!r} as {fmt}: {exc}") from exc
    inlines: list[pf.Inline] = []
    for block in blocks:
        if isinstance(block, (pf.Para, pf.Plain)):
            if inlines:
                inlines.append(pf.Space())
            inlines.extend(block.content)
    return inlines


def write_html(inlines: Sequence[pf.Inline]) -> str:
    """Render ``inlines`` as an HTML fragment.

    Raises:
        PlotError: If pandoc cannot render the fragment.
    """

    if not inlines:
        return ""
    try:
        return pf.convert_text(pf.Plain(*inlines), input_format="panflute", output_format="html").strip()
    except (OSError, ValueError, subprocess.CalledProcessError) as exc:
        raise PlotError(f"Unable to render caption as HTML: {exc}") from exc


def extract_plot(page: str) -> str:
    """Return the plot-relevant part of a full HTML page.

    That is every ``<script>`` of the ``<head>`` followed by the content of
    the ``<body>``. Fragments without a ``<body>`` are kept whole.
    """

    soup = BeautifulSoup(page, "html.parser")
    parts: list[str] = []
    if soup.head is not None:
        parts.extend(str(script) for script in soup.head.find_all("script"))
    if soup.body is not None:
        parts.extend(str(child) for child in soup.body.contents)
    else:
        if soup.head is not None:
            soup.head.decompose()
        parts.append(str(soup))
    return "".join(parts)


def source_link(spec: FigureSpec) -> pf.Link:
    """Return a link to the source page of ``spec``."""

    return pf.Link(*_words(SOURCE_LINK_TEXT), url=source_code_path(spec).as_posix())


def caption_inlines(spec: FigureSpec, fmt: str, reader: CaptionReader = read_caption) -> list[pf.Inline]:
    """Return the caption of ``spec``, with a source link when requested."""

    inlines = reader(spec.caption, fmt)
    if spec.with_source:
        if inlines:
            inlines.append(pf.Space())
        inlines.extend([pf.Str("("), source_link(spec), pf.Str(")")])
    return inlines


def to_figure(spec: FigureSpec, fmt: str, reader: CaptionReader = read_caption) -> pf.Block:
    """Return the block replacing the code block of ``spec``.

    The figure script must already have been run.

    Args:
        spec: Rendered figure.
        fmt: Pandoc format of the caption text.
        reader: Converts caption text to inlines.
    """

    target = figure_path(spec)
    inlines = caption_inlines(spec, fmt, reader)
    if spec.save_format.is_interactive:
        return interactive_block(target, inlines)
    return figure_block(spec.block_attrs, target, inlines)


def figure_block(attrs: BlockAttributes, target: Path, inlines: Sequence[pf.Inline]) -> pf.Figure:
    """Return a figure with an image of ``target`` captioned by ``inlines``."""

    caption = pf.Plain(*inlines)
    alt = _words(pf.stringify(caption).strip()) if inlines else []
    image = pf.Image(*alt, url=target.as_posix())
    return pf.Figure(
        pf.Plain(image),
        caption=pf.Caption(caption) if inlines else pf.Caption(),
        identifier=attrs.identifier,
        classes=list(attrs.classes),
        attributes=attrs.as_dict(),
    )


def interactive_block(target: Path, inlines: Sequence[pf.Inline]) -> pf.RawBlock:
    """Return raw HTML embedding the interactive page at ``target``.

    Raises:
        PlotError: If the page cannot be read.
    """

    try:
        page = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PlotError(f"Unable to read interactive figure {target}: {exc}") from exc
    html = (
        "<figure>\n"
        "    <div>\n"
        f"    {extract_plot(page)}\n"
        "    </div>\n"
        f"    <figcaption>{write_html(inlines)}</figcaption>\n"
        "</figure>"
    )
    return pf.RawBlock(html, format="html")


def _words(text: str) -> list[pf.Inline]:
    inlines: list[pf.Inline] = []
    for index, word in enumerate(text.split()):
        if index:
            inlines.append(pf.Space())
        inlines.append(pf.Str(word))
    return inlines


__all__ = [
    "CaptionReader",
    "caption_inlines",
    "extract_plot",
    "figure_block",
    "interactive_block",
    "read_caption",
    "source_link",
    "to_figure",
    "write_html",
]
