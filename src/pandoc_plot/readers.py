# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read documents from disk through pandoc."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Final

import panflute as pf

from .errors import PlotError

# Mirrors the extension heuristics pandoc applies to input files.
READER_FORMATS: Final[dict[str, str]] = {
    ".adoc": "asciidoc",
    ".asciidoc": "asciidoc",
    ".context": "context",
    ".ctx": "context",
    ".db": "docbook",
    ".doc": "doc",
    ".docx": "docx",
    ".dokuwiki": "dokuwiki",
    ".epub": "epub",
    ".fb2": "fb2",
    ".htm": "html",
    ".html": "html",
    ".icml": "icml",
    ".json": "json",
    ".latex": "latex",
    ".lhs": "markdown+lhs",
    ".ltx": "latex",
    ".markdown": "markdown",
    ".md": "markdown",
    ".ms": "ms",
    ".muse": "muse",
    ".native": "native",
    ".odt": "odt",
    ".opml": "opml",
    ".org": "org",
    ".pdf": "pdf",
    ".pptx": "pptx",
    ".roff": "ms",
    ".rst": "rst",
    ".rtf": "rtf",
    ".s5": "s5",
    ".t2t": "t2t",
    ".tei": "tei",
    ".tei.xml": "tei",
    ".tex": "latex",
    ".texi": "texinfo",
    ".texinfo": "texinfo",
    ".text": "markdown",
    ".textile": "textile",
    ".txt": "markdown",
    ".wiki": "mediawiki",
    ".xhtml": "html",
    ".ipynb": "ipynb",
    ".csv": "csv",
}


def format_from_path(path: Path) -> str | None:
    """Return the pandoc reader guessed from the extension of ``path``.

    Args:
        path: Document path.

    Returns:
        str | None: Reader name, or ``None`` when pandoc should decide.
    """

    name = path.name.lower()
    if name.endswith(".tei.xml"):
        return READER_FORMATS[".tei.xml"]
    suffix = Path(name).suffix
    if len(suffix) == 2 and suffix[1] in "123456789":
        return "man"
    return READER_FORMATS.get(suffix)


def read_doc(path: Path) -> pf.Doc:
    """Parse the document at ``path`` into a panflute document.

    Raises:
        PlotError: If the file is missing or pandoc cannot read it.
    """

    if not path.is_file():
        raise PlotError(f"Cannot read document {path}: no such file.")
    args = [str(path), "--to", "json"]
    fmt = format_from_path(path)
    if fmt is not None:
        args[1:1] = ["--from", fmt]
    try:
        output = pf.run_pandoc(args=args)
    except OSError as exc:
        raise PlotError(f"Cannot read document {path}: {exc}") from exc
    return pf.load(io.StringIO(output))


__all__ = ["READER_FORMATS", "format_from_path", "read_doc"]
