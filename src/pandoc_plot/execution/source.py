# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Syntax-highlighted source pages written next to figures."""

from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax

from ..errors import SideArtifactError
from ..models import FigureSpec
from ..paths import source_code_path

_PAGE_WIDTH = 100


def render_source_page(script: str, language: str) -> str:
    """Return a self-contained HTML page showing ``script`` highlighted as ``language``."""

    console = Console(
        record=True,
        file=io.StringIO(),
        width=_PAGE_WIDTH,
        color_system="truecolor",
        force_terminal=True,
    )
    console.print(Syntax(script, language, line_numbers=True, word_wrap=True))
    return console.export_html(inline_styles=True)


def write_source(spec: FigureSpec, language: str) -> Path:
    """Write the source page of ``spec`` and return its path.

    Raises:
        SideArtifactError: If the page cannot be rendered or written.
    """

    target = source_code_path(spec)
    try:
        page = render_source_page(spec.script, language)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(page, encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise SideArtifactError(f"Unable to write source page {target}: {exc}") from exc
    return target


__all__ = ["render_source_page", "write_source"]
