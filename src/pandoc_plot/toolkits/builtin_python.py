# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Renderers for Python plotting toolkits."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from ..config.types import SaveFormat
from .base import Renderer, Toolkit
from .builtin_helpers import PYTHON_EXECUTABLE, as_bool, forbid_pattern, quote, script_literal

if TYPE_CHECKING:
    from ..models import FigureSpec, OutputSpec

TIGHT_BBOX_KEY: Final[str] = "tight_bbox"
TRANSPARENT_KEY: Final[str] = "transparent"

_SHOW_CALL: Final[str] = r"\.show\(\s*\)"


def python_command(output: OutputSpec, executable: str) -> str:
    """Run the temporary script with the Python interpreter."""

    return f"{quote(executable)} {quote(output.script_path)}"


def matplotlib_capture(spec: FigureSpec, target: Path) -> str:
    """Append code saving the current matplotlib figure to ``target``."""

    extras = spec.extras
    tight = as_bool(extras.get(TIGHT_BBOX_KEY))
    transparent = as_bool(extras.get(TRANSPARENT_KEY))
    bbox = ', bbox_inches="tight"' if tight else ""
    destination = repr(script_literal(target))
    return (
        f"{spec.script}\n\n"
        "import matplotlib.pyplot as plt\n"
        f'plt.savefig({destination}, dpi={spec.dpi}, transparent={transparent}{bbox})\n'
    )


def plotly_python_capture(spec: FigureSpec, target: Path) -> str:
    """Append code writing the first plotly figure found in globals to ``target``."""

    destination = repr(script_literal(target))
    if spec.save_format is SaveFormat.HTML:
        writer = f'__current_plotly_figure.write_html({destination}, include_plotlyjs="cdn")'
    else:
        writer = f'__current_plotly_figure.write_image({destination})'
    return (
        f"{spec.script}\n\n"
        "import plotly.graph_objects as go\n"
        "__current_plotly_figure = next(obj for obj in globals().values() if type(obj) == go.Figure)\n"
        f"{writer}\n"
    )


MATPLOTLIB_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.MATPLOTLIB,
    script_extension=".py",
    language="python",
    executable=PYTHON_EXECUTABLE,
    command=python_command,
    capture=matplotlib_capture,
    supported_formats=frozenset(
        {
            SaveFormat.PNG,
            SaveFormat.PDF,
            SaveFormat.SVG,
            SaveFormat.JPG,
            SaveFormat.EPS,
            SaveFormat.GIF,
            SaveFormat.TIF,
        },
    ),
    checks=(
        forbid_pattern(
            _SHOW_CALL,
            "encountered a call to `matplotlib.pyplot.show`",
        ),
    ),
    extra_attrs={TIGHT_BBOX_KEY: "false", TRANSPARENT_KEY: "false"},
)

PLOTLY_PYTHON_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.PLOTLY_PYTHON,
    script_extension=".py",
    language="python",
    executable=PYTHON_EXECUTABLE,
    command=python_command,
    capture=plotly_python_capture,
    supported_formats=frozenset(
        {
            SaveFormat.PNG,
            SaveFormat.JPG,
            SaveFormat.WEBP,
            SaveFormat.PDF,
            SaveFormat.SVG,
            SaveFormat.EPS,
            SaveFormat.HTML,
        },
    ),
    checks=(
        forbid_pattern(
            _SHOW_CALL,
            "encountered a call to `show`, which opens a browser window",
        ),
    ),
)

__all__ = [
    "MATPLOTLIB_RENDERER",
    "PLOTLY_PYTHON_RENDERER",
    "TIGHT_BBOX_KEY",
    "TRANSPARENT_KEY",
    "matplotlib_capture",
    "plotly_python_capture",
    "python_command",
]
