# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Renderers for MATLAB-like, R, gnuplot and graphviz toolkits."""

from __future__ import annotations

import glob
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Final

from ..config.types import SaveFormat
from .base import Renderer, Toolkit
from .builtin_helpers import forbid_pattern, quote, script_literal

if TYPE_CHECKING:
    from ..models import FigureSpec, OutputSpec

_RASTER_AND_VECTOR: Final[frozenset[SaveFormat]] = frozenset(
    {
        SaveFormat.PNG,
        SaveFormat.PDF,
        SaveFormat.SVG,
        SaveFormat.JPG,
        SaveFormat.EPS,
        SaveFormat.GIF,
        SaveFormat.TIF,
    },
)

_GNUPLOT_TERMINALS: Final[dict[SaveFormat, str]] = {
    SaveFormat.PNG: "pngcairo",
    SaveFormat.SVG: "svg",
    SaveFormat.EPS: "postscript eps",
    SaveFormat.GIF: "gif",
    SaveFormat.JPG: "jpeg",
    SaveFormat.PDF: "pdfcairo",
}

_MATLAB_INSTALL_GLOBS: Final[tuple[str, ...]] = (
    "/usr/local/MATLAB/*/bin",
    "/opt/MATLAB/*/bin",
    "/Applications/MATLAB_*.app/bin",
    "C:/Program Files/MATLAB/*/bin",
)

_MATHEMATICA_INSTALL_GLOBS: Final[tuple[str, ...]] = (
    "/usr/local/Wolfram/Mathematica/*/Executables",
    "/opt/Wolfram/Mathematica/*/Executables",
    "/Applications/Mathematica.app/Contents/MacOS",
    "C:/Program Files/Wolfram Research/Mathematica/*",
)


def _glob_directories(patterns: Sequence[str]) -> list[Path]:
    found: list[Path] = []
    for pattern in patterns:
        found.extend(Path(match) for match in sorted(glob.glob(pattern), reverse=True))
    return [path for path in found if path.is_dir()]


def matlab_search_directories() -> Sequence[Path]:
    """Return MATLAB installation ``bin`` directories, newest release first."""

    return _glob_directories(_MATLAB_INSTALL_GLOBS)


def mathematica_search_directories() -> Sequence[Path]:
    """Return Mathematica installation directories, newest release first."""

    return _glob_directories(_MATHEMATICA_INSTALL_GLOBS)


def matlab_command(output: OutputSpec, executable: str) -> str:
    statement = f"run('{script_literal(output.script_path)}')"
    return f"{quote(executable)} -batch {quote(statement)}"


def matlab_capture(spec: FigureSpec, target: Path) -> str:
    return f"{spec.script}\nsaveas(gcf, '{script_literal(target)}')\n"


def mathematica_command(output: OutputSpec, executable: str) -> str:
    return f"{quote(executable)} -script {quote(output.script_path)}"


def mathematica_capture(spec: FigureSpec, target: Path) -> str:
    return f'{spec.script}\nExport["{script_literal(target)}", %, ImageResolution -> {spec.dpi}]\n'


def octave_command(output: OutputSpec, executable: str) -> str:
    return f"{quote(executable)} --no-gui --no-window-system {quote(output.script_path)}"


def octave_capture(spec: FigureSpec, target: Path) -> str:
    return f"{spec.script}\nprint(gcf, '{script_literal(target)}', '-r{spec.dpi}')\n"


def rscript_command(output: OutputSpec, executable: str) -> str:
    return f"{quote(executable)} --vanilla {quote(output.script_path)}"


def ggplot2_capture(spec: FigureSpec, target: Path) -> str:
    return (
        f"{spec.script}\n"
        "library(ggplot2)\n"
        f'ggsave("{script_literal(target)}", plot = last_plot(), dpi = {spec.dpi})\n'
    )


def plotly_r_capture(spec: FigureSpec, target: Path) -> str:
    if spec.save_format is SaveFormat.HTML:
        writer = f'htmlwidgets::saveWidget(last_plot(), "{script_literal(target)}", selfcontained = FALSE)'
    else:
        writer = f'plotly::save_image(last_plot(), "{script_literal(target)}")'
    return f"{spec.script}\nlibrary(plotly)\n{writer}\n"


def gnuplot_command(output: OutputSpec, executable: str) -> str:
    return f"{quote(executable)} -c {quote(output.script_path)}"


def gnuplot_capture(spec: FigureSpec, target: Path) -> str:
    """Prepend the terminal and output statements; gnuplot needs them first."""

    terminal = _GNUPLOT_TERMINALS[spec.save_format]
    return f"set terminal {terminal}\nset output '{script_literal(target)}'\n{spec.script}\n"


def graphviz_command(output: OutputSpec, executable: str) -> str:
    spec = output.figure
    return (
        f"{quote(executable)} -T{spec.save_format.value} -Gdpi={spec.dpi} "
        f"-o {quote(output.figure_path)} {quote(output.script_path)}"
    )


def graphviz_capture(spec: FigureSpec, _target: Path) -> str:
    """Graphviz writes the output through its command line; the script is unchanged."""

    return spec.script


MATLAB_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.MATLAB,
    script_extension=".m",
    language="matlab",
    executable="matlab",
    command=matlab_command,
    capture=matlab_capture,
    supported_formats=_RASTER_AND_VECTOR,
    search_directories=matlab_search_directories,
)

MATHEMATICA_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.MATHEMATICA,
    script_extension=".m",
    language="mathematica",
    executable="math",
    command=mathematica_command,
    capture=mathematica_capture,
    supported_formats=_RASTER_AND_VECTOR,
    search_directories=mathematica_search_directories,
)

OCTAVE_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.OCTAVE,
    script_extension=".m",
    language="octave",
    executable="octave",
    command=octave_command,
    capture=octave_capture,
    supported_formats=_RASTER_AND_VECTOR,
)

GGPLOT2_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.GGPLOT2,
    script_extension=".r",
    language="r",
    executable="Rscript",
    command=rscript_command,
    capture=ggplot2_capture,
    supported_formats=_RASTER_AND_VECTOR - {SaveFormat.GIF},
)

PLOTLY_R_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.PLOTLY_R,
    script_extension=".r",
    language="r",
    executable="Rscript",
    command=rscript_command,
    capture=plotly_r_capture,
    supported_formats=frozenset(
        {
            SaveFormat.PNG,
            SaveFormat.PDF,
            SaveFormat.SVG,
            SaveFormat.JPG,
            SaveFormat.EPS,
            SaveFormat.WEBP,
            SaveFormat.HTML,
        },
    ),
)

GNUPLOT_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.GNUPLOT,
    script_extension=".gp",
    language="gnuplot",
    executable="gnuplot",
    command=gnuplot_command,
    capture=gnuplot_capture,
    supported_formats=frozenset(_GNUPLOT_TERMINALS),
    checks=(
        forbid_pattern(
            r"^\s*set\s+(output|o)\b",
            "encountered a `set output` statement; the output file is set automatically",
        ),
    ),
)

GRAPHVIZ_RENDERER: Final[Renderer] = Renderer(
    toolkit=Toolkit.GRAPHVIZ,
    script_extension=".dot",
    language="dot",
    executable="dot",
    command=graphviz_command,
    capture=graphviz_capture,
    supported_formats=_RASTER_AND_VECTOR | {SaveFormat.WEBP},
)

__all__ = [
    "GGPLOT2_RENDERER",
    "GNUPLOT_RENDERER",
    "GRAPHVIZ_RENDERER",
    "MATHEMATICA_RENDERER",
    "MATLAB_RENDERER",
    "OCTAVE_RENDERER",
    "PLOTLY_R_RENDERER",
    "mathematica_search_directories",
    "matlab_search_directories",
]
