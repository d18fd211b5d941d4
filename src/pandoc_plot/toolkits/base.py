# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Definitions for plotting toolkits and their renderers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Final, TypeAlias

if TYPE_CHECKING:
    from ..config.types import SaveFormat
    from ..models import FigureSpec, OutputSpec

_DISPLAY_NAMES: Final[dict[str, str]] = {
    "matplotlib": "Matplotlib",
    "plotly_python": "Plotly-Python",
    "plotly_r": "Plotly-R",
    "matlabplot": "MATLAB",
    "mathplot": "Mathematica",
    "octaveplot": "GNU Octave",
    "ggplot2": "ggplot2",
    "gnuplot": "gnuplot",
    "graphviz": "graphviz",
}


class Toolkit(str, Enum):
    """Enumerate the supported plotting toolkits.

    The value of each member is the class a code block must carry to be
    rendered by that toolkit.
    """

    MATPLOTLIB = "matplotlib"
    PLOTLY_PYTHON = "plotly_python"
    PLOTLY_R = "plotly_r"
    MATLAB = "matlabplot"
    MATHEMATICA = "mathplot"
    OCTAVE = "octaveplot"
    GGPLOT2 = "ggplot2"
    GNUPLOT = "gnuplot"
    GRAPHVIZ = "graphviz"

    @property
    def cls(self) -> str:
        """Return the code block class that selects this toolkit."""

        return self.value

    @property
    def display_name(self) -> str:
        """Return a human readable toolkit name."""

        return _DISPLAY_NAMES[self.value]

    @classmethod
    def from_classes(cls, classes: Iterable[str]) -> Toolkit | None:
        """Return the toolkit named by the first matching class, if any."""

        for name in classes:
            try:
                return cls(name)
            except ValueError:
                continue
        return None


@dataclass(frozen=True, slots=True)
class Executable:
    """Resolved toolkit executable split into its directory and name."""

    directory: Path
    name: str

    @property
    def path(self) -> Path:
        """Return the full path of the executable."""

        return self.directory / self.name


@dataclass(frozen=True, slots=True)
class CheckPassed:
    """Outcome of a script check that found nothing wrong."""


@dataclass(frozen=True, slots=True)
class CheckFailed:
    """Outcome of a script check that rejected the script."""

    message: str


CheckResult: TypeAlias = CheckPassed | CheckFailed
ScriptCheck: TypeAlias = Callable[[str], CheckResult]
CommandTemplate: TypeAlias = Callable[["OutputSpec", str], str]
CaptureTemplate: TypeAlias = Callable[["FigureSpec", Path], str]
SearchDirectories: TypeAlias = Callable[[], Sequence[Path]]


def _no_search_directories() -> Sequence[Path]:
    return ()


@dataclass(frozen=True, slots=True)
class Renderer:
    """Capability bundle describing how one toolkit renders a figure.

    Attributes:
        toolkit: Toolkit served by this renderer.
        script_extension: Extension of the temporary script, including the dot.
        language: Syntax-highlighting language of the scripts.
        executable: Default executable name when the configuration sets none.
        command: Builds the command line from an output spec and executable name.
        capture: Returns the complete script, user code plus capture code.
        supported_formats: Save formats the toolkit can produce.
        checks: Ordered static checks run against the raw script text.
        extra_attrs: Toolkit-specific block attributes and their defaults.
        search_directories: Extra directories probed for the executable.
    """

    toolkit: Toolkit
    script_extension: str
    language: str
    executable: str
    command: CommandTemplate
    capture: CaptureTemplate
    supported_formats: frozenset[SaveFormat]
    checks: tuple[ScriptCheck, ...] = ()
    extra_attrs: Mapping[str, str] = field(default_factory=dict)
    search_directories: SearchDirectories = _no_search_directories

    def run_checks(self, script: str) -> CheckResult:
        """Run ``checks`` in order, stopping at the first failure."""

        for check in self.checks:
            result = check(script)
            if isinstance(result, CheckFailed):
                return result
        return CheckPassed()


__all__ = [
    "CaptureTemplate",
    "CheckFailed",
    "CheckPassed",
    "CheckResult",
    "CommandTemplate",
    "Executable",
    "Renderer",
    "ScriptCheck",
    "SearchDirectories",
    "Toolkit",
]
