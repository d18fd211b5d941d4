# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Value objects describing figures and the outcome of rendering them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

from .config.types import SaveFormat
from .toolkits.base import Toolkit


@dataclass(frozen=True, slots=True)
class BlockAttributes:
    """Identifier, classes and key/value pairs carried onto the emitted figure."""

    identifier: str = ""
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()

    def as_dict(self) -> dict[str, str]:
        """Return ``attributes`` as an ordered mapping."""

        return dict(self.attributes)


@dataclass(frozen=True, slots=True)
class FigureSpec:
    """Fully resolved description of one figure.

    ``caption`` and ``with_source`` never influence the content hash, so
    editing them does not force the figure to be rendered again.
    """

    toolkit: Toolkit
    script: str
    caption: str
    with_source: bool
    directory: Path
    save_format: SaveFormat
    dpi: int
    dependencies: tuple[Path, ...] = ()
    extra_attrs: tuple[tuple[str, str], ...] = ()
    block_attrs: BlockAttributes = field(default_factory=BlockAttributes)

    @property
    def extras(self) -> Mapping[str, str]:
        """Return ``extra_attrs`` as a mapping."""

        return dict(self.extra_attrs)


@dataclass(frozen=True, slots=True)
class OutputSpec:
    """Pairing of a figure with the paths used by a single execution."""

    figure: FigureSpec
    script_path: Path
    figure_path: Path


@dataclass(frozen=True, slots=True)
class ScriptSuccess:
    """The figure exists, either freshly rendered or from a previous run."""

    cached: bool = False

    def __str__(self) -> str:
        return "Script success."


@dataclass(frozen=True, slots=True)
class ScriptChecksFailed:
    """A static check rejected the script before anything was spawned."""

    message: str

    def __str__(self) -> str:
        return f"Script checks failed: {self.message}"


@dataclass(frozen=True, slots=True)
class ScriptFailure:
    """The toolkit ran and exited with a non-zero status."""

    command: str
    exit_code: int
    stderr: str = ""

    def __str__(self) -> str:
        return f"Script failed with exit code {self.exit_code} and the following command: {self.command}"


@dataclass(frozen=True, slots=True)
class ToolkitNotInstalled:
    """The toolkit executable could not be resolved."""

    toolkit: Toolkit

    def __str__(self) -> str:
        return f"{self.toolkit.display_name} toolkit not installed."


ScriptResult: TypeAlias = ScriptSuccess | ScriptChecksFailed | ScriptFailure | ToolkitNotInstalled

__all__ = [
    "BlockAttributes",
    "FigureSpec",
    "OutputSpec",
    "ScriptChecksFailed",
    "ScriptFailure",
    "ScriptResult",
    "ScriptSuccess",
    "ToolkitNotInstalled",
]
