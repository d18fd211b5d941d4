# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Block-scoped errors raised while rendering figures.

Every error defined here is confined to a single code block: the walker
catches them, logs them and leaves the offending block untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .toolkits.base import Toolkit


class PlotError(Exception):
    """Base class for failures affecting one figure only."""


class SpecResolutionError(PlotError):
    """Raised when block attributes or dependency files cannot be resolved."""


class ChecksFailedError(PlotError):
    """Raised when a toolkit-specific static check rejects a script."""

    def __init__(self, message: str) -> None:
        super().__init__(f"A script check failed with message: {message}.")
        self.message = message


class ExecutionError(PlotError):
    """Raised when an installed toolkit exits with a non-zero status."""

    def __init__(self, command: str, exit_code: int, stderr: str | None = None) -> None:
        super().__init__(f"The script failed with exit code {exit_code}.")
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr


class ToolkitUnavailableError(PlotError):
    """Raised when the executable of a toolkit cannot be resolved."""

    def __init__(self, toolkit: Toolkit) -> None:
        super().__init__(f"The {toolkit.display_name} toolkit is required but not installed.")
        self.toolkit = toolkit


class SideArtifactError(PlotError):
    """Raised when the syntax-highlighted source page cannot be written."""


__all__ = [
    "ChecksFailedError",
    "ExecutionError",
    "PlotError",
    "SideArtifactError",
    "SpecResolutionError",
    "ToolkitUnavailableError",
]
