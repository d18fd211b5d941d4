# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Levelled diagnostics written to stderr or a log file."""

from __future__ import annotations

from typing import Final

from rich.console import Console
from rich.text import Text

from .config.models import LoggingConfig
from .config.types import Verbosity
from .constants import LOG_PREFIX
from .runtime.console.manager import get_console_manager

_LEVEL_STYLES: Final[dict[Verbosity, str]] = {
    Verbosity.DEBUG: "dim",
    Verbosity.INFO: "cyan",
    Verbosity.WARNING: "yellow",
    Verbosity.ERROR: "bold red",
}


class PlotLogger:
    """Filter messages by verbosity and print them to a Rich console.

    Instances are safe to share between worker threads; Rich serialises
    writes to its underlying file.
    """

    def __init__(self, verbosity: Verbosity = Verbosity.WARNING, console: Console | None = None) -> None:
        """Create a logger emitting messages at or above ``verbosity``.

        Args:
            verbosity: Minimum level printed. ``SILENT`` suppresses everything.
            console: Console receiving the messages; stderr when omitted.
        """

        self.verbosity = verbosity
        self._console = console if console is not None else get_console_manager().get()

    @classmethod
    def from_config(cls, config: LoggingConfig) -> PlotLogger:
        """Build a logger from the ``logging`` configuration section."""

        console = get_console_manager().get(sink=config.filepath)
        return cls(config.verbosity, console)

    def enabled_for(self, level: Verbosity) -> bool:
        """Return ``True`` when messages at ``level`` are printed."""

        if level is Verbosity.SILENT or self.verbosity is Verbosity.SILENT:
            return False
        return level.rank >= self.verbosity.rank

    def log(self, level: Verbosity, message: str) -> None:
        """Print ``message`` when ``level`` passes the verbosity filter."""

        if not self.enabled_for(level):
            return
        text = Text(f"[{LOG_PREFIX}] {level.value.upper()} | ", style=_LEVEL_STYLES.get(level, ""))
        text.append(message)
        self._console.print(text)

    def debug(self, message: str) -> None:
        """Emit a debug message."""
        self.log(Verbosity.DEBUG, message)

    def info(self, message: str) -> None:
        """Emit an informational message."""
        self.log(Verbosity.INFO, message)

    def warning(self, message: str) -> None:
        """Emit a warning message."""
        self.log(Verbosity.WARNING, message)

    def error(self, message: str) -> None:
        """Emit an error message."""
        self.log(Verbosity.ERROR, message)


class RecordingLogger(PlotLogger):
    """Logger keeping every accepted message in memory.

    Useful for callers embedding the filter that want to inspect
    diagnostics instead of printing them.
    """

    def __init__(self, verbosity: Verbosity = Verbosity.DEBUG) -> None:
        super().__init__(verbosity, Console(file=_NullWriter(), color_system=None))
        self.records: list[tuple[Verbosity, str]] = []

    def log(self, level: Verbosity, message: str) -> None:
        if self.enabled_for(level):
            self.records.append((level, message))

    def messages(self, level: Verbosity | None = None) -> list[str]:
        """Return recorded messages, optionally restricted to ``level``."""

        return [message for recorded, message in self.records if level is None or recorded is level]


class _NullWriter:
    """Text sink discarding everything written to it."""

    def write(self, data: str) -> int:
        return len(data)

    def flush(self) -> None:
        return None


__all__ = ["PlotLogger", "RecordingLogger"]
