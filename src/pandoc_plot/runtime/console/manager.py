# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities.

Standard output carries the pandoc JSON document, so every console handed
out here writes either to standard error or to a log file.
"""

from __future__ import annotations

import sys
from functools import cache
from pathlib import Path
from threading import Lock
from typing import TextIO

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal."""

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by sink and colour settings."""

    def __init__(self) -> None:
        """Initialise the manager with an empty console cache."""

        self._cache: dict[tuple[Path | None, bool], Console] = {}
        self._handles: list[TextIO] = []
        self._lock = Lock()

    def get(self, *, sink: Path | None = None, color: bool = True) -> Console:
        """Return a console writing to ``sink`` (stderr when ``None``).

        Args:
            sink: Log file appended to, or ``None`` for standard error.
            color: ``True`` when ANSI colour output may be used on a terminal.

        Returns:
            Console: Cached or newly constructed console.
        """

        key = (sink, color)
        with self._lock:
            if key not in self._cache:
                self._cache[key] = self._build(sink, color)
            return self._cache[key]

    def close(self) -> None:
        """Close log files opened by the manager and forget cached consoles."""

        with self._lock:
            for handle in self._handles:
                handle.close()
            self._handles.clear()
            self._cache.clear()

    def _build(self, sink: Path | None, color: bool) -> Console:
        if sink is None:
            tty = detect_tty()
            return Console(
                stderr=True,
                color_system="auto" if color and tty else None,
                no_color=not (color and tty),
                highlight=False,
                soft_wrap=True,
            )
        sink.parent.mkdir(parents=True, exist_ok=True)
        handle = sink.open("a", encoding="utf-8")
        self._handles.append(handle)
        return Console(file=handle, color_system=None, no_color=True, highlight=False, soft_wrap=True)


@cache
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
