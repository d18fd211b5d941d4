# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared helpers for built-in renderer registrations."""

from __future__ import annotations

import os
import re
import shlex
from pathlib import Path
from typing import Final

from ..constants import TRUE_STRINGS
from .base import CheckFailed, CheckPassed, CheckResult, ScriptCheck

IS_WINDOWS: Final[bool] = os.name == "nt"
PYTHON_EXECUTABLE: Final[str] = "python" if IS_WINDOWS else "python3"


def quote(value: str | Path) -> str:
    """Quote ``value`` for inclusion in a command line."""

    return shlex.quote(str(value))


def script_literal(path: Path) -> str:
    """Render ``path`` with forward slashes for embedding in script source."""

    return path.as_posix()


def as_bool(value: str | None, *, default: bool = False) -> bool:
    """Interpret block-attribute text such as ``"true"`` or ``"0"``."""

    if value is None:
        return default
    return value.strip().lower() in TRUE_STRINGS


def forbid_pattern(pattern: str, message: str, *, comment: str = "#") -> ScriptCheck:
    """Return a check failing with ``message`` when ``pattern`` matches a line.

    Text following ``comment`` on a line is ignored.
    """

    return _PatternCheck(re.compile(pattern), message, comment)


class _PatternCheck:
    """Script check rejecting scripts that match a regular expression."""

    __slots__ = ("_pattern", "_message", "_comment")

    def __init__(self, pattern: re.Pattern[str], message: str, comment: str) -> None:
        self._pattern = pattern
        self._message = message
        self._comment = comment

    def __call__(self, script: str) -> CheckResult:
        for line in script.splitlines():
            code = line.split(self._comment, 1)[0]
            if self._pattern.search(code):
                return CheckFailed(self._message)
        return CheckPassed()

    def __repr__(self) -> str:
        return f"forbid_pattern({self._pattern.pattern!r})"


__all__ = [
    "IS_WINDOWS",
    "PYTHON_EXECUTABLE",
    "as_bool",
    "forbid_pattern",
    "quote",
    "script_literal",
]
