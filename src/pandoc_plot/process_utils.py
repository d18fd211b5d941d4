# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import os
import shlex
import shutil

# Bandit: subprocess usage is intentional; commands are argument lists built
# from renderer templates and never run through a shell.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404

TIMEOUT_EXIT_CODE: Final[int] = 124


def split_command(command: str) -> list[str]:
    """Split a command line produced by a renderer into arguments."""

    return shlex.split(command)


def prepend_to_path(directory: Path, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return a copy of ``environ`` whose ``PATH`` starts with ``directory``.

    The returned mapping is meant for a child process; the current process
    environment is never modified.
    """

    env = dict(os.environ if environ is None else environ)
    current = env.get("PATH", "")
    env["PATH"] = f"{directory}{os.pathsep}{current}" if current else str(directory)
    return env


def _normalize_args(args: Sequence[str], search_path: str | None) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> _CompletedProcess[str]:
    """Execute ``args`` discarding stdout and capturing stderr as text.

    The executable is resolved against the ``PATH`` of ``env`` when given,
    so a directory prepended for the child is honoured.

    Raises:
        FileNotFoundError: If the executable cannot be resolved.
    """

    search_path = env.get("PATH") if env is not None else None
    normalized = _normalize_args(args, search_path)

    def _ensure_text(value: str | bytes | None) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return value.decode(errors="ignore")

    try:
        # Bandit: argument list without shell expansion.
        completed: _CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env) if env is not None else None,
            check=False,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        completed = subprocess.CompletedProcess(
            args=list(normalized),
            returncode=TIMEOUT_EXIT_CODE,
            stdout=None,
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )
    return completed


__all__ = ["TIMEOUT_EXIT_CODE", "prepend_to_path", "run_command", "split_command"]
