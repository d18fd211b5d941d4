# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Test doubles shared across the suite."""

from __future__ import annotations

import ast
import re
import shutil
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CompletedProcess

import panflute as pf
import pytest

_SAVEFIG = re.compile(r"""savefig\((?P<target>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")""")

requires_pandoc = pytest.mark.skipif(shutil.which("pandoc") is None, reason="pandoc is not installed")


@dataclass(slots=True)
class FakeRunner:
    """Record spawned commands and write the figure a real toolkit would save."""

    returncode: int = 0
    stderr: str = ""
    calls: list[tuple[tuple[str, ...], dict[str, str]]] = field(default_factory=list)

    def __call__(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> CompletedProcess[str]:
        del cwd, timeout
        self.calls.append((tuple(cmd), dict(env or {})))
        if self.returncode == 0:
            script = Path(cmd[-1]).read_text(encoding="utf-8")
            match = _SAVEFIG.search(script)
            assert match is not None, script
            Path(ast.literal_eval(match.group("target"))).write_bytes(b"\x89PNG fake")
        return CompletedProcess(list(cmd), self.returncode, stdout="", stderr=self.stderr)


def word_caption(text: str, fmt: str) -> list[pf.Inline]:
    """Caption reader splitting ``text`` into words without calling pandoc."""

    del fmt
    inlines: list[pf.Inline] = []
    for index, word in enumerate(text.split()):
        if index:
            inlines.append(pf.Space())
        inlines.append(pf.Str(word))
    return inlines


def matplotlib_block(script: str = "import matplotlib\n", **attributes: str) -> pf.CodeBlock:
    """Return a code block tagged for matplotlib."""

    return pf.CodeBlock(script, classes=["matplotlib"], attributes=attributes)
