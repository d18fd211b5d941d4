# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the pandoc-plot command line."""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import panflute as pf
import pytest
from typer.testing import CliRunner

from pandoc_plot.cli.app import app
from pandoc_plot.config import load_configuration
from pandoc_plot.version import __version__
from tests.support import requires_pandoc


def _doc_json(doc: pf.Doc) -> str:
    buffer = io.StringIO()
    pf.dump(doc, buffer)
    return buffer.getvalue()


def test_version() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_write_example_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(app, ["--write-example-config"])

    assert result.exit_code == 0
    written = tmp_path / ".example-pandoc-plot.yml"
    assert written.is_file()
    load_configuration(written)


def test_toolkits_lists_every_toolkit(tmp_path: Path) -> None:
    config = tmp_path / "config.yml"
    config.write_text(f"matplotlib:\n  executable: {sys.executable}\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["--toolkits", "--config", str(config)])

    assert result.exit_code == 0
    assert "Matplotlib" in result.stdout
    assert "graphviz" in result.stdout


def test_invalid_configuration_exits_with_one(tmp_path: Path) -> None:
    config = tmp_path / "config.yml"
    config.write_text("dpi: -1\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["--toolkits", "--config", str(config)])

    assert result.exit_code == 1


def test_filter_passes_documents_without_figures_through(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    doc = pf.Doc(pf.Para(pf.Str("hello")), pf.CodeBlock("x = 1", classes=["python"]))

    result = CliRunner().invoke(app, ["html"], input=_doc_json(doc))

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [block["t"] for block in payload["blocks"]] == ["Para", "CodeBlock"]


def test_filter_leaves_failing_blocks_in_place(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".pandoc-plot.yml").write_text("logging:\n  verbosity: silent\n", encoding="utf-8")
    doc = pf.Doc(pf.CodeBlock("plt.show()", classes=["matplotlib"]))

    result = CliRunner().invoke(app, [], input=_doc_json(doc))

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["blocks"][0]["t"] == "CodeBlock"
    assert not (tmp_path / "plots").exists() or not any((tmp_path / "plots").iterdir())


@requires_pandoc
def test_clean_removes_directories_of_a_markdown_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "figures").mkdir()
    (tmp_path / "figures" / "1.png").write_bytes(b"png")
    document = tmp_path / "doc.md"
    document.write_text("```{.matplotlib directory=figures}\nplot()\n```\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["--clean", str(document)])

    assert result.exit_code == 0
    assert not (tmp_path / "figures").exists()


def test_clean_of_missing_file_exits_with_one(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["--clean", str(tmp_path / "absent.md")])

    assert result.exit_code == 1
