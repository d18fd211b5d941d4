# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for configuration loading and lookup."""

from __future__ import annotations

from pathlib import Path

import panflute as pf
import pytest

from pandoc_plot.config import (
    ConfigError,
    Configuration,
    SaveFormat,
    Verbosity,
    example_configuration,
    load_configuration,
    resolve_configuration,
)
from pandoc_plot.toolkits import Toolkit


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    config = Configuration()

    assert config.directory == Path("plots")
    assert config.dpi == 80
    assert config.format is SaveFormat.PNG
    assert config.source is False
    assert config.parallel is False
    assert config.caption_format == "markdown+tex_math_dollars"
    assert config.logging.verbosity is Verbosity.WARNING


def test_load_configuration_reads_toolkit_sections(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "config.yml",
        """
directory: figures
dpi: 120
format: SVG
parallel: true
logging:
  verbosity: DEBUG
matplotlib:
  executable: /opt/python/bin/python3
  tight_bbox: true
gnuplot:
  format: pdf
""",
    )

    config = load_configuration(path)

    assert config.directory == Path("figures")
    assert config.dpi == 120
    assert config.format is SaveFormat.SVG
    assert config.parallel is True
    assert config.logging.verbosity is Verbosity.DEBUG
    matplotlib = config.settings_for(Toolkit.MATPLOTLIB)
    assert matplotlib.executable == "/opt/python/bin/python3"
    assert matplotlib.extra_value("tight_bbox") == "true"
    assert config.settings_for(Toolkit.GNUPLOT).format is SaveFormat.PDF
    assert config.settings_for(Toolkit.OCTAVE).executable is None


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    assert load_configuration(_write(tmp_path / "empty.yml", "")) == Configuration()


@pytest.mark.parametrize(
    "text",
    [
        "dpi: [1, 2",
        "- just\n- a list\n",
        "dpi: -5\n",
        "format: bmp\n",
        "logging:\n  verbosity: chatty\n",
    ],
)
def test_invalid_configuration_raises_config_error(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_configuration(_write(tmp_path / "bad.yml", text))


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_configuration(tmp_path / "absent.yml")


def test_example_configuration_is_loadable(tmp_path: Path) -> None:
    config = load_configuration(_write(tmp_path / "example.yml", example_configuration()))

    assert config == load_configuration(_write(tmp_path / "again.yml", example_configuration()))
    assert config.settings_for(Toolkit.GRAPHVIZ).executable == "dot"


def test_resolution_order(tmp_path: Path) -> None:
    _write(tmp_path / ".pandoc-plot.yml", "dpi: 100\n")
    meta_config = _write(tmp_path / "meta.yml", "dpi: 200\n")
    explicit = _write(tmp_path / "explicit.yml", "dpi: 300\n")
    doc = pf.Doc(metadata={"plot-configuration": pf.MetaString(str(meta_config))})

    assert resolve_configuration(doc, explicit=explicit, cwd=tmp_path).dpi == 300
    assert resolve_configuration(doc, cwd=tmp_path).dpi == 200
    assert resolve_configuration(pf.Doc(), cwd=tmp_path).dpi == 100
    assert resolve_configuration(None, cwd=tmp_path / "elsewhere").dpi == 80
