# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for building figure specifications from code blocks."""

from __future__ import annotations

from pathlib import Path

import panflute as pf
import pytest

from pandoc_plot.config import Configuration, SaveFormat
from pandoc_plot.config.models import ToolkitSettings
from pandoc_plot.errors import SpecResolutionError
from pandoc_plot.parsing import parse_figure_spec, plot_toolkit
from pandoc_plot.toolkits import Toolkit
from tests.support import matplotlib_block


def test_plot_toolkit_reads_the_block_class() -> None:
    assert plot_toolkit(matplotlib_block()) is Toolkit.MATPLOTLIB
    assert plot_toolkit(pf.CodeBlock("x", classes=["python"])) is None
    assert plot_toolkit(pf.Para(pf.Str("matplotlib"))) is None


def test_blocks_for_another_toolkit_are_ignored(plot_config: Configuration) -> None:
    assert parse_figure_spec(Toolkit.GNUPLOT, plot_config, matplotlib_block()) is None


def test_defaults_come_from_configuration(plot_config: Configuration) -> None:
    spec = parse_figure_spec(Toolkit.MATPLOTLIB, plot_config, matplotlib_block("plot()"))

    assert spec is not None
    assert spec.script == "plot()"
    assert spec.directory == plot_config.directory
    assert spec.save_format is SaveFormat.PNG
    assert spec.dpi == 80
    assert spec.with_source is False
    assert spec.caption == ""
    assert spec.extras == {"tight_bbox": "false", "transparent": "false"}


def test_block_attributes_override_toolkit_and_global_settings(tmp_path: Path) -> None:
    config = Configuration(
        dpi=72,
        toolkits={Toolkit.MATPLOTLIB: ToolkitSettings(dpi=150, format="svg", tight_bbox=True)},
    )
    block = matplotlib_block(
        "plot()",
        directory=str(tmp_path / "figs"),
        format="jpeg",
        dpi="300",
        source="yes",
        caption="My *figure*",
    )

    spec = parse_figure_spec(Toolkit.MATPLOTLIB, config, block)

    assert spec is not None
    assert spec.directory == tmp_path / "figs"
    assert spec.save_format is SaveFormat.JPG
    assert spec.dpi == 300
    assert spec.with_source is True
    assert spec.caption == "My *figure*"
    assert spec.extras["tight_bbox"] == "true"


def test_toolkit_settings_fill_in_missing_attributes() -> None:
    config = Configuration(toolkits={Toolkit.MATPLOTLIB: ToolkitSettings(dpi=150, format="svg")})

    spec = parse_figure_spec(Toolkit.MATPLOTLIB, config, matplotlib_block())

    assert spec is not None
    assert spec.dpi == 150
    assert spec.save_format is SaveFormat.SVG


def test_unknown_attributes_are_carried_to_the_figure(plot_config: Configuration) -> None:
    block = pf.CodeBlock(
        "plot()",
        identifier="fig:sine",
        classes=["matplotlib", "wide"],
        attributes={"width": "50%", "caption": "Sine", "transparent": "true"},
    )

    spec = parse_figure_spec(Toolkit.MATPLOTLIB, plot_config, block)

    assert spec is not None
    assert spec.block_attrs.identifier == "fig:sine"
    assert spec.block_attrs.classes == ("wide",)
    assert spec.block_attrs.as_dict() == {"width": "50%"}
    assert spec.extras["transparent"] == "true"


def test_preamble_is_prepended_and_tracked(tmp_path: Path, plot_config: Configuration) -> None:
    preamble = tmp_path / "style.py"
    preamble.write_text("import matplotlib\nmatplotlib.use('agg')", encoding="utf-8")

    spec = parse_figure_spec(
        Toolkit.MATPLOTLIB,
        plot_config,
        matplotlib_block("plot()", preamble=str(preamble)),
    )

    assert spec is not None
    assert spec.script == "import matplotlib\nmatplotlib.use('agg')\nplot()"
    assert spec.dependencies == (preamble,)


def test_dependencies_attribute_lists_files(tmp_path: Path, plot_config: Configuration) -> None:
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"
    first.write_text("a", encoding="utf-8")
    second.write_text("b", encoding="utf-8")

    spec = parse_figure_spec(
        Toolkit.MATPLOTLIB,
        plot_config,
        matplotlib_block(dependencies=f"[{first}, {second}]"),
    )

    assert spec is not None
    assert spec.dependencies == (first, second)


@pytest.mark.parametrize(
    "attributes",
    [
        {"format": "bmp"},
        {"format": "html"},
        {"dpi": "zero"},
        {"dpi": "-3"},
        {"source": "maybe"},
        {"preamble": "does-not-exist.py"},
        {"dependencies": "[missing.csv]"},
        {"directory": "~no_such_user_pandoc_plot/plots"},
    ],
)
def test_invalid_attributes_raise(plot_config: Configuration, attributes: dict[str, str]) -> None:
    with pytest.raises(SpecResolutionError):
        parse_figure_spec(Toolkit.MATPLOTLIB, plot_config, matplotlib_block(**attributes))
