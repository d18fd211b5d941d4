# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for rendering single blocks into figures."""

from __future__ import annotations

from pathlib import Path

import panflute as pf
import pytest

from pandoc_plot.config import Configuration
from pandoc_plot.config.models import ToolkitSettings
from pandoc_plot.errors import ChecksFailedError, ExecutionError, ToolkitUnavailableError
from pandoc_plot.execution.orchestrator import RenderContext, make, make_plot, raise_for_result, render
from pandoc_plot.execution.scripting import ScriptRunner
from pandoc_plot.logging import RecordingLogger
from pandoc_plot.models import ScriptChecksFailed, ScriptFailure, ScriptSuccess, ToolkitNotInstalled
from pandoc_plot.parsing import parse_figure_spec
from pandoc_plot.paths import figure_path, source_code_path
from pandoc_plot.toolkits import DEFAULT_REGISTRY, Toolkit
from tests.support import FakeRunner, matplotlib_block, word_caption


def test_render_replaces_block_with_figure(plot_config: Configuration, render_context: RenderContext) -> None:
    block = matplotlib_block("plot()", caption="A sine wave")
    spec = parse_figure_spec(Toolkit.MATPLOTLIB, plot_config, block)
    assert spec is not None

    result = render(Toolkit.MATPLOTLIB, plot_config, block, context=render_context)

    assert isinstance(result, pf.Figure)
    image = result.content[0].content[0]
    assert isinstance(image, pf.Image)
    assert image.url == figure_path(spec).as_posix()
    assert pf.stringify(result.caption).strip() == "A sine wave"


def test_render_carries_block_attributes(plot_config: Configuration, render_context: RenderContext) -> None:
    block = pf.CodeBlock("plot()", identifier="fig:one", classes=["matplotlib", "wide"], attributes={"width": "50%"})

    result = render(Toolkit.MATPLOTLIB, plot_config, block, context=render_context)

    assert isinstance(result, pf.Figure)
    assert result.identifier == "fig:one"
    assert list(result.classes) == ["wide"]
    assert dict(result.attributes) == {"width": "50%"}


def test_source_link_is_appended_to_caption(plot_config: Configuration, render_context: RenderContext) -> None:
    block = matplotlib_block("plot()", caption="Sine", source="true")
    spec = parse_figure_spec(Toolkit.MATPLOTLIB, plot_config, block)
    assert spec is not None

    result = render(Toolkit.MATPLOTLIB, plot_config, block, context=render_context)

    links: list[pf.Link] = []
    result.walk(lambda elem, _doc: links.append(elem) if isinstance(elem, pf.Link) else None)
    assert [link.url for link in links] == [source_code_path(spec).as_posix()]
    assert pf.stringify(result.caption).strip() == "Sine (Source code)"


def test_source_page_is_written_next_to_figure(plot_config: Configuration, render_context: RenderContext) -> None:
    block = matplotlib_block("plot()")
    spec = parse_figure_spec(Toolkit.MATPLOTLIB, plot_config, block)
    assert spec is not None

    render(Toolkit.MATPLOTLIB, plot_config, block, context=render_context)

    page = source_code_path(spec)
    assert page.is_file()
    assert "plot" in page.read_text(encoding="utf-8")


def test_caption_change_reuses_the_figure(
    plot_config: Configuration,
    render_context: RenderContext,
    fake_runner: FakeRunner,
) -> None:
    render(Toolkit.MATPLOTLIB, plot_config, matplotlib_block("plot()", caption="First"), context=render_context)
    second = render(
        Toolkit.MATPLOTLIB,
        plot_config,
        matplotlib_block("plot()", caption="Second", source="true"),
        context=render_context,
    )

    assert len(fake_runner.calls) == 1
    assert pf.stringify(second.caption).strip().startswith("Second")


def test_other_blocks_are_returned_unchanged(plot_config: Configuration, render_context: RenderContext) -> None:
    block = pf.CodeBlock("print(1)", classes=["python"])

    assert render(Toolkit.MATPLOTLIB, plot_config, block, context=render_context) is block
    assert make_plot(plot_config, block, context=render_context) is block


@pytest.mark.parametrize(
    "result, error",
    [
        (ScriptChecksFailed("no show"), ChecksFailedError),
        (ScriptFailure("python3 x.py", 2, "boom"), ExecutionError),
        (ToolkitNotInstalled(Toolkit.OCTAVE), ToolkitUnavailableError),
    ],
)
def test_raise_for_result_maps_failures(result: object, error: type[Exception]) -> None:
    with pytest.raises(error):
        raise_for_result(result)  # type: ignore[arg-type]


def test_raise_for_result_accepts_success() -> None:
    raise_for_result(ScriptSuccess(cached=True))


def test_failures_leave_the_block_unchanged(tmp_path: Path) -> None:
    config = Configuration(directory=tmp_path / "plots")
    logger = RecordingLogger()
    context = RenderContext(runner=FakeRunner(), logger=logger, caption_reader=word_caption)
    block = pf.CodeBlock("plt.show()", classes=["matplotlib"])

    assert make(Toolkit.MATPLOTLIB, config, block, context=context) is block
    assert any("show" in message for message in logger.messages())


def test_unavailable_toolkit_error_names_the_toolkit(tmp_path: Path) -> None:
    config = Configuration(
        directory=tmp_path / "plots",
        toolkits={Toolkit.GNUPLOT: ToolkitSettings(executable=str(tmp_path / "missing" / "gnuplot"))},
    )
    context = RenderContext(runner=FakeRunner(), logger=RecordingLogger(), caption_reader=word_caption)
    block = pf.CodeBlock("plot sin(x)", classes=["gnuplot"])

    with pytest.raises(ToolkitUnavailableError, match="gnuplot"):
        render(Toolkit.GNUPLOT, config, block, context=context)


def test_matplotlib_end_to_end(plot_config: Configuration) -> None:
    pytest.importorskip("matplotlib")
    block = matplotlib_block(
        "import matplotlib\nmatplotlib.use('Agg')\nimport matplotlib.pyplot as plt\nplt.plot([1, 2, 3])\n",
        caption="Line",
    )
    spec = parse_figure_spec(Toolkit.MATPLOTLIB, plot_config, block)
    assert spec is not None
    context = RenderContext(logger=RecordingLogger(), caption_reader=word_caption)

    result = render(Toolkit.MATPLOTLIB, plot_config, block, context=context)

    assert isinstance(result, pf.Figure)
    assert figure_path(spec).read_bytes().startswith(b"\x89PNG")


def test_default_collaborators_share_the_builtin_registry(plot_config: Configuration) -> None:
    first, second = RenderContext(), RenderContext()

    assert first.registry is DEFAULT_REGISTRY
    assert second.registry is first.registry
    assert ScriptRunner(config=plot_config).registry is DEFAULT_REGISTRY
