# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render single code blocks into figures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import panflute as pf

from ..config.models import Configuration
from ..embed import CaptionReader, read_caption, to_figure
from ..errors import (
    ChecksFailedError,
    ExecutionError,
    PlotError,
    SideArtifactError,
    ToolkitUnavailableError,
)
from ..logging import PlotLogger
from ..models import ScriptChecksFailed, ScriptFailure, ScriptResult, ScriptSuccess, ToolkitNotInstalled
from ..parsing import parse_figure_spec, plot_toolkit
from ..process_utils import run_command
from ..toolkits import DEFAULT_REGISTRY, Toolkit, ToolkitRegistry
from .scripting import RunnerCallable, ScriptRunner
from .source import write_source


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Collaborators used while rendering blocks.

    Attributes:
        registry: Registry providing toolkit renderers.
        runner: Callable spawning toolkit processes.
        logger: Destination of diagnostics.
        caption_reader: Converts caption text to document inlines.
        cwd: Working directory of toolkit processes; inherited when ``None``.
    """

    registry: ToolkitRegistry = field(default_factory=lambda: DEFAULT_REGISTRY)
    runner: RunnerCallable = run_command
    logger: PlotLogger = field(default_factory=PlotLogger)
    caption_reader: CaptionReader = read_caption
    cwd: Path | None = None

    @classmethod
    def for_config(cls, config: Configuration, **overrides: object) -> RenderContext:
        """Return a context whose logger follows ``config.logging``."""

        if "logger" not in overrides:
            overrides["logger"] = PlotLogger.from_config(config.logging)
        return cls(**overrides)  # type: ignore[arg-type]


def raise_for_result(result: ScriptResult) -> None:
    """Raise the error matching a non-successful script result."""

    if isinstance(result, ScriptSuccess):
        return
    if isinstance(result, ScriptChecksFailed):
        raise ChecksFailedError(result.message)
    if isinstance(result, ScriptFailure):
        raise ExecutionError(result.command, result.exit_code, result.stderr)
    if isinstance(result, ToolkitNotInstalled):
        raise ToolkitUnavailableError(result.toolkit)
    raise TypeError(f"Unexpected script result: {result!r}")


def render(
    toolkit: Toolkit,
    config: Configuration,
    block: pf.Element,
    *,
    context: RenderContext | None = None,
) -> pf.Element:
    """Render ``block`` with ``toolkit`` and return its replacement.

    Blocks that are not tagged with ``toolkit`` are returned unchanged.

    Raises:
        PlotError: If the figure cannot be produced.
    """

    ctx = context if context is not None else RenderContext.for_config(config)
    spec = parse_figure_spec(toolkit, config, block, registry=ctx.registry)
    if spec is None:
        return block

    runner = ScriptRunner(
        config=config,
        registry=ctx.registry,
        runner=ctx.runner,
        logger=ctx.logger,
        cwd=ctx.cwd,
    )
    raise_for_result(runner.run_if_necessary(spec))

    try:
        write_source(spec, ctx.registry[toolkit].language)
    except SideArtifactError as exc:
        ctx.logger.warning(str(exc))

    return to_figure(spec, config.caption_format, ctx.caption_reader)


def make(
    toolkit: Toolkit,
    config: Configuration,
    block: pf.Element,
    *,
    context: RenderContext | None = None,
) -> pf.Element:
    """Render ``block`` with ``toolkit``, returning it unchanged on failure.

    Failures are logged; nothing is raised past this function so a
    document can be processed without every toolkit installed.
    """

    ctx = context if context is not None else RenderContext.for_config(config)
    try:
        return render(toolkit, config, block, context=ctx)
    except PlotError as exc:
        ctx.logger.error(str(exc))
    except OSError as exc:
        ctx.logger.error(f"Unable to render {toolkit.display_name} figure: {exc}")
    return block


def make_plot(
    config: Configuration,
    block: pf.Element,
    *,
    context: RenderContext | None = None,
) -> pf.Element:
    """Render ``block`` when it names a toolkit, otherwise return it unchanged."""

    toolkit = plot_toolkit(block)
    if toolkit is None:
        return block
    return make(toolkit, config, block, context=context)


__all__ = ["RenderContext", "make", "make_plot", "raise_for_result", "render"]
