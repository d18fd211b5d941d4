# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover the output directories referenced by a document."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import panflute as pf

from ..config.models import Configuration
from ..errors import SpecResolutionError
from ..logging import PlotLogger
from ..parsing import parse_figure_spec, plot_toolkit
from ..toolkits import DEFAULT_REGISTRY, ToolkitRegistry


def output_directories(
    config: Configuration,
    doc: pf.Doc,
    *,
    registry: ToolkitRegistry = DEFAULT_REGISTRY,
    logger: PlotLogger | None = None,
) -> list[Path]:
    """Return the distinct output directories of every figure block in ``doc``.

    Nothing is executed; blocks whose attributes cannot be resolved are
    skipped with a warning.

    Args:
        config: Configuration providing default directories.
        doc: Document inspected for figure blocks.
        registry: Registry providing toolkit renderers.
        logger: Destination of diagnostics.

    Returns:
        list[Path]: Directories in order of first reference.
    """

    found: list[Path] = []

    def _discover(elem: pf.Element, _doc: pf.Doc) -> None:
        toolkit = plot_toolkit(elem)
        if toolkit is None:
            return
        try:
            spec = parse_figure_spec(toolkit, config, elem, registry=registry)
        except SpecResolutionError as exc:
            if logger is not None:
                logger.warning(f"Skipping block while cleaning: {exc}")
            return
        if spec is not None:
            found.append(spec.directory)

    doc.walk(_discover)
    return _dedupe_paths(found)


def _dedupe_paths(paths: Iterable[Path]) -> list[Path]:
    """Remove duplicate paths while preserving input order."""

    seen: set[Path] = set()
    ordered: list[Path] = []
    for path in paths:
        try:
            key = path.resolve()
        except OSError:
            key = path
        if key in seen:
            continue
        seen.add(key)
        ordered.append(path)
    return ordered


__all__ = ["output_directories"]
