# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Remove the output directories of a document."""

from __future__ import annotations

import shutil
from pathlib import Path

import panflute as pf

from ..config.models import Configuration
from ..logging import PlotLogger
from ..toolkits import DEFAULT_REGISTRY, ToolkitRegistry
from .plan import output_directories


def clean_output_dirs(
    config: Configuration,
    doc: pf.Doc,
    *,
    registry: ToolkitRegistry = DEFAULT_REGISTRY,
    logger: PlotLogger | None = None,
) -> list[Path]:
    """Recursively delete every output directory referenced by ``doc``.

    The whole directory is removed, including files pandoc-plot did not
    create.

    Args:
        config: Configuration providing default directories.
        doc: Document whose figure blocks name the directories.
        registry: Registry providing toolkit renderers.
        logger: Destination of diagnostics.

    Returns:
        list[Path]: Directories that existed and were removed.
    """

    log = logger if logger is not None else PlotLogger.from_config(config.logging)
    removed: list[Path] = []
    for directory in output_directories(config, doc, registry=registry, logger=log):
        if not directory.is_dir() or directory.is_symlink():
            log.debug(f"Nothing to clean in {directory}")
            continue
        shutil.rmtree(directory)
        log.info(f"Removed {directory}")
        removed.append(directory)
    return removed


__all__ = ["clean_output_dirs"]
