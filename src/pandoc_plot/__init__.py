# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pandoc filter turning plotting code blocks into figures.

Code blocks tagged with a toolkit class (``matplotlib``, ``gnuplot``,
``graphviz`` ...) are executed through that toolkit and replaced by a figure
referencing the captured image.
"""

from __future__ import annotations

from .clean import clean_output_dirs
from .config import Configuration, ConfigError, SaveFormat, Verbosity, load_configuration
from .errors import (
    ChecksFailedError,
    ExecutionError,
    PlotError,
    SideArtifactError,
    SpecResolutionError,
    ToolkitUnavailableError,
)
from .execution.orchestrator import make, make_plot, render
from .execution.walker import plot_transform
from .readers import read_doc
from .toolkits import Toolkit, available_toolkits, unavailable_toolkits
from .version import __version__

__all__ = [
    "ChecksFailedError",
    "ConfigError",
    "Configuration",
    "ExecutionError",
    "PlotError",
    "SaveFormat",
    "SideArtifactError",
    "SpecResolutionError",
    "Toolkit",
    "ToolkitUnavailableError",
    "Verbosity",
    "__version__",
    "available_toolkits",
    "clean_output_dirs",
    "load_configuration",
    "make",
    "make_plot",
    "plot_transform",
    "read_doc",
    "render",
    "unavailable_toolkits",
]
