# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across pandoc_plot modules."""

from __future__ import annotations

from typing import Final

CONFIG_FILE_NAME: Final[str] = ".pandoc-plot.yml"
EXAMPLE_CONFIG_FILE_NAME: Final[str] = ".example-pandoc-plot.yml"
CONFIG_META_KEY: Final[str] = "plot-configuration"

DEFAULT_DIRECTORY: Final[str] = "plots"
DEFAULT_DPI: Final[int] = 80
DEFAULT_WITH_SOURCE: Final[bool] = False
DEFAULT_CAPTION_FORMAT: Final[str] = "markdown+tex_math_dollars"
DEFAULT_PARALLEL: Final[bool] = False

TEMP_SCRIPT_PREFIX: Final[str] = "pandocplot"
SOURCE_PAGE_SUFFIX: Final[str] = ".html"
SOURCE_PAGE_HTML_FIGURE_SUFFIX: Final[str] = ".src.html"
SOURCE_LINK_TEXT: Final[str] = "Source code"

LOG_PREFIX: Final[str] = "pandoc-plot"

# Block attribute keys consumed while building a figure specification.
DIRECTORY_KEY: Final[str] = "directory"
CAPTION_KEY: Final[str] = "caption"
SAVE_FORMAT_KEY: Final[str] = "format"
WITH_SOURCE_KEY: Final[str] = "source"
DPI_KEY: Final[str] = "dpi"
PREAMBLE_KEY: Final[str] = "preamble"
DEPENDENCIES_KEY: Final[str] = "dependencies"

INCLUSION_KEYS: Final[frozenset[str]] = frozenset(
    {
        DIRECTORY_KEY,
        CAPTION_KEY,
        SAVE_FORMAT_KEY,
        WITH_SOURCE_KEY,
        DPI_KEY,
        PREAMBLE_KEY,
        DEPENDENCIES_KEY,
    },
)

TRUE_STRINGS: Final[frozenset[str]] = frozenset({"true", "yes", "on", "1"})
FALSE_STRINGS: Final[frozenset[str]] = frozenset({"false", "no", "off", "0"})

__all__ = [
    "CAPTION_KEY",
    "CONFIG_FILE_NAME",
    "CONFIG_META_KEY",
    "DEFAULT_CAPTION_FORMAT",
    "DEFAULT_DIRECTORY",
    "DEFAULT_DPI",
    "DEFAULT_PARALLEL",
    "DEFAULT_WITH_SOURCE",
    "DEPENDENCIES_KEY",
    "DIRECTORY_KEY",
    "DPI_KEY",
    "EXAMPLE_CONFIG_FILE_NAME",
    "FALSE_STRINGS",
    "INCLUSION_KEYS",
    "LOG_PREFIX",
    "PREAMBLE_KEY",
    "SAVE_FORMAT_KEY",
    "SOURCE_LINK_TEXT",
    "SOURCE_PAGE_HTML_FIGURE_SUFFIX",
    "SOURCE_PAGE_SUFFIX",
    "TEMP_SCRIPT_PREFIX",
    "TRUE_STRINGS",
    "WITH_SOURCE_KEY",
]
