# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Installed package version."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("pandoc-plot")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = ["__version__"]
