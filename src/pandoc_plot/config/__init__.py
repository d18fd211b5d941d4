# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loader import (
    configuration_path_from_meta,
    example_configuration,
    load_configuration,
    resolve_configuration,
)
from .models import ConfigError, Configuration, LoggingConfig, ToolkitSettings
from .types import SaveFormat, Verbosity

__all__ = [
    "ConfigError",
    "Configuration",
    "LoggingConfig",
    "SaveFormat",
    "ToolkitSettings",
    "Verbosity",
    "configuration_path_from_meta",
    "example_configuration",
    "load_configuration",
    "resolve_configuration",
]
