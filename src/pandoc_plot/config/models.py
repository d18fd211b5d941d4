# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the pandoc_plot filter."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator, model_validator

from ..constants import (
    DEFAULT_CAPTION_FORMAT,
    DEFAULT_DIRECTORY,
    DEFAULT_DPI,
    DEFAULT_PARALLEL,
    DEFAULT_WITH_SOURCE,
)
from ..toolkits.base import Toolkit
from .types import SaveFormat, Verbosity


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def _coerce_save_format(value: object) -> object:
    if value is None or isinstance(value, SaveFormat):
        return value
    if isinstance(value, str):
        return SaveFormat.parse(value)
    return value


class LoggingConfig(BaseModel):
    """Where and how verbosely diagnostics are written."""

    model_config = ConfigDict(frozen=True)

    verbosity: Verbosity = Verbosity.WARNING
    filepath: Path | None = None

    @field_validator("verbosity", mode="before")
    @classmethod
    def _lower_verbosity(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value


class ToolkitSettings(BaseModel):
    """Per-toolkit defaults overriding the global ones.

    Keys that are not modelled here (for example ``tight_bbox`` for
    matplotlib) are kept as extras and resolved by the renderer that
    declares them.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    directory: Path | None = None
    format: SaveFormat | None = None
    dpi: PositiveInt | None = None
    source: bool | None = None
    preamble: Path | None = None
    executable: str | None = None

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value: object) -> object:
        return _coerce_save_format(value)

    def extra_value(self, key: str) -> str | None:
        """Return the toolkit-specific value configured under ``key``.

        Args:
            key: Extra attribute name such as ``tight_bbox``.

        Returns:
            str | None: Value rendered as block-attribute text, or ``None``.
        """

        extras = self.model_extra or {}
        if key not in extras or extras[key] is None:
            return None
        value = extras[key]
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)


class Configuration(BaseModel):
    """Fully resolved defaults consumed while building figure specifications."""

    model_config = ConfigDict(frozen=True)

    directory: Path = Path(DEFAULT_DIRECTORY)
    source: bool = DEFAULT_WITH_SOURCE
    dpi: PositiveInt = DEFAULT_DPI
    format: SaveFormat = SaveFormat.PNG
    caption_format: str = DEFAULT_CAPTION_FORMAT
    parallel: bool = DEFAULT_PARALLEL
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    toolkits: dict[Toolkit, ToolkitSettings] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_toolkit_sections(cls, data: Any) -> Any:
        """Move top-level toolkit sections (``matplotlib:`` ...) under ``toolkits``."""

        if not isinstance(data, Mapping):
            return data
        payload = dict(data)
        sections = dict(payload.pop("toolkits", None) or {})
        for toolkit in Toolkit:
            if toolkit.value in payload:
                section = payload.pop(toolkit.value)
                sections[toolkit.value] = section if section is not None else {}
        payload["toolkits"] = sections
        return payload

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value: object) -> object:
        return _coerce_save_format(value)

    def settings_for(self, toolkit: Toolkit) -> ToolkitSettings:
        """Return the settings section for ``toolkit`` (empty when absent)."""

        return self.toolkits.get(toolkit) or ToolkitSettings()


__all__ = ["ConfigError", "Configuration", "LoggingConfig", "ToolkitSettings"]
