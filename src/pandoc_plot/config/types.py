# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Enumerations shared by configuration and figure specifications."""

from __future__ import annotations

from enum import Enum
from typing import Final

_FORMAT_ALIASES: Final[dict[str, str]] = {
    "jpeg": "jpg",
    "tiff": "tif",
    "htm": "html",
}


class SaveFormat(str, Enum):
    """Enumerate image formats a figure may be saved as."""

    PNG = "png"
    PDF = "pdf"
    SVG = "svg"
    JPG = "jpg"
    EPS = "eps"
    GIF = "gif"
    TIF = "tif"
    WEBP = "webp"
    HTML = "html"

    @property
    def extension(self) -> str:
        """Return the file extension, including the leading dot."""

        return f".{self.value}"

    @property
    def is_interactive(self) -> bool:
        """Return ``True`` for formats embedded as raw HTML rather than images."""

        return self is SaveFormat.HTML

    @classmethod
    def parse(cls, raw: str | SaveFormat) -> SaveFormat:
        """Return the format named by an acronym or an extension.

        Args:
            raw: Value such as ``"PNG"``, ``".png"`` or ``"jpeg"``.

        Returns:
            SaveFormat: Matching enumeration member.

        Raises:
            ValueError: If ``raw`` does not name a known format.
        """

        if isinstance(raw, SaveFormat):
            return raw
        token = raw.strip().lower().lstrip(".")
        token = _FORMAT_ALIASES.get(token, token)
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Unknown save format '{raw}'") from None


class Verbosity(str, Enum):
    """Enumerate logging verbosity levels, from most to least chatty."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SILENT = "silent"

    @property
    def rank(self) -> int:
        """Return the ordering rank used to filter messages."""

        return _VERBOSITY_RANK[self]


_VERBOSITY_RANK: Final[dict[Verbosity, int]] = {
    Verbosity.DEBUG: 10,
    Verbosity.INFO: 20,
    Verbosity.WARNING: 30,
    Verbosity.ERROR: 40,
    Verbosity.SILENT: 100,
}

__all__ = ["SaveFormat", "Verbosity"]
