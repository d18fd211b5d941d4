# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Content-addressed locations of figures and their side artifacts.

The figure path is derived from a hash of everything that influences
rendering, so an existing file at that path is trusted as up to date.
Hashes are recomputed on every call because dependency files may change
between runs.
"""

from __future__ import annotations

import hashlib
import json
import tempfile
from pathlib import Path
from typing import Final

from .config.types import SaveFormat
from .constants import SOURCE_PAGE_HTML_FIGURE_SUFFIX, SOURCE_PAGE_SUFFIX, TEMP_SCRIPT_PREFIX
from .errors import SpecResolutionError
from .models import FigureSpec
from .version import __version__

_HASH_BYTES: Final[int] = 8


def _digest_int(payload: bytes) -> int:
    """Return an unsigned integer made of the leading bytes of a SHA-256 digest."""

    return int.from_bytes(hashlib.sha256(payload).digest()[:_HASH_BYTES], "big")


def file_hash(path: Path) -> str:
    """Return the SHA-256 hex digest of the contents of ``path``.

    Raises:
        SpecResolutionError: If ``path`` cannot be read.
    """

    try:
        return hashlib.sha256(path.read_bytes()).hexdigest()
    except OSError as exc:
        raise SpecResolutionError(f"Unable to read dependency file {path}: {exc}") from exc


def figure_content_hash(spec: FigureSpec) -> int:
    """Hash the rendering-relevant parts of ``spec``.

    Equal hashes do not imply equal specifications: ``caption`` and
    ``with_source`` are excluded. The package version is included
    because capture code may change between releases.
    """

    payload = {
        "toolkit": spec.toolkit.value,
        "script": spec.script,
        "format": spec.save_format.value,
        "directory": spec.directory.as_posix(),
        "dpi": spec.dpi,
        "dependencies": [file_hash(path) for path in spec.dependencies],
        "extra": [list(pair) for pair in spec.extra_attrs],
        "version": __version__,
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return _digest_int(encoded.encode("utf-8"))


def figure_path(spec: FigureSpec) -> Path:
    """Return ``<directory>/<hash><extension>`` for ``spec``."""

    return spec.directory / f"{figure_content_hash(spec)}{spec.save_format.extension}"


def source_code_path(spec: FigureSpec) -> Path:
    """Return the path of the syntax-highlighted source page of ``spec``.

    Interactive figures are HTML themselves, so their source page takes a
    distinct suffix.
    """

    target = figure_path(spec)
    if spec.save_format is SaveFormat.HTML:
        return target.with_name(f"{target.stem}{SOURCE_PAGE_HTML_FIGURE_SUFFIX}")
    return target.with_suffix(SOURCE_PAGE_SUFFIX)


def temp_script_path(script_text: str, extension: str) -> Path:
    """Return the temporary script location for a captured script.

    The name hashes the full captured text, target path and save options
    included, so concurrent renders of one source in different formats never
    share a file. It plays no part in deciding whether a figure is rendered.
    It starts with a letter because MATLAB refuses to run scripts that do not.
    """

    name = f"{TEMP_SCRIPT_PREFIX}{_digest_int(script_text.encode('utf-8'))}{extension}"
    return Path(tempfile.gettempdir()) / name


__all__ = [
    "figure_content_hash",
    "figure_path",
    "file_hash",
    "source_code_path",
    "temp_script_path",
]
