# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build figure specifications from code blocks.

Every attribute is resolved in the same order: the block attribute, then the
toolkit section of the configuration, then the global configuration value.
Dependency files are read here so that a missing file fails the block before
anything is hashed or executed.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import panflute as pf

from .config.models import Configuration, ToolkitSettings
from .config.types import SaveFormat
from .constants import (
    CAPTION_KEY,
    DEPENDENCIES_KEY,
    DIRECTORY_KEY,
    DPI_KEY,
    FALSE_STRINGS,
    INCLUSION_KEYS,
    PREAMBLE_KEY,
    SAVE_FORMAT_KEY,
    TRUE_STRINGS,
    WITH_SOURCE_KEY,
)
from .errors import SpecResolutionError
from .models import BlockAttributes, FigureSpec
from .toolkits import DEFAULT_REGISTRY, Renderer, Toolkit, ToolkitRegistry


def plot_toolkit(block: pf.Element) -> Toolkit | None:
    """Return the toolkit requested by ``block``, or ``None`` for other blocks."""

    if not isinstance(block, pf.CodeBlock):
        return None
    return Toolkit.from_classes(block.classes)


def parse_figure_spec(
    toolkit: Toolkit,
    config: Configuration,
    block: pf.Element,
    *,
    registry: ToolkitRegistry = DEFAULT_REGISTRY,
) -> FigureSpec | None:
    """Resolve the figure described by ``block``.

    Args:
        toolkit: Toolkit the block must be tagged with.
        config: Configuration providing default values.
        block: Candidate document block.
        registry: Registry providing the toolkit renderer.

    Returns:
        FigureSpec | None: Resolved specification, or ``None`` when ``block``
        is not a code block tagged with ``toolkit``.

    Raises:
        SpecResolutionError: If an attribute is malformed or a dependency
            file cannot be read.
    """

    if not isinstance(block, pf.CodeBlock) or toolkit.cls not in block.classes:
        return None

    renderer = registry[toolkit]
    settings = config.settings_for(toolkit)
    attrs: Mapping[str, str] = dict(block.attributes)

    save_format = _resolve_format(attrs, settings, config, renderer)
    preamble_path = _resolve_path(attrs.get(PREAMBLE_KEY), settings.preamble)
    dependencies: list[Path] = []
    script = block.text
    if preamble_path is not None:
        preamble = _read_text(preamble_path, "preamble")
        script = f"{preamble}\n{script}"
        dependencies.append(preamble_path)
    for dependency in _parse_list(attrs.get(DEPENDENCIES_KEY)):
        path = Path(dependency)
        _read_bytes(path, "dependency")
        dependencies.append(path)

    extra_keys = set(renderer.extra_attrs)
    return FigureSpec(
        toolkit=toolkit,
        script=script,
        caption=attrs.get(CAPTION_KEY, ""),
        with_source=_resolve_bool(attrs.get(WITH_SOURCE_KEY), settings.source, config.source),
        directory=_resolve_path(attrs.get(DIRECTORY_KEY), settings.directory) or config.directory,
        save_format=save_format,
        dpi=_resolve_dpi(attrs.get(DPI_KEY), settings.dpi, config.dpi),
        dependencies=tuple(dependencies),
        extra_attrs=_resolve_extras(attrs, settings, renderer),
        block_attrs=BlockAttributes(
            identifier=block.identifier,
            classes=tuple(name for name in block.classes if name != toolkit.cls),
            attributes=tuple(
                (key, value)
                for key, value in attrs.items()
                if key not in INCLUSION_KEYS and key not in extra_keys
            ),
        ),
    )


def _resolve_format(
    attrs: Mapping[str, str],
    settings: ToolkitSettings,
    config: Configuration,
    renderer: Renderer,
) -> SaveFormat:
    raw = attrs.get(SAVE_FORMAT_KEY)
    if raw is not None:
        try:
            save_format = SaveFormat.parse(raw)
        except ValueError as exc:
            raise SpecResolutionError(str(exc)) from exc
    else:
        save_format = settings.format or config.format
    if save_format not in renderer.supported_formats:
        supported = ", ".join(sorted(fmt.value for fmt in renderer.supported_formats))
        raise SpecResolutionError(
            f"Save format '{save_format.value}' is not supported by {renderer.toolkit.display_name} "
            f"(supported: {supported})",
        )
    return save_format


def _resolve_dpi(raw: str | None, toolkit_default: int | None, default: int) -> int:
    if raw is None:
        return toolkit_default or default
    try:
        value = int(raw.strip())
    except ValueError:
        raise SpecResolutionError(f"Invalid dpi value '{raw}': expected a positive integer") from None
    if value <= 0:
        raise SpecResolutionError(f"Invalid dpi value '{raw}': expected a positive integer")
    return value


def _resolve_bool(raw: str | None, toolkit_default: bool | None, default: bool) -> bool:
    if raw is None:
        return default if toolkit_default is None else toolkit_default
    token = raw.strip().lower()
    if token in TRUE_STRINGS:
        return True
    if token in FALSE_STRINGS:
        return False
    raise SpecResolutionError(f"Invalid boolean value '{raw}' for attribute '{WITH_SOURCE_KEY}'")


def _resolve_path(raw: str | None, toolkit_default: Path | None) -> Path | None:
    if raw is not None and raw.strip():
        try:
            return Path(raw.strip()).expanduser()
        except RuntimeError as exc:
            raise SpecResolutionError(f"Invalid path '{raw}': {exc}") from exc
    return toolkit_default


def _resolve_extras(
    attrs: Mapping[str, str],
    settings: ToolkitSettings,
    renderer: Renderer,
) -> tuple[tuple[str, str], ...]:
    resolved: dict[str, str] = {}
    for key, default in renderer.extra_attrs.items():
        value = attrs.get(key)
        if value is None:
            value = settings.extra_value(key)
        resolved[key] = default if value is None else value
    return tuple(sorted(resolved.items()))


def _parse_list(raw: str | None) -> list[str]:
    """Split ``[a, b]`` or ``a, b`` into its stripped, non-empty items."""

    if raw is None:
        return []
    text = raw.strip()
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]
    return [item.strip().strip("'\"") for item in text.split(",") if item.strip()]


def _read_text(path: Path, role: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecResolutionError(f"Unable to read {role} file {path}: {exc}") from exc


def _read_bytes(path: Path, role: str) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise SpecResolutionError(f"Unable to read {role} file {path}: {exc}") from exc


__all__ = ["parse_figure_spec", "plot_toolkit"]
