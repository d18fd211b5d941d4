# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate toolkit executables on disk."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from .base import Executable, Renderer, Toolkit
from .registry import DEFAULT_REGISTRY, ToolkitRegistry

if TYPE_CHECKING:
    from ..config.models import Configuration


def executable_name(renderer: Renderer, config: Configuration) -> str:
    """Return the executable configured for ``renderer``'s toolkit."""

    configured = config.settings_for(renderer.toolkit).executable
    return configured or renderer.executable


def find_executable(
    renderer: Renderer,
    config: Configuration,
    *,
    environ: Mapping[str, str] | None = None,
) -> Executable | None:
    """Resolve the toolkit executable for ``renderer``.

    A configured executable containing a directory is probed directly.
    Otherwise ``PATH`` is searched first, followed by the renderer's own
    search directories (typical installation locations).

    Args:
        renderer: Renderer whose executable should be resolved.
        config: Configuration possibly overriding the executable.
        environ: Environment providing ``PATH``; defaults to ``os.environ``.

    Returns:
        Executable | None: Directory and name of the executable, or ``None``.
    """

    name = executable_name(renderer, config)
    candidate = Path(name)
    if candidate.parent != Path("."):
        resolved = shutil.which(candidate.name, path=str(candidate.parent))
        if resolved is None:
            return None
        return Executable(directory=Path(resolved).parent, name=candidate.name)

    env = os.environ if environ is None else environ
    search = [env.get("PATH", os.defpath)]
    search.extend(str(directory) for directory in renderer.search_directories())
    resolved = shutil.which(name, path=os.pathsep.join(search))
    if resolved is None:
        return None
    return Executable(directory=Path(resolved).parent, name=name)


def toolkit_available(
    toolkit: Toolkit,
    config: Configuration,
    *,
    registry: ToolkitRegistry = DEFAULT_REGISTRY,
) -> bool:
    """Return ``True`` when the executable of ``toolkit`` can be resolved."""

    return find_executable(registry[toolkit], config) is not None


def available_toolkits(
    config: Configuration,
    *,
    registry: ToolkitRegistry = DEFAULT_REGISTRY,
) -> list[Toolkit]:
    """Return the toolkits whose executable can be resolved."""

    return [toolkit for toolkit in registry if toolkit_available(toolkit, config, registry=registry)]


def unavailable_toolkits(
    config: Configuration,
    *,
    registry: ToolkitRegistry = DEFAULT_REGISTRY,
) -> list[Toolkit]:
    """Return the toolkits whose executable cannot be resolved."""

    return [toolkit for toolkit in registry if not toolkit_available(toolkit, config, registry=registry)]


__all__ = [
    "available_toolkits",
    "executable_name",
    "find_executable",
    "toolkit_available",
    "unavailable_toolkits",
]
