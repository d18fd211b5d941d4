# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Toolkit registry mapping each toolkit to its renderer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .base import Renderer, Toolkit


class ToolkitRegistry(Mapping[Toolkit, Renderer]):
    """Central registry for toolkit renderers.

    ``ToolkitRegistry`` behaves like a read-only mapping whose keys are
    :class:`Toolkit` members and whose values are :class:`Renderer` records.
    Supporting a new toolkit only requires registering its renderer here.
    """

    def __init__(self) -> None:
        """Initialise an empty registry."""

        self._renderers: dict[Toolkit, Renderer] = {}

    def register(self, renderer: Renderer) -> None:
        """Register ``renderer`` enforcing uniqueness by toolkit.

        Args:
            renderer: Renderer to insert into the registry.

        Raises:
            ValueError: If a renderer for the same toolkit is already registered.
        """

        if renderer.toolkit in self._renderers:
            raise ValueError(f"Toolkit '{renderer.toolkit.value}' already registered")
        self._renderers[renderer.toolkit] = renderer

    def reset(self) -> None:
        """Remove all renderers from the registry."""
        self._renderers.clear()

    def try_get(self, toolkit: Toolkit) -> Renderer | None:
        """Return the renderer for ``toolkit`` when registered, otherwise ``None``."""

        return self._renderers.get(toolkit)

    def renderers(self) -> Iterable[Renderer]:
        """Return all registered renderers in enumeration order."""

        return tuple(self._renderers[toolkit] for toolkit in self)

    def __len__(self) -> int:
        return len(self._renderers)

    def __iter__(self) -> Iterator[Toolkit]:
        return iter([toolkit for toolkit in Toolkit if toolkit in self._renderers])

    def __getitem__(self, toolkit: Toolkit) -> Renderer:
        """Return the renderer registered for ``toolkit``.

        Raises:
            KeyError: If no renderer is registered for ``toolkit``.
        """

        return self._renderers[toolkit]


DEFAULT_REGISTRY = ToolkitRegistry()


def register_renderer(renderer: Renderer) -> None:
    """Register ``renderer`` with :data:`DEFAULT_REGISTRY`."""
    DEFAULT_REGISTRY.register(renderer)


__all__ = ["DEFAULT_REGISTRY", "ToolkitRegistry", "register_renderer"]
