# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Register the built-in renderers with the default registry."""

from __future__ import annotations

from typing import Final

from .base import Renderer
from .builtin_misc import (
    GGPLOT2_RENDERER,
    GNUPLOT_RENDERER,
    GRAPHVIZ_RENDERER,
    MATHEMATICA_RENDERER,
    MATLAB_RENDERER,
    OCTAVE_RENDERER,
    PLOTLY_R_RENDERER,
)
from .builtin_python import MATPLOTLIB_RENDERER, PLOTLY_PYTHON_RENDERER
from .registry import DEFAULT_REGISTRY, ToolkitRegistry

BUILTIN_RENDERERS: Final[tuple[Renderer, ...]] = (
    MATPLOTLIB_RENDERER,
    PLOTLY_PYTHON_RENDERER,
    PLOTLY_R_RENDERER,
    MATLAB_RENDERER,
    MATHEMATICA_RENDERER,
    OCTAVE_RENDERER,
    GGPLOT2_RENDERER,
    GNUPLOT_RENDERER,
    GRAPHVIZ_RENDERER,
)


def register_builtin_renderers(registry: ToolkitRegistry | None = None) -> ToolkitRegistry:
    """Populate ``registry`` (default: :data:`DEFAULT_REGISTRY`) with built-in renderers.

    Renderers already present are left untouched so the call is idempotent.
    """

    target = registry if registry is not None else DEFAULT_REGISTRY
    for renderer in BUILTIN_RENDERERS:
        if renderer.toolkit not in target:
            target.register(renderer)
    return target


register_builtin_renderers()

__all__ = ["BUILTIN_RENDERERS", "register_builtin_renderers"]
