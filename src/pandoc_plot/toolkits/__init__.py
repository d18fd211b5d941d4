# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public exports for toolkit definitions and registry helpers."""

from .base import CheckFailed, CheckPassed, CheckResult, Executable, Renderer, Toolkit
from .registry import DEFAULT_REGISTRY, ToolkitRegistry, register_renderer
from .builtins import BUILTIN_RENDERERS, register_builtin_renderers
from .executables import (
    available_toolkits,
    executable_name,
    find_executable,
    toolkit_available,
    unavailable_toolkits,
)

__all__ = [
    "BUILTIN_RENDERERS",
    "DEFAULT_REGISTRY",
    "CheckFailed",
    "CheckPassed",
    "CheckResult",
    "Executable",
    "Renderer",
    "Toolkit",
    "ToolkitRegistry",
    "available_toolkits",
    "executable_name",
    "find_executable",
    "register_builtin_renderers",
    "register_renderer",
    "toolkit_available",
    "unavailable_toolkits",
]
