# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Output directory cleanup helpers."""

from __future__ import annotations

from .plan import output_directories
from .runner import clean_output_dirs

__all__ = ["clean_output_dirs", "output_directories"]
