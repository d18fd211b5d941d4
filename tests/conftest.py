# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from pandoc_plot.config import Configuration
from pandoc_plot.config.models import ToolkitSettings
from pandoc_plot.execution.orchestrator import RenderContext
from pandoc_plot.logging import RecordingLogger
from pandoc_plot.toolkits import Toolkit
from tests.support import FakeRunner, word_caption


@pytest.fixture
def plot_config(tmp_path: Path) -> Configuration:
    """Configuration writing into ``tmp_path`` with an interpreter that always exists."""
    return Configuration(
        directory=tmp_path / "plots",
        toolkits={Toolkit.MATPLOTLIB: ToolkitSettings(executable=sys.executable)},
    )


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def render_context(fake_runner: FakeRunner, recording_logger: RecordingLogger) -> RenderContext:
    """Context spawning nothing and reading captions without pandoc."""
    return RenderContext(runner=fake_runner, logger=recording_logger, caption_reader=word_caption)
