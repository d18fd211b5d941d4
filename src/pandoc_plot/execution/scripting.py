# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run toolkit scripts for figures whose output does not exist yet."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CompletedProcess
from typing import Protocol, runtime_checkable

from ..config.models import Configuration
from ..logging import PlotLogger
from ..models import (
    FigureSpec,
    OutputSpec,
    ScriptChecksFailed,
    ScriptFailure,
    ScriptResult,
    ScriptSuccess,
    ToolkitNotInstalled,
)
from ..paths import figure_path, temp_script_path
from ..process_utils import prepend_to_path, run_command, split_command
from ..toolkits import DEFAULT_REGISTRY, CheckFailed, Renderer, ToolkitRegistry, find_executable

SPAWN_FAILURE_EXIT_CODE = 127


@runtime_checkable
class RunnerCallable(Protocol):
    """Callable protocol for spawning toolkit processes."""

    def __call__(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> CompletedProcess[str]:
        """Execute ``cmd`` and return the completed process with stderr captured.

        Raises:
            NotImplementedError: Always raised; concrete runners implement this.
        """

        raise NotImplementedError


@dataclass(slots=True)
class ScriptRunner:
    """Execute the toolkit script of a figure when its output is missing.

    The toolkit directory is prepended to ``PATH`` in the environment handed
    to the child process only; the environment of the filter itself is never
    modified, so concurrent runners need no coordination.
    """

    config: Configuration
    registry: ToolkitRegistry = field(default_factory=lambda: DEFAULT_REGISTRY)
    runner: RunnerCallable = run_command
    logger: PlotLogger = field(default_factory=PlotLogger)
    cwd: Path | None = None
    timeout: float | None = None

    def run_if_necessary(self, spec: FigureSpec) -> ScriptResult:
        """Return ``ScriptSuccess`` at once when the figure exists, else render it."""

        target = figure_path(spec)
        target.parent.mkdir(parents=True, exist_ok=True)
        if target.exists():
            self.logger.debug(f"Figure {target} already exists; skipping execution.")
            return ScriptSuccess(cached=True)
        result = self.run_temp_script(spec, target)
        if not isinstance(result, ScriptSuccess):
            self.logger.debug(str(result))
        return result

    def run_temp_script(self, spec: FigureSpec, target: Path | None = None) -> ScriptResult:
        """Run checks, write the capture script and spawn the toolkit.

        Args:
            spec: Figure to render.
            target: Precomputed figure path; computed when omitted.

        Returns:
            ScriptResult: Outcome of this single attempt.
        """

        renderer = self.registry[spec.toolkit]
        check = renderer.run_checks(spec.script)
        if isinstance(check, CheckFailed):
            return ScriptChecksFailed(check.message)

        executable = find_executable(renderer, self.config)
        if executable is None:
            return ToolkitNotInstalled(spec.toolkit)

        figure = target if target is not None else figure_path(spec)
        captured = renderer.capture(spec, figure)
        script_path = temp_script_path(captured, renderer.script_extension)
        script_path.write_text(captured, encoding="utf-8")

        output = OutputSpec(figure=spec, script_path=script_path, figure_path=figure)
        command = renderer.command(output, executable.name)
        env = prepend_to_path(executable.directory)
        self.logger.debug(f"Running {renderer.toolkit.display_name}: {command}")
        try:
            completed = self.runner(split_command(command), cwd=self.cwd, env=env, timeout=self.timeout)
        except OSError as exc:
            self.logger.debug(f"Unable to spawn {command}: {exc}")
            return self._classify_failure(renderer, command, SPAWN_FAILURE_EXIT_CODE, str(exc))

        if completed.returncode == 0:
            return ScriptSuccess()
        return self._classify_failure(renderer, command, completed.returncode, completed.stderr or "")

    def _classify_failure(self, renderer: Renderer, command: str, exit_code: int, stderr: str) -> ScriptResult:
        """Tell a missing toolkit apart from a genuine script error."""

        if find_executable(renderer, self.config) is None:
            return ToolkitNotInstalled(renderer.toolkit)
        if stderr.strip():
            self.logger.warning(f"{renderer.toolkit.display_name} reported:\n{stderr.rstrip()}")
        return ScriptFailure(command=command, exit_code=exit_code, stderr=stderr)


__all__ = ["RunnerCallable", "SPAWN_FAILURE_EXIT_CODE", "ScriptRunner"]
