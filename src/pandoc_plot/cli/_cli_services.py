# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers backing the ``pandoc-plot`` command line."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import panflute as pf
from rich.console import Console
from rich.table import Table

from ..clean import clean_output_dirs
from ..config import ConfigError, Configuration, example_configuration, resolve_configuration
from ..constants import EXAMPLE_CONFIG_FILE_NAME
from ..errors import PlotError
from ..execution.walker import plot_transform
from ..readers import read_doc
from ..toolkits import available_toolkits, unavailable_toolkits


class CLIError(RuntimeError):
    """Error raised when a command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def load_cli_configuration(doc: pf.Doc | None, explicit: Path | None) -> Configuration:
    """Resolve the configuration, converting failures into :class:`CLIError`."""

    try:
        return resolve_configuration(doc, explicit=explicit)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def run_filter(source: TextIO, sink: TextIO, explicit: Path | None) -> None:
    """Read a pandoc JSON document from ``source`` and write the result to ``sink``."""

    doc = pf.load(source)
    config = load_cli_configuration(doc, explicit)
    plot_transform(config, doc)
    pf.dump(doc, sink)


def emit_toolkits(console: Console, explicit: Path | None) -> None:
    """Print which toolkits can be used on this machine."""

    config = load_cli_configuration(None, explicit)
    table = Table(title="Toolkits", show_header=True)
    table.add_column("Toolkit")
    table.add_column("Class")
    table.add_column("Status")
    for toolkit in available_toolkits(config):
        table.add_row(toolkit.display_name, toolkit.cls, "[green]available[/green]")
    for toolkit in unavailable_toolkits(config):
        table.add_row(toolkit.display_name, toolkit.cls, "[red]unavailable[/red]")
    console.print(table)


def clean_document(console: Console, document: Path, explicit: Path | None) -> list[Path]:
    """Remove the output directories referenced by ``document``."""

    try:
        doc = read_doc(document)
    except PlotError as exc:
        raise CLIError(str(exc)) from exc
    config = load_cli_configuration(doc, explicit)
    removed = clean_output_dirs(config, doc)
    if not removed:
        console.print("Nothing to clean.")
    for directory in removed:
        console.print(f"Removed {directory}")
    return removed


def write_example_configuration(console: Console, directory: Path | None = None) -> Path:
    """Write the example configuration file and return its path."""

    target = (directory or Path.cwd()) / EXAMPLE_CONFIG_FILE_NAME
    target.write_text(example_configuration(), encoding="utf-8")
    console.print(f"Example configuration written to {target}")
    return target


__all__ = [
    "CLIError",
    "clean_document",
    "emit_toolkits",
    "load_cli_configuration",
    "run_filter",
    "write_example_configuration",
]
