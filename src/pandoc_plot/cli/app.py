# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for the pandoc filter."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from ..version import __version__
from ._cli_services import (
    CLIError,
    clean_document,
    emit_toolkits,
    run_filter,
    write_example_configuration,
)

app = typer.Typer(
    name="pandoc-plot",
    help="Pandoc filter rendering plotting code blocks into figures.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def main(
    target_format: Annotated[
        str | None,
        typer.Argument(metavar="FORMAT", help="Output format supplied by pandoc; ignored."),
    ] = None,
    toolkits: Annotated[
        bool,
        typer.Option("--toolkits", help="Show which toolkits are available and exit."),
    ] = False,
    clean: Annotated[
        Path | None,
        typer.Option("--clean", metavar="FILE", help="Remove the output directories referenced by FILE."),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", metavar="FILE", help="Configuration file to use."),
    ] = None,
    write_example_config: Annotated[
        bool,
        typer.Option("--write-example-config", help="Write an example configuration file and exit."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Act as a pandoc JSON filter, or run one of the maintenance actions."""

    del target_format, version
    console = Console()
    try:
        if write_example_config:
            write_example_configuration(console)
        elif toolkits:
            emit_toolkits(console, config)
        elif clean is not None:
            clean_document(console, clean, config)
        else:
            run_filter(sys.stdin, sys.stdout, config)
    except CLIError as exc:
        Console(stderr=True).print(f"[red]{exc}[/red]")
        raise typer.Exit(code=exc.exit_code) from exc


def run() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main", "run"]
