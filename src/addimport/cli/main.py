"""addimport CLI application."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Annotated

import typer
from rich import print as rprint

import addimport as addimport_pkg
from addimport.editing.models import SourceDialect


class OutputFormat(StrEnum):
    """Output format for CLI commands."""

    human = "human"
    json = "json"
    jsonl = "jsonl"


app = typer.Typer(
    name="addimport",
    help="Move import and include lines into a source file's import block.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        rprint(f"addimport {addimport_pkg.__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    package_logger = logging.getLogger("addimport")
    if verbose and not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log editing decisions."),
    ] = False,
) -> None:
    """addimport — keep imports in the import block."""
    from dotenv import load_dotenv

    load_dotenv()
    _configure_logging(verbose)


@app.command("add")
def add(
    file: Annotated[
        str,
        typer.Argument(help="Source file to edit"),
    ],
    line: Annotated[
        int,
        typer.Option("--line", "-l", min=1, help="1-based line holding the import"),
    ],
    dialect: Annotated[
        SourceDialect | None,
        typer.Option("--dialect", "-d", help="Import grammar (detected from suffix if omitted)"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show a diff without writing the file"),
    ] = False,
    format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.human,
) -> None:
    """Move the import on LINE into the import block of FILE."""
    from pathlib import Path

    from pydantic import ValidationError
    from rich.markup import escape

    from addimport.config import load_config
    from addimport.editing.cli import add_command

    try:
        config = load_config()
    except ValidationError as e:
        rprint(f"[red]Error:[/red] Invalid ADDIMPORT_* configuration: {escape(str(e))}")
        raise typer.Exit(1) from None

    exit_code = add_command(
        file=Path(file),
        line=line,
        dialect=dialect,
        dry_run=dry_run,
        format=format.value,
        config=config,
    )
    raise typer.Exit(exit_code)


@app.command("check")
def check(
    text: Annotated[
        str,
        typer.Argument(help="Line to classify, e.g. '#import <Foundation/Foundation.h>'"),
    ],
    dialect: Annotated[
        SourceDialect,
        typer.Option("--dialect", "-d", help="Import grammar"),
    ] = SourceDialect.C_FAMILY,
    format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.human,
) -> None:
    """Check whether TEXT is an import statement."""
    from addimport.editing.cli import check_command

    exit_code = check_command(text=text, dialect=dialect, format=format.value)
    raise typer.Exit(exit_code)
