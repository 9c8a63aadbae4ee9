"""CLI commands for adding and checking imports."""

import json
from pathlib import Path

import rich
from rich.markup import escape
from rich.syntax import Syntax

from addimport.config import AddImportConfig
from addimport.editing.classifier import is_valid_import
from addimport.editing.files import (
    dialect_for_content_type,
    load_buffer,
    render_diff,
    save_buffer,
)
from addimport.editing.inserter import ImportInserter
from addimport.editing.models import InsertOutcome, InsertResult, SourceDialect

_NO_OP_MESSAGES = {
    InsertOutcome.INVALID_IMPORT_LINE: "Line is not an import statement",
    InsertOutcome.NO_INSERTION_POINT: "No place to insert the import",
    InsertOutcome.NO_SELECTION: "No line selected",
}


def add_command(
    file: Path,
    line: int,
    dialect: SourceDialect | None = None,
    dry_run: bool = False,
    format: str = "human",
    config: AddImportConfig | None = None,
) -> int:
    """Move the import on ``line`` of ``file`` into the file's import block.

    Args:
        file: Source file to edit
        line: 1-based line number holding the import
        dialect: Import grammar; derived from the buffer content type if None
        dry_run: Print a diff instead of writing the file
        format: Output format: "human", "json", or "jsonl"
        config: Settings; defaults are used if None

    Returns:
        Exit code (0 = inserted or no-op, 1 = error)
    """
    config = config or AddImportConfig()

    try:
        buffer = load_buffer(file, line - 1, encoding=config.encoding)
        active_dialect = (
            dialect or config.default_dialect or dialect_for_content_type(buffer.content_type)
        )

        before = buffer.to_text()
        result = ImportInserter(config=config).execute(buffer, active_dialect)
        after = buffer.to_text()

        if result.changed and not dry_run and after != before:
            save_buffer(file, buffer, encoding=config.encoding)

        diff = render_diff(before, after, file) if dry_run else ""
        _output_result(result, file, active_dialect, diff, format)
        return 0

    except Exception as e:
        if format == "human":
            rich.print(f"[red]Error:[/red] {escape(str(e))}")
        else:
            print(json.dumps({"error": str(e)}))
        return 1


def check_command(
    text: str,
    dialect: SourceDialect = SourceDialect.C_FAMILY,
    format: str = "human",
) -> int:
    """Report whether ``text`` is an import statement for ``dialect``.

    Returns:
        Exit code (0 = valid import, 1 = not an import)
    """
    statement = text.strip()
    valid = is_valid_import(statement, dialect)

    if format == "human":
        if valid:
            rich.print(f"[green]✓[/green] {dialect} import: {escape(statement)}")
        else:
            rich.print(f"[red]✗[/red] not a {dialect} import: {escape(repr(statement))}")
    else:
        print(json.dumps({"statement": statement, "dialect": str(dialect), "valid": valid}))

    return 0 if valid else 1


def _output_result(
    result: InsertResult,
    file: Path,
    dialect: SourceDialect,
    diff: str,
    format: str,
) -> None:
    """Output an insertion result in the specified format."""
    if format == "json":
        payload = result.model_dump(mode="json")
        payload["file"] = str(file)
        payload["dialect"] = str(dialect)
        if diff:
            payload["diff"] = diff
        print(json.dumps(payload, indent=2))

    elif format == "jsonl":
        payload = result.model_dump(mode="json")
        payload["file"] = str(file)
        print(json.dumps(payload))
        if diff:
            print(json.dumps({"diff": diff}))

    else:  # human
        if result.changed and result.inserted_at is not None and result.source_line is not None:
            rich.print(
                f"[green]✓[/green] {escape(result.statement or '')} "
                f"(line {result.source_line + 1} → line {result.inserted_at + 1})"
            )
            duplicates = len(result.removed_lines) - 1
            if duplicates > 0:
                rich.print(f"  [yellow]removed {duplicates} duplicate(s)[/yellow]")
        else:
            message = _NO_OP_MESSAGES.get(result.outcome, str(result.outcome))
            rich.print(f"[yellow]No change:[/yellow] {message}")

        if diff:
            rich.print(Syntax(diff, "diff", theme="ansi_dark"))
