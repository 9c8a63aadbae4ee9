"""File glue — dialect detection and loading/saving buffers from disk."""

import difflib
from pathlib import Path

from addimport.editing.models import LineBuffer, SourceDialect, TextRange

SWIFT_CONTENT_TYPE = "public.swift-source"
SWIFT_SUFFIXES = frozenset({".swift", ".swiftinterface"})


class AddImportError(Exception):
    """Base error for addimport host operations."""


class BufferLoadError(AddImportError):
    """A file could not be turned into a buffer."""


def dialect_for_content_type(content_type: str | None) -> SourceDialect:
    """Map an editor content type identifier to a dialect.

    Swift source is recognized by its uniform type identifier; anything
    else is treated as C-family.
    """
    if content_type == SWIFT_CONTENT_TYPE:
        return SourceDialect.SWIFT_FAMILY
    return SourceDialect.C_FAMILY


def dialect_for_path(path: Path) -> SourceDialect:
    """Pick a dialect from the file suffix (.swift → Swift, else C-family)."""
    if path.suffix.lower() in SWIFT_SUFFIXES:
        return SourceDialect.SWIFT_FAMILY
    return SourceDialect.C_FAMILY


def load_buffer(path: Path, line: int, encoding: str = "utf-8") -> LineBuffer:
    """Read a file into a buffer with the caret on ``line`` (0-based).

    Args:
        path: Source file to read
        line: 0-based line holding the import to move
        encoding: Text encoding of the file

    Returns:
        LineBuffer with a single caret selection

    Raises:
        BufferLoadError: Missing file, undecodable content, or line out of range
    """
    if not path.is_file():
        raise BufferLoadError(f"File does not exist: {path}")

    try:
        with path.open(encoding=encoding, newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise BufferLoadError(f"Cannot decode {path} as {encoding}: {e.reason}") from e

    content_type = None
    if dialect_for_path(path) == SourceDialect.SWIFT_FAMILY:
        content_type = SWIFT_CONTENT_TYPE
    buffer = LineBuffer.from_text(text, content_type=content_type)

    if not 0 <= line < len(buffer.lines):
        raise BufferLoadError(
            f"Line {line + 1} is out of range for {path} ({len(buffer.lines)} lines)"
        )

    buffer.selections.append(TextRange.caret(line))
    return buffer


def save_buffer(path: Path, buffer: LineBuffer, encoding: str = "utf-8") -> None:
    """Write a buffer back to disk using the buffer's own line ending."""
    path.write_text(buffer.to_text(), encoding=encoding, newline="")


def render_diff(before: str, after: str, path: Path) -> str:
    """Unified diff between two versions of a file's text."""
    diff = difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"a/{path.name}",
        tofile=f"b/{path.name}",
    )
    return "".join(diff)
