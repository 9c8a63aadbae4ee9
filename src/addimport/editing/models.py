"""Editing models — dialects, positions, the line buffer and insertion results.

L0 constraint: Only import from pydantic, stdlib.
NO imports from other addimport.* modules.
"""

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

_LINE_ENDING = re.compile(r"\r\n|\r|\n")


class SourceDialect(StrEnum):
    """Import grammar variant of a source file."""

    C_FAMILY = "c"
    SWIFT_FAMILY = "swift"


class InsertOutcome(StrEnum):
    """Why an insertion did or did not change the buffer."""

    INSERTED = "inserted"
    INVALID_IMPORT_LINE = "invalid_import_line"
    NO_INSERTION_POINT = "no_insertion_point"
    NO_SELECTION = "no_selection"


class TextPosition(BaseModel):
    """A 0-based (line, column) location in a buffer."""

    line: int = Field(ge=0)
    column: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class TextRange(BaseModel):
    """A selection between two positions. Only ``start`` is used for editing."""

    start: TextPosition
    end: TextPosition

    model_config = ConfigDict(frozen=True)

    @classmethod
    def caret(cls, line: int, column: int = 0) -> "TextRange":
        """Build a zero-width selection at (line, column)."""
        position = TextPosition(line=line, column=column)
        return cls(start=position, end=position)


class LineBuffer(BaseModel):
    """Mutable source buffer handed over by the host.

    Lines carry no line terminators. ``selections`` mirrors an editor's
    selection set; editing only looks at the first entry.
    """

    lines: list[str] = Field(default_factory=list)
    selections: list[TextRange] = Field(default_factory=list)
    content_type: str | None = None
    trailing_newline: bool = True
    line_ending: str = "\n"

    @property
    def cursor(self) -> TextPosition | None:
        """Start of the first selection, or None when nothing is selected."""
        if not self.selections:
            return None
        return self.selections[0].start

    @classmethod
    def from_text(
        cls,
        text: str,
        cursor_line: int | None = None,
        content_type: str | None = None,
    ) -> "LineBuffer":
        """Split text into a buffer, optionally placing a caret on a line.

        The first line terminator found (CRLF, CR or LF) becomes the
        buffer's line ending; to_text() writes every line back with it.
        """
        line_ending = _detect_line_ending(text)
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        trailing_newline = normalized.endswith("\n")
        if trailing_newline:
            normalized = normalized[:-1]
        lines = normalized.split("\n")

        selections = []
        if cursor_line is not None:
            selections.append(TextRange.caret(cursor_line))

        return cls(
            lines=lines,
            selections=selections,
            content_type=content_type,
            trailing_newline=trailing_newline,
            line_ending=line_ending,
        )

    def to_text(self) -> str:
        """Join lines back into text, restoring the final newline if there was one."""
        text = self.line_ending.join(self.lines)
        if self.trailing_newline:
            text += self.line_ending
        return text


def _detect_line_ending(text: str) -> str:
    match = _LINE_ENDING.search(text)
    return match.group() if match else "\n"
    return "\n"


class InsertResult(BaseModel):
    """Outcome of a single add-import operation.

    No-op outcomes leave every field but ``outcome`` (and whatever was known
    at the point of giving up) unset.
    """

    outcome: InsertOutcome
    statement: str | None = None
    source_line: int | None = None
    inserted_at: int | None = None
    removed_lines: list[int] = Field(default_factory=list)
    cursor: TextPosition | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def changed(self) -> bool:
        """True when the buffer was modified."""
        return self.outcome == InsertOutcome.INSERTED
