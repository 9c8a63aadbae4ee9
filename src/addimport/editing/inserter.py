"""ImportInserter — moves the selected import line into the import block."""

from __future__ import annotations

import logging

from addimport.config import AddImportConfig, CursorMode
from addimport.editing.classifier import LineClassifier, RegexImportClassifier
from addimport.editing.models import (
    InsertOutcome,
    InsertResult,
    LineBuffer,
    SourceDialect,
    TextRange,
)

logger = logging.getLogger(__name__)


TRIM_CHARS = " \t\n"


def trim_line(text: str) -> str:
    """Strip spaces, tabs and newlines from both ends; other whitespace is kept."""
    return text.strip(TRIM_CHARS)


class ImportInserter:
    """Validates, deduplicates and places an import statement in a buffer.

    The buffer is only mutated once the selected line is known to be an
    import and an insertion point has been found. Every no-op is reported
    through ``InsertResult.outcome`` rather than raised.
    """

    def __init__(
        self,
        classifier: LineClassifier | None = None,
        config: AddImportConfig | None = None,
    ) -> None:
        self.classifier = classifier or RegexImportClassifier()
        self.config = config or AddImportConfig()

    def execute(self, buffer: LineBuffer, dialect: SourceDialect) -> InsertResult:
        """Move the import on the cursor line to the end of the import block.

        Args:
            buffer: Host buffer; lines and selections are updated in place
            dialect: Grammar used for validation and the import-block scan

        Returns:
            InsertResult describing what happened
        """
        cursor = buffer.cursor
        if cursor is None or cursor.line >= len(buffer.lines):
            logger.debug("No usable selection (cursor=%s)", cursor)
            return InsertResult(outcome=InsertOutcome.NO_SELECTION)

        source_line = cursor.line
        candidate = trim_line(buffer.lines[source_line])

        if not self.classifier.is_import(candidate, dialect):
            logger.debug("Line %d is not a %s import: %r", source_line, dialect, candidate)
            return InsertResult(
                outcome=InsertOutcome.INVALID_IMPORT_LINE,
                statement=candidate,
                source_line=source_line,
            )

        lines = list(buffer.lines)
        removed = self.remove_duplicates(lines, candidate)
        target = self.find_insertion_line(lines, dialect)

        if target is None or not 0 <= target <= len(lines):
            logger.debug("No insertion point for %r (target=%s)", candidate, target)
            return InsertResult(
                outcome=InsertOutcome.NO_INSERTION_POINT,
                statement=candidate,
                source_line=source_line,
            )

        lines.insert(target, candidate)
        buffer.lines[:] = lines

        cursor_line = self._adjusted_cursor_line(source_line, removed)
        cursor_line = min(max(cursor_line, 0), len(buffer.lines) - 1)
        caret = TextRange.caret(cursor_line)
        buffer.selections[:] = [caret]

        logger.debug(
            "Moved %r from line %d to line %d (removed %s, caret %d)",
            candidate,
            source_line,
            target,
            removed,
            cursor_line,
        )
        return InsertResult(
            outcome=InsertOutcome.INSERTED,
            statement=candidate,
            source_line=source_line,
            inserted_at=target,
            removed_lines=removed,
            cursor=caret.start,
        )

    def remove_duplicates(self, lines: list[str], statement: str) -> list[int]:
        """Remove every line whose trimmed text equals ``statement``.

        Scans bottom-up so earlier indices stay valid while deleting. The
        selected line itself is one of the matches.

        Returns:
            Original indices of the removed lines, ascending
        """
        removed: list[int] = []
        for index in range(len(lines) - 1, -1, -1):
            if trim_line(lines[index]) == statement:
                del lines[index]
                removed.append(index)
        removed.reverse()
        return removed

    def find_insertion_line(self, lines: list[str], dialect: SourceDialect) -> int | None:
        """Find where a new import belongs.

        After the last import line if there is one; otherwise after the first
        blank line (the end of a leading comment block); otherwise at the end.
        """
        last_import: int | None = None
        for index, line in enumerate(lines):
            if self.classifier.is_import(line, dialect):
                last_import = index

        if last_import is not None:
            return last_import + 1

        for index, line in enumerate(lines):
            if not line.strip():
                return index + 1

        return len(lines)

    def _adjusted_cursor_line(self, source_line: int, removed: list[int]) -> int:
        if self.config.cursor_mode == CursorMode.LEGACY:
            return source_line - (len(removed) - 1)
        return source_line - sum(1 for index in removed if index < source_line)


def add_import(
    buffer: LineBuffer,
    dialect: SourceDialect,
    classifier: LineClassifier | None = None,
    config: AddImportConfig | None = None,
) -> InsertResult:
    """Run a single add-import operation on ``buffer``.

    Convenience wrapper around ImportInserter.execute().
    """
    return ImportInserter(classifier=classifier, config=config).execute(buffer, dialect)
