"""addimport — move import/include lines into a source file's import block."""

from addimport.editing import (
    ImportInserter,
    InsertOutcome,
    InsertResult,
    LineBuffer,
    SourceDialect,
    add_import,
    is_valid_import,
)

__version__ = "0.1.0"

__all__ = [
    "ImportInserter",
    "InsertOutcome",
    "InsertResult",
    "LineBuffer",
    "SourceDialect",
    "__version__",
    "add_import",
    "is_valid_import",
]
