"""addimport editing — import classification and placement in line buffers.

Public API for editing module.
"""

from addimport.editing.classifier import LineClassifier, RegexImportClassifier, is_valid_import
from addimport.editing.cli import add_command, check_command
from addimport.editing.files import (
    AddImportError,
    BufferLoadError,
    dialect_for_content_type,
    dialect_for_path,
    load_buffer,
    render_diff,
    save_buffer,
)
from addimport.editing.inserter import ImportInserter, add_import
from addimport.editing.models import (
    InsertOutcome,
    InsertResult,
    LineBuffer,
    SourceDialect,
    TextPosition,
    TextRange,
)

__all__ = [
    "AddImportError",
    "BufferLoadError",
    "ImportInserter",
    "InsertOutcome",
    "InsertResult",
    "LineBuffer",
    "LineClassifier",
    "RegexImportClassifier",
    "SourceDialect",
    "TextPosition",
    "TextRange",
    "add_command",
    "add_import",
    "check_command",
    "dialect_for_content_type",
    "dialect_for_path",
    "is_valid_import",
    "load_buffer",
    "render_diff",
    "save_buffer",
]
