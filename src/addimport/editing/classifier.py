"""Import line classification.

Line-level regular expressions stand in for a grammar: the inserter only
needs to know whether a line plausibly declares a dependency. Commented-out
imports match too.
"""

import re
from typing import Protocol

from addimport.editing.models import SourceDialect

# #import "Foo.h", #include <stdio.h>
C_INCLUDE_PATTERN = re.compile(r'.*#.*(import|include).*[",<].*[",>]')
# @import Foundation;
OBJC_MODULE_IMPORT_PATTERN = re.compile(r".*@.*(import).*.;")
# import Foundation
SWIFT_IMPORT_PATTERN = re.compile(r".*(import) +.*.")

DIALECT_PATTERNS: dict[SourceDialect, tuple[re.Pattern[str], ...]] = {
    SourceDialect.C_FAMILY: (C_INCLUDE_PATTERN, OBJC_MODULE_IMPORT_PATTERN),
    SourceDialect.SWIFT_FAMILY: (SWIFT_IMPORT_PATTERN,),
}


class LineClassifier(Protocol):
    """Decides whether a line is an import statement for a dialect."""

    def is_import(self, text: str, dialect: SourceDialect) -> bool: ...


class RegexImportClassifier:
    """Classifier backed by per-dialect regular expressions.

    A line is an import if any pattern for the dialect matches anywhere in it.
    """

    def __init__(
        self,
        patterns: dict[SourceDialect, tuple[re.Pattern[str], ...]] | None = None,
    ) -> None:
        self.patterns = patterns if patterns is not None else DIALECT_PATTERNS

    def is_import(self, text: str, dialect: SourceDialect) -> bool:
        return any(pattern.search(text) for pattern in self.patterns.get(dialect, ()))


_default_classifier = RegexImportClassifier()


def is_valid_import(text: str, dialect: SourceDialect) -> bool:
    """Check a trimmed line against the default import patterns.

    Args:
        text: Line content, trimmed at both ends
        dialect: Grammar to match against

    Returns:
        True if at least one pattern for the dialect matches
    """
    return _default_classifier.is_import(text, dialect)
