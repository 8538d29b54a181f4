"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup conditions (recoverable, reported with fallback text)
        2000-2999: Rendering conditions (placeholder substitution)
        3000-3999: Load errors (fatal, no catalog published)
    """

    # Lookup conditions (1000-1999)
    MESSAGE_NOT_FOUND = 1001
    UNFINISHED_TRANSLATION = 1002
    MISSING_CARDINALITY = 1003
    UNKNOWN_LOCALE = 1004

    # Rendering conditions (2000-2999)
    ARGUMENT_COUNT_MISMATCH = 2001

    # Load errors (3000-3999)
    TRUNCATED_DOCUMENT = 3001
    INVALID_XML = 3002
    UNEXPECTED_ELEMENT = 3003
    EMPTY_CONTEXT_NAME = 3004
    DUPLICATE_MESSAGE = 3005
    NON_CONTIGUOUS_FORMS = 3006
    PLURAL_FORM_COUNT_MISMATCH = 3007
    LOCALE_NOT_DECLARED = 3008
    SOURCE_TOO_LARGE = 3009
    INVALID_RECORD = 3010
    STRICT_VALIDATION_FAILED = 3011
    INVALID_BYTE_ESCAPE = 3012
    MESSAGE_WITHOUT_SOURCE = 3013


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        line: Document line (1-indexed) for load errors
        column: Document column (1-indexed) for load errors
        context: Catalog context name the diagnostic refers to
        source: Source text of the message the diagnostic refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    line: int | None = None
    column: int | None = None
    context: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DUPLICATE_MESSAGE]: Duplicate message 'Open' in context 'MainWindow'
              --> line 42, column 5
              = help: Merge the entries or remove one of them

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
