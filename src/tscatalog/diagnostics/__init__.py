"""Diagnostic system for catalog errors.

Provides structured error diagnostics with codes, locations and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArgumentCountMismatchError,
    CatalogError,
    LoadError,
    MalformedCatalogError,
    MessageNotFoundError,
    MissingCardinalityError,
    ResolutionError,
    TruncatedCatalogError,
    UnfinishedTranslationError,
    UnknownLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult, ValidationWarning

__all__ = [
    "ArgumentCountMismatchError",
    "CatalogError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LoadError",
    "MalformedCatalogError",
    "MessageNotFoundError",
    "MissingCardinalityError",
    "OutputFormat",
    "ResolutionError",
    "TruncatedCatalogError",
    "UnfinishedTranslationError",
    "UnknownLocaleError",
    "ValidationResult",
    "ValidationWarning",
]
