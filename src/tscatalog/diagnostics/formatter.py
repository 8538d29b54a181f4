"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to keep log lines bounded
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.message_not_found("MainWindow", "Quit")
        >>> print(formatter.format(diagnostic))
        error[MESSAGE_NOT_FOUND]: Message 'Quit' not found in context 'MainWindow'
          = context: MainWindow
          = help: Regenerate the catalog from current sources

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MESSAGE_NOT_FOUND: Message 'Quit' not found in context 'MainWindow'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a ValidationResult with a summary line and one line per warning.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        if not result.warnings:
            return "Validation passed: no warnings"

        parts = [f"Validation found {result.warning_count} warning(s):"]
        for warning in result.warnings:
            parts.append(f"  {self._maybe_sanitize(warning.format())}")
        return "\n".join(parts)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[DUPLICATE_MESSAGE]: Duplicate message 'Open' in context 'MainWindow'
              --> line 42, column 5
              = help: Merge the entries or remove one of them
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.line is not None:
            location = f"  --> line {diagnostic.line}"
            if diagnostic.column is not None:
                location += f", column {diagnostic.column}"
            parts.append(location)

        if diagnostic.context is not None:
            parts.append(f"  = context: {diagnostic.context}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            MESSAGE_NOT_FOUND: Message 'Quit' not found in context 'MainWindow'
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MESSAGE_NOT_FOUND", "code_value": 1001, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.line is not None:
            data["line"] = diagnostic.line
        if diagnostic.column is not None:
            data["column"] = diagnostic.column
        if diagnostic.context is not None:
            data["context"] = diagnostic.context
        if diagnostic.source is not None:
            data["source"] = self._maybe_sanitize(diagnostic.source)
        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
