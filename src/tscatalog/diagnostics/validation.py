"""Data-quality findings produced while loading a catalog.

Warnings never block a regular load; they are attached to the resulting
store and logged. A strict load turns any warning into a load failure.

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured data-quality warning.

    Attributes:
        code: Warning code (e.g., "placeholder-mismatch", "identical-to-source")
        message: Human-readable warning message
        context: Context name the warning refers to (if any)
        source: Source text of the affected message (if any)
    """

    code: str
    message: str
    context: str | None = None
    source: str | None = None

    def format(self) -> str:
        """Format warning as a single line."""
        where = f" ({self.context})" if self.context else ""
        return f"[{self.code}]{where}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable collection of data-quality warnings for one catalog.

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_clean
        True
        >>> result.warning_count
        0
    """

    warnings: tuple[ValidationWarning, ...]

    @property
    def is_clean(self) -> bool:
        """True when no warnings were found."""
        return not self.warnings

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    def by_code(self, code: str) -> tuple[ValidationWarning, ...]:
        """Return warnings with the given code, in catalog order."""
        return tuple(w for w in self.warnings if w.code == code)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a result with no warnings."""
        return ValidationResult(warnings=())
