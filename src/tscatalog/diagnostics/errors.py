"""Catalog exception hierarchy with structured diagnostics.

Two families share the CatalogError root:

- LoadError and subclasses are raised by the loader. They abort the load,
  so no partially built catalog ever becomes visible.
- ResolutionError and subclasses are never raised by lookups. The engine
  collects them into ResolvedText.errors next to a best-effort string.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CatalogError(Exception):
    """Base exception for all catalog errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LoadError(CatalogError):
    """Catalog document could not be turned into a store."""


class MalformedCatalogError(LoadError):
    """Structural violation in the catalog document.

    Examples:
    - Invalid XML or unexpected element nesting
    - Empty context name
    - Duplicate (context, source) pair
    - Plural form indices with gaps, or a count that disagrees with the locale
    """


class TruncatedCatalogError(LoadError):
    """Input ended in the middle of a record."""


class ResolutionError(CatalogError):
    """Recoverable condition met while resolving a lookup.

    Fallback: the lookup still returns renderable text.
    """


class MessageNotFoundError(ResolutionError):
    """No message for the (context, source) pair.

    Fallback: source text rendered with the caller's arguments.
    """


class UnfinishedTranslationError(ResolutionError):
    """Selected variant is unfinished or empty.

    Fallback: source text rendered with the caller's arguments.
    """


class MissingCardinalityError(ResolutionError):
    """Plural-sensitive message resolved without a count.

    Fallback: variant 0 is used.
    """


class UnknownLocaleError(ResolutionError):
    """Catalog locale has no plural rule; the universal two-form rule was used."""


class ArgumentCountMismatchError(ResolutionError):
    """Template references a placeholder with no supplied argument.

    Fallback: the marker is left verbatim in the output.

    Attributes:
        marker: The marker text as it appears in the template (e.g. "%3")
        supplied: Number of arguments the caller passed
    """

    def __init__(self, message: str | Diagnostic, *, marker: str = "", supplied: int = 0) -> None:
        """Initialize ArgumentCountMismatchError.

        Args:
            message: Error message string OR Diagnostic object
            marker: Marker left unsubstituted
            supplied: Number of arguments supplied
        """
        super().__init__(message)
        self.marker = marker
        self.supplied = supplied
