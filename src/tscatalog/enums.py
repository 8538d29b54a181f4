"""Enumerations for tscatalog type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class VariantState(StrEnum):
    """Completion state of a translation variant.

    StrEnum provides automatic string conversion: str(VariantState.FINISHED) == "finished"
    """

    FINISHED = "finished"
    """Translator marked the variant done: <translation>text</translation>"""

    UNFINISHED = "unfinished"
    """Pending translation: <translation type="unfinished"/>"""


class ResolutionStatus(StrEnum):
    """Outcome of a catalog lookup.

    StrEnum provides automatic string conversion: str(ResolutionStatus.EXACT_MATCH) == "exact-match"
    """

    EXACT_MATCH = "exact-match"
    """Translated variant found and rendered."""

    FALLBACK_SOURCE = "fallback-source"
    """Message absent from the catalog; source text rendered instead."""

    FALLBACK_UNFINISHED = "fallback-unfinished"
    """Selected variant unfinished or empty; source text rendered instead."""

    UNKNOWN_LOCALE = "unknown-locale"
    """Plural variant selected with the universal fallback rule."""


class RuleOrigin(StrEnum):
    """Where a plural rule came from.

    StrEnum provides automatic string conversion: str(RuleOrigin.BUILTIN) == "builtin"
    """

    BUILTIN = "builtin"
    """Shipped rule table (Qt numerus ordering)."""

    CUSTOM = "custom"
    """Registered at runtime via register_plural_rule()."""

    CLDR = "cldr"
    """Derived from Babel's CLDR plural data."""

    FALLBACK = "fallback"
    """Universal two-form rule for locales nobody knows."""


__all__ = [
    "ResolutionStatus",
    "RuleOrigin",
    "VariantState",
]
