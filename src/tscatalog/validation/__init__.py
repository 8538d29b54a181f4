"""Catalog data-quality validation.

Python 3.13+.
"""

from .catalog import IDENTICAL_TO_SOURCE, PLACEHOLDER_MISMATCH, UNKNOWN_LOCALE, validate_catalog

__all__ = [
    "IDENTICAL_TO_SOURCE",
    "PLACEHOLDER_MISMATCH",
    "UNKNOWN_LOCALE",
    "validate_catalog",
]
