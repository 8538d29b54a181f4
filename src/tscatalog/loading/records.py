"""Raw records passed from catalog readers to the catalog builder.

Readers (Qt Linguist XML, plain mappings) translate their input into these
records; the builder merges, validates and freezes them. Records carry no
behavior.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from tscatalog.catalog.model import Location
from tscatalog.enums import VariantState

__all__ = ["RawContext", "RawMessage", "RawVariant"]


@dataclass(frozen=True, slots=True)
class RawVariant:
    """Variant as read, before contiguity checks."""

    index: int
    template: str
    state: VariantState = VariantState.FINISHED


@dataclass(frozen=True, slots=True)
class RawMessage:
    """One message entry as read; repeated entries for a key are merged later."""

    source: str
    variants: tuple[RawVariant, ...] = ()
    numerus: bool = False
    locations: tuple[Location, ...] = ()
    comment: str | None = None
    extra_comment: str | None = None
    translator_comment: str | None = None


@dataclass(frozen=True, slots=True)
class RawContext:
    """One context block as read, with its message entries in order."""

    name: str
    messages: tuple[RawMessage, ...] = ()
