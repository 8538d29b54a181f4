"""Immutable catalog records: Context, Message, Variant, Location.

All records are frozen slotted dataclasses created only by the catalog
builder. Nothing in the runtime mutates them, which is what makes a
published store safe for unsynchronized concurrent reads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from tscatalog.enums import VariantState

__all__ = [
    "Context",
    "Location",
    "Message",
    "MessageKey",
    "Variant",
]

MessageKey: TypeAlias = tuple[str, str]
"""(context name, source text) pair identifying a Message."""


@dataclass(frozen=True, slots=True)
class Location:
    """Origin of a message in application sources.

    Informational only; lookups never consult it.

    Attributes:
        filename: Source file the literal was extracted from (None if unknown)
        line: 1-indexed absolute line (None if the catalog gave none)
    """

    filename: str | None
    line: int | None = None

    def __str__(self) -> str:
        name = self.filename or "<unknown>"
        return f"{name}:{self.line}" if self.line is not None else name


@dataclass(frozen=True, slots=True)
class Variant:
    """One template for one plural form.

    Attributes:
        index: 0-based plural form index
        template: Template text (empty when untranslated)
        state: Completion state
    """

    index: int
    template: str
    state: VariantState = VariantState.FINISHED

    @property
    def is_usable(self) -> bool:
        """True when the variant may be shown to end users."""
        return self.state is VariantState.FINISHED and self.template != ""


@dataclass(frozen=True, slots=True)
class Message:
    """Source text and its translation variants within a context.

    Attributes:
        context: Owning context name
        source: Source text (lookup key together with context)
        variants: Variants ordered by plural form index (dense from 0)
        numerus: True when the catalog marks the message plural-sensitive
        locations: Origin annotations, in catalog order
        comment: Developer disambiguation comment (<comment>)
        extra_comment: Developer note for translators (<extracomment>)
        translator_comment: Translator's own note (<translatorcomment>)
    """

    context: str
    source: str
    variants: tuple[Variant, ...]
    numerus: bool = False
    locations: tuple[Location, ...] = ()
    comment: str | None = None
    extra_comment: str | None = None
    translator_comment: str | None = None

    @property
    def key(self) -> MessageKey:
        """(context, source) lookup key."""
        return (self.context, self.source)

    @property
    def is_plural(self) -> bool:
        """True when resolution must select among plural forms."""
        return self.numerus or len(self.variants) > 1

    @property
    def is_finished(self) -> bool:
        """True when every variant is usable (and there is at least one)."""
        return bool(self.variants) and all(v.is_usable for v in self.variants)

    def variant(self, index: int) -> Variant | None:
        """Return the variant for a form index, or None if absent."""
        if 0 <= index < len(self.variants):
            return self.variants[index]
        return None


@dataclass(frozen=True, slots=True)
class Context:
    """Named group of messages (one UI surface or subsystem).

    Attributes:
        name: Unique, non-empty context name
        messages: Messages in catalog order
    """

    name: str
    messages: tuple[Message, ...] = ()

    def __len__(self) -> int:
        return len(self.messages)
