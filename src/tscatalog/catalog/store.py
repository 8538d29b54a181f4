"""CatalogStore - immutable indexed collection of catalog messages.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from tscatalog.catalog.model import Context, Message, MessageKey
from tscatalog.diagnostics import ValidationResult, ValidationWarning

if TYPE_CHECKING:
    from tscatalog.runtime.plural_rules import PluralRule

__all__ = ["CatalogStatistics", "CatalogStore"]


@dataclass(frozen=True, slots=True)
class CatalogStatistics:
    """Message counts in the style of lrelease's summary line.

    Attributes:
        total: Number of messages
        finished: Messages whose every variant is usable
        unfinished: Messages with at least one unfinished or empty variant
        plural: Plural-sensitive messages
    """

    total: int
    finished: int
    unfinished: int
    plural: int

    def __str__(self) -> str:
        return f"{self.total} translation(s) ({self.finished} finished and {self.unfinished} unfinished)"


class CatalogStore:
    """Read-only message index for one locale.

    Built once by the loader; no method mutates it afterwards, so any number
    of threads may read it without locking.

    Example:
        >>> store = handle.store
        >>> store.contexts()
        ('AboutDialog', 'AddressBookPage', ...)
        >>> store.find_message("BitcoinGUI", "&Options...").variants[0].template
        '&Opzioni...'
    """

    __slots__ = ("_contexts", "_index", "_locale", "_plural_rule", "_validation")

    def __init__(
        self,
        locale: str,
        plural_rule: PluralRule,
        contexts: tuple[Context, ...],
        validation: ValidationResult | None = None,
    ) -> None:
        """Index contexts by name and messages by (context, source).

        Args:
            locale: Target locale of the catalog
            plural_rule: Rule the catalog was validated against
            contexts: Contexts in catalog order (names unique)
            validation: Data-quality findings from the load

        Raises:
            ValueError: If context names or message keys repeat
        """
        context_index: dict[str, Context] = {}
        message_index: dict[MessageKey, Message] = {}
        for context in contexts:
            if context.name in context_index:
                msg = f"Duplicate context name: '{context.name}'"
                raise ValueError(msg)
            context_index[context.name] = context
            for message in context.messages:
                if message.key in message_index:
                    msg = f"Duplicate message key: {message.key!r}"
                    raise ValueError(msg)
                message_index[message.key] = message

        self._locale = locale
        self._plural_rule = plural_rule
        self._contexts: Mapping[str, Context] = MappingProxyType(context_index)
        self._index: Mapping[MessageKey, Message] = MappingProxyType(message_index)
        self._validation = validation if validation is not None else ValidationResult.valid()

    @property
    def locale(self) -> str:
        """Target locale code (read-only)."""
        return self._locale

    @property
    def plural_rule(self) -> PluralRule:
        """Plural rule for the catalog locale (read-only)."""
        return self._plural_rule

    @property
    def validation(self) -> ValidationResult:
        """Data-quality findings recorded at load time (read-only)."""
        return self._validation

    @property
    def warnings(self) -> tuple[ValidationWarning, ...]:
        """Data-quality warnings recorded at load time."""
        return self._validation.warnings

    def find_message(self, context: str, source: str) -> Message | None:
        """Look up a message by (context, source) in O(1).

        Returns:
            The Message, or None if the catalog has no such entry
        """
        return self._index.get((context, source))

    def contexts(self) -> tuple[str, ...]:
        """Context names in catalog order."""
        return tuple(self._contexts)

    def get_context(self, name: str) -> Context | None:
        """Return a context by name, or None."""
        return self._contexts.get(name)

    def messages(self) -> Iterator[Message]:
        """Iterate over all messages in catalog order."""
        for context in self._contexts.values():
            yield from context.messages

    def statistics(self) -> CatalogStatistics:
        """Count finished, unfinished and plural messages."""
        total = finished = plural = 0
        for message in self.messages():
            total += 1
            if message.is_finished:
                finished += 1
            if message.is_plural:
                plural += 1
        return CatalogStatistics(total=total, finished=finished, unfinished=total - finished, plural=plural)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"CatalogStore(locale={self._locale!r}, contexts={len(self._contexts)}, messages={len(self._index)})"
