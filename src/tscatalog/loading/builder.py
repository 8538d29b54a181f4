"""CatalogBuilder - merges raw reader records into an immutable CatalogStore.

Structural rules enforced here (any violation aborts the build):
- Context names are non-empty
- A (context, source, form index) triple is declared at most once
- Form indices of each message are contiguous from 0
- Plural-sensitive messages carry exactly as many forms as the locale declares
- A target locale is known

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tscatalog.catalog.model import Context, Location, Message, Variant
from tscatalog.catalog.store import CatalogStore
from tscatalog.diagnostics import ErrorTemplate, MalformedCatalogError
from tscatalog.loading.records import RawContext, RawMessage, RawVariant
from tscatalog.runtime.plural_rules import PluralRule, get_plural_rule
from tscatalog.validation import validate_catalog

__all__ = ["CatalogBuilder"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _PendingMessage:
    """Mutable merge target for one (context, source) key."""

    source: str
    variants: dict[int, RawVariant] = field(default_factory=dict)
    numerus: bool = False
    locations: list[Location] = field(default_factory=list)
    comment: str | None = None
    extra_comment: str | None = None
    translator_comment: str | None = None


class CatalogBuilder:
    """Accumulates contexts from a reader, then freezes them into a store.

    A builder is single-use and not thread-safe; it is only ever touched by
    the thread performing the load, before anything is published.

    Example:
        >>> builder = CatalogBuilder()
        >>> for raw_context in reader.read(document):
        ...     builder.add_context(raw_context)
        >>> store = builder.build("it")
    """

    __slots__ = ("_contexts",)

    def __init__(self) -> None:
        self._contexts: dict[str, dict[str, _PendingMessage]] = {}

    def add_context(self, raw: RawContext) -> None:
        """Merge a context block; repeated context names share one bucket.

        Raises:
            MalformedCatalogError: Empty context name or duplicate message form
        """
        if not raw.name.strip():
            raise MalformedCatalogError(ErrorTemplate.empty_context_name())

        bucket = self._contexts.setdefault(raw.name, {})
        for record in raw.messages:
            self._merge(raw.name, bucket, record)

    @staticmethod
    def _merge(context: str, bucket: dict[str, _PendingMessage], record: RawMessage) -> None:
        pending = bucket.get(record.source)
        if pending is None:
            pending = bucket[record.source] = _PendingMessage(source=record.source)
        elif not record.variants or not pending.variants:
            raise MalformedCatalogError(ErrorTemplate.duplicate_message(context, record.source, 0))

        for variant in record.variants:
            if variant.index in pending.variants:
                raise MalformedCatalogError(
                    ErrorTemplate.duplicate_message(context, record.source, variant.index)
                )
            pending.variants[variant.index] = variant

        pending.numerus = pending.numerus or record.numerus
        pending.locations.extend(record.locations)
        pending.comment = pending.comment or record.comment
        pending.extra_comment = pending.extra_comment or record.extra_comment
        pending.translator_comment = pending.translator_comment or record.translator_comment

    @staticmethod
    def _freeze(context: str, pending: _PendingMessage, rule: PluralRule) -> Message:
        indices = tuple(sorted(pending.variants))
        if indices != tuple(range(len(indices))):
            raise MalformedCatalogError(ErrorTemplate.non_contiguous_forms(context, pending.source, indices))

        variants = tuple(
            Variant(index=index, template=raw.template, state=raw.state)
            for index, raw in sorted(pending.variants.items())
        )
        message = Message(
            context=context,
            source=pending.source,
            variants=variants,
            numerus=pending.numerus,
            locations=tuple(pending.locations),
            comment=pending.comment,
            extra_comment=pending.extra_comment,
            translator_comment=pending.translator_comment,
        )
        if message.is_plural and variants and len(variants) != rule.cardinality:
            raise MalformedCatalogError(
                ErrorTemplate.plural_form_count_mismatch(
                    context, pending.source, len(variants), rule.cardinality, rule.locale
                )
            )
        return message

    def build(self, locale: str | None, *, strict: bool = False) -> CatalogStore:
        """Validate accumulated records and return the immutable store.

        Args:
            locale: Target locale (required)
            strict: Treat data-quality warnings as a load failure

        Returns:
            CatalogStore for the locale

        Raises:
            MalformedCatalogError: Structural violation, missing locale, or
                (with strict=True) data-quality warnings
        """
        if not locale or not locale.strip():
            raise MalformedCatalogError(ErrorTemplate.locale_not_declared())

        rule = get_plural_rule(locale)
        contexts = tuple(
            Context(
                name=name,
                messages=tuple(self._freeze(name, pending, rule) for pending in bucket.values()),
            )
            for name, bucket in self._contexts.items()
        )

        validation = validate_catalog(
            (message for context in contexts for message in context.messages), rule
        )
        for warning in validation.warnings:
            logger.warning("Catalog %s: %s", locale, warning.format())
        if strict and not validation.is_clean:
            raise MalformedCatalogError(ErrorTemplate.strict_validation_failed(validation.warning_count))

        return CatalogStore(locale=locale, plural_rule=rule, contexts=contexts, validation=validation)
