"""Lookup engine: (context, source, count, args) -> ResolvedText.

The engine is stateless per call. It reads an immutable CatalogStore and
never raises for query-time conditions: every lookup produces renderable
text, and whatever went wrong is returned next to it.

Resolution order:
1. Absent message: render the source text (FALLBACK_SOURCE)
2. Plural-sensitive message: select the form with the store's plural rule;
   without a count use form 0 and report MissingCardinalityError
3. Unfinished or empty form: render the source text (FALLBACK_UNFINISHED)
4. Otherwise render the selected form (EXACT_MATCH, or UNKNOWN_LOCALE when
   the form was chosen by the two-form fallback rule)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tscatalog.catalog.store import CatalogStore
from tscatalog.diagnostics import (
    ErrorTemplate,
    MessageNotFoundError,
    MissingCardinalityError,
    ResolutionError,
    UnfinishedTranslationError,
    UnknownLocaleError,
)
from tscatalog.enums import ResolutionStatus
from tscatalog.runtime.placeholders import render

__all__ = ["LookupEngine", "ResolvedText"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedText:
    """Outcome of a lookup.

    Attributes:
        text: Rendered text (never empty unless the source text is empty)
        status: Which branch of resolution produced the text
        errors: Query-time conditions met along the way, in detection order
    """

    text: str
    status: ResolutionStatus
    errors: tuple[ResolutionError, ...] = ()

    @property
    def is_exact(self) -> bool:
        """True when the text came from a finished translation."""
        return self.status is ResolutionStatus.EXACT_MATCH

    def __str__(self) -> str:
        return self.text


class LookupEngine:
    """Resolves messages against one published CatalogStore.

    Holds no mutable state, so one engine may serve any number of threads.

    Example:
        >>> engine = LookupEngine(store)
        >>> result = engine.resolve(
        ...     "BitcoinGUI", "%n active connection(s) to Bitcoin network", count=5
        ... )
        >>> result.text
        '5 connessioni attive alla rete Bitcoin'
        >>> result.status
        <ResolutionStatus.EXACT_MATCH: 'exact-match'>
    """

    __slots__ = ("_store",)

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    @property
    def store(self) -> CatalogStore:
        """Store this engine reads (read-only)."""
        return self._store

    def resolve(
        self,
        context: str,
        source: str,
        count: int | None = None,
        args: Sequence[object] = (),
    ) -> ResolvedText:
        """Resolve and render a message.

        Args:
            context: Context name
            source: Source text as written in application code
            count: Quantity for plural selection and %n (optional)
            args: Positional arguments for %1..%99

        Returns:
            ResolvedText with text, status and collected errors
        """
        store = self._store
        message = store.find_message(context, source)
        if message is None:
            logger.debug("No translation for %r in context '%s'", source, context)
            return self._render(
                source,
                args,
                count,
                ResolutionStatus.FALLBACK_SOURCE,
                [MessageNotFoundError(ErrorTemplate.message_not_found(context, source))],
            )

        errors: list[ResolutionError] = []
        status = ResolutionStatus.EXACT_MATCH
        index = 0
        if message.is_plural:
            rule = store.plural_rule
            if count is None:
                logger.debug("Plural message %r in '%s' resolved without a count", source, context)
                errors.append(MissingCardinalityError(ErrorTemplate.missing_cardinality(context, source)))
            else:
                index = rule.select(count)
                if rule.is_fallback:
                    status = ResolutionStatus.UNKNOWN_LOCALE
                    errors.append(UnknownLocaleError(ErrorTemplate.unknown_locale(rule.locale)))

        variant = message.variant(index)
        if variant is None or not variant.is_usable:
            logger.debug("Form %d of %r in '%s' is unfinished", index, source, context)
            errors.append(
                UnfinishedTranslationError(ErrorTemplate.unfinished_translation(context, source, index))
            )
            return self._render(source, args, count, ResolutionStatus.FALLBACK_UNFINISHED, errors)

        return self._render(variant.template, args, count, status, errors)

    def _render(
        self,
        template: str,
        args: Sequence[object],
        count: int | None,
        status: ResolutionStatus,
        errors: list[ResolutionError],
    ) -> ResolvedText:
        text, render_errors = render(template, args, count=count, locale=self._store.locale)
        return ResolvedText(text=text, status=status, errors=(*errors, *render_errors))
