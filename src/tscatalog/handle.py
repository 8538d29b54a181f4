"""CatalogHandle - the published, swappable reference to a loaded catalog.

Readers never lock: each lookup reads the handle's current engine once and
works against that immutable snapshot for the whole call. Reload builds a
complete new store first and only then rebinds the reference, so a reader
sees either the old catalog or the new one, never a mixture. A lock
serializes concurrent reloads against each other; it is never taken on the
lookup path.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from threading import Lock
from typing import Any

from tscatalog.catalog.store import CatalogStore
from tscatalog.loading import TSDocument, load_store, load_store_from_mapping
from tscatalog.runtime.engine import LookupEngine, ResolvedText

__all__ = ["CatalogHandle", "load", "load_mapping", "resolve"]

logger = logging.getLogger(__name__)


class CatalogHandle:
    """Atomic handle to a published CatalogStore.

    Thread Safety:
        resolve() and tr() are lock-free and safe from any number of threads.
        reload() may run concurrently with lookups and with other reloads.

    Example:
        >>> handle = load(document)
        >>> handle.tr("BitcoinGUI", "%n active connection(s) to Bitcoin network", count=1)
        '1 connessione attiva alla rete Bitcoin'
        >>> handle.reload(updated_document)
    """

    __slots__ = ("_engine", "_reload_lock")

    def __init__(self, store: CatalogStore) -> None:
        """Publish a store.

        Args:
            store: Fully built catalog store
        """
        self._engine = LookupEngine(store)
        self._reload_lock = Lock()

    @property
    def store(self) -> CatalogStore:
        """Currently published store (read-only snapshot)."""
        return self._engine.store

    @property
    def locale(self) -> str:
        """Locale of the currently published store."""
        return self._engine.store.locale

    def resolve(
        self,
        context: str,
        source: str,
        count: int | None = None,
        args: Sequence[object] = (),
    ) -> ResolvedText:
        """Resolve a message against the current store.

        Args:
            context: Context name
            source: Source text
            count: Quantity for plural selection and %n (optional)
            args: Positional arguments for %1..%99

        Returns:
            ResolvedText; never raises for missing or unfinished entries
        """
        return self._engine.resolve(context, source, count, args)

    def tr(self, context: str, source: str, *args: object, count: int | None = None) -> str:
        """Resolve a message and return only the text.

        Example:
            >>> handle.tr("AddressBookPage", "Could not write to file %1.", "a.csv")
            'Impossibile scrivere sul file a.csv.'
        """
        return self._engine.resolve(context, source, count, args).text

    def publish(self, store: CatalogStore) -> None:
        """Atomically replace the published store with an already built one."""
        with self._reload_lock:
            previous = self._engine.store
            self._engine = LookupEngine(store)
        logger.info(
            "Catalog swapped: %s (%d messages) -> %s (%d messages)",
            previous.locale,
            len(previous),
            store.locale,
            len(store),
        )

    def reload(
        self,
        document: TSDocument,
        *,
        locale: str | None = None,
        strict: bool = False,
        max_source_size: int | None = None,
    ) -> None:
        """Load a new .ts document and swap it in.

        The current store stays published if loading fails.

        Args:
            document: Document text, bytes, or readable file object
            locale: Target locale (default: the document's language attribute)
            strict: Treat data-quality warnings as a load failure
            max_source_size: Maximum document size (default: MAX_SOURCE_SIZE)

        Raises:
            MalformedCatalogError: Structural violation
            TruncatedCatalogError: Input ended mid-record
        """
        store = load_store(document, locale=locale, strict=strict, max_source_size=max_source_size)
        self.publish(store)

    def reload_mapping(
        self,
        tree: Mapping[str, Any],
        *,
        locale: str | None = None,
        strict: bool = False,
    ) -> None:
        """Load a new mapping catalog and swap it in.

        Raises:
            MalformedCatalogError: Structural violation or wrong value types
            TruncatedCatalogError: Record missing a required key
        """
        self.publish(load_store_from_mapping(tree, locale=locale, strict=strict))

    def __repr__(self) -> str:
        store = self._engine.store
        return f"CatalogHandle(locale={store.locale!r}, messages={len(store)})"


def load(
    document: TSDocument,
    *,
    locale: str | None = None,
    strict: bool = False,
    max_source_size: int | None = None,
) -> CatalogHandle:
    """Load a Qt Linguist .ts document and publish it behind a handle.

    Args:
        document: Document text, bytes, or readable file object
        locale: Target locale (default: the document's language attribute)
        strict: Treat data-quality warnings as a load failure
        max_source_size: Maximum document size (default: MAX_SOURCE_SIZE, 0 disables)

    Returns:
        CatalogHandle for the loaded catalog

    Raises:
        MalformedCatalogError: Structural violation
        TruncatedCatalogError: Input ended mid-record

    Example:
        >>> with open("bitcoin_it.ts", "rb") as f:
        ...     handle = load(f)
        >>> handle.locale
        'it'
    """
    return CatalogHandle(
        load_store(document, locale=locale, strict=strict, max_source_size=max_source_size)
    )


def load_mapping(
    tree: Mapping[str, Any],
    *,
    locale: str | None = None,
    strict: bool = False,
) -> CatalogHandle:
    """Load a catalog from a mapping tree (e.g. decoded JSON).

    Raises:
        MalformedCatalogError: Structural violation or wrong value types
        TruncatedCatalogError: Record missing a required key
    """
    return CatalogHandle(load_store_from_mapping(tree, locale=locale, strict=strict))


def resolve(
    handle: CatalogHandle,
    context: str,
    source: str,
    count: int | None = None,
    args: Sequence[object] = (),
) -> ResolvedText:
    """Resolve a message through a handle.

    Equivalent to ``handle.resolve(context, source, count, args)``.
    """
    return handle.resolve(context, source, count, args)
