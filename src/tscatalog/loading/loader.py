"""Catalog loading entry points: document in, CatalogStore out.

Both entry points run the reader to completion and validate everything
before returning. On any error nothing is returned, so callers can never
observe a partially loaded catalog.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from tscatalog.catalog.store import CatalogStore
from tscatalog.diagnostics import LoadError
from tscatalog.loading.builder import CatalogBuilder
from tscatalog.loading.mapping_reader import read_mapping
from tscatalog.loading.records import RawContext
from tscatalog.loading.ts_reader import TSDocument, TSReader

__all__ = ["load_store", "load_store_from_mapping"]

logger = logging.getLogger(__name__)


def _build(contexts: Iterable[RawContext], locale: str | None, strict: bool) -> CatalogStore:
    builder = CatalogBuilder()
    for raw_context in contexts:
        builder.add_context(raw_context)
    return builder.build(locale, strict=strict)


def load_store(
    document: TSDocument,
    *,
    locale: str | None = None,
    strict: bool = False,
    max_source_size: int | None = None,
) -> CatalogStore:
    """Load a Qt Linguist .ts document into an immutable store.

    Args:
        document: Document text, bytes, or readable file object
        locale: Target locale; overrides the document's language attribute
        strict: Treat data-quality warnings as a load failure
        max_source_size: Maximum document size (default: MAX_SOURCE_SIZE, 0 disables)

    Returns:
        CatalogStore

    Raises:
        MalformedCatalogError: Structural violation
        TruncatedCatalogError: Input ended mid-record
    """
    reader = TSReader(max_source_size=max_source_size)
    builder = CatalogBuilder()
    try:
        for raw_context in reader.read(document):
            builder.add_context(raw_context)
        store = builder.build(locale or reader.language, strict=strict)
    except LoadError as e:
        logger.error("Failed to load catalog: %s", e)
        raise

    if locale and reader.language and locale != reader.language:
        logger.info("Catalog declares language %s; loading as %s", reader.language, locale)
    logger.info("Loaded catalog for locale %s: %s", store.locale, store.statistics())
    return store


def load_store_from_mapping(
    tree: Mapping[str, Any],
    *,
    locale: str | None = None,
    strict: bool = False,
) -> CatalogStore:
    """Load a mapping tree (see tscatalog.loading.mapping_reader) into a store.

    Args:
        tree: Catalog mapping, e.g. decoded JSON
        locale: Target locale; overrides the tree's "language" key
        strict: Treat data-quality warnings as a load failure

    Returns:
        CatalogStore

    Raises:
        MalformedCatalogError: Structural violation or wrong value types
        TruncatedCatalogError: Record missing a required key
    """
    try:
        language, contexts = read_mapping(tree)
        store = _build(contexts, locale or language, strict)
    except LoadError as e:
        logger.error("Failed to load catalog mapping: %s", e)
        raise

    logger.info("Loaded catalog for locale %s: %s", store.locale, store.statistics())
    return store
