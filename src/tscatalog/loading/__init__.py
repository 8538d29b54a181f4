"""Catalog loading: readers produce raw records, the builder freezes them.

Python 3.13+.
"""

from .builder import CatalogBuilder
from .loader import load_store, load_store_from_mapping
from .mapping_reader import read_mapping
from .records import RawContext, RawMessage, RawVariant
from .ts_reader import TSDocument, TSReader

__all__ = [
    "CatalogBuilder",
    "RawContext",
    "RawMessage",
    "RawVariant",
    "TSDocument",
    "TSReader",
    "load_store",
    "load_store_from_mapping",
    "read_mapping",
]
