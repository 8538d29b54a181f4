"""Catalog data model and immutable message store.

Python 3.13+. Zero external dependencies.
"""

from .model import Context, Location, Message, MessageKey, Variant
from .store import CatalogStatistics, CatalogStore

__all__ = [
    "CatalogStatistics",
    "CatalogStore",
    "Context",
    "Location",
    "Message",
    "MessageKey",
    "Variant",
]
