"""tscatalog - Qt Linguist translation catalogs with plural-aware lookup.

Loads .ts catalogs once into an immutable store and resolves messages keyed
by (context, source text), selecting plural forms with locale rules and
substituting %1..%99 / %n placeholders without touching embedded markup.

Public API:
    load - Load a .ts document into a CatalogHandle
    load_mapping - Load a catalog from a mapping tree (e.g. decoded JSON)
    resolve - Resolve a message through a handle
    CatalogHandle - Published catalog reference with lock-free lookups
    ResolvedText - Rendered text plus status and collected errors
    ResolutionStatus - exact-match / fallback-source / fallback-unfinished / unknown-locale

Exceptions:
    CatalogError - Base exception class
    LoadError - Load failures (MalformedCatalogError, TruncatedCatalogError)
    ResolutionError - Query-time conditions, returned rather than raised

Submodules:
    tscatalog.catalog - Data model and CatalogStore
    tscatalog.loading - .ts and mapping readers, CatalogBuilder
    tscatalog.runtime - Plural rules, placeholder rendering, LookupEngine
    tscatalog.diagnostics - Error types, diagnostic codes and formatting
    tscatalog.validation - Data-quality checks run at load time
"""

from .diagnostics import (
    CatalogError,
    LoadError,
    MalformedCatalogError,
    ResolutionError,
    TruncatedCatalogError,
)
from .enums import ResolutionStatus
from .handle import CatalogHandle, load, load_mapping, resolve
from .runtime import ResolvedText, register_plural_rule, select_form

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("tscatalog")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogError",
    "CatalogHandle",
    "LoadError",
    "MalformedCatalogError",
    "ResolutionError",
    "ResolutionStatus",
    "ResolvedText",
    "TruncatedCatalogError",
    "__version__",
    "load",
    "load_mapping",
    "register_plural_rule",
    "resolve",
    "select_form",
]
