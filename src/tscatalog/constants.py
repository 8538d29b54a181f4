"""Shared constants for tscatalog.

This module provides centralized configuration constants used across
the loading and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Placeholder limits: Marker syntax bounds
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    "READ_CHUNK_SIZE",
    # Placeholder limits
    "MAX_PLACEHOLDER_INDEX",
    # Plural rule limits
    "RULE_PROBE_LIMIT",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Qt Linguist vocabulary
    "TS_ROOT_ELEMENT",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum catalog document size in bytes (10 MB).
# Prevents unbounded memory allocation from oversized catalog files.
# A full desktop application catalog is typically well under 1 MB.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Bytes fed to the incremental XML parser per step when reading file objects.
READ_CHUNK_SIZE: int = 64 * 1024

# ============================================================================
# PLACEHOLDER LIMITS
# ============================================================================

# Highest positional marker recognized by the substitutor (%1 .. %99).
# Markers carry at most two digits, matching QString::arg().
MAX_PLACEHOLDER_INDEX: int = 99

# ============================================================================
# PLURAL RULE LIMITS
# ============================================================================

# Custom plural rules are checked over 0..RULE_PROBE_LIMIT at registration.
# Covers every mod-10 and mod-100 class used by known rule families.
RULE_PROBE_LIMIT: int = 1000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel locales and CLDR-derived plural rules.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# QT LINGUIST VOCABULARY
# ============================================================================

TS_ROOT_ELEMENT: str = "TS"
