"""Catalog runtime: plural selection, placeholder rendering and lookup.

Python 3.13+.
"""

from .engine import LookupEngine, ResolvedText
from .placeholders import find_markers, render
from .plural_rules import (
    PluralRule,
    get_plural_rule,
    register_plural_rule,
    select_form,
    unregister_plural_rule,
)

__all__ = [
    "LookupEngine",
    "PluralRule",
    "ResolvedText",
    "find_markers",
    "get_plural_rule",
    "register_plural_rule",
    "render",
    "select_form",
    "unregister_plural_rule",
]
