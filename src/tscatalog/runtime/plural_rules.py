"""Plural form selection with a per-locale rule registry.

Maps a cardinal quantity to the 0-based index of the plural form a catalog
stores for it. Form order follows Qt Linguist numerus ordering, so index 0 is
always the form Qt tools write first for the language.

Rule sources, in lookup order:
1. Rules registered at runtime with register_plural_rule()
2. Built-in rule families (Qt numerus table)
3. Rules derived from Babel's CLDR data (categories ordered
   zero, one, two, few, many, other)
4. Universal two-form fallback (n == 1 selects form 0)

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from babel.core import UnknownLocaleError as BabelUnknownLocaleError

from tscatalog.constants import MAX_LOCALE_CACHE_SIZE, RULE_PROBE_LIMIT
from tscatalog.enums import RuleOrigin
from tscatalog.locale_utils import get_babel_locale, language_subtag, normalize_locale

__all__ = [
    "PluralRule",
    "get_plural_rule",
    "register_plural_rule",
    "select_form",
    "unregister_plural_rule",
]

logger = logging.getLogger(__name__)

RuleFunction: TypeAlias = Callable[[int], int]
"""Maps a non-negative integer to a plural form index."""


@dataclass(frozen=True, slots=True)
class PluralRule:
    """Plural rule bound to a locale.

    Attributes:
        locale: Locale code the rule was looked up for
        cardinality: Number of plural forms the locale declares
        func: Rule function over non-negative integers
        origin: Where the rule came from
    """

    locale: str
    cardinality: int
    func: RuleFunction
    origin: RuleOrigin = RuleOrigin.BUILTIN

    @property
    def is_fallback(self) -> bool:
        """True when no real rule was known for the locale."""
        return self.origin is RuleOrigin.FALLBACK

    def select(self, n: int) -> int:
        """Select the form index for n (negative quantities select by magnitude)."""
        return self.func(abs(n))


# ============================================================================
# BUILT-IN RULE FUNCTIONS
# ============================================================================


def _one_form(_n: int) -> int:
    return 0


def _english_style(n: int) -> int:
    return 0 if n == 1 else 1


def _french_style(n: int) -> int:
    return 0 if n < 2 else 1


def _icelandic(n: int) -> int:
    return 0 if n % 10 == 1 and n % 100 != 11 else 1


def _macedonian(n: int) -> int:
    return 0 if n % 10 == 1 else 1


def _latvian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n != 0:
        return 1
    return 2


def _irish(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _lithuanian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n % 10 >= 2 and not 10 <= n % 100 < 20:
        return 1
    return 2


def _russian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and not 10 <= n % 100 < 20:
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and not 10 <= n % 100 < 20:
        return 1
    return 2


def _romanian(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 <= n % 100 <= 19:
        return 1
    return 2


def _slovenian(n: int) -> int:
    match n % 100:
        case 1:
            return 0
        case 2:
            return 1
        case 3 | 4:
            return 2
        case _:
            return 3


def _hebrew(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2


def _welsh(n: int) -> int:
    if n <= 1:
        return n
    if n <= 5:
        return 2
    if n == 6:
        return 3
    return 4


def _maltese(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 <= n % 100 <= 10:
        return 1
    if 11 <= n % 100 <= 19:
        return 2
    return 3


def _arabic(n: int) -> int:
    if n <= 2:
        return n
    if 3 <= n % 100 <= 10:
        return 3
    if n % 100 >= 11:
        return 4
    return 5


# (cardinality, rule, locale keys). Keys are lowercase POSIX codes; a region
# key such as "pt_br" overrides its language key.
_BUILTIN_FAMILIES: tuple[tuple[int, RuleFunction, tuple[str, ...]], ...] = (
    (1, _one_form, (
        "bo", "dz", "fa", "hu", "id", "ja", "jv", "ko", "ms", "my",
        "su", "th", "tr", "vi", "yo", "zh",
    )),
    (2, _english_style, (
        "af", "az", "bg", "ca", "da", "de", "el", "en", "eo", "es",
        "et", "eu", "fi", "fo", "fy", "gl", "it", "lb", "nb",
        "nl", "nn", "no", "pt", "sq", "sv",
    )),
    (2, _french_style, ("fil", "fr", "hy", "ln", "mg", "oc", "pt_br", "ti", "tl", "wa")),
    (2, _icelandic, ("is",)),
    (2, _macedonian, ("mk",)),
    (3, _latvian, ("lv",)),
    (3, _irish, ("ga",)),
    (3, _hebrew, ("he", "iw")),
    (3, _czech, ("cs", "sk")),
    (3, _lithuanian, ("lt",)),
    (3, _russian, ("be", "bs", "hr", "ru", "sr", "uk")),
    (3, _polish, ("pl",)),
    (3, _romanian, ("ro",)),
    (4, _slovenian, ("sl",)),
    (4, _maltese, ("mt",)),
    (5, _welsh, ("cy",)),
    (6, _arabic, ("ar",)),
)

_BUILTIN: dict[str, tuple[int, RuleFunction]] = {
    key: (cardinality, func)
    for cardinality, func, keys in _BUILTIN_FAMILIES
    for key in keys
}

_CLDR_CATEGORY_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

_custom: dict[str, tuple[int, RuleFunction]] = {}
_custom_lock = threading.Lock()


# ============================================================================
# REGISTRY
# ============================================================================


def register_plural_rule(locale: str, cardinality: int, func: RuleFunction) -> None:
    """Register a plural rule for a locale, overriding built-in and CLDR rules.

    The rule is probed over 0..RULE_PROBE_LIMIT and rejected if it returns
    anything other than an int in range(cardinality). Catalogs loaded before
    the registration keep the rule they were loaded with.

    Args:
        locale: Locale code (BCP-47 or POSIX; a bare language applies to all regions)
        cardinality: Number of plural forms
        func: Rule function over non-negative integers

    Raises:
        ValueError: If cardinality is below 1, locale is empty, or the rule
            returns an out-of-range index

    Example:
        >>> register_plural_rule("x-pirate", 2, lambda n: 0 if n == 1 else 1)
        >>> select_form("x-pirate", 3)
        1
    """
    key = normalize_locale(locale).lower()
    if not key:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if cardinality < 1:
        msg = f"Plural cardinality must be >= 1, got {cardinality}"
        raise ValueError(msg)

    for n in range(RULE_PROBE_LIMIT + 1):
        index = func(n)
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < cardinality:
            msg = (
                f"Plural rule for '{locale}' returned {index!r} for n={n}; "
                f"expected an index in 0..{cardinality - 1}"
            )
            raise ValueError(msg)

    with _custom_lock:
        _custom[key] = (cardinality, func)
    logger.debug("Registered plural rule for %s (%d forms)", key, cardinality)


def unregister_plural_rule(locale: str) -> bool:
    """Remove a runtime-registered rule.

    Returns:
        True if a rule was registered for the locale and has been removed
    """
    key = normalize_locale(locale).lower()
    with _custom_lock:
        removed = _custom.pop(key, None) is not None
    if removed:
        logger.debug("Unregistered plural rule for %s", key)
    return removed


def _lookup_table(table: dict[str, tuple[int, RuleFunction]], locale: str) -> tuple[int, RuleFunction] | None:
    """Find a rule by full code, then by language subtag."""
    key = normalize_locale(locale).lower()
    entry = table.get(key)
    if entry is None:
        entry = table.get(language_subtag(locale))
    return entry


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _cldr_rule(locale: str) -> PluralRule | None:
    """Derive a rule from Babel's CLDR data, or None if Babel does not know the locale."""
    try:
        babel_locale = get_babel_locale(locale)
    except (BabelUnknownLocaleError, ValueError):
        return None

    plural_form = babel_locale.plural_form
    categories = tuple(
        category
        for category in _CLDR_CATEGORY_ORDER
        if category in plural_form.tags or category == "other"
    )
    positions = {category: index for index, category in enumerate(categories)}

    def select(n: int) -> int:
        return positions[plural_form(n)]

    return PluralRule(
        locale=locale,
        cardinality=len(categories),
        func=select,
        origin=RuleOrigin.CLDR,
    )


def get_plural_rule(locale: str) -> PluralRule:
    """Look up the plural rule for a locale.

    Always succeeds: locales nobody knows get the universal two-form rule,
    flagged by ``PluralRule.is_fallback``.

    Args:
        locale: Locale code (e.g., "it", "pt-BR", "ru_RU")

    Returns:
        PluralRule for the locale

    Examples:
        >>> get_plural_rule("it").cardinality
        2
        >>> get_plural_rule("ru_RU").cardinality
        3
        >>> get_plural_rule("xx-unknown").is_fallback
        True
    """
    with _custom_lock:
        custom = _lookup_table(_custom, locale)
    if custom is not None:
        return PluralRule(locale=locale, cardinality=custom[0], func=custom[1], origin=RuleOrigin.CUSTOM)

    builtin = _lookup_table(_BUILTIN, locale)
    if builtin is not None:
        return PluralRule(locale=locale, cardinality=builtin[0], func=builtin[1])

    if locale.strip():
        derived = _cldr_rule(normalize_locale(locale))
        if derived is not None:
            return derived

    logger.debug("No plural rule for locale '%s'; using two-form fallback", locale)
    return PluralRule(locale=locale, cardinality=2, func=_english_style, origin=RuleOrigin.FALLBACK)


def select_form(locale: str, n: int) -> int:
    """Select the plural form index for a cardinal quantity.

    Args:
        locale: Locale code
        n: Cardinal quantity (negative values select by magnitude)

    Returns:
        Form index in range(get_plural_rule(locale).cardinality)

    Examples:
        >>> select_form("it", 1)
        0
        >>> select_form("it", 0)
        1
        >>> select_form("ru", 22)
        1
        >>> select_form("ar", 100)
        5
    """
    return get_plural_rule(locale).select(n)
