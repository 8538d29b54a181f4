"""Positional placeholder substitution for catalog templates.

Marker syntax follows QString::arg() and QCoreApplication::translate():

    %1 .. %99   positional argument (first digit non-zero, at most two digits)
    %n          count used for plural selection
    %L1, %Ln    same, with numbers formatted for the catalog locale

Everything else, including a bare '%' and markup such as <b>..</b>, passes
through untouched. Substitution is a single left-to-right scan, so text
produced by an argument is never rescanned for markers.

Python 3.13+. Depends on Babel for %L number formatting.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from babel.core import UnknownLocaleError as BabelUnknownLocaleError
from babel.numbers import format_decimal

from tscatalog.constants import MAX_PLACEHOLDER_INDEX
from tscatalog.diagnostics import ArgumentCountMismatchError, ErrorTemplate
from tscatalog.locale_utils import get_babel_locale

__all__ = ["find_markers", "render"]

logger = logging.getLogger(__name__)


def _parse_marker(template: str, pos: int) -> tuple[str, bool, int] | None:
    """Parse a marker starting at the '%' at template[pos].

    Returns:
        (key, localized, end) where key is "n" or the decimal index as text,
        or None when no marker starts here
    """
    i = pos + 1
    localized = False
    if i < len(template) and template[i] == "L":
        localized = True
        i += 1
    if i >= len(template):
        return None

    char = template[i]
    if char == "n":
        return ("n", localized, i + 1)
    if "1" <= char <= "9":
        end = i + 1
        if end < len(template) and template[end].isdigit() and template[end].isascii():
            candidate = template[i : end + 1]
            if int(candidate) <= MAX_PLACEHOLDER_INDEX:
                end += 1
        return (template[i:end], localized, end)
    return None


def find_markers(template: str) -> frozenset[str]:
    """Return the marker keys a template uses ("n", "1", "2", ...).

    %L markers count as their plain key.

    Example:
        >>> sorted(find_markers("Scaricati %1 dei %L2 blocchi, %n nuovi, 100%"))
        ['1', '2', 'n']
    """
    keys: set[str] = set()
    pos = template.find("%")
    while pos != -1:
        parsed = _parse_marker(template, pos)
        if parsed is None:
            pos = template.find("%", pos + 1)
            continue
        key, _, end = parsed
        keys.add(key)
        pos = template.find("%", end)
    return frozenset(keys)


def _format_localized(value: object, locale: str | None) -> str:
    """Format a number with the locale's digit grouping and decimal separator.

    Non-numbers and locales Babel cannot parse fall back to str(value).
    """
    if locale is None or isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        return str(value)
    try:
        return str(format_decimal(value, locale=get_babel_locale(locale)))
    except (BabelUnknownLocaleError, ValueError, InvalidOperation) as e:
        logger.debug("Locale-aware formatting failed for %r (%s): %s", value, locale, e)
        return str(value)


def render(
    template: str,
    args: Sequence[object] = (),
    *,
    count: int | None = None,
    locale: str | None = None,
) -> tuple[str, tuple[ArgumentCountMismatchError, ...]]:
    """Substitute arguments into a template.

    Args:
        template: Template text with %1..%99, %n and %L markers
        args: Positional arguments; args[0] fills %1
        count: Quantity for %n (None when the call has no count)
        locale: Locale for %L formatting (None formats like plain markers)

    Returns:
        Tuple of (rendered_text, errors)
        - rendered_text: Template with every satisfiable marker replaced
        - errors: One ArgumentCountMismatchError per distinct unsatisfied
          argument index or %n, in order of first appearance; those markers stay verbatim

    Examples:
        >>> render("Impossibile scrivere sul file %1.", ["a.csv"])
        ('Impossibile scrivere sul file a.csv.', ())
        >>> render("%n secondi fa", count=5)
        ('5 secondi fa', ())
        >>> render("%Ln blocchi", count=12500, locale="it")
        ('12.500 blocchi', ())
        >>> text, errors = render("%1 di %2", ["3"])
        >>> text
        '3 di %2'
        >>> len(errors)
        1
    """
    if "%" not in template:
        return (template, ())

    parts: list[str] = []
    errors: list[ArgumentCountMismatchError] = []
    reported: set[str] = set()
    start = 0
    pos = template.find("%")

    while pos != -1:
        parsed = _parse_marker(template, pos)
        if parsed is None:
            pos = template.find("%", pos + 1)
            continue

        key, localized, end = parsed
        marker = template[pos:end]
        if key == "n":
            missing = count is None
            value: object = count
        else:
            index = int(key) - 1
            missing = index >= len(args)
            value = None if missing else args[index]

        parts.append(template[start:pos])
        if missing:
            parts.append(marker)
            if key not in reported:
                reported.add(key)
                errors.append(
                    ArgumentCountMismatchError(
                        ErrorTemplate.argument_count_mismatch(marker, len(args)),
                        marker=marker,
                        supplied=len(args),
                    )
                )
        elif localized:
            parts.append(_format_localized(value, locale))
        else:
            parts.append(str(value))

        start = end
        pos = template.find("%", end)

    parts.append(template[start:])
    return ("".join(parts), tuple(errors))

