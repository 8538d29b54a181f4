"""Data-quality checks for loaded catalogs.

These checks never reject a catalog on their own; they flag entries that
load fine structurally but will likely render wrong:

- placeholder-mismatch: a finished translation uses positional markers the
  source does not, or drops ones it does. %n may be omitted from individual
  plural forms ("un secondo fa"), but not introduced where the source has none.
- identical-to-source: a finished translation equals its source and the
  source has at least two words of prose once markers and tags are removed.
  This is the usual symptom of an untranslated string or text pasted from
  another language's catalog.
- unknown-locale: no plural rule exists for the catalog locale.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tscatalog.diagnostics import ValidationResult, ValidationWarning
from tscatalog.runtime.placeholders import find_markers

if TYPE_CHECKING:
    from tscatalog.catalog.model import Message
    from tscatalog.runtime.plural_rules import PluralRule

__all__ = [
    "IDENTICAL_TO_SOURCE",
    "PLACEHOLDER_MISMATCH",
    "UNKNOWN_LOCALE",
    "validate_catalog",
]

PLACEHOLDER_MISMATCH = "placeholder-mismatch"
IDENTICAL_TO_SOURCE = "identical-to-source"
UNKNOWN_LOCALE = "unknown-locale"

# Markers and markup tags carry no translatable prose.
_NON_PROSE = re.compile(r"%L?(?:[1-9][0-9]?|n)|<[^>]*>")


def _describe(keys: Iterable[str]) -> str:
    return ", ".join(f"%{key}" for key in sorted(keys, key=lambda k: (k == "n", len(k), k)))


def _check_placeholders(message: Message) -> list[ValidationWarning]:
    expected = find_markers(message.source)
    expected_positional = expected - {"n"}
    warnings: list[ValidationWarning] = []
    for variant in message.variants:
        if not variant.is_usable:
            continue
        found = find_markers(variant.template)
        positional = found - {"n"}
        problems: list[str] = []
        if missing := expected_positional - positional:
            problems.append(f"missing {_describe(missing)}")
        if extra := positional - expected_positional:
            problems.append(f"unexpected {_describe(extra)}")
        if "n" in found and "n" not in expected:
            problems.append("unexpected %n")
        if problems:
            warnings.append(
                ValidationWarning(
                    code=PLACEHOLDER_MISMATCH,
                    message=f"Form {variant.index} of '{message.source[:60]}': {'; '.join(problems)}",
                    context=message.context,
                    source=message.source,
                )
            )
    return warnings


def _check_identical(message: Message) -> ValidationWarning | None:
    source = message.source
    words = [word for word in _NON_PROSE.sub(" ", source).split() if any(char.isalpha() for char in word)]
    if len(words) < 2:
        return None
    for variant in message.variants:
        if variant.is_usable and variant.template == source:
            return ValidationWarning(
                code=IDENTICAL_TO_SOURCE,
                message=f"Translation is identical to source '{source[:60]}'",
                context=message.context,
                source=source,
            )
    return None


def validate_catalog(messages: Iterable[Message], plural_rule: PluralRule) -> ValidationResult:
    """Run data-quality checks over catalog messages.

    Args:
        messages: Messages in catalog order
        plural_rule: Rule the catalog is resolved with

    Returns:
        ValidationResult with warnings in catalog order

    Example:
        >>> result = validate_catalog(store.messages(), store.plural_rule)
        >>> for warning in result.by_code("placeholder-mismatch"):
        ...     print(warning.format())
    """
    warnings: list[ValidationWarning] = []
    if plural_rule.is_fallback:
        warnings.append(
            ValidationWarning(
                code=UNKNOWN_LOCALE,
                message=f"No plural rule for locale '{plural_rule.locale}'; using the two-form fallback",
            )
        )
    for message in messages:
        warnings.extend(_check_placeholders(message))
        identical = _check_identical(message)
        if identical is not None:
            warnings.append(identical)
    return ValidationResult(warnings=tuple(warnings))
