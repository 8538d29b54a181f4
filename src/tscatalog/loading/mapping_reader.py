"""Reader for catalogs supplied as plain mapping trees (e.g. decoded JSON).

Shape:

    {
        "language": "it",
        "contexts": [
            {
                "name": "BitcoinGUI",
                "messages": [
                    {
                        "source": "%n active connection(s) to Bitcoin network",
                        "numerus": true,
                        "variants": [
                            {"template": "%n connessione attiva alla rete Bitcoin"},
                            {"template": "%n connessioni attive alla rete Bitcoin"}
                        ],
                        "locations": [{"filename": "../bitcoingui.cpp", "line": 129}]
                    }
                ]
            }
        ]
    }

Variant "index" defaults to the position in the list and "state" to
"finished". A record missing a required key ("name", "source", "template")
is reported as truncated; a value of the wrong type as malformed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from tscatalog.catalog.model import Location
from tscatalog.diagnostics import ErrorTemplate, MalformedCatalogError, TruncatedCatalogError
from tscatalog.enums import VariantState
from tscatalog.loading.records import RawContext, RawMessage, RawVariant

__all__ = ["read_mapping"]


def _matches(value: object, kind: type | tuple[type, ...]) -> bool:
    # bool subclasses int, but True is not a line number or form index
    if isinstance(value, bool) and not (kind is bool or (isinstance(kind, tuple) and bool in kind)):
        return False
    return isinstance(value, kind)


def _require(record: Mapping[str, Any], key: str, kind: type, where: str, context: str | None = None) -> Any:
    if key not in record:
        raise TruncatedCatalogError(
            ErrorTemplate.invalid_record(f"{where} is missing '{key}'", context)
        )
    value = record[key]
    if not _matches(value, kind):
        raise MalformedCatalogError(
            ErrorTemplate.invalid_record(
                f"{where} '{key}' must be {kind.__name__}, got {type(value).__name__}", context
            )
        )
    return value


def _optional(record: Mapping[str, Any], key: str, kind: type | tuple[type, ...], where: str, context: str | None) -> Any:
    value = record.get(key)
    if value is not None and not _matches(value, kind):
        raise MalformedCatalogError(
            ErrorTemplate.invalid_record(f"{where} '{key}' has wrong type {type(value).__name__}", context)
        )
    return value


def _sequence(value: object, where: str, context: str | None) -> Sequence[Any]:
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        raise MalformedCatalogError(ErrorTemplate.invalid_record(f"{where} must be a list", context))
    return value


def _mapping(value: object, where: str, context: str | None) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedCatalogError(ErrorTemplate.invalid_record(f"{where} must be a mapping", context))
    return value


def _read_variant(position: int, raw: object, context: str) -> RawVariant:
    record = _mapping(raw, "variant", context)
    template = _require(record, "template", str, "variant", context)
    index = _optional(record, "index", int, "variant", context)
    state_name = _optional(record, "state", str, "variant", context) or VariantState.FINISHED.value
    try:
        state = VariantState(state_name)
    except ValueError as e:
        raise MalformedCatalogError(
            ErrorTemplate.invalid_record(f"unknown variant state {state_name!r}", context)
        ) from e
    return RawVariant(index=position if index is None else index, template=template, state=state)


def _read_location(raw: object, context: str) -> Location:
    record = _mapping(raw, "location", context)
    return Location(
        filename=_optional(record, "filename", str, "location", context),
        line=_optional(record, "line", int, "location", context),
    )


def _read_message(raw: object, context: str) -> RawMessage:
    record = _mapping(raw, "message", context)
    source = _require(record, "source", str, "message", context)
    variants = tuple(
        _read_variant(position, item, context)
        for position, item in enumerate(_sequence(record.get("variants", ()), "message 'variants'", context))
    )
    locations = tuple(
        _read_location(item, context)
        for item in _sequence(record.get("locations", ()), "message 'locations'", context)
    )
    return RawMessage(
        source=source,
        variants=variants,
        numerus=bool(_optional(record, "numerus", bool, "message", context)),
        locations=locations,
        comment=_optional(record, "comment", str, "message", context),
        extra_comment=_optional(record, "extra_comment", str, "message", context),
        translator_comment=_optional(record, "translator_comment", str, "message", context),
    )


def read_mapping(tree: Mapping[str, Any]) -> tuple[str | None, Iterator[RawContext]]:
    """Validate the top level of a mapping catalog and iterate its contexts.

    Args:
        tree: Catalog mapping

    Returns:
        Tuple of (language, contexts)
        - language: Declared target locale (None if absent)
        - contexts: Lazy iterator of RawContext in declaration order

    Raises:
        MalformedCatalogError: Wrong value types
        TruncatedCatalogError: Missing required keys
    """
    root = _mapping(tree, "catalog", None)
    language = _optional(root, "language", str, "catalog", None) or None
    contexts = _sequence(_require(root, "contexts", object, "catalog"), "catalog 'contexts'", None)

    def iterate() -> Iterator[RawContext]:
        for raw in contexts:
            record = _mapping(raw, "context", None)
            name = _require(record, "name", str, "context")
            messages = _sequence(record.get("messages", ()), "context 'messages'", name)
            yield RawContext(name=name, messages=tuple(_read_message(item, name) for item in messages))

    return (language, iterate())
