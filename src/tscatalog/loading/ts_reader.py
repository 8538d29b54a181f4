"""Streaming reader for Qt Linguist translation source (.ts) documents.

Reads the XML once with an incremental pull parser and yields one RawContext
per <context> block. Elements are cleared as soon as their context has been
emitted, so memory stays proportional to the largest context rather than the
whole document.

Recognized structure:

    <TS version="2.1" language="it" sourcelanguage="en">
      <context>
        <name>BitcoinGUI</name>
        <message numerus="yes">
          <location filename="../bitcoingui.cpp" line="+129"/>
          <source>%n active connection(s) to Bitcoin network</source>
          <comment>..</comment> <extracomment>..</extracomment>
          <translatorcomment>..</translatorcomment>
          <translation type="unfinished|obsolete|vanished">
            <numerusform>..</numerusform> ...
          </translation>
        </message>
      </context>
    </TS>

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO, TypeAlias
from xml.etree import ElementTree
from xml.parsers.expat import errors as expat_errors

from tscatalog.catalog.model import Location
from tscatalog.constants import MAX_SOURCE_SIZE, READ_CHUNK_SIZE, TS_ROOT_ELEMENT
from tscatalog.diagnostics import ErrorTemplate, MalformedCatalogError, TruncatedCatalogError
from tscatalog.enums import VariantState
from tscatalog.loading.records import RawContext, RawMessage, RawVariant

__all__ = ["TSDocument", "TSReader"]

logger = logging.getLogger(__name__)

TSDocument: TypeAlias = str | bytes | IO[str] | IO[bytes]
"""Accepted .ts inputs: document text, raw bytes, or a readable file object."""

# Expat errors that only occur when input stops before the document is complete.
_TRUNCATION_CODES: frozenset[int] = frozenset(
    expat_errors.codes[message]
    for message in (
        expat_errors.XML_ERROR_NO_ELEMENTS,
        expat_errors.XML_ERROR_UNCLOSED_TOKEN,
        expat_errors.XML_ERROR_PARTIAL_CHAR,
        expat_errors.XML_ERROR_UNCLOSED_CDATA_SECTION,
    )
)

# Required parent for each element the reader interprets.
_PARENTS: dict[str, str] = {
    "context": TS_ROOT_ELEMENT,
    "name": "context",
    "message": "context",
    "location": "message",
    "source": "message",
    "oldsource": "message",
    "comment": "message",
    "oldcomment": "message",
    "extracomment": "message",
    "translatorcomment": "message",
    "translation": "message",
    "numerusform": "translation",
}

# Translation types lrelease drops from compiled catalogs.
_DROPPED_TYPES: frozenset[str] = frozenset({"obsolete", "vanished"})


def _byte_value(element: ElementTree.Element) -> str:
    """Decode Qt's <byte value="x1b"/> escape for characters XML cannot carry."""
    raw = element.get("value", "")
    try:
        code = int(raw[1:], 16) if raw[:1] in ("x", "X") else int(raw)
        return chr(code)
    except ValueError as e:
        raise MalformedCatalogError(ErrorTemplate.invalid_byte_escape(raw)) from e


def _element_text(element: ElementTree.Element) -> str:
    """Collect text content, expanding <byte> escapes.

    When the element holds <lengthvariant> children, the first (longest)
    variant is used, as QTranslator does.
    """
    for child in element:
        if child.tag == "lengthvariant":
            return _element_text(child)

    parts = [element.text or ""]
    for child in element:
        if child.tag == "byte":
            parts.append(_byte_value(child))
        parts.append(child.tail or "")
    return "".join(parts)


def _optional_text(message: ElementTree.Element, tag: str) -> str | None:
    child = message.find(tag)
    return None if child is None else _element_text(child)


class TSReader:
    """Incremental reader for one Qt Linguist document.

    Attributes available after the root element has been read:
        language: Value of <TS language="..."> (None if absent)
        source_language: Value of <TS sourcelanguage="..."> (None if absent)
        version: Value of <TS version="..."> (None if absent)

    Example:
        >>> reader = TSReader()
        >>> for context in reader.read(ts_bytes):
        ...     print(context.name, len(context.messages))
        >>> reader.language
        'it'
    """

    __slots__ = ("_max_source_size", "language", "source_language", "version")

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize reader.

        Args:
            max_source_size: Maximum document size in bytes/characters
                (default: MAX_SOURCE_SIZE). Set to 0 to disable the limit.
        """
        self._max_source_size = MAX_SOURCE_SIZE if max_source_size is None else max_source_size
        self.language: str | None = None
        self.source_language: str | None = None
        self.version: str | None = None

    def read(self, document: TSDocument) -> Iterator[RawContext]:
        """Parse a document, yielding contexts in document order.

        Args:
            document: Document text, bytes, or a readable file object

        Yields:
            RawContext per <context> element

        Raises:
            MalformedCatalogError: Invalid XML, unexpected structure, oversized input
            TruncatedCatalogError: Input ended before the document was complete
        """
        parser = ElementTree.XMLPullParser(events=("start", "end"))
        stack: list[str] = []
        state = _ContextState()

        for chunk in self._chunks(document):
            try:
                parser.feed(chunk)
                events = list(parser.read_events())
            except ElementTree.ParseError as e:
                raise self._parse_error(e, at_eof=False) from e
            yield from self._handle_events(events, stack, state)

        try:
            parser.close()
            events = list(parser.read_events())
        except ElementTree.ParseError as e:
            raise self._parse_error(e, at_eof=True) from e
        yield from self._handle_events(events, stack, state)

    def _chunks(self, document: TSDocument) -> Iterator[str | bytes]:
        """Split the input into parser feeds, enforcing the size limit."""
        limit = self._max_source_size
        if isinstance(document, str | bytes):
            if limit and len(document) > limit:
                raise MalformedCatalogError(ErrorTemplate.source_too_large(len(document), limit))
            for offset in range(0, len(document), READ_CHUNK_SIZE):
                yield document[offset : offset + READ_CHUNK_SIZE]
            return

        consumed = 0
        while chunk := document.read(READ_CHUNK_SIZE):
            consumed += len(chunk)
            if limit and consumed > limit:
                raise MalformedCatalogError(ErrorTemplate.source_too_large(consumed, limit))
            yield chunk

    @staticmethod
    def _parse_error(error: ElementTree.ParseError, *, at_eof: bool) -> MalformedCatalogError | TruncatedCatalogError:
        line, column = error.position
        detail = str(error)
        if at_eof and error.code in _TRUNCATION_CODES:
            return TruncatedCatalogError(ErrorTemplate.truncated_document(detail, line, column + 1))
        return MalformedCatalogError(ErrorTemplate.invalid_xml(detail, line, column + 1))

    def _handle_events(
        self,
        events: list[tuple[str, ElementTree.Element]],
        stack: list[str],
        state: _ContextState,
    ) -> Iterator[RawContext]:
        for event, element in events:
            tag = element.tag
            if event == "start":
                self._check_nesting(tag, stack)
                if not stack:
                    self.language = element.get("language") or None
                    self.source_language = element.get("sourcelanguage") or None
                    self.version = element.get("version")
                    logger.debug(
                        "Reading TS document (version=%s, language=%s)", self.version, self.language
                    )
                stack.append(tag)
                continue

            stack.pop()
            match tag:
                case "name" if stack and stack[-1] == "context":
                    state.name = element.text or ""
                case "message":
                    record = state.read_message(element)
                    if record is not None:
                        state.messages.append(record)
                    element.clear()
                case "context":
                    yield state.emit()
                    element.clear()

    @staticmethod
    def _check_nesting(tag: str, stack: list[str]) -> None:
        parent = stack[-1] if stack else None
        if parent is None:
            if tag != TS_ROOT_ELEMENT:
                raise MalformedCatalogError(ErrorTemplate.unexpected_element(tag, None))
            return
        expected = _PARENTS.get(tag)
        if tag == TS_ROOT_ELEMENT or (expected is not None and expected != parent):
            raise MalformedCatalogError(ErrorTemplate.unexpected_element(tag, parent))


class _ContextState:
    """Accumulates the context currently being read."""

    __slots__ = ("current_file", "line_by_file", "messages", "name")

    def __init__(self) -> None:
        self.name: str | None = None
        self.messages: list[RawMessage] = []
        self.current_file: str | None = None
        self.line_by_file: dict[str | None, int] = {}

    def reset(self) -> None:
        """Start a new context; relative locations do not carry across contexts."""
        self.name = None
        self.messages = []
        self.current_file = None
        self.line_by_file = {}

    def emit(self) -> RawContext:
        context = RawContext(name=self.name or "", messages=tuple(self.messages))
        logger.debug("Read context '%s' (%d messages)", context.name, len(context.messages))
        self.reset()
        return context

    def _location(self, element: ElementTree.Element) -> Location:
        """Resolve a <location>, expanding relative filename and line values.

        A missing filename repeats the last one given in this context; a
        signed line ("+12", "-3") is relative to the last line seen for that file.
        """
        filename = element.get("filename") or None
        if filename is None:
            filename = self.current_file
        else:
            self.current_file = filename

        line_attr = element.get("line")
        if not line_attr:
            return Location(filename)
        try:
            value = int(line_attr)
        except ValueError:
            logger.debug("Ignoring unparseable location line %r", line_attr)
            return Location(filename)
        line = self.line_by_file.get(filename, 0) + value if line_attr[0] in "+-" else value
        self.line_by_file[filename] = line
        return Location(filename, line)

    def read_message(self, element: ElementTree.Element) -> RawMessage | None:
        """Build a RawMessage from a completed <message> element.

        Returns:
            The record, or None for obsolete/vanished entries
        """
        locations = tuple(self._location(loc) for loc in element.iter("location"))
        source_element = element.find("source")
        if source_element is None:
            raise MalformedCatalogError(ErrorTemplate.message_without_source(self.name))
        source = _element_text(source_element)
        numerus = element.get("numerus") == "yes"

        variants: tuple[RawVariant, ...] = ()
        translation = element.find("translation")
        if translation is not None:
            kind = translation.get("type")
            if kind in _DROPPED_TYPES:
                logger.debug("Skipping %s message '%s'", kind, source[:50])
                return None
            state = VariantState.UNFINISHED if kind == "unfinished" else VariantState.FINISHED
            forms = translation.findall("numerusform")
            if forms:
                variants = tuple(
                    RawVariant(index, _element_text(form), state) for index, form in enumerate(forms)
                )
            else:
                text = _element_text(translation)
                if not (numerus and not text.strip()):
                    variants = (RawVariant(0, text, state),)

        return RawMessage(
            source=source,
            variants=variants,
            numerus=numerus,
            locations=locations,
            comment=_optional_text(element, "comment"),
            extra_comment=_optional_text(element, "extracomment"),
            translator_comment=_optional_text(element, "translatorcomment"),
        )
