"""Tests for loading/ts_reader.py - streaming Qt Linguist .ts reader."""

from __future__ import annotations

import io

import pytest

from tests.catalogs import IT_CATALOG
from tscatalog.catalog.model import Location
from tscatalog.diagnostics import DiagnosticCode, MalformedCatalogError, TruncatedCatalogError
from tscatalog.enums import VariantState
from tscatalog.loading import RawContext, TSReader


def _read(document: str | bytes, **kwargs: int) -> tuple[TSReader, list[RawContext]]:
    reader = TSReader(**kwargs)
    return reader, list(reader.read(document))


def _wrap(body: str, root: str = '<TS version="2.1" language="it">') -> str:
    return f'<?xml version="1.0" encoding="utf-8"?>\n{root}\n{body}\n</TS>\n'


class TestDocumentStructure:
    """Header attributes, contexts and messages."""

    def test_header_attributes(self) -> None:
        reader, _ = _read(_wrap("", '<TS version="2.1" language="it_IT" sourcelanguage="en">'))
        assert reader.language == "it_IT"
        assert reader.source_language == "en"
        assert reader.version == "2.1"

    def test_missing_language(self) -> None:
        reader, contexts = _read(_wrap("", "<TS>"))
        assert reader.language is None
        assert contexts == []

    def test_contexts_in_document_order(self) -> None:
        _, contexts = _read(IT_CATALOG)
        assert [c.name for c in contexts] == ["AddressBookPage", "BitcoinGUI", "TransactionDesc"]

    def test_entities_decoded(self) -> None:
        _, contexts = _read(IT_CATALOG)
        sources = [m.source for m in contexts[1].messages]
        assert "&Options..." in sources
        assert "Wallet is <b>encrypted</b> and currently <b>unlocked</b>" in sources

    def test_plain_translation(self) -> None:
        _, contexts = _read(IT_CATALOG)
        message = contexts[0].messages[1]
        assert message.source == "Error exporting"
        assert not message.numerus
        assert len(message.variants) == 1
        variant = message.variants[0]
        assert (variant.index, variant.template, variant.state) == (
            0,
            "Errore nell'esportazione",
            VariantState.FINISHED,
        )

    def test_numerus_forms(self) -> None:
        _, contexts = _read(IT_CATALOG)
        message = contexts[1].messages[1]
        assert message.numerus
        assert [v.template for v in message.variants] == [
            "%n connessione attiva alla rete Bitcoin",
            "%n connessioni attive alla rete Bitcoin",
        ]
        assert [v.index for v in message.variants] == [0, 1]

    def test_unfinished_numerus_forms(self) -> None:
        _, contexts = _read(IT_CATALOG)
        message = contexts[2].messages[1]
        assert message.source == "Open for %n more block(s)"
        assert [(v.template, v.state) for v in message.variants] == [
            ("", VariantState.UNFINISHED),
            ("", VariantState.UNFINISHED),
        ]

    def test_unfinished_empty_translation(self) -> None:
        _, contexts = _read(IT_CATALOG)
        message = contexts[1].messages[-1]
        assert message.variants[0].state is VariantState.UNFINISHED
        assert message.variants[0].template == ""

    def test_message_without_translation_has_no_variants(self) -> None:
        _, contexts = _read(_wrap("<context><name>C</name><message><source>Quit</source></message></context>"))
        assert contexts[0].messages[0].variants == ()

    def test_comments(self) -> None:
        body = (
            "<context><name>C</name><message>"
            "<source>Open</source><comment>menu</comment>"
            "<extracomment>File menu entry</extracomment>"
            "<translatorcomment>verbo</translatorcomment>"
            "<translation>Apri</translation>"
            "</message></context>"
        )
        _, contexts = _read(_wrap(body))
        message = contexts[0].messages[0]
        assert message.comment == "menu"
        assert message.extra_comment == "File menu entry"
        assert message.translator_comment == "verbo"


class TestDroppedEntries:
    """Obsolete and vanished translations never reach the catalog."""

    def test_obsolete_skipped(self) -> None:
        _, contexts = _read(IT_CATALOG)
        sources = [m.source for m in contexts[2].messages]
        assert "Generated but not accepted" not in sources
        assert len(sources) == 3

    def test_vanished_skipped(self) -> None:
        body = (
            "<context><name>C</name>"
            '<message><source>Old</source><translation type="vanished">Vecchio</translation></message>'
            "</context>"
        )
        _, contexts = _read(_wrap(body))
        assert contexts[0].messages == ()


class TestLocations:
    """Relative filename and line expansion."""

    def test_relative_lines_resolved_per_file(self) -> None:
        _, contexts = _read(IT_CATALOG)
        address_book = [m.locations for m in contexts[0].messages]
        assert address_book == [
            (Location("../forms/addressbookpage.ui", 14),),
            (Location("../addressbookpage.cpp", 274),),
            (Location("../addressbookpage.cpp", 274),),
        ]

    def test_filename_carries_forward(self) -> None:
        _, contexts = _read(IT_CATALOG)
        lines = [m.locations[0] for m in contexts[1].messages]
        assert lines == [
            Location("../bitcoingui.cpp", 74),
            Location("../bitcoingui.cpp", 203),
            Location("../bitcoingui.cpp", 218),
            Location("../bitcoingui.cpp", 286),
            Location("../bitcoingui.cpp", 380),
            Location("../bitcoin.cpp", 133),
        ]

    def test_multiple_locations_and_negative_offsets(self) -> None:
        body = (
            "<context><name>BitcoinGUI</name><message>"
            '<location filename="../bitcoingui.cpp" line="+200"/>'
            '<location line="-103"/>'
            '<location line="+306"/>'
            "<source>Synchronizing with network...</source>"
            "<translation>Sto sincronizzando con la rete...</translation>"
            "</message></context>"
        )
        _, contexts = _read(_wrap(body))
        assert [loc.line for loc in contexts[0].messages[0].locations] == [200, 97, 403]

    def test_absolute_line(self) -> None:
        body = (
            '<context><name>C</name><message><location filename="a.cpp" line="42"/>'
            "<source>x y</source></message></context>"
        )
        _, contexts = _read(_wrap(body))
        assert contexts[0].messages[0].locations == (Location("a.cpp", 42),)

    def test_lines_reset_per_context(self) -> None:
        body = (
            '<context><name>A</name><message><location filename="a.cpp" line="+10"/>'
            "<source>one</source></message></context>"
            '<context><name>B</name><message><location filename="a.cpp" line="+5"/>'
            "<source>two</source></message></context>"
        )
        _, contexts = _read(_wrap(body))
        assert contexts[1].messages[0].locations == (Location("a.cpp", 5),)

    def test_location_str(self) -> None:
        assert str(Location("a.cpp", 3)) == "a.cpp:3"
        assert str(Location(None)) == "<unknown>"


class TestEscapes:
    """Qt-specific text escapes."""

    def test_byte_escape(self) -> None:
        body = (
            "<context><name>C</name><message><source>Tab<byte value=\"x9\"/>here</source>"
            "<translation>Tab<byte value=\"9\"/>qui</translation></message></context>"
        )
        _, contexts = _read(_wrap(body))
        message = contexts[0].messages[0]
        assert message.source == "Tab\there"
        assert message.variants[0].template == "Tab\tqui"

    def test_invalid_byte_value(self) -> None:
        body = '<context><name>C</name><message><source>a<byte value="zz"/></source></message></context>'
        with pytest.raises(MalformedCatalogError, match="byte") as exc_info:
            _read(_wrap(body))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_BYTE_ESCAPE
        assert exc_info.value.diagnostic.hint is not None

    def test_length_variants_use_first(self) -> None:
        body = (
            "<context><name>C</name><message><source>Settings</source><translation>"
            "<lengthvariant>Impostazioni</lengthvariant><lengthvariant>Imp.</lengthvariant>"
            "</translation></message></context>"
        )
        _, contexts = _read(_wrap(body))
        assert contexts[0].messages[0].variants[0].template == "Impostazioni"


class TestInputKinds:
    """Text, bytes and file objects are all accepted."""

    def test_bytes(self) -> None:
        _, contexts = _read(IT_CATALOG.encode("utf-8"))
        assert len(contexts) == 3

    def test_binary_file(self) -> None:
        reader = TSReader()
        contexts = list(reader.read(io.BytesIO(IT_CATALOG.encode("utf-8"))))
        assert reader.language == "it"
        assert len(contexts) == 3

    def test_text_file(self) -> None:
        contexts = list(TSReader().read(io.StringIO(IT_CATALOG)))
        assert contexts[1].messages[0].variants[0].template == "&Opzioni..."


class TestErrors:
    """Malformed and truncated documents."""

    def test_truncated_mid_message(self) -> None:
        cut = IT_CATALOG[: IT_CATALOG.index("<numerusform>%n secondo fa")]
        with pytest.raises(TruncatedCatalogError) as exc_info:
            _read(cut)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.TRUNCATED_DOCUMENT

    def test_truncated_mid_tag(self) -> None:
        with pytest.raises(TruncatedCatalogError):
            _read(IT_CATALOG[: IT_CATALOG.index("Rubrica") - 5])

    def test_empty_document_is_truncated(self) -> None:
        with pytest.raises(TruncatedCatalogError):
            _read("")

    def test_mismatched_tag_is_malformed(self) -> None:
        with pytest.raises(MalformedCatalogError) as exc_info:
            _read(_wrap("<context><name>C</context>"))
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.INVALID_XML
        assert diagnostic.line is not None

    def test_wrong_root(self) -> None:
        with pytest.raises(MalformedCatalogError, match="<html>"):
            _read("<html><body/></html>")

    def test_message_outside_context(self) -> None:
        with pytest.raises(MalformedCatalogError, match="Unexpected element <message>"):
            _read(_wrap("<message><source>x</source></message>"))

    def test_numerusform_outside_translation(self) -> None:
        body = "<context><name>C</name><message><source>x</source><numerusform>y</numerusform></message></context>"
        with pytest.raises(MalformedCatalogError, match="numerusform"):
            _read(_wrap(body))

    def test_message_without_source(self) -> None:
        body = "<context><name>C</name><message><translation>y</translation></message></context>"
        with pytest.raises(MalformedCatalogError, match="without <source>") as exc_info:
            _read(_wrap(body))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.MESSAGE_WITHOUT_SOURCE
        assert exc_info.value.diagnostic.context == "C"

    def test_size_limit_for_text(self) -> None:
        with pytest.raises(MalformedCatalogError) as exc_info:
            _read(IT_CATALOG, max_source_size=100)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SOURCE_TOO_LARGE

    def test_size_limit_for_file_objects(self) -> None:
        reader = TSReader(max_source_size=100)
        with pytest.raises(MalformedCatalogError, match="exceeds limit"):
            list(reader.read(io.StringIO(IT_CATALOG)))

    def test_size_limit_disabled(self) -> None:
        _, contexts = _read(IT_CATALOG, max_source_size=0)
        assert len(contexts) == 3
