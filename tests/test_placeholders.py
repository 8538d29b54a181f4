"""Tests for runtime/placeholders.py - %1..%99 / %n / %L substitution."""

from __future__ import annotations

import re
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tscatalog.diagnostics import ArgumentCountMismatchError, DiagnosticCode
from tscatalog.runtime.placeholders import find_markers, render

# Literal text that can never form a marker (no '%').
PLAIN_TEXT = st.text(alphabet=st.characters(blacklist_characters="%"), max_size=20)


class TestPositionalMarkers:
    """Plain %N substitution."""

    def test_single_argument(self) -> None:
        assert render("Impossibile scrivere sul file %1.", ["a.csv"]) == (
            "Impossibile scrivere sul file a.csv.",
            (),
        )

    def test_arguments_by_index_not_position(self) -> None:
        text, errors = render("%2 dei %1", ["10", "3"])
        assert text == "3 dei 10"
        assert errors == ()

    def test_repeated_marker(self) -> None:
        assert render("%1 e ancora %1", ["x"])[0] == "x e ancora x"

    def test_two_digit_marker(self) -> None:
        args = [str(i) for i in range(1, 13)]
        assert render("%12/%1", args)[0] == "12/1"

    def test_three_digits_is_two_digit_marker_plus_literal(self) -> None:
        args = [str(i) for i in range(1, 11)]
        assert render("%100", args)[0] == "100"

    def test_non_string_arguments_use_str(self) -> None:
        assert render("%1 conferme", [6])[0] == "6 conferme"

    def test_argument_text_is_not_rescanned(self) -> None:
        text, errors = render("%1 e %2", ["%2", "b"])
        assert text == "%2 e b"
        assert errors == ()


class TestCountMarker:
    """%n receives the plural count."""

    def test_count(self) -> None:
        assert render("%n secondi fa", count=5) == ("5 secondi fa", ())

    def test_count_with_positional(self) -> None:
        assert render("%n blocchi in %1", ["rete"], count=2)[0] == "2 blocchi in rete"

    def test_missing_count_leaves_marker(self) -> None:
        text, errors = render("%n secondi fa")
        assert text == "%n secondi fa"
        assert len(errors) == 1
        assert errors[0].marker == "%n"
        assert "no count" in str(errors[0])


class TestLocalizedMarkers:
    """%L markers format numbers for the catalog locale via Babel."""

    def test_localized_count_groups_digits(self) -> None:
        assert render("%Ln blocchi", count=12500, locale="it") == ("12.500 blocchi", ())

    def test_localized_positional_decimal(self) -> None:
        assert render("%L1 BTC", [Decimal("1234.5")], locale="it")[0] == "1.234,5 BTC"

    def test_english_grouping(self) -> None:
        assert render("%L1 blocks", [1234567], locale="en")[0] == "1,234,567 blocks"

    def test_localized_non_number_uses_str(self) -> None:
        assert render("%L1", ["abc"], locale="it")[0] == "abc"

    def test_localized_bool_uses_str(self) -> None:
        assert render("%L1", [True], locale="it")[0] == "True"

    def test_without_locale_formats_plainly(self) -> None:
        assert render("%Ln", count=12500)[0] == "12500"

    def test_unknown_locale_formats_plainly(self) -> None:
        assert render("%Ln", count=12500, locale="xx-unknown")[0] == "12500"


class TestPassthrough:
    """Text that is not a marker is left alone."""

    @pytest.mark.parametrize(
        "template",
        ["100%", "50% di sconto", "%", "%%", "%0", "%x", "%L", "%Lx", "fine %"],
    )
    def test_literal_percent(self, template: str) -> None:
        assert render(template, ["unused"]) == (template, ())

    def test_markup_is_opaque(self) -> None:
        template = "Il portamonete è <b>cifrato</b> e attualmente <b>sbloccato</b> (%1)"
        text, errors = render(template, ["ok"])
        assert text == "Il portamonete è <b>cifrato</b> e attualmente <b>sbloccato</b> (ok)"
        assert errors == ()

    def test_entities_are_opaque(self) -> None:
        assert render("&lt;%1&gt; &amp; co", ["x"])[0] == "&lt;x&gt; &amp; co"

    def test_no_percent_fast_path(self) -> None:
        assert render("Rubrica", ["ignored"]) == ("Rubrica", ())


class TestArgumentCountMismatch:
    """Missing arguments stay verbatim and are reported."""

    def test_one_missing(self) -> None:
        text, errors = render("Scaricati %1 dei %2 blocchi", ["3"])
        assert text == "Scaricati 3 dei %2 blocchi"
        assert len(errors) == 1
        error = errors[0]
        assert isinstance(error, ArgumentCountMismatchError)
        assert error.marker == "%2"
        assert error.supplied == 1
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.ARGUMENT_COUNT_MISMATCH

    def test_one_error_per_distinct_marker(self) -> None:
        text, errors = render("%1 %2 %2 %3", [])
        assert text == "%1 %2 %2 %3"
        assert [e.marker for e in errors] == ["%1", "%2", "%3"]

    def test_localized_marker_reported_verbatim(self) -> None:
        text, errors = render("%L1", [], locale="it")
        assert text == "%L1"
        assert errors[0].marker == "%L1"

    def test_plain_and_localized_share_one_report(self) -> None:
        text, errors = render("%2 / %L2", ["x"], locale="it")
        assert text == "%2 / %L2"
        assert [e.marker for e in errors] == ["%2"]


class TestFindMarkers:
    """find_markers returns the marker keys a template uses."""

    def test_keys(self) -> None:
        assert find_markers("Scaricati %1 dei %L2 blocchi, %n nuovi, 100%") == frozenset({"1", "2", "n"})

    def test_no_markers(self) -> None:
        assert find_markers("&Opzioni...") == frozenset()


@given(
    pieces=st.lists(PLAIN_TEXT, min_size=1, max_size=6),
    k=st.integers(min_value=1, max_value=5),
)
def test_substitution_is_total(pieces: list[str], k: int) -> None:
    """With k markers and k arguments, no marker survives rendering."""
    parts = [pieces[0]]
    for i in range(1, k + 1):
        parts.append(f"%{i} ")
        parts.append(pieces[i % len(pieces)])
    template = "".join(parts)
    args = [f"<arg{i}>" for i in range(1, k + 1)]

    text, errors = render(template, args)

    assert errors == ()
    assert re.search(r"%[1-9]", text) is None
    for arg in args:
        assert arg in text


@given(
    pieces=st.lists(PLAIN_TEXT, min_size=1, max_size=6),
    k=st.integers(min_value=1, max_value=5),
)
def test_one_missing_argument_leaves_exactly_that_marker(pieces: list[str], k: int) -> None:
    """With k markers and k-1 arguments, only %k remains."""
    parts = [pieces[0]]
    for i in range(1, k + 1):
        parts.append(f"%{i} ")
        parts.append(pieces[i % len(pieces)])
    template = "".join(parts)
    args = [f"<arg{i}>" for i in range(1, k)]

    text, errors = render(template, args)

    assert re.findall(r"%[1-9]", text) == [f"%{k}"]
    assert len(errors) == 1
    assert errors[0].marker == f"%{k}"


@given(template=PLAIN_TEXT)
def test_text_without_markers_is_unchanged(template: str) -> None:
    assert render(template, ["x"], count=3) == (template, ())
