from __future__ import annotations

import pytest

from ctsextract.extraction.normalization import clean_header_text, normalize_segment_text, strip_tags


def test_strip_tags_removes_open_close_and_empty_tags() -> None:
    assert strip_tags('<hi rend="it">Arma</hi> <lb/>virumque') == "Arma virumque"


def test_segment_text_collapses_whitespace_and_drops_delimiter() -> None:
    raw = "  <l>arma\n  virumque</l>#cano "

    assert normalize_segment_text(raw) == "arma virumquecano"


def test_segment_text_collapses_unicode_space_runs() -> None:
    raw = "μῆνιν  ἄειδε"

    assert normalize_segment_text(raw) == "μῆνιν ἄειδε"


def test_segment_text_of_markup_only_fragment_is_empty() -> None:
    assert normalize_segment_text('<milestone unit="card"/>\n') == ""


def test_clean_header_text_joins_repeated_values() -> None:
    assert clean_header_text(["Homer", "<persName>Homerus</persName>\n"]) == "Homer,Homerus"


def test_clean_header_text_of_nothing_is_empty() -> None:
    assert clean_header_text([]) == ""


@pytest.mark.parametrize(
    "text",
    ["plain text here", "λόγος καὶ ἔργον", "a b c", "x &lt;y", "single"],
)
def test_segment_text_is_identity_on_plain_single_spaced_text(text: str) -> None:
    assert normalize_segment_text(text) == text


@pytest.mark.parametrize(
    "raw",
    [
        "  <l>arma\n  virumque</l>#cano ",
        "x &lt;y&gt; <hi>z</hi>\n\nw",
        f"a{chr(0xA0)}{chr(0xA0)} b #\t<lb/>c",
        "<p>\n</p>",
        "a < b > c",
    ],
)
def test_segment_text_normalization_is_idempotent(raw: str) -> None:
    once = normalize_segment_text(raw)

    assert normalize_segment_text(once) == once
