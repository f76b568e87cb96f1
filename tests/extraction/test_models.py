from __future__ import annotations

from ctsextract.extraction.models import CatalogEntry, ExtractionResult, Segment


def _entry(urn: str) -> CatalogEntry:
    return CatalogEntry(urn=urn, citation_scheme="line", group_name="", work_title="")


def test_segments_by_urn_groups_in_emission_order() -> None:
    result = ExtractionResult(
        catalog=[_entry("urn:cts:greekLit:tlg0001.tlg001"), _entry("urn:cts:greekLit:tlg0001.tlg0010")],
        segments=[
            Segment(identifier="urn:cts:greekLit:tlg0001.tlg0010:1", text="a"),
            Segment(identifier="urn:cts:greekLit:tlg0001.tlg001:1", text="b"),
            Segment(identifier="urn:cts:greekLit:tlg0001.tlg001:2", text="c"),
        ],
    )

    grouped = result.segments_by_urn()

    assert [segment.text for segment in grouped["urn:cts:greekLit:tlg0001.tlg001"]] == ["b", "c"]
    assert [segment.text for segment in grouped["urn:cts:greekLit:tlg0001.tlg0010"]] == ["a"]
    for entry in result.catalog:
        assert grouped[entry.urn] == result.segments_for(entry.urn)


def test_segments_by_urn_tolerates_colons_in_numbers_and_orphans() -> None:
    result = ExtractionResult(
        catalog=[_entry("urn:cts:greekLit:work"), _entry("urn:cts:greekLit:empty")],
        segments=[
            Segment(identifier="urn:cts:greekLit:work:1.a:b", text="colon"),
            Segment(identifier="urn:cts:greekLit:other:1", text="orphan"),
        ],
    )

    grouped = result.segments_by_urn()

    assert [segment.text for segment in grouped["urn:cts:greekLit:work"]] == ["colon"]
    assert grouped["urn:cts:greekLit:empty"] == []
    assert set(grouped) == {"urn:cts:greekLit:work", "urn:cts:greekLit:empty"}
