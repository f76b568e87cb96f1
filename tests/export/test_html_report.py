from __future__ import annotations

from pathlib import Path

from lxml import html

from ctsextract.config import ExtractorSettings
from ctsextract.export.html_report import HTMLReportExporter, build_report
from ctsextract.extraction.models import CatalogEntry, ExtractionResult, ScriptTotals, Segment


def _result() -> ExtractionResult:
    return ExtractionResult(
        catalog=[
            CatalogEntry(urn="urn:cts:greekLit:tlg0012.tlg001", citation_scheme="book,line", group_name="Homer", work_title="Iliad", language="grc"),
            CatalogEntry(urn="urn:cts:greekLit:tlg0012.tlg099", citation_scheme="line", group_name="Homer", work_title="Margites"),
        ],
        segments=[
            Segment(identifier="urn:cts:greekLit:tlg0012.tlg001:1.1", text="μῆνιν ἄειδε θεὰ", greek_words=3),
            Segment(identifier="urn:cts:greekLit:tlg0012.tlg001:1.2", text="οὐλομένην", greek_words=1),
        ],
        totals=ScriptTotals(greek=4),
    )


def test_report_lists_totals_and_catalog_entries() -> None:
    document = build_report(_result(), ExtractorSettings(reader_base_url="https://reader.example.org/"))

    totals = [p.text_content() for p in document.xpath("//div[@class='totals']/p")]
    assert totals == ["Greek words:4", "Latin words:0", "Arabic words:0"]

    entries = document.xpath("//div[@class='catalog-entry']")
    assert len(entries) == 2
    assert entries[0].findtext("h3") == "URN:urn:cts:greekLit:tlg0012.tlg001"
    paragraphs = [p.text_content() for p in entries[0].findall("p")]
    assert "First URN:urn:cts:greekLit:tlg0012.tlg001:1.1" in paragraphs
    assert paragraphs[-1] == "Words:4"
    assert entries[0].xpath(".//a/@href") == ["https://reader.example.org/urn:cts:greekLit:tlg0012.tlg001:1.1"]


def test_entry_without_segments_has_no_reader_link() -> None:
    document = build_report(_result(), ExtractorSettings())

    entry = document.xpath("//div[@class='catalog-entry']")[1]

    assert entry.xpath(".//a") == []
    assert entry.findall("p")[-1].text_content() == "Words:0"


def test_exporter_writes_html_document(tmp_path: Path) -> None:
    output = tmp_path / "report.html"

    HTMLReportExporter(ExtractorSettings()).write(output, _result())

    raw = output.read_bytes()
    assert raw.startswith(b"<!DOCTYPE html>")
    parsed = html.fromstring(raw)
    assert len(parsed.xpath("//div[@class='catalog-entry']")) == 2
    assert "μῆνιν" not in parsed.text_content()
