from __future__ import annotations

import json
from pathlib import Path

from ctsextract.config import ExtractorSettings
from ctsextract.export.json_catalog import CatalogReportExporter, JSONExporter, build_catalog_report, catalog_records
from ctsextract.extraction.models import CatalogEntry, ExtractionResult, ScriptTotals, Segment


def _result() -> ExtractionResult:
    return ExtractionResult(
        catalog=[
            CatalogEntry(
                urn="urn:cts:greekLit:tlg0001.tlg001",
                citation_scheme="line",
                group_name="Apollonius",
                work_title="Argonautica",
                language="grc",
            ),
            CatalogEntry(
                urn="urn:cts:greekLit:tlg0001.tlg0010",
                citation_scheme="line",
                group_name="Anonymus",
                work_title="Scholia",
                language="lat",
            ),
        ],
        segments=[
            Segment(identifier="urn:cts:greekLit:tlg0001.tlg001:1", text="ἀρχόμενος σέο", greek_words=2),
            Segment(identifier="urn:cts:greekLit:tlg0001.tlg001:2", text="Φοῖβε", greek_words=1),
            Segment(identifier="urn:cts:greekLit:tlg0001.tlg0010:1", text="sunt verba et voces", latin_words=4),
        ],
        totals=ScriptTotals(greek=3, latin=4),
    )


def test_catalog_records_use_snake_case_keys() -> None:
    records = catalog_records(_result())

    assert records[0] == {
        "urn": "urn:cts:greekLit:tlg0001.tlg001",
        "citation_scheme": "line",
        "group_name": "Apollonius",
        "work_title": "Argonautica",
        "version_label": "",
        "exemplar_label": "",
        "online": "True",
        "language": "grc",
    }


def test_catalog_report_sums_words_and_links_first_segment() -> None:
    report = build_catalog_report(_result(), ExtractorSettings(reader_base_url="https://reader.example.org/"))

    assert report["nodeCount"] == 3
    assert report["greekWords"] == 3
    assert report["latinWords"] == 4
    assert report["arabicwords"] == 0

    first, second = report["catalog"]
    assert first["work_name"] == "Argonautica"
    assert first["scaife"] == "https://reader.example.org/urn:cts:greekLit:tlg0001.tlg001:1"
    # tlg001 is a string prefix of tlg0010 but must not claim its segments
    assert first["wordcount"] == 3
    assert second["wordcount"] == 4
    assert second["scaife"] == "https://reader.example.org/urn:cts:greekLit:tlg0001.tlg0010:1"


def test_catalog_report_leaves_link_empty_without_segments() -> None:
    result = ExtractionResult(catalog=[CatalogEntry(urn="urn:cts:greekLit:x", citation_scheme="", group_name="", work_title="")])

    entry = build_catalog_report(result, ExtractorSettings())["catalog"][0]

    assert entry["wordcount"] == 0
    assert entry["scaife"] == ""


def test_json_exporters_write_files(tmp_path: Path) -> None:
    records_path = tmp_path / "catalog.json"
    report_path = tmp_path / "report.json"

    JSONExporter().write(records_path, _result())
    CatalogReportExporter(ExtractorSettings()).write(report_path, _result())

    assert json.loads(records_path.read_text(encoding="utf-8"))[1]["group_name"] == "Anonymus"
    report_text = report_path.read_text(encoding="utf-8")
    assert json.loads(report_text)["nodeCount"] == 3
    assert "Argonautica" in report_text
