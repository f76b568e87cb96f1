"""JSON catalog records and the corpus catalog report."""

from __future__ import annotations

import json
from pathlib import Path

from ctsextract.config import ExtractorSettings
from ctsextract.extraction.models import CatalogEntry, ExtractionResult, Segment


def catalog_records(result: ExtractionResult) -> list[dict[str, str]]:
    return [entry.to_dict() for entry in result.catalog]


def _report_entry(entry: CatalogEntry, segments: list[Segment], reader_base_url: str) -> dict[str, object]:
    return {
        "urn": entry.urn,
        "group_name": entry.group_name,
        "work_name": entry.work_title,
        "language": entry.language,
        "wordcount": sum(segment.word_count for segment in segments),
        "scaife": f"{reader_base_url}{segments[0].identifier}" if segments else "",
    }


def build_catalog_report(result: ExtractionResult, settings: ExtractorSettings) -> dict[str, object]:
    """Corpus totals plus one summary per catalog entry."""

    grouped = result.segments_by_urn()
    return {
        "nodeCount": len(result.segments),
        "greekWords": result.totals.greek,
        "latinWords": result.totals.latin,
        "arabicwords": result.totals.arabic,
        "catalog": [
            _report_entry(entry, grouped[entry.urn], settings.reader_base_url) for entry in result.catalog
        ],
    }


class JSONExporter:
    def write(self, path: Path, result: ExtractionResult) -> None:
        path.write_text(json.dumps(catalog_records(result), ensure_ascii=False), encoding="utf-8")


class CatalogReportExporter:
    def __init__(self, settings: ExtractorSettings) -> None:
        self._settings = settings

    def write(self, path: Path, result: ExtractionResult) -> None:
        report = build_catalog_report(result, self._settings)
        path.write_text(json.dumps(report, ensure_ascii=False), encoding="utf-8")
