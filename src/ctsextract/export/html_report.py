"""Human-readable HTML report of the catalog and word totals."""

from __future__ import annotations

from pathlib import Path

from lxml import etree
from lxml.html import builder as E

from ctsextract.config import ExtractorSettings
from ctsextract.extraction.models import CatalogEntry, ExtractionResult, Segment


def _entry_block(entry: CatalogEntry, segments: list[Segment], reader_base_url: str) -> etree._Element:
    block = E.DIV(
        E.H3(f"URN:{entry.urn}"),
        E.P(f"CitationScheme:{entry.citation_scheme}"),
        E.P(f"GroupName:{entry.group_name}"),
        E.P(f"WorkTitle:{entry.work_title}"),
        E.P(f"VersionLabel:{entry.version_label}"),
        E.P(f"ExemplarLabel:{entry.exemplar_label}"),
        E.P(f"Language:{entry.language}"),
        E.CLASS("catalog-entry"),
    )
    if segments:
        first = segments[0].identifier
        block.append(E.P(f"First URN:{first}"))
        block.append(E.P(E.A("Read Online", href=f"{reader_base_url}{first}")))
    block.append(E.P(f"Words:{sum(segment.word_count for segment in segments)}"))
    return block


def build_report(result: ExtractionResult, settings: ExtractorSettings) -> etree._Element:
    body = E.BODY(
        E.DIV(
            E.P(f"Greek words:{result.totals.greek}"),
            E.P(f"Latin words:{result.totals.latin}"),
            E.P(f"Arabic words:{result.totals.arabic}"),
            E.CLASS("totals"),
        ),
        E.HR(),
    )
    grouped = result.segments_by_urn()
    for entry in result.catalog:
        body.append(_entry_block(entry, grouped[entry.urn], settings.reader_base_url))
        body.append(E.HR())
    return E.HTML(E.HEAD(E.META(charset="utf-8"), E.TITLE("CTS corpus report")), body)


class HTMLReportExporter:
    def __init__(self, settings: ExtractorSettings) -> None:
        self._settings = settings

    def write(self, path: Path, result: ExtractionResult) -> None:
        document = build_report(result, self._settings)
        payload = etree.tostring(document, method="html", encoding="utf-8", pretty_print=True, doctype="<!DOCTYPE html>")
        path.write_bytes(payload)
