"""OAI-DC metadata records for catalog entries."""

from __future__ import annotations

from pathlib import Path

from lxml import etree

from ctsextract.config import ExtractorSettings
from ctsextract.extraction.models import CatalogEntry, ExtractionResult

OAI_DC_NS = "http://www.openarchives.org/OAI/2.0/oai_dc/"
DC_NS = "http://purl.org/dc/elements/1.1/"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = "http://www.openarchives.org/OAI/2.0/oai_dc/ http://www.openarchives.org/OAI/2.0/oai_dc.xsd"

_NSMAP = {"oai_dc": OAI_DC_NS, "dc": DC_NS, "xsi": XSI_NS}


def _dc(parent: etree._Element, name: str, text: str) -> None:
    child = etree.SubElement(parent, f"{{{DC_NS}}}{name}")
    child.text = text


def build_record(entry: CatalogEntry, record_id: int, settings: ExtractorSettings) -> etree._Element:
    """One ``oai_dc:dc`` record describing a catalog entry."""

    view_url = f"{settings.view_base_url}{entry.urn}"
    record = etree.Element(f"{{{OAI_DC_NS}}}dc", nsmap=_NSMAP)
    record.set(f"{{{XSI_NS}}}schemaLocation", SCHEMA_LOCATION)
    record.set("id", str(record_id))
    _dc(record, "title", entry.work_title)
    _dc(record, "creator", entry.group_name)
    _dc(record, "subject", entry.urn)
    _dc(record, "description", view_url)
    _dc(record, "language", entry.language)
    _dc(record, "view-url", view_url)
    _dc(record, "publisher", settings.publisher)
    return record


def render_record(entry: CatalogEntry, record_id: int, settings: ExtractorSettings) -> str:
    return etree.tostring(build_record(entry, record_id, settings), encoding="unicode", pretty_print=True)


class OAIDCExporter:
    """Writes every catalog entry as a standalone OAI-DC record, one after another."""

    def __init__(self, settings: ExtractorSettings) -> None:
        self._settings = settings

    def write(self, path: Path, result: ExtractionResult) -> None:
        records = [render_record(entry, index, self._settings) for index, entry in enumerate(result.catalog)]
        path.write_text("".join(records), encoding="utf-8")
