"""CEX 3.0 writer: catalog block plus ``identifier#text`` corpus block."""

from __future__ import annotations

from pathlib import Path

from ctsextract.export.base import DELIMITER, escape_field
from ctsextract.extraction.models import CatalogEntry, ExtractionResult

CEX_VERSION = "3.0"
CATALOG_COLUMNS = (
    "urn",
    "citationScheme",
    "groupName",
    "workTitle",
    "versionLabel",
    "exemplarLabel",
    "online",
    "language",
)


def _catalog_row(entry: CatalogEntry) -> str:
    return DELIMITER.join(
        [
            entry.urn,
            entry.citation_scheme,
            entry.group_name,
            entry.work_title,
            entry.version_label,
            entry.exemplar_label,
            str(entry.online),
            entry.language,
        ]
    )


def render_cex(result: ExtractionResult) -> str:
    lines = ["#!cexversion", "", CEX_VERSION, "", "#!ctscatalog", "", DELIMITER.join(CATALOG_COLUMNS)]
    lines.extend(_catalog_row(entry) for entry in result.catalog)
    lines.extend(["", "#!ctsdata", ""])
    lines.extend(f"{segment.identifier}{DELIMITER}{escape_field(segment.text)}" for segment in result.segments)
    return "\n".join(lines) + "\n"


class CEXExporter:
    def write(self, path: Path, result: ExtractionResult) -> None:
        path.write_text(render_cex(result), encoding="utf-8")
