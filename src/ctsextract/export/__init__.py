"""Output writers for finished extraction batches."""

from ctsextract.config import ExtractorSettings

from .base import CorpusExporter
from .cex import CEXExporter
from .csv_corpus import CSVExporter
from .html_report import HTMLReportExporter
from .json_catalog import CatalogReportExporter, JSONExporter
from .oai_dc import OAIDCExporter
from .sqlite_records import SQLiteRecordExporter

DEFAULT_FORMAT = "cex"


def build_default_exporters(settings: ExtractorSettings | None = None) -> dict[str, CorpusExporter]:
    """Return the exporter map keyed by ``--format`` name."""
    settings = settings or ExtractorSettings()
    return {
        "cex": CEXExporter(),
        "csv": CSVExporter(),
        "json": JSONExporter(),
        "catalog": CatalogReportExporter(settings),
        "xml": OAIDCExporter(settings),
        "sql": SQLiteRecordExporter(settings),
        "html": HTMLReportExporter(settings),
    }


__all__ = [
    "CorpusExporter",
    "CEXExporter",
    "CSVExporter",
    "CatalogReportExporter",
    "DEFAULT_FORMAT",
    "HTMLReportExporter",
    "JSONExporter",
    "OAIDCExporter",
    "SQLiteRecordExporter",
    "build_default_exporters",
]
