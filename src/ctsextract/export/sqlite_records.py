"""SQLite persistence of OAI-DC records for an OAI-PMH data provider."""

from __future__ import annotations

from pathlib import Path
import sqlite3

from ctsextract.config import ExtractorSettings
from ctsextract.export.oai_dc import render_record
from ctsextract.extraction.models import ExtractionResult

OAI_DC_FORMAT_ID = 1
ITEM_TIMESTAMP = "1970-01-01 00:00:00"


def ensure_schema(connection: sqlite3.Connection) -> None:
    """Create the provider's item and record tables if missing."""

    connection.executescript(
        """
        CREATE TABLE IF NOT EXISTS items (
            id INTEGER PRIMARY KEY,
            id_ext TEXT NOT NULL,
            state TEXT NOT NULL,
            timestamp TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS records (
            id INTEGER PRIMARY KEY,
            item_id INTEGER NOT NULL,
            metadata_format_id INTEGER NOT NULL,
            xml TEXT NOT NULL,
            state INTEGER NOT NULL,
            FOREIGN KEY(item_id) REFERENCES items(id)
        );
        """
    )


class SQLiteRecordExporter:
    """Insert one item plus one OAI-DC record per catalog entry with a known creator."""

    def __init__(self, settings: ExtractorSettings) -> None:
        self._settings = settings

    def write(self, path: Path, result: ExtractionResult) -> None:
        connection = sqlite3.connect(str(path))
        try:
            ensure_schema(connection)
            with connection:
                for index, entry in enumerate(result.catalog):
                    if not entry.group_name:
                        continue
                    connection.execute(
                        "INSERT OR REPLACE INTO items(id, id_ext, state, timestamp) VALUES(?, ?, 'active', ?)",
                        (index, entry.urn, ITEM_TIMESTAMP),
                    )
                    connection.execute(
                        "INSERT OR REPLACE INTO records(id, item_id, metadata_format_id, xml, state) VALUES(?, ?, ?, ?, 1)",
                        (index, index, OAI_DC_FORMAT_ID, render_record(entry, index, self._settings)),
                    )
        finally:
            connection.close()
