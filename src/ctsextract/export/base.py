"""Shared exporter contract for extraction output formats."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ctsextract.extraction.models import ExtractionResult

DELIMITER = "#"


@runtime_checkable
class CorpusExporter(Protocol):
    """Protocol that every output format must implement."""

    def write(self, path: Path, result: ExtractionResult) -> None:
        """Serialize a finished extraction batch to ``path``."""


def escape_field(text: str) -> str:
    """Make segment text safe for the ``#``-delimited formats."""

    return text.replace(DELIMITER, "").replace('"', '\\"')
