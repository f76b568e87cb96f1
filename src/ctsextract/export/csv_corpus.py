"""``#``-delimited corpus table with per-script word counts."""

from __future__ import annotations

from pathlib import Path

from ctsextract.export.base import DELIMITER, escape_field
from ctsextract.extraction.models import ExtractionResult, Segment

HEADER = (
    "identifier",
    "text",
    "GreekWords",
    "LatinWords",
    "ArabicWords",
    "Workgroup",
    "Work",
    "WorkVerbose",
)


def split_work(identifier: str) -> tuple[str, str, str]:
    """Return ``(workgroup, work, work_verbose)`` from a segment identifier.

    ``urn:cts:greekLit:tlg0012.tlg001.perseus-grc2:1.1`` yields
    ``("tlg0012", "tlg001.perseus-grc2", "tlg0012.tlg001.perseus-grc2")``.
    """

    fields = identifier.split(":")
    work_verbose = fields[3] if len(fields) > 3 else ""
    workgroup, _, work = work_verbose.partition(".")
    return workgroup, work, work_verbose


def _row(segment: Segment) -> str:
    workgroup, work, work_verbose = split_work(segment.identifier)
    return DELIMITER.join(
        [
            segment.identifier,
            escape_field(segment.text),
            str(segment.greek_words),
            str(segment.latin_words),
            str(segment.arabic_words),
            workgroup,
            work,
            work_verbose,
        ]
    )


def render_csv(result: ExtractionResult) -> str:
    lines = [DELIMITER.join(HEADER)]
    lines.extend(_row(segment) for segment in result.segments)
    return "\n".join(lines) + "\n"


class CSVExporter:
    def write(self, path: Path, result: ExtractionResult) -> None:
        path.write_text(render_csv(result), encoding="utf-8")
