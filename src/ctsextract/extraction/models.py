"""Canonical data structures shared by the extraction pipeline."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class ReferencePattern:
    """One ``cRefPattern`` declared in a document header."""

    literal_path: str
    kind: str = ""


class DepthMode(str, Enum):
    CHILD = "child"
    ARBITRARY_DESCENDANT = "descendant"


@dataclass(frozen=True, slots=True)
class PathStep:
    """A single level of a descent plan."""

    element_name: str
    depth_mode: DepthMode = DepthMode.CHILD
    captures_number: bool = False
    is_terminal: bool = False


@dataclass(frozen=True, slots=True)
class SchemeDescriptor:
    """A recognized citation structure and the literal spellings that select it."""

    id: str
    steps: tuple[PathStep, ...]
    spellings: tuple[str, ...] = ()

    @property
    def depth(self) -> int:
        """Number of identifier components every segment of this scheme carries."""

        return sum(1 for step in self.steps if step.captures_number)


@dataclass(slots=True)
class DocumentHeader:
    """Metadata read from ``teiHeader`` plus the document's URN base."""

    patterns: list[ReferencePattern] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)
    authors: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    urn_base: str | None = None


@dataclass(slots=True)
class DocumentContext:
    """Per-file state, discarded once the document's segments are emitted."""

    file_identifier_root: str
    raw_bytes: bytes
    group_name: str
    work_title: str
    language: str
    scheme: SchemeDescriptor | None = None


@dataclass(frozen=True, slots=True)
class Leaf:
    """Raw walker output: captured numbers along the path plus inner XML."""

    numbers: tuple[str, ...]
    inner_xml: str


@dataclass(frozen=True, slots=True)
class ScriptCounts:
    greek: int = 0
    latin: int = 0
    arabic: int = 0

    @property
    def total(self) -> int:
        return self.greek + self.latin + self.arabic


@dataclass(slots=True)
class ScriptTotals:
    """Running corpus-wide word totals."""

    greek: int = 0
    latin: int = 0
    arabic: int = 0

    def add(self, counts: ScriptCounts) -> None:
        self.greek += counts.greek
        self.latin += counts.latin
        self.arabic += counts.arabic

    def to_dict(self) -> dict[str, int]:
        return {"greek": self.greek, "latin": self.latin, "arabic": self.arabic}


@dataclass(frozen=True, slots=True)
class Segment:
    """One addressable passage of normalized text."""

    identifier: str
    text: str
    greek_words: int = 0
    latin_words: int = 0
    arabic_words: int = 0

    @property
    def script_counts(self) -> ScriptCounts:
        return ScriptCounts(greek=self.greek_words, latin=self.latin_words, arabic=self.arabic_words)

    @property
    def word_count(self) -> int:
        return self.greek_words + self.latin_words + self.arabic_words


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """CTS catalog row for one document that declares a citation scheme."""

    urn: str
    citation_scheme: str
    group_name: str
    work_title: str
    version_label: str = ""
    exemplar_label: str = ""
    online: bool = True
    language: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "urn": self.urn,
            "citation_scheme": self.citation_scheme,
            "group_name": self.group_name,
            "work_title": self.work_title,
            "version_label": self.version_label,
            "exemplar_label": self.exemplar_label,
            "online": str(self.online),
            "language": self.language,
        }


@dataclass(slots=True)
class FileError:
    source_path: str
    error: str

    def to_dict(self) -> dict[str, str]:
        return {"source_path": self.source_path, "error": self.error}


@dataclass(slots=True)
class ExtractionResult:
    """Batch accumulator consumed by the exporters."""

    catalog: list[CatalogEntry] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    totals: ScriptTotals = field(default_factory=ScriptTotals)
    unclassified_patterns: list[str] = field(default_factory=list)
    missing_patterns: list[str] = field(default_factory=list)
    errors: list[FileError] = field(default_factory=list)
    scheme_usage: Counter[str] = field(default_factory=Counter)
    scanned: int = 0
    extracted: int = 0

    def record_unclassified(self, literal: str) -> None:
        if literal not in self.unclassified_patterns:
            self.unclassified_patterns.append(literal)

    def segments_for(self, urn: str) -> list[Segment]:
        """Segments emitted for one catalog URN, in emission order."""

        prefix = f"{urn}:"
        return [segment for segment in self.segments if segment.identifier.startswith(prefix)]

    def segments_by_urn(self) -> dict[str, list[Segment]]:
        """Group segments under the catalog URN their identifier starts with, in one pass.

        The longest matching URN wins, so ``@n`` values containing ``:`` do not
        confuse the grouping.
        """

        grouped: dict[str, list[Segment]] = {entry.urn: [] for entry in self.catalog}
        for segment in self.segments:
            identifier = segment.identifier
            index = identifier.rfind(":")
            while index > 0:
                bucket = grouped.get(identifier[:index])
                if bucket is not None:
                    bucket.append(segment)
                    break
                index = identifier.rfind(":", 0, index)
        return grouped

    def to_summary(self) -> dict[str, object]:
        return {
            "scanned": self.scanned,
            "extracted": self.extracted,
            "catalog_entries": len(self.catalog),
            "segments": len(self.segments),
            "words": self.totals.to_dict(),
            "scheme_usage": dict(sorted(self.scheme_usage.items())),
            "unclassified_patterns": list(self.unclassified_patterns),
            "missing_patterns": list(self.missing_patterns),
            "errors": [error.to_dict() for error in self.errors],
        }
