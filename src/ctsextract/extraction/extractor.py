"""Batch extraction orchestrator over a TEI corpus."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from lxml import etree

from ctsextract.config import ExtractorSettings
from ctsextract.extraction.catalog import build_catalog_entry, build_context, build_segment, fold_segments
from ctsextract.extraction.header import parse_header
from ctsextract.extraction.models import (
    CatalogEntry,
    DocumentContext,
    DocumentHeader,
    ExtractionResult,
    FileError,
    ReferencePattern,
    Segment,
)
from ctsextract.extraction.schemes import classify, select_canonical_pattern
from ctsextract.extraction.walker import walk
from ctsextract.extraction.xmltree import parse_document

logger = logging.getLogger(__name__)

# CapiTainS and eXist bookkeeping files that share the .xml suffix.
_EXCLUDED_FILE_NAMES = frozenset({"__cts__.xml", "build.xml", "expath-pkg.xml", "repo.xml"})


@dataclass(slots=True)
class ExtractionError(Exception):
    """Domain error for unreadable or unparsable source documents."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


@dataclass(slots=True)
class DocumentExtraction:
    """Everything one document contributes to a batch."""

    context: DocumentContext
    header: DocumentHeader
    canonical_pattern: ReferencePattern | None = None
    catalog_entry: CatalogEntry | None = None
    segments: list[Segment] = field(default_factory=list)


def _is_candidate(path: Path) -> bool:
    return path.suffix.lower() == ".xml" and path.name not in _EXCLUDED_FILE_NAMES


def collect_corpus_files(target: Path) -> list[Path]:
    """List the corpus documents under ``target`` in a stable order."""

    if target.is_file():
        return [target]
    if target.is_dir():
        return sorted(path for path in target.rglob("*") if path.is_file() and _is_candidate(path))
    raise FileNotFoundError(f"Corpus path does not exist: {target}")


def file_identifier_root(path: Path, urn_base: str) -> str:
    name = path.stem if path.suffix.lower() == ".xml" else path.name
    return f"{urn_base}{name}"


class CorpusExtractor:
    """Classify, walk and fold every document of a corpus into one result."""

    def __init__(self, settings: ExtractorSettings | None = None) -> None:
        self._settings = settings or ExtractorSettings()

    @property
    def settings(self) -> ExtractorSettings:
        return self._settings

    def extract_document(self, path: str | Path) -> DocumentExtraction:
        """Run one document through header parsing, classification and walking."""

        source = Path(path)
        raw_bytes = self._read_bytes(source)
        try:
            root = parse_document(raw_bytes)
        except etree.XMLSyntaxError as exc:
            raise ExtractionError(source, f"Malformed XML: {exc}") from exc

        header = parse_header(root, raw_bytes)
        identifier_root = file_identifier_root(source, header.urn_base or self._settings.default_urn_base)
        context = build_context(identifier_root, raw_bytes, header)
        extraction = DocumentExtraction(context=context, header=header)

        canonical = select_canonical_pattern(header.patterns)
        if canonical is None:
            return extraction

        extraction.canonical_pattern = canonical
        extraction.catalog_entry = build_catalog_entry(context, header)
        context.scheme = classify(canonical.literal_path)
        if context.scheme is not None:
            extraction.segments = [build_segment(identifier_root, leaf) for leaf in walk(root, context.scheme.steps)]
        return extraction

    def extract(self, target: str | Path) -> ExtractionResult:
        """Extract every candidate file under ``target``.

        Per-file failures are recorded on the result; only a corpus path
        that cannot be enumerated raises.
        """

        files = collect_corpus_files(Path(target))
        result = ExtractionResult(scanned=len(files))
        for file_path in files:
            self._extract_into(file_path, result)

        logger.info(
            "Extracted %s of %s files into %s segments",
            result.extracted,
            result.scanned,
            len(result.segments),
        )
        return result

    def _extract_into(self, path: Path, result: ExtractionResult) -> None:
        try:
            extraction = self.extract_document(path)
        except ExtractionError as exc:
            logger.warning("Skipping %s: %s", path.name, exc.message)
            result.errors.append(FileError(source_path=str(path), error=str(exc)))
            return

        if extraction.catalog_entry is None or extraction.canonical_pattern is None:
            logger.info("No citation pattern declared in %s", path.name)
            result.missing_patterns.append(path.name)
            return

        result.catalog.append(extraction.catalog_entry)
        scheme = extraction.context.scheme
        if scheme is None:
            logger.info("Unrecognized citation pattern in %s: %s", path.name, extraction.canonical_pattern.literal_path)
            result.record_unclassified(extraction.canonical_pattern.literal_path)
            return

        result.scheme_usage[scheme.id] += 1
        result.extracted += 1
        added = fold_segments(result, extraction.segments)
        logger.debug("%s: scheme %s, %s segments", path.name, scheme.id, added)

    def _read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise ExtractionError(path, f"Failed to read source file: {exc}") from exc
