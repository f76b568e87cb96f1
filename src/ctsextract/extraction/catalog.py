"""Catalog entry assembly and segment folding."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ctsextract.extraction.models import (
    CatalogEntry,
    DocumentContext,
    DocumentHeader,
    ExtractionResult,
    Leaf,
    ReferencePattern,
    Segment,
)
from ctsextract.extraction.normalization import clean_header_text, normalize_segment_text
from ctsextract.extraction.scripts import count_scripts


def citation_scheme_label(patterns: Sequence[ReferencePattern]) -> str:
    """Comma-joined pattern kinds from shallowest to deepest declaration."""

    ordered = sorted(patterns, key=lambda pattern: len(pattern.literal_path))
    return ",".join(pattern.kind for pattern in ordered)


def build_context(file_identifier_root: str, raw_bytes: bytes, header: DocumentHeader) -> DocumentContext:
    return DocumentContext(
        file_identifier_root=file_identifier_root,
        raw_bytes=raw_bytes,
        group_name=clean_header_text(header.authors),
        work_title=clean_header_text(header.titles),
        language=",".join(header.languages),
    )


def build_catalog_entry(context: DocumentContext, header: DocumentHeader) -> CatalogEntry:
    return CatalogEntry(
        urn=context.file_identifier_root,
        citation_scheme=citation_scheme_label(header.patterns),
        group_name=context.group_name,
        work_title=context.work_title,
        language=context.language,
    )


def build_segment(file_identifier_root: str, leaf: Leaf) -> Segment:
    """Normalize one leaf and attach its identifier and script counts."""

    text = normalize_segment_text(leaf.inner_xml)
    counts = count_scripts(text)
    return Segment(
        identifier=f"{file_identifier_root}:{'.'.join(leaf.numbers)}",
        text=text,
        greek_words=counts.greek,
        latin_words=counts.latin,
        arabic_words=counts.arabic,
    )


def fold_segments(result: ExtractionResult, segments: Iterable[Segment]) -> int:
    """Append segments to the batch and update running totals; returns how many were added."""

    added = 0
    for segment in segments:
        result.segments.append(segment)
        result.totals.add(segment.script_counts)
        added += 1
    return added
