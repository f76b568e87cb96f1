"""Extraction package interfaces."""

from .extractor import CorpusExtractor, DocumentExtraction, ExtractionError, collect_corpus_files
from .models import CatalogEntry, ExtractionResult, Segment

__all__ = [
    "CatalogEntry",
    "CorpusExtractor",
    "DocumentExtraction",
    "ExtractionError",
    "ExtractionResult",
    "Segment",
    "collect_corpus_files",
]
