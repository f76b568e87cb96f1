"""Text normalization helpers for segment bodies and header values."""

from __future__ import annotations

from collections.abc import Iterable
import re

EXPORT_DELIMITER = "#"

_TAG_RE = re.compile(r"<[/]*[^>]*>")
# In str patterns \s matches every Unicode space separator (Zs) as well.
_INNER_WHITESPACE_RE = re.compile(r"\s{2,}")


def strip_tags(text: str) -> str:
    """Remove anything between ``<`` and the next ``>``."""

    return _TAG_RE.sub("", text)


def normalize_segment_text(raw: str) -> str:
    """Turn a raw inner-XML fragment into single-spaced plain text."""

    result = raw.replace("\n", " ")
    result = result.replace(EXPORT_DELIMITER, "")
    result = strip_tags(result)
    result = result.strip()
    return _INNER_WHITESPACE_RE.sub(" ", result)


def clean_header_text(parts: Iterable[str]) -> str:
    """Join repeated header values (titles, authors) into one catalog field."""

    joined = ",".join(parts)
    joined = joined.replace("\n", " ")
    return strip_tags(joined).strip()
