"""Read citation patterns and catalog metadata from a TEI header."""

from __future__ import annotations

import re

from lxml import etree

from ctsextract.extraction.models import DocumentHeader, ReferencePattern

_URN_BASE_RE = re.compile(r"urn:[^\W\d_]+:[^\W\d_]+:")

_REF_PATTERN_XPATH = (
    "./*[local-name()='teiHeader']/*[local-name()='encodingDesc']"
    "/*[local-name()='refsDecl']/*[local-name()='cRefPattern']"
)
_TITLE_XPATH = "./*[local-name()='teiHeader']/*[local-name()='fileDesc']/*[local-name()='titleStmt']/*[local-name()='title']"
_AUTHOR_XPATH = "./*[local-name()='teiHeader']/*[local-name()='fileDesc']/*[local-name()='titleStmt']/*[local-name()='author']"
_LANGUAGE_XPATH = (
    "./*[local-name()='teiHeader']/*[local-name()='profileDesc']"
    "/*[local-name()='langUsage']/*[local-name()='language']"
)


def detect_urn_base(raw_bytes: bytes) -> str | None:
    """Return the first ``urn:<namespace>:<collection>:`` prefix found in the raw document."""

    match = _URN_BASE_RE.search(raw_bytes.decode("utf-8", errors="replace"))
    return match.group(0) if match else None


def _element_texts(root: etree._Element, xpath: str) -> list[str]:
    return ["".join(node.itertext()) for node in root.xpath(xpath)]


def parse_header(root: etree._Element, raw_bytes: bytes | None = None) -> DocumentHeader:
    """Extract the declared reference patterns and descriptive metadata.

    ``root`` is the document element (``TEI`` or ``TEI.2``). Patterns keep
    their declaration order, which the classifier relies on for tie-breaks.
    """

    patterns = [
        ReferencePattern(
            literal_path=node.get("replacementPattern", ""),
            kind=node.get("n", ""),
        )
        for node in root.xpath(_REF_PATTERN_XPATH)
    ]
    languages = [node.get("ident", "") for node in root.xpath(_LANGUAGE_XPATH)]

    return DocumentHeader(
        patterns=patterns,
        titles=_element_texts(root, _TITLE_XPATH),
        authors=_element_texts(root, _AUTHOR_XPATH),
        languages=languages,
        urn_base=detect_urn_base(raw_bytes) if raw_bytes is not None else None,
    )
