"""lxml parsing and element-name helpers shared by header parsing and walking."""

from __future__ import annotations

from collections.abc import Iterator
import re
from xml.sax.saxutils import escape

from lxml import etree

# TEI numbered divisions play the same structural role as nested <div>.
_NUMBERED_DIV_RE = re.compile(r"^div[1-7]$")
_NAME_SYNONYMS: dict[str, str] = {"TEI.2": "TEI"}


def parse_document(raw_bytes: bytes) -> etree._Element:
    """Parse a TEI document without touching the network or external DTDs."""

    parser = etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False, huge_tree=False)
    return etree.fromstring(raw_bytes, parser=parser)


def canonical_name(name: str) -> str:
    """Collapse synonym element names onto one structural name."""

    if _NUMBERED_DIV_RE.match(name):
        return "div"
    return _NAME_SYNONYMS.get(name, name)


def local_name(element: etree._Element) -> str | None:
    """Namespace-free tag name, or None for comments and processing instructions."""

    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def matches(element: etree._Element, name: str) -> bool:
    tag = local_name(element)
    return tag is not None and canonical_name(tag) == name


def iter_children(element: etree._Element, name: str) -> Iterator[etree._Element]:
    """Immediate children matching ``name`` in document order."""

    for child in element:
        if matches(child, name):
            yield child


def inner_xml(element: etree._Element) -> str:
    """Serialize an element's content (text, child markup, tails) without its own tags."""

    # lxml hands back .text unescaped while tostring keeps tails escaped
    parts = [escape(element.text or "")]
    for child in element:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)
