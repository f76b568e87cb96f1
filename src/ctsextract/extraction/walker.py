"""Generic descent over a TEI body driven by a compiled scheme plan."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from lxml import etree

from ctsextract.extraction.models import DepthMode, Leaf, PathStep
from ctsextract.extraction.xmltree import inner_xml, iter_children, matches, parse_document

NUMBER_ATTRIBUTE = "n"


def iter_bodies(root: etree._Element) -> Iterator[etree._Element]:
    """Every ``text/body`` directly under the document element."""

    for text in iter_children(root, "text"):
        yield from iter_children(text, "body")


def _scan_descendants(element: etree._Element, name: str) -> Iterator[etree._Element]:
    """Stream through ``element``'s content and yield outermost ``name`` matches.

    A matched element is handed out whole and its subtree is skipped, so
    nested matches are part of the outer match's content rather than
    separate results.
    """

    walker = etree.iterwalk(element, events=("start",))
    # the first start event is the scanned element itself
    next(walker, None)
    for _event, node in walker:
        if matches(node, name):
            yield node
            walker.skip_subtree()


def _descend(
    element: etree._Element,
    plan: Sequence[PathStep],
    depth: int,
    numbers: tuple[str, ...],
) -> Iterator[Leaf]:
    step = plan[depth]
    if step.depth_mode is DepthMode.ARBITRARY_DESCENDANT:
        candidates = _scan_descendants(element, step.element_name)
    else:
        candidates = iter_children(element, step.element_name)

    for candidate in candidates:
        captured = numbers
        if step.captures_number:
            captured = numbers + (candidate.get(NUMBER_ATTRIBUTE, ""),)
        if step.is_terminal:
            yield Leaf(numbers=captured, inner_xml=inner_xml(candidate))
        else:
            yield from _descend(candidate, plan, depth + 1, captured)


def walk(root: etree._Element, plan: Sequence[PathStep]) -> Iterator[Leaf]:
    """Yield every leaf the plan reaches, in document order."""

    if not plan:
        return
    for body in iter_bodies(root):
        yield from _descend(body, plan, 0, ())


def walk_document(raw_bytes: bytes, plan: Sequence[PathStep]) -> list[Leaf]:
    """Parse raw TEI bytes and collect the plan's leaves."""

    return list(walk(parse_document(raw_bytes), plan))
