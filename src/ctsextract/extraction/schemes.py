"""Citation scheme catalog and reference-pattern classification.

Every scheme is listed once with the literal ``replacementPattern``
spellings observed in TEI corpora. Spellings are normalized with
:func:`normalize_pattern` when the catalog is built, so lookups are exact
dictionary hits on the normalized form. New tolerance is added as new
spellings here, never as looser matching.

Step tokens below read as: ``name`` is a child element, ``name#`` also
captures its ``@n`` value, and a leading ``//`` matches at any depth.
The walker starts from ``text/body``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from ctsextract.extraction.compiler import SchemeConfigurationError, compile_plan
from ctsextract.extraction.models import DepthMode, PathStep, ReferencePattern, SchemeDescriptor
from ctsextract.extraction.xmltree import canonical_name

logger = logging.getLogger(__name__)

_XPATH_WRAPPER = "#xpath("
_NAMESPACE_PREFIX_RE = re.compile(r"(/)[A-Za-z_][\w.-]*:")
_STEP_NAME_RE = re.compile(r"(/)([A-Za-z_][\w.-]*)")


def _plan(*tokens: str) -> tuple[PathStep, ...]:
    steps: list[PathStep] = []
    for index, token in enumerate(tokens):
        depth_mode = DepthMode.CHILD
        if token.startswith("//"):
            depth_mode = DepthMode.ARBITRARY_DESCENDANT
            token = token[2:]
        captures = token.endswith("#")
        steps.append(
            PathStep(
                element_name=token.rstrip("#"),
                depth_mode=depth_mode,
                captures_number=captures,
                is_terminal=index == len(tokens) - 1,
            )
        )
    return tuple(steps)


_SCHEME_TABLE: tuple[tuple[str, tuple[PathStep, ...], tuple[str, ...]], ...] = (
    (
        "body_div",
        _plan("div#"),
        (
            r"/tei:TEI/tei:text/tei:body/tei:div[@n=\'$1\']",
            r"/tei:TEI.2/tei:text/tei:body/tei:div[@n=\'$1\']",
        ),
    ),
    (
        "body_div2",
        _plan("div#", "div#"),
        (
            r"/tei:TEI.2/tei:text/tei:body/tei:div[@n=\'$1\']/tei:div[@n=\'$2\']",
            r"/tei:TEI/tei:text/tei:body/tei:div[@n=\'$1\']/tei:div[@n=\'$2\']",
        ),
    ),
    (
        "body_div3",
        _plan("div#", "div#", "div#"),
        (r"/tei:TEI.2/tei:text/tei:body/tei:div1[@n=\'$1\']/tei:div2[@n=\'$2\']/tei:div3[@n=\'$3\']",),
    ),
    (
        "body_desc_l",
        _plan("//l#"),
        (r"/tei:TEI/tei:text/tei:body//tei:l[@n=\'$1\']",),
    ),
    (
        "edition_div",
        _plan("div", "div#"),
        (
            "/tei:TEI/tei:text/tei:body/tei:div[@type='edition']/tei:div[@n='$1']",
            "/tei:TEI/tei:text/tei:body/div[@type='edition']/div[@n='$1']",
            r"/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n=\'$1\']",
            "/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']",
        ),
    ),
    (
        "edition_div2",
        _plan("div", "div#", "div#"),
        (
            "/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:div[@n='$2']",
            "/tei:TEI/tei:text/tei:body/tei:div[@type='translation']/tei:div[@n='$1']/tei:div[@n='$2']",
            r"/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n=\'$1\']/tei:div[@n=\'$2\']",
            "/tei:TEI/tei:text/tei:body/div[@type='edition']/div[@n='$1']/div[@n='$2']",
            "/tei:TEI/tei:text/tei:body/tei:div[@type='edition']/tei:div[@n='$1']/tei:div[@n='$2']",
        ),
    ),
    (
        "edition_div3",
        _plan("div", "div#", "div#", "div#"),
        (
            "/tei:TEI/tei:text/tei:body/tei:div[@type='edition']/tei:div[@n='$1']/tei:div[@n='$2']/tei:div[@n='$3']",
            "/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:div[@n='$2']/tei:div[@n='$3']",
            "/tei:TEI/tei:text/tei:body/div[@type='edition']/div[@n='$1']/div[@n='$2']/div[@n='$3']",
            r"/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n=\'$1\']/tei:div[@n=\'$2\']/tei:div[@n=\'$3\']",
        ),
    ),
    (
        "edition_div4",
        _plan("div", "div#", "div#", "div#", "div#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:div[@n='$2']/tei:div[@n='$3']/tei:div[@n='$4']",),
    ),
    (
        "edition_nested_div",
        _plan("div", "div", "div#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div/tei:div[@n='$1']",),
    ),
    (
        "edition_p",
        _plan("div", "p#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:p[@n='$1']",),
    ),
    (
        "edition_p_seg",
        _plan("div", "p", "seg#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:p/tei:seg[@n='$1']",),
    ),
    (
        "edition_l",
        _plan("div", "l#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:l[@n='$1']",),
    ),
    (
        "edition_div_p",
        _plan("div", "div#", "p#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:p[@n='$2']",),
    ),
    (
        "edition_div_ab",
        _plan("div", "div#", "ab#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:ab[@n='$2']",),
    ),
    (
        "edition_div_l",
        _plan("div", "div#", "l#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:l[@n='$2']",),
    ),
    (
        "edition_div_lg_l",
        _plan("div", "div#", "lg", "l#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:lg/tei:l[@n='$2']",),
    ),
    (
        "edition_div_p_cit",
        _plan("div", "div#", "p#", "cit#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:p[@n='$2']/tei:cit[@n='$3']",),
    ),
    (
        "edition_div2_p",
        _plan("div", "div#", "div#", "p#"),
        (
            "/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:div[@n='$2']/tei:p[@n='$3']",
            r"/tei:TEI/tei:text/tei:body/tei:div[@type='edition']/tei:div[@n=\'$1\']/tei:div[@n=\'$2\']/tei:p[@n=\'$3\']",
        ),
    ),
    (
        "edition_div2_l",
        _plan("div", "div#", "div#", "l#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:div[@n='$2']/tei:l[@n='$3']",),
    ),
    (
        "edition_div2_cit",
        _plan("div", "div#", "div#", "cit#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:div[@n='$2']/tei:cit[@n='$3']",),
    ),
    (
        "edition_div3_p",
        _plan("div", "div#", "div#", "div#", "p#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:div[@n='$2']/tei:div[@n='$3']/tei:p[@n='$4']",),
    ),
    (
        "edition_desc_div",
        _plan("div", "//div#"),
        (
            "/tei:TEI/tei:text/tei:body/tei:div//tei:div[@n='$1']",
            r"/tei:TEI/tei:text/tei:body/tei:div//tei:div[@n=\'$1\']",
        ),
    ),
    (
        "edition_section_desc_div",
        _plan("div", "div", "//div#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div//tei:div[@subtype='fragment'][@n='$1']",),
    ),
    (
        "edition_desc_l",
        _plan("div", "//l#"),
        (
            "/tei:TEI/tei:text/tei:body/tei:div//tei:l[@n='$1']",
            r"/tei:TEI/tei:text/tei:body/tei:div//tei:l[@n=\'$1\']",
            # speaker-divided drama: lines are collected at any depth under the edition
            "/tei:TEI/tei:text/tei:body/tei:div/tei:sp/tei:l[@n='$1']",
        ),
    ),
    (
        "edition_p_desc_l",
        _plan("div", "p", "//l#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:p//tei:l[@n='$1']",),
    ),
    (
        "edition_div_desc_div",
        _plan("div", "div#", "//div#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']//tei:div[@n='$2']",),
    ),
    (
        "edition_div2_desc_div",
        _plan("div", "div#", "div#", "//div#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']/tei:div[@n='$2']//tei:div[@n='$3']",),
    ),
    (
        "edition_div_desc_l",
        _plan("div", "div#", "//l#"),
        ("/tei:TEI/tei:text/tei:body/tei:div/tei:div[@n='$1']//tei:l[@n='$2']",),
    ),
)


def _canonical_step(match: re.Match[str]) -> str:
    return match.group(1) + canonical_name(match.group(2))


def normalize_pattern(literal: str) -> str:
    """Collapse cosmetic spelling differences of a reference pattern.

    Strips the ``#xpath(...)`` wrapper, unifies quoting, drops namespace
    prefixes and maps synonym element names (``div1``..``div7``, ``TEI.2``)
    onto their structural name. Predicates are kept verbatim.
    """

    text = literal.strip()
    if text.startswith(_XPATH_WRAPPER):
        text = text[len(_XPATH_WRAPPER):]
    if text.endswith(")"):
        text = text[:-1]
    text = text.replace("\\'", "'").replace('\\"', "'").replace('"', "'")
    text = _NAMESPACE_PREFIX_RE.sub(r"\1", text)
    text = _STEP_NAME_RE.sub(_canonical_step, text)
    return text.strip()


def build_catalog(
    table: Iterable[tuple[str, tuple[PathStep, ...], tuple[str, ...]]],
) -> tuple[tuple[SchemeDescriptor, ...], dict[str, SchemeDescriptor]]:
    """Compile a scheme table and index it by normalized spelling."""

    descriptors: list[SchemeDescriptor] = []
    lookup: dict[str, SchemeDescriptor] = {}
    seen_ids: set[str] = set()

    for scheme_id, steps, spellings in table:
        if scheme_id in seen_ids:
            raise SchemeConfigurationError(f"Duplicate scheme id {scheme_id!r}")
        if not spellings:
            raise SchemeConfigurationError(f"Scheme {scheme_id!r} lists no spellings")
        seen_ids.add(scheme_id)

        descriptor = SchemeDescriptor(id=scheme_id, steps=steps, spellings=spellings)
        compile_plan(descriptor)
        descriptors.append(descriptor)

        for spelling in spellings:
            key = normalize_pattern(spelling)
            existing = lookup.get(key)
            if existing is not None and existing.id != scheme_id:
                raise SchemeConfigurationError(
                    f"Spelling {spelling!r} maps to both {existing.id!r} and {scheme_id!r}"
                )
            lookup[key] = descriptor

    return tuple(descriptors), lookup


SCHEME_CATALOG, _LOOKUP = build_catalog(_SCHEME_TABLE)


def get_scheme(scheme_id: str) -> SchemeDescriptor:
    for descriptor in SCHEME_CATALOG:
        if descriptor.id == scheme_id:
            return descriptor
    raise KeyError(scheme_id)


def select_canonical_pattern(patterns: Sequence[ReferencePattern]) -> ReferencePattern | None:
    """Pick the most specific declared pattern: the longest literal, first declared on ties."""

    if not patterns:
        return None
    return max(patterns, key=lambda pattern: len(pattern.literal_path))


def classify(literal: str) -> SchemeDescriptor | None:
    """Return the scheme a literal pattern spells, or None when it is unknown."""

    descriptor = _LOOKUP.get(normalize_pattern(literal))
    if descriptor is None:
        logger.debug("No scheme matches pattern %r", literal)
    return descriptor
