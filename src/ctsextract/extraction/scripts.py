"""Per-script word tallies for Greek, Latin and Arabic text.

A "word" is a maximal run of code points belonging to one script, so
``"λόγος λόγος"`` counts two Greek words and ``"λόγοςλόγος"`` counts one.
Ranges follow the Unicode ``Scripts.txt`` assignments; characters marked
Common or Inherited there (punctuation, digits, combining diacritics,
tatweel) belong to no script and therefore split runs.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

from ctsextract.extraction.models import ScriptCounts

_GREEK_RANGES = (
    (0x0370, 0x0373), (0x0375, 0x0377), (0x037A, 0x037D), (0x037F, 0x037F),
    (0x0384, 0x0384), (0x0386, 0x0386), (0x0388, 0x038A), (0x038C, 0x038C),
    (0x038E, 0x03A1), (0x03A3, 0x03E1), (0x03F0, 0x03FF),
    (0x1D26, 0x1D2A), (0x1D5D, 0x1D61), (0x1D66, 0x1D6A), (0x1DBF, 0x1DBF),
    (0x1F00, 0x1F15), (0x1F18, 0x1F1D), (0x1F20, 0x1F45), (0x1F48, 0x1F4D),
    (0x1F50, 0x1F57), (0x1F59, 0x1F59), (0x1F5B, 0x1F5B), (0x1F5D, 0x1F5D),
    (0x1F5F, 0x1F7D), (0x1F80, 0x1FB4), (0x1FB6, 0x1FC4), (0x1FC6, 0x1FD3),
    (0x1FD6, 0x1FDB), (0x1FDD, 0x1FEF), (0x1FF2, 0x1FF4), (0x1FF6, 0x1FFE),
    (0x2126, 0x2126), (0xAB65, 0xAB65),
    (0x10140, 0x1018E), (0x101A0, 0x101A0), (0x1D200, 0x1D245),
)

_LATIN_RANGES = (
    (0x0041, 0x005A), (0x0061, 0x007A), (0x00AA, 0x00AA), (0x00BA, 0x00BA),
    (0x00C0, 0x00D6), (0x00D8, 0x00F6), (0x00F8, 0x02B8), (0x02E0, 0x02E4),
    (0x1D00, 0x1D25), (0x1D2C, 0x1D5C), (0x1D62, 0x1D65), (0x1D6B, 0x1D77),
    (0x1D79, 0x1DBE), (0x1E00, 0x1EFF),
    (0x2071, 0x2071), (0x207F, 0x207F), (0x2090, 0x209C),
    (0x212A, 0x212B), (0x2132, 0x2132), (0x214E, 0x214E), (0x2160, 0x2188),
    (0x2C60, 0x2C7F), (0xA722, 0xA787), (0xA78B, 0xA7CA), (0xA7F2, 0xA7FF),
    (0xAB30, 0xAB5A), (0xAB5C, 0xAB64), (0xAB66, 0xAB69),
    (0xFB00, 0xFB06), (0xFF21, 0xFF3A), (0xFF41, 0xFF5A),
)

_ARABIC_RANGES = (
    (0x0600, 0x0604), (0x0606, 0x060B), (0x060D, 0x061A), (0x061C, 0x061C),
    (0x061E, 0x061E), (0x0620, 0x063F), (0x0641, 0x064A), (0x0656, 0x066F),
    (0x0671, 0x06DC), (0x06DE, 0x06FF), (0x0750, 0x077F),
    (0x08A0, 0x08B4), (0x08B6, 0x08C7), (0x08D3, 0x08E1), (0x08E3, 0x08FF),
    (0xFB50, 0xFBC1), (0xFBD3, 0xFD3D), (0xFD50, 0xFD8F), (0xFD92, 0xFDC7),
    (0xFDF0, 0xFDFD), (0xFE70, 0xFE74), (0xFE76, 0xFEFC),
    (0x10E60, 0x10E7E), (0x1EE00, 0x1EEFF),
)


def _run_pattern(ranges: Iterable[tuple[int, int]]) -> re.Pattern[str]:
    parts: list[str] = []
    for start, end in ranges:
        if start == end:
            parts.append(re.escape(chr(start)))
        else:
            parts.append(f"{re.escape(chr(start))}-{re.escape(chr(end))}")
    return re.compile(f"[{''.join(parts)}]+")


_GREEK_RUN_RE = _run_pattern(_GREEK_RANGES)
_LATIN_RUN_RE = _run_pattern(_LATIN_RANGES)
_ARABIC_RUN_RE = _run_pattern(_ARABIC_RANGES)


def _count_runs(pattern: re.Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def count_scripts(text: str) -> ScriptCounts:
    """Count Greek, Latin and Arabic runs in normalized text."""

    if not text:
        return ScriptCounts()
    return ScriptCounts(
        greek=_count_runs(_GREEK_RUN_RE, text),
        latin=_count_runs(_LATIN_RUN_RE, text),
        arabic=_count_runs(_ARABIC_RUN_RE, text),
    )
