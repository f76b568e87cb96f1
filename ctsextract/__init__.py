"""Source-checkout shim so `python -m ctsextract.cli.extract_corpus` resolves the src/ modules."""

from __future__ import annotations

from pathlib import Path

_SRC_PACKAGE = Path(__file__).resolve().parent.parent / "src" / "ctsextract"

if _SRC_PACKAGE.is_dir():
    __path__.append(str(_SRC_PACKAGE))
