"""Runtime configuration for corpus extraction and export."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


DEFAULT_URN_BASE = "urn:cts:greekLit:"
DEFAULT_READER_BASE_URL = "https://scaife.perseus.org/reader/"
DEFAULT_VIEW_BASE_URL = "http://cts.dh.uni-leipzig.de/text/"
DEFAULT_PUBLISHER = "OGLP"


def _require_url(*, name: str, raw_value: str) -> str:
    if not raw_value:
        raise ValueError(f"{name} cannot be empty")
    if not (raw_value.startswith("http://") or raw_value.startswith("https://")):
        raise ValueError(f"{name} must start with http:// or https://")
    return raw_value


@dataclass(frozen=True, slots=True)
class ExtractorSettings:
    """Validated settings shared by the extractor and the exporters."""

    default_urn_base: str = DEFAULT_URN_BASE
    reader_base_url: str = DEFAULT_READER_BASE_URL
    view_base_url: str = DEFAULT_VIEW_BASE_URL
    publisher: str = DEFAULT_PUBLISHER

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractorSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        urn_base = source.get("CTSEXTRACT_DEFAULT_URN_BASE", DEFAULT_URN_BASE).strip()
        reader_base_url = source.get("CTSEXTRACT_READER_BASE_URL", DEFAULT_READER_BASE_URL).strip()
        view_base_url = source.get("CTSEXTRACT_VIEW_BASE_URL", DEFAULT_VIEW_BASE_URL).strip()
        publisher = source.get("CTSEXTRACT_PUBLISHER", DEFAULT_PUBLISHER).strip()

        if not urn_base.startswith("urn:") or not urn_base.endswith(":"):
            raise ValueError("CTSEXTRACT_DEFAULT_URN_BASE must look like 'urn:<namespace>:<collection>:'")
        if not publisher:
            raise ValueError("CTSEXTRACT_PUBLISHER cannot be empty")

        return cls(
            default_urn_base=urn_base,
            reader_base_url=_require_url(name="CTSEXTRACT_READER_BASE_URL", raw_value=reader_base_url),
            view_base_url=_require_url(name="CTSEXTRACT_VIEW_BASE_URL", raw_value=view_base_url),
            publisher=publisher,
        )
