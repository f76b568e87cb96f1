"""CLI command that extracts a TEI corpus and writes one export format."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from ctsextract.config import ExtractorSettings
from ctsextract.export import DEFAULT_FORMAT, build_default_exporters
from ctsextract.extraction import CorpusExtractor

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Extract CTS catalog and passages from TEI documents")
    parser.add_argument("--path", default=".", help="Corpus directory or single TEI file")
    parser.add_argument("--output", required=True, help="Destination file for the export")
    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        choices=sorted(build_default_exporters()),
        help="Export format",
    )
    parser.add_argument("--log-level", default="WARNING", choices=_LOG_LEVELS, help="Logging verbosity")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, args.log_level),
    )

    try:
        settings = ExtractorSettings.from_env()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    extractor = CorpusExtractor(settings)
    try:
        result = extractor.extract(Path(args.path))
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 2

    output_path = Path(args.output)
    exporter = build_default_exporters(settings)[args.format]
    exporter.write(output_path, result)

    payload = {
        "path": str(args.path),
        "output": str(output_path),
        "format": args.format,
        **result.to_summary(),
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0 if not result.errors else 1


if __name__ == "__main__":
    raise SystemExit(main())
