#!/usr/bin/env python3
"""
Transcript Extraction CLI

Reads a consultation transcript and prints the extraction document as JSON.

Usage:
    appointment-extract transcript.txt
    appointment-extract transcript.txt --duration 312
    cat transcript.txt | appointment-extract --log-level DEBUG
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import logging_settings
from .core.extraction_engine import extract
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appointment-extract",
        description="Extract medication, test, follow-up and safety instructions from a transcript"
    )
    parser.add_argument(
        "transcript",
        nargs="?",
        type=Path,
        help="Transcript text file (reads stdin when omitted)"
    )
    parser.add_argument(
        "--duration",
        type=int,
        default=None,
        help="Recording duration in seconds, stored in the metadata"
    )
    parser.add_argument(
        "--log-level",
        default=logging_settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (logs go to stderr)"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=logging_settings.LOG_FORMAT_JSON,
        help="Emit logs as JSON"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (0 for compact output)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, format_json=args.json_logs)

    if args.transcript is not None:
        if not args.transcript.exists():
            logger.error(f"Transcript not found: {args.transcript}")
            return 1
        transcript = args.transcript.read_text(encoding="utf-8")
    else:
        transcript = sys.stdin.read()

    result = extract(transcript, recording_duration_seconds=args.duration)

    print(json.dumps(result.to_dict(), indent=args.indent or None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
