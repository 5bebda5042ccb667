#!/usr/bin/env python3
# ============================================================================
# src/prescription_insight/cli.py
# ============================================================================
"""
Command-line runner for prescription analysis.

Usage:
    prescription-insight ocr_output.txt --confidence 0.82
    cat ocr_output.txt | prescription-insight -
    prescription-insight --medicine Crocin
"""

import argparse
import json
import sys
from typing import List, Optional

from .core.pipeline import PrescriptionPipeline
from .constants.medication_db import get_knowledge_base
from .utils.exceptions import InsufficientTextError, MedicineNotFoundError
from .utils.logging import get_logger, setup_logging, setup_logging_from_settings

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze OCR text from a prescription"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Text file with OCR output ('-' reads stdin)"
    )
    parser.add_argument(
        "--confidence", "-c",
        type=float,
        default=0.0,
        help="OCR confidence reported by the OCR engine (0-1)"
    )
    parser.add_argument(
        "--medicine", "-m",
        type=str,
        help="Print the monograph for a medicine instead of analyzing text"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        setup_logging(level="DEBUG")
    else:
        setup_logging_from_settings()

    if args.medicine:
        try:
            monograph = get_knowledge_base().describe(args.medicine)
        except MedicineNotFoundError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2
        print(json.dumps(monograph.model_dump(), indent=2, ensure_ascii=False))
        return 0

    text = _read_input(args.input)
    logger.debug(f"Read {len(text)} characters from {'stdin' if args.input == '-' else args.input}")
    try:
        result = PrescriptionPipeline().run(text, args.confidence)
    except InsufficientTextError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
