"""Batch entry point: CSV of infix expressions in, XML results and a summary table out."""
import argparse
import logging
import math
import sys
from typing import Optional

from .config import (
    COMPARE_CONFIG,
    CONVERSION_CONFIG,
    IO_CONFIG,
    ConversionMode,
    validate_config,
)
from .csvfile import read_records
from .errors import RecordFileError
from .pipeline import process_batch
from .report import print_summary
from .xmlfile import write_results_xml

logger = logging.getLogger("exprconv")


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: '{value}'") from None
    if not number > 0 or math.isinf(number):
        raise argparse.ArgumentTypeError(f"must be a positive finite number, got {value}")
    return number


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprconv",
        description="Convert infix expressions to prefix and postfix and cross-check their evaluations",
    )
    parser.add_argument(
        "input_path",
        nargs="?",
        default=IO_CONFIG["input_path"],
        help="CSV file of 'sno,infix' rows",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=IO_CONFIG["output_path"],
        help="Path of the XML results file",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=[m.value for m in ConversionMode],
        default=CONVERSION_CONFIG["mode"].value,
        help="Conversion mode for malformed infix (default: lenient)",
    )
    parser.add_argument(
        "--separator",
        default=CONVERSION_CONFIG["separator"],
        help="String placed between tokens of the prefix/postfix output",
    )
    parser.add_argument(
        "--epsilon",
        type=positive_float,
        default=COMPARE_CONFIG["epsilon"],
        help="Tolerance when comparing prefix and postfix results",
    )
    parser.add_argument(
        "--workers",
        type=positive_int,
        default=IO_CONFIG["max_workers"],
        help="Process expressions on this many threads",
    )
    parser.add_argument(
        "--no-summary",
        action="store_true",
        help="Do not print the summary table",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    validate_config()

    try:
        records = read_records(args.input_path)
    except RecordFileError as e:
        logger.error("%s", e)
        return 1

    if not records:
        logger.error("No expressions found in the CSV file: %s", args.input_path)
        return 1

    results = process_batch(
        records,
        mode=ConversionMode(args.mode),
        separator=args.separator,
        epsilon=args.epsilon,
        max_workers=args.workers,
    )

    if not args.no_summary:
        print_summary(results)

    try:
        write_results_xml(args.output, results)
    except OSError as e:
        logger.error("Error generating XML file: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
