"""CLI entrypoint that sorts the lines of a text file by stroke order."""

from __future__ import annotations

import argparse
from collections import Counter
import logging
from pathlib import Path
import sys
from typing import Sequence

from zh_collation.errors import InvalidEncodingError
from zh_collation.io.text_io import STDIO_PATH, read_lines, write_lines
from zh_collation.models import (
    CharacterClass,
    ChineseVariant,
    DigitCaseOrder,
    NumeralMode,
    Options,
)
from zh_collation.ranking import classify
from zh_collation.sorting import sort_zh
from zh_collation.strokes.repository import StrokeTable, default_stroke_table

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
EMPTY_LABEL = "empty"

logger = logging.getLogger(__name__)


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def collect_class_counts(
    lines: Sequence[str], options: Options, table: StrokeTable
) -> dict[str, int]:
    """Count lines by the collation class of their first character.

    Args:
        lines: Decoded lines.
        options: Options used for classification.
        table: Stroke table used for classification.

    Returns:
        Mapping of class label (or ``empty``) to line count.
    """

    counter: Counter[str] = Counter()
    for line in lines:
        if not line:
            counter[EMPTY_LABEL] += 1
            continue
        counter[classify(line[0], options, table).value] += 1
    return dict(counter)


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the sort command.
    """

    parser = argparse.ArgumentParser(
        description="Sort lines of Chinese text by stroke count instead of code point."
    )
    parser.add_argument("input", type=Path, help="Input text file, or '-' for stdin.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination file (default: stdout).",
    )
    parser.add_argument(
        "--uppercase-first",
        action="store_true",
        help="Rank uppercase numerals (壹貳參) before lowercase numerals (一二三).",
    )
    parser.add_argument(
        "--numerals",
        choices=[mode.value for mode in NumeralMode],
        default=NumeralMode.DEFINITION_WITH_CASE.value,
        help="How Chinese numerals are ranked.",
    )
    parser.add_argument(
        "--variant",
        choices=[variant.value for variant in ChineseVariant],
        default=ChineseVariant.TRADITIONAL.value,
        help="Which Unihan stroke count to prefer for dual-valued characters.",
    )
    parser.add_argument(
        "--strokes",
        type=Path,
        default=None,
        help="Unihan kTotalStrokes file to use instead of the bundled table.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print line counts per character class to stderr.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level, case-insensitive (default: WARNING).",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> Options:
    """Map parsed CLI arguments onto collation options."""

    digit_case_order = DigitCaseOrder.LOWERCASE_FIRST
    if args.uppercase_first:
        digit_case_order = DigitCaseOrder.UPPERCASE_FIRST
    return Options(
        digit_case_order=digit_case_order,
        numeral_mode=NumeralMode(args.numerals),
        variant=ChineseVariant(args.variant),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through sorted output.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if args.input != STDIO_PATH and not args.input.exists():
        raise SystemExit(f"Input not found: {args.input}")
    if args.strokes is not None and not args.strokes.exists():
        raise SystemExit(f"Stroke data not found: {args.strokes}")

    options = options_from_args(args)
    table = StrokeTable(args.strokes) if args.strokes is not None else default_stroke_table()

    raw_lines = read_lines(args.input)
    try:
        ordered = sort_zh(raw_lines, options=options, table=table)
    except InvalidEncodingError as exc:
        logger.error("Rejected %s: %s", args.input, exc.detail)
        raise SystemExit(str(exc)) from exc

    write_lines(ordered, output_path=args.output)
    logger.info("Sorted %d lines from %s", len(ordered), args.input)

    if args.summary:
        counts = collect_class_counts(ordered, options, table)
        labels = [EMPTY_LABEL, *(character_class.value for character_class in CharacterClass)]
        rows = [[label, str(counts[label])] for label in labels if label in counts]
        print(_format_table(["class", "count"], rows), file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
