"""
Command-line interface.

With no pairs given it totals the built-in sample collection and prints 170.

Examples:
    pairsum 20,60 10,50 30,190 30,300
    pairsum -5,-1 3,-7
    printf '5 3\n1 1\n' | pairsum --stdin --breakdown
"""

import argparse
import logging
import re
import sys
from collections.abc import Iterable
from typing import Optional, TextIO

from pydantic import ValidationError

from pairsum.config import get_settings
from pairsum.errors import InvalidInputError
from pairsum.logging_config import setup_logging
from pairsum.partition import SAMPLE_PAIRS, Breakdown, explain_total

logger = logging.getLogger(__name__)

# "A,B" or "A B" with optional signs; argparse would read "-5,-1" as an option.
_PAIR_TOKEN = re.compile(r"^\s*-?\d+\s*(?:,|\s)\s*-?\d+\s*$")


def split_pair_tokens(argv: Iterable[str]) -> tuple[list[str], list[str]]:
    """Separate pair-shaped tokens from the rest of the command line.

    Pairs keep their relative order. Everything else is left for argparse.
    """
    pairs, rest = [], []
    for token in argv:
        (pairs if _PAIR_TOKEN.match(token) else rest).append(token)
    return pairs, rest


def parse_pair(text: str) -> tuple[int, int]:
    """Parse ``"A,B"`` or ``"A B"`` into an integer pair."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise InvalidInputError(f"Expected two integers, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidInputError(f"Not an integer pair: {text!r}") from None


def read_pairs(lines: Iterable[str]) -> list[tuple[int, int]]:
    """One pair per line; blank lines and ``#`` comments are skipped."""
    pairs = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        pairs.append(parse_pair(line))
    return pairs


def format_breakdown(breakdown: Breakdown) -> str:
    def _fmt(pairs):
        return " ".join(f"({a},{b})" for a, b in pairs) or "-"

    return "\n".join([
        f"sorted:      {_fmt(breakdown.sorted_pairs)}",
        f"midpoint:    {breakdown.midpoint}",
        f"first half:  {_fmt(breakdown.first_half)} -> {breakdown.first_half_sum}",
        f"second half: {_fmt(breakdown.second_half)} -> {breakdown.second_half_sum}",
    ])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pairsum",
        description=(
            "Sort integer pairs by first - second, split at the midpoint and print "
            "the sum of the lower half's firsts and the upper half's seconds."
        ),
    )
    parser.add_argument(
        "pairs", nargs="*", metavar="A,B",
        help=(
            "integer pairs such as 20,60 or -5,-1; "
            "the built-in sample is used when none are given"
        ),
    )
    parser.add_argument(
        "--stdin", action="store_true",
        help="read one pair per line from standard input",
    )
    parser.add_argument(
        "--breakdown", action="store_true",
        help="print the sorted pairs and both halves before the total",
    )
    parser.add_argument(
        "--log-level", default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="log level for diagnostics on stderr",
    )
    return parser


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    pair_tokens, rest = split_pair_tokens(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(rest)
    pair_tokens.extend(args.pairs)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        settings = get_settings()
    except ValidationError as exc:
        parser.error(f"invalid PAIRSUM_* environment settings: {exc}")
    setup_logging(
        log_level=args.log_level or settings.log_level,
        json_output=settings.log_json,
        stream=sys.stderr,
    )

    try:
        pairs = [parse_pair(p) for p in pair_tokens]
        if args.stdin:
            pairs.extend(read_pairs(stdin))
        if not pair_tokens and not args.stdin:
            pairs = list(SAMPLE_PAIRS)
        breakdown = explain_total(pairs)
    except InvalidInputError as exc:
        logger.debug("Rejected input: %s", exc)
        parser.error(str(exc))

    if args.breakdown:
        print(format_breakdown(breakdown), file=stdout)
    print(breakdown.total, file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
