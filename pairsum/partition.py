"""
Midpoint partition totals over integer pairs.

The computation, step by step:
  1. Key       -- every pair (first, second) gets the key first - second
  2. Sort      -- pairs are stable-sorted ascending by key
  3. Split     -- the sorted list is cut at N // 2
  4. Total     -- firsts of the left half plus seconds of the right half

On odd N the right half gets the extra element. Equal keys keep their input
order because ``sorted`` is stable.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pairsum.errors import InvalidInputError

logger = logging.getLogger(__name__)

Pair = tuple[int, int]

# Default CLI input; its total is 170.
SAMPLE_PAIRS: tuple[Pair, ...] = ((20, 60), (10, 50), (30, 190), (30, 300))


@dataclass(frozen=True)
class Breakdown:
    """Every intermediate value of one midpoint partition total."""

    sorted_pairs: tuple[Pair, ...]
    midpoint: int
    first_half: tuple[Pair, ...]
    second_half: tuple[Pair, ...]
    first_half_sum: int
    second_half_sum: int

    @property
    def total(self) -> int:
        return self.first_half_sum + self.second_half_sum

    def to_dict(self) -> dict:
        return {
            "sorted_pairs": [list(p) for p in self.sorted_pairs],
            "midpoint": self.midpoint,
            "first_half": [list(p) for p in self.first_half],
            "second_half": [list(p) for p in self.second_half],
            "first_half_sum": self.first_half_sum,
            "second_half_sum": self.second_half_sum,
            "total": self.total,
        }


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_pairs(pairs: Iterable[Sequence[int]]) -> list[Pair]:
    """Return ``pairs`` as a list of plain int tuples.

    Lists are accepted as well as tuples. Strings, wrong-length items and
    non-integer values (including booleans) are rejected.

    Raises:
        InvalidInputError: If any item is not a pair of integers.
    """
    if isinstance(pairs, (str, bytes)):
        raise InvalidInputError("Expected a sequence of pairs, got a string")
    try:
        items = list(pairs)
    except TypeError:
        raise InvalidInputError(
            f"Expected a sequence of pairs, got {type(pairs).__name__}"
        ) from None

    validated: list[Pair] = []
    for index, item in enumerate(items):
        if isinstance(item, (str, bytes)) or not isinstance(item, Sequence):
            raise InvalidInputError(
                f"Pair {index} is not a sequence: {item!r}"
            )
        if len(item) != 2:
            raise InvalidInputError(
                f"Pair {index} must have exactly 2 elements, got {len(item)}"
            )
        first, second = item
        if not (_is_int(first) and _is_int(second)):
            raise InvalidInputError(
                f"Pair {index} must contain integers, got {item!r}"
            )
        validated.append((first, second))
    return validated


def pair_key(pair: Pair) -> int:
    """Ordering key of a pair: first minus second."""
    return pair[0] - pair[1]


def sort_pairs(pairs: Iterable[Pair]) -> list[Pair]:
    """Stable ascending sort by :func:`pair_key`. The input is not modified."""
    return sorted(pairs, key=pair_key)


def split_at_midpoint(ordered: Sequence[Pair]) -> tuple[list[Pair], list[Pair]]:
    """Split into ``[0, N // 2)`` and ``[N // 2, N)``."""
    mid = len(ordered) // 2
    return list(ordered[:mid]), list(ordered[mid:])


def explain_total(pairs: Iterable[Sequence[int]]) -> Breakdown:
    """Compute the partition total and keep every intermediate step.

    Raises:
        InvalidInputError: If ``pairs`` is not a collection of integer pairs.
    """
    ordered = sort_pairs(validate_pairs(pairs))
    first_half, second_half = split_at_midpoint(ordered)

    breakdown = Breakdown(
        sorted_pairs=tuple(ordered),
        midpoint=len(first_half),
        first_half=tuple(first_half),
        second_half=tuple(second_half),
        first_half_sum=sum(first for first, _ in first_half),
        second_half_sum=sum(second for _, second in second_half),
    )
    logger.debug(
        "Partitioned %d pairs at %d -> total %d",
        len(ordered), breakdown.midpoint, breakdown.total,
    )
    return breakdown


def compute_total(pairs: Iterable[Sequence[int]]) -> int:
    """Sum of firsts in the lower half plus seconds in the upper half.

    >>> compute_total(SAMPLE_PAIRS)
    170
    >>> compute_total([])
    0
    """
    return explain_total(pairs).total
