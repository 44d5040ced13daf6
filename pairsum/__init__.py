"""Sort integer pairs by their difference and total the midpoint partition."""

from pairsum.errors import InvalidInputError, PairSumError
from pairsum.partition import (
    SAMPLE_PAIRS,
    Breakdown,
    compute_total,
    explain_total,
    pair_key,
    sort_pairs,
    split_at_midpoint,
    validate_pairs,
)

__all__ = [
    "SAMPLE_PAIRS",
    "Breakdown",
    "InvalidInputError",
    "PairSumError",
    "compute_total",
    "explain_total",
    "pair_key",
    "sort_pairs",
    "split_at_midpoint",
    "validate_pairs",
]

__version__ = "1.0.0"
