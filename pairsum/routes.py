"""API routes for the Pair Partition Total service."""

import logging

from fastapi import APIRouter, Depends

from pairsum.config import Settings, get_settings
from pairsum.errors import InvalidInputError
from pairsum.models import BreakdownResponse, PairsRequest, TotalResponse
from pairsum.partition import SAMPLE_PAIRS, compute_total, explain_total

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/totals", tags=["totals"])


def _checked_pairs(submission: PairsRequest, settings: Settings) -> list[tuple[int, int]]:
    if len(submission.pairs) > settings.max_pairs:
        raise InvalidInputError(
            f"Too many pairs: {len(submission.pairs)} exceeds the limit of "
            f"{settings.max_pairs}"
        )
    return submission.pairs


@router.post("", response_model=TotalResponse)
def create_total(
    submission: PairsRequest, settings: Settings = Depends(get_settings)
) -> TotalResponse:
    """Compute the midpoint partition total of the submitted pairs."""
    pairs = _checked_pairs(submission, settings)
    total = compute_total(pairs)
    logger.info("Computed total %d over %d pairs", total, len(pairs))
    return TotalResponse(total=total, count=len(pairs))


@router.post("/breakdown", response_model=BreakdownResponse)
def create_breakdown(
    submission: PairsRequest, settings: Settings = Depends(get_settings)
) -> BreakdownResponse:
    """Compute the total and return every intermediate step."""
    pairs = _checked_pairs(submission, settings)
    return BreakdownResponse.from_breakdown(explain_total(pairs))


@router.get("/sample", response_model=BreakdownResponse)
def sample_breakdown() -> BreakdownResponse:
    """Breakdown of the built-in sample collection (total 170)."""
    return BreakdownResponse.from_breakdown(explain_total(SAMPLE_PAIRS))
