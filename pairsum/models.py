"""Pydantic request/response models for the Pair Partition Total service."""

from pydantic import BaseModel, Field, StrictInt

from pairsum.partition import Breakdown

PairModel = tuple[StrictInt, StrictInt]


class PairsRequest(BaseModel):
    """Schema for submitting a collection of pairs."""

    pairs: list[PairModel] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"pairs": [[20, 60], [10, 50], [30, 190], [30, 300]]},
                {"pairs": [[5, 3]]},
            ]
        }
    }


class TotalResponse(BaseModel):
    """Partition total of a submitted collection."""

    total: int
    count: int


class BreakdownResponse(BaseModel):
    """All intermediate values of a partition total."""

    sorted_pairs: list[tuple[int, int]]
    midpoint: int
    first_half: list[tuple[int, int]]
    second_half: list[tuple[int, int]]
    first_half_sum: int
    second_half_sum: int
    total: int

    @classmethod
    def from_breakdown(cls, breakdown: Breakdown) -> "BreakdownResponse":
        return cls(**breakdown.to_dict())
