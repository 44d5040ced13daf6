"""Exception types raised by the pairsum package."""


class PairSumError(Exception):
    """Base class for all pairsum errors."""


class InvalidInputError(PairSumError, ValueError):
    """A pair collection does not have the expected shape or types."""
