"""Probability module exceptions."""

__all__ = [
    "InvalidDistributionError",
    "MismatchedLengthError",
    "ProbabilityError",
    "UnknownConfidenceLevelError",
]


class ProbabilityError(ValueError):
    """Base exception for probability module errors."""

    pass


class MismatchedLengthError(ProbabilityError):
    """Raised when two distributions have different support sizes.

    This occurs when ``p.size(dim) != q.size(dim)`` for a pairwise measure
    such as the Bhattacharyya distance or the Kullback-Leibler divergence.
    """

    pass


class InvalidDistributionError(ProbabilityError):
    """Raised when a tensor is not a probability distribution.

    This occurs when the entries along the distribution dimension do not
    sum to 1 within the accepted tolerance.
    """

    pass


class UnknownConfidenceLevelError(ProbabilityError):
    """Raised when a confidence level has no tabulated z-score."""

    pass
