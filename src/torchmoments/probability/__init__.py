"""Probability helpers shared by the statistics and divergence operators.

This module provides:
- the z-score table used for normal-approximation confidence intervals
- validation of paired discrete probability distributions
- the exception hierarchy raised by both

Example
-------
>>> from torchmoments.probability import z_score_for_confidence_interval
>>> z_score_for_confidence_interval("95")
1.96
"""

from ._exceptions import (
    InvalidDistributionError,
    MismatchedLengthError,
    ProbabilityError,
    UnknownConfidenceLevelError,
)
from ._probability_distributions import check_probability_distributions
from ._z_score import (
    Z_SCORES_FOR_CONFIDENCE_INTERVALS,
    z_score_for_confidence_interval,
)

__all__ = [
    "InvalidDistributionError",
    "MismatchedLengthError",
    "ProbabilityError",
    "UnknownConfidenceLevelError",
    "Z_SCORES_FOR_CONFIDENCE_INTERVALS",
    "check_probability_distributions",
    "z_score_for_confidence_interval",
]
