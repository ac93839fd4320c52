"""Hypothesis strategies for torchmoments operator testing."""

from ._positive_real_numbers import positive_real_numbers
from ._probability_distributions import probability_distributions
from ._real_number_dtypes import real_number_dtypes
from ._real_numbers import real_numbers
from ._samples import samples

__all__ = [
    # Numeric strategies
    "positive_real_numbers",
    "real_numbers",
    # Dtype strategies
    "real_number_dtypes",
    # Tensor strategies
    "probability_distributions",
    "samples",
]
