"""Statistical distance functions for probability distributions.

This module provides distance metrics between discrete probability
distributions with full autograd support.

Functions
---------
bhattacharyya_coefficient
    Overlap of two distributions, bounded [0, 1].
bhattacharyya_distance
    Bhattacharyya distance (symmetric, non-negative).
"""

from ._bhattacharyya_distance import (
    bhattacharyya_coefficient,
    bhattacharyya_distance,
)

__all__ = [
    "bhattacharyya_coefficient",
    "bhattacharyya_distance",
]
