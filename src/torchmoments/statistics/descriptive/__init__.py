"""Descriptive statistics functions.

This module provides functions for computing descriptive statistics of
samples of a random variable: central moments, skewness, kurtosis,
standard errors, sums of squares and confidence intervals.
"""

from ._central_moment import central_moment
from ._confidence_interval import ConfidenceInterval, confidence_interval
from ._kurtosis import is_leptokurtic, is_mesokurtic, is_platykurtic, kurtosis
from ._skewness import population_skewness, sample_skewness, skewness
from ._standard_error import (
    sek,
    sem,
    ses,
    standard_error_of_kurtosis,
    standard_error_of_skewness,
    standard_error_of_the_mean,
)
from ._sum_of_squares import sum_of_squares, sum_of_squares_deviations

__all__ = [
    "ConfidenceInterval",
    "central_moment",
    "confidence_interval",
    "is_leptokurtic",
    "is_mesokurtic",
    "is_platykurtic",
    "kurtosis",
    "population_skewness",
    "sample_skewness",
    "sek",
    "sem",
    "ses",
    "skewness",
    "standard_error_of_kurtosis",
    "standard_error_of_skewness",
    "standard_error_of_the_mean",
    "sum_of_squares",
    "sum_of_squares_deviations",
]
