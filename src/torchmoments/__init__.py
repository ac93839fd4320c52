"""torchmoments: PyTorch descriptive statistics for random variables."""

from . import (
    distance,
    information_theory,
    probability,
    statistics,
)

__all__ = [
    "distance",
    "information_theory",
    "probability",
    "statistics",
]

__version__ = "0.1.0"
