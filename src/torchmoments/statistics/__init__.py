"""Statistics of random variables."""

from . import descriptive

__all__ = [
    "descriptive",
]
