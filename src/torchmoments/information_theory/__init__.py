"""Information-theoretic divergences between probability distributions."""

from ._kullback_leibler_divergence import kullback_leibler_divergence

__all__ = [
    "kullback_leibler_divergence",
]
