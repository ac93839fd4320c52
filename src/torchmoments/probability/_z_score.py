"""Z-scores for two-tailed confidence intervals."""

from typing import Union

from ._exceptions import UnknownConfidenceLevelError

__all__ = [
    "Z_SCORES_FOR_CONFIDENCE_INTERVALS",
    "z_score_for_confidence_interval",
]

# Two-tailed critical values of the standard normal distribution, keyed by
# confidence level in percent.
Z_SCORES_FOR_CONFIDENCE_INTERVALS = {
    "50": 0.67449,
    "70": 1.04,
    "75": 1.15035,
    "80": 1.282,
    "85": 1.44,
    "90": 1.645,
    "92": 1.75,
    "95": 1.96,
    "96": 2.05,
    "97": 2.17,
    "98": 2.326,
    "99": 2.576,
    "99.5": 2.807,
    "99.9": 3.291,
}


def z_score_for_confidence_interval(
    confidence_level: Union[str, int, float],
) -> float:
    r"""Look up the z-score for a two-tailed confidence interval.

    Returns :math:`z` such that
    :math:`P(-z \le Z \le z) = \text{confidence\_level} / 100` for a standard
    normal :math:`Z`.

    Parameters
    ----------
    confidence_level : str, int or float
        Confidence level in percent. Numbers and numeric strings are
        formatted without trailing zeros, so ``95``, ``95.0``, ``"95"`` and
        ``"95.0"`` are equivalent.

    Returns
    -------
    float
        The tabulated z-score.

    Raises
    ------
    UnknownConfidenceLevelError
        If the level is not in :data:`Z_SCORES_FOR_CONFIDENCE_INTERVALS`.

    Examples
    --------
    >>> z_score_for_confidence_interval("95")
    1.96
    >>> z_score_for_confidence_interval(99.9)
    3.291
    """
    if isinstance(confidence_level, bool):
        raise TypeError("confidence_level must be a string or a number")

    if isinstance(confidence_level, str):
        key = confidence_level.strip()
        try:
            key = f"{float(key):g}"
        except ValueError:
            pass
    else:
        key = f"{confidence_level:g}"

    try:
        return Z_SCORES_FOR_CONFIDENCE_INTERVALS[key]
    except KeyError:
        raise UnknownConfidenceLevelError(
            f"unknown confidence level '{confidence_level}', expected one "
            f"of {list(Z_SCORES_FOR_CONFIDENCE_INTERVALS)}"
        ) from None
