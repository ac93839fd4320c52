"""Kurtosis implementation."""

from typing import Optional

from torch import Tensor

from ._central_moment import central_moment
from ._reduction import Dim, Sample, as_sample


def kurtosis(
    input: Sample,
    dim: Dim = None,
    keepdim: bool = False,
    *,
    fisher: bool = True,
) -> Optional[Tensor]:
    r"""Compute the kurtosis of a sample.

    Kurtosis is a measure of the "tailedness" of a probability distribution.

    Mathematical Definition
    -----------------------
    .. math::
        g_2 = \frac{\mu_4}{\mu_2^2} - 3 \quad \text{(excess, fisher=True)}

    .. math::
        g_2 = \frac{\mu_4}{\mu_2^2} \quad \text{(Pearson, fisher=False)}

    where :math:`\mu_2` and :math:`\mu_4` are the second and fourth central
    moments.

    Parameters
    ----------
    input : Tensor or sequence of float
        Sample values.
    dim : int or tuple of ints, optional
        The dimension or dimensions along which to compute kurtosis.
        If ``None`` (default), computes kurtosis over all elements.
    keepdim : bool, optional
        Whether the output tensor has ``dim`` retained or not.
        Default: ``False``.
    fisher : bool, optional
        If ``True`` (default), compute excess kurtosis (subtract 3).
        Normal distribution has excess kurtosis of 0.
        If ``False``, compute Pearson's kurtosis.

    Returns
    -------
    Tensor or None
        The kurtosis, ``None`` for an empty sample.

    Examples
    --------
    >>> kurtosis(torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0]))
    tensor(-1.3000)

    Notes
    -----
    - **Leptokurtic** distributions (positive excess kurtosis) have heavier
      tails than normal (e.g., t-distribution, Laplace).

    - **Platykurtic** distributions (negative excess kurtosis) have lighter
      tails than normal (e.g., uniform distribution).

    - Returns ``NaN`` for zero variance (all elements equal), which
      includes a single element.

    See Also
    --------
    is_platykurtic, is_leptokurtic, is_mesokurtic
    """
    input = as_sample(input)
    if input.numel() == 0:
        return None

    mu_4 = central_moment(input, 4, dim, keepdim)
    mu_2 = central_moment(input, 2, dim, keepdim)

    result = mu_4 / mu_2**2
    if fisher:
        result = result - 3

    return result


def is_platykurtic(input: Sample) -> bool:
    """Whether the excess kurtosis of ``input`` is negative (flat tails).

    ``False`` for an empty sample or undefined (NaN) kurtosis.
    """
    g_2 = kurtosis(input)
    return g_2 is not None and bool(g_2 < 0)


def is_leptokurtic(input: Sample) -> bool:
    """Whether the excess kurtosis of ``input`` is positive (heavy tails).

    ``False`` for an empty sample or undefined (NaN) kurtosis.
    """
    g_2 = kurtosis(input)
    return g_2 is not None and bool(g_2 > 0)


def is_mesokurtic(input: Sample) -> bool:
    """Whether the excess kurtosis of ``input`` is exactly zero.

    The comparison is exact, so samples whose kurtosis is zero in theory
    may test ``False`` after floating-point rounding.
    """
    g_2 = kurtosis(input)
    return g_2 is not None and bool(g_2 == 0)
