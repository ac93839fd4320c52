"""Central moment implementation."""

from typing import Optional

from torch import Tensor

from ._reduction import (
    Dim,
    Sample,
    as_sample,
    deviations,
    reduce_mean,
    reduction_dims,
)


def central_moment(
    input: Sample,
    n: int,
    dim: Dim = None,
    keepdim: bool = False,
) -> Optional[Tensor]:
    r"""Compute the n-th central moment of a sample.

    The central moment is the expected value of an integer power of the
    deviation of a random variable from its mean.

    .. math::
        \mu_n = \frac{1}{N} \sum_{i=1}^{N} (x_i - \bar{x})^n

    Parameters
    ----------
    input : Tensor or sequence of float
        Sample values. Sequences and integer tensors are converted to the
        default floating dtype.
    n : int
        Order of the moment.
    dim : int or tuple of ints, optional
        The dimension or dimensions to reduce. If ``None`` (default),
        reduces over all elements.
    keepdim : bool, optional
        Whether the output tensor has ``dim`` retained or not.
        Default: ``False``.

    Returns
    -------
    Tensor or None
        The n-th central moment, or ``None`` if ``input`` is empty.

    Examples
    --------
    >>> central_moment(torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0]), 2)
    tensor(2.)

    Notes
    -----
    The first central moment is always zero and the second is the
    population (biased) variance.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")

    input = as_sample(input)
    if input.numel() == 0:
        return None

    dims = reduction_dims(input, dim)

    return reduce_mean(deviations(input, dims) ** n, dims, keepdim)
