"""Sums of squares."""

from typing import Optional

import torch
from torch import Tensor

from ._reduction import (
    Dim,
    Sample,
    as_sample,
    deviations,
    reduce_sum,
    reduction_dims,
)


def sum_of_squares(
    input: Sample,
    dim: Dim = None,
    keepdim: bool = False,
) -> Optional[Tensor]:
    r"""Sum of squares :math:`\sum_i x_i^2`.

    Returns ``None`` for an empty sample.
    """
    input = as_sample(input)
    if input.numel() == 0:
        return None

    dims = reduction_dims(input, dim)

    return reduce_sum(torch.square(input), dims, keepdim)


def sum_of_squares_deviations(
    input: Sample,
    dim: Dim = None,
    keepdim: bool = False,
) -> Optional[Tensor]:
    r"""Sum of squared deviations from the mean.

    .. math::
        SS = \sum_i (x_i - \bar{x})^2

    Equal to ``n`` times the second central moment.

    Parameters
    ----------
    input : Tensor or sequence of float
        Sample values.
    dim : int or tuple of ints, optional
        The dimension or dimensions to reduce. If ``None`` (default),
        reduces over all elements.
    keepdim : bool, optional
        Whether the output tensor has ``dim`` retained or not.

    Returns
    -------
    Tensor or None
        The sum, ``None`` for an empty sample.
    """
    input = as_sample(input)
    if input.numel() == 0:
        return None

    dims = reduction_dims(input, dim)

    return reduce_sum(torch.square(deviations(input, dims)), dims, keepdim)
