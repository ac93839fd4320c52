"""Skewness implementations."""

import math
from typing import Optional

import torch
from torch import Tensor

from ._central_moment import central_moment
from ._reduction import (
    Dim,
    Sample,
    as_sample,
    deviations,
    reduce_std,
    reduce_sum,
    reduction_dims,
    sample_size,
    warn_singular,
)


def population_skewness(
    input: Sample,
    dim: Dim = None,
    keepdim: bool = False,
) -> Optional[Tensor]:
    r"""Compute the population skewness of a sample.

    .. math::
        g_1 = \frac{\mu_3}{\mu_2^{3/2}}

    where :math:`\mu_2` and :math:`\mu_3` are the second and third central
    moments. Matches spreadsheet ``SKEW.P``.

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
        Population skewness, ``None`` for an empty sample. NaN when the
        sample has zero variance.
    """
    input = as_sample(input)
    if input.numel() == 0:
        return None

    mu_3 = central_moment(input, 3, dim, keepdim)
    mu_2 = central_moment(input, 2, dim, keepdim)

    return mu_3 / mu_2**1.5


def sample_skewness(
    input: Sample,
    dim: Dim = None,
    keepdim: bool = False,
) -> Optional[Tensor]:
    r"""Compute the adjusted Fisher-Pearson sample skewness.

    .. math::
        G_1 = \frac{\mu_3}{\mu_2^{3/2}} \cdot \frac{\sqrt{n(n-1)}}{n-2}

    Matches spreadsheet ``SKEW``.

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
        Sample skewness, ``None`` for an empty sample.

    Warns
    -----
    RuntimeWarning
        When ``n == 2``. The correction factor divides by zero and the
        result is ``inf`` or ``NaN``.
    """
    input = as_sample(input)
    if input.numel() == 0:
        return None

    n = sample_size(input, reduction_dims(input, dim))
    if n == 2:
        warn_singular("sample_skewness", n)

    g_1 = population_skewness(input, dim, keepdim)

    # Tensor division so that n == 2 yields inf rather than raising
    correction = math.sqrt(n * (n - 1)) / torch.tensor(
        float(n - 2), dtype=g_1.dtype, device=g_1.device
    )

    return g_1 * correction


def skewness(
    input: Sample,
    dim: Dim = None,
    keepdim: bool = False,
) -> Optional[Tensor]:
    r"""Compute skewness normalized by the sample standard deviation.

    .. math::
        \gamma_1 = \frac{1}{n - 1} \cdot \frac{\sum_i (x_i - \bar{x})^3}{s^3}

    where :math:`s` is the Bessel-corrected sample standard deviation.
    This normalization matches most textbook and online calculators.

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
        Skewness, ``None`` for an empty sample. NaN for a single
        observation or zero variance.

    Warns
    -----
    RuntimeWarning
        For a single observation, where ``n - 1`` is zero.
    """
    input = as_sample(input)
    if input.numel() == 0:
        return None

    dims = reduction_dims(input, dim)
    n = sample_size(input, dims)
    if n == 1:
        warn_singular("skewness", n)

    cubed_deviations = reduce_sum(deviations(input, dims) ** 3, dims, keepdim)
    s_3 = reduce_std(input, dims, keepdim) ** 3

    return cubed_deviations / (s_3 * (n - 1))
