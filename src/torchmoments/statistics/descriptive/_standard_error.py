"""Standard errors of the mean, skewness and kurtosis."""

import math
import warnings
from typing import Optional, Union

import torch
from torch import Tensor

from ._reduction import (
    Dim,
    Sample,
    as_sample,
    reduce_std,
    reduction_dims,
    sample_size,
    warn_singular,
)


def _as_sample_size(
    n: Union[int, Tensor],
    dtype: Optional[torch.dtype],
    device: Optional[torch.device],
) -> Tensor:
    if isinstance(n, Tensor):
        if n.is_floating_point():
            return n if dtype is None else n.to(dtype)
        return n.to(dtype or torch.get_default_dtype())
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(
            f"n must be an int or a Tensor, got {type(n).__name__}"
        )
    return torch.tensor(
        n, dtype=dtype or torch.get_default_dtype(), device=device
    )


def _warn_if_zero(name: str, n: Tensor, denominator: Tensor) -> None:
    # Reading values back is unavailable on meta tensors and while compiling
    if n.is_meta or torch.compiler.is_compiling():
        return
    if bool(torch.any(denominator == 0)):
        singular = n[denominator == 0] if n.dim() > 0 else n
        warnings.warn(
            f"{name} is undefined for sample size "
            f"{singular.tolist()}; the result is inf or NaN.",
            RuntimeWarning,
            stacklevel=3,
        )


def standard_error_of_skewness(
    n: Union[int, Tensor],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""Standard error of skewness (SES) for a sample of size ``n``.

    .. math::
        \text{SES} = \sqrt{\frac{6n(n - 1)}{(n - 2)(n + 1)(n + 3)}}

    Parameters
    ----------
    n : int or Tensor
        Sample size. Tensors are evaluated elementwise.
    dtype : torch.dtype, optional
        Result dtype for integer ``n``. Defaults to the default dtype.
    device : torch.device, optional
        Result device for integer ``n``.

    Returns
    -------
    Tensor
        The standard error.

    Warns
    -----
    RuntimeWarning
        For ``n`` in ``{2, -1, -3}``, where the denominator is zero and the
        result is ``inf`` or ``NaN``.

    Examples
    --------
    >>> standard_error_of_skewness(20)
    tensor(0.5121)
    """
    n = _as_sample_size(n, dtype, device)

    numerator = 6 * n * (n - 1)
    denominator = (n - 2) * (n + 1) * (n + 3)
    _warn_if_zero("standard_error_of_skewness", n, denominator)

    return torch.sqrt(numerator / denominator)


def standard_error_of_kurtosis(
    n: Union[int, Tensor],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""Standard error of kurtosis (SEK) for a sample of size ``n``.

    .. math::
        \text{SEK} = 2 \cdot \text{SES} \cdot
            \sqrt{\frac{n^2 - 1}{(n - 3)(n + 5)}}

    Parameters
    ----------
    n : int or Tensor
        Sample size. Tensors are evaluated elementwise.
    dtype : torch.dtype, optional
        Result dtype for integer ``n``. Defaults to the default dtype.
    device : torch.device, optional
        Result device for integer ``n``.

    Returns
    -------
    Tensor
        The standard error.

    Warns
    -----
    RuntimeWarning
        For ``n`` in ``{3, -5}``, and wherever
        :func:`standard_error_of_skewness` is singular.

    Examples
    --------
    >>> standard_error_of_kurtosis(20)
    tensor(0.9924)
    """
    n = _as_sample_size(n, dtype, device)

    ses = standard_error_of_skewness(n)
    denominator = (n - 3) * (n + 5)
    _warn_if_zero("standard_error_of_kurtosis", n, denominator)

    return 2 * ses * torch.sqrt((n**2 - 1) / denominator)


def standard_error_of_the_mean(
    input: Sample,
    dim: Dim = None,
    keepdim: bool = False,
) -> Tensor:
    r"""Standard error of the mean (SEM).

    The standard deviation of the sample mean's estimate of a population
    mean.

    .. math::
        SE_{\bar{x}} = \frac{s}{\sqrt{n}}

    where :math:`s` is the Bessel-corrected sample standard deviation and
    :math:`n` the number of observations.

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
    Tensor
        The standard error. ``NaN`` for fewer than two observations.

    Warns
    -----
    RuntimeWarning
        For an empty sample.

    Examples
    --------
    >>> standard_error_of_the_mean([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
    tensor(0.7559)
    """
    input = as_sample(input)
    dims = reduction_dims(input, dim)
    n = sample_size(input, dims)

    if n == 0:
        warn_singular("standard_error_of_the_mean", n)
        shape = [
            1 if d in dims else size for d, size in enumerate(input.shape)
        ]
        if not keepdim:
            shape = [size for d, size in enumerate(shape) if d not in dims]
        return torch.full(
            shape, math.nan, dtype=input.dtype, device=input.device
        )

    return reduce_std(input, dims, keepdim) / math.sqrt(n)


ses = standard_error_of_skewness
sek = standard_error_of_kurtosis
sem = standard_error_of_the_mean
