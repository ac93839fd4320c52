"""Argument handling shared by the sample reductions."""

import math
import warnings
from typing import Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

Sample = Union[Tensor, Sequence[float]]
Dim = Optional[Union[int, Tuple[int, ...]]]


def as_sample(input: Sample) -> Tensor:
    """Return ``input`` as a real floating-point tensor."""
    if not isinstance(input, Tensor):
        return torch.as_tensor(input, dtype=torch.get_default_dtype())
    # Complex samples are reduced to their magnitudes
    if input.is_complex():
        return input.abs()
    if not input.is_floating_point():
        return input.to(torch.get_default_dtype())
    return input


def reduction_dims(input: Tensor, dim: Dim) -> Tuple[int, ...]:
    """Normalize ``dim`` to a tuple of non-negative dimension indices.

    ``None`` and the empty tuple both select every dimension, as they do for
    :func:`torch.sum` and :func:`torch.mean`.
    """
    ndim = input.dim()
    if dim is None:
        return tuple(range(ndim))

    dims = (dim,) if isinstance(dim, int) else tuple(dim)
    if not dims:
        return tuple(range(ndim))
    bound = max(ndim, 1)
    normalized = []
    for d in dims:
        if d < -bound or d >= bound:
            raise IndexError(
                f"dim {d} out of range for tensor with {ndim} dimensions"
            )
        normalized.append(d % bound)
    if len(set(normalized)) != len(normalized):
        raise ValueError(f"dim {dim} contains repeated dimensions")
    return tuple(normalized)


def sample_size(input: Tensor, dims: Tuple[int, ...]) -> int:
    """Number of observations reduced over by ``dims``."""
    if input.dim() == 0:
        return 1
    return math.prod(input.size(d) for d in dims)


def warn_singular(name: str, n: int) -> None:
    warnings.warn(
        f"{name} is undefined for sample size {n}; the result is inf or NaN.",
        RuntimeWarning,
        stacklevel=3,
    )


def reduce_mean(input: Tensor, dims: Tuple[int, ...], keepdim: bool) -> Tensor:
    if input.dim() == 0:
        return input.clone()
    return torch.mean(input, dim=dims, keepdim=keepdim)


def reduce_sum(input: Tensor, dims: Tuple[int, ...], keepdim: bool) -> Tensor:
    if input.dim() == 0:
        return input.clone()
    return torch.sum(input, dim=dims, keepdim=keepdim)


def reduce_std(input: Tensor, dims: Tuple[int, ...], keepdim: bool) -> Tensor:
    """Sample (Bessel-corrected) standard deviation over ``dims``."""
    if input.dim() == 0:
        return torch.full_like(input, math.nan)
    return torch.std(input, dim=dims, correction=1, keepdim=keepdim)


def deviations(input: Tensor, dims: Tuple[int, ...]) -> Tensor:
    """``input`` minus its mean over ``dims``, broadcastable to ``input``."""
    return input - reduce_mean(input, dims, keepdim=True)
