"""Validation of paired discrete probability distributions."""

from typing import Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from ._exceptions import InvalidDistributionError, MismatchedLengthError

__all__ = ["check_probability_distributions"]


def _as_distribution(x: Union[Tensor, Sequence[float]]) -> Tensor:
    if not isinstance(x, Tensor):
        return torch.as_tensor(x, dtype=torch.get_default_dtype())
    if not x.is_floating_point():
        return x.to(torch.get_default_dtype())
    return x


def check_probability_distributions(
    p: Union[Tensor, Sequence[float]],
    q: Union[Tensor, Sequence[float]],
    *,
    dim: int = -1,
    atol: Optional[float] = None,
) -> Tuple[Tensor, Tensor, int]:
    r"""Validate a pair of discrete probability distributions.

    Parameters
    ----------
    p, q : Tensor or sequence of float
        Distributions (or batches of distributions) over the same support.
        Sequences and integer tensors are converted to the default dtype.
    dim : int, default=-1
        Dimension along which each distribution is laid out.
    atol : float, optional
        Largest accepted :math:`|\sum_i p_i - 1|`. Defaults to
        ``n * torch.finfo(dtype).eps`` where ``n`` is the support size.
        ``atol=0.0`` requires the sums to equal 1 exactly.

    Returns
    -------
    p, q : Tensor
        The inputs as tensors of a common floating dtype.
    dim : int
        ``dim`` normalized to a non-negative index.

    Raises
    ------
    MismatchedLengthError
        If ``p`` and ``q`` differ in size along ``dim``.
    InvalidDistributionError
        If any distribution in ``p`` or ``q`` does not sum to 1.
    """
    p = _as_distribution(p)
    q = _as_distribution(q)

    if p.dim() == 0 or q.dim() == 0:
        raise ValueError(
            "p and q must have at least one dimension, got shapes "
            f"{tuple(p.shape)} and {tuple(q.shape)}"
        )

    p_dim = p.dim()
    if dim < -p_dim or dim >= p_dim:
        raise IndexError(
            f"dim {dim} out of range for tensor with {p_dim} dimensions"
        )
    dim = dim if dim >= 0 else p_dim + dim

    q_dim = dim - p_dim + q.dim()
    if q_dim < 0 or p.size(dim) != q.size(q_dim):
        raise MismatchedLengthError(
            f"p and q must have the same number of elements along dim {dim}: "
            f"p has {p.size(dim)}, q has "
            f"{q.size(q_dim) if q_dim >= 0 else 'none'}"
        )

    target_dtype = torch.promote_types(p.dtype, q.dtype)
    if p.dtype != target_dtype:
        p = p.to(target_dtype)
    if q.dtype != target_dtype:
        q = q.to(target_dtype)

    if atol is None:
        atol = p.size(dim) * torch.finfo(target_dtype).eps

    for name, distribution, distribution_dim in (
        ("p", p, dim),
        ("q", q, q_dim),
    ):
        total = distribution.sum(dim=distribution_dim)
        if not bool(torch.all(torch.abs(total - 1) <= atol)):
            raise InvalidDistributionError(
                f"distribution {name} must add up to 1 along dim "
                f"{distribution_dim} (atol={atol}), got sums {total.tolist()}"
            )

    return p, q, dim
