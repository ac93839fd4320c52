"""Bhattacharyya distance implementation."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchmoments.probability import check_probability_distributions


def bhattacharyya_coefficient(
    p: Union[Tensor, Sequence[float]],
    q: Union[Tensor, Sequence[float]],
    *,
    dim: int = -1,
    atol: Optional[float] = None,
) -> Tensor:
    r"""Compute the Bhattacharyya coefficient of two distributions.

    .. math::
        BC(P, Q) = \sum_i \sqrt{p_i \cdot q_i}

    Takes the same arguments and raises the same errors as
    :func:`bhattacharyya_distance`. The coefficient lies in ``[0, 1]`` and
    equals 1 exactly when the distributions coincide.
    """
    p, q, dim = check_probability_distributions(p, q, dim=dim, atol=atol)

    return torch.sum(torch.sqrt(torch.mul(p, q)), dim=dim)


def bhattacharyya_distance(
    p: Union[Tensor, Sequence[float]],
    q: Union[Tensor, Sequence[float]],
    *,
    dim: int = -1,
    atol: Optional[float] = None,
) -> Tensor:
    r"""Compute Bhattacharyya distance between probability distributions.

    The Bhattacharyya distance measures the similarity of two probability
    distributions via the Bhattacharyya coefficient.

    Mathematical Definition
    -----------------------
    .. math::
        D_B(P, Q) = -\ln(BC(P, Q))

    where the Bhattacharyya coefficient is:

    .. math::
        BC(P, Q) = \sum_i \sqrt{p_i \cdot q_i}

    Properties:
    - Symmetric: :math:`D_B(P, Q) = D_B(Q, P)`
    - Non-negative: :math:`D_B(P, Q) \geq 0`
    - Zero for identical: :math:`D_B(P, P) = 0`

    Parameters
    ----------
    p : Tensor or sequence of float
        First probability distribution (or batch of distributions).
    q : Tensor or sequence of float
        Second probability distribution (or batch of distributions).
    dim : int, default=-1
        Dimension along which the probability distribution is defined.
    atol : float, optional
        Tolerance on the distribution sums. Defaults to
        ``n * torch.finfo(dtype).eps`` for a support of size ``n``;
        pass ``0.0`` to require sums exactly equal to 1.

    Returns
    -------
    Tensor
        Bhattacharyya distance, with ``dim`` reduced. Distributions with
        disjoint supports give ``inf``.

    Raises
    ------
    MismatchedLengthError
        If ``p`` and ``q`` have different sizes along ``dim``.
    InvalidDistributionError
        If ``p`` or ``q`` does not sum to 1.

    Examples
    --------
    >>> p = torch.tensor([0.2, 0.5, 0.3], dtype=torch.float64)
    >>> q = torch.tensor([0.1, 0.4, 0.5], dtype=torch.float64)
    >>> bhattacharyya_distance(p, q)
    tensor(0.0244, dtype=torch.float64)

    See Also
    --------
    bhattacharyya_coefficient : The coefficient :math:`BC(P, Q)`.
    kullback_leibler_divergence : Asymmetric divergence measure.
    """
    return -torch.log(bhattacharyya_coefficient(p, q, dim=dim, atol=atol))
