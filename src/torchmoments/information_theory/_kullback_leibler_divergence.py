"""Kullback-Leibler divergence implementation."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchmoments.probability import check_probability_distributions


def kullback_leibler_divergence(
    p: Union[Tensor, Sequence[float]],
    q: Union[Tensor, Sequence[float]],
    *,
    dim: int = -1,
    atol: Optional[float] = None,
) -> Tensor:
    r"""Compute Kullback-Leibler divergence between probability distributions.

    Also known as relative entropy, information gain or information
    divergence. Measures how the distribution :math:`P` diverges from the
    reference distribution :math:`Q`.

    Mathematical Definition
    -----------------------
    .. math::
        D_{KL}(P \| Q) = \sum_i p_i \log\left(\frac{p_i}{q_i}\right)

    Parameters
    ----------
    p : Tensor or sequence of float
        First probability distribution (or batch of distributions).
    q : Tensor or sequence of float
        Second (reference) probability distribution.
    dim : int, default=-1
        Dimension along which the probability distribution is defined.
    atol : float, optional
        Tolerance on the distribution sums. Defaults to
        ``n * torch.finfo(dtype).eps`` for a support of size ``n``;
        pass ``0.0`` to require sums exactly equal to 1.

    Returns
    -------
    Tensor
        KL divergence in nats, with ``dim`` reduced.

    Raises
    ------
    MismatchedLengthError
        If ``p`` and ``q`` have different sizes along ``dim``.
    InvalidDistributionError
        If ``p`` or ``q`` does not sum to 1.

    Examples
    --------
    >>> p = torch.tensor([0.25, 0.25, 0.25, 0.25])
    >>> q = torch.tensor([0.1, 0.2, 0.3, 0.4])
    >>> kullback_leibler_divergence(p, q)
    tensor(0.1218)

    Notes
    -----
    - KL divergence is asymmetric: :math:`D_{KL}(P \| Q) \neq D_{KL}(Q \| P)`
    - Terms with :math:`p_i = 0` contribute 0 (:math:`0 \log 0 = 0`).
    - Terms with :math:`p_i > 0` and :math:`q_i = 0` make the result ``inf``.

    See Also
    --------
    bhattacharyya_distance : Symmetric distance measure.
    """
    p, q, dim = check_probability_distributions(p, q, dim=dim, atol=atol)

    # p log p - p log q, so that zero-probability terms vanish
    return torch.sum(torch.xlogy(p, p) - torch.xlogy(p, q), dim=dim)
