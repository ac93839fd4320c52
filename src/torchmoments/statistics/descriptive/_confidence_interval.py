"""Normal-approximation confidence interval for a mean."""

from typing import Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchmoments.probability import z_score_for_confidence_interval


@tensorclass
class ConfidenceInterval:
    """Confidence interval around a sample mean.

    Attributes
    ----------
    ci : Tensor
        Half-width of the interval, :math:`z \\sigma / \\sqrt{n}`.
    lower_bound : Tensor
        ``mean - ci``.
    upper_bound : Tensor
        ``mean + ci``.
    """

    ci: Tensor
    lower_bound: Tensor
    upper_bound: Tensor


def confidence_interval(
    mean: Union[Tensor, float],
    n: Union[Tensor, int],
    standard_deviation: Union[Tensor, float],
    confidence_level: Union[str, int, float],
) -> ConfidenceInterval:
    r"""Confidence interval for a mean using the normal approximation.

    .. math::
        ci = z \cdot \frac{\sigma}{\sqrt{n}}

    .. math::
        \text{interval} = (\bar{x} - ci, \bar{x} + ci)

    Parameters
    ----------
    mean : Tensor or float
        Sample mean.
    n : Tensor or int
        Sample size.
    standard_deviation : Tensor or float
        Standard deviation.
    confidence_level : str, int or float
        Confidence level in percent, e.g. ``"95"`` or ``"99.9"``. See
        :data:`torchmoments.probability.Z_SCORES_FOR_CONFIDENCE_INTERVALS`.

    Returns
    -------
    ConfidenceInterval
        ``ci``, ``lower_bound`` and ``upper_bound``; tensor arguments are
        broadcast against each other.

    Raises
    ------
    UnknownConfidenceLevelError
        If ``confidence_level`` has no tabulated z-score.

    Examples
    --------
    >>> result = confidence_interval(90.0, 25, 12.5, "95")
    >>> result.ci, result.lower_bound, result.upper_bound
    (tensor(4.9000), tensor(85.1000), tensor(94.9000))
    """
    z = z_score_for_confidence_interval(confidence_level)

    dtype = None
    device = None
    for value in (mean, n, standard_deviation):
        if isinstance(value, Tensor):
            device = device or value.device
            if value.is_floating_point():
                dtype = (
                    value.dtype
                    if dtype is None
                    else torch.promote_types(dtype, value.dtype)
                )
    dtype = dtype or torch.get_default_dtype()

    mean = torch.as_tensor(mean, dtype=dtype, device=device)
    n = torch.as_tensor(n, dtype=dtype, device=device)
    standard_deviation = torch.as_tensor(
        standard_deviation, dtype=dtype, device=device
    )

    ci = z * (standard_deviation / torch.sqrt(n))
    ci, mean = torch.broadcast_tensors(ci, mean)

    return ConfidenceInterval(
        ci=ci,
        lower_bound=mean - ci,
        upper_bound=mean + ci,
    )
