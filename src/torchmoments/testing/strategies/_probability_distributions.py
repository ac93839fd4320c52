from typing import Optional

import hypothesis.strategies
import torch

from ._positive_real_numbers import positive_real_numbers


@hypothesis.strategies.composite
def probability_distributions(
    draw: hypothesis.strategies.DrawFn,
    size: Optional[int] = None,
    dtype: torch.dtype = torch.float64,
    min_size: int = 1,
    max_size: int = 10,
) -> torch.Tensor:
    """Generate strictly positive probability vectors that sum to 1."""
    if size is None:
        size = draw(
            hypothesis.strategies.integers(
                min_value=min_size, max_value=max_size
            )
        )

    weights = torch.tensor(
        draw(
            hypothesis.strategies.lists(
                positive_real_numbers(),
                min_size=size,
                max_size=size,
            )
        ),
        dtype=torch.float64,
    )

    return (weights / weights.sum()).to(dtype)
