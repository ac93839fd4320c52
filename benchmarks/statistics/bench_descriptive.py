"""Benchmarks for descriptive statistics.

Times torchmoments moment-based statistics on batched samples and compares
them against scipy.stats where scipy is installed.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchmoments.distance import bhattacharyya_distance
from torchmoments.information_theory import kullback_leibler_divergence
from torchmoments.statistics.descriptive import (
    kurtosis,
    population_skewness,
    standard_error_of_the_mean,
)


def median_milliseconds(
    func: Callable, *args: Any, repeat: int = 10, **kwargs: Any
) -> float:
    """Median wall time of ``func(*args, **kwargs)`` after one warmup call."""
    func(*args, **kwargs)

    samples = []
    for _ in range(repeat):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        samples.append(time.perf_counter() - start)

    return float(np.median(samples)) * 1e3


def report(title: str, rows: dict[str, float]) -> None:
    baseline = next(iter(rows.values()))
    print(f"\n{title}")
    for label, ms in rows.items():
        print(f"  {label:<28} {ms:9.3f} ms  {ms / baseline:6.2f}x")


def main(batch_size: int = 256, sample_size: int = 4096) -> None:
    torch.manual_seed(0)
    x = torch.randn(batch_size, sample_size, dtype=torch.float64)
    p = torch.softmax(torch.randn(batch_size, 64, dtype=torch.float64), -1)
    q = torch.softmax(torch.randn(batch_size, 64, dtype=torch.float64), -1)

    try:
        from scipy import stats
    except ImportError:
        stats = None

    for name, ours, theirs in [
        ("skewness", population_skewness, "skew"),
        ("kurtosis", kurtosis, "kurtosis"),
        ("standard error of the mean", standard_error_of_the_mean, "sem"),
    ]:
        rows = {"torchmoments": median_milliseconds(ours, x, dim=1)}
        if stats is not None:
            rows["scipy.stats"] = median_milliseconds(
                getattr(stats, theirs), x.numpy(), axis=1
            )
        report(f"{name} ({batch_size} x {sample_size})", rows)

    report(
        f"divergences ({batch_size} x 64)",
        {
            "bhattacharyya_distance": median_milliseconds(
                bhattacharyya_distance, p, q
            ),
            "kullback_leibler_divergence": median_milliseconds(
                kullback_leibler_divergence, p, q
            ),
        },
    )


if __name__ == "__main__":
    main()
