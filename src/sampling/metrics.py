"""Metrics computation for sample sets.

This module provides helpers for describing a drawn sample set and
measuring how well it matches the uniform distribution it was drawn from.
"""

from __future__ import annotations

import numpy as np

from core.types import SampleSummary, SampleVector

__all__ = [
    "summarize",
    "fraction_in_range",
    "uniform_ks_statistic",
]


def summarize(values: SampleVector) -> SampleSummary:
    """Compute descriptive statistics of a sample set.

    Args:
        values: 1D array of samples.

    Returns:
        SampleSummary with count, min, max, mean and population std.

    Raises:
        ValueError: If ``values`` is empty.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise ValueError("Cannot summarize an empty sample set")
    # Rescale so sums stay finite for values near the float limit
    scale = float(np.abs(arr).max()) or 1.0
    unit = arr / scale
    return SampleSummary(
        count=int(arr.size),
        minimum=float(arr.min()),
        maximum=float(arr.max()),
        mean=float(unit.mean()) * scale,
        std=float(unit.std()) * scale,
    )


def fraction_in_range(values: SampleVector, low: float, high: float) -> float:
    """Return the fraction of values inside the closed interval [low, high].

    An empty sample set counts as fully in range.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return 1.0
    return float(((arr >= low) & (arr <= high)).mean())


def uniform_ks_statistic(values: SampleVector, low: float, high: float) -> float:
    """Kolmogorov-Smirnov distance between the sample and U[low, high].

    For a degenerate interval (``low == high``) the reference distribution is
    a point mass at ``low``: the distance is 0.0 if every value equals ``low``
    and 1.0 otherwise.

    Args:
        values: 1D array of samples.
        low: Lower bound of the reference distribution.
        high: Upper bound of the reference distribution.

    Returns:
        sup_x |F_n(x) - F(x)|, in [0, 1].

    Raises:
        ValueError: If ``values`` is empty or ``low > high``.
    """
    arr = np.sort(np.asarray(values, dtype=np.float64))
    if arr.size == 0:
        raise ValueError("Cannot compute KS statistic of an empty sample set")
    if low > high:
        raise ValueError(f"low must be <= high, got low={low}, high={high}")
    if low == high:
        return 0.0 if bool((arr == low).all()) else 1.0

    n = arr.size
    # Halved operands: high - low itself may exceed the float range
    cdf = np.clip((arr / 2 - low / 2) / (high / 2 - low / 2), 0.0, 1.0)
    upper = np.arange(1, n + 1) / n - cdf
    lower = cdf - np.arange(0, n) / n
    return float(max(upper.max(), lower.max()))
