"""Protocol definitions for the randomizer package.

This module contains Protocol classes defining interfaces for:
- UniformSampler: the injectable source of uniform random draws
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

__all__ = ["UniformSampler"]


@runtime_checkable
class UniformSampler(Protocol):
    """Protocol for uniform continuous random sources.

    Any object exposing a numpy-compatible ``uniform`` method satisfies it,
    most notably ``numpy.random.Generator``. Seeding is the owner's concern:
    consumers only draw from the sampler and never reseed it.
    """

    def uniform(self, low: float, high: float, size: int) -> np.ndarray:
        """Draw ``size`` samples from U[low, high].

        Args:
            low: Lower bound of the interval.
            high: Upper bound of the interval.
            size: Number of samples to draw.

        Returns:
            A 1D array of ``size`` floats.
        """
        ...
