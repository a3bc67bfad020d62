"""Core type definitions for the randomizer package.

This module contains:
- Type aliases for sample vectors
- Data containers for validated sampling requests and sample statistics
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

__all__ = [
    "SampleVector",
    "SampleRequest",
    "SampleSummary",
]

# Type alias for a drawn sample set (1-D float64 array, generation order)
SampleVector = np.ndarray


@dataclass(frozen=True, slots=True)
class SampleRequest:
    """A validated request for uniform samples.

    Attributes:
        n: Number of values to draw (positive integer).
        low: Lower bound of the closed interval.
        high: Upper bound of the closed interval (``low <= high``).
    """

    n: int
    low: float
    high: float

    @property
    def degenerate(self) -> bool:
        """Return True if the interval collapses to a single point."""
        return self.low == self.high


@dataclass(frozen=True, slots=True)
class SampleSummary:
    """Descriptive statistics of a sample set.

    Attributes:
        count: Number of values.
        minimum: Smallest value.
        maximum: Largest value.
        mean: Arithmetic mean.
        std: Population standard deviation.

    Example:
        >>> SampleSummary(count=2, minimum=1.0, maximum=3.0, mean=2.0, std=1.0).to_dict()["mean"]
        2.0
    """

    count: int
    minimum: float
    maximum: float
    mean: float
    std: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "count": self.count,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "mean": self.mean,
            "std": self.std,
        }
