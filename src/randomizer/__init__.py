"""Uniform random number generation with a bundled example dataset.

- random_numbers: draw ``n`` values uniformly from ``[min, max]``
- load_my_data: the bundled ``my_data`` table
"""

from __future__ import annotations

from randomizer.data import MY_DATA_COLUMNS, load_my_data
from randomizer.random_numbers import random_numbers, validate_request

__all__ = [
    "random_numbers",
    "validate_request",
    "load_my_data",
    "MY_DATA_COLUMNS",
]

__version__ = "0.1.0"
