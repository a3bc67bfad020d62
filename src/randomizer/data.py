"""Bundled example dataset.

``my_data`` is a five-row table with an integer ``id`` column and a float
``value`` column, shipped so examples and tests have fixed data to work with.
"""

from __future__ import annotations

import numpy as np

__all__ = ["MY_DATA_COLUMNS", "load_my_data"]

MY_DATA_COLUMNS = ("id", "value")

_MY_DATA: dict[str, np.ndarray] = {
    "id": np.arange(1, 6, dtype=np.int64),
    "value": np.array([10.0, 20.0, 30.0, 40.0, 50.0]),
}


def load_my_data() -> dict[str, np.ndarray]:
    """Return a copy of the ``my_data`` dataset.

    Returns:
        Mapping of column name to column array, in ``MY_DATA_COLUMNS`` order.
        Arrays are fresh copies, so mutating them leaves the bundled data intact.

    Example:
        >>> data = load_my_data()
        >>> data["value"].tolist()
        [10.0, 20.0, 30.0, 40.0, 50.0]
    """
    return {name: _MY_DATA[name].copy() for name in MY_DATA_COLUMNS}
