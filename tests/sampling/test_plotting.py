from __future__ import annotations

from pathlib import Path

import numpy as np

from core.rng import make_rng
from sampling.plotting import plot_samples


def test_plot_samples_creates_files(tmp_path: Path) -> None:
    values = make_rng(0).uniform(1.0, 10.0, 200)
    plots = plot_samples(values, tmp_path, low=1.0, high=10.0, bins=10)

    assert set(plots) == {"histogram", "sequence"}
    for path in plots.values():
        assert path.exists()
        assert path.parent == tmp_path / "plots"


def test_plot_samples_degenerate_interval(tmp_path: Path) -> None:
    plots = plot_samples(np.full(5, 50.0), tmp_path, low=50.0, high=50.0)
    assert plots["histogram"].exists()


def test_plot_samples_empty_writes_nothing(tmp_path: Path) -> None:
    assert plot_samples(np.array([]), tmp_path, low=0.0, high=1.0) == {}
    assert not (tmp_path / "plots").exists()


def test_plot_samples_bounds_wider_than_float_range(tmp_path: Path) -> None:
    values = make_rng(0).uniform(-1.0, 1.0, 50) * 1e308
    plots = plot_samples(values, tmp_path, low=-1e308, high=1e308)

    assert plots["histogram"].exists()
    assert plots["sequence"].exists()
