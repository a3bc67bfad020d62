"""Plotting utilities for sample sets.

Creates per-run plots:
- histogram.png: sample histogram against the uniform density
- sequence.png: values in generation order with the interval bounds

Uses matplotlib only (no seaborn).
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from core.types import SampleVector  # noqa: E402

__all__ = ["plot_samples"]


def _ensure_plots_dir(out_dir: Path) -> Path:
    """Ensure the plots directory exists and return its path."""
    plots_dir = out_dir / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)
    return plots_dir


def plot_samples(
    values: SampleVector,
    out_dir: Path,
    *,
    low: float,
    high: float,
    bins: int = 20,
) -> dict[str, Path]:
    """Create plots for one sample set and return mapping of plot names to paths.

    Args:
        values: Samples in generation order.
        out_dir: Output directory (plots will be in out_dir/plots/).
        low: Lower bound the samples were drawn with.
        high: Upper bound the samples were drawn with.
        bins: Number of histogram bins.

    Returns:
        Dictionary mapping plot name to file path. Empty if there are no values.
    """
    arr = np.asarray(values, dtype=np.float64)
    created_plots: dict[str, Path] = {}
    if arr.size == 0:
        return created_plots

    plots_dir = _ensure_plots_dir(out_dir)

    # Bounds like -1e308..1e308 have no finite width; plot in scaled units
    low, high = float(low), float(high)
    value_label = "Value"
    if not np.isfinite(high - low):
        scale = max(abs(low), abs(high))
        arr, low, high = arr / scale, low / scale, high / scale
        value_label = f"Value / {scale:.3g}"

    # Histogram (density) with the uniform reference line
    fig, ax = plt.subplots(figsize=(8, 5))
    if high > low:
        ax.hist(arr, bins=bins, range=(low, high), density=True, alpha=0.7, edgecolor="black")
        ax.axhline(1.0 / (high - low), color="red", linestyle="--", label="uniform density")
        ax.legend()
    else:
        ax.hist(arr, bins=1, alpha=0.7, edgecolor="black")
    ax.set_xlabel(value_label)
    ax.set_ylabel("Density")
    ax.set_title(f"Histogram of {arr.size} samples")
    ax.grid(True, alpha=0.3)
    path = plots_dir / "histogram.png"
    fig.savefig(path, dpi=100, bbox_inches="tight")
    plt.close(fig)
    created_plots["histogram"] = path

    # Values in generation order
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(np.arange(arr.size), arr, marker="o", markersize=3, linestyle="none")
    ax.axhline(low, color="gray", linestyle=":")
    ax.axhline(high, color="gray", linestyle=":")
    ax.set_xlabel("Index")
    ax.set_ylabel(value_label)
    ax.set_title("Samples in Generation Order")
    ax.grid(True, alpha=0.3)
    path = plots_dir / "sequence.png"
    fig.savefig(path, dpi=100, bbox_inches="tight")
    plt.close(fig)
    created_plots["sequence"] = path

    return created_plots
