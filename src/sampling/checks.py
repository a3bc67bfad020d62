"""Sanity and distribution check suite.

This module provides a fast, deterministic check suite to verify that:
- random_numbers returns the requested number of values, all in range
- seeded runs are reproducible
- degenerate intervals and invalid inputs behave as documented
- the sample is statistically close to the uniform distribution

The checks are designed to be run locally or in CI without manual inspection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from core.rng import make_rng
from randomizer.random_numbers import random_numbers
from sampling.metrics import fraction_in_range, uniform_ks_statistic

__all__ = [
    "CheckResult",
    "ChecksSummary",
    "check_length",
    "check_within_range",
    "check_reproducible",
    "check_degenerate_interval",
    "check_invalid_inputs",
    "check_uniformity",
    "run_checks",
]

# (args, expected exception, expected message fragment)
INVALID_INPUT_CASES: list[tuple[tuple[Any, Any, Any], type[Exception], str]] = [
    ((-5, 1, 10), ValueError, "positive"),
    ((5, 10, 1), ValueError, "minimum value must be less than or equal to the maximum value"),
    (("five", 1, 10), TypeError, "numeric values"),
]


@dataclass
class CheckResult:
    """Result of a single check.

    Attributes:
        name: Name of the check.
        passed: Whether the check passed.
        details: Additional details (numeric values, thresholds, config).
    """

    name: str
    passed: bool
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "passed": self.passed,
            "details": self.details,
        }


@dataclass
class ChecksSummary:
    """Summary of all checks.

    Attributes:
        passed: Whether all checks passed.
        results: List of individual check results.
    """

    passed: bool
    results: list[CheckResult] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "passed": self.passed,
            "num_checks": len(self.results),
            "num_passed": sum(1 for r in self.results if r.passed),
            "num_failed": sum(1 for r in self.results if not r.passed),
            "results": [r.to_dict() for r in self.results],
        }


def _params(config: dict[str, Any]) -> tuple[int, float, float, int]:
    return (
        config.get("n", 100),
        config.get("min", 0.0),
        config.get("max", 1.0),
        config.get("seed", 0),
    )


def check_length(config: dict[str, Any]) -> CheckResult:
    """Check that exactly ``n`` values are returned."""
    n, low, high, seed = _params(config)
    values = random_numbers(n, low, high, rng=make_rng(seed))
    return CheckResult(
        name="length",
        passed=len(values) == n,
        details={"expected": n, "actual": len(values)},
    )


def check_within_range(config: dict[str, Any]) -> CheckResult:
    """Check that every value lies in [min, max]."""
    n, low, high, seed = _params(config)
    values = random_numbers(n, low, high, rng=make_rng(seed))
    fraction = fraction_in_range(values, low, high)
    return CheckResult(
        name="within_range",
        passed=fraction == 1.0,
        details={
            "fraction_in_range": fraction,
            "observed_min": float(values.min()),
            "observed_max": float(values.max()),
            "min": low,
            "max": high,
        },
    )


def check_reproducible(config: dict[str, Any]) -> CheckResult:
    """Check that identically seeded generators produce identical sequences."""
    n, low, high, seed = _params(config)
    first = random_numbers(n, low, high, rng=make_rng(seed))
    second = random_numbers(n, low, high, rng=make_rng(seed))
    return CheckResult(
        name="reproducible",
        passed=bool(np.array_equal(first, second)),
        details={"seed": seed, "max_abs_diff": float(np.max(np.abs(first - second)))},
    )


def check_degenerate_interval(config: dict[str, Any]) -> CheckResult:
    """Check that ``min == max`` yields values all equal to that bound."""
    value = config.get("max", 1.0)
    seed = config.get("seed", 0)
    values = random_numbers(5, value, value, rng=make_rng(seed))
    return CheckResult(
        name="degenerate_interval",
        passed=len(values) == 5 and bool((values == value).all()),
        details={"value": value, "values": values.tolist()},
    )


def check_invalid_inputs(config: dict[str, Any]) -> CheckResult:
    """Check that invalid arguments raise the documented errors."""
    failures: list[str] = []
    for args, exc_type, fragment in INVALID_INPUT_CASES:
        try:
            random_numbers(*args, rng=make_rng(0))
        except exc_type as exc:
            if fragment not in str(exc):
                failures.append(f"{args!r}: message {str(exc)!r} lacks {fragment!r}")
        else:
            failures.append(f"{args!r}: no {exc_type.__name__} raised")
    return CheckResult(
        name="invalid_inputs",
        passed=not failures,
        details={"num_cases": len(INVALID_INPUT_CASES), "failures": failures},
    )


def check_uniformity(config: dict[str, Any]) -> CheckResult:
    """Check that a large sample is close to U[min, max] in KS distance.

    Skipped for a degenerate interval.
    """
    _n, low, high, seed = _params(config)
    repeats = config.get("repeats", 2000)
    threshold = config.get("ks_threshold", 0.1)

    if low == high:
        return CheckResult(
            name="uniformity",
            passed=True,
            details={"skipped": True, "reason": "degenerate interval"},
        )

    values = random_numbers(repeats, low, high, rng=make_rng(seed))
    statistic = uniform_ks_statistic(values, low, high)
    return CheckResult(
        name="uniformity",
        passed=statistic <= threshold,
        details={"ks_statistic": statistic, "threshold": threshold, "repeats": repeats},
    )


def run_checks(config: dict[str, Any]) -> ChecksSummary:
    """Run the full check suite for the given configuration.

    Args:
        config: Configuration dictionary with n, min, max, seed, repeats,
                ks_threshold.

    Returns:
        ChecksSummary with all check results.
    """
    results = [
        check_length(config),
        check_within_range(config),
        check_reproducible(config),
        check_degenerate_interval(config),
        check_invalid_inputs(config),
        check_uniformity(config),
    ]
    all_passed = all(r.passed for r in results)
    return ChecksSummary(passed=all_passed, results=results)
