"""Tests for random_numbers.

This module tests:
- Output length and range for valid inputs, including very wide bounds
- Error precedence and messages for invalid inputs
- Degenerate intervals
- Reproducibility with seeded and injected generators
"""

from __future__ import annotations

import numpy as np
import pytest

import core.rng as core_rng
from core.rng import make_rng
from randomizer import random_numbers, validate_request

FLOAT_MAX = float(np.finfo(np.float64).max)


class FixedSampler:
    """Sampler that returns a preset array of unit draws."""

    def __init__(self, values: list[float]) -> None:
        self.values = np.array(values)
        self.calls: list[tuple[float, float, int]] = []

    def uniform(self, low: float, high: float, size: int) -> np.ndarray:
        self.calls.append((low, high, size))
        return self.values[:size]


class TestValidOutput:
    """Tests for length, range and dtype of the returned samples."""

    def test_returns_requested_length(self) -> None:
        result = random_numbers(5, 1, 10, rng=make_rng(123))
        assert len(result) == 5

    def test_values_within_range(self) -> None:
        result = random_numbers(5, 1, 10, rng=make_rng(123))
        assert np.all((result >= 1) & (result <= 10))

    def test_large_sample_within_range(self) -> None:
        result = random_numbers(10_000, -3.5, 2.25, rng=make_rng(0))
        assert result.shape == (10_000,)
        assert result.min() >= -3.5
        assert result.max() <= 2.25

    def test_returns_float64(self) -> None:
        result = random_numbers(3, 0, 1, rng=make_rng(0))
        assert result.dtype == np.float64

    def test_degenerate_interval(self) -> None:
        result = random_numbers(5, 50, 50, rng=make_rng(0))
        assert len(result) == 5
        assert np.all(result == 50)

    def test_accepts_integral_float_count(self) -> None:
        assert len(random_numbers(5.0, 0, 1, rng=make_rng(0))) == 5

    def test_accepts_numpy_scalar_arguments(self) -> None:
        result = random_numbers(np.int64(4), np.float32(0.0), np.float64(0.5), rng=make_rng(0))
        assert len(result) == 4
        assert np.all((result >= 0.0) & (result <= 0.5))

    def test_accepts_large_int_bound_within_float_range(self) -> None:
        result = random_numbers(3, 0, 10**300, rng=make_rng(0))
        assert np.all((result >= 0.0) & (result <= 1e300))


class TestWideBounds:
    """Bounds whose difference is larger than the largest float."""

    def test_symmetric_wide_bounds(self) -> None:
        result = random_numbers(3, -1e308, 1e308, rng=make_rng(0))
        assert len(result) == 3
        assert np.all(np.isfinite(result))
        assert np.all((result >= -1e308) & (result <= 1e308))

    def test_full_float_range(self) -> None:
        result = random_numbers(1000, -FLOAT_MAX, FLOAT_MAX, rng=make_rng(1))
        assert np.all(np.isfinite(result))
        assert np.all((result >= -FLOAT_MAX) & (result <= FLOAT_MAX))
        # Spread over both halves of the interval, not collapsed onto a bound
        assert (result < 0).any()
        assert (result > 0).any()

    def test_unit_draws_map_onto_interval_endpoints(self) -> None:
        result = random_numbers(3, -FLOAT_MAX, FLOAT_MAX, rng=FixedSampler([0.0, 0.5, 1.0]))
        np.testing.assert_array_equal(result, [-FLOAT_MAX, 0.0, FLOAT_MAX])


class TestInvalidInputs:
    """Tests for error kinds, messages and their precedence."""

    def test_negative_count(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            random_numbers(-5, 1, 10)

    def test_zero_count(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            random_numbers(0, 1, 10)

    def test_min_greater_than_max(self) -> None:
        with pytest.raises(
            ValueError,
            match="minimum value must be less than or equal to the maximum value",
        ):
            random_numbers(5, 10, 1)

    def test_non_numeric_count(self) -> None:
        with pytest.raises(TypeError, match="numeric values"):
            random_numbers("five", 1, 10)

    @pytest.mark.parametrize("args", [(5, "1", 10), (5, 1, None), (True, 1, 10), (5, [1], 10)])
    def test_non_numeric_bounds_or_bool(self, args: tuple[object, object, object]) -> None:
        with pytest.raises(TypeError, match="numeric values"):
            random_numbers(*args)

    def test_type_error_takes_precedence(self) -> None:
        # Non-numeric max wins over the negative count
        with pytest.raises(TypeError, match="numeric values"):
            random_numbers(-5, 10, "1")

    def test_positive_check_precedes_bounds_check(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            random_numbers(-5, 10, 1)

    def test_fractional_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="whole number"):
            random_numbers(2.5, 0, 1)

    @pytest.mark.parametrize(
        "args", [(float("nan"), 0, 1), (5, float("-inf"), 1), (5, 0, float("inf"))]
    )
    def test_non_finite_rejected(self, args: tuple[float, float, float]) -> None:
        with pytest.raises(ValueError, match="finite"):
            random_numbers(*args)

    @pytest.mark.parametrize("args", [(3, 0, 10**400), (3, -(10**400), 0), (10**400, 0, 1)])
    def test_int_beyond_float_range_rejected(self, args: tuple[int, int, int]) -> None:
        with pytest.raises(ValueError, match="finite"):
            random_numbers(*args)

    def test_sampler_not_called_on_invalid_input(self) -> None:
        sampler = FixedSampler([0.5])
        with pytest.raises(ValueError):
            random_numbers(1, 2, 1, rng=sampler)
        assert sampler.calls == []


class TestSamplerContract:
    """Tests for how the injected sampler is used and checked."""

    def test_draws_unit_interval_once(self) -> None:
        sampler = FixedSampler([0.3, 0.1, 0.2])
        random_numbers(3, 2, 4, rng=sampler)
        assert sampler.calls == [(0.0, 1.0, 3)]

    def test_preserves_generation_order(self) -> None:
        result = random_numbers(3, 0, 1, rng=FixedSampler([0.3, 0.1, 0.2]))
        np.testing.assert_array_equal(result, [0.3, 0.1, 0.2])

    def test_scales_unit_draws(self) -> None:
        result = random_numbers(3, 2, 4, rng=FixedSampler([0.0, 0.5, 1.0]))
        np.testing.assert_array_equal(result, [2.0, 3.0, 4.0])

    def test_out_of_range_sampler_output_raises(self) -> None:
        with pytest.raises(RuntimeError, match="outside"):
            random_numbers(2, 0, 1, rng=FixedSampler([0.5, 1.5]))

    def test_wrong_length_sampler_output_raises(self) -> None:
        with pytest.raises(RuntimeError, match="shape"):
            random_numbers(3, 0, 1, rng=FixedSampler([0.5]))

    def test_degenerate_interval_skips_sampler(self) -> None:
        sampler = FixedSampler([0.5])
        random_numbers(4, 7, 7, rng=sampler)
        assert sampler.calls == []


class TestReproducibility:
    """Tests for seeded and shared generators."""

    def test_same_seed_same_sequence(self) -> None:
        a = random_numbers(10, 0, 100, rng=make_rng(42))
        b = random_numbers(10, 0, 100, rng=make_rng(42))
        np.testing.assert_array_equal(a, b)

    def test_seeded_default_generator_is_reproducible(self) -> None:
        core_rng.seed_default_rng(123)
        a = random_numbers(5, 1, 10)
        core_rng.seed_default_rng(123)
        b = random_numbers(5, 1, 10)
        np.testing.assert_array_equal(a, b)

    def test_does_not_reseed_default_generator(self) -> None:
        generator = core_rng.seed_default_rng(99)
        random_numbers(5, 1, 10)
        assert core_rng.default_rng() is generator

    def test_successive_calls_advance_the_generator(self) -> None:
        rng = make_rng(5)
        a = random_numbers(5, 0, 1, rng=rng)
        b = random_numbers(5, 0, 1, rng=rng)
        assert not np.array_equal(a, b)


class TestValidateRequest:
    """Tests for argument normalization."""

    def test_normalizes_types(self) -> None:
        request = validate_request(5.0, 1, 10)
        assert request.n == 5
        assert isinstance(request.n, int)
        assert request.low == 1.0
        assert request.high == 10.0
