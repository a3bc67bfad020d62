"""Uniform random number generation.

Provides :func:`random_numbers`, which validates its arguments and draws
``n`` values from the closed interval ``[min, max]``.

The random source is injectable: pass ``rng`` (any ``UniformSampler``, e.g. a
``numpy.random.Generator``) to control determinism. Without it the
process-wide generator from ``core.rng`` is used; this module only draws from
it and never reseeds it.

Draws are taken from U[0, 1] and mapped onto the interval, so bounds whose
difference exceeds the float range (e.g. ``-1e308`` to ``1e308``) still work.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np

from core.logging import get_logger
from core.protocols import UniformSampler
from core.rng import default_rng
from core.types import SampleRequest, SampleVector

__all__ = [
    "random_numbers",
    "validate_request",
    "NON_NUMERIC_MESSAGE",
    "NON_FINITE_MESSAGE",
    "NON_POSITIVE_MESSAGE",
    "FRACTIONAL_COUNT_MESSAGE",
    "BAD_BOUNDS_MESSAGE",
]

logger = get_logger("random_numbers")

NON_NUMERIC_MESSAGE = "All arguments must be numeric values."
NON_FINITE_MESSAGE = "All arguments must be finite numeric values."
NON_POSITIVE_MESSAGE = "The number of random numbers to generate must be positive."
FRACTIONAL_COUNT_MESSAGE = "The number of random numbers to generate must be a whole number."
BAD_BOUNDS_MESSAGE = "The minimum value must be less than or equal to the maximum value."


def _is_numeric(value: Any) -> bool:
    # bool is an Integral subclass but not a count or a bound
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def validate_request(n: Any, min: Any, max: Any) -> SampleRequest:
    """Validate arguments in the documented precedence order.

    Args:
        n: Number of values to generate.
        min: Lower bound.
        max: Upper bound.

    Returns:
        The normalized request.

    Raises:
        TypeError: If any argument is not a real number.
        ValueError: If any argument is non-finite, ``n`` is not a positive
            whole number, or ``min > max``.
    """
    if not (_is_numeric(n) and _is_numeric(min) and _is_numeric(max)):
        raise TypeError(NON_NUMERIC_MESSAGE)
    try:
        finite = all(math.isfinite(float(v)) for v in (n, min, max))
    except OverflowError:
        # ints beyond the float range
        finite = False
    if not finite:
        raise ValueError(NON_FINITE_MESSAGE)
    if n <= 0:
        raise ValueError(NON_POSITIVE_MESSAGE)
    if float(n) != math.floor(float(n)):
        raise ValueError(FRACTIONAL_COUNT_MESSAGE)
    if min > max:
        raise ValueError(BAD_BOUNDS_MESSAGE)
    return SampleRequest(n=int(n), low=float(min), high=float(max))


def _scale_unit_draws(draws: Any, request: SampleRequest) -> SampleVector:
    """Map draws from U[0, 1] onto [low, high].

    Raises:
        RuntimeError: If the sampler returned the wrong shape or values
            outside [0, 1].
    """
    u = np.asarray(draws, dtype=np.float64)
    if u.shape != (request.n,):
        raise RuntimeError(f"Sampler returned shape {u.shape}, expected ({request.n},)")
    outside = (u < 0.0) | (u > 1.0)
    if outside.any():
        raise RuntimeError(f"Sampler returned {int(outside.sum())} values outside [0.0, 1.0]")

    # Convex combination: high - low may not be representable as a float
    values = request.low * (1.0 - u) + request.high * u
    return np.clip(values, request.low, request.high)


def random_numbers(
    n: int,
    min: float,
    max: float,
    *,
    rng: UniformSampler | None = None,
) -> SampleVector:
    """Generate ``n`` random numbers uniformly distributed over ``[min, max]``.

    Args:
        n: Number of values to generate (positive whole number).
        min: Lower bound of the range.
        max: Upper bound of the range.
        rng: Random source to draw from. Defaults to the process-wide generator.

    Returns:
        A 1D float64 array of length ``n`` in generation order. When
        ``min == max`` every value equals ``min``.

    Raises:
        TypeError: If any of ``n``, ``min``, ``max`` is not numeric.
        ValueError: If the count is not positive or whole, an argument is not
            finite, or ``min > max``.

    Example:
        >>> from core.rng import make_rng
        >>> values = random_numbers(5, 1, 10, rng=make_rng(123))
        >>> len(values)
        5
        >>> bool(((values >= 1) & (values <= 10)).all())
        True
    """
    request = validate_request(n, min, max)
    sampler = rng if rng is not None else default_rng()

    if request.degenerate:
        values = np.full(request.n, request.low, dtype=np.float64)
    else:
        values = _scale_unit_draws(sampler.uniform(0.0, 1.0, request.n), request)

    logger.debug("Drew %d values from U[%s, %s]", request.n, request.low, request.high)
    return values
