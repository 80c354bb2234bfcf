"""
Finite sums and products of a scalar function over unit steps.

Both bounds are rounded to the nearest integer (halves away from zero)
before iterating, so f is always sampled at integral k.
"""

from __future__ import annotations

import math

from pyspecial.core.protocols import ScalarFunction
from pyspecial.core.validation import check_callable, check_finite, check_scalar


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _bounds(start, limit) -> range:
    start = check_scalar(start, "start")
    limit = check_scalar(limit, "limit")
    check_finite(start, "start")
    check_finite(limit, "limit")
    return range(_round_half_away(start), _round_half_away(limit) + 1)


def summation(start: float, limit: float, f: ScalarFunction) -> float:
    """
    Sum f(k) for integral k from round(start) to round(limit), inclusive.

    An empty range (limit < start) sums to 0. The terms are accumulated
    with math.fsum, so the result does not depend on their order.

    Examples:
        >>> summation(1, 4, lambda k: k * k)
        30.0
        >>> summation(0.5, 3.4, lambda k: k)    # k = 1, 2, 3
        6.0
    """
    check_callable(f, "f")
    return math.fsum(f(float(k)) for k in _bounds(start, limit))


def product(start: float, limit: float, f: ScalarFunction) -> float:
    """
    Multiply f(k) for integral k from round(start) to round(limit), inclusive.

    An empty range (limit < start) gives 1.

    Examples:
        >>> product(1, 5, lambda k: k)
        120.0
    """
    check_callable(f, "f")
    result = 1.0
    for k in _bounds(start, limit):
        result *= f(float(k))
    return result
