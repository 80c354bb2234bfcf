"""
Input validation utilities for PySpecial.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

They guard the structural arguments of a call (callables, counts, orders,
tolerances). Mathematical domain violations of the special functions are
not validation errors: they are reported through Outcome.status.

Design principles:
    - No silent type coercion beyond float()/int() of real numbers
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
from typing import Any

from pyspecial.core.exceptions import ValidationError


def check_callable(f: Any, name: str) -> None:
    """
    Verify an argument can be called as a scalar function.

    Args:
        f: Object to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If f is not callable
    """
    if not callable(f):
        raise ValidationError(
            f"{name}: expected a callable float -> float, got {type(f).__name__}"
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate and convert a real scalar to float.

    Accepts Python and NumPy real numbers. Rejects bool, complex, strings
    and anything else that is not a real number.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        float(value)

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_finite(value: float, name: str) -> None:
    """
    Verify a scalar is neither NaN nor infinite.

    Raises:
        ValidationError: If value is not finite
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify an argument is an integer >= 1.

    Integral floats (e.g. 20.0) are accepted and converted.

    Returns:
        int(value)

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected a positive integer, got bool")
    if isinstance(value, numbers.Integral):
        result = int(value)
    elif isinstance(value, numbers.Real) and float(value).is_integer():
        result = int(value)
    else:
        raise ValidationError(
            f"{name}: expected a positive integer, got {value!r}"
        )
    if result < 1:
        raise ValidationError(f"{name}: must be >= 1, got {result}")
    return result


def check_even(value: int, name: str) -> None:
    """
    Verify an integer is even.

    Raises:
        ValidationError: If value is odd
    """
    if value % 2 != 0:
        raise ValidationError(f"{name}: must be even, got {value}")


def check_nonnegative(value: float, name: str) -> None:
    """
    Verify a scalar is >= 0.

    Raises:
        ValidationError: If value is negative or NaN
    """
    if not value >= 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")


def check_integral_order(order: Any, name: str, minimum: int) -> int:
    """
    Verify an order/degree argument is an integer no smaller than minimum.

    Returns:
        int(order)

    Raises:
        ValidationError: If order is not an integer or is below minimum
    """
    if isinstance(order, bool) or not isinstance(order, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(order).__name__}"
        )
    order = int(order)
    if order < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {order}")
    return order


def resolve_intervals(
    lower: float,
    upper: float,
    intervals: Any,
    step: Any,
) -> int:
    """
    Turn an interval count or a step size into a subinterval count.

    Exactly one of ``intervals`` and ``step`` must be given. A step is
    converted to n = ceil(|upper - lower| / step), so the realised spacing
    never exceeds the requested step.

    Args:
        lower, upper: Integration bounds
        intervals: Number of subintervals, or None
        step: Maximum subinterval width, or None

    Returns:
        Number of subintervals (>= 1)

    Raises:
        ValidationError: If both or neither are given, or either is invalid
    """
    if (intervals is None) == (step is None):
        raise ValidationError(
            "exactly one of 'intervals' and 'step' must be given, "
            f"got intervals={intervals!r}, step={step!r}"
        )
    if intervals is not None:
        return check_positive_int(intervals, "intervals")

    step = check_scalar(step, "step")
    if not step > 0 or not math.isfinite(step):
        raise ValidationError(f"step: must be positive and finite, got {step}")
    return max(1, math.ceil(abs(upper - lower) / step))
