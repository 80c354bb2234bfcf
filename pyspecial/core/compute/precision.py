"""
Numerical precision constants and utilities.

Provides machine epsilon and the grid "snap" used to recover exact values
from long floating-point accumulations (composite quadrature, Lanczos Gamma).
"""

import math

import numpy as np

from pyspecial.core.compute.tolerances import SNAP_DECIMALS, SNAP_TOLERANCE


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


def snap_to_grid(
    value: float,
    decimals: int = SNAP_DECIMALS,
    tolerance: float = SNAP_TOLERANCE,
) -> float:
    """
    Snap a value onto a decimal grid when it is within tolerance of it.

    The value is scaled by 10**decimals; if the scaled value lies within
    ``tolerance`` of its floor or its ceiling, that grid point (scaled back)
    is returned. Otherwise the value is returned unchanged. Non-finite
    values pass through.

    Args:
        value: Raw result
        decimals: Grid resolution in decimal places
        tolerance: Window in grid units

    Returns:
        The snapped value, or ``value`` itself

    Examples:
        >>> snap_to_grid(71.99999999999997)
        72.0
        >>> snap_to_grid(0.333333333)
        0.333333333
    """
    if not math.isfinite(value):
        return value

    scale = 10.0 ** decimals
    scaled = value * scale

    lower = math.floor(scaled)
    if abs(scaled - lower) <= tolerance:
        return lower / scale

    upper = math.ceil(scaled)
    if abs(scaled - upper) <= tolerance:
        return upper / scale

    return value


def snap_to_integer(value: float, rtol: float) -> float:
    """
    Round a value to the nearest integer when within a relative tolerance.

    Used to make Lanczos Gamma reproduce exact factorials: the approximation
    error is relative, so the window scales with the magnitude.
    """
    if not math.isfinite(value):
        return value
    nearest = round(value)
    if abs(value - nearest) <= rtol * abs(value):
        return float(nearest)
    return value
