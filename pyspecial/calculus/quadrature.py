"""
Fixed-rule numerical integration.

Rules:
    integrate_left_riemann      - left-endpoint Riemann sum
    integrate_right_riemann     - right-endpoint Riemann sum
    integrate_midpoint_riemann  - midpoint Riemann sum
    integrate_trapezoid         - composite trapezoid rule
    integrate_simpson           - composite Simpson 1/3 rule (even n)
    integrate_boole             - single closed 5-point Boole panel
    definite_integral           - composite Simpson with n = 100000,
                                  snapped, divergence-checked

Every composite rule takes either an interval count or a step size:

    integrate_trapezoid(f, 0.0, 1.0, 20)          # 20 subintervals
    integrate_trapezoid(f, 0.0, 1.0, step=0.05)   # subintervals of <= 0.05

The integrand is sampled at plain Python floats, one call per node.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from pyspecial.core.outcome import Outcome
from pyspecial.core.protocols import ScalarFunction
from pyspecial.core.validation import (
    check_callable,
    check_even,
    check_scalar,
    resolve_intervals,
)
from pyspecial.core.compute.precision import snap_to_grid
from pyspecial.core.compute.tolerances import DEFINITE_INTEGRAL_INTERVALS

# Boole's rule weights, to be scaled by (upper - lower) / 90
_BOOLE_WEIGHTS = np.array([7.0, 32.0, 12.0, 32.0, 7.0])


def _sample(f: ScalarFunction, nodes: NDArray) -> NDArray:
    """Evaluate f at every node."""
    return np.fromiter(
        (f(x) for x in nodes.tolist()), dtype=np.float64, count=nodes.size,
    )


def _prepare(f, lower, upper, intervals, step) -> tuple[float, float, int]:
    check_callable(f, "f")
    lower = check_scalar(lower, "lower")
    upper = check_scalar(upper, "upper")
    n = resolve_intervals(lower, upper, intervals, step)
    return lower, upper, n


def _simpson_weights(n: int) -> NDArray:
    """Weights 1, 4, 2, 4, ..., 2, 4, 1 for n (even) subintervals."""
    weights = np.ones(n + 1, dtype=np.float64)
    weights[1:-1:2] = 4.0
    weights[2:-1:2] = 2.0
    return weights


def integrate_left_riemann(
    f: ScalarFunction,
    lower: float,
    upper: float,
    intervals: int | None = None,
    *,
    step: float | None = None,
) -> float:
    """
    Left Riemann sum: t * sum f(lower + i t), i = 0 .. n-1.

    Parameters
    ----------
    f : ScalarFunction
        Integrand.
    lower, upper : float
        Integration bounds.
    intervals : int or None
        Number of subintervals n.
    step : float or None
        Maximum subinterval width; n = ceil(|upper - lower| / step).

    Returns
    -------
    float
        Integral estimate.
    """
    lower, upper, n = _prepare(f, lower, upper, intervals, step)
    t = (upper - lower) / n
    nodes = np.linspace(lower, upper, n + 1)[:-1]
    return float(t * _sample(f, nodes).sum())


def integrate_right_riemann(
    f: ScalarFunction,
    lower: float,
    upper: float,
    intervals: int | None = None,
    *,
    step: float | None = None,
) -> float:
    """Right Riemann sum: t * sum f(lower + i t), i = 1 .. n."""
    lower, upper, n = _prepare(f, lower, upper, intervals, step)
    t = (upper - lower) / n
    nodes = np.linspace(lower, upper, n + 1)[1:]
    return float(t * _sample(f, nodes).sum())


def integrate_midpoint_riemann(
    f: ScalarFunction,
    lower: float,
    upper: float,
    intervals: int | None = None,
    *,
    step: float | None = None,
) -> float:
    """Midpoint Riemann sum: t * sum f(lower + (i + 1/2) t), i = 0 .. n-1."""
    lower, upper, n = _prepare(f, lower, upper, intervals, step)
    t = (upper - lower) / n
    nodes = lower + t * (np.arange(n, dtype=np.float64) + 0.5)
    return float(t * _sample(f, nodes).sum())


def integrate_trapezoid(
    f: ScalarFunction,
    lower: float,
    upper: float,
    intervals: int | None = None,
    *,
    step: float | None = None,
) -> float:
    """Composite trapezoid rule: t/2 * sum (f(x_i) + f(x_{i+1}))."""
    lower, upper, n = _prepare(f, lower, upper, intervals, step)
    t = (upper - lower) / n
    values = _sample(f, np.linspace(lower, upper, n + 1))
    return float(0.5 * t * (values[:-1] + values[1:]).sum())


def integrate_simpson(
    f: ScalarFunction,
    lower: float,
    upper: float,
    intervals: int | None = None,
    *,
    step: float | None = None,
) -> float:
    """
    Composite Simpson 1/3 rule.

    Weights 1 at the endpoints, 4 on odd-indexed interior nodes and 2 on
    even-indexed ones, scaled by h/3. Exact for cubics.

    Raises
    ------
    ValidationError
        If the number of subintervals is odd. With ``step``, an odd
        ceil(|upper - lower| / step) is rounded up to the next even count.
    """
    lower, upper, n = _prepare(f, lower, upper, intervals, step)
    if step is not None and n % 2:
        n += 1
    check_even(n, "intervals")
    return _composite_simpson(f, lower, upper, n)


def _composite_simpson(f: ScalarFunction, lower: float, upper: float, n: int) -> float:
    h = (upper - lower) / n
    values = _sample(f, np.linspace(lower, upper, n + 1))
    return float(h / 3.0 * np.dot(_simpson_weights(n), values))


def integrate_boole(f: ScalarFunction, lower: float, upper: float) -> float:
    """
    Boole's rule over a single panel of four equal subintervals.

    (upper - lower) / 90 * (7 f0 + 32 f1 + 12 f2 + 32 f3 + 7 f4).
    Exact for polynomials up to degree five. Not composited: this is one
    global estimate.
    """
    check_callable(f, "f")
    lower = check_scalar(lower, "lower")
    upper = check_scalar(upper, "upper")
    values = _sample(f, np.linspace(lower, upper, 5))
    return float((upper - lower) / 90.0 * np.dot(_BOOLE_WEIGHTS, values))


def definite_integral(f: ScalarFunction, lower: float, upper: float) -> Outcome[float]:
    """
    High-accuracy definite integral with divergence detection.

    Composite Simpson with a fixed 100000 subintervals, followed by
    snap_to_grid(): a result within 1e-6 of a six-decimal grid point (in
    grid units) is returned as that grid point, which removes the roundoff
    accumulated over the long sum.

    Returns
    -------
    Outcome[float]
        OK with the snapped integral, or DIVERGENT (value NaN) when the raw
        sum is infinite or NaN, or when f raised ZeroDivisionError,
        OverflowError or ValueError (math domain error) at a node.

    Examples
    --------
    >>> definite_integral(lambda x: x * x, 0.0, 6.0).ok
    True
    >>> definite_integral(lambda x: 1.0 / x, 0.0, 1.0).status
    <Status.DIVERGENT: 'divergent'>
    """
    check_callable(f, "f")
    lower = check_scalar(lower, "lower")
    upper = check_scalar(upper, "upper")
    n = DEFINITE_INTEGRAL_INTERVALS

    try:
        raw = _composite_simpson(f, lower, upper, n)
    except (ZeroDivisionError, OverflowError, ValueError) as e:
        return Outcome.divergent(
            math.nan,
            f"integrand is singular on [{lower}, {upper}]: {e}",
            iterations=n,
            lower=lower,
            upper=upper,
        )

    if not math.isfinite(raw):
        return Outcome.divergent(
            math.nan,
            f"Function is divergent on [{lower}, {upper}] (raw sum {raw})",
            iterations=n,
            lower=lower,
            upper=upper,
        )

    return Outcome.success(snap_to_grid(raw), iterations=n, raw=raw)
