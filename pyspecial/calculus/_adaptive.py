"""
Adaptive Simpson quadrature.

Each panel [a, b] carries f(a), f((a+b)/2), f(b) and its single-panel
Simpson estimate (the coarse estimate). Two new samples at the quarter
points give the Simpson estimates of both halves; their sum is the refined
estimate. If |refined - coarse| is within the panel's tolerance the refined
estimate is accepted, otherwise both halves are refined independently with
half the tolerance.

Panels live on an explicit stack, so the depth of refinement is bounded by
max_depth rather than by the interpreter's recursion limit. A panel that
reaches max_depth, or whose quarter points collapse onto its endpoints in
float64, is accepted as-is and the outcome is flagged NOT_CONVERGED.

The acceptance test never asks for more than the arithmetic can deliver:
the tolerance is floored at a small multiple of machine epsilon times the
panel's absolute magnitude. Without the floor a request such as
tolerance=1e-20 could only be met by an exact-zero difference.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass

from pyspecial.core.exceptions import ConvergenceWarning
from pyspecial.core.outcome import Outcome
from pyspecial.core.protocols import ScalarFunction
from pyspecial.core.validation import (
    check_callable,
    check_finite,
    check_nonnegative,
    check_positive_int,
    check_scalar,
)
from pyspecial.core.compute.precision import EPSILON_64
from pyspecial.core.compute.tolerances import ADAPTIVE_MAX_DEPTH

_ROUNDOFF = 64.0 * EPSILON_64


@dataclass(frozen=True)
class _Panel:
    a: float
    b: float
    fa: float
    fm: float
    fb: float
    coarse: float
    tol: float
    depth: int


def _simpson(a: float, b: float, fa: float, fm: float, fb: float) -> float:
    return (b - a) / 6.0 * (fa + 4.0 * fm + fb)


def integrate_adaptive_outcome(
    f: ScalarFunction,
    lower: float,
    upper: float,
    tolerance: float,
    *,
    max_depth: int = ADAPTIVE_MAX_DEPTH,
) -> Outcome[float]:
    """
    Integrate f over [lower, upper] by adaptive Simpson bisection.

    Parameters
    ----------
    f : ScalarFunction
        Integrand.
    lower, upper : float
        Integration bounds.
    tolerance : float
        Absolute error target for the whole interval (>= 0). Halved at
        every split.
    max_depth : int
        Deepest bisection level. Default 64.

    Returns
    -------
    Outcome[float]
        OK with the integral; NOT_CONVERGED (value = best estimate) if any
        panel hit max_depth or float64 resolution; DIVERGENT (value NaN) if
        the integrand produced a non-finite estimate.
        info['evaluations'] counts integrand calls; iterations counts
        accepted panels.
    """
    check_callable(f, "f")
    lower = check_scalar(lower, "lower")
    upper = check_scalar(upper, "upper")
    check_finite(lower, "lower")
    check_finite(upper, "upper")
    tolerance = check_scalar(tolerance, "tolerance")
    check_nonnegative(tolerance, "tolerance")
    max_depth = check_positive_int(max_depth, "max_depth")

    if lower == upper:
        return Outcome.success(0.0, iterations=0, evaluations=0)
    if lower > upper:
        flipped = integrate_adaptive_outcome(f, upper, lower, tolerance, max_depth=max_depth)
        return flipped.with_value(-flipped.value)

    mid = 0.5 * (lower + upper)
    fa, fm, fb = f(lower), f(mid), f(upper)
    stack = [_Panel(lower, upper, fa, fm, fb, _simpson(lower, upper, fa, fm, fb), tolerance, 0)]

    pieces: list[float] = []
    evaluations = 3
    saturated = 0
    deepest = 0

    while stack:
        p = stack.pop()
        m = 0.5 * (p.a + p.b)
        lm = 0.5 * (p.a + m)
        rm = 0.5 * (m + p.b)
        flm, frm = f(lm), f(rm)
        evaluations += 2

        left = _simpson(p.a, m, p.fa, flm, p.fm)
        right = _simpson(m, p.b, p.fm, frm, p.fb)
        refined = left + right

        if not math.isfinite(refined):
            return Outcome.divergent(
                math.nan,
                f"integrand is not finite on [{p.a}, {p.b}]",
                iterations=len(pieces),
                lower=lower,
                upper=upper,
                evaluations=evaluations,
            )

        magnitude = abs(p.b - p.a) / 12.0 * (
            abs(p.fa) + 4.0 * abs(flm) + 2.0 * abs(p.fm) + 4.0 * abs(frm) + abs(p.fb)
        )
        if abs(refined - p.coarse) <= max(p.tol, _ROUNDOFF * magnitude):
            pieces.append(refined)
            continue

        depth = p.depth + 1
        deepest = max(deepest, depth)
        if depth >= max_depth or not (p.a < lm < m < rm < p.b):
            pieces.append(refined)
            saturated += 1
            continue

        half = 0.5 * p.tol
        stack.append(_Panel(m, p.b, p.fm, frm, p.fb, right, half, depth))
        stack.append(_Panel(p.a, m, p.fa, flm, p.fm, left, half, depth))

    value = math.fsum(pieces)

    if saturated:
        message = (
            f"adaptive quadrature accepted {saturated} panel(s) at the depth "
            f"limit {max_depth} without meeting tolerance {tolerance}"
        )
        warnings.warn(message, ConvergenceWarning, stacklevel=2)
        return Outcome.not_converged(
            value,
            message,
            iterations=len(pieces),
            warnings=(message,),
            reason='max_depth',
            threshold=tolerance,
            evaluations=evaluations,
            depth=deepest,
        )

    return Outcome.success(
        value, iterations=len(pieces), evaluations=evaluations, depth=deepest,
    )


def integrate_adaptive(
    f: ScalarFunction,
    lower: float,
    upper: float,
    tolerance: float,
) -> float:
    """
    Integrate f over [lower, upper] to within tolerance, adaptively.

    Examples:
        >>> integrate_adaptive(lambda x: x * x, 0.0, 6.0, 1e-20)
        72.0
    """
    return integrate_adaptive_outcome(f, lower, upper, tolerance).value
