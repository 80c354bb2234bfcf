"""
Modified Lentz evaluation of continued fractions.

Evaluates

    f = b0 + a1 / (b1 + a2 / (b2 + a3 / (b3 + ...)))

front to back by tracking the running ratios

    C_j = b_j + a_j / C_{j-1}        D_j = 1 / (b_j + a_j D_{j-1})

so that f_j = f_{j-1} C_j D_j. Both ratios are floored away from zero by
``tiny`` to avoid division instabilities; evaluation stops once the last
factor C_j D_j is within ``tol`` of one.

Reference: Press et al., Numerical Recipes, 3rd ed., section 5.2.
"""

from __future__ import annotations

from typing import Callable

from pyspecial.core.outcome import Outcome


def lentz(
    terms: Callable[[int], tuple[float, float]],
    b0: float,
    *,
    max_terms: int,
    tol: float,
    tiny: float,
) -> Outcome[float]:
    """
    Evaluate a continued fraction with the modified Lentz algorithm.

    Args:
        terms: Maps j = 1, 2, ... to the partial numerator and denominator
            (a_j, b_j)
        b0: Leading term; replaced by ``tiny`` when (nearly) zero
        max_terms: Number of (a_j, b_j) pairs to consume at most
        tol: Stop when |1 - C_j D_j| < tol
        tiny: Floor for |C_j| and |D_j|

    Returns:
        Outcome with the value of the fraction. NOT_CONVERGED if max_terms
        were consumed without meeting tol; the value is then the last
        approximant.
    """
    f = b0 if abs(b0) >= tiny else tiny
    c = f
    d = 0.0
    delta = 0.0

    for j in range(1, max_terms + 1):
        a, b = terms(j)

        d = b + a * d
        if abs(d) < tiny:
            d = tiny
        d = 1.0 / d

        c = b + a / c
        if abs(c) < tiny:
            c = tiny

        delta = c * d
        f *= delta
        if abs(1.0 - delta) < tol:
            return Outcome.success(f, iterations=j)

    return Outcome.not_converged(
        f,
        f"continued fraction did not converge in {max_terms} terms",
        iterations=max_terms,
        reason='max_terms',
        final_change=abs(1.0 - delta),
        threshold=tol,
    )
