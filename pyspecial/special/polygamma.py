"""
Digamma and polygamma functions.

    ψ(z)       = Γ'(z) / Γ(z)
    ψ⁽ⁿ⁾(z)    = (-1)^{n+1} n! Σ_{k>=0} (z + k)^{-(n+1)}      for n >= 1

polygamma() also accepts order -1 (ln Γ) and order 0 (ψ).

The series for n >= 1 converges like k^{-(n+1)}, which for n = 1 is far
too slow to sum term by term. The partial sum is therefore stopped early
and the remaining tail added in closed form from the Euler-Maclaurin
formula:

    Σ_{k>=N} f(k) ≈ ∫_N^∞ f + f(N)/2 - f'(N)/12

Summation stops once the first neglected correction, -f'''(N)/720, is
below ``tol`` relative to the partial sum.
"""

from __future__ import annotations

import math
import warnings

from pyspecial.core.exceptions import ConvergenceWarning
from pyspecial.core.outcome import Outcome
from pyspecial.core.validation import check_integral_order, check_positive_int
from pyspecial.core.compute.tolerances import (
    DERIVATIVE_STEP,
    POLYGAMMA_MAX_TERMS,
    POLYGAMMA_TOLERANCE,
)
from pyspecial.calculus._derivative import derivative
from pyspecial.special.gamma import _is_pole, ln_gamma
from pyspecial.special.probability import factorial


def digamma(z: float) -> float:
    """
    Digamma function ψ(z), the logarithmic derivative of Γ.

    Central finite difference (h = 1e-7) of Γ(t) / Γ(z) at t = z. Dividing
    by the constant Γ(z) inside the difference keeps the samples near 1,
    so arguments whose Γ overflows still work. Poles return NaN.

    Examples
    --------
    >>> digamma(1.0)    # -Euler-Mascheroni
    -0.57721566...
    """
    z = float(z)
    if math.isnan(z) or _is_pole(z):
        return math.nan
    anchor = ln_gamma(z)
    method = "forward" if 0.0 < z <= DERIVATIVE_STEP else "central"
    return derivative(lambda t: math.exp(ln_gamma(t) - anchor), z, method=method)


def _euler_maclaurin_tail(base: float, n: int) -> float:
    """Σ_{k>=0} (base + k)^{-(n+1)} to third order."""
    return (
        base ** -n / n
        + 0.5 * base ** -(n + 1)
        + (n + 1) * base ** -(n + 2) / 12.0
    )


def polygamma_outcome(
    order: int,
    z: float,
    *,
    tol: float = POLYGAMMA_TOLERANCE,
    max_terms: int = POLYGAMMA_MAX_TERMS,
) -> Outcome[float]:
    """
    Polygamma function of the given order, with status.

    Parameters
    ----------
    order : int
        -1 (ln Γ), 0 (ψ) or any positive integer.
    z : float
        Argument. Non-positive integers are poles.
    tol : float
        Relative accuracy target of the series. Default 1e-10.
    max_terms : int
        Hard cap on summed terms. Default 99999.

    Returns
    -------
    Outcome[float]
        Order -1 is exactly ln_gamma(z), +inf at poles included. For other
        orders, DOMAIN_ERROR (NaN) at poles. NOT_CONVERGED, with a
        ConvergenceWarning, if max_terms were summed before the tail
        estimate became accurate enough. info['tail'] holds the
        Euler-Maclaurin remainder that was added.

    Raises
    ------
    ValidationError
        If order is not an integer >= -1.
    """
    n = check_integral_order(order, "order", -1)
    max_terms = check_positive_int(max_terms, "max_terms")
    z = float(z)

    if n == -1:
        return Outcome.success(ln_gamma(z))
    if math.isnan(z) or _is_pole(z):
        return Outcome.domain_error(
            math.nan, f"polygamma has a pole at z={z}",
            argument='z', received=z, domain='z not in {0, -1, -2, ...}',
        )
    if n == 0:
        return Outcome.success(digamma(z))

    scale = (-1.0) ** (n + 1) * factorial(n)
    remainder_factor = (n + 1) * (n + 2) * (n + 3) / 720.0

    terms: list[float] = []
    running = 0.0
    converged = False
    for k in range(max_terms):
        term = (z + k) ** -(n + 1)
        terms.append(term)
        running += term
        base = z + k + 1
        # The asymptotic tail is only trustworthy once base is past the order
        if base > n + 1 and remainder_factor * base ** -(n + 4) < tol * abs(running):
            converged = True
            break

    base = z + len(terms)
    tail = _euler_maclaurin_tail(base, n)
    value = scale * (math.fsum(terms) + tail)

    if not converged:
        message = (
            f"polygamma({n}, {z}) series reached {max_terms} terms "
            f"before meeting tolerance {tol}"
        )
        warnings.warn(message, ConvergenceWarning, stacklevel=2)
        return Outcome.not_converged(
            value, message,
            iterations=len(terms),
            warnings=(message,),
            reason='max_terms',
            threshold=tol,
            tail=tail,
        )
    return Outcome.success(value, iterations=len(terms), tail=tail)


def polygamma(order: int, z: float) -> float:
    """
    Polygamma function ψ⁽ⁿ⁾(z).

    Examples
    --------
    >>> polygamma(1, 1.0)   # pi² / 6
    1.6449340668...
    """
    return polygamma_outcome(order, z).value
