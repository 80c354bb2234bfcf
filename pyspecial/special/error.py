"""
Error function, its complement and its inverse.

Public API:
    erf(z)           - 2/sqrt(pi) ∫_0^z e^{-t²} dt
    erfc(z)          - 1 - erf(z)
    inverse_erf(x)   - y such that erf(y) = x

For |z| < 3 erf is the Maclaurin series truncated at 99 terms. Beyond that
the alternating series loses digits to cancellation, and the tail is
computed instead from the upper incomplete gamma function,
erfc(z) = Q(1/2, z²), whose continued fraction converges fast there.
"""

from __future__ import annotations

import math

from pyspecial.core.outcome import Outcome
from pyspecial.core.compute.tolerances import ERF_SERIES_CUTOFF, MACLAURIN_TERMS
from pyspecial.calculus.series import summation
from pyspecial.special.gamma import regularized_gamma_q

_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)

# Giles, "Approximating the erfinv function" (GPU Computing Gems, 2011).
# Horner order, highest power first.
_GILES_CENTRAL = (
    2.81022636e-08, 3.43273939e-07, -3.5233877e-06,
    -4.39150654e-06, 0.00021858087, -0.00125372503,
    -0.00417768164, 0.246640727, 1.50140941,
)
_GILES_TAIL = (
    -0.000200214257, 0.000100950558, 0.00134934322,
    -0.00367342844, 0.00573950773, -0.0076224613,
    0.00943887047, 1.00167406, 2.83297682,
)


def _maclaurin(z: float) -> float:
    z2 = z * z

    def term(k: float) -> float:
        k = int(k)
        return (-1.0) ** k * z * z2 ** k / ((2 * k + 1) * math.factorial(k))

    return _TWO_OVER_SQRT_PI * summation(0, MACLAURIN_TERMS - 1, term)


def erf(z: float) -> float:
    """
    Error function.

    Odd by construction: the magnitude is computed for |z| and the sign
    restored afterwards.

    Examples
    --------
    >>> erf(0.5)
    0.5204998778130465
    """
    z = float(z)
    if math.isnan(z):
        return math.nan
    magnitude = abs(z)
    if magnitude < ERF_SERIES_CUTOFF:
        value = _maclaurin(magnitude)
    else:
        value = 1.0 - regularized_gamma_q(0.5, magnitude * magnitude)
    return math.copysign(value, z)


def erfc(z: float) -> float:
    """
    Complementary error function 1 - erf(z).

    For z >= 3 the tail Q(1/2, z²) is returned directly, so tiny values
    are not lost to the subtraction.

    Examples
    --------
    >>> erfc(4.0)
    1.541725790028...e-08
    """
    z = float(z)
    if z >= ERF_SERIES_CUTOFF:
        return regularized_gamma_q(0.5, z * z)
    return 1.0 - erf(z)


def _horner(coefficients: tuple[float, ...], t: float) -> float:
    result = 0.0
    for c in coefficients:
        result = result * t + c
    return result


def inverse_erf_outcome(x: float) -> Outcome[float]:
    """
    Inverse error function, with status.

    Giles' single-precision rational approximation in
    w = -ln((1 - x)(1 + x)) gives the seed, and one Halley step on
    f(y) = erf(y) - x brings it to double precision:

        y = seed - 2 f f' / (2 f'² - f f'')

    with f' = 2/sqrt(pi) e^{-seed²} and f'' = -2 seed f'.

    Returns
    -------
    Outcome[float]
        ±inf for x = ±1. DOMAIN_ERROR (value NaN) for |x| > 1 or NaN.
        info['seed'] holds the rational approximation before refinement.
    """
    x = float(x)
    if not -1.0 <= x <= 1.0:
        return Outcome.domain_error(
            math.nan, f"x must lie in [-1, 1], got {x}",
            argument='x', received=x, domain='[-1, 1]',
        )
    if abs(x) == 1.0:
        return Outcome.success(math.copysign(math.inf, x))

    w = -math.log((1.0 - x) * (1.0 + x))
    if w < 5.0:
        seed = _horner(_GILES_CENTRAL, w - 2.5) * x
    else:
        seed = _horner(_GILES_TAIL, math.sqrt(w) - 3.0) * x

    fx = erf(seed) - x
    df = _TWO_OVER_SQRT_PI * math.exp(-seed * seed)
    d2f = -2.0 * seed * df
    denominator = 2.0 * df * df - fx * d2f
    if denominator == 0.0:
        return Outcome.success(seed, iterations=0, seed=seed)
    return Outcome.success(seed - 2.0 * fx * df / denominator, iterations=1, seed=seed)


def inverse_erf(x: float) -> float:
    """
    Inverse error function.

    Returns NaN for |x| > 1 and ±inf at x = ±1.

    Examples
    --------
    >>> inverse_erf(0.5)
    0.4769362762044...
    """
    return inverse_erf_outcome(x).value
