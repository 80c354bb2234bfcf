"""
Hypergeometric functions by truncated power series.

    ₂F₁(a, b; c; z) = Σ (a)_k (b)_k / (c)_k  z^k / k!     (70 terms)
    ₁F₁(a; b; z)    = Σ (a)_k / (b)_k        z^k / k!     (99 terms)

Consecutive terms are generated from their ratio, which avoids the
overflow of the separate Pochhammer symbols and factorials.
"""

from __future__ import annotations

import math
from typing import Callable

from pyspecial.core.compute.tolerances import HYP1F1_TERMS, HYP2F1_TERMS
from pyspecial.special.gamma import _is_pole


def _series(ratio: Callable[[int], float], count: int) -> float:
    """Sum of the first count terms t_0 = 1, t_{k+1} = t_k * ratio(k)."""
    terms = [1.0]
    term = 1.0
    for k in range(count - 1):
        term *= ratio(k)
        if term == 0.0:
            break
        if not math.isfinite(term):
            # Overflowed float64
            return math.nan
        terms.append(term)
    return math.fsum(terms)


def hyp2f1(a: float, b: float, c: float, z: float) -> float:
    """
    Gauss hypergeometric function ₂F₁(a, b; c; z).

    The series converges for |z| < 1; 70 terms give full double precision
    for |z| <= 0.5 and degrade towards |z| = 1. Returns NaN for |z| > 1 and
    for c a non-positive integer.

    Examples
    --------
    >>> hyp2f1(1.0, 1.0, 2.0, 0.5)   # -ln(1 - z) / z
    1.386294361...
    """
    a, b, c, z = float(a), float(b), float(c), float(z)
    if abs(z) > 1.0 or _is_pole(c):
        return math.nan
    return _series(lambda k: (a + k) * (b + k) / ((c + k) * (k + 1)) * z, HYP2F1_TERMS)


def hyp1f1(a: float, b: float, z: float) -> float:
    """
    Kummer's confluent hypergeometric function ₁F₁(a; b; z).

    Entire in z, but 99 terms only resolve moderate arguments (|z| up to
    about 30). Returns NaN for b a non-positive integer.

    Examples
    --------
    >>> hyp1f1(1.0, 1.0, 1.0)   # e
    2.718281828459045
    """
    a, b, z = float(a), float(b), float(z)
    if _is_pole(b):
        return math.nan
    return _series(lambda k: (a + k) / ((b + k) * (k + 1)) * z, HYP1F1_TERMS)


def whittaker_m(k: float, m: float, z: float) -> float:
    """
    Whittaker function M_{k,m}(z) = e^{-z/2} z^{m+1/2} ₁F₁(m - k + 1/2; 2m + 1; z).

    Real-valued for z >= 0 only; negative z returns NaN.
    """
    k, m, z = float(k), float(m), float(z)
    if not z >= 0.0:
        return math.nan
    return math.exp(-0.5 * z) * z ** (m + 0.5) * hyp1f1(m - k + 0.5, 2.0 * m + 1.0, z)
