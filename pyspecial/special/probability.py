"""
Counting functions used by the discrete distributions.

Integral, non-negative arguments are counted exactly with integer
arithmetic and rounded once to float; anything else goes through the
Gamma function.
"""

from __future__ import annotations

import math

from pyspecial.special.gamma import _is_pole, gamma


def _is_count(value: float) -> bool:
    return value >= 0.0 and value == math.floor(value) and math.isfinite(value)


def _to_float(exact: int) -> float:
    try:
        return float(exact)
    except OverflowError:
        return math.inf


def factorial(n: float) -> float:
    """
    n! for integral n >= 0, Γ(n + 1) otherwise.

    Examples
    --------
    >>> factorial(5)
    120.0
    >>> factorial(0.5)      # Γ(1.5) = sqrt(pi) / 2
    0.886226925...
    """
    n = float(n)
    if _is_count(n):
        return _to_float(math.factorial(int(n)))
    return gamma(n + 1.0)


def permutation(n: float, r: float) -> float:
    """
    Ordered selections of r items from n: n! / (n - r)!.

    Returns 0 when r > n.
    """
    n, r = float(n), float(r)
    if r > n:
        return 0.0
    if _is_count(n) and _is_count(r):
        return _to_float(math.perm(int(n), int(r)))
    return factorial(n) / factorial(n - r)


def combination(n: float, r: float) -> float:
    """
    Unordered selections of r items from n: n! / ((n - r)! r!).

    Returns 0 when r > n.

    Examples
    --------
    >>> combination(5, 2)
    10.0
    """
    n, r = float(n), float(r)
    if r > n:
        return 0.0
    if _is_count(n) and _is_count(r):
        return _to_float(math.comb(int(n), int(r)))
    return factorial(n) / (factorial(n - r) * factorial(r))


def _pole_ratio(numerator: float, denominator: float) -> float:
    """
    Limit of Γ(-m + ε) / Γ(-k + ε) as ε -> 0, i.e. (-1)^(m-k) k! / m!.

    Both arguments are non-positive integers -m and -k.
    """
    m, k = -int(numerator), -int(denominator)
    sign = -1.0 if (m - k) % 2 else 1.0
    if k >= m:
        return sign * _to_float(math.perm(k, k - m))
    return sign * (1 / math.perm(m, m - k))


def _gamma_ratio(numerator: float, denominator: float) -> float:
    if _is_pole(denominator):
        if _is_pole(numerator):
            return _pole_ratio(numerator, denominator)
        # 1/Γ vanishes at the poles of Γ
        return 0.0
    return gamma(numerator) / gamma(denominator)


def pochhammer(x: float, n: float) -> float:
    """Rising factorial (x)_n = Γ(x + n) / Γ(x)."""
    x, n = float(x), float(n)
    return _gamma_ratio(x + n, x)


def falling_factorial(x: float, n: float) -> float:
    """
    Falling factorial x (x - 1) ... (x - n + 1) = Γ(x + 1) / Γ(x - n + 1).

    Examples
    --------
    >>> falling_factorial(5.0, 2.0)
    20.0
    """
    x, n = float(x), float(n)
    return _gamma_ratio(x + 1.0, x - n + 1.0)
