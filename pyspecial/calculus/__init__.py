"""
Calculus primitives.

Generic, function-agnostic building blocks used by the special functions
and by the distribution layer that sits on top of them.

Public API:
    derivative(f, x)                       - finite-difference derivative
    newton_raphson(guess, f)               - Newton-Raphson root
    bisect(f, lower, upper)                - bracketing bisection
    summation(start, limit, f)             - sum over unit steps
    product(start, limit, f)               - product over unit steps
    integrate_*_riemann(f, lo, hi, n)      - left/right/midpoint Riemann sums
    integrate_trapezoid(f, lo, hi, n)      - composite trapezoid
    integrate_simpson(f, lo, hi, n)        - composite Simpson 1/3
    integrate_boole(f, lo, hi)             - Boole's rule, one panel
    integrate_adaptive(f, lo, hi, tol)     - adaptive Simpson
    definite_integral(f, lo, hi)           - n = 100000 Simpson -> Outcome
"""

from pyspecial.calculus._derivative import derivative
from pyspecial.calculus.roots import newton_raphson, newton_raphson_outcome, bisect
from pyspecial.calculus.series import summation, product
from pyspecial.calculus.quadrature import (
    integrate_left_riemann,
    integrate_right_riemann,
    integrate_midpoint_riemann,
    integrate_trapezoid,
    integrate_simpson,
    integrate_boole,
    definite_integral,
)
from pyspecial.calculus._adaptive import integrate_adaptive, integrate_adaptive_outcome

__all__ = [
    "derivative",
    "newton_raphson",
    "newton_raphson_outcome",
    "bisect",
    "summation",
    "product",
    "integrate_left_riemann",
    "integrate_right_riemann",
    "integrate_midpoint_riemann",
    "integrate_trapezoid",
    "integrate_simpson",
    "integrate_boole",
    "integrate_adaptive",
    "integrate_adaptive_outcome",
    "definite_integral",
]
