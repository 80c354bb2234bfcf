"""
Scalar root finding.

newton_raphson() is the generic solver reused by every inverse-function
problem in the library (inverse regularized incomplete Beta today). It
needs only the function: the derivative at each iterate comes from a
finite difference with h = 1e-7.

bisect() is the bracketing fallback used to tighten a starting guess.
"""

from __future__ import annotations

import math

from pyspecial.core.outcome import Outcome
from pyspecial.core.protocols import ScalarFunction
from pyspecial.core.validation import check_callable, check_positive_int
from pyspecial.core.compute.tolerances import (
    BISECTION_MAX_ITER,
    BISECTION_XTOL,
    NEWTON_EPSILON,
    NEWTON_MAX_ITER,
)
from pyspecial.calculus._derivative import derivative


def newton_raphson_outcome(
    guess: float,
    f: ScalarFunction,
    *,
    max_iter: int = NEWTON_MAX_ITER,
    tol: float = NEWTON_EPSILON,
) -> Outcome[float]:
    """
    Newton-Raphson iteration with a finite-difference derivative.

    Algorithm (per iteration, at most max_iter):
        value = f(guess), slope = f'(guess)
        stop if |slope| < tol or |value| < tol
        guess <- guess - value / slope

    The iteration also stops, without taking the step, when the slope is
    not finite (f undefined next to the iterate).

    Parameters
    ----------
    guess : float
        Starting point.
    f : ScalarFunction
        Function whose root is wanted.
    max_iter : int
        Iteration budget. Default 200.
    tol : float
        Threshold for both |f| and |f'|. Default 1e-15.

    Returns
    -------
    Outcome[float]
        OK when |f(root)| < tol. NOT_CONVERGED when the budget ran out, the
        slope vanished with a non-zero residual, or the slope was not
        finite; the value is then the last iterate reached.
    """
    check_callable(f, "f")
    max_iter = check_positive_int(max_iter, "max_iter")

    x = float(guess)
    value = math.nan
    for iteration in range(max_iter):
        value = f(x)
        if abs(value) < tol:
            return Outcome.success(x, iterations=iteration, residual=value)

        slope = derivative(f, x)
        if not math.isfinite(slope):
            return Outcome.not_converged(
                x,
                f"derivative is not finite at x={x!r}",
                iterations=iteration,
                reason='non_finite_derivative',
                final_change=value,
                threshold=tol,
                residual=value,
            )
        if abs(slope) < tol:
            return Outcome.not_converged(
                x,
                f"derivative vanished at x={x!r} with residual {value!r}",
                iterations=iteration,
                reason='zero_derivative',
                final_change=value,
                threshold=tol,
                residual=value,
            )

        x -= value / slope

    return Outcome.not_converged(
        x,
        f"Newton-Raphson did not converge in {max_iter} iterations",
        iterations=max_iter,
        reason='max_iterations',
        final_change=value,
        threshold=tol,
        residual=value,
    )


def newton_raphson(guess: float, f: ScalarFunction) -> float:
    """
    Approximate a root of f starting from guess.

    Never raises on non-convergence: the caller receives whatever iterate
    was reached. Use newton_raphson_outcome() to find out whether it
    converged.

    Examples:
        >>> newton_raphson(1.5, lambda x: x * x - 2.0)
        1.4142135623730951
    """
    return newton_raphson_outcome(guess, f).value


def bisect(
    f: ScalarFunction,
    lower: float,
    upper: float,
    *,
    xtol: float = BISECTION_XTOL,
    max_iter: int = BISECTION_MAX_ITER,
) -> Outcome[float]:
    """
    Bisection on [lower, upper] for an increasing or decreasing f.

    At each step the half whose endpoints keep opposite signs of f is kept,
    judged by the sign of f at the midpoint relative to f(lower). The
    bracket is not required to contain a sign change: for a monotone f
    whose root lies outside it, the search converges to the nearer end.

    Returns
    -------
    Outcome[float]
        Midpoint of the final bracket. NOT_CONVERGED if max_iter halvings
        left the bracket wider than xtol.
    """
    check_callable(f, "f")
    low, high = float(lower), float(upper)
    lower_value = f(low)
    if lower_value == 0.0:
        return Outcome.success(low, iterations=0, bracket=(low, low))
    lower_sign = math.copysign(1.0, lower_value)

    guess = 0.5 * (low + high)
    for iteration in range(max_iter):
        if high - low <= xtol:
            return Outcome.success(guess, iterations=iteration, bracket=(low, high))
        if math.copysign(1.0, f(guess)) == lower_sign:
            low = guess
        else:
            high = guess
        new_guess = 0.5 * (low + high)
        if new_guess == guess:
            # The bracket cannot shrink any further in float64
            return Outcome.success(guess, iterations=iteration + 1, bracket=(low, high))
        guess = new_guess

    return Outcome.not_converged(
        guess,
        f"bisection bracket still {high - low!r} wide after {max_iter} halvings",
        iterations=max_iter,
        reason='max_iterations',
        final_change=high - low,
        threshold=xtol,
        bracket=(low, high),
    )
