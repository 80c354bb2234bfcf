"""
Finite-difference derivative shared by the root finder and digamma.
"""

from __future__ import annotations

from typing import Literal

from pyspecial.core.exceptions import ValidationError
from pyspecial.core.protocols import ScalarFunction
from pyspecial.core.compute.tolerances import DERIVATIVE_STEP


def derivative(
    f: ScalarFunction,
    x: float,
    h: float = DERIVATIVE_STEP,
    method: Literal["central", "forward"] = "central",
) -> float:
    """
    Approximate f'(x) with a finite difference.

    Parameters
    ----------
    f : ScalarFunction
        Function to differentiate.
    x : float
        Evaluation point.
    h : float
        Step size. Default 1e-7.
    method : str
        "central" (default): (f(x+h) - f(x-h)) / 2h, error O(h²).
        "forward": (f(x+h) - f(x)) / h, error O(h). Use it when f is not
        defined to the left of x.

    Returns
    -------
    float
        Derivative estimate. May be infinite or NaN when f is.
    """
    if method == "central":
        return (f(x + h) - f(x - h)) / (2.0 * h)
    if method == "forward":
        return (f(x + h) - f(x)) / h
    raise ValidationError(
        f"method must be 'central' or 'forward', got {method!r}"
    )
