"""
Core protocols for PySpecial.

Integrators, the root finder, the finite-difference derivative and the
series helpers all accept "a pure mapping from one float to one float".
We use Protocol (structural typing) rather than ABC (nominal typing), so
plain functions, lambdas, functools.partial objects and instances with a
__call__ method all qualify without registration.

Design Principles:
    - Minimal contract: one float in, one float out
    - Callables must be reentrant and must not mutate external state
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScalarFunction(Protocol):
    """
    A pure scalar-to-scalar mapping.

    Implementations are evaluated many times per call (100000 times for
    definite_integral), so they should be cheap and side-effect free.
    """

    def __call__(self, x: float, /) -> float:
        """Evaluate the mapping at x."""
        ...
