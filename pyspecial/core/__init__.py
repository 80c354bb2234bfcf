"""
Core infrastructure for PySpecial.

This module provides shared abstractions and utilities used by the
calculus and special-function subpackages.

Key components:
    protocols: ScalarFunction protocol
    outcome: Generic Outcome[T] envelope and Status
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Iteration budgets, tolerance tiers, precision helpers
"""

from pyspecial.core.protocols import ScalarFunction
from pyspecial.core.outcome import Outcome, Status
from pyspecial.core.exceptions import (
    PySpecialError,
    ValidationError,
    DomainError,
    NumericalError,
    DivergenceError,
    ConvergenceError,
    ConvergenceWarning,
)

__all__ = [
    # Protocols
    "ScalarFunction",
    # Outcome
    "Outcome",
    "Status",
    # Exceptions
    "PySpecialError",
    "ValidationError",
    "DomainError",
    "NumericalError",
    "DivergenceError",
    "ConvergenceError",
    "ConvergenceWarning",
]
