"""
Exception hierarchy for PySpecial.

All exceptions inherit from PySpecialError to allow catching any
library-specific error. Warnings issued by the library use
ConvergenceWarning so callers can filter them as a group.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Mathematical failures travel in an Outcome; exceptions are raised
      for invalid calls, or when a caller asks to unwrap a failed Outcome
"""


class PySpecialError(Exception):
    """Base exception for all PySpecial errors."""
    pass


class ValidationError(PySpecialError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (a non-callable
    integrand, a non-integer interval count, an odd Simpson subdivision).
    """
    pass


class DomainError(ValidationError):
    """
    Argument lies outside the mathematical domain of a function.

    The plain float functions signal this with a sentinel (+inf or NaN);
    this exception is raised when the corresponding Outcome is unwrapped.

    Attributes:
        argument: Name of the offending argument
        value: The value that was supplied
        domain: Human-readable description of the valid domain
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        value: float | None = None,
        domain: str | None = None,
    ):
        super().__init__(message)
        self.argument = argument
        self.value = value
        self.domain = domain


class NumericalError(PySpecialError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivergenceError(NumericalError):
    """
    An integral or series produced an infinite or NaN accumulated sum.

    Attributes:
        lower: Lower integration bound, if applicable
        upper: Upper integration bound, if applicable
    """

    def __init__(
        self,
        message: str,
        lower: float | None = None,
        upper: float | None = None,
    ):
        super().__init__(message)
        self.lower = lower
        self.upper = upper


class ConvergenceError(PySpecialError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative method (Newton-Raphson, Lentz continued
    fraction, adaptive quadrature, polygamma series) exhausted its budget
    and the caller unwrapped the resulting Outcome.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final step size or residual
        reason: Why convergence failed (e.g., 'max_iterations', 'zero_derivative')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold


class ConvergenceWarning(UserWarning):
    """A result was returned on a best-effort basis after hitting a budget."""
    pass
