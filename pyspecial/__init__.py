"""
PySpecial: special functions and numerical calculus for Python.

Scalar, double-precision approximations of the Gamma, Beta, error and
polygamma families, together with the quadrature, differentiation and
root-finding primitives they are built from. A statistical distribution
layer consumes these through the flat API below.

Submodules:
    core: Outcome envelope, exceptions, validation, tolerances
    calculus: Derivatives, roots, series, quadrature
    special: Gamma, Beta, erf, polygamma, counting, hypergeometric
"""

__version__ = "0.1.0"

from pyspecial.core import (
    Outcome,
    Status,
    PySpecialError,
    ValidationError,
    DomainError,
    NumericalError,
    DivergenceError,
    ConvergenceError,
    ConvergenceWarning,
)
from pyspecial.calculus import (
    derivative,
    newton_raphson,
    newton_raphson_outcome,
    bisect,
    summation,
    product,
    integrate_left_riemann,
    integrate_right_riemann,
    integrate_midpoint_riemann,
    integrate_trapezoid,
    integrate_simpson,
    integrate_boole,
    integrate_adaptive,
    integrate_adaptive_outcome,
    definite_integral,
)
from pyspecial.special import (
    gamma,
    ln_gamma,
    stirling,
    lower_incomplete_gamma,
    upper_incomplete_gamma,
    regularized_gamma_p,
    regularized_gamma_p_outcome,
    regularized_gamma_q,
    regularized_gamma_q_outcome,
    beta,
    ln_beta,
    incomplete_beta,
    regularized_incomplete_beta,
    regularized_incomplete_beta_outcome,
    inverse_regularized_incomplete_beta,
    inverse_regularized_incomplete_beta_outcome,
    erf,
    erfc,
    inverse_erf,
    inverse_erf_outcome,
    digamma,
    polygamma,
    polygamma_outcome,
    factorial,
    permutation,
    combination,
    pochhammer,
    falling_factorial,
    hyp2f1,
    hyp1f1,
    whittaker_m,
)
from pyspecial import core, calculus, special

__all__ = [
    "__version__",
    # Submodules
    "core",
    "calculus",
    "special",
    # Outcome and errors
    "Outcome",
    "Status",
    "PySpecialError",
    "ValidationError",
    "DomainError",
    "NumericalError",
    "DivergenceError",
    "ConvergenceError",
    "ConvergenceWarning",
    # Calculus
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
    # Gamma
    "gamma",
    "ln_gamma",
    "stirling",
    "lower_incomplete_gamma",
    "upper_incomplete_gamma",
    "regularized_gamma_p",
    "regularized_gamma_p_outcome",
    "regularized_gamma_q",
    "regularized_gamma_q_outcome",
    # Beta
    "beta",
    "ln_beta",
    "incomplete_beta",
    "regularized_incomplete_beta",
    "regularized_incomplete_beta_outcome",
    "inverse_regularized_incomplete_beta",
    "inverse_regularized_incomplete_beta_outcome",
    # Error function
    "erf",
    "erfc",
    "inverse_erf",
    "inverse_erf_outcome",
    # Polygamma
    "digamma",
    "polygamma",
    "polygamma_outcome",
    # Counting
    "factorial",
    "permutation",
    "combination",
    "pochhammer",
    "falling_factorial",
    # Hypergeometric
    "hyp2f1",
    "hyp1f1",
    "whittaker_m",
]
