"""
Special functions.

Public API:
    gamma, ln_gamma, stirling                      - Lanczos Gamma
    lower_incomplete_gamma, upper_incomplete_gamma
    regularized_gamma_p, regularized_gamma_q       - incomplete Gamma
    beta, ln_beta, incomplete_beta
    regularized_incomplete_beta                    - I_x(a, b)
    inverse_regularized_incomplete_beta            - inverse of I_x in x
    erf, erfc, inverse_erf                         - error function
    digamma, polygamma
    factorial, permutation, combination
    pochhammer, falling_factorial                  - counting functions
    hyp2f1, hyp1f1, whittaker_m                    - hypergeometric series

Functions that can fail mathematically also come as *_outcome twins that
return an Outcome instead of a sentinel float.
"""

from pyspecial.special.gamma import (
    gamma,
    ln_gamma,
    stirling,
    lower_incomplete_gamma,
    upper_incomplete_gamma,
    regularized_gamma_p,
    regularized_gamma_p_outcome,
    regularized_gamma_q,
    regularized_gamma_q_outcome,
)
from pyspecial.special.beta import (
    beta,
    ln_beta,
    incomplete_beta,
    regularized_incomplete_beta,
    regularized_incomplete_beta_outcome,
    inverse_regularized_incomplete_beta,
    inverse_regularized_incomplete_beta_outcome,
)
from pyspecial.special.error import erf, erfc, inverse_erf, inverse_erf_outcome
from pyspecial.special.polygamma import digamma, polygamma, polygamma_outcome
from pyspecial.special.probability import (
    factorial,
    permutation,
    combination,
    pochhammer,
    falling_factorial,
)
from pyspecial.special.hypergeometric import hyp2f1, hyp1f1, whittaker_m

__all__ = [
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
