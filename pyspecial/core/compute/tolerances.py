"""
Iteration budgets, epsilons and tolerance tiers.

The budgets below bound how long any computation may run. They are module
constants rather than configuration files; polygamma_outcome() and
integrate_adaptive_outcome() accept keyword overrides for theirs.

The tolerance tiers describe how closely each algorithm family is expected
to match a double-precision reference (SciPy). They are used by the test
suite and by select_tolerance().
"""

from dataclasses import dataclass


# ── Iteration budgets ────────────────────────────────────────────────────

# Newton-Raphson iterations before returning the best-effort iterate
NEWTON_MAX_ITER = 200

# Bisection halvings (more than enough to reach float64 resolution on [0, 1])
BISECTION_MAX_ITER = 200

# Continued-fraction terms (Lentz) before declaring non-convergence
CONTINUED_FRACTION_MAX_TERMS = 200

# Maclaurin terms in erf and in the incomplete-gamma power series
MACLAURIN_TERMS = 99

# Terms of the incomplete gamma power series (x < s + 1)
INCOMPLETE_GAMMA_MAX_TERMS = 1000

# Hard cap on polygamma series terms
POLYGAMMA_MAX_TERMS = 99999

# Gauss hypergeometric series terms
HYP2F1_TERMS = 70

# Kummer confluent hypergeometric series terms
HYP1F1_TERMS = 99

# Subintervals of the fixed composite-Simpson definite integral
DEFINITE_INTEGRAL_INTERVALS = 100000

# Deepest bisection level of adaptive quadrature
ADAPTIVE_MAX_DEPTH = 64


# ── Epsilons ─────────────────────────────────────────────────────────────

# Finite-difference step shared by the root finder and digamma
DERIVATIVE_STEP = 1e-7

# Newton-Raphson stops below this |f| or |f'|
NEWTON_EPSILON = 1e-15

# Bisection bracket width at which the search stops
BISECTION_XTOL = 1e-15

# Floor keeping the Lentz running factors away from zero
LENTZ_TINY = 1e-15

# Incomplete Beta fraction stops when |1 - c*d| falls below this
BETA_CF_STOP = 1e-8

# Incomplete gamma fraction and series stop below this relative change
GAMMA_SERIES_EPSILON = 1e-15

# Floor for the incomplete gamma fraction, whose leading term is zero
GAMMA_CF_TINY = 1e-300

# Snap window in grid units (1e-6 of the sixth decimal)
SNAP_TOLERANCE = 1e-6

# Decimal places of the snap grid
SNAP_DECIMALS = 6

# Relative error bound of the g=5, n=7 Lanczos table
LANCZOS_RTOL = 1e-9

# Relative term size at which the polygamma series stops
POLYGAMMA_TOLERANCE = 1e-10

# Inverse Beta bisects first when the target probability is below this
INVERSE_BETA_LOWER_TAIL = 0.1

# |z| at which erf switches from the Maclaurin series to the continued fraction
ERF_SERIES_CUTOFF = 3.0


# ── Tolerance tiers ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer arithmetic and closed-form rules: exact up to rounding
EXACT = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='exact',
    description='Exact products and closed-form rules',
)

# Lanczos g=5, n=7: relative error below 2e-10
LANCZOS = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='lanczos',
    description='Lanczos Gamma and everything built from ratios of it',
)

# Continued fractions stopped at |1 - c*d| < 1e-8; the neglected tail
# of slowly converging fractions adds up to a few times that
CONTINUED_FRACTION = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='continued_fraction',
    description='Lentz continued fractions (incomplete Beta)',
)

# Truncated power series (erf, incomplete gamma, hypergeometric)
SERIES = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='series',
    description='Truncated power series',
)

# Finite differences with h = 1e-7
FINITE_DIFFERENCE = ToleranceTier(
    rtol=1e-6,
    atol=1e-7,
    name='finite_difference',
    description='Finite-difference derivatives (digamma)',
)

# Composite and adaptive quadrature on smooth integrands
QUADRATURE = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='quadrature',
    description='Composite Simpson and adaptive quadrature',
)

_TIERS = {
    tier.name: tier
    for tier in (EXACT, LANCZOS, CONTINUED_FRACTION, SERIES, FINITE_DIFFERENCE, QUADRATURE)
}


def select_tolerance(family: str) -> ToleranceTier:
    """Select the tolerance tier for an algorithm family."""
    try:
        return _TIERS[family]
    except KeyError:
        raise KeyError(
            f"Unknown algorithm family: {family!r}. "
            f"Expected one of {sorted(_TIERS)}"
        ) from None
