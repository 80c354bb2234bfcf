"""
Tests for digamma and polygamma.

Validates:
    - digamma(1) = -γ (Euler-Mascheroni) and agreement with scipy
    - polygamma orders -1, 0 and n >= 1 against closed forms and scipy
    - Early stopping with the Euler-Maclaurin tail
    - Poles, invalid orders, term cap warning
"""

import math

import pytest
import scipy.special as sc
from numpy.testing import assert_allclose

from pyspecial.core.compute.tolerances import FINITE_DIFFERENCE
from pyspecial.core.exceptions import ConvergenceWarning, ValidationError
from pyspecial.core.outcome import Status
from pyspecial.special.gamma import ln_gamma
from pyspecial.special.polygamma import digamma, polygamma, polygamma_outcome

EULER_GAMMA = 0.5772156649015329


# ═══════════════════════════════════════════════════════════════════════
# digamma
# ═══════════════════════════════════════════════════════════════════════


class TestDigamma:

    def test_one(self):
        assert abs(digamma(1.0) - (-0.5772156649)) < 1e-6

    @pytest.mark.parametrize("z", [0.25, 0.5, 2.0, 5.5, 10.0, 200.0, -0.5, -2.7])
    def test_against_scipy(self, z):
        assert_allclose(digamma(z), sc.digamma(z), rtol=FINITE_DIFFERENCE.rtol, atol=FINITE_DIFFERENCE.atol)

    def test_recurrence(self):
        # ψ(z + 1) = ψ(z) + 1/z
        z = 3.3
        assert_allclose(digamma(z + 1.0), digamma(z) + 1.0 / z, atol=1e-6)

    def test_large_argument_does_not_overflow(self):
        assert_allclose(digamma(500.0), sc.digamma(500.0), rtol=1e-5)

    @pytest.mark.parametrize("z", [0.0, -1.0, -3.0])
    def test_poles(self, z):
        assert math.isnan(digamma(z))


# ═══════════════════════════════════════════════════════════════════════
# polygamma
# ═══════════════════════════════════════════════════════════════════════


class TestPolygamma:

    def test_trigamma_one(self):
        assert_allclose(polygamma(1, 1.0), math.pi ** 2 / 6.0, rtol=1e-9)

    def test_tetragamma_one(self):
        # ψ''(1) = -2 ζ(3)
        assert_allclose(polygamma(2, 1.0), -2.0 * 1.2020569031595942, rtol=1e-9)

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
    @pytest.mark.parametrize("z", [0.5, 1.0, 3.7, 10.0, 42.0])
    def test_against_scipy(self, n, z):
        assert_allclose(polygamma(n, z), sc.polygamma(n, z), rtol=1e-8)

    @pytest.mark.parametrize("z", [-0.5, -1.5, -2.25])
    def test_negative_argument(self, z):
        assert_allclose(polygamma(1, z), sc.polygamma(1, z), rtol=1e-8)

    def test_order_minus_one_is_ln_gamma(self):
        assert polygamma(-1, 4.5) == ln_gamma(4.5)

    @pytest.mark.parametrize("z", [0.0, -3.0])
    def test_order_minus_one_at_pole_matches_ln_gamma(self, z):
        outcome = polygamma_outcome(-1, z)
        assert outcome.ok
        assert outcome.value == ln_gamma(z) == math.inf

    def test_order_zero_is_digamma(self):
        assert polygamma(0, 2.5) == digamma(2.5)
        assert_allclose(polygamma(0, 1.0), -EULER_GAMMA, rtol=1e-6)

    def test_sign_alternates_with_order(self):
        assert polygamma(1, 2.0) > 0.0
        assert polygamma(2, 2.0) < 0.0
        assert polygamma(3, 2.0) > 0.0


class TestPolygammaOutcome:

    def test_stops_early(self):
        outcome = polygamma_outcome(1, 1.0)
        assert outcome.ok
        assert outcome.iterations < 1000
        assert outcome.info["tail"] > 0.0

    def test_tighter_tolerance_sums_more_terms(self):
        loose = polygamma_outcome(1, 1.0, tol=1e-6)
        tight = polygamma_outcome(1, 1.0, tol=1e-14)
        assert tight.iterations > loose.iterations
        assert_allclose(tight.value, math.pi ** 2 / 6.0, rtol=1e-13)

    def test_term_cap_warns(self):
        with pytest.warns(ConvergenceWarning, match="reached 3 terms"):
            outcome = polygamma_outcome(1, 1.0, max_terms=3)
        assert outcome.status is Status.NOT_CONVERGED
        assert outcome.iterations == 3
        assert outcome.info["reason"] == "max_terms"
        # the tail estimate still carries the value most of the way
        assert_allclose(outcome.value, math.pi ** 2 / 6.0, rtol=1e-3)

    @pytest.mark.parametrize("z", [0.0, -2.0])
    def test_pole(self, z):
        outcome = polygamma_outcome(2, z)
        assert outcome.status is Status.DOMAIN_ERROR
        assert math.isnan(outcome.value)
        assert math.isnan(polygamma(2, z))

    @pytest.mark.parametrize("order", [-2, -5])
    def test_order_below_minus_one_raises(self, order):
        with pytest.raises(ValidationError, match="order"):
            polygamma(order, 1.0)

    def test_non_integer_order_raises(self):
        with pytest.raises(ValidationError, match="order"):
            polygamma(1.5, 1.0)
