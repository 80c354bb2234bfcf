"""
Tests for summation() and product() over unit steps.
"""

import math

import pytest
from numpy.testing import assert_allclose

from pyspecial.calculus import product, summation
from pyspecial.core.exceptions import ValidationError


class TestSummation:
    """Inclusive sums f(start) + f(start + 1) + ... + f(limit)."""

    def test_constant(self):
        assert summation(0, 9, lambda k: 3.0) == 30.0

    def test_squares(self):
        assert summation(1, 4, lambda k: k * k) == 30.0

    def test_limit_inclusive(self):
        assert summation(1, 1, lambda k: k) == 1.0

    def test_empty_range(self):
        assert summation(5, 4, lambda k: k) == 0.0

    def test_fractional_bounds_round(self):
        # k = 1, 2, 3
        assert summation(0.5, 3.4, lambda k: k) == 6.0

    def test_halves_round_away_from_zero(self):
        # 2.5 -> 3 and -0.5 -> -1
        assert summation(-0.5, 2.5, lambda k: k) == 5.0

    def test_terms_sampled_at_integers(self):
        seen = []
        summation(0.6, 2.2, lambda k: seen.append(k) or 0.0)
        assert seen == [1.0, 2.0]

    def test_exponential_series(self):
        total = summation(0, 20, lambda k: 1.0 / math.factorial(int(k)))
        assert_allclose(total, math.e, rtol=1e-15)

    def test_cancellation_is_exact(self):
        terms = [1e16, 1.0, -1e16]
        assert summation(0, 2, lambda k: terms[int(k)]) == 1.0

    def test_not_callable_raises(self):
        with pytest.raises(ValidationError):
            summation(0, 1, None)


class TestProduct:

    def test_constant(self):
        assert product(2, 7, lambda k: 3.0) == 729.0

    def test_squares(self):
        assert product(3, 7, lambda k: k ** 2) == 6350400.0

    def test_factorial(self):
        assert product(1, 5, lambda k: k) == 120.0

    def test_empty_range(self):
        assert product(1, 0, lambda k: k) == 1.0

    def test_bad_bounds_raise(self):
        with pytest.raises(ValidationError):
            product("1", 5, lambda k: k)

    def test_fractional_bounds_round(self):
        # k = 2, 3
        assert product(1.7, 3.2, lambda k: k) == 6.0

    def test_infinite_bound_raises(self):
        with pytest.raises(ValidationError, match="limit"):
            product(1, math.inf, lambda k: k)
