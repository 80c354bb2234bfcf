"""
Tests for the counting functions.

Validates:
    - Exact integer results for factorial, permutation, combination
    - Gamma continuation for non-integral arguments
    - Zero results for r > n and at the poles of the denominator
"""

import math

import pytest
import scipy.special as sc
from numpy.testing import assert_allclose

from pyspecial.core.compute.tolerances import LANCZOS
from pyspecial.special.probability import (
    combination,
    factorial,
    falling_factorial,
    permutation,
    pochhammer,
)


class TestFactorial:

    @pytest.mark.parametrize("n", range(16))
    def test_exact_integers(self, n):
        assert factorial(n) == float(math.factorial(n))

    def test_accepts_integral_floats(self):
        assert factorial(10.0) == 3628800.0

    def test_half_integer(self):
        assert_allclose(factorial(0.5), math.sqrt(math.pi) / 2.0, rtol=LANCZOS.rtol)

    def test_negative_integer_is_pole(self):
        assert math.isnan(factorial(-1))

    def test_overflow(self):
        assert factorial(171) == math.inf
        assert factorial(170) < math.inf


class TestPermutationCombination:

    def test_small_values(self):
        assert permutation(5, 2) == 20.0
        assert combination(5, 2) == 10.0

    def test_r_exceeds_n(self):
        assert permutation(3, 5) == 0.0
        assert combination(3, 5) == 0.0

    def test_edges(self):
        assert combination(7, 0) == 1.0
        assert combination(7, 7) == 1.0
        assert permutation(7, 0) == 1.0

    def test_large_exact(self):
        # exact before rounding, unlike a ratio of huge factorials
        assert combination(60, 30) == float(math.comb(60, 30))
        assert permutation(30, 12) == float(math.perm(30, 12))

    def test_symmetry(self):
        assert combination(20, 6) == combination(20, 14)

    def test_non_integral(self):
        assert_allclose(combination(5.5, 2), 12.375, rtol=LANCZOS.rtol)
        assert_allclose(permutation(5.5, 2), 24.75, rtol=LANCZOS.rtol)

    def test_against_scipy(self):
        assert_allclose(combination(12.3, 4.1), sc.binom(12.3, 4.1), rtol=LANCZOS.rtol)


class TestPochhammer:

    def test_integer(self):
        assert pochhammer(3, 4) == 360.0

    def test_zero_length(self):
        assert pochhammer(2.7, 0) == 1.0

    @pytest.mark.parametrize("x, n", [(2.5, 3.2), (0.5, 4.0), (7.1, 0.3), (-1.5, 2.0)])
    def test_against_scipy(self, x, n):
        assert_allclose(pochhammer(x, n), sc.poch(x, n), rtol=LANCZOS.rtol)

    def test_denominator_pole(self):
        assert pochhammer(-3, 5) == 0.0

    def test_both_at_poles(self):
        # (-3)(-2)
        assert pochhammer(-3, 2) == 6.0
        assert pochhammer(-4, 3) == -24.0
        assert pochhammer(-5, 4) == 120.0

    def test_both_at_poles_negative_length(self):
        # (x)_{-n} = 1 / ((x - 1)(x - 2)...(x - n))
        assert_allclose(pochhammer(-2, -1), -1.0 / 3.0, rtol=LANCZOS.rtol)
        assert_allclose(pochhammer(-1, -3), -1.0 / 24.0, rtol=LANCZOS.rtol)


class TestFallingFactorial:

    def test_integer(self):
        assert falling_factorial(5, 2) == 20.0

    def test_runs_past_zero(self):
        assert falling_factorial(5, 6) == 0.0

    def test_negative_integer_argument(self):
        # (-3)(-4)
        assert falling_factorial(-3, 2) == 12.0

    def test_matches_permutation(self):
        assert_allclose(falling_factorial(9.0, 4.0), permutation(9, 4), rtol=LANCZOS.rtol)

    def test_relation_to_pochhammer(self):
        # x^(n) falling = (x - n + 1)_n rising
        x, n = 6.4, 2.5
        assert_allclose(falling_factorial(x, n), pochhammer(x - n + 1.0, n), rtol=LANCZOS.rtol)
