"""
Tests for the shared numeric settings in core/compute.

Validates:
    - Tolerance tiers are ordered and looked up by family name
    - Iteration budgets carry the documented values
    - snap_to_grid / snap_to_integer recover exact values and leave
      everything else untouched
"""

import math

import pytest

from pyspecial.core.compute import (
    EPSILON_64,
    ToleranceTier,
    select_tolerance,
    snap_to_grid,
    snap_to_integer,
)
from pyspecial.core.compute import tolerances


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestToleranceTiers:

    @pytest.mark.parametrize("family", [
        "exact", "lanczos", "continued_fraction", "series",
        "finite_difference", "quadrature",
    ])
    def test_lookup(self, family):
        tier = select_tolerance(family)
        assert isinstance(tier, ToleranceTier)
        assert tier.name == family
        assert 0.0 < tier.atol <= tier.rtol

    def test_unknown_family_raises(self):
        with pytest.raises(KeyError, match="Unknown algorithm family"):
            select_tolerance("monte_carlo")

    def test_exact_is_strictest(self):
        exact = select_tolerance("exact")
        for family in ("lanczos", "continued_fraction", "finite_difference"):
            assert select_tolerance(family).rtol > exact.rtol

    def test_tiers_are_frozen(self):
        with pytest.raises(AttributeError):
            tolerances.EXACT.rtol = 1.0


class TestBudgets:
    """Budgets that other modules and callers rely on."""

    def test_values(self):
        assert tolerances.NEWTON_MAX_ITER == 200
        assert tolerances.CONTINUED_FRACTION_MAX_TERMS == 200
        assert tolerances.MACLAURIN_TERMS == 99
        assert tolerances.POLYGAMMA_MAX_TERMS == 99999
        assert tolerances.DEFINITE_INTEGRAL_INTERVALS == 100000
        assert tolerances.ADAPTIVE_MAX_DEPTH == 64
        assert tolerances.DERIVATIVE_STEP == 1e-7

    def test_definite_integral_count_is_even(self):
        assert tolerances.DEFINITE_INTEGRAL_INTERVALS % 2 == 0


# ═══════════════════════════════════════════════════════════════════════
# Precision helpers
# ═══════════════════════════════════════════════════════════════════════


class TestEpsilon:

    def test_matches_float_info(self):
        import sys
        assert EPSILON_64 == sys.float_info.epsilon


class TestSnapToGrid:

    def test_snaps_up(self):
        assert snap_to_grid(71.99999999999997) == 72.0

    def test_snaps_down(self):
        assert snap_to_grid(0.5000000000000001) == 0.5

    def test_snaps_to_sixth_decimal(self):
        assert snap_to_grid(0.12345600000000004) == 0.123456

    def test_leaves_off_grid_values(self):
        assert snap_to_grid(0.333333333) == 0.333333333
        assert snap_to_grid(math.pi) == math.pi

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinite_passes_through(self, value):
        assert snap_to_grid(value) == value

    def test_nan_passes_through(self):
        assert math.isnan(snap_to_grid(math.nan))

    def test_custom_grid(self):
        assert snap_to_grid(1.0499999999, decimals=2, tolerance=1e-6) == 1.05


class TestSnapToInteger:

    def test_relative_window(self):
        assert snap_to_integer(119.99999999, 1e-9) == 120.0
        assert snap_to_integer(3628800.0004, 1e-9) == 3628800.0

    def test_outside_window_unchanged(self):
        assert snap_to_integer(0.5, 1e-9) == 0.5
        assert snap_to_integer(2.0001, 1e-9) == 2.0001

    def test_non_finite_passes_through(self):
        assert snap_to_integer(math.inf, 1e-9) == math.inf
