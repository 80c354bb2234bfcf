"""
Tests for PySpecial exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PySpecialError)
    - Diagnostic attributes on DomainError, DivergenceError, ConvergenceError
    - Default attribute values (None for optional attributes)
    - ConvergenceWarning is a warning category, not an exception
"""

import warnings

import pytest

from pyspecial.core.exceptions import (
    ConvergenceError,
    ConvergenceWarning,
    DivergenceError,
    DomainError,
    NumericalError,
    PySpecialError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PySpecialError."""

    def test_validation_error_is_pyspecial_error(self):
        with pytest.raises(PySpecialError):
            raise ValidationError("bad input")

    def test_domain_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DomainError("x outside [0, 1]")

    def test_divergence_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DivergenceError("sum is infinite")

    def test_divergence_error_is_pyspecial_error(self):
        with pytest.raises(PySpecialError):
            raise DivergenceError("sum is infinite")

    def test_convergence_error_is_pyspecial_error(self):
        with pytest.raises(PySpecialError):
            raise ConvergenceError("did not converge", iterations=200)

    def test_convergence_error_is_not_numerical_error(self):
        """ConvergenceError inherits from PySpecialError, not NumericalError."""
        err = ConvergenceError("did not converge", iterations=200)
        assert not isinstance(err, NumericalError)

    def test_convergence_warning_is_user_warning(self):
        assert issubclass(ConvergenceWarning, UserWarning)
        assert not issubclass(ConvergenceWarning, PySpecialError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDomainError:
    """DomainError names the argument, the value and the valid domain."""

    def test_all_attributes(self):
        err = DomainError("x must lie in [0, 1]", argument="x", value=1.5, domain="[0, 1]")
        assert str(err) == "x must lie in [0, 1]"
        assert err.argument == "x"
        assert err.value == 1.5
        assert err.domain == "[0, 1]"

    def test_defaults_are_none(self):
        err = DomainError("bad")
        assert err.argument is None
        assert err.value is None
        assert err.domain is None


class TestDivergenceError:

    def test_bounds(self):
        err = DivergenceError("divergent", lower=0.0, upper=1.0)
        assert err.lower == 0.0
        assert err.upper == 1.0

    def test_defaults_are_none(self):
        err = DivergenceError("divergent")
        assert err.lower is None
        assert err.upper is None


class TestConvergenceError:
    """ConvergenceError carries iteration diagnostics."""

    def test_all_attributes(self):
        err = ConvergenceError(
            "Newton-Raphson did not converge",
            iterations=200,
            final_change=1e-9,
            reason="max_iterations",
            threshold=1e-15,
        )
        assert err.iterations == 200
        assert err.final_change == 1e-9
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-15

    def test_optional_defaults(self):
        err = ConvergenceError("no", iterations=3)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None


class TestConvergenceWarning:

    def test_can_be_filtered_as_group(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("ignore", ConvergenceWarning)
            warnings.warn("budget reached", ConvergenceWarning)
        assert caught == []
