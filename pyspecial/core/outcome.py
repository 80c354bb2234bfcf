"""
Tagged result container for PySpecial computations.

Every algorithm that can fail mathematically (domain violation, divergence,
non-convergence) reports through an Outcome instead of overloading NaN and
infinity. The plain float API is a thin layer on top: it returns
``outcome.value``, which keeps the historical sentinel for failures.

Design decisions:
    - Generic over the value type T (always float today)
    - Status enum distinguishes the failure taxonomy
    - info dict for flexible metadata (residual, bracket, reflected, ...)
    - Immutable (frozen=True) so outcomes can be shared freely
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

from pyspecial.core.exceptions import (
    ConvergenceError,
    DivergenceError,
    DomainError,
)

T = TypeVar('T')  # Value payload type


class Status(enum.Enum):
    """Classification of how a computation ended."""
    OK = 'ok'
    DOMAIN_ERROR = 'domain_error'
    DIVERGENT = 'divergent'
    NOT_CONVERGED = 'not_converged'


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Immutable outcome of a scalar computation.

    Type Parameters:
        T: The value type

    Attributes:
        value: Computed value. On failure this is the sentinel the plain
            float API returns (NaN, +inf, or the best-effort iterate).
        status: How the computation ended
        iterations: Iterations, terms or panels consumed (0 if not iterative)
        message: Human-readable explanation for non-OK outcomes
        info: Structured metadata (residual, threshold, reflected, ...)
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Outcome.success(1.4142135623730951, iterations=5)
        >>> Outcome.domain_error(float('inf'), "x must lie in [0, 1]",
        ...                      argument='x', received=1.5, domain='[0, 1]')
    """
    value: T
    status: Status = Status.OK
    iterations: int = 0
    message: str = ''
    info: dict[str, Any] = field(default_factory=dict)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls, value: T, iterations: int = 0, **info: Any) -> Outcome[T]:
        return cls(value=value, status=Status.OK, iterations=iterations, info=info)

    @classmethod
    def domain_error(
        cls,
        value: T,
        message: str,
        *,
        argument: str,
        received: float,
        domain: str,
        **info: Any,
    ) -> Outcome[T]:
        info.update(argument=argument, received=received, domain=domain)
        return cls(value=value, status=Status.DOMAIN_ERROR, message=message, info=info)

    @classmethod
    def divergent(cls, value: T, message: str, iterations: int = 0, **info: Any) -> Outcome[T]:
        return cls(
            value=value, status=Status.DIVERGENT, iterations=iterations,
            message=message, info=info,
        )

    @classmethod
    def not_converged(
        cls,
        value: T,
        message: str,
        iterations: int,
        warnings: tuple[str, ...] = (),
        **info: Any,
    ) -> Outcome[T]:
        return cls(
            value=value, status=Status.NOT_CONVERGED, iterations=iterations,
            message=message, info=info, warnings=tuple(warnings),
        )

    @property
    def ok(self) -> bool:
        """True when the computation finished normally."""
        return self.status is Status.OK

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    def unwrap(self) -> T:
        """
        Return the value, or raise the exception matching the failure.

        Raises:
            DomainError: status is DOMAIN_ERROR
            DivergenceError: status is DIVERGENT
            ConvergenceError: status is NOT_CONVERGED
        """
        if self.status is Status.OK:
            return self.value
        if self.status is Status.DOMAIN_ERROR:
            raise DomainError(
                self.message,
                argument=self.info.get('argument'),
                value=self.info.get('received'),
                domain=self.info.get('domain'),
            )
        if self.status is Status.DIVERGENT:
            raise DivergenceError(
                self.message,
                lower=self.info.get('lower'),
                upper=self.info.get('upper'),
            )
        raise ConvergenceError(
            self.message,
            iterations=self.iterations,
            final_change=self.info.get('final_change'),
            reason=self.info.get('reason'),
            threshold=self.info.get('threshold'),
        )

    def with_value(self, value: T, **info: Any) -> Outcome[T]:
        """Copy of this outcome carrying a transformed value."""
        merged = dict(self.info)
        merged.update(info)
        return Outcome(
            value=value,
            status=self.status,
            iterations=self.iterations,
            message=self.message,
            info=merged,
            warnings=self.warnings,
        )
