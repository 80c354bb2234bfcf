"""
Shared compute infrastructure for PySpecial.

IMPORTANT: This is NOT where algorithms live. Those go in calculus/ and
special/. This module contains shared NUMERIC settings.

Submodules:
    tolerances: Iteration budgets, epsilons and tolerance tiers
    precision: Machine epsilon and grid snapping
"""

from pyspecial.core.compute.precision import (
    EPSILON_64,
    snap_to_grid,
    snap_to_integer,
)
from pyspecial.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Precision
    "EPSILON_64",
    "snap_to_grid",
    "snap_to_integer",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
