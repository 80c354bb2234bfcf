"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def unit_points(rng):
    """Points strictly inside (0, 1), away from the endpoints."""
    return rng.uniform(0.02, 0.98, size=12).tolist()


@pytest.fixture
def shape_pairs():
    """(a, b) shape parameters covering symmetric, skewed and small cases."""
    return [(0.5, 0.5), (1.0, 1.0), (2.0, 3.0), (5.0, 1.5), (0.8, 7.0), (10.0, 10.0)]
