"""
Pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def standard_normal():
    """Standard normal parameters."""
    return {"mean": 0.0, "std_dev": 1.0}


@pytest.fixture
def shifted_normal():
    """Normal with mean 1 and standard deviation 2."""
    return {"mean": 1.0, "std_dev": 2.0}


@pytest.fixture
def table_inputs():
    """Evaluation points used by the published reference tables."""
    return [-3.0, -2.0, -1.0, 0.0, 1.0, 2.0, 3.0]


@pytest.fixture
def table_probabilities():
    """Probabilities used by the published quantile tables."""
    return [0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]


@pytest.fixture
def degrees_of_freedom():
    """Degrees of freedom spanning the heavy-tailed, integer and near-normal regimes."""
    return [0.3, 0.75, 1.0, 1.5, 2.0, 2.5, 3.0, 4.5, 7.0, 30.0, 150.0, 1e4, 1e6]


@pytest.fixture
def interior_probabilities():
    """Probabilities strictly inside (0, 1), tails included."""
    return [1e-12, 1e-6, 0.001, 0.025, 0.1, 0.3, 0.49, 0.51, 0.7, 0.9, 0.975, 0.999, 1 - 1e-6]
