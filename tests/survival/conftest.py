"""
Shared fixtures for survival tests.

Both samples draw from the seeded ``rng`` fixture in tests/conftest.py.
"""

import numpy as np
import pytest


@pytest.fixture
def censored_sample(rng):
    """Exponential event times with independent exponential censoring."""
    n = 200
    event_time = rng.exponential(10.0, n)
    censor_time = rng.exponential(15.0, n)
    time = np.minimum(event_time, censor_time)
    status = event_time <= censor_time
    return time, status


@pytest.fixture
def tied_sample(rng):
    """Integer-rounded times so that many observations share a time."""
    n = 150
    time = np.round(rng.exponential(4.0, n))
    status = rng.binomial(1, 0.65, n).astype(bool)
    return time, status
