"""Configuration for tests.

This module provides shared fixtures for the infodisc test suite. All random
data is drawn from seeded generators so that every run sees the same samples.
"""

import numpy as np
import pytest

N_SAMPLES = 100
N_ITER = 50


@pytest.fixture
def label_pairs():
    """Seeded pairs of ternary label vectors (values 0..2, support 4).

    Returns
    -------
    list of tuple of ndarray
        ``N_ITER`` pairs ``(x, y)`` of length ``N_SAMPLES``.
    """
    rng = np.random.RandomState(42)
    return [
        (rng.randint(0, 3, N_SAMPLES), rng.randint(0, 3, N_SAMPLES))
        for _ in range(N_ITER)
    ]


@pytest.fixture
def label_triplets():
    """Seeded triplets of binary label vectors (support 2)."""
    rng = np.random.RandomState(7)
    return [
        tuple(rng.randint(0, 2, N_SAMPLES) for _ in range(3))
        for _ in range(N_ITER)
    ]


@pytest.fixture
def random_joint_xy():
    """Seeded strictly positive 2-D probability arrays of shape (2, 100)."""
    rng = np.random.RandomState(0)
    arrays = []
    for _ in range(N_ITER):
        c_xy = rng.uniform(0.1, 0.9, size=(2, N_SAMPLES))
        arrays.append(c_xy / c_xy.sum())
    return arrays


@pytest.fixture
def correlated_binary():
    """Two perfectly correlated binary variables, 10 samples of each state."""
    x = np.array([0] * 10 + [1] * 10)
    return x, x.copy()
