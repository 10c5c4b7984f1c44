"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a22():
    """A = [[1, 2], [3, 4]]."""
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b22():
    """B = [[5, 6], [7, 8]]."""
    return Matrix.from_array([[5.0, 6.0], [7.0, 8.0]])


@pytest.fixture
def m33():
    """3x3 matrix with values 1..9 in row-major order."""
    return Matrix.from_array(np.arange(1.0, 10.0).reshape(3, 3))


@pytest.fixture
def random_int_matrix(rng):
    """
    Factory for random matrices with small integer values.

    Integer-valued float64 entries keep sums and products exact, so
    algebraic identities can be checked with exact equality.
    """
    def make(rows, columns):
        return Matrix.from_array(rng.integers(-9, 10, size=(rows, columns)))
    return make
