"""
Convenience constructors for common matrices.
"""

from __future__ import annotations

import numpy as np

from densematrix.core.precision import DTYPE
from densematrix.core.validation import check_dimension
from densematrix.matrix._matrix import Matrix


def zeros(rows: int, columns: int) -> Matrix:
    """Zero-filled (rows x columns) matrix. Same as Matrix(rows, columns)."""
    return Matrix(rows, columns)


def identity(n: int) -> Matrix:
    """
    (n x n) identity matrix.

    Raises:
        ValidationError: If n is not a non-negative integer
    """
    n = check_dimension(n, 'n')
    return Matrix._from_storage(np.eye(n, dtype=DTYPE))
