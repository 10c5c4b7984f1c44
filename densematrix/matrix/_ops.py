"""
Matrix arithmetic: addition, subtraction and multiplication.

These free functions are the single implementation behind the instance
methods (A.add(B)) and operators (A + B, A - B, A @ B), so every call
path runs the same validation and reports the same errors.

Operands are only read; each call returns a freshly allocated Matrix.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from densematrix.core.exceptions import ValidationError
from densematrix.core.precision import DTYPE
from densematrix.core.validation import (
    check_inner_dimensions,
    check_not_none,
    check_same_shape,
)
from densematrix.matrix._matrix import Matrix


def _check_operand(value: Any, name: str) -> Matrix:
    check_not_none(value, name)
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(value).__name__}"
        )
    return value


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum of two same-shaped matrices.

    Args:
        a: Left operand
        b: Right operand

    Returns:
        New Matrix with element (i, j) = a[i, j] + b[i, j]

    Raises:
        ValidationError: If either operand is None or not a Matrix
        DimensionError: If a.shape != b.shape
    """
    a = _check_operand(a, 'a')
    b = _check_operand(b, 'b')
    check_same_shape(a.shape, b.shape, 'add')
    return Matrix._from_storage(np.add(a._data, b._data))


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise difference of two same-shaped matrices.

    Args:
        a: Left operand
        b: Right operand

    Returns:
        New Matrix with element (i, j) = a[i, j] - b[i, j]

    Raises:
        ValidationError: If either operand is None or not a Matrix
        DimensionError: If a.shape != b.shape
    """
    a = _check_operand(a, 'a')
    b = _check_operand(b, 'b')
    check_same_shape(a.shape, b.shape, 'subtract')
    return Matrix._from_storage(np.subtract(a._data, b._data))


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product of an (m x n) and an (n x p) matrix.

    Each element is accumulated in ascending k order,
        c[i, j] = ((0 + a[i, 0] * b[0, j]) + a[i, 1] * b[1, j]) + ...
    in plain float64 arithmetic, which gives bit-identical results to
    the textbook triple loop. BLAS matmul is not used because its
    summation order (and FMA use) is implementation-defined.

    An inner dimension of 0 gives an (m x p) zero matrix.

    Args:
        a: Left operand (m x n)
        b: Right operand (n x p)

    Returns:
        New (m x p) Matrix

    Raises:
        ValidationError: If either operand is None or not a Matrix
        DimensionError: If a.columns != b.rows
    """
    a = _check_operand(a, 'a')
    b = _check_operand(b, 'b')
    check_inner_dimensions(a.shape, b.shape, 'multiply')

    left, right = a._data, b._data
    result = np.zeros((a.rows, b.columns), dtype=DTYPE)
    for k in range(a.columns):
        result += np.multiply.outer(left[:, k], right[k, :])
    return Matrix._from_storage(result)
