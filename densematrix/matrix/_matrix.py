"""
Dense, fixed-shape float64 matrix.

Matrix is a value type: equality, hashing and copying are defined by
content, never by identity. Storage is a private 2D numpy array that
the matrix owns exclusively, unless the caller explicitly asks for a
zero-copy wrap.

Usage:
    from densematrix import Matrix

    A = Matrix.from_array([[1, 2], [3, 4]])
    Z = Matrix(2, 2)            # zero-filled
    A[0, 1] = 5.0
    C = A @ Z + A
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import ValidationError
from densematrix.core.precision import DEFAULT_ATOL, DEFAULT_RTOL, DTYPE
from densematrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_in_bounds,
    check_integer,
    check_scalar,
)


class Matrix:
    """
    Dense real-valued matrix with immutable dimensions.

    Construction:
        Matrix(rows, columns)                   # zero-filled
        Matrix.from_array(buffer)               # copies buffer
        Matrix.wrap(ndarray)                    # aliases ndarray, no copy

    Only element values change after construction, through get/set or
    subscript assignment. Arithmetic always allocates a new Matrix.

    Indices are zero-based and must satisfy 0 <= index < dimension.
    Negative indices do not wrap around.
    """

    __slots__ = ('_data',)

    # Opt out of numpy ufunc dispatch so ndarray + Matrix never broadcasts
    __array_ufunc__ = None

    # A matrix is not a sequence of rows
    __iter__ = None

    def __init__(self, rows: int, columns: int):
        """
        Create a zero-filled matrix.

        Args:
            rows: Number of rows, >= 0
            columns: Number of columns, >= 0

        Raises:
            ValidationError: If either dimension is not a non-negative integer
        """
        rows = check_dimension(rows, 'rows')
        columns = check_dimension(columns, 'columns')
        self._data: NDArray[np.float64] = np.zeros((rows, columns), dtype=DTYPE)

    # === Construction ===

    @classmethod
    def from_array(cls, buffer: ArrayLike, *, copy: bool = True) -> Matrix:
        """
        Build a Matrix from a 2D array-like; dimensions come from its shape.

        Args:
            buffer: Nested lists, numpy array or another Matrix. Integer
                    data is promoted to float64.
            copy: If True (default) the matrix gets its own copy of the data.
                  If False, a writeable float64 ndarray is adopted by
                  reference and later writes through either side are
                  visible to both. Inputs that cannot be adopted are copied
                  with a RuntimeWarning.

        Returns:
            New Matrix

        Raises:
            ValidationError: If buffer is None or not real numeric data
            DimensionError: If buffer is not 2-dimensional
        """
        data = check_array(buffer, 'buffer')
        check_2d(data, 'buffer')

        if copy:
            data = np.array(data, dtype=DTYPE, copy=True)
        elif data is not buffer or not data.flags.writeable:
            warnings.warn(
                f"buffer of type {type(buffer).__name__} cannot be wrapped "
                f"without copying (requires a writeable float64 ndarray); "
                f"the matrix holds a copy",
                RuntimeWarning,
                stacklevel=2,
            )
            data = np.array(data, dtype=DTYPE, copy=True)
        else:
            # Share the buffer, never the caller's shape
            data = data.view()

        return cls._from_storage(data)

    @classmethod
    def wrap(cls, buffer: NDArray[np.float64]) -> Matrix:
        """Adopt a float64 ndarray without copying (aliases the caller's data)."""
        return cls.from_array(buffer, copy=False)

    @classmethod
    def _from_storage(cls, data: NDArray[np.float64]) -> Matrix:
        """Internal builder: adopt an already-validated 2D float64 array."""
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    # === Properties ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._data.shape[0], self._data.shape[1])

    @property
    def size(self) -> int:
        """Number of stored elements, rows * columns."""
        return self._data.size

    # === Element access ===

    def _locate(self, row: Any, column: Any) -> tuple[int, int]:
        row = check_integer(row, 'row')
        column = check_integer(column, 'column')
        check_in_bounds(row, column, self.shape)
        return row, column

    def get(self, row: int, column: int) -> float:
        """
        Read one element.

        Raises:
            ValidationError: If an index is not an integer
            IndexOutOfRangeError: If (row, column) is outside the matrix
        """
        row, column = self._locate(row, column)
        return float(self._data[row, column])

    def set(self, row: int, column: int, value: float) -> None:
        """
        Overwrite one element in place.

        The matrix is unchanged if validation fails.

        Raises:
            ValidationError: If an index is not an integer or value is not
                             a real number
            IndexOutOfRangeError: If (row, column) is outside the matrix
        """
        row, column = self._locate(row, column)
        self._data[row, column] = check_scalar(value, 'value')

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = _split_key(key)
        return self.get(row, column)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, column = _split_key(key)
        self.set(row, column, value)

    # === Arithmetic ===

    def add(self, other: Matrix) -> Matrix:
        """Return self + other. See densematrix.add."""
        from densematrix.matrix._ops import add
        return add(self, other)

    def subtract(self, other: Matrix) -> Matrix:
        """Return self - other. See densematrix.subtract."""
        from densematrix.matrix._ops import subtract
        return subtract(self, other)

    def multiply(self, other: Matrix) -> Matrix:
        """Return the matrix product self @ other. See densematrix.multiply."""
        from densematrix.matrix._ops import multiply
        return multiply(self, other)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # === Copying ===

    def clone(self) -> Matrix:
        """
        Deep copy: same shape and values, independently owned storage.

        Mutating the clone never affects the original and vice versa.
        """
        return type(self)._from_storage(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.clone()

    def to_array(self) -> NDArray[np.float64]:
        """Return a new (rows, columns) float64 ndarray with the elements."""
        return self._data.copy()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        # Always a fresh array, the internal buffer is never handed out
        if copy is False:
            raise ValueError("Matrix cannot be converted to an array without copying")
        return np.array(self._data, dtype=dtype, copy=True)

    # === Equality ===

    def equals(self, other: object) -> bool:
        """
        Exact value equality.

        False if other is not a Matrix or has a different shape. Otherwise
        True iff every pair of elements compares equal under IEEE 754
        (so 0.0 == -0.0, and NaN never equals NaN). Matrices with no
        elements are equal whenever their shapes match. A matrix always
        equals itself.
        """
        if other is self:
            return True
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        # Adding 0.0 folds -0.0 into 0.0; NaNs share one bit pattern
        canonical = self._data + 0.0
        canonical[np.isnan(canonical)] = np.nan
        return hash((self.rows, self.columns, canonical.tobytes()))

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Approximate equality for computed values.

        Elementwise |self - other| <= atol + rtol * |other|. Returns False
        on shape mismatch. Unlike equals(), other must be a Matrix.

        Raises:
            ValidationError: If other is not a Matrix
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    # === Display ===

    def __repr__(self) -> str:
        if self._data.size == 0:
            return f"Matrix({self.rows}, {self.columns})"
        return f"Matrix.from_array({self._data.tolist()!r})"


def _split_key(key: Any) -> tuple[Any, Any]:
    """Unpack a subscript into (row, column)."""
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(
            f"index: expected a (row, column) pair, got {key!r}"
        )
    return key
