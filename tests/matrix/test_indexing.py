"""
Tests for bounds-checked element access.

Validates:
    - get/set and subscript forms agree
    - index == dimension is out of range (no off-by-one)
    - negative indices are out of range, never wrapped
    - failed writes leave the matrix unchanged
"""

import numpy as np
import pytest

from densematrix import IndexOutOfRangeError, Matrix, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Reads and writes
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_get(self, a22):
        assert a22.get(0, 0) == 1.0
        assert a22.get(0, 1) == 2.0
        assert a22.get(1, 0) == 3.0
        assert a22.get(1, 1) == 4.0

    def test_get_returns_python_float(self, a22):
        assert type(a22.get(0, 0)) is float

    def test_subscript_get(self, a22):
        assert a22[1, 0] == 3.0

    def test_set(self):
        m = Matrix(2, 2)
        m.set(1, 0, 2.5)
        assert m.get(1, 0) == 2.5
        assert m.get(0, 0) == 0.0

    def test_subscript_set(self):
        m = Matrix(2, 3)
        m[1, 2] = -4.0
        assert m.get(1, 2) == -4.0

    def test_set_int_value(self):
        m = Matrix(1, 1)
        m[0, 0] = 3
        assert m[0, 0] == 3.0

    def test_last_element(self, m33):
        assert m33.get(2, 2) == 9.0

    def test_numpy_integer_index(self, m33):
        assert m33[np.int64(1), np.int64(1)] == 5.0

    def test_set_does_not_change_shape(self, m33):
        m33.set(0, 0, 0.0)
        assert m33.shape == (3, 3)


# ═══════════════════════════════════════════════════════════════════════
# Bounds
# ═══════════════════════════════════════════════════════════════════════


class TestBounds:

    def test_row_equal_to_rows(self, a22):
        """get(A, 2, 0) on a 2x2 matrix is out of range."""
        with pytest.raises(IndexOutOfRangeError):
            a22.get(2, 0)

    def test_column_equal_to_columns(self, a22):
        with pytest.raises(IndexOutOfRangeError):
            a22.get(0, 2)

    def test_set_row_equal_to_rows(self, a22):
        with pytest.raises(IndexOutOfRangeError):
            a22.set(2, 0, 1.0)

    def test_set_column_equal_to_columns(self, a22):
        with pytest.raises(IndexOutOfRangeError):
            a22[0, 2] = 1.0

    @pytest.mark.parametrize("row,column", [(-1, 0), (0, -1), (-2, -2)])
    def test_negative_indices_do_not_wrap(self, a22, row, column):
        with pytest.raises(IndexOutOfRangeError):
            a22.get(row, column)
        with pytest.raises(IndexOutOfRangeError):
            a22.set(row, column, 0.0)

    def test_far_out_of_range(self, a22):
        with pytest.raises(IndexOutOfRangeError):
            a22[100, 100]

    def test_empty_matrix_has_no_elements(self):
        with pytest.raises(IndexOutOfRangeError):
            Matrix(0, 3).get(0, 0)

    def test_catchable_as_index_error(self, a22):
        with pytest.raises(IndexError):
            a22.get(2, 0)

    def test_error_reports_index_and_shape(self, a22):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            a22.get(0, 5)
        assert exc_info.value.index == (0, 5)
        assert exc_info.value.shape == (2, 2)


# ═══════════════════════════════════════════════════════════════════════
# Invalid arguments
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidArguments:

    def test_float_index(self, a22):
        with pytest.raises(ValidationError, match="row: expected integer"):
            a22.get(0.0, 0)

    def test_single_subscript(self, a22):
        with pytest.raises(ValidationError, match=r"\(row, column\) pair"):
            a22[0]

    def test_three_subscripts(self, a22):
        with pytest.raises(ValidationError):
            a22[0, 0, 0]

    def test_slice_rejected(self, a22):
        with pytest.raises(ValidationError):
            a22[0, :]

    def test_bad_value_leaves_matrix_unchanged(self, a22):
        with pytest.raises(ValidationError):
            a22.set(0, 0, "nine")
        assert a22.get(0, 0) == 1.0


    def test_complex_value_rejected(self, a22):
        with pytest.raises(ValidationError):
            a22.set(0, 1, np.complex128(5 + 1j))
        assert a22.get(0, 1) == 2.0
    def test_out_of_range_write_leaves_matrix_unchanged(self, a22):
        before = a22.clone()
        with pytest.raises(IndexOutOfRangeError):
            a22.set(2, 2, 0.0)
        assert a22 == before

    def test_not_iterable(self, a22):
        with pytest.raises(TypeError):
            iter(a22)
