"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from densematrix.core.precision import DTYPE


def check_not_none(value: Any, name: str) -> None:
    """
    Verify a required argument was supplied.
    
    Args:
        value: Argument to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If value is None
    """
    if value is None:
        raise ValidationError(f"{name}: required, got None")


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer and return it as a Python int.
    
    Accepts int and numpy integer scalars. Rejects bool, float and anything
    else without an __index__ method.
    
    Args:
        value: Value to check
        name: Parameter name for error messages
        
    Returns:
        The value as int
        
    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected integer, got {type(value).__name__} {value!r}"
        ) from e


def check_dimension(value: Any, name: str) -> int:
    """
    Verify value is a valid matrix dimension (non-negative integer).
    
    Args:
        value: Dimension to check
        name: Parameter name for error messages
        
    Returns:
        The dimension as int
        
    Raises:
        ValidationError: If value is not an integer or is negative
    """
    dim = check_integer(value, name)
    if dim < 0:
        raise ValidationError(f"{name}: must be >= 0, got {dim}")
    return dim


def check_array(buffer: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like. Rejects None, inputs that result in object
    dtype (mixed types or ragged nesting), non-numeric and complex data.
    Integer data is promoted to float64.
    
    Args:
        buffer: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with dtype float64. May be the input itself when it
        already is a float64 ndarray.
        
    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    check_not_none(buffer, name)
    try:
        result = np.asarray(buffer)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numeric data"
        )

    if result.dtype != DTYPE:
        result = result.astype(DTYPE)

    return result


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 2-dimensional.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_in_bounds(row: int, column: int, shape: tuple[int, int]) -> None:
    """
    Verify (row, column) addresses an element of a matrix with given shape.
    
    An index is out of range when index < 0 or index >= dimension. Negative
    indices never wrap around.
    
    Raises:
        IndexOutOfRangeError: If either index is outside its dimension
    """
    rows, columns = shape
    if row < 0 or row >= rows:
        raise IndexOutOfRangeError(
            f"row: index {row} out of range for {rows} rows",
            index=(row, column),
            shape=shape,
        )
    if column < 0 or column >= columns:
        raise IndexOutOfRangeError(
            f"column: index {column} out of range for {columns} columns",
            index=(row, column),
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (addition, subtraction).
    
    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages
        
    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: operand shapes differ, "
            f"{left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left columns equal right rows (multiplication).
    
    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages
        
    Raises:
        DimensionError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"{operation}: inner dimensions differ, left has {left[1]} columns "
            f"but right has {right[0]} rows",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number and return it as a Python float.
    
    Strings are rejected even when they would parse as numbers. Complex
    values are rejected rather than truncated to their real part.
    
    Args:
        value: Value to check
        name: Parameter name for error messages
        
    Returns:
        The value as float
        
    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (str, bytes, complex, np.complexfloating)):
        raise ValidationError(
            f"{name}: expected real number, got {type(value).__name__} {value!r}"
        )
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"{name}: expected real number, got {type(value).__name__} {value!r}"
        ) from e
