"""
densematrix: a dense, fixed-shape, float64 matrix value type.

A small foundational numeric type with value semantics: addition,
subtraction, multiplication, bounds-checked element access, exact
structural equality consistent with hashing, and deep copying.

Submodules:
    core: exceptions, validation and precision constants
    matrix: the Matrix type and its arithmetic
"""

__version__ = "0.1.0"

from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)
from densematrix.matrix import (
    Matrix,
    add,
    subtract,
    multiply,
    zeros,
    identity,
)

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "zeros",
    "identity",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
]
