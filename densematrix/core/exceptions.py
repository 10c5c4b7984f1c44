"""
Exception hierarchy for densematrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.
    
    Raised when a required operand is missing or a user-provided argument
    has the wrong type or value (negative dimensions, non-integer indices,
    non-numeric buffers).
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible with the requested operation.
    
    Raised for unequal shapes in addition/subtraction, an inner dimension
    mismatch in multiplication, or a buffer that is not 2-dimensional.
    
    Attributes:
        operation: Name of the operation that was attempted, if any
        left_shape: Shape of the left operand, if applicable
        right_shape: Shape of the right operand, if applicable
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element access outside [0, rows) x [0, columns).
    
    Also an IndexError, so generic code catching the builtin still works.
    
    Attributes:
        index: The (row, column) pair that was requested
        shape: The (rows, columns) shape of the matrix
    """
    
    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape
