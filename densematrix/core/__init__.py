"""
Core infrastructure for densematrix.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators shared by every call path
    precision: Element dtype and comparison tolerances
"""

from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)

__all__ = [
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
]
