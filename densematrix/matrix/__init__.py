"""
Dense matrix value type and its arithmetic.

Public API:
    Matrix: the matrix type
    add, subtract, multiply: free-function arithmetic
    zeros, identity: convenience constructors
"""

from densematrix.matrix._matrix import Matrix
from densematrix.matrix._ops import add, subtract, multiply
from densematrix.matrix._factories import zeros, identity

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "zeros",
    "identity",
]
