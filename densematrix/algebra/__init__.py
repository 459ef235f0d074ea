"""Scalar protocol and matrix arithmetic."""

from densematrix.algebra.protocols import Scalar
from densematrix.algebra.operators import add, subtract, negate, matmul, scale, divide

__all__ = [
    "Scalar",
    "add",
    "subtract",
    "negate",
    "matmul",
    "scale",
    "divide",
]
