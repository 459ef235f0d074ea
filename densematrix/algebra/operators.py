"""Arithmetic on dense matrices."""

from typing import TYPE_CHECKING
import numpy as np

from densematrix.algebra.protocols import Scalar
from densematrix.core.errors import ShapeMismatchError

if TYPE_CHECKING:
    from densematrix.core.matrix import Matrix


def _require_same_shape(lhs: "Matrix", rhs: "Matrix", operation: str) -> None:
    if lhs.shape != rhs.shape:
        raise ShapeMismatchError(
            f"Cannot {operation} {lhs.rows}x{lhs.cols} and {rhs.rows}x{rhs.cols} matrices"
        )


def add(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    """Elementwise sum of two matrices of the same shape."""
    _require_same_shape(lhs, rhs, "add")
    return lhs._wrap(lhs.rows, lhs.cols, lhs._storage + rhs._storage)


def subtract(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    """Elementwise difference of two matrices of the same shape."""
    _require_same_shape(lhs, rhs, "subtract")
    return lhs._wrap(lhs.rows, lhs.cols, lhs._storage - rhs._storage)


def negate(matrix: "Matrix") -> "Matrix":
    return matrix._wrap(matrix.rows, matrix.cols, -matrix._storage)


def matmul(lhs: "Matrix", rhs: "Matrix") -> "Matrix":
    """
    Matrix product.

    Args:
        lhs: Left operand (n, k)
        rhs: Right operand (k, m)

    Returns:
        Product of shape (n, m)
    """
    if lhs.cols != rhs.rows:
        raise ShapeMismatchError(
            f"Cannot multiply {lhs.rows}x{lhs.cols} by {rhs.rows}x{rhs.cols}: "
            "inner dimensions differ"
        )
    product = lhs._grid() @ rhs._grid()
    return lhs._wrap(lhs.rows, rhs.cols, product.ravel())


def scale(scalar: Scalar, matrix: "Matrix") -> "Matrix":
    """Multiply every element by ``scalar``."""
    return matrix._wrap(matrix.rows, matrix.cols, np.multiply(scalar, matrix._storage))


def divide(matrix: "Matrix", scalar: Scalar) -> "Matrix":
    """Divide every element by ``scalar``."""
    if scalar == 0:
        raise ZeroDivisionError("Matrix division by zero")
    return matrix._wrap(matrix.rows, matrix.cols, np.divide(matrix._storage, scalar))
