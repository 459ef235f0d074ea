"""Exceptions raised at the public matrix boundary."""


class MatrixError(Exception):
    """Base class for matrix precondition failures."""


class ShapeMismatchError(MatrixError, ValueError):
    """Raised when operand dimensions are incompatible."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised when a row or column index falls outside the matrix."""
