"""Dense matrix storage, defaults and errors."""

from densematrix.core.matrix import Matrix
from densematrix.core.config import MatrixDefaults, DEFAULTS
from densematrix.core.errors import MatrixError, ShapeMismatchError, IndexOutOfRangeError

__all__ = [
    "Matrix",
    "MatrixDefaults",
    "DEFAULTS",
    "MatrixError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
]
