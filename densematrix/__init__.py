"""
Densematrix: dense 2-D matrices over real scalars.

This library provides:
- Row-major storage with bounds-checked indexing
- Structural transforms (transpose, row/column extraction and swaps)
- Arithmetic operators and exact or tolerant equality
- Gauss-Jordan elimination with partial pivoting
"""

import logging

__version__ = "0.1.0"

from densematrix.core.matrix import Matrix
from densematrix.core.errors import MatrixError, ShapeMismatchError, IndexOutOfRangeError
from densematrix.solvers.gauss_jordan import gauss_jordan
from densematrix.utils.formatting import format_matrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Matrix",
    "MatrixError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "gauss_jordan",
    "format_matrix",
]
