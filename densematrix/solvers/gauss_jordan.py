"""Gauss-Jordan elimination with partial pivoting."""

import logging

from densematrix.core.matrix import Matrix

logger = logging.getLogger(__name__)


def _find_pivot(matrix: Matrix, column: int, start: int) -> int:
    """
    Row in ``start..rows-1`` with the largest magnitude in ``column``.

    The first maximal row wins. If every candidate is zero, ``start`` is
    returned.
    """
    best = 0
    pivot = start
    for i in range(start, matrix.rows):
        magnitude = abs(matrix[i, column])
        if magnitude > best:
            best = magnitude
            pivot = i
    return pivot


def gauss_jordan(matrix: Matrix) -> Matrix:
    """
    Reduce a matrix to reduced row-echelon form.

    For each column the largest-magnitude entry at or below the current
    pivot row is normalized to 1, swapped into place and used to clear the
    column in every other row. Columns without a nonzero candidate are
    skipped and stay free.

    To solve ``A x = b`` reduce ``A.augmented(b)``; when the left block
    reduces to the identity the last column holds ``x``. Inconsistent or
    redundant systems are not reported: a zero row with a nonzero last entry
    means no solution, trailing zero rows mean dependent equations.

    Args:
        matrix: Matrix to reduce (not modified)

    Returns:
        New matrix in reduced row-echelon form
    """
    working = matrix.copy()
    r = 0

    for j in range(working.cols):
        if r >= working.rows:
            break

        k = _find_pivot(working, j, r)
        divider = working[k, j]
        if divider == 0:
            logger.debug("Column %d has no pivot at or below row %d", j, r)
            continue

        logger.debug("Column %d: pivot %r at row %d moved to row %d", j, divider, k, r)
        for col in range(working.cols):
            working[k, col] /= divider
        working.swap_rows(k, r)

        pivot_row = working.row(r)
        for i in range(working.rows):
            if i != r:
                working.add_to_row(-(working[i, j] * pivot_row), i)

        r += 1

    logger.debug("Reduced %dx%d matrix with %d pivots", working.rows, working.cols, r)
    return working
