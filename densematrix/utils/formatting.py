"""Text rendering of matrices."""

from typing import TYPE_CHECKING, Optional

from densematrix.core.config import DEFAULTS

if TYPE_CHECKING:
    from densematrix.core.matrix import Matrix


def format_matrix(matrix: "Matrix", placeholder: Optional[str] = None) -> str:
    """
    Render a matrix as aligned text.

    Every cell except the last of its row is padded to the width of the
    widest cell in the whole matrix and followed by the cell separator.
    Rows are joined by newlines. A matrix with no rows or no columns
    renders as ``placeholder``.

    Args:
        matrix: Matrix to render
        placeholder: Text for an empty matrix (default "[Ø]")

    Returns:
        Rendered text without trailing newline
    """
    if matrix.rows == 0 or matrix.cols == 0:
        return DEFAULTS.empty_placeholder if placeholder is None else placeholder

    cells = [[str(value) for value in line] for line in matrix.to_rows()]
    width = max(len(cell) for line in cells for cell in line)

    lines = []
    for line in cells:
        padded = [cell.ljust(width) + DEFAULTS.cell_separator for cell in line[:-1]]
        lines.append("".join(padded) + line[-1])
    return "\n".join(lines)
