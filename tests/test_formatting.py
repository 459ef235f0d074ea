"""Tests for text rendering."""

from densematrix import Matrix, format_matrix


def test_uniform_width():
    matrix = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    expected = (
        "1.0  2.0  3.0\n"
        "4.0  5.0  6.0\n"
        "7.0  8.0  9.0"
    )
    assert str(matrix) == expected


def test_uneven_width_is_padded():
    """Cells are padded to the widest cell of the whole matrix."""
    matrix = Matrix.from_rows([[-1, 2, 3], [4, 523, 6], [7, 8, 9]])

    expected = (
        "-1.0   2.0    3.0\n"
        "4.0    523.0  6.0\n"
        "7.0    8.0    9.0"
    )
    assert format_matrix(matrix) == expected


def test_padded_cells_line_up():
    """Every cell but the last in a row takes the same visual width."""
    matrix = Matrix.from_rows([[0.5, 100.25], [12, 1]])
    lines = str(matrix).splitlines()

    assert lines[0].index("100.25") == lines[1].index("1.0")


def test_single_cell():
    assert str(Matrix.filled(1, 1, 2.5)) == "2.5"


def test_empty_matrix_placeholder():
    assert str(Matrix.from_rows([[]])) == "[Ø]"
    assert str(Matrix.from_rows([])) == "[Ø]"
    assert format_matrix(Matrix.zeros(0, 3), placeholder="[]") == "[]"
