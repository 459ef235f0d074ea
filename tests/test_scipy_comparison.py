"""Comparison tests against numpy/scipy linear algebra."""

import numpy as np
import pytest
import scipy.linalg

from densematrix import Matrix, gauss_jordan


@pytest.mark.parametrize("n", [2, 5, 8])
def test_solution_matches_scipy_solve(n):
    """Reducing [A | b] gives the same x as scipy.linalg.solve."""
    rng = np.random.default_rng(n)
    A = rng.normal(size=(n, n)) + n * np.eye(n)
    b = rng.normal(size=(n, 1))

    reduced = gauss_jordan(Matrix.from_array(A).augmented(Matrix.from_array(b)))
    x_ours = reduced.column(n).to_array()
    x_scipy = scipy.linalg.solve(A, b)

    assert reduced.is_almost_equal(
        Matrix.identity(n).augmented(Matrix.from_array(x_scipy)), 1e-8
    )
    assert np.allclose(x_ours, x_scipy, atol=1e-10)


def test_inverse_matches_scipy_inv():
    """Reducing [A | I] leaves the inverse in the right block."""
    rng = np.random.default_rng(42)
    n = 4
    A = rng.normal(size=(n, n)) + 4 * np.eye(n)

    reduced = gauss_jordan(Matrix.from_array(A).augmented(Matrix.identity(n))).to_array()

    assert np.allclose(reduced[:, :n], np.eye(n), atol=1e-12)
    assert np.allclose(reduced[:, n:], scipy.linalg.inv(A), atol=1e-10)


def test_product_matches_numpy():
    rng = np.random.default_rng(7)
    A = rng.normal(size=(3, 5))
    B = rng.normal(size=(5, 2))

    product = Matrix.from_array(A) * Matrix.from_array(B)

    assert product.shape == (3, 2)
    assert np.allclose(product.to_array(), A @ B)


def test_pivot_count_matches_numpy_rank():
    """Nonzero rows of the reduced form equal the matrix rank."""
    values = np.array([
        [1, 2, 2, -3, 2, 3],
        [2, 4, 1, 0, -5, -6],
        [4, 8, 5, -6, -1, 0],
        [-1, -2, -1, 1, 1, 2],
    ], dtype=float)

    for block in (values, values[:, :5]):
        reduced = gauss_jordan(Matrix.from_array(block)).to_array()
        nonzero_rows = int(np.sum(np.any(np.abs(reduced) > 1e-9, axis=1)))
        assert nonzero_rows == np.linalg.matrix_rank(block)
