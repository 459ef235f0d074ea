"""Dense row-major matrix storage."""

import numbers
import operator
from typing import Any, Callable, Iterable, Optional, Sequence
import numpy as np
from numpy.typing import DTypeLike, NDArray

from densematrix.algebra import operators
from densematrix.algebra.protocols import Scalar
from densematrix.core.config import DEFAULTS
from densematrix.core.errors import IndexOutOfRangeError, ShapeMismatchError


def _promote(storage: NDArray) -> NDArray:
    """Store boolean and integer data in the default dtype so rows can be divided in place."""
    if storage.dtype.kind in "biu":
        return storage.astype(DEFAULTS.dtype)
    return storage


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.generic))


class Matrix:
    """
    Dense 2-D matrix backed by a flat row-major numpy array.

    Element (i, j) lives at offset ``i * cols + j``. Every transform returns
    a new matrix; only item assignment, ``swap_rows``, ``swap_columns`` and
    ``add_to_row`` modify an existing instance.
    """

    __slots__ = ("_rows", "_cols", "_storage")

    # Let numpy scalars on the left defer to Matrix operators.
    __array_ufunc__ = None
    __hash__ = None  # mutable

    def __init__(
        self,
        rows: int,
        cols: int,
        values: Iterable[Scalar],
        dtype: Optional[DTypeLike] = None,
    ):
        """
        Build a matrix from a flat row-major sequence.

        Args:
            rows: Number of rows
            cols: Number of columns
            values: rows * cols scalars, row by row
            dtype: Storage dtype, ``object`` for arbitrary scalar types

        Raises:
            ShapeMismatchError: If the value count does not match the shape
        """
        if rows < 0 or cols < 0:
            raise ShapeMismatchError(f"Invalid dimensions {rows}x{cols}")
        storage = _promote(np.array(list(values), dtype=DEFAULTS.dtype if dtype is None else dtype))
        if storage.ndim != 1 or storage.size != rows * cols:
            raise ShapeMismatchError(
                f"Expected {rows * cols} values for a {rows}x{cols} matrix, got {storage.size}"
            )
        self._rows = rows
        self._cols = cols
        self._storage = storage

    @classmethod
    def _wrap(cls, rows: int, cols: int, storage: NDArray) -> "Matrix":
        """Adopt ``storage`` without copying. Caller guarantees its length."""
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._cols = cols
        matrix._storage = storage
        return matrix

    @classmethod
    def from_function(
        cls,
        rows: int,
        cols: int,
        filler: Callable[[int, int], Scalar],
        dtype: Optional[DTypeLike] = None,
    ) -> "Matrix":
        """Fill each cell with ``filler(i, j)``, rows outer, columns inner."""
        values = [filler(i, j) for i in range(rows) for j in range(cols)]
        return cls(rows, cols, values, dtype=dtype)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Scalar]],
        dtype: Optional[DTypeLike] = None,
    ) -> "Matrix":
        """
        Build a matrix from nested row sequences.

        Every row must have the length of the first one. ``[]`` gives a 0x0
        matrix and ``[[]]`` a 1x0 matrix.
        """
        n = len(rows)
        m = len(rows[0]) if n else 0
        values = []
        for index, line in enumerate(rows):
            if len(line) != m:
                raise ShapeMismatchError(
                    f"Row {index} has {len(line)} values, expected {m}"
                )
            values.extend(line)
        return cls(n, m, values, dtype=dtype)

    @classmethod
    def from_array(cls, array: NDArray, dtype: Optional[DTypeLike] = None) -> "Matrix":
        """
        Copy a 2-D numpy array into a new matrix.

        Integer and boolean arrays are converted to the default dtype, so
        that row reduction can divide in place.
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ShapeMismatchError(f"Expected a 2-D array, got {array.ndim} dimensions")
        if dtype is not None:
            array = array.astype(dtype)
        rows, cols = array.shape
        return cls._wrap(rows, cols, _promote(array.flatten()))

    @classmethod
    def filled(
        cls, rows: int, cols: int, value: Scalar, dtype: Optional[DTypeLike] = None
    ) -> "Matrix":
        return cls(rows, cols, [value] * (rows * cols), dtype=dtype)

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: Optional[DTypeLike] = None) -> "Matrix":
        return cls.filled(rows, cols, 0, dtype=dtype)

    @classmethod
    def diagonal(
        cls, size: int, value: Scalar, dtype: Optional[DTypeLike] = None
    ) -> "Matrix":
        """Square matrix with ``value`` on the diagonal and zeros elsewhere."""
        return cls.from_function(size, size, lambda i, j: value if i == j else 0, dtype=dtype)

    @classmethod
    def identity(cls, size: int, dtype: Optional[DTypeLike] = None) -> "Matrix":
        return cls.diagonal(size, 1, dtype=dtype)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    @property
    def values(self) -> list[Any]:
        """Flat row-major copy of the elements."""
        return self._storage.tolist()

    def to_rows(self) -> list[list[Any]]:
        flat = self.values
        return [flat[i * self._cols:(i + 1) * self._cols] for i in range(self._rows)]

    def to_array(self) -> NDArray:
        """2-D numpy copy of the elements."""
        return self._grid().copy()

    def copy(self) -> "Matrix":
        return self._wrap(self._rows, self._cols, self._storage.copy())

    def _grid(self) -> NDArray:
        # (rows, cols) view sharing the flat storage
        return self._storage.reshape(self._rows, self._cols)

    def _check_row(self, i: int) -> int:
        i = operator.index(i)
        if not 0 <= i < self._rows:
            raise IndexOutOfRangeError(f"Row index {i} out of range for {self._rows} rows")
        return i

    def _check_column(self, j: int) -> int:
        j = operator.index(j)
        if not 0 <= j < self._cols:
            raise IndexOutOfRangeError(f"Column index {j} out of range for {self._cols} columns")
        return j

    def _offset(self, key: tuple[int, int]) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be an (i, j) pair")
        i = self._check_row(key[0])
        j = self._check_column(key[1])
        return i * self._cols + j

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self._storage.item(self._offset(key))

    def __setitem__(self, key: tuple[int, int], value: Scalar) -> None:
        self._storage[self._offset(key)] = value

    def row(self, i: int) -> "Matrix":
        """Copy of row ``i`` as a 1 x cols matrix."""
        self._check_row(i)
        return self._wrap(1, self._cols, self._grid()[i].copy())

    def column(self, j: int) -> "Matrix":
        """Copy of column ``j`` as a rows x 1 matrix."""
        self._check_column(j)
        return self._wrap(self._rows, 1, self._grid()[:, j].copy())

    def transposed(self) -> "Matrix":
        return self._wrap(self._cols, self._rows, self._grid().T.flatten())

    def augmented(self, other: "Matrix") -> "Matrix":
        """
        Append the columns of ``other`` to the right of this matrix.

        Typical use is building ``[A | b]`` before row reduction.
        """
        if other.rows != self._rows:
            raise ShapeMismatchError(
                f"Cannot augment {self._rows} rows with {other.rows} rows"
            )
        joined = np.hstack([self._grid(), other._grid()])
        return self._wrap(self._rows, self._cols + other.cols, joined.ravel())

    def swap_rows(self, a: int, b: int) -> None:
        """Exchange rows ``a`` and ``b`` in place."""
        self._check_row(a)
        self._check_row(b)
        grid = self._grid()
        grid[[a, b]] = grid[[b, a]]

    def swap_columns(self, a: int, b: int) -> None:
        """Exchange columns ``a`` and ``b`` in place."""
        self._check_column(a)
        self._check_column(b)
        grid = self._grid()
        grid[:, [a, b]] = grid[:, [b, a]]

    def add_to_row(self, vector: "Matrix", i: int) -> None:
        """
        Add a 1 x cols matrix elementwise into row ``i``, in place.

        Raises:
            ShapeMismatchError: If ``vector`` is not 1 x cols
            IndexOutOfRangeError: If ``i`` is not a valid row
        """
        if vector.rows != 1 or vector.cols != self._cols:
            raise ShapeMismatchError(
                f"Expected a 1x{self._cols} row vector, got {vector.rows}x{vector.cols}"
            )
        self._check_row(i)
        start = i * self._cols
        self._storage[start:start + self._cols] += vector._storage

    def gauss_jordan(self) -> "Matrix":
        """Reduced row-echelon form. See ``densematrix.solvers.gauss_jordan``."""
        from densematrix.solvers.gauss_jordan import gauss_jordan

        return gauss_jordan(self)

    def is_almost_equal(self, other: "Matrix", epsilon: Optional[Scalar] = None) -> bool:
        """True if shapes match and every pair of elements is within ``epsilon``."""
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot compare Matrix with {type(other).__name__}")
        if epsilon is None:
            epsilon = DEFAULTS.epsilon
        if self.shape != other.shape:
            return False
        a, b = self._storage, other._storage
        return bool(np.all((a >= b - epsilon) & (a <= b + epsilon)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._storage, other._storage))

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return operators.add(self, other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return operators.subtract(self, other)

    def __neg__(self) -> "Matrix":
        return operators.negate(self)

    def __mul__(self, other: Any) -> "Matrix":
        if isinstance(other, Matrix):
            return operators.matmul(self, other)
        if not _is_scalar(other):
            return NotImplemented
        return operators.scale(other, self)

    def __rmul__(self, other: Any) -> "Matrix":
        if not _is_scalar(other):
            return NotImplemented
        return operators.scale(other, self)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return operators.matmul(self, other)

    def __truediv__(self, other: Any) -> "Matrix":
        if not _is_scalar(other):
            return NotImplemented
        return operators.divide(self, other)

    def __str__(self) -> str:
        from densematrix.utils.formatting import format_matrix

        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, values={self.values})"
