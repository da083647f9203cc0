"""Dense real matrices stored in row-major order."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Sequence


@dataclass
class Matrix:
    """A ``rows``-by-``cols`` matrix of floats kept as a flat row-major list."""

    rows: int
    cols: int
    data: list[float]

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("a matrix needs at least one row and one column")
        if len(self.data) != self.rows * self.cols:
            raise ValueError(
                f"expected {self.rows * self.cols} entries, got {len(self.data)}"
            )
        self.data = [float(x) for x in self.data]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        if not rows:
            raise ValueError("a matrix needs at least one row")
        width = len(rows[0])
        if width == 0:
            raise ValueError("a matrix needs at least one column")
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        return cls(len(rows), width, [x for row in rows for x in row])

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a ``rows``-by-``cols`` matrix of zeros."""
        return cls(rows, cols, [0.0] * max(rows * cols, 0))

    @classmethod
    def ones(cls, rows: int, cols: int) -> Matrix:
        """Return a ``rows``-by-``cols`` matrix of ones."""
        return cls(rows, cols, [1.0] * max(rows * cols, 0))

    @classmethod
    def eye(cls, n: int) -> Matrix:
        """Return the ``n``-by-``n`` identity matrix."""
        result = cls.zeros(n, n)
        for i in range(n):
            result[i, i] = 1.0
        return result

    def _offset(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index {index} out of range for {self.rows}x{self.cols} matrix")
        return i * self.cols + j

    def _row(self, i: int) -> list[float]:
        return self.data[i * self.cols : (i + 1) * self.cols]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self.data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self.data[self._offset(index)] = float(value)

    def _check_same_shape(self, other: Matrix) -> None:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(
                f"shape mismatch: {self.rows}x{self.cols} and {other.rows}x{other.cols}"
            )

    def transpose(self) -> Matrix:
        """Return the transpose."""
        return Matrix(
            self.cols,
            self.rows,
            [self.data[i * self.cols + j] for j in range(self.cols) for i in range(self.rows)],
        )

    def hadamard(self, other: Matrix) -> Matrix:
        """Return the elementwise product with a matrix of the same shape."""
        self._check_same_shape(other)
        return Matrix(self.rows, self.cols, [x * y for x, y in zip(self.data, other.data)])

    def trace(self) -> float:
        """Return the sum of the main diagonal of a square matrix."""
        if self.rows != self.cols:
            raise ValueError("trace is defined for square matrices only")
        return sum(self[i, i] for i in range(self.rows))

    def gaussian_elimination(self) -> None:
        """Eliminate the entries below the diagonal in place.

        Each row is rescaled rather than the pivot row; a zero pivot raises
        ZeroDivisionError.
        """
        for i in range(1, self.rows):
            for j in range(i):
                if self[i, j] != 0.0:
                    ratio = self[i, j] / self[j, j]
                    start = i * self.cols
                    self.data[start : start + self.cols] = [
                        a / ratio - b for a, b in zip(self._row(i), self._row(j))
                    ]

    def determinant(self) -> float:
        """Return the determinant by Laplace expansion along the first row."""
        if self.rows != self.cols:
            raise ValueError("determinant is defined for square matrices only")
        n = self.rows
        if n == 1:
            return self.data[0]
        result = 0.0
        for i, pivot in enumerate(self._row(0)):
            minor = Matrix(
                n - 1,
                n - 1,
                [self.data[r * n + c] for r in range(1, n) for c in range(n) if c != i],
            )
            sign = 1.0 if i % 2 == 0 else -1.0
            result += sign * pivot * minor.determinant()
        return result

    def __neg__(self) -> Matrix:
        return Matrix(self.rows, self.cols, [-x for x in self.data])

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(self.rows, self.cols, [x + y for x, y in zip(self.data, other.data)])

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(self.rows, self.cols, [x - y for x, y in zip(self.data, other.data)])

    def _scale(self, scalar: float) -> Matrix:
        return Matrix(self.rows, self.cols, [scalar * x for x in self.data])

    def _product(self, other: Matrix) -> Matrix:
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        columns = [
            [other.data[k * other.cols + j] for k in range(other.rows)]
            for j in range(other.cols)
        ]
        return Matrix(
            self.rows,
            other.cols,
            [
                sum(a * b for a, b in zip(self._row(i), column))
                for i in range(self.rows)
                for column in columns
            ],
        )

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._product(other)
        if isinstance(other, Real) and not isinstance(other, bool):
            return self._scale(float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, Real) and not isinstance(other, bool):
            return self._scale(float(other))
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._product(other)