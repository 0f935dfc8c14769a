"""Dense double-precision matrices stored in row-major order.

A matrix with zero rows or zero columns is a *scalar* holding one value.
Following the arithmetic rules of this library, any matrix whose dimensions
are both at most one (a 0x0 scalar or a 1x1 matrix) behaves as a scalar in
multiplication, scaling, addition and transposition.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable

__all__ = ["MatrixError", "Matrix"]


class MatrixError(ValueError):
    """Raised when a matrix operation receives incompatible operands."""


@dataclass
class Matrix:
    """A row-major matrix of floats; ``nrows == ncols == 0`` marks a scalar."""

    nrows: int
    ncols: int
    data: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.nrows < 0 or self.ncols < 0:
            raise MatrixError("matrix dimensions must be non-negative")
        if self.nrows == 0 or self.ncols == 0:
            self.nrows = 0
            self.ncols = 0
        expected = max(1, self.nrows * self.ncols)
        if not self.data:
            self.data = [0.0] * expected
        else:
            self.data = [float(v) for v in self.data]
        if len(self.data) != expected:
            raise MatrixError(
                f"a {self.nrows}x{self.ncols} matrix needs {expected} values, "
                f"got {len(self.data)}"
            )

    # ------------------------------------------------------------------
    # construction

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """A rows x cols matrix of zeros, or the scalar 0 if either is 0."""
        if rows < 0 or cols < 0:
            raise MatrixError("matrix dimensions must be non-negative")
        if rows == 0 or cols == 0:
            return cls.scalar(0.0)
        return cls(rows, cols, [0.0] * (rows * cols))

    @classmethod
    def scalar(cls, value: float) -> "Matrix":
        """A scalar (0x0) matrix holding ``value``."""
        return cls(0, 0, [float(value)])

    @classmethod
    def from_data(cls, rows: int, cols: int, data: Iterable[float]) -> "Matrix":
        """A matrix filled from row-major ``data`` (at least rows*cols values)."""
        if rows < 0 or cols < 0:
            raise MatrixError("matrix dimensions must be non-negative")
        values = [float(v) for v in data]
        if rows == 0 or cols == 0:
            if not values:
                raise MatrixError("a scalar needs one value")
            return cls.scalar(values[0])
        count = rows * cols
        if len(values) < count:
            raise MatrixError(
                f"a {rows}x{cols} matrix needs {count} values, got {len(values)}"
            )
        return cls(rows, cols, values[:count])

    @classmethod
    def identity(cls, dim: int) -> "Matrix":
        """The dim x dim identity, or the scalar 1 when ``dim`` is 0."""
        if dim < 0:
            raise MatrixError("matrix dimensions must be non-negative")
        if dim == 0:
            return cls.scalar(1.0)
        m = cls.zeros(dim, dim)
        for i in range(dim):
            m.data[i * dim + i] = 1.0
        return m

    # ------------------------------------------------------------------
    # element access

    def is_scalar(self) -> bool:
        """True for 0x0 scalars and for 1x1 matrices."""
        return self.nrows <= 1 and self.ncols <= 1

    def _offset(self, row: int, col: int) -> int:
        rows = max(self.nrows, 1)
        cols = max(self.ncols, 1)
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexError(
                f"index ({row}, {col}) out of range for {self.nrows}x{self.ncols}"
            )
        return row * cols + col

    def get(self, row: int, col: int) -> float:
        """The element at (row, col); not allowed on scalars."""
        if self.is_scalar():
            raise MatrixError("get() is not defined for scalars")
        if not (0 <= row < self.nrows and 0 <= col < self.ncols):
            raise MatrixError(
                f"index ({row}, {col}) out of range for {self.nrows}x{self.ncols}"
            )
        return self.data[row * self.ncols + col]

    def put(self, row: int, col: int, value: float) -> None:
        """Store ``value`` at (row, col); a scalar ignores the indices."""
        if self.is_scalar():
            self.data[0] = float(value)
            return
        if not (0 <= row < self.nrows and 0 <= col < self.ncols):
            raise MatrixError(
                f"index ({row}, {col}) out of range for {self.nrows}x{self.ncols}"
            )
        self.data[row * self.ncols + col] = float(value)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.data[self._offset(row, col)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self.data[self._offset(row, col)] = float(value)

    def copy(self) -> "Matrix":
        """An independent copy of this matrix."""
        return Matrix(self.nrows, self.ncols, list(self.data))

    def select(self, r0: int, r1: int, c0: int, c1: int) -> "Matrix":
        """The sub-matrix of rows r0..r1 and columns c0..c1, inclusive."""
        if not (0 <= r0 < self.nrows and 0 <= c0 < self.ncols):
            raise MatrixError("selection start lies outside the matrix")
        if not (r0 <= r1 < self.nrows and c0 <= c1 < self.ncols):
            raise MatrixError("selection end lies outside the matrix")
        rows = self._rows()[r0 : r1 + 1]
        return Matrix.from_data(
            r1 - r0 + 1, c1 - c0 + 1, [v for row in rows for v in row[c0 : c1 + 1]]
        )

    def _rows(self) -> list[list[float]]:
        n = self.ncols
        return [self.data[i * n : (i + 1) * n] for i in range(self.nrows)]

    def _columns(self) -> list[list[float]]:
        n = self.ncols
        return [self.data[j::n] for j in range(n)]

    # ------------------------------------------------------------------
    # text output

    def format(self, fmt: str) -> str:
        """Each element rendered with printf-style ``fmt``, one line per row."""
        if self.is_scalar():
            return fmt % self.data[0] + "\n"
        return "".join(
            "".join(fmt % v for v in row) + "\n" for row in self._rows()
        )

    def format_transpose(self, fmt: str) -> str:
        """Like :meth:`format`, but one line per column."""
        if self.is_scalar():
            return fmt % self.data[0] + "\n"
        return "".join(
            "".join(fmt % v for v in col) + "\n" for col in self._columns()
        )

    # ------------------------------------------------------------------
    # arithmetic

    def _check_same_shape(self, other: "Matrix") -> None:
        if self.nrows != other.nrows or self.ncols != other.ncols:
            raise MatrixError(
                f"shape mismatch: {self.nrows}x{self.ncols} vs "
                f"{other.nrows}x{other.ncols}"
            )

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        if self.is_scalar():
            return Matrix.scalar(self.data[0] + other.data[0])
        return Matrix(
            self.nrows, self.ncols, [a + b for a, b in zip(self.data, other.data)]
        )

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        if self.is_scalar():
            return Matrix.scalar(self.data[0] - other.data[0])
        return Matrix(
            self.nrows, self.ncols, [a - b for a, b in zip(self.data, other.data)]
        )

    def __iadd__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self.data = [a + b for a, b in zip(self.data, other.data)]
        return self

    def __isub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self.data = [a - b for a, b in zip(self.data, other.data)]
        return self

    def __neg__(self) -> "Matrix":
        return self.scale(-1.0)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.is_scalar():
            return other.scale(self.data[0])
        if other.is_scalar():
            return self.scale(other.data[0])
        if self.ncols != other.nrows:
            raise MatrixError(
                f"cannot multiply {self.nrows}x{self.ncols} by "
                f"{other.nrows}x{other.ncols}"
            )
        columns = other._columns()
        data = [
            sum(a * b for a, b in zip(row, col))
            for row in self._rows()
            for col in columns
        ]
        return Matrix(self.nrows, other.ncols, data)

    def scale(self, s: float) -> "Matrix":
        """A new matrix with every element multiplied by ``s``."""
        if self.is_scalar():
            return Matrix.scalar(self.data[0] * s)
        return Matrix(self.nrows, self.ncols, [s * v for v in self.data])

    def scale_inplace(self, s: float) -> None:
        """Multiply every element by ``s`` in place."""
        self.data = [v * s for v in self.data]

    def transpose(self) -> "Matrix":
        """The transpose; scalars (and 1x1 matrices) come back as scalars."""
        if self.is_scalar():
            return Matrix.scalar(self.data[0])
        return Matrix(
            self.ncols, self.nrows, [v for col in self._columns() for v in col]
        )

    def max(self) -> float:
        """The largest element; the most negative float for a 0x0 scalar."""
        return max(self.data[: self.nrows * self.ncols], default=-sys.float_info.max)