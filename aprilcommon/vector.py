"""Vector helpers for row or column matrices.

A vector is any :class:`~aprilcommon.matrix.Matrix` with exactly one row or
exactly one column. Row and column vectors of the same length are
interchangeable in these functions.
"""

from __future__ import annotations

import math

from .matrix import Matrix, MatrixError

__all__ = [
    "is_vector",
    "is_vector_len",
    "magnitude",
    "distance",
    "dot",
    "normalize",
    "cross",
    "err_inf",
]


def is_vector(m: Matrix) -> bool:
    """True if ``m`` has exactly one row or exactly one column."""
    return m.ncols == 1 or m.nrows == 1


def is_vector_len(m: Matrix, length: int) -> bool:
    """True if ``m`` is a row or column vector with ``length`` elements."""
    return (m.ncols == 1 and m.nrows == length) or (
        m.ncols == length and m.nrows == 1
    )


def _values(m: Matrix) -> list[float]:
    if not is_vector(m):
        raise MatrixError(f"a {m.nrows}x{m.ncols} matrix is not a vector")
    return m.data[: m.nrows * m.ncols]


def magnitude(a: Matrix) -> float:
    """The Euclidean length of vector ``a``."""
    return math.sqrt(sum(v * v for v in _values(a)))


def distance(a: Matrix, b: Matrix, n: int | None = None) -> float:
    """Euclidean distance between two vectors.

    With ``n`` given, only the first ``n`` elements are compared and the
    vectors may differ in length; otherwise they must be the same length.
    """
    va = _values(a)
    vb = _values(b)
    if n is None:
        if len(va) != len(vb):
            raise MatrixError(
                f"vector lengths differ: {len(va)} vs {len(vb)}"
            )
        n = len(va)
    if n < 0 or n > len(va) or n > len(vb):
        raise MatrixError(
            f"cannot compare {n} elements of vectors of length "
            f"{len(va)} and {len(vb)}"
        )
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(va[:n], vb[:n])))


def dot(a: Matrix, b: Matrix) -> float:
    """The dot product of two vectors of equal length."""
    va = _values(a)
    vb = _values(b)
    if len(va) != len(vb):
        raise MatrixError(f"vector lengths differ: {len(va)} vs {len(vb)}")
    return sum(x * y for x, y in zip(va, vb))


def normalize(a: Matrix) -> Matrix:
    """A unit vector with the shape and direction of ``a``."""
    mag = magnitude(a)
    if not mag > 0:
        raise MatrixError("cannot normalize a vector of zero magnitude")
    return Matrix(a.nrows, a.ncols, [v / mag for v in a.data])


def cross(a: Matrix, b: Matrix) -> Matrix:
    """The cross product ``a x b`` of two 3-vectors, shaped like ``a``."""
    if not (is_vector_len(a, 3) and is_vector_len(b, 3)):
        raise MatrixError("cross product needs two vectors of length 3")
    a0, a1, a2 = a.data[:3]
    b0, b1, b2 = b.data[:3]
    return Matrix(
        a.nrows,
        a.ncols,
        [a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0],
    )


def err_inf(a: Matrix, b: Matrix) -> float:
    """The largest absolute element-wise difference of two same-shape matrices."""
    if a.nrows != b.nrows or a.ncols != b.ncols:
        raise MatrixError(
            f"shape mismatch: {a.nrows}x{a.ncols} vs {b.nrows}x{b.ncols}"
        )
    count = a.nrows * a.ncols
    return max(
        (abs(x - y) for x, y in zip(a.data[:count], b.data[:count])),
        default=0.0,
    )