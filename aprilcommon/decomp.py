"""Determinants, inverses and linear solves via PLU and Cholesky factorisations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .matrix import Matrix, MatrixError

__all__ = [
    "EPS",
    "PLU",
    "Cholesky",
    "plu",
    "det",
    "inverse",
    "solve",
    "chol",
    "chol_inverse",
    "ltranspose_triangle_solve",
    "ltriangle_solve",
    "utriangle_solve",
]

# Pivots smaller than this in magnitude mark a matrix as (nearly) singular.
EPS = 1e-8


def _rows(m: Matrix) -> list[list[float]]:
    n = m.ncols
    return [m.data[i * n : (i + 1) * n] for i in range(m.nrows)]


def _from_rows(rows: list[list[float]]) -> Matrix:
    if not rows or not rows[0]:
        return Matrix.scalar(0.0)
    return Matrix.from_data(len(rows), len(rows[0]), [v for row in rows for v in row])


def _require_square(a: Matrix) -> None:
    if a.nrows != a.ncols:
        raise MatrixError(f"a {a.nrows}x{a.ncols} matrix is not square")


@dataclass
class PLU:
    """A partially pivoted LU factorisation with ``A = P L U``.

    ``lu`` holds L (below the diagonal, unit diagonal implied) and U (on and
    above the diagonal) together; ``piv`` is the row permutation.
    """

    lu: Matrix
    piv: list[int]
    pivsign: int
    singular: bool

    def det(self) -> float:
        """The determinant of the factored matrix."""
        result = float(self.pivsign)
        if self.lu.nrows == self.lu.ncols:
            for i, row in enumerate(_rows(self.lu)):
                result *= row[i]
        return result

    def p(self) -> Matrix:
        """The permutation matrix P."""
        n = self.lu.nrows
        rows = [[0.0] * n for _ in range(n)]
        for i, target in enumerate(self.piv):
            rows[target][i] = 1.0
        return _from_rows(rows)

    def l(self) -> Matrix:  # noqa: E743
        """The unit lower-triangular factor L."""
        lu = _rows(self.lu)
        rows = [
            [row[j] if j < i else (1.0 if j == i else 0.0) for j in range(self.lu.ncols)]
            for i, row in enumerate(lu)
        ]
        return _from_rows(rows)

    def u(self) -> Matrix:
        """The upper-triangular factor U."""
        n = self.lu.ncols
        lu = _rows(self.lu)
        rows = [[lu[i][j] if i <= j else 0.0 for j in range(n)] for i in range(n)]
        return _from_rows(rows)

    def solve(self, b: Matrix) -> Matrix:
        """Solve ``A x = b`` for ``x``; ``b`` may have several columns."""
        n = self.lu.nrows
        if b.nrows != n:
            raise MatrixError(
                f"right-hand side has {b.nrows} rows, expected {n}"
            )
        lu = _rows(self.lu)
        brows = _rows(b)
        x = [list(brows[p]) for p in self.piv]

        # forward substitution with the unit lower triangle
        for k in range(n):
            xk = x[k]
            for i in range(k + 1, n):
                factor = -lu[i][k]
                x[i] = [xi + xkv * factor for xi, xkv in zip(x[i], xk)]

        # back substitution with the upper triangle
        for k in range(n - 1, -1, -1):
            inv = 1.0 / lu[k][k]
            x[k] = [v * inv for v in x[k]]
            xk = x[k]
            for i in range(k):
                factor = -lu[i][k]
                x[i] = [xi + xkv * factor for xi, xkv in zip(x[i], xk)]

        return _from_rows(x)


def plu(a: Matrix) -> PLU:
    """Factor a square matrix as ``P L U`` with partial pivoting."""
    _require_square(a)
    n = a.nrows
    lu = _rows(a)
    piv = list(range(n))
    pivsign = 1
    singular = False

    for j in range(n):
        for i in range(n):
            kmax = min(i, j)
            acc = 0.0
            for k in range(kmax):
                acc += lu[i][k] * lu[k][j]
            lu[i][j] -= acc

        p = j
        for i in range(j + 1, n):
            if abs(lu[i][j]) > abs(lu[p][j]):
                p = i

        if p != j:
            lu[p], lu[j] = lu[j], lu[p]
            piv[p], piv[j] = piv[j], piv[p]
            pivsign = -pivsign

        pivot = lu[j][j]
        if abs(pivot) < EPS:
            singular = True

        if pivot != 0:
            inv = 1.0 / pivot
            for i in range(j + 1, n):
                lu[i][j] *= inv

    lu_matrix = _from_rows(lu) if n else a.copy()
    return PLU(lu=lu_matrix, piv=piv, pivsign=pivsign, singular=singular)


def _det_general(a: Matrix) -> float:
    factor = plu(a)
    lu = _rows(factor.lu)
    det_l = 1.0
    det_u = 1.0
    for i, row in enumerate(lu):
        det_u *= row[i]
    return factor.pivsign * det_l * det_u


def det(a: Matrix) -> float:
    """The determinant of a square, non-scalar matrix."""
    _require_square(a)
    d = a.data
    n = a.nrows
    if n == 0:
        raise MatrixError("the determinant of a scalar is not defined")
    if n == 1:
        return d[0]
    if n == 2:
        return d[0] * d[3] - d[1] * d[2]
    if n == 3:
        return (
            d[0] * d[4] * d[8]
            - d[0] * d[5] * d[7]
            + d[1] * d[5] * d[6]
            - d[1] * d[3] * d[8]
            + d[2] * d[3] * d[7]
            - d[2] * d[4] * d[6]
        )
    if n == 4:
        (m00, m01, m02, m03,
         m10, m11, m12, m13,
         m20, m21, m22, m23,
         m30, m31, m32, m33) = d
        return (
            m00 * m11 * m22 * m33 - m00 * m11 * m23 * m32
            - m00 * m21 * m12 * m33 + m00 * m21 * m13 * m32
            + m00 * m31 * m12 * m23 - m00 * m31 * m13 * m22
            - m10 * m01 * m22 * m33 + m10 * m01 * m23 * m32
            + m10 * m21 * m02 * m33 - m10 * m21 * m03 * m32
            - m10 * m31 * m02 * m23 + m10 * m31 * m03 * m22
            + m20 * m01 * m12 * m33 - m20 * m01 * m13 * m32
            - m20 * m11 * m02 * m33 + m20 * m11 * m03 * m32
            + m20 * m31 * m02 * m13 - m20 * m31 * m03 * m12
            - m30 * m01 * m12 * m23 + m30 * m01 * m13 * m22
            + m30 * m11 * m02 * m23 - m30 * m11 * m03 * m22
            - m30 * m21 * m02 * m13 + m30 * m21 * m03 * m12
        )
    return _det_general(a)


def inverse(a: Matrix) -> Matrix:
    """The inverse of a square matrix.

    Scalars and 1x1 matrices invert to a scalar. Raises :class:`MatrixError`
    when the matrix is singular.
    """
    _require_square(a)
    if a.is_scalar():
        if a.data[0] == 0:
            raise MatrixError("matrix is singular")
        return Matrix.scalar(1.0 / a.data[0])

    if a.nrows == 2:
        x00, x01, x10, x11 = a.data
        d = x00 * x11 - x01 * x10
        if d == 0:
            raise MatrixError("matrix is singular")
        inv = 1.0 / d
        return Matrix.from_data(
            2, 2, [x11 * inv, -x01 * inv, -x10 * inv, x00 * inv]
        )

    factor = plu(a)
    if factor.singular:
        raise MatrixError("matrix is singular")
    return factor.solve(Matrix.identity(a.nrows))


def solve(a: Matrix, b: Matrix) -> Matrix:
    """Solve ``a x = b`` using a PLU factorisation of ``a``."""
    return plu(a).solve(b)


@dataclass
class Cholesky:
    """An upper-triangular Cholesky factor ``u`` with ``A = u' u``."""

    u: Matrix
    is_spd: bool

    def solve(self, b: Matrix) -> Matrix:
        """Solve ``A x = b`` using the factorisation."""
        u = _rows(self.u)
        n = self.u.nrows
        if b.nrows != n:
            raise MatrixError(
                f"right-hand side has {b.nrows} rows, expected {n}"
            )
        x = _rows(b)

        # solve (u') y = b
        for i in range(n):
            for j in range(i):
                lij = u[j][i]
                x[i] = [xi - lij * xj for xi, xj in zip(x[i], x[j])]
            diag = u[i][i]
            x[i] = [v / diag for v in x[i]]

        # solve u x = y
        for k in range(n - 1, -1, -1):
            inv = 1.0 / u[k][k]
            x[k] = [v * inv for v in x[k]]
            xk = x[k]
            for i in range(k):
                factor = -u[i][k]
                x[i] = [xi + xkv * factor for xi, xkv in zip(x[i], xk)]

        return _from_rows(x)


def chol(a: Matrix) -> Cholesky:
    """Cholesky-factor a square matrix; only the upper triangle of ``a`` is used.

    The lower triangle of the returned ``u`` keeps the input's values.
    """
    _require_square(a)
    n = a.nrows
    u = _rows(a)
    is_spd = True

    for i in range(n):
        d = u[i][i]
        is_spd = is_spd and d > 0
        if d < EPS:
            d = EPS
        d = 1.0 / math.sqrt(d)

        row_i = u[i]
        for j in range(i, n):
            row_i[j] *= d

        for j in range(i + 1, n):
            s = row_i[j]
            if s == 0:
                continue
            row_j = u[j]
            for k in range(j, n):
                row_j[k] -= row_i[k] * s

    u_matrix = _from_rows(u) if n else a.copy()
    return Cholesky(u=u_matrix, is_spd=is_spd)


def chol_inverse(a: Matrix) -> Matrix:
    """The inverse of a positive-definite matrix via Cholesky."""
    _require_square(a)
    return chol(a).solve(Matrix.identity(a.nrows))


def ltranspose_triangle_solve(u: Matrix, b: Sequence[float]) -> list[float]:
    """Solve ``u' x = b`` where ``u`` is upper triangular."""
    n = u.ncols
    rows = _rows(u)
    if len(b) < n:
        raise MatrixError(f"need {n} right-hand values, got {len(b)}")
    x = [float(v) for v in b[:n]]
    for i in range(n):
        x[i] /= rows[i][i]
        for j in range(i + 1, n):
            x[j] -= x[i] * rows[i][j]
    return x


def ltriangle_solve(l: Matrix, b: Sequence[float]) -> list[float]:  # noqa: E741
    """Solve ``l x = b`` where ``l`` is lower triangular."""
    n = l.ncols
    rows = _rows(l)
    if len(b) < n:
        raise MatrixError(f"need {n} right-hand values, got {len(b)}")
    x: list[float] = []
    for i in range(n):
        acc = float(b[i])
        for j in range(i):
            acc -= rows[i][j] * x[j]
        x.append(acc / rows[i][i])
    return x


def utriangle_solve(u: Matrix, b: Sequence[float]) -> list[float]:
    """Solve ``u x = b`` where ``u`` is upper triangular."""
    n = u.ncols
    rows = _rows(u)
    if len(b) < n:
        raise MatrixError(f"need {n} right-hand values, got {len(b)}")
    x = [0.0] * n
    for i in range(n - 1, -1, -1):
        bi = float(b[i])
        for j in range(i + 1, n):
            bi -= rows[i][j] * x[j]
        x[i] = bi / rows[i][i]
    return x