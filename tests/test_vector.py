import math

import pytest

from aprilcommon.matrix import Matrix, MatrixError
from aprilcommon.vector import (
    cross,
    distance,
    dot,
    err_inf,
    is_vector,
    is_vector_len,
    magnitude,
    normalize,
)


def col(*values):
    return Matrix.from_data(len(values), 1, values)


def row(*values):
    return Matrix.from_data(1, len(values), values)


def test_is_vector_shapes():
    assert is_vector(col(1, 2, 3))
    assert is_vector(row(1, 2, 3))
    assert is_vector(Matrix.zeros(1, 1))
    assert not is_vector(Matrix.zeros(2, 2))
    assert not is_vector(Matrix.scalar(4))


def test_is_vector_len():
    assert is_vector_len(col(1, 2, 3), 3)
    assert is_vector_len(row(1, 2, 3), 3)
    assert not is_vector_len(col(1, 2, 3), 2)
    assert not is_vector_len(Matrix.zeros(3, 3), 3)


def test_magnitude_pythagorean():
    assert magnitude(row(3, 4)) == pytest.approx(5.0)


def test_magnitude_squared_is_self_dot():
    v = col(1.5, -2.0, 7.25, 0.5)
    assert magnitude(v) ** 2 == pytest.approx(dot(v, v))


def test_magnitude_rejects_non_vector():
    with pytest.raises(MatrixError):
        magnitude(Matrix.identity(2))


def test_distance_to_self_is_zero():
    v = col(4, -1, 9)
    assert distance(v, v) == 0.0


def test_distance_matches_magnitude_of_difference():
    a = col(1, 2, 3)
    b = col(-4, 0.5, 8)
    assert distance(a, b) == pytest.approx(magnitude(a - b))


def test_distance_row_and_column_interchangeable():
    a = col(1, 2, 3)
    b = row(7, -2, 5)
    assert distance(a, b) == pytest.approx(distance(a, b.transpose()))


def test_distance_prefix():
    a = col(1, 2, 100)
    b = col(1, 2, -100, 5)
    assert distance(a, b, 2) == 0.0
    with pytest.raises(MatrixError):
        distance(a, b)


def test_distance_n_too_large():
    with pytest.raises(MatrixError):
        distance(col(1, 2), col(1, 2, 3), 3)


def test_dot_is_symmetric():
    a = row(2, -3, 5)
    b = col(0.5, 4, -1)
    assert dot(a, b) == pytest.approx(dot(b, a))


def test_dot_length_mismatch():
    with pytest.raises(MatrixError):
        dot(col(1, 2), col(1, 2, 3))


def test_normalize_unit_length_and_shape():
    v = row(3, -7, 2)
    n = normalize(v)
    assert (n.nrows, n.ncols) == (v.nrows, v.ncols)
    assert magnitude(n) == pytest.approx(1.0)
    assert dot(n, v) == pytest.approx(magnitude(v))


def test_normalize_zero_vector():
    with pytest.raises(MatrixError):
        normalize(col(0, 0, 0))


def test_cross_of_basis_vectors():
    eye = Matrix.identity(3)
    x, y, z = (eye.select(0, 2, j, j) for j in range(3))
    assert err_inf(cross(x, y), z) == 0.0
    assert err_inf(cross(y, z), x) == 0.0
    assert err_inf(cross(z, x), y) == 0.0


def test_cross_is_orthogonal_and_anticommutative():
    a = col(1.5, -2, 3)
    b = col(4, 0.25, -6)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0, abs=1e-12)
    assert dot(c, b) == pytest.approx(0.0, abs=1e-12)
    assert err_inf(cross(b, a), -c) == pytest.approx(0.0, abs=1e-12)


def test_cross_keeps_shape_of_first_argument():
    c = cross(row(1, 2, 3), col(4, 5, 6))
    assert (c.nrows, c.ncols) == (1, 3)


def test_cross_requires_three_vectors():
    with pytest.raises(MatrixError):
        cross(col(1, 2), col(3, 4))


def test_err_inf_identity_and_symmetry():
    a = Matrix.from_data(2, 2, [1, 2, 3, 4])
    b = Matrix.from_data(2, 2, [1, -2, 3.5, 4])
    assert err_inf(a, a) == 0.0
    assert err_inf(a, b) == err_inf(b, a)
    assert err_inf(a, b) == pytest.approx(abs(a.get(0, 1) - b.get(0, 1)))


def test_err_inf_scalars_are_zero():
    assert err_inf(Matrix.scalar(3), Matrix.scalar(-3)) == 0.0


def test_err_inf_shape_mismatch():
    with pytest.raises(MatrixError):
        err_inf(Matrix.zeros(2, 2), Matrix.zeros(2, 3))


def test_magnitude_is_finite_for_large_vector():
    v = row(*range(1, 11))
    assert math.isfinite(magnitude(v))
    assert magnitude(v) == pytest.approx(math.sqrt(dot(v, v)))