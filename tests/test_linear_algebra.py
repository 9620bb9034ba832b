import pytest

from cpkit.linear_algebra import determinant, identity, mat_mul, mat_pow

A = [[2, -1, 3], [0, 4, 1], [5, 2, -2]]
B = [[1, 2, 0], [3, -1, 4], [2, 0, 1]]


def test_determinant_of_identity():
    assert determinant(identity(4)) == pytest.approx(1.0)


def test_singular_matrix_has_zero_determinant():
    assert determinant([[1, 2, 3], [2, 4, 6], [0, 1, 5]]) == 0.0


def test_determinant_is_multiplicative():
    assert determinant(mat_mul(A, B)) == pytest.approx(determinant(A) * determinant(B))


def test_row_swap_negates():
    swapped = [A[1], A[0], A[2]]
    assert determinant(swapped) == pytest.approx(-determinant(A))


def test_triangular_determinant_is_diagonal_product():
    t = [[3, 7, -2], [0, -4, 5], [0, 0, 6]]
    assert determinant(t) == pytest.approx(3 * -4 * 6)


def test_determinant_requires_square():
    with pytest.raises(ValueError):
        determinant([[1, 2, 3], [4, 5, 6]])


def test_identity_is_neutral():
    assert mat_mul(identity(3), A) == A
    assert mat_mul(A, identity(3)) == A


def test_mat_mul_dimension_mismatch():
    with pytest.raises(ValueError):
        mat_mul([[1, 2]], [[1, 2]])


def test_mat_pow_zero_is_identity():
    assert mat_pow(A, 0) == identity(3)


def test_mat_pow_adds_exponents():
    assert mat_pow(A, 7) == mat_mul(mat_pow(A, 3), mat_pow(A, 4))


def test_mat_pow_mod_matches_exact():
    mod = 1_000_000_007
    exact = mat_pow(A, 20)
    assert mat_pow(A, 20, mod) == [[v % mod for v in row] for row in exact]


def test_fibonacci_recurrence():
    m = [[1, 1], [1, 0]]
    fib = [mat_pow(m, n)[0][1] for n in range(30)]
    for n in range(28):
        assert fib[n + 2] == fib[n + 1] + fib[n]


def test_mat_pow_negative_exponent():
    with pytest.raises(ValueError):
        mat_pow(A, -1)


def test_mat_pow_requires_square():
    with pytest.raises(ValueError):
        mat_pow([[1, 2, 3], [4, 5, 6]], 2)