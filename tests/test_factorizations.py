import numpy as np
import pytest

from polykernels.factorizations import (
    dump_cholesky,
    dump_lu,
    dump_ludcmp,
    init_cholesky,
    init_lu,
    init_ludcmp,
    kernel_cholesky,
    kernel_lu,
    kernel_ludcmp,
    run_cholesky,
    run_lu,
    run_ludcmp,
)


def test_init_cholesky_is_symmetric_positive_definite():
    A = init_cholesky(10)
    assert A.shape == (10, 10)
    assert np.allclose(A, A.T)
    assert np.all(np.linalg.eigvalsh(A) > 0)


def test_init_lu_matches_cholesky_input():
    assert np.array_equal(init_lu(7), init_cholesky(7))


def test_cholesky_factor_reconstructs_input():
    A = init_cholesky(12)
    result = kernel_cholesky(A)
    L = np.tril(result)
    assert np.allclose(L @ L.T, A)
    assert np.allclose(L, np.linalg.cholesky(A))


def test_cholesky_keeps_upper_triangle_and_input():
    A = init_cholesky(6)
    original = A.copy()
    result = kernel_cholesky(A)
    assert np.array_equal(np.triu(result, 1), np.triu(original, 1))
    assert np.array_equal(A, original)


def test_lu_factors_reconstruct_input():
    A = init_lu(9)
    packed = kernel_lu(A)
    L = np.tril(packed, -1) + np.eye(9)
    U = np.triu(packed)
    assert np.allclose(L @ U, A)


def test_ludcmp_solves_system():
    A, b = init_ludcmp(15)
    x = kernel_ludcmp(A, b)
    assert np.allclose(A @ x, b)
    assert np.allclose(x, np.linalg.solve(A, b))


def test_ludcmp_b_formula_endpoints():
    _, b = init_ludcmp(4)
    assert b[0] == pytest.approx(1 / 4 / 2 + 4)
    assert b[-1] == pytest.approx(4 / 4 / 2 + 4)


def test_dump_cholesky_lower_triangle_only():
    text = dump_cholesky([[1.0, 9.0], [2.0, 3.0]])["A"]
    assert text == "\n1.00 2.00 3.00 "


def test_dump_counts():
    A = init_cholesky(5)
    assert len(dump_cholesky(A)["A"].split()) == 15
    assert len(dump_lu(A)["A"].split()) == 25
    assert len(dump_ludcmp(np.ones(5))["x"].split()) == 5


def test_run_mini_entry_counts():
    assert len(run_cholesky("mini")["A"].split()) == 40 * 41 // 2
    assert len(run_lu("mini")["A"].split()) == 40 * 40
    assert len(run_ludcmp("mini")["x"].split()) == 40


def test_run_ludcmp_matches_solution():
    A, b = init_ludcmp(40)
    expected = dump_ludcmp(np.linalg.solve(A, b))
    assert run_ludcmp("MINI") == expected


@pytest.mark.parametrize("init", [init_cholesky, init_lu, init_ludcmp])
def test_init_rejects_non_positive(init):
    with pytest.raises(ValueError):
        init(0)


@pytest.mark.parametrize("kernel", [kernel_cholesky, kernel_lu])
def test_kernels_reject_non_square(kernel):
    with pytest.raises(ValueError):
        kernel(np.ones((2, 3)))


def test_ludcmp_rejects_mismatched_b():
    with pytest.raises(ValueError):
        kernel_ludcmp(np.eye(3), np.ones(4))