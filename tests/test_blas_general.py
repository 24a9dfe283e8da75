import numpy as np
import pytest

from polykernels.blas_general import (
    dump_gemm,
    dump_gemver,
    dump_gesummv,
    init_gemm,
    init_gemver,
    init_gesummv,
    kernel_gemm,
    kernel_gemver,
    kernel_gesummv,
    run_gemm,
    run_gemver,
    run_gesummv,
)


def test_init_gemm_shapes_and_scalars():
    alpha, beta, C, A, B = init_gemm(4, 5, 6)
    assert (alpha, beta) == (1.5, 1.2)
    assert C.shape == (4, 5)
    assert A.shape == (4, 6)
    assert B.shape == (6, 5)
    assert C[0, 0] == pytest.approx(1 / 4)
    assert np.all((C >= 0) & (C < 1))


def test_init_gemm_rejects_non_positive():
    with pytest.raises(ValueError):
        init_gemm(0, 3, 3)


def test_kernel_gemm_identity_and_zero_beta():
    B = np.arange(12, dtype=float).reshape(3, 4)
    C = np.full((3, 4), 7.0)
    result = kernel_gemm(2.0, 0.0, C, np.eye(3), B)
    np.testing.assert_allclose(result, 2.0 * B)


def test_kernel_gemm_zero_alpha_scales_c():
    _, _, C, A, B = init_gemm(3, 4, 5)
    result = kernel_gemm(0.0, 3.0, C, A, B)
    np.testing.assert_allclose(result, 3.0 * C)


def test_kernel_gemm_leaves_inputs_untouched():
    alpha, beta, C, A, B = init_gemm(3, 4, 5)
    before = C.copy()
    kernel_gemm(alpha, beta, C, A, B)
    np.testing.assert_array_equal(C, before)


def test_kernel_gemm_shape_mismatch():
    with pytest.raises(ValueError):
        kernel_gemm(1.0, 1.0, np.zeros((2, 2)), np.zeros((2, 3)), np.zeros((2, 2)))


def test_dump_gemm_breaks_on_row_times_rows():
    text = dump_gemm(np.ones((3, 25)))["C"]
    assert text.count("\n") == 4
    assert text.startswith("\n1.00 ")
    assert len(text.split()) == 75


def test_run_gemm_matches_pipeline():
    expected = dump_gemm(kernel_gemm(*init_gemm(20, 25, 30)))
    assert run_gemm("mini") == expected


def test_run_gemm_unknown_dataset():
    with pytest.raises(ValueError):
        run_gemm("huge")


def test_init_gemver_vectors():
    alpha, beta, A, u1, v1, u2, v2, w, x, y, z = init_gemver(8)
    assert (alpha, beta) == (1.5, 1.2)
    np.testing.assert_array_equal(u1, np.arange(8))
    np.testing.assert_array_equal(w, np.zeros(8))
    np.testing.assert_array_equal(x, np.zeros(8))
    np.testing.assert_allclose(u2, 2 * v1)
    assert A.shape == (8, 8)


def test_kernel_gemver_identity_case():
    n = 5
    zeros = np.zeros(n)
    z = np.arange(1, n + 1, dtype=float)
    A, x, w = kernel_gemver(2.0, 1.0, np.eye(n), zeros, zeros, zeros, zeros,
                            zeros, zeros, zeros, z)
    np.testing.assert_allclose(A, np.eye(n))
    np.testing.assert_allclose(x, z)
    np.testing.assert_allclose(w, 2.0 * z)


def test_kernel_gemver_symmetric_update_stays_symmetric():
    alpha, beta, A, u1, _, u2, _, w, x, y, z = init_gemver(6)
    sym = A + A.T
    A2, _, _ = kernel_gemver(alpha, beta, sym, u1, u1, u2, u2, w, x, y, z)
    np.testing.assert_allclose(A2, A2.T)


def test_kernel_gemver_size_mismatch():
    args = list(init_gemver(4))
    args[3] = np.zeros(3)
    with pytest.raises(ValueError):
        kernel_gemver(*args)


def test_run_gemver_matches_pipeline():
    _, _, w = kernel_gemver(*init_gemver(40))
    assert run_gemver("MINI") == dump_gemver(w)
    assert len(run_gemver("mini")["w"].split()) == 40


def test_kernel_gesummv_identity_cases():
    x = np.array([1.0, -2.0, 3.0])
    np.testing.assert_allclose(kernel_gesummv(1.5, 1.2, np.eye(3), np.zeros((3, 3)), x), 1.5 * x)
    np.testing.assert_allclose(kernel_gesummv(1.5, 1.2, np.zeros((3, 3)), np.eye(3), x), 1.2 * x)


def test_init_gesummv_values():
    alpha, beta, A, B, x = init_gesummv(5)
    assert (alpha, beta) == (1.5, 1.2)
    np.testing.assert_allclose(x, np.arange(5) / 5)
    assert A[0, 0] == pytest.approx(1 / 5)
    assert B[0, 0] == pytest.approx(2 / 5)


def test_kernel_gesummv_shape_mismatch():
    with pytest.raises(ValueError):
        kernel_gesummv(1.0, 1.0, np.eye(3), np.eye(2), np.ones(3))


def test_dump_and_run_gesummv():
    text = dump_gesummv(np.ones(21))["y"]
    assert text.count("\n") == 2
    assert run_gesummv("mini") == dump_gesummv(kernel_gesummv(*init_gesummv(30)))