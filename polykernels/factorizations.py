"""Matrix factorisation benchmarks: Cholesky, LU and LU-based linear solve."""

from __future__ import annotations

import numpy as np

from polykernels.dataset import DEFAULT_DATASET, DatasetSize, format_entries

_SIZES = {
    DatasetSize.MINI: 40,
    DatasetSize.SMALL: 120,
    DatasetSize.MEDIUM: 400,
    DatasetSize.LARGE: 2000,
    DatasetSize.EXTRALARGE: 4000,
}


def _check_positive(n: int) -> None:
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")


def _square(values, name: str) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"{name} must be a square 2-D array")
    return array


def _positive_semidefinite(n: int) -> np.ndarray:
    """Build the shared input matrix: a lower-triangular seed times its transpose."""
    _check_positive(n)
    i = np.arange(n)[:, None]
    j = np.arange(n)[None, :]
    # For 0 <= j < n the truncating remainder of -j by n is -j itself.
    seed = np.where(j <= i, -j / n + 1.0, 0.0)
    np.fill_diagonal(seed, 1.0)
    return seed @ seed.T


def _size(dataset) -> int:
    return _SIZES[DatasetSize.parse(dataset)]


def _lu_in_place(A: np.ndarray) -> None:
    n = A.shape[0]
    for i in range(n):
        for j in range(i):
            A[i, j] = (A[i, j] - A[i, :j] @ A[:j, j]) / A[j, j]
        A[i, i:] -= A[i, :i] @ A[:i, i:]


def init_cholesky(n: int) -> np.ndarray:
    """Return a symmetric positive-definite ``n``-by-``n`` matrix."""
    return _positive_semidefinite(n)


def kernel_cholesky(A) -> np.ndarray:
    """Return ``A`` with its lower triangle replaced by the Cholesky factor.

    The strict upper triangle is left as it was given.
    """
    A = _square(A, "A")
    n = A.shape[0]
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(n):
            for j in range(i):
                A[i, j] = (A[i, j] - A[i, :j] @ A[j, :j]) / A[j, j]
            A[i, i] = np.sqrt(A[i, i] - A[i, :i] @ A[i, :i])
    return A


def dump_cholesky(A) -> dict[str, str]:
    """Return the textual dump of the lower triangle of ``A``."""
    A = _square(A, "A")
    n = A.shape[0]
    entries = (
        (i * n + j, A[i, j]) for i in range(n) for j in range(i + 1)
    )
    return {"A": format_entries(entries)}


def run_cholesky(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the Cholesky benchmark."""
    return dump_cholesky(kernel_cholesky(init_cholesky(_size(dataset))))


def init_lu(n: int) -> np.ndarray:
    """Return the ``n``-by-``n`` input matrix of the LU benchmark."""
    return _positive_semidefinite(n)


def kernel_lu(A) -> np.ndarray:
    """Return the packed LU factors of ``A`` without pivoting.

    The strict lower triangle holds the unit lower factor, the rest the upper factor.
    """
    A = _square(A, "A")
    with np.errstate(divide="ignore", invalid="ignore"):
        _lu_in_place(A)
    return A


def dump_lu(A) -> dict[str, str]:
    """Return the textual dump of ``A`` keyed by array name."""
    A = _square(A, "A")
    return {"A": format_entries(enumerate(A.ravel()))}


def run_lu(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the LU benchmark."""
    return dump_lu(kernel_lu(init_lu(_size(dataset))))


def init_ludcmp(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(A, b)``: the shared input matrix and ``b[i] = (i+1)/n/2 + 4``."""
    A = _positive_semidefinite(n)
    b = (np.arange(n, dtype=float) + 1) / float(n) / 2.0 + 4
    return A, b


def kernel_ludcmp(A, b) -> np.ndarray:
    """Solve ``A x = b`` by LU decomposition and forward and back substitution."""
    A = _square(A, "A")
    b = np.asarray(b, dtype=float)
    n = A.shape[0]
    if b.ndim != 1 or b.size != n:
        raise ValueError("b must be a 1-D array matching the size of A")
    y = np.empty(n)
    x = np.empty(n)
    with np.errstate(divide="ignore", invalid="ignore"):
        _lu_in_place(A)
        for i in range(n):
            y[i] = b[i] - A[i, :i] @ y[:i]
        for i in reversed(range(n)):
            x[i] = (y[i] - A[i, i + 1 :] @ x[i + 1 :]) / A[i, i]
    return x


def dump_ludcmp(x) -> dict[str, str]:
    """Return the textual dump of ``x`` keyed by array name."""
    x = np.asarray(x, dtype=float)
    if x.ndim != 1:
        raise ValueError("x must be a 1-D array")
    return {"x": format_entries(enumerate(x))}


def run_ludcmp(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the LU-solve benchmark."""
    return dump_ludcmp(kernel_ludcmp(*init_ludcmp(_size(dataset))))