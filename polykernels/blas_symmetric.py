"""Symmetric and triangular BLAS benchmarks: symm, syr2k, syrk and trmm."""

from __future__ import annotations

import numpy as np

from polykernels.dataset import DEFAULT_DATASET, DatasetSize, format_entries

# (M, N) for every benchmark in this module.
_SIZES = {
    DatasetSize.MINI: (20, 30),
    DatasetSize.SMALL: (60, 80),
    DatasetSize.MEDIUM: (200, 240),
    DatasetSize.LARGE: (1000, 1200),
    DatasetSize.EXTRALARGE: (2000, 2600),
}

_ALPHA = 1.5
_BETA = 1.2

# Marks the part of A that symm must never read.
_UNUSED = -999.0


def _check_positive(**dims: int) -> None:
    bad = {name: value for name, value in dims.items() if value < 1}
    if bad:
        listed = ", ".join(f"{name}={value}" for name, value in bad.items())
        raise ValueError(f"dimensions must be positive, got {listed}")


def _grid(rows: int, cols: int) -> tuple[np.ndarray, np.ndarray]:
    return np.arange(rows)[:, None], np.arange(cols)[None, :]


def _matrix(values, name: str) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.ndim != 2:
        raise ValueError(f"{name} must be a 2-D array")
    return array


def _dump_by_rows(name: str, matrix) -> dict[str, str]:
    # The line-break position is row * (number of rows) + column.
    matrix = _matrix(matrix, name)
    rows = matrix.shape[0]
    entries = ((i * rows + j, value) for (i, j), value in np.ndenumerate(matrix))
    return {name: format_entries(entries)}


def _sizes(dataset) -> tuple[int, int]:
    return _SIZES[DatasetSize.parse(dataset)]


def init_symm(m: int, n: int):
    """Return ``(alpha, beta, C, A, B)`` with C and B m×n and A m×m (lower part used)."""
    _check_positive(m=m, n=n)
    i, j = _grid(m, n)
    C = ((i + j) % 100) / m
    B = ((n + i - j) % 100) / m
    i, j = _grid(m, m)
    A = np.where(j <= i, ((i + j) % 100) / m, _UNUSED)
    return _ALPHA, _BETA, C.astype(float), A.astype(float), B.astype(float)


def kernel_symm(alpha: float, beta: float, C, A, B) -> np.ndarray:
    """Return ``alpha*A*B + beta*C`` where A is symmetric, given by its lower triangle."""
    C = _matrix(C, "C")
    A = _matrix(A, "A")
    B = _matrix(B, "B")
    m, n = B.shape
    if A.shape != (m, m) or C.shape != (m, n):
        raise ValueError(f"incompatible shapes C{C.shape}, A{A.shape}, B{B.shape}")
    symmetric = np.tril(A) + np.tril(A, -1).T
    return beta * C + alpha * (symmetric @ B)


def dump_symm(C) -> dict[str, str]:
    """Return the textual dump of ``C`` keyed by array name."""
    return _dump_by_rows("C", C)


def run_symm(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the symm benchmark."""
    m, n = _sizes(dataset)
    return dump_symm(kernel_symm(*init_symm(m, n)))


def init_syr2k(n: int, m: int):
    """Return ``(alpha, beta, C, A, B)`` with C n×n and A, B n×m."""
    _check_positive(n=n, m=m)
    i, j = _grid(n, m)
    A = ((i * j + 1) % n) / n
    B = ((i * j + 2) % m) / m
    i, j = _grid(n, n)
    C = ((i * j + 3) % n) / m
    return _ALPHA, _BETA, C.astype(float), A.astype(float), B.astype(float)


def kernel_syr2k(alpha: float, beta: float, C, A, B) -> np.ndarray:
    """Return C with its lower triangle set to ``alpha*(A*B^T + B*A^T) + beta*C``."""
    C = _matrix(C, "C")
    A = _matrix(A, "A")
    B = _matrix(B, "B")
    n = A.shape[0]
    if B.shape != A.shape or C.shape != (n, n):
        raise ValueError(f"incompatible shapes C{C.shape}, A{A.shape}, B{B.shape}")
    update = beta * C + alpha * (A @ B.T + B @ A.T)
    lower = np.tril(np.ones((n, n), dtype=bool))
    return np.where(lower, update, C)


def dump_syr2k(C) -> dict[str, str]:
    """Return the textual dump of ``C`` keyed by array name."""
    return _dump_by_rows("C", C)


def run_syr2k(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the syr2k benchmark."""
    m, n = _sizes(dataset)
    return dump_syr2k(kernel_syr2k(*init_syr2k(n, m)))


def init_syrk(n: int, m: int):
    """Return ``(alpha, beta, C, A)`` with C n×n and A n×m."""
    _check_positive(n=n, m=m)
    i, j = _grid(n, m)
    A = ((i * j + 1) % n) / n
    i, j = _grid(n, n)
    C = ((i * j + 2) % m) / m
    return _ALPHA, _BETA, C.astype(float), A.astype(float)


def kernel_syrk(alpha: float, beta: float, C, A) -> np.ndarray:
    """Return C with its lower triangle set to ``alpha*A*A^T + beta*C``."""
    C = _matrix(C, "C")
    A = _matrix(A, "A")
    n = A.shape[0]
    if C.shape != (n, n):
        raise ValueError(f"incompatible shapes C{C.shape}, A{A.shape}")
    update = beta * C + alpha * (A @ A.T)
    lower = np.tril(np.ones((n, n), dtype=bool))
    return np.where(lower, update, C)


def dump_syrk(C) -> dict[str, str]:
    """Return the textual dump of ``C`` keyed by array name."""
    return _dump_by_rows("C", C)


def run_syrk(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the syrk benchmark."""
    m, n = _sizes(dataset)
    return dump_syrk(kernel_syrk(*init_syrk(n, m)))


def init_trmm(m: int, n: int):
    """Return ``(alpha, A, B)`` with A m×m unit lower triangular and B m×n."""
    _check_positive(m=m, n=n)
    i, j = _grid(m, m)
    A = np.where(j < i, ((i + j) % m) / m, 0.0)
    np.fill_diagonal(A, 1.0)
    i, j = _grid(m, n)
    B = ((n + (i - j)) % n) / n
    return _ALPHA, A.astype(float), B.astype(float)


def kernel_trmm(alpha: float, A, B) -> np.ndarray:
    """Return ``alpha*A^T*B`` for A unit lower triangular (only its strict lower part is read)."""
    A = _matrix(A, "A")
    B = _matrix(B, "B")
    m = B.shape[0]
    if A.shape != (m, m):
        raise ValueError(f"incompatible shapes A{A.shape}, B{B.shape}")
    return alpha * (B + np.tril(A, -1).T @ B)


def dump_trmm(B) -> dict[str, str]:
    """Return the textual dump of ``B`` keyed by array name."""
    return _dump_by_rows("B", B)


def run_trmm(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the trmm benchmark."""
    m, n = _sizes(dataset)
    return dump_trmm(kernel_trmm(*init_trmm(m, n)))