"""General matrix BLAS benchmarks: gemm, gemver and gesummv."""

from __future__ import annotations

import numpy as np

from polykernels.dataset import DEFAULT_DATASET, DatasetSize, format_entries

# (NI, NJ, NK)
_GEMM_SIZES = {
    DatasetSize.MINI: (20, 25, 30),
    DatasetSize.SMALL: (60, 70, 80),
    DatasetSize.MEDIUM: (200, 220, 240),
    DatasetSize.LARGE: (1000, 1100, 1200),
    DatasetSize.EXTRALARGE: (2000, 2300, 2600),
}

_GEMVER_SIZES = {
    DatasetSize.MINI: 40,
    DatasetSize.SMALL: 120,
    DatasetSize.MEDIUM: 400,
    DatasetSize.LARGE: 2000,
    DatasetSize.EXTRALARGE: 4000,
}

_GESUMMV_SIZES = {
    DatasetSize.MINI: 30,
    DatasetSize.SMALL: 90,
    DatasetSize.MEDIUM: 250,
    DatasetSize.LARGE: 1300,
    DatasetSize.EXTRALARGE: 2800,
}

_ALPHA = 1.5
_BETA = 1.2


def _check_positive(**dims: int) -> None:
    bad = {name: value for name, value in dims.items() if value < 1}
    if bad:
        listed = ", ".join(f"{name}={value}" for name, value in bad.items())
        raise ValueError(f"dimensions must be positive, got {listed}")


def _grid(rows: int, cols: int) -> tuple[np.ndarray, np.ndarray]:
    return np.arange(rows)[:, None], np.arange(cols)[None, :]


def _vector(values, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1-D array")
    return array


def _matrix(values, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.ndim != 2:
        raise ValueError(f"{name} must be a 2-D array")
    return array


def _dump_vector(name: str, vector) -> dict[str, str]:
    return {name: format_entries(enumerate(np.asarray(vector, dtype=float)))}


def _dump_by_rows(name: str, matrix) -> dict[str, str]:
    # The line-break position is row * (number of rows) + column.
    matrix = np.asarray(matrix, dtype=float)
    rows = matrix.shape[0]
    entries = ((i * rows + j, value) for (i, j), value in np.ndenumerate(matrix))
    return {name: format_entries(entries)}


def init_gemm(ni: int, nj: int, nk: int):
    """Return ``(alpha, beta, C, A, B)`` with C ni×nj, A ni×nk and B nk×nj."""
    _check_positive(ni=ni, nj=nj, nk=nk)
    i, j = _grid(ni, nj)
    C = ((i * j + 1) % ni) / ni
    i, j = _grid(ni, nk)
    A = (i * (j + 1) % nk) / nk
    i, j = _grid(nk, nj)
    B = (i * (j + 2) % nj) / nj
    return _ALPHA, _BETA, C, A, B


def kernel_gemm(alpha: float, beta: float, C, A, B) -> np.ndarray:
    """Return ``alpha*A*B + beta*C`` as a new array."""
    C = _matrix(C, "C")
    A = _matrix(A, "A")
    B = _matrix(B, "B")
    if A.shape[1] != B.shape[0] or C.shape != (A.shape[0], B.shape[1]):
        raise ValueError(
            f"incompatible shapes C{C.shape}, A{A.shape}, B{B.shape}"
        )
    return beta * C + alpha * (A @ B)


def dump_gemm(C) -> dict[str, str]:
    """Return the textual dump of ``C`` keyed by array name."""
    return _dump_by_rows("C", _matrix(C, "C"))


def run_gemm(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the gemm benchmark."""
    ni, nj, nk = _GEMM_SIZES[DatasetSize.parse(dataset)]
    return dump_gemm(kernel_gemm(*init_gemm(ni, nj, nk)))


def init_gemver(n: int):
    """Return ``(alpha, beta, A, u1, v1, u2, v2, w, x, y, z)`` for size ``n``."""
    _check_positive(n=n)
    fn = float(n)
    idx = np.arange(n, dtype=float)
    step = (idx + 1) / fn
    u1 = idx.copy()
    u2 = step / 2.0
    v1 = step / 4.0
    v2 = step / 6.0
    y = step / 8.0
    z = step / 9.0
    x = np.zeros(n)
    w = np.zeros(n)
    i, j = _grid(n, n)
    A = (i * j % n) / n
    return _ALPHA, _BETA, A, u1, v1, u2, v2, w, x, y, z


def kernel_gemver(alpha, beta, A, u1, v1, u2, v2, w, x, y, z):
    """Return ``(A, x, w)`` after the rank-2 update and the two matrix-vector products."""
    A = _matrix(A, "A")
    vectors = {
        "u1": u1, "v1": v1, "u2": u2, "v2": v2, "w": w, "x": x, "y": y, "z": z,
    }
    vectors = {name: _vector(value, name) for name, value in vectors.items()}
    n = A.shape[0]
    if A.shape != (n, n) or any(v.size != n for v in vectors.values()):
        raise ValueError("A must be square and every vector must match its size")
    A = A + np.outer(vectors["u1"], vectors["v1"]) + np.outer(vectors["u2"], vectors["v2"])
    x = vectors["x"] + beta * (A.T @ vectors["y"])
    x = x + vectors["z"]
    w = vectors["w"] + alpha * (A @ x)
    return A, x, w


def dump_gemver(w) -> dict[str, str]:
    """Return the textual dump of ``w`` keyed by array name."""
    return _dump_vector("w", _vector(w, "w"))


def run_gemver(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the gemver benchmark."""
    n = _GEMVER_SIZES[DatasetSize.parse(dataset)]
    _, _, w = kernel_gemver(*init_gemver(n))
    return dump_gemver(w)


def init_gesummv(n: int):
    """Return ``(alpha, beta, A, B, x)`` for size ``n``."""
    _check_positive(n=n)
    idx = np.arange(n)
    x = (idx % n) / n
    i, j = _grid(n, n)
    A = ((i * j + 1) % n) / n
    B = ((i * j + 2) % n) / n
    return _ALPHA, _BETA, A, B, x.astype(float)


def kernel_gesummv(alpha: float, beta: float, A, B, x) -> np.ndarray:
    """Return ``alpha*A*x + beta*B*x``."""
    A = _matrix(A, "A")
    B = _matrix(B, "B")
    x = _vector(x, "x")
    n = x.size
    if A.shape != (n, n) or B.shape != (n, n):
        raise ValueError("A and B must be square and match the length of x")
    return alpha * (A @ x) + beta * (B @ x)


def dump_gesummv(y) -> dict[str, str]:
    """Return the textual dump of ``y`` keyed by array name."""
    return _dump_vector("y", _vector(y, "y"))


def run_gesummv(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the gesummv benchmark."""
    n = _GESUMMV_SIZES[DatasetSize.parse(dataset)]
    return dump_gesummv(kernel_gesummv(*init_gesummv(n)))