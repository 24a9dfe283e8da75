"""Matrix-vector benchmarks: atax, bicg and mvt."""

from __future__ import annotations

import numpy as np

from polykernels.dataset import DEFAULT_DATASET, DatasetSize, format_entries

# (M, N) for atax and bicg.
_ATAX_BICG_SIZES = {
    DatasetSize.MINI: (38, 42),
    DatasetSize.SMALL: (116, 124),
    DatasetSize.MEDIUM: (390, 410),
    DatasetSize.LARGE: (1900, 2100),
    DatasetSize.EXTRALARGE: (1800, 2200),
}

_MVT_SIZES = {
    DatasetSize.MINI: 40,
    DatasetSize.SMALL: 120,
    DatasetSize.MEDIUM: 400,
    DatasetSize.LARGE: 2000,
    DatasetSize.EXTRALARGE: 4000,
}


def _check_positive(**dims: int) -> None:
    bad = {name: value for name, value in dims.items() if value < 1}
    if bad:
        listed = ", ".join(f"{name}={value}" for name, value in bad.items())
        raise ValueError(f"dimensions must be positive, got {listed}")


def _grid(rows: int, cols: int) -> tuple[np.ndarray, np.ndarray]:
    return np.arange(rows)[:, None], np.arange(cols)[None, :]


def _vector(values, name: str) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1-D array")
    return array


def _matrix(values, name: str) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.ndim != 2:
        raise ValueError(f"{name} must be a 2-D array")
    return array


def _dump_vector(vector) -> str:
    return format_entries(enumerate(np.asarray(vector, dtype=float)))


def init_atax(m: int, n: int):
    """Return ``(A, x)`` with A m×n and x of length n."""
    _check_positive(m=m, n=n)
    fn = float(n)
    x = 1.0 + np.arange(n, dtype=float) / fn
    i, j = _grid(m, n)
    A = ((i + j) % n) / (5 * m)
    return A.astype(float), x


def kernel_atax(A, x) -> np.ndarray:
    """Return ``y = A^T * (A * x)``."""
    A = _matrix(A, "A")
    x = _vector(x, "x")
    if A.shape[1] != x.size:
        raise ValueError(f"incompatible shapes A{A.shape}, x{x.shape}")
    tmp = A @ x
    return A.T @ tmp


def dump_atax(y) -> dict[str, str]:
    """Return the textual dump of ``y`` keyed by array name."""
    return {"y": _dump_vector(_vector(y, "y"))}


def run_atax(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the atax benchmark."""
    m, n = _ATAX_BICG_SIZES[DatasetSize.parse(dataset)]
    return dump_atax(kernel_atax(*init_atax(m, n)))


def init_bicg(m: int, n: int):
    """Return ``(A, r, p)`` with A n×m, r of length n and p of length m."""
    _check_positive(m=m, n=n)
    p = (np.arange(m) % m) / m
    r = (np.arange(n) % n) / n
    i, j = _grid(n, m)
    A = (i * (j + 1) % n) / n
    return A.astype(float), r.astype(float), p.astype(float)


def kernel_bicg(A, p, r) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(s, q)`` with ``s = A^T * r`` and ``q = A * p``."""
    A = _matrix(A, "A")
    p = _vector(p, "p")
    r = _vector(r, "r")
    n, m = A.shape
    if p.size != m or r.size != n:
        raise ValueError(
            f"incompatible shapes A{A.shape}, p{p.shape}, r{r.shape}"
        )
    s = A.T @ r
    q = A @ p
    return s, q


def dump_bicg(s, q) -> dict[str, str]:
    """Return the textual dumps of ``s`` and ``q`` keyed by array name."""
    return {
        "s": _dump_vector(_vector(s, "s")),
        "q": _dump_vector(_vector(q, "q")),
    }


def run_bicg(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the bicg benchmark."""
    m, n = _ATAX_BICG_SIZES[DatasetSize.parse(dataset)]
    A, r, p = init_bicg(m, n)
    return dump_bicg(*kernel_bicg(A, p, r))


def init_mvt(n: int):
    """Return ``(x1, x2, y_1, y_2, A)`` for size ``n``."""
    _check_positive(n=n)
    idx = np.arange(n)
    x1 = (idx % n) / n
    x2 = ((idx + 1) % n) / n
    y_1 = ((idx + 3) % n) / n
    y_2 = ((idx + 4) % n) / n
    i, j = _grid(n, n)
    A = (i * j % n) / n
    return (
        x1.astype(float),
        x2.astype(float),
        y_1.astype(float),
        y_2.astype(float),
        A.astype(float),
    )


def kernel_mvt(x1, x2, y_1, y_2, A) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(x1 + A*y_1, x2 + A^T*y_2)``."""
    A = _matrix(A, "A")
    vectors = {"x1": x1, "x2": x2, "y_1": y_1, "y_2": y_2}
    vectors = {name: _vector(value, name) for name, value in vectors.items()}
    n = A.shape[0]
    if A.shape != (n, n) or any(v.size != n for v in vectors.values()):
        raise ValueError("A must be square and every vector must match its size")
    new_x1 = vectors["x1"] + A @ vectors["y_1"]
    new_x2 = vectors["x2"] + A.T @ vectors["y_2"]
    return new_x1, new_x2


def dump_mvt(x1, x2) -> dict[str, str]:
    """Return the textual dumps of ``x1`` and ``x2`` keyed by array name."""
    return {
        "x1": _dump_vector(_vector(x1, "x1")),
        "x2": _dump_vector(_vector(x2, "x2")),
    }


def run_mvt(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the mvt benchmark."""
    n = _MVT_SIZES[DatasetSize.parse(dataset)]
    return dump_mvt(*kernel_mvt(*init_mvt(n)))