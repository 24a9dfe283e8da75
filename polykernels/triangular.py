"""Durbin (Toeplitz) and triangular-solve benchmarks."""

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


def init_durbin(n: int) -> np.ndarray:
    """Return the vector ``r`` of length ``n`` with ``r[i] = n + 1 - i``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    return (n + 1 - np.arange(n)).astype(float)


def kernel_durbin(r) -> np.ndarray:
    """Solve the Yule-Walker system for ``r`` by the Levinson-Durbin recursion."""
    r = np.asarray(r, dtype=float)
    if r.ndim != 1 or r.size == 0:
        raise ValueError("r must be a non-empty 1-D array")
    n = r.size
    y = np.empty(n)
    y[0] = -r[0]
    beta = 1.0
    alpha = -r[0]
    for k in range(1, n):
        beta = (1.0 - alpha * alpha) * beta
        total = float(np.dot(r[k - 1 :: -1], y[:k]))
        alpha = -(r[k] + total) / beta
        y[:k] = y[:k] + alpha * y[k - 1 :: -1]
        y[k] = alpha
    return y


def dump_durbin(y) -> dict[str, str]:
    """Return the textual dump of ``y`` keyed by array name."""
    return {"y": format_entries(enumerate(np.asarray(y, dtype=float)))}


def run_durbin(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the Durbin benchmark."""
    n = _SIZES[DatasetSize.parse(dataset)]
    return dump_durbin(kernel_durbin(init_durbin(n)))


def init_trisolv(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(L, b)``: a lower-triangular ``n``-by-``n`` matrix and ``b[i] = i``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    i = np.arange(n, dtype=float)[:, None]
    j = np.arange(n, dtype=float)[None, :]
    L = np.tril((i + n - j + 1) * 2 / n)
    b = np.arange(n, dtype=float)
    return L, b


def kernel_trisolv(L, b) -> np.ndarray:
    """Solve ``L x = b`` by forward substitution using the lower triangle of ``L``."""
    L = np.asarray(L, dtype=float)
    b = np.asarray(b, dtype=float)
    n = b.size
    if L.ndim != 2 or L.shape[0] != n or L.shape[1] < n:
        raise ValueError("L must be square and match the length of b")
    x = np.empty(n)
    for i in range(n):
        x[i] = (b[i] - float(np.dot(L[i, :i], x[:i]))) / L[i, i]
    return x


def dump_trisolv(x) -> dict[str, str]:
    """Return the textual dump of ``x``; the line break follows every 20th entry."""
    parts: list[str] = []
    for i, value in enumerate(np.asarray(x, dtype=float)):
        parts.append(f"{value:.2f} ")
        if i % 20 == 0:
            parts.append("\n")
    return {"x": "".join(parts)}


def run_trisolv(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the triangular-solve benchmark."""
    n = _SIZES[DatasetSize.parse(dataset)]
    L, b = init_trisolv(n)
    return dump_trisolv(kernel_trisolv(L, b))