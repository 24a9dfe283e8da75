"""QR decomposition by modified Gram-Schmidt."""

from __future__ import annotations

import numpy as np

from polykernels.dataset import DEFAULT_DATASET, DatasetSize, format_entries

# (M, N): A and Q are M×N, R is N×N.
_SIZES = {
    DatasetSize.MINI: (20, 30),
    DatasetSize.SMALL: (60, 80),
    DatasetSize.MEDIUM: (200, 240),
    DatasetSize.LARGE: (1000, 1200),
    DatasetSize.EXTRALARGE: (2000, 2600),
}


def init_gramschmidt(m: int, n: int):
    """Return ``(A, R, Q)``: A filled by the benchmark formula, R and Q zeroed."""
    if m < 1 or n < 1:
        raise ValueError(f"dimensions must be positive, got m={m}, n={n}")
    i = np.arange(m)[:, None]
    j = np.arange(n)[None, :]
    A = ((i * j) % m) / m * 100 + 10
    R = np.zeros((n, n))
    Q = np.zeros((m, n))
    return A.astype(float), R, Q


def kernel_gramschmidt(A, R, Q):
    """Return new ``(A, R, Q)`` after the modified Gram-Schmidt QR decomposition."""
    A = np.array(A, dtype=float)
    R = np.array(R, dtype=float)
    Q = np.array(Q, dtype=float)
    if A.ndim != 2:
        raise ValueError("A must be a 2-D array")
    m, n = A.shape
    if R.shape != (n, n) or Q.shape != (m, n):
        raise ValueError(
            f"expected R of shape {(n, n)} and Q of shape {(m, n)}, "
            f"got {R.shape} and {Q.shape}"
        )
    # Dependent columns give a zero norm; the result then holds inf/nan.
    with np.errstate(divide="ignore", invalid="ignore"):
        for k in range(n):
            R[k, k] = np.sqrt(float(A[:, k] @ A[:, k]))
            Q[:, k] = A[:, k] / R[k, k]
            if k + 1 < n:
                R[k, k + 1 :] = Q[:, k] @ A[:, k + 1 :]
                A[:, k + 1 :] -= np.outer(Q[:, k], R[k, k + 1 :])
    return A, R, Q


def dump_gramschmidt(R, Q) -> dict[str, str]:
    """Return the textual dumps of ``R`` and ``Q`` keyed by array name."""
    R = np.asarray(R, dtype=float)
    Q = np.asarray(Q, dtype=float)
    return {
        "R": format_entries(enumerate(R.ravel())),
        "Q": format_entries(enumerate(Q.ravel())),
    }


def run_gramschmidt(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the Gram-Schmidt benchmark."""
    m, n = _SIZES[DatasetSize.parse(dataset)]
    _, R, Q = kernel_gramschmidt(*init_gramschmidt(m, n))
    return dump_gramschmidt(R, Q)