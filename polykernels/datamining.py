"""Correlation and covariance benchmarks."""

from __future__ import annotations

import numpy as np

from polykernels.dataset import DEFAULT_DATASET, DatasetSize, format_entries

# (M, N): M columns (variables), N rows (observations).
_SIZES = {
    DatasetSize.MINI: (28, 32),
    DatasetSize.SMALL: (80, 100),
    DatasetSize.MEDIUM: (240, 260),
    DatasetSize.LARGE: (1200, 1400),
    DatasetSize.EXTRALARGE: (2600, 3000),
}

_EPS = 0.1


def _check_dims(m: int, n: int) -> None:
    if m < 1 or n < 1:
        raise ValueError(f"dimensions must be positive, got m={m}, n={n}")


def _dump_square(name: str, matrix: np.ndarray) -> dict[str, str]:
    matrix = np.asarray(matrix, dtype=float)
    return {name: format_entries(enumerate(matrix.ravel()))}


def init_correlation(m: int, n: int) -> tuple[float, np.ndarray]:
    """Return ``(float_n, data)`` with ``data`` of shape (n, m)."""
    _check_dims(m, n)
    i = np.arange(n, dtype=float)[:, None]
    j = np.arange(m, dtype=float)[None, :]
    data = (i * j) / m + i
    return float(n), data


def kernel_correlation(float_n: float, data) -> np.ndarray:
    """Return the column correlation matrix of ``data``; ``data`` is left untouched."""
    data = np.array(data, dtype=float)
    if data.ndim != 2 or data.shape[1] < 1:
        raise ValueError("data must be a non-empty 2-D array")
    mean = data.sum(axis=0) / float_n
    stddev = np.sqrt(((data - mean) ** 2).sum(axis=0) / float_n)
    # Near-zero deviations would cause a zero divide below.
    stddev = np.where(stddev <= _EPS, 1.0, stddev)
    centered = (data - mean) / (np.sqrt(float_n) * stddev)
    corr = centered.T @ centered
    np.fill_diagonal(corr, 1.0)
    return corr


def dump_correlation(corr) -> dict[str, str]:
    """Return the textual dump of the correlation matrix keyed by array name."""
    return _dump_square("corr", corr)


def run_correlation(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the correlation benchmark."""
    m, n = _SIZES[DatasetSize.parse(dataset)]
    float_n, data = init_correlation(m, n)
    return dump_correlation(kernel_correlation(float_n, data))


def init_covariance(m: int, n: int) -> tuple[float, np.ndarray]:
    """Return ``(float_n, data)`` with ``data`` of shape (n, m)."""
    _check_dims(m, n)
    i = np.arange(n, dtype=float)[:, None]
    j = np.arange(m, dtype=float)[None, :]
    return float(n), (i * j) / m


def kernel_covariance(float_n: float, data) -> np.ndarray:
    """Return the sample covariance matrix of the columns of ``data``."""
    data = np.array(data, dtype=float)
    if data.ndim != 2:
        raise ValueError("data must be a 2-D array")
    mean = data.sum(axis=0) / float_n
    centered = data - mean
    return (centered.T @ centered) / (float_n - 1.0)


def dump_covariance(cov) -> dict[str, str]:
    """Return the textual dump of the covariance matrix keyed by array name."""
    return _dump_square("cov", cov)


def run_covariance(dataset=DEFAULT_DATASET) -> dict[str, str]:
    """Initialise, compute and dump the covariance benchmark."""
    m, n = _SIZES[DatasetSize.parse(dataset)]
    float_n, data = init_covariance(m, n)
    return dump_covariance(kernel_covariance(float_n, data))