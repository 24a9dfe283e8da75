"""Deterministic numerical benchmark kernels for data mining and dense linear algebra."""

__version__ = "0.1.0"

__all__ = [
    "dataset",
    "datamining",
    "triangular",
    "blas_general",
    "orthogonal",
    "blas_symmetric",
    "matvec",
    "factorizations",
]