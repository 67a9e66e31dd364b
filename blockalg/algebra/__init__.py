"""Elimination backends and the row-vector helper."""

from blockalg.algebra.protocols import EliminationBackend
from blockalg.algebra.rows import MatrixRow
from blockalg.algebra.generic import ElementBackend
from blockalg.algebra.dense import DenseBackend

__all__ = [
    "EliminationBackend",
    "MatrixRow",
    "ElementBackend",
    "DenseBackend",
]
