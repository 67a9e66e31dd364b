"""Gauss-Jordan elimination shared by the generic and float64 matrices."""

import logging
from typing import Any, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from blockalg.algebra.dense import DenseBackend
from blockalg.algebra.generic import ElementBackend
from blockalg.algebra.protocols import EliminationBackend
from blockalg.algebra.rows import MatrixRow
from blockalg.config import NumericTolerance
from blockalg.core.matrix import Matrix
from blockalg.errors import (
    DimensionMismatchError,
    InvalidInputError,
    InvalidShapeError,
    NotSquareError,
    SingularMatrixError,
)

logger = logging.getLogger(__name__)


def eliminate(left: Any, right: Any, backend: EliminationBackend) -> Any:
    """
    Reduce ``left`` to the identity, applying the same row operations to ``right``.

    For every pivot column the first row at or below the diagonal with a
    non-zero entry becomes the pivot row, the pivot row is normalized and
    the pivot column is cleared in every other row. Both row stores are
    modified in place.

    Args:
        left: Square coefficient rows
        right: Right-hand rows (same row count)
        backend: Row operations for the row store type

    Returns:
        ``right``, now holding ``left^-1 @ right``

    Raises:
        SingularMatrixError: If a pivot column has no non-zero candidate.
    """
    n = backend.row_count(left)
    for lead in range(n):
        pivot = _select_pivot(left, right, lead, n, backend)
        inverse = backend.inverse_of(pivot)
        backend.normalize_row(left, lead, inverse)
        backend.normalize_row(right, lead, inverse)
        for k in range(n):
            if k == lead:
                continue
            multiplier = backend.entry(left, k, lead)
            if backend.is_zero(multiplier):
                continue
            backend.eliminate_row(left, k, lead, multiplier)
            backend.eliminate_row(right, k, lead, multiplier)
    return right


def _select_pivot(left: Any, right: Any, lead: int, n: int, backend: EliminationBackend) -> Any:
    pivot = backend.entry(left, lead, lead)
    if not backend.is_zero(pivot):
        return pivot
    for candidate in range(lead + 1, n):
        if not backend.is_zero(backend.entry(left, candidate, lead)):
            logger.debug("Zero pivot in column %d, swapping rows %d and %d", lead, lead, candidate)
            backend.swap_rows(left, lead, candidate)
            backend.swap_rows(right, lead, candidate)
            return backend.entry(left, lead, lead)
    logger.debug("No non-zero pivot in column %d; left matrix is singular", lead)
    raise SingularMatrixError(
        f"Left matrix is singular (no pivot in column {lead}); elimination is not possible"
    )


def _check_shapes(left_shape: tuple[int, int], right_shape: tuple[int, int]) -> None:
    (left_rows, left_cols), (right_rows, right_cols) = left_shape, right_shape
    if left_rows != left_cols:
        raise NotSquareError(f"Left matrix {left_rows}x{left_cols} is not square")
    if left_rows != right_rows:
        raise DimensionMismatchError(
            f"Row counts differ: left has {left_rows}, right has {right_rows}"
        )
    if left_rows < 1 or left_cols < 1 or right_cols < 1:
        raise InvalidShapeError(
            f"Cannot eliminate {left_rows}x{left_cols} against {right_rows}x{right_cols}"
        )


def solve(left: Matrix, right: Matrix) -> Matrix:
    """
    Compute ``left^-1 @ right`` by Gauss-Jordan elimination.

    Args:
        left: Square coefficient matrix
        right: Right-hand side with the same number of rows

    Returns:
        New matrix holding the solution; the inputs are not modified

    Raises:
        NotSquareError: If ``left`` is not square.
        DimensionMismatchError: If the row counts differ.
        InvalidShapeError: If any dimension is empty.
        SingularMatrixError: If ``left`` has no inverse.
    """
    if left is None or right is None:
        raise InvalidInputError("Gauss-Jordan elimination needs two matrices")
    _check_shapes(left.shape, right.shape)
    logger.debug("Gauss-Jordan elimination of %s against %s", left.shape, right.shape)

    left_rows = [MatrixRow(left.row_elements(i)) for i in range(left.rows)]
    right_rows = [MatrixRow(right.row_elements(i)) for i in range(right.rows)]
    eliminate(left_rows, right_rows, ElementBackend())
    result = Matrix.zeros(*right.shape)
    for i, row in enumerate(right_rows):
        for j, cell in enumerate(row):
            result._set(i, j, cell)
    return result


def solve_dense(
    left: ArrayLike,
    right: ArrayLike,
    tolerance: Optional[NumericTolerance] = None,
) -> NDArray:
    """
    Float64 counterpart of ``solve`` with epsilon-tolerant zero tests.

    Args:
        left: Square coefficient array (n, n)
        right: Right-hand side (n, m) or (n,)
        tolerance: Zero tolerance; defaults to the configured one

    Returns:
        Solution array with the shape of ``right``
    """
    if left is None or right is None:
        raise InvalidInputError("Gauss-Jordan elimination needs two arrays")
    a = np.array(left, dtype=float)
    b = np.array(right, dtype=float)
    vector = b.ndim == 1
    if vector:
        b = b.reshape(-1, 1)
    if a.ndim != 2 or b.ndim != 2:
        raise InvalidShapeError("Gauss-Jordan elimination needs 2-D arrays")
    _check_shapes(a.shape, b.shape)
    logger.debug("Dense Gauss-Jordan elimination of %s against %s", a.shape, b.shape)

    eliminate(a, b, DenseBackend(tolerance))
    return b.ravel() if vector else b
