"""Dense float64 elimination backend using NumPy."""

from typing import Optional

from numpy.typing import NDArray

from blockalg.config import NumericTolerance, get_config


class DenseBackend:
    """NumPy implementation of the elimination row operations."""

    def __init__(self, tolerance: Optional[NumericTolerance] = None):
        self.tolerance = tolerance if tolerance is not None else get_config().tolerance

    def row_count(self, rows: NDArray) -> int:
        return rows.shape[0]

    def entry(self, rows: NDArray, row: int, col: int) -> float:
        return float(rows[row, col])

    def is_zero(self, value: float) -> bool:
        """Epsilon-tolerant zero test."""
        return self.tolerance.near_zero(value)

    def inverse_of(self, value: float) -> float:
        return 1.0 / value

    def swap_rows(self, rows: NDArray, i: int, j: int) -> None:
        rows[[i, j]] = rows[[j, i]]

    def normalize_row(self, rows: NDArray, index: int, inverse: float) -> None:
        rows[index] *= inverse

    def eliminate_row(self, rows: NDArray, target: int, lead: int, multiplier: float) -> None:
        rows[target] -= multiplier * rows[lead]
