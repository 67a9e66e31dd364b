"""Elimination backend over rows of algebraic elements."""

from blockalg.algebra.rows import MatrixRow
from blockalg.core.element import AlgebraicElement


class ElementBackend:
    """Row operations on a list of ``MatrixRow`` using the element contract."""

    def row_count(self, rows: list[MatrixRow]) -> int:
        return len(rows)

    def entry(self, rows: list[MatrixRow], row: int, col: int) -> AlgebraicElement:
        return rows[row][col]

    def is_zero(self, value: AlgebraicElement) -> bool:
        return value.is_zero

    def inverse_of(self, value: AlgebraicElement) -> AlgebraicElement:
        return value.invert()

    def swap_rows(self, rows: list[MatrixRow], i: int, j: int) -> None:
        rows[i], rows[j] = rows[j], rows[i]

    def normalize_row(
        self, rows: list[MatrixRow], index: int, inverse: AlgebraicElement
    ) -> None:
        rows[index] = inverse * rows[index]

    def eliminate_row(
        self,
        rows: list[MatrixRow],
        target: int,
        lead: int,
        multiplier: AlgebraicElement,
    ) -> None:
        rows[target] = rows[target] - multiplier * rows[lead]
