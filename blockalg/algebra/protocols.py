"""Elimination backend protocol."""

from typing import Protocol, Any


class EliminationBackend(Protocol):
    """
    Row operations needed by Gauss-Jordan elimination.
    Allows one elimination routine to run over element rows and over
    float64 arrays.
    """

    def row_count(self, rows: Any) -> int:
        """
        Number of rows held by the row store.

        Args:
            rows: Row store (implementation-specific)

        Returns:
            Row count
        """
        ...

    def entry(self, rows: Any, row: int, col: int) -> Any:
        """
        Read one entry of the row store.

        Args:
            rows: Row store
            row: Row index
            col: Column index

        Returns:
            Entry value
        """
        ...

    def is_zero(self, value: Any) -> bool:
        """
        Zero test used for pivot selection and elimination skips.

        Args:
            value: Entry value

        Returns:
            True if the value counts as zero
        """
        ...

    def inverse_of(self, value: Any) -> Any:
        """
        Multiplicative inverse of a pivot.

        Args:
            value: Non-zero pivot

        Returns:
            Inverse value
        """
        ...

    def swap_rows(self, rows: Any, i: int, j: int) -> None:
        """
        Exchange two rows in place.

        Args:
            rows: Row store
            i: First row index
            j: Second row index
        """
        ...

    def normalize_row(self, rows: Any, index: int, inverse: Any) -> None:
        """
        Replace row ``index`` by ``inverse * row``.

        Args:
            rows: Row store
            index: Row to normalize
            inverse: Inverse of the pivot
        """
        ...

    def eliminate_row(self, rows: Any, target: int, lead: int, multiplier: Any) -> None:
        """
        Replace row ``target`` by ``row[target] - multiplier * row[lead]``.

        Args:
            rows: Row store
            target: Row being reduced
            lead: Normalized pivot row
            multiplier: Entry of ``target`` in the pivot column
        """
        ...
