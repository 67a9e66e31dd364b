"""Matrix over algebraic elements; itself an element, so blocks nest."""

from collections.abc import Sequence
from typing import Callable, Optional

import numpy as np
from numpy.typing import NDArray

from blockalg.config import get_config
from blockalg.core.convert import as_element
from blockalg.core.element import AlgebraicElement
from blockalg.core.expression import ExpressionElement
from blockalg.core.numeric import Numeric
from blockalg.errors import (
    DimensionMismatchError,
    DivisionByZeroError,
    IndexOutOfRangeError,
    InvalidInputError,
    InvalidShapeError,
    NestingTooDeepError,
    NotConformableError,
    NotSquareError,
)
from blockalg.utils.formatting import plain_rows, word_math_rows

Grid = list[list[AlgebraicElement]]


class Matrix(AlgebraicElement):
    """
    Rectangular grid of algebraic elements.

    Cells may be numbers, expressions or matrices; a matrix of matrices is
    a block matrix and ``to_unit``/``to_zero``/``determinant``/``inverse``
    recurse into the blocks. The shape is fixed at construction and cells
    are cloned on entry, so a Matrix never aliases caller storage.

    Example:
        >>> A = Matrix([[2, 1], [1, 3]])
        >>> A.determinant()
        Numeric(5)
    """

    __slots__ = ("_cells", "_shape", "_depth")

    def __init__(self, grid):
        if grid is None:
            raise InvalidInputError("Matrix grid cannot be None")
        if isinstance(grid, Matrix):
            cells = [[cell.clone() for cell in row] for row in grid._cells]
        else:
            cells = [[as_element(value).clone() for value in row] for row in _grid_rows(grid)]
        self._init_cells(cells)

    @classmethod
    def _from_cells(cls, cells: Grid) -> "Matrix":
        """Adopt a freshly built grid without cloning it."""
        matrix = cls.__new__(cls)
        matrix._init_cells(cells)
        return matrix

    def _init_cells(self, cells: Grid) -> None:
        rows = len(cells)
        cols = len(cells[0]) if rows else 0
        if any(len(row) != cols for row in cells):
            raise InvalidShapeError("Matrix rows must all have the same length")
        depth = 1 + max((cell.depth for row in cells for cell in row), default=0)
        limit = get_config().max_block_depth
        if depth > limit:
            raise NestingTooDeepError(
                f"Block matrix nesting depth {depth} exceeds the limit of {limit}"
            )
        self._cells = cells
        self._shape = (rows, cols)
        self._depth = depth

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """``rows x cols`` matrix of numeric zeros."""
        if rows < 0 or cols < 0:
            raise InvalidShapeError(f"Negative matrix size ({rows}, {cols})")
        return cls._from_cells([[Numeric(0) for _ in range(cols)] for _ in range(rows)])

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """``n x n`` numeric identity."""
        return cls.zeros(n, n).to_unit()

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return self._shape

    @property
    def size(self) -> tuple[int, int]:
        return self._shape

    @property
    def rows(self) -> int:
        return self._shape[0]

    @property
    def cols(self) -> int:
        return self._shape[1]

    @property
    def is_square(self) -> bool:
        return self._shape[0] == self._shape[1]

    @property
    def is_zero(self) -> bool:
        return all(cell.is_zero for row in self._cells for cell in row)

    @property
    def depth(self) -> int:
        return self._depth

    def is_same_size(self, other: "Matrix") -> bool:
        return self._shape == other._shape

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def _check_index(self, row: int, col: int) -> None:
        rows, cols = self._shape
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexOutOfRangeError(
                f"Cell [{row}, {col}] is outside a {rows}x{cols} matrix"
            )

    def __getitem__(self, index: tuple[int, int]) -> AlgebraicElement:
        row, col = index
        self._check_index(row, col)
        return self._cells[row][col]

    def _set(self, row: int, col: int, value: AlgebraicElement) -> None:
        """Replace one cell; reserved for the elimination solver."""
        self._check_index(row, col)
        self._cells[row][col] = value
        self._depth = max(self._depth, 1 + value.depth)

    def row(self, index: int) -> "Matrix":
        """Row ``index`` as a ``1 x cols`` matrix."""
        if not 0 <= index < self.rows:
            raise IndexOutOfRangeError(f"Row {index} is outside a {self.rows}-row matrix")
        return Matrix._from_cells([[cell.clone() for cell in self._cells[index]]])

    def col(self, index: int) -> "Matrix":
        """Column ``index`` as a ``rows x 1`` matrix."""
        if not 0 <= index < self.cols:
            raise IndexOutOfRangeError(
                f"Column {index} is outside a {self.cols}-column matrix"
            )
        return Matrix._from_cells([[row[index].clone()] for row in self._cells])

    def row_elements(self, index: int) -> list[AlgebraicElement]:
        return [cell.clone() for cell in self._cells[index]]

    def col_elements(self, index: int) -> list[AlgebraicElement]:
        return [row[index].clone() for row in self._cells]

    # ------------------------------------------------------------------
    # Element contract
    # ------------------------------------------------------------------

    def clone(self) -> "Matrix":
        return Matrix._from_cells([[cell.clone() for cell in row] for row in self._cells])

    def add(self, other: AlgebraicElement) -> "Matrix":
        if not isinstance(other, Matrix):
            # leaves are promoted to 1x1 matrices
            return self.add(Matrix([[other]]))
        if not self.is_same_size(other):
            raise DimensionMismatchError(
                f"Cannot add a {self.rows}x{self.cols} matrix "
                f"and a {other.rows}x{other.cols} matrix"
            )
        return Matrix._from_cells(
            [
                [a + b for a, b in zip(row, other_row)]
                for row, other_row in zip(self._cells, other._cells)
            ]
        )

    def negate(self) -> "Matrix":
        return Matrix._from_cells([[-cell for cell in row] for row in self._cells])

    def multiply(self, other: AlgebraicElement) -> "Matrix":
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, (Numeric, ExpressionElement)):
            return Matrix._from_cells([[cell * other for cell in row] for row in self._cells])
        raise TypeError(f"{type(other).__name__} cannot multiply a Matrix")

    def _matmul(self, other: "Matrix") -> "Matrix":
        if self.cols != other.rows:
            raise NotConformableError(
                f"Matrices {self.rows}x{self.cols} and {other.rows}x{other.cols} "
                "are not conformable"
            )
        columns = [[row[j] for row in other._cells] for j in range(other.cols)]
        return Matrix._from_cells(
            [
                [_accumulate(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._cells
            ]
        )

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def invert(self) -> "Matrix":
        if self.is_zero:
            raise DivisionByZeroError(f"Cannot invert the zero matrix\n{self}")
        return self.inverse()

    def equals(self, other: AlgebraicElement) -> bool:
        return (
            isinstance(other, Matrix)
            and self.is_same_size(other)
            and all(
                a == b
                for row, other_row in zip(self._cells, other._cells)
                for a, b in zip(row, other_row)
            )
        )

    def to_double(self) -> float:
        return 0.0

    def __hash__(self) -> int:
        return hash((self._shape, tuple(hash(cell) for row in self._cells for cell in row)))

    # ------------------------------------------------------------------
    # Matrix operations
    # ------------------------------------------------------------------

    def transpose(self) -> "Matrix":
        rows, cols = self._shape
        if rows < 1 or cols < 1:
            return self.clone()
        return Matrix._from_cells(
            [[self._cells[i][j].clone() for i in range(rows)] for j in range(cols)]
        )

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def to_unit(self) -> "Matrix":
        """
        Multiplicative identity of the same shape.

        Block cells become their own unit on the diagonal and their own
        zero elsewhere.
        """
        return Matrix._from_cells(
            [[_unit_cell(cell, i == j) for j, cell in enumerate(row)]
             for i, row in enumerate(self._cells)]
        )

    def to_zero(self) -> "Matrix":
        """Additive identity of the same shape; block cells become their own zero."""
        return Matrix._from_cells(
            [
                [cell.to_zero() if isinstance(cell, Matrix) else Numeric(0) for cell in row]
                for row in self._cells
            ]
        )

    def determinant(self) -> AlgebraicElement:
        """
        Determinant by cofactor expansion along the first row.

        Cost grows factorially with the order of the matrix.

        Raises:
            NotSquareError: If the matrix is not square.
            InvalidShapeError: If the matrix is empty.
        """
        if not self.is_square:
            raise NotSquareError(
                f"Matrix {self.rows}x{self.cols} is not square and has no determinant"
            )
        if self.rows < 1:
            raise InvalidShapeError("Empty matrix has no determinant")
        if self.rows == 1:
            return self._cells[0][0].clone()
        return _accumulate(
            cell * _sign(j) * self.minor_of(0, j).determinant()
            for j, cell in enumerate(self._cells[0])
        )

    def minor_of(self, row: int, col: int) -> "Matrix":
        """Matrix with ``row`` and ``col`` removed."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfRangeError(
                f"Minor [{row}, {col}] does not exist in a {self.rows}x{self.cols} matrix"
            )
        return Matrix._from_cells(
            [
                [cell.clone() for j, cell in enumerate(cells) if j != col]
                for i, cells in enumerate(self._cells)
                if i != row
            ]
        )

    def inverse(self) -> "Matrix":
        """
        Inverse by Gauss-Jordan elimination against ``to_unit()``.

        Raises:
            NotSquareError: If the matrix is not square.
            SingularMatrixError: If the matrix has no inverse.
        """
        if not self.is_square:
            raise NotSquareError(f"Matrix {self.rows}x{self.cols} is not square, no inverse")
        from blockalg.solvers.gauss_jordan import solve

        return solve(self, self.to_unit())

    def dot_product(self, other: "Matrix") -> AlgebraicElement:
        """Sum of the elementwise products of two same-size matrices."""
        if other is None or not self.is_same_size(other):
            raise DimensionMismatchError("Dot product needs two matrices of the same size")
        return _accumulate(
            a * b
            for row, other_row in zip(self._cells, other._cells)
            for a, b in zip(row, other_row)
        )

    def map(self, func: Callable[[AlgebraicElement], object]) -> "Matrix":
        """Apply ``func`` to every cell; results go through ``as_element``."""
        return Matrix._from_cells(
            [[as_element(func(cell.clone())) for cell in row] for row in self._cells]
        )

    # ------------------------------------------------------------------
    # Conversion and rendering
    # ------------------------------------------------------------------

    def to_list(self) -> Grid:
        return [[cell.clone() for cell in row] for row in self._cells]

    def to_array(self) -> NDArray:
        """Cells coerced with ``to_double`` into a float64 array."""
        array = np.zeros(self._shape)
        for i, row in enumerate(self._cells):
            for j, cell in enumerate(row):
                array[i, j] = cell.to_double()
        return array

    def __str__(self) -> str:
        return plain_rows([str(cell) for cell in row] for row in self._cells)

    def to_word_math(self) -> str:
        return word_math_rows([str(cell) for cell in row] for row in self._cells)

    def to_word_math_piecewise(self) -> str:
        """Embedded-formula form with expression cells written piecewise."""
        return word_math_rows(
            [
                cell.to_string_piecewise() if isinstance(cell, ExpressionElement) else str(cell)
                for cell in row
            ]
            for row in self._cells
        )

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols})"


def _grid_rows(grid) -> list:
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise InvalidShapeError(f"Matrix needs a 2-D array, got {grid.ndim}-D")
        return list(grid)
    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise InvalidShapeError(f"Matrix needs a grid of rows, got {type(grid).__name__}")
    rows = []
    for row in grid:
        if isinstance(row, np.ndarray):
            row = list(row)
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidShapeError(f"Matrix row must be a sequence, got {type(row).__name__}")
        rows.append(row)
    return rows


def _unit_cell(cell: AlgebraicElement, diagonal: bool) -> AlgebraicElement:
    if isinstance(cell, Matrix):
        return cell.to_unit() if diagonal else cell.to_zero()
    return Numeric(1 if diagonal else 0)


def _sign(j: int) -> Numeric:
    return Numeric(-1 if j % 2 else 1)


def _accumulate(terms) -> AlgebraicElement:
    """Sum starting from the first term; an empty sum is numeric zero."""
    total: Optional[AlgebraicElement] = None
    for term in terms:
        total = term if total is None else total + term
    return Numeric(0) if total is None else total
