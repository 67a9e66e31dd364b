"""Flat float64 matrix: the fast path for plain real numbers."""

from numbers import Real
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from blockalg.config import get_config
from blockalg.core.matrix import Matrix
from blockalg.errors import (
    DimensionMismatchError,
    DivisionByZeroError,
    IndexOutOfRangeError,
    InvalidInputError,
    InvalidShapeError,
    NotConformableError,
    NotSquareError,
)
from blockalg.utils.formatting import format_number, plain_rows, word_math_rows


class DenseMatrix:
    """
    Matrix of float64 values held in a 2-D NumPy buffer.

    Mirrors ``Matrix`` without block support. Zero tests and equality use
    the configured absolute tolerance, so results match the generic path
    within that tolerance rather than exactly.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: ArrayLike):
        if elements is None:
            raise InvalidInputError("DenseMatrix elements cannot be None")
        if isinstance(elements, DenseMatrix):
            elements = elements._elements
        try:
            array = np.array(elements, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidShapeError(f"Cannot build a DenseMatrix: {exc}") from exc
        if array.ndim == 1 and array.size == 0:
            array = array.reshape(0, 0)
        if array.ndim != 2:
            raise InvalidShapeError(f"DenseMatrix needs a 2-D grid, got {array.ndim}-D")
        self._elements = array

    @classmethod
    def _wrap(cls, array: NDArray) -> "DenseMatrix":
        matrix = cls.__new__(cls)
        matrix._elements = array
        return matrix

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "DenseMatrix":
        return cls._wrap(np.zeros((rows, cols)))

    @classmethod
    def unit(cls, rows: int, cols: int) -> "DenseMatrix":
        """Ones on the leading diagonal, zeros elsewhere."""
        return cls._wrap(np.eye(rows, cols))

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "DenseMatrix":
        """Coerce a generic matrix cell by cell with ``to_double``."""
        return cls._wrap(matrix.to_array())

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._elements.shape
        return rows, cols

    @property
    def size(self) -> tuple[int, int]:
        return self.shape

    @property
    def rows(self) -> int:
        return self._elements.shape[0]

    @property
    def cols(self) -> int:
        return self._elements.shape[1]

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def is_zero(self) -> bool:
        epsilon = get_config().tolerance.epsilon
        return bool(np.all(np.abs(self._elements) < epsilon))

    def is_same_size(self, other: "DenseMatrix") -> bool:
        return self.shape == other.shape

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfRangeError(
                f"Cell [{row}, {col}] is outside a {self.rows}x{self.cols} matrix"
            )

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        self._check_index(row, col)
        return float(self._elements[row, col])

    def clone(self) -> "DenseMatrix":
        return DenseMatrix._wrap(self._elements.copy())

    def to_array(self) -> NDArray:
        return self._elements.copy()

    def to_matrix(self) -> Matrix:
        return Matrix(self._elements)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other):
        if other is None:
            return self.clone()
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        if not self.is_same_size(other):
            raise DimensionMismatchError(
                f"Cannot add a {self.rows}x{self.cols} matrix "
                f"and a {other.rows}x{other.cols} matrix"
            )
        return DenseMatrix._wrap(self._elements + other._elements)

    def __radd__(self, other):
        if other is None:
            return self.clone()
        return NotImplemented

    def __neg__(self) -> "DenseMatrix":
        return DenseMatrix._wrap(-self._elements)

    def __sub__(self, other):
        if other is None:
            return self.clone()
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        if other is None:
            return -self
        return NotImplemented

    def __mul__(self, other):
        if other is None:
            return None
        if isinstance(other, DenseMatrix):
            return self._matmul(other)
        if isinstance(other, Real):
            return self._scale(float(other))
        return NotImplemented

    def __rmul__(self, other):
        if other is None:
            return None
        if isinstance(other, Real):
            return self._scale(float(other))
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self._matmul(other)

    def __truediv__(self, other):
        if other is None:
            return None
        if isinstance(other, DenseMatrix):
            return self._matmul(other.inverse())
        if isinstance(other, Real):
            if get_config().tolerance.near_zero(float(other)):
                raise DivisionByZeroError(f"Cannot divide a matrix by {other}")
            return self._scale(1.0 / float(other))
        return NotImplemented

    def _scale(self, factor: float) -> "DenseMatrix":
        if get_config().tolerance.near_zero(factor):
            return DenseMatrix.zeros(self.rows, self.cols)
        return DenseMatrix._wrap(self._elements * factor)

    def _matmul(self, other: "DenseMatrix") -> "DenseMatrix":
        if self.cols != other.rows:
            raise NotConformableError(
                f"Matrices {self.rows}x{self.cols} and {other.rows}x{other.cols} "
                "are not conformable"
            )
        return DenseMatrix._wrap(self._elements @ other._elements)

    def scalar_product(self, other: "DenseMatrix") -> "DenseMatrix":
        """Elementwise product of two same-size matrices."""
        if other is None or not self.is_same_size(other):
            raise DimensionMismatchError("Scalar product needs two matrices of the same size")
        return DenseMatrix._wrap(self._elements * other._elements)

    def dot_product(self, other: "DenseMatrix") -> float:
        """Sum of the elementwise products of two same-size matrices."""
        if other is None or not self.is_same_size(other):
            raise DimensionMismatchError("Dot product needs two matrices of the same size")
        return float(np.sum(self._elements * other._elements))

    def map(self, func: Callable[[float], float]) -> "DenseMatrix":
        if func is None:
            return self.clone()
        return DenseMatrix([[func(float(x)) for x in row] for row in self._elements])

    # ------------------------------------------------------------------
    # Matrix operations
    # ------------------------------------------------------------------

    def transpose(self) -> "DenseMatrix":
        if self.rows < 1 or self.cols < 1:
            return self.clone()
        return DenseMatrix._wrap(self._elements.T.copy())

    @property
    def T(self) -> "DenseMatrix":
        return self.transpose()

    def to_unit(self) -> "DenseMatrix":
        return DenseMatrix.unit(self.rows, self.cols)

    def to_zero(self) -> "DenseMatrix":
        return DenseMatrix.zeros(self.rows, self.cols)

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        if not self.is_square:
            raise NotSquareError(
                f"Matrix {self.rows}x{self.cols} is not square and has no determinant"
            )
        if self.rows < 1:
            raise InvalidShapeError("Empty matrix has no determinant")
        if self.rows == 1:
            return float(self._elements[0, 0])
        total = 0.0
        for j in range(self.cols):
            total += self._elements[0, j] * (-1) ** j * self.minor_of(0, j).determinant()
        return float(total)

    def minor_of(self, row: int, col: int) -> "DenseMatrix":
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfRangeError(
                f"Minor [{row}, {col}] does not exist in a {self.rows}x{self.cols} matrix"
            )
        reduced = np.delete(np.delete(self._elements, row, axis=0), col, axis=1)
        return DenseMatrix._wrap(reduced)

    def inverse(self) -> "DenseMatrix":
        if not self.is_square:
            raise NotSquareError(f"Matrix {self.rows}x{self.cols} is not square, no inverse")
        return DenseMatrix.gauss_jordan(self, self.to_unit())

    @staticmethod
    def gauss_jordan(left: "DenseMatrix", right: "DenseMatrix") -> "DenseMatrix":
        """``left^-1 @ right`` by Gauss-Jordan elimination."""
        from blockalg.solvers.gauss_jordan import solve_dense

        if left is None or right is None:
            raise InvalidInputError("Gauss-Jordan elimination needs two matrices")
        return DenseMatrix._wrap(solve_dense(left._elements, right._elements))

    # ------------------------------------------------------------------
    # Identity and rendering
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        if not self.is_same_size(other):
            return False
        epsilon = get_config().tolerance.epsilon
        return bool(np.all(np.abs(self._elements - other._elements) < epsilon))

    def __hash__(self):
        # tolerant equality is not transitive, so only the shape is hashed
        return hash(self.shape)

    def _formatted_rows(self) -> list[list[str]]:
        return [[format_number(x) for x in row] for row in self._elements]

    def __str__(self) -> str:
        return plain_rows(self._formatted_rows())

    def to_word_math(self) -> str:
        return word_math_rows(self._formatted_rows())

    def __repr__(self) -> str:
        return f"DenseMatrix({self.rows}x{self.cols})"
