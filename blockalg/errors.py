"""Exception taxonomy for matrix and element operations."""


class MatrixError(Exception):
    """Base class for all errors raised by blockalg."""


class InvalidInputError(MatrixError, ValueError):
    """Raised when an absent grid or element is passed to a constructor."""


class DimensionMismatchError(MatrixError, ValueError):
    """Raised when operands must share a size (or row count) and do not."""


class NotConformableError(MatrixError, ValueError):
    """Raised when the inner dimensions of a product disagree."""


class NotSquareError(MatrixError, ValueError):
    """Raised when a square matrix is required."""


class InvalidShapeError(MatrixError, ValueError):
    """Raised for empty or ragged grids where a proper shape is required."""


class NestingTooDeepError(InvalidShapeError):
    """Raised when block matrices nest deeper than the configured limit."""


class SingularMatrixError(MatrixError, ArithmeticError):
    """Raised when elimination finds no non-zero pivot."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised for row/column indices outside the matrix."""


class DivisionByZeroError(MatrixError, ZeroDivisionError):
    """Raised when inverting a zero-valued element."""


__all__ = [
    "MatrixError",
    "InvalidInputError",
    "DimensionMismatchError",
    "NotConformableError",
    "NotSquareError",
    "InvalidShapeError",
    "NestingTooDeepError",
    "SingularMatrixError",
    "IndexOutOfRangeError",
    "DivisionByZeroError",
]
