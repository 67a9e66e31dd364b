"""
Blockalg: linear algebra over heterogeneous algebraic elements.

Matrix cells may hold numbers, piecewise polynomial expressions or other
matrices, and one Gauss-Jordan elimination serves all of them:
- Exact inversion and solving for numeric, symbolic and block matrices
- Recursive unit/zero construction for block matrices
- Cofactor determinants and minors
- A float64 fast path with epsilon-tolerant comparisons
"""

import logging as _logging

__version__ = "0.1.0"

from blockalg.config import KernelConfig, NumericTolerance, get_config, set_config, override
from blockalg.errors import (
    MatrixError,
    InvalidInputError,
    DimensionMismatchError,
    NotConformableError,
    NotSquareError,
    InvalidShapeError,
    NestingTooDeepError,
    SingularMatrixError,
    IndexOutOfRangeError,
    DivisionByZeroError,
)
from blockalg.core import (
    AlgebraicElement,
    Numeric,
    ExpressionElement,
    as_element,
    Matrix,
    DenseMatrix,
)
from blockalg.solvers import solve, solve_dense
from blockalg.symbolic import Expression, Limit, polynomial, monomial

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "KernelConfig",
    "NumericTolerance",
    "get_config",
    "set_config",
    "override",
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
    "AlgebraicElement",
    "Numeric",
    "ExpressionElement",
    "as_element",
    "Matrix",
    "DenseMatrix",
    "solve",
    "solve_dense",
    "Expression",
    "Limit",
    "polynomial",
    "monomial",
]
