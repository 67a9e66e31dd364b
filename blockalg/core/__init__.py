"""Algebraic elements and the matrix types built on them."""

from blockalg.core.element import AlgebraicElement, add, multiply
from blockalg.core.numeric import Numeric
from blockalg.core.expression import ExpressionElement
from blockalg.core.convert import as_element
from blockalg.core.matrix import Matrix
from blockalg.core.dense_matrix import DenseMatrix

__all__ = [
    "AlgebraicElement",
    "add",
    "multiply",
    "Numeric",
    "ExpressionElement",
    "as_element",
    "Matrix",
    "DenseMatrix",
]
