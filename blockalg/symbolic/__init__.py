"""Piecewise polynomial expressions used as symbolic matrix cells."""

from blockalg.symbolic.limits import Limit
from blockalg.symbolic.polynomial import polynomial, monomial
from blockalg.symbolic.expression import Expression, Piece

__all__ = [
    "Limit",
    "polynomial",
    "monomial",
    "Expression",
    "Piece",
]
