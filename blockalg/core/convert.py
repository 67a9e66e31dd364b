"""Explicit conversion of raw values into algebraic elements."""

from numbers import Complex

from blockalg.core.element import AlgebraicElement
from blockalg.core.expression import ExpressionElement
from blockalg.core.numeric import Numeric
from blockalg.errors import InvalidInputError
from blockalg.symbolic.expression import Expression


def as_element(value) -> AlgebraicElement:
    """
    Wrap a raw value as an algebraic element.

    Elements pass through unchanged, expressions become
    ``ExpressionElement`` and numbers become ``Numeric``.

    Raises:
        InvalidInputError: If ``value`` is None.
        TypeError: If the value has no element representation.
    """
    if value is None:
        raise InvalidInputError("Cannot build an element from None")
    if isinstance(value, AlgebraicElement):
        return value
    if isinstance(value, Expression):
        return ExpressionElement(value)
    if isinstance(value, Complex) and not isinstance(value, bool):
        return Numeric(value)
    raise TypeError(f"No algebraic element for {type(value).__name__}")
