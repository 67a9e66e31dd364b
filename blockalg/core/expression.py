"""Symbolic expression leaf element."""

from numbers import Real

from blockalg.core.element import AlgebraicElement
from blockalg.core.numeric import Numeric
from blockalg.errors import DivisionByZeroError, InvalidInputError, NotConformableError
from blockalg.symbolic.expression import Expression


class ExpressionElement(AlgebraicElement):
    """Wraps a piecewise ``Expression``; the expression is cloned on entry."""

    __slots__ = ("_expression",)

    def __init__(self, expression: Expression):
        if expression is None:
            raise InvalidInputError("Expression element cannot wrap None")
        if not isinstance(expression, Expression):
            raise TypeError(
                f"Expression element needs an Expression, got {type(expression).__name__}"
            )
        self._expression = expression.clone()

    @property
    def expression(self) -> Expression:
        return self._expression.clone()

    def clone(self) -> "ExpressionElement":
        return ExpressionElement(self._expression)

    @property
    def is_zero(self) -> bool:
        return self._expression.is_zero

    def add(self, other: AlgebraicElement) -> AlgebraicElement:
        if isinstance(other, Numeric):
            return ExpressionElement(self._expression + _real_operand(other))
        if isinstance(other, ExpressionElement):
            return ExpressionElement(self._expression + other._expression)
        return other.add(self)

    def negate(self) -> "ExpressionElement":
        return ExpressionElement(-self._expression)

    def multiply(self, other: AlgebraicElement) -> AlgebraicElement:
        if isinstance(other, Numeric):
            return ExpressionElement(self._expression * _real_operand(other))
        if isinstance(other, ExpressionElement):
            return ExpressionElement(self._expression * other._expression)
        return other.multiply(self)

    def invert(self) -> "ExpressionElement":
        if self.is_zero:
            raise DivisionByZeroError("Cannot invert the zero expression")
        return ExpressionElement(self._expression.inverse())

    def equals(self, other: AlgebraicElement) -> bool:
        if isinstance(other, ExpressionElement):
            return self._expression == other._expression
        if isinstance(other, Numeric):
            value = other.value
            if not isinstance(value, Real):
                value = complex(value)
                if value.imag != 0:
                    return False
                value = value.real
            return self._expression == value
        return False

    def to_double(self) -> float:
        value = self._expression.constant_value
        return 0.0 if value is None else value

    def evaluate_on_equal_interval(self, division: int) -> list[tuple[float, float]]:
        return self._expression.evaluate_on_equal_interval(division)

    def to_string_piecewise(self) -> str:
        return self._expression.to_string_piecewise()

    def __hash__(self) -> int:
        return hash(self._expression)

    def __str__(self) -> str:
        return str(self._expression)

    def __repr__(self) -> str:
        return f"ExpressionElement({str(self._expression)!r})"


def _real_operand(numeric: Numeric) -> Real:
    """
    Real value of a numeric leaf combined with an expression.

    Expressions have real coefficients, so a complex value is accepted only
    when its imaginary part is zero.

    Raises:
        NotConformableError: If the value has a non-zero imaginary part.
    """
    value = numeric.value
    if isinstance(value, Real):
        return value
    value = complex(value)
    if value.imag != 0:
        raise NotConformableError(
            f"Cannot combine complex value {numeric} with a real-valued expression"
        )
    return value.real
