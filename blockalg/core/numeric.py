"""Numeric leaf element."""

from fractions import Fraction
from numbers import Complex, Integral, Real

from blockalg.core.element import AlgebraicElement
from blockalg.errors import DivisionByZeroError, InvalidInputError
from blockalg.utils.formatting import format_complex, format_number


class Numeric(AlgebraicElement):
    """
    Wraps a number (int, float, complex, Fraction or numpy scalar).

    Inverting an integral value produces a ``Fraction`` so integer
    matrices stay exact through elimination.
    """

    __slots__ = ("_value",)

    def __init__(self, value):
        if value is None:
            raise InvalidInputError("Numeric element cannot wrap None")
        if isinstance(value, Numeric):
            value = value.value
        if isinstance(value, bool) or not isinstance(value, Complex):
            raise TypeError(f"Numeric element needs a number, got {type(value).__name__}")
        self._value = value

    @property
    def value(self):
        return self._value

    def clone(self) -> "Numeric":
        return Numeric(self._value)

    @property
    def is_zero(self) -> bool:
        return bool(self._value == 0)

    def add(self, other: AlgebraicElement) -> AlgebraicElement:
        if isinstance(other, Numeric):
            return Numeric(self._value + other._value)
        return other.add(self)

    def negate(self) -> "Numeric":
        return Numeric(-self._value)

    def multiply(self, other: AlgebraicElement) -> AlgebraicElement:
        if isinstance(other, Numeric):
            return Numeric(self._value * other._value)
        return other.multiply(self)

    def invert(self) -> "Numeric":
        if self.is_zero:
            raise DivisionByZeroError(f"Cannot invert numeric element {self}")
        if isinstance(self._value, Integral):
            return Numeric(Fraction(1, int(self._value)))
        return Numeric(1 / self._value)

    def equals(self, other: AlgebraicElement) -> bool:
        if isinstance(other, Numeric):
            return bool(self._value == other._value)
        from blockalg.core.expression import ExpressionElement

        if isinstance(other, ExpressionElement):
            return other.equals(self)
        return False

    def to_double(self) -> float:
        if isinstance(self._value, Real):
            return float(self._value)
        return float(self._value.real)

    def __hash__(self) -> int:
        # expressions keep constants as floats; equal values must hash alike
        if isinstance(self._value, Real):
            try:
                return hash(float(self._value))
            except OverflowError:
                return hash(self._value)
        return hash(complex(self._value))

    def __str__(self) -> str:
        if isinstance(self._value, Real):
            return format_number(self._value)
        value = complex(self._value)
        if value.imag == 0:
            return format_number(value.real)
        return format_complex(value)

    def __repr__(self) -> str:
        return f"Numeric({self._value!r})"
