"""Algebraic element contract shared by every matrix cell type."""

from abc import ABC, abstractmethod
from typing import Optional


class AlgebraicElement(ABC):
    """
    Value usable as a matrix cell: a number, an expression or a matrix.

    Elements are immutable from the caller's point of view; every
    operation returns a new element. When a binary operation receives an
    operand of another variant, the receiver delegates to the operand with
    the arguments swapped (``other.add(self)``), so each variant decides how
    it combines with the others.

    Operators are sugar over the named operations. An absent (``None``)
    operand is the additive identity for ``+``/``-`` and makes ``*``/``/``
    return ``None``. Raw Python numbers are not converted implicitly; use
    ``as_element`` or the leaf constructors.
    """

    __slots__ = ()

    @abstractmethod
    def clone(self) -> "AlgebraicElement":
        """Independent copy."""
        ...

    @property
    @abstractmethod
    def is_zero(self) -> bool:
        """True if this is the additive identity."""
        ...

    @abstractmethod
    def add(self, other: "AlgebraicElement") -> "AlgebraicElement":
        ...

    @abstractmethod
    def negate(self) -> "AlgebraicElement":
        ...

    @abstractmethod
    def multiply(self, other: "AlgebraicElement") -> "AlgebraicElement":
        ...

    @abstractmethod
    def invert(self) -> "AlgebraicElement":
        """
        Multiplicative inverse.

        Raises:
            DivisionByZeroError: If the element is zero.
        """
        ...

    @abstractmethod
    def equals(self, other: "AlgebraicElement") -> bool:
        ...

    @abstractmethod
    def to_double(self) -> float:
        """Best-effort scalar value; 0.0 where no constant exists."""
        ...

    @abstractmethod
    def __hash__(self) -> int:
        ...

    @abstractmethod
    def __str__(self) -> str:
        ...

    @property
    def depth(self) -> int:
        """Number of matrix levels inside this element (0 for leaves)."""
        return 0

    # ------------------------------------------------------------------
    # Operator sugar
    # ------------------------------------------------------------------

    def __add__(self, other):
        if other is None:
            return self.clone()
        if not isinstance(other, AlgebraicElement):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if other is None:
            return self.clone()
        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __sub__(self, other):
        if other is None:
            return self.clone()
        if not isinstance(other, AlgebraicElement):
            return NotImplemented
        return self.add(other.negate())

    def __rsub__(self, other):
        if other is None:
            return self.negate()
        return NotImplemented

    def __mul__(self, other):
        if other is None:
            return None
        if not isinstance(other, AlgebraicElement):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if other is None:
            return None
        return NotImplemented

    def __truediv__(self, other):
        if other is None:
            return None
        if not isinstance(other, AlgebraicElement):
            return NotImplemented
        return self.multiply(other.invert())

    def __rtruediv__(self, other):
        if other is None:
            return None
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, AlgebraicElement):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


def add(
    a: Optional[AlgebraicElement], b: Optional[AlgebraicElement]
) -> Optional[AlgebraicElement]:
    """Sum where an absent operand is the additive identity."""
    if a is None and b is None:
        return None
    if b is None:
        return a
    if a is None:
        return b
    return a.add(b)


def multiply(
    a: Optional[AlgebraicElement], b: Optional[AlgebraicElement]
) -> Optional[AlgebraicElement]:
    """Product; ``None`` if either operand is absent."""
    if a is None or b is None:
        return None
    return a.multiply(b)
