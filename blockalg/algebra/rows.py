"""Row-vector helper used during elimination."""

from collections.abc import Sequence
from typing import Iterable, Iterator

from blockalg.core.element import AlgebraicElement
from blockalg.errors import DimensionMismatchError


class MatrixRow(Sequence):
    """
    Fixed-length snapshot of a matrix row with elementwise arithmetic.

    ``row * e`` multiplies every element on the right, ``e * row`` on the
    left; the two only differ for block (matrix-valued) elements.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[AlgebraicElement]):
        self._elements = tuple(elements)

    @property
    def size(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __iter__(self) -> Iterator[AlgebraicElement]:
        return iter(self._elements)

    def _check_size(self, other: "MatrixRow") -> None:
        if self.size != other.size:
            raise DimensionMismatchError(
                f"Row sizes differ: {self.size} and {other.size}"
            )

    def __add__(self, other):
        if not isinstance(other, MatrixRow):
            return NotImplemented
        self._check_size(other)
        return MatrixRow(a + b for a, b in zip(self._elements, other._elements))

    def __sub__(self, other):
        if not isinstance(other, MatrixRow):
            return NotImplemented
        self._check_size(other)
        return MatrixRow(a - b for a, b in zip(self._elements, other._elements))

    def __neg__(self):
        return MatrixRow(-e for e in self._elements)

    def __mul__(self, factor):
        if not isinstance(factor, AlgebraicElement):
            return NotImplemented
        return MatrixRow(e * factor for e in self._elements)

    def __rmul__(self, factor):
        if not isinstance(factor, AlgebraicElement):
            return NotImplemented
        return MatrixRow(factor * e for e in self._elements)

    def __truediv__(self, divisor):
        if not isinstance(divisor, AlgebraicElement):
            return NotImplemented
        inverse = divisor.invert()
        return MatrixRow(e * inverse for e in self._elements)

    def __eq__(self, other):
        if not isinstance(other, MatrixRow):
            return NotImplemented
        return self.size == other.size and all(
            a == b for a, b in zip(self._elements, other._elements)
        )

    def __hash__(self):
        return hash(self._elements)

    def __repr__(self) -> str:
        return "MatrixRow([" + ", ".join(str(e) for e in self._elements) + "])"
