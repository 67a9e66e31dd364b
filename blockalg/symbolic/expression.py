"""Piecewise rational polynomial expressions over intervals."""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Iterable, Optional, Sequence

from numpy.polynomial import Polynomial

from blockalg.symbolic.limits import Limit
from blockalg.symbolic.polynomial import (
    canonical,
    coefficients_key,
    format_polynomial,
    is_constant,
    is_zero_polynomial,
    polynomial,
)
from blockalg.utils.formatting import format_number

Rational = tuple[Polynomial, Polynomial]  # (numerator, denominator)


@dataclass(frozen=True, eq=False)
class Piece:
    """``numerator / denominator`` on ``limit``."""

    numerator: Polynomial
    denominator: Polynomial
    limit: Limit

    @property
    def rational(self) -> Rational:
        return self.numerator, self.denominator

    def key(self) -> tuple:
        return (
            coefficients_key(self.numerator),
            coefficients_key(self.denominator),
            self.limit,
        )

    def value_at(self, x: float) -> float:
        return float(self.numerator(x)) / float(self.denominator(x))


class Expression:
    """
    Sum of rational polynomial pieces, each bounded by a ``Limit``.

    Pieces may be given as a polynomial or number (unbounded), a
    ``(body, limit)`` pair, or a ``((numerator, denominator), limit)`` pair.
    Overlapping pieces are summed; outside every piece the expression is
    zero. The stored pieces are canonical: sorted, non-overlapping,
    adjacent identical pieces merged and zero pieces dropped.

    Example:
        >>> e = Expression((polynomial(3, -2), Limit.create(3, 4)))
        >>> e.evaluate(3.5)
        -4.0
    """

    def __init__(self, *pieces):
        raw = [_parse_piece(p) for p in pieces]
        self._pieces: tuple[Piece, ...] = tuple(_sweep([raw], lambda rs: rs[0]))

    @classmethod
    def _from_pieces(cls, pieces: Iterable[Piece]) -> "Expression":
        expr = cls.__new__(cls)
        expr._pieces = tuple(pieces)
        return expr

    @classmethod
    def constant(cls, value: Real) -> "Expression":
        return cls(value)

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return self._pieces

    @property
    def is_zero(self) -> bool:
        return not self._pieces

    @property
    def is_constant(self) -> bool:
        """True for the zero expression and for a single unbounded constant."""
        if not self._pieces:
            return True
        if len(self._pieces) != 1:
            return False
        piece = self._pieces[0]
        return piece.limit.is_unbounded and is_constant(piece.numerator)

    @property
    def constant_value(self) -> Optional[float]:
        if not self.is_constant:
            return None
        if not self._pieces:
            return 0.0
        return float(self._pieces[0].numerator.coef[0])

    def clone(self) -> "Expression":
        return Expression._from_pieces(
            Piece(
                Polynomial(p.numerator.coef.copy()),
                Polynomial(p.denominator.coef.copy()),
                p.limit,
            )
            for p in self._pieces
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Expression._from_pieces(
            _sweep([self._pieces, other._pieces], _sum_rationals)
        )

    __radd__ = __add__

    def __neg__(self) -> "Expression":
        return Expression._from_pieces(
            Piece(canonical(-p.numerator), p.denominator, p.limit)
            for p in self._pieces
        )

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Expression._from_pieces(
            _sweep([self._pieces, other._pieces], _product_of_rationals)
        )

    __rmul__ = __mul__

    def inverse(self) -> "Expression":
        """
        Reciprocal of every piece over the expression's support.

        Raises:
            ZeroDivisionError: If the expression is zero everywhere.
        """
        if self.is_zero:
            raise ZeroDivisionError("Cannot invert the zero expression")
        return Expression._from_pieces(
            Piece(*_reduce(p.denominator, p.numerator), p.limit)
            for p in self._pieces
        )

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self.inverse()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, x: float) -> float:
        """Value at ``x``; zero outside every piece."""
        piece = self._piece_containing(x)
        return piece.value_at(x) if piece is not None else 0.0

    def span(self) -> tuple[float, float]:
        """Smallest closed interval holding every finite piece bound."""
        bounds = [
            b
            for p in self._pieces
            for b in (p.limit.lower, p.limit.upper)
            if math.isfinite(b)
        ]
        if len(set(bounds)) < 2:
            raise ValueError(f"Expression {self} has no bounded span")
        return min(bounds), max(bounds)

    def evaluate_on_equal_interval(self, division: int) -> list[tuple[float, float]]:
        """
        Sample the expression at ``division + 1`` equally spaced locations.

        Args:
            division: Number of equal subdivisions of the bounded span

        Returns:
            List of (location, value) pairs; the right end point takes the
            value approached from the left.
        """
        if division < 1:
            raise ValueError(f"division must be at least 1, got {division}")
        lower, upper = self.span()
        step = (upper - lower) / division
        samples = []
        for k in range(division + 1):
            x = upper if k == division else lower + k * step
            piece = self._piece_containing(x, closed_right=True)
            samples.append((x, piece.value_at(x) if piece is not None else 0.0))
        return samples

    def _piece_containing(self, x: float, closed_right: bool = False) -> Optional[Piece]:
        for piece in self._pieces:
            if piece.limit.contains(x):
                return piece
        if closed_right:
            for piece in reversed(self._pieces):
                if piece.limit.upper == x:
                    return piece
        return None

    # ------------------------------------------------------------------
    # Identity and rendering
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, Real):
            other = Expression(other)
        if not isinstance(other, Expression):
            return NotImplemented
        return [p.key() for p in self._pieces] == [p.key() for p in other._pieces]

    def __hash__(self):
        if self.is_constant:
            return hash(self.constant_value)
        return hash(tuple(p.key() for p in self._pieces))

    def __str__(self) -> str:
        if self.is_zero:
            return format_number(0.0)
        if len(self._pieces) == 1 and self._pieces[0].limit.is_unbounded:
            return _format_rational(self._pieces[0].rational)
        return "; ".join(
            f"{_format_rational(p.rational)}, {p.limit}" for p in self._pieces
        )

    def to_string_piecewise(self) -> str:
        """Cases notation for formula fields: ``{■(f&a≤x<b@g&b≤x<c)┤``."""
        if self.is_zero or (
            len(self._pieces) == 1 and self._pieces[0].limit.is_unbounded
        ):
            return str(self)
        cases = "@".join(
            f"{_format_rational(p.rational)}&{p.limit}" for p in self._pieces
        )
        return "{■(" + cases + ")┤"

    def __repr__(self) -> str:
        return f"Expression({str(self)!r})"


def _parse_piece(piece) -> Piece:
    if isinstance(piece, (Polynomial, Real)):
        return Piece(*_reduce(_as_polynomial(piece), polynomial(1)), Limit.unbounded())
    if isinstance(piece, tuple) and len(piece) == 2:
        body, limit = piece
        if isinstance(limit, tuple):
            limit = Limit.create(*limit)
        if not isinstance(limit, Limit):
            raise TypeError(f"Expected a Limit, got {type(limit).__name__}")
        if isinstance(body, tuple):
            numerator, denominator = body
            return Piece(
                *_reduce(_as_polynomial(numerator), _as_polynomial(denominator)),
                limit,
            )
        return Piece(*_reduce(_as_polynomial(body), polynomial(1)), limit)
    raise TypeError(f"Cannot build an expression piece from {piece!r}")


def _as_polynomial(value) -> Polynomial:
    if isinstance(value, Polynomial):
        return canonical(value)
    if isinstance(value, Real):
        return polynomial(value)
    raise TypeError(f"Expected a polynomial or real number, got {type(value).__name__}")


def _coerce(value) -> Optional[Expression]:
    if isinstance(value, Expression):
        return value
    if isinstance(value, (Real, Polynomial)):
        return Expression(value)
    return None


def _reduce(numerator: Polynomial, denominator: Polynomial) -> Rational:
    """Fold a constant denominator into the numerator."""
    if is_zero_polynomial(denominator):
        raise ZeroDivisionError("Expression piece has a zero denominator")
    if is_constant(denominator):
        return canonical(numerator / float(denominator.coef[0])), polynomial(1)
    return canonical(numerator), canonical(denominator)


def _sum_rationals(rationals: Sequence[Optional[Rational]]) -> Optional[Rational]:
    total = None
    for r in rationals:
        if r is None:
            continue
        if total is None:
            total = r
            continue
        (n1, d1), (n2, d2) = total, r
        if coefficients_key(d1) == coefficients_key(d2):
            total = _reduce(n1 + n2, d1)
        else:
            total = _reduce(n1 * d2 + n2 * d1, d1 * d2)
    return total


def _product_of_rationals(rationals: Sequence[Optional[Rational]]) -> Optional[Rational]:
    if any(r is None for r in rationals):
        return None
    (n1, d1), (n2, d2) = rationals
    return _reduce(n1 * n2, d1 * d2)


def _probe(lower: float, upper: float) -> float:
    """A point strictly inside ``[lower, upper)``."""
    if math.isinf(lower) and math.isinf(upper):
        return 0.0
    if math.isinf(lower):
        return upper - 1.0
    if math.isinf(upper):
        return lower + 1.0
    return (lower + upper) / 2


def _sweep(
    groups: Sequence[Sequence[Piece]],
    combine: Callable[[Sequence[Optional[Rational]]], Optional[Rational]],
) -> list[Piece]:
    """
    Combine piece groups on the elementary intervals between their bounds.

    ``combine`` receives, per group, the summed rational covering the
    interval (``None`` where the group is zero) and returns the resulting
    rational or ``None``.
    """
    bounds = {-math.inf, math.inf}
    for group in groups:
        for piece in group:
            bounds.update((piece.limit.lower, piece.limit.upper))
    ordered = sorted(bounds)

    result: list[Piece] = []
    for lower, upper in zip(ordered, ordered[1:]):
        x = _probe(lower, upper)
        covering = [
            _sum_rationals([p.rational for p in group if p.limit.contains(x)])
            for group in groups
        ]
        rational = combine(covering)
        if rational is None or is_zero_polynomial(rational[0]):
            continue
        numerator, denominator = rational
        if result and result[-1].limit.upper == lower:
            last = result[-1]
            if (coefficients_key(last.numerator), coefficients_key(last.denominator)) == (
                coefficients_key(numerator),
                coefficients_key(denominator),
            ):
                result[-1] = Piece(numerator, denominator, Limit(last.limit.lower, upper))
                continue
        result.append(Piece(numerator, denominator, Limit(lower, upper)))
    return result


def _format_rational(rational: Rational) -> str:
    numerator, denominator = rational
    if is_constant(denominator) and denominator.coef[0] == 1:
        return format_polynomial(numerator)
    return f"({format_polynomial(numerator)})/({format_polynomial(denominator)})"
