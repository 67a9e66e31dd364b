"""Text renderings shared by the matrix types."""

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Iterable

_THOUSANDTH = Decimal("0.001")
_CONTEXT = Context(prec=400)  # wide enough for any finite double


def format_number(value: float) -> str:
    """
    Format a real number with the ``#0.00#`` pattern.

    At least one integer digit, at least two and at most three decimals,
    rounding half away from zero.

    Examples:
        >>> format_number(0.5)
        '0.50'
        >>> format_number(-2.1234)
        '-2.123'
        >>> format_number(7)
        '7.00'
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    rounded = Decimal(repr(value)).quantize(
        _THOUSANDTH, rounding=ROUND_HALF_UP, context=_CONTEXT
    )
    text = f"{rounded:f}"
    if text.endswith("0"):
        text = text[:-1]
    if text == "-0.00":
        return "0.00"
    return text


def format_complex(value: complex) -> str:
    """Format a complex number as ``a+bi`` / ``a-bi`` using the number pattern."""
    real = format_number(value.real)
    imag = format_number(abs(value.imag))
    sign = "-" if value.imag < 0 and imag != "0.00" else "+"
    return f"{real}{sign}{imag}i"


def plain_rows(rows: Iterable[Iterable[str]]) -> str:
    """Render rows as ``[c0, c1, ...]`` lines joined by line breaks."""
    return "\n".join("[" + ", ".join(row) + "]" for row in rows)


def word_math_rows(rows: Iterable[Iterable[str]]) -> str:
    """
    Render rows in the embedded-formula matrix notation.

    Cells are joined with ``&``, rows with ``@`` and the whole is wrapped in
    ``[■(...)]``; there is no trailing separator.
    """
    return "[■(" + "@".join("&".join(row) for row in rows) + ")]"
