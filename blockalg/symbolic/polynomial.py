"""Polynomial helpers on top of ``numpy.polynomial.Polynomial``."""

from numbers import Real

import numpy as np
from numpy.polynomial import Polynomial

from blockalg.utils.formatting import format_number


def polynomial(*coefficients: Real) -> Polynomial:
    """
    Build a polynomial from ascending coefficients.

    ``polynomial(3, -2)`` is ``3 - 2x``. Trailing zero coefficients are
    trimmed so equal polynomials compare equal.
    """
    if not coefficients:
        coefficients = (0.0,)
    return canonical(Polynomial(np.asarray(coefficients, dtype=float)))


def monomial(degree: int, coefficient: Real = 1.0) -> Polynomial:
    """``coefficient * x**degree``."""
    if degree < 0:
        raise ValueError(f"Monomial degree must be non-negative, got {degree}")
    coef = np.zeros(degree + 1)
    coef[degree] = coefficient
    return canonical(Polynomial(coef))


def canonical(p: Polynomial) -> Polynomial:
    """Trim trailing zeros and replace ``-0.0`` coefficients by ``0.0``."""
    trimmed = p.trim()
    coef = trimmed.coef + 0.0
    return Polynomial(coef)


def is_zero_polynomial(p: Polynomial) -> bool:
    return not np.any(p.coef)


def is_constant(p: Polynomial) -> bool:
    return len(p.trim().coef) == 1


def coefficients_key(p: Polynomial) -> tuple:
    """Hashable identity of a canonical polynomial."""
    return tuple(float(c) for c in p.coef)


def format_polynomial(p: Polynomial, variable: str = "x") -> str:
    """
    Render in ascending powers, e.g. ``3.00 - 2.00x + 0.50x^2``.

    Zero terms are skipped; the zero polynomial renders as ``0.00``.
    """
    terms = []
    for power, c in enumerate(p.coef):
        if c == 0:
            continue
        magnitude = format_number(abs(c))
        if power == 0:
            body = magnitude
        elif power == 1:
            body = f"{magnitude}{variable}"
        else:
            body = f"{magnitude}{variable}^{power}"
        if not terms:
            terms.append(body if c > 0 else f"-{body}")
        else:
            terms.append(f"+ {body}" if c > 0 else f"- {body}")
    return " ".join(terms) if terms else format_number(0.0)
