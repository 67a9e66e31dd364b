"""Tests for the algebraic element leaves and operator rules."""

from fractions import Fraction

import numpy as np
import pytest

from blockalg.core import (
    ExpressionElement,
    Matrix,
    Numeric,
    add,
    as_element,
    multiply,
)
from blockalg.errors import (
    DimensionMismatchError,
    DivisionByZeroError,
    InvalidInputError,
    NotConformableError,
)
from blockalg.symbolic import Expression, Limit, polynomial


def test_numeric_arithmetic():
    """Test closure of numeric leaves under the element operations."""
    a, b = Numeric(2), Numeric(3)

    assert a + b == Numeric(5)
    assert a - b == Numeric(-1)
    assert a * b == Numeric(6)
    assert -a == Numeric(-2)
    assert a / b == Numeric(Fraction(2, 3))


def test_integer_inverse_is_exact():
    """Inverting an integer produces a Fraction, not a float."""
    inverse = Numeric(3).invert()

    assert isinstance(inverse.value, Fraction)
    assert inverse.value == Fraction(1, 3)


def test_float_and_complex_inverse():
    assert Numeric(0.5).invert() == Numeric(2.0)
    assert Numeric(1j).invert() == Numeric(-1j)


def test_invert_zero_raises():
    with pytest.raises(DivisionByZeroError):
        Numeric(0).invert()
    # also catchable as the builtin
    with pytest.raises(ZeroDivisionError):
        Numeric(0.0).invert()


def test_is_zero():
    assert Numeric(0).is_zero
    assert Numeric(0.0).is_zero
    assert Numeric(np.float64(0.0)).is_zero
    assert not Numeric(1e-300).is_zero


def test_numeric_rejects_non_numbers():
    with pytest.raises(InvalidInputError):
        Numeric(None)
    with pytest.raises(TypeError):
        Numeric("1")
    with pytest.raises(TypeError):
        Numeric(True)


def test_raw_numbers_are_not_converted_implicitly():
    with pytest.raises(TypeError):
        Numeric(2) + 3
    with pytest.raises(TypeError):
        3 * Numeric(2)


def test_absent_operand_rules():
    """None is the additive identity and annihilates products."""
    x = Numeric(2)

    assert x + None == x
    assert None + x == x
    assert x - None == x
    assert None - x == Numeric(-2)
    assert x * None is None
    assert None * x is None
    assert x / None is None

    assert add(None, None) is None
    assert add(x, None) is x
    assert add(None, x) is x
    assert multiply(x, None) is None
    assert multiply(x, Numeric(4)) == Numeric(8)


def test_numeric_string_form():
    assert str(Numeric(0.5)) == "0.50"
    assert str(Numeric(-2.1234)) == "-2.123"
    assert str(Numeric(Fraction(1, 3))) == "0.333"
    assert str(Numeric(complex(3, 1))) == "3.00+1.00i"
    assert str(Numeric(complex(3, -1))) == "3.00-1.00i"
    assert str(Numeric(complex(4, 0))) == "4.00"


def test_to_double():
    assert Numeric(Fraction(1, 4)).to_double() == 0.25
    assert Numeric(complex(3, 4)).to_double() == 3.0

    ramp = ExpressionElement(Expression((polynomial(0, 1), Limit.create(0, 1))))
    assert ramp.to_double() == 0.0
    assert ExpressionElement(Expression(7)).to_double() == 7.0
    assert Matrix([[1]]).to_double() == 0.0


def test_numeric_added_to_expression_delegates():
    """Mixed addition is resolved by the expression leaf."""
    x = ExpressionElement(Expression(polynomial(0, 1)))

    left = Numeric(2) + x
    right = x + Numeric(2)

    assert isinstance(left, ExpressionElement)
    assert left == right
    assert left.expression == Expression(polynomial(2, 1))


def test_numeric_times_expression():
    x = ExpressionElement(Expression((polynomial(0, 1), Limit.create(0, 10))))

    product = Numeric(3) * x

    assert isinstance(product, ExpressionElement)
    assert product.expression.evaluate(2.0) == pytest.approx(6.0)


def test_leaf_added_to_one_by_one_matrix():
    """A leaf is promoted to a 1x1 matrix before matrix addition."""
    result = Numeric(2) + Matrix([[3]])

    assert isinstance(result, Matrix)
    assert result == Matrix([[5]])
    assert Matrix([[3]]) + Numeric(2) == Matrix([[5]])


def test_leaf_added_to_larger_matrix_fails():
    with pytest.raises(DimensionMismatchError):
        Numeric(2) + Matrix([[1, 2], [3, 4]])
    with pytest.raises(DimensionMismatchError):
        Matrix([[1, 2], [3, 4]]) + Numeric(2)


def test_numeric_times_matrix_broadcasts():
    result = Numeric(2) * Matrix([[1, 2], [3, 4]])

    assert result == Matrix([[2, 4], [6, 8]])


def test_numeric_equals_constant_expression():
    """Equality between variants is symmetric and hash-consistent."""
    n = Numeric(4)
    e = ExpressionElement(Expression(4))

    assert n == e
    assert e == n
    assert hash(n) == hash(e)
    assert n != Matrix([[4]])


def test_fraction_equals_constant_expression_with_same_hash():
    """Inverted integers stay Fractions but still hash like the float constant."""
    n = Numeric(3).invert()
    e = ExpressionElement(Expression(Fraction(1, 3)))

    assert n == e
    assert e == n
    assert hash(n) == hash(e)
    assert hash(Matrix([[n]])) == hash(Matrix([[e]]))


def test_complex_with_zero_imaginary_part_meets_expression():
    x = ExpressionElement(Expression((polynomial(0, 1), Limit.create(0, 10))))

    product = Numeric(2 + 0j) * x
    total = x + Numeric(1 + 0j)

    assert product.expression.evaluate(3.0) == pytest.approx(6.0)
    assert total.expression.evaluate(3.0) == pytest.approx(4.0)
    assert ExpressionElement(Expression(2)) == Numeric(2 + 0j)
    assert hash(ExpressionElement(Expression(2))) == hash(Numeric(2 + 0j))


def test_complex_value_cannot_meet_expression():
    x = ExpressionElement(Expression(polynomial(0, 1)))

    with pytest.raises(NotConformableError):
        Numeric(1j) * x
    with pytest.raises(NotConformableError):
        x + Numeric(2 - 1j)
    assert x != Numeric(1j)
    assert ExpressionElement(Expression(0)) != Numeric(1j)


def test_expression_element_clones_on_entry():
    expression = Expression(polynomial(1, 1))
    element = ExpressionElement(expression)

    assert element.expression == expression
    assert element.expression is not expression


def test_expression_element_invert():
    element = ExpressionElement(Expression((polynomial(2), Limit.create(0, 1))))

    assert element.invert().expression.evaluate(0.5) == pytest.approx(0.5)
    with pytest.raises(DivisionByZeroError):
        ExpressionElement(Expression()).invert()


def test_expression_element_samples_on_equal_interval():
    element = ExpressionElement(Expression((polynomial(0, 2), Limit.create(0, 2))))

    samples = element.evaluate_on_equal_interval(2)

    assert [x for x, _ in samples] == [0.0, 1.0, 2.0]
    assert [v for _, v in samples] == pytest.approx([0.0, 2.0, 4.0])


def test_as_element():
    n = Numeric(1)

    assert as_element(n) is n
    assert as_element(2.5) == Numeric(2.5)
    assert as_element(Fraction(1, 2)) == Numeric(0.5)
    assert as_element(np.int64(3)) == Numeric(3)
    assert isinstance(as_element(Expression(1)), ExpressionElement)

    with pytest.raises(InvalidInputError):
        as_element(None)
    with pytest.raises(TypeError):
        as_element("x")
    with pytest.raises(TypeError):
        as_element(True)
