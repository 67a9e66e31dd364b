"""Tests for piecewise polynomial expressions."""

import math

import pytest

from blockalg.symbolic import Expression, Limit, monomial, polynomial


def linear_piece():
    """3 - 2x on [3, 4)."""
    return Expression((polynomial(3, -2), Limit.create(3, 4)))


def test_limit_orders_bounds_and_is_half_open():
    limit = Limit.create(4, 3)

    assert (limit.lower, limit.upper) == (3.0, 4.0)
    assert limit.contains(3.0)
    assert not limit.contains(4.0)
    assert limit.is_bounded
    assert Limit.unbounded().is_unbounded


def test_limit_rejects_empty_interval():
    with pytest.raises(ValueError):
        Limit.create(2, 2)
    with pytest.raises(ValueError):
        Limit(3.0, 1.0)


def test_polynomial_helpers():
    assert polynomial(3, -2, 0, 0) == polynomial(3, -2)
    assert monomial(2, 5.0) == polynomial(0, 0, 5)
    with pytest.raises(ValueError):
        monomial(-1)


def test_evaluate_inside_and_outside_support():
    e = linear_piece()

    assert e.evaluate(3.5) == pytest.approx(-4.0)
    assert e.evaluate(4.0) == 0.0
    assert e.evaluate(10.0) == 0.0


def test_adjacent_equal_pieces_merge():
    split = Expression(
        (polynomial(1), Limit.create(0, 2)),
        (polynomial(1), Limit.create(2, 5)),
    )

    assert split == Expression((polynomial(1), Limit.create(0, 5)))
    assert len(split.pieces) == 1


def test_overlapping_pieces_are_summed():
    e = Expression(
        (polynomial(1), Limit.create(0, 2)),
        (polynomial(2), Limit.create(1, 3)),
    )

    assert [p.limit for p in e.pieces] == [
        Limit(0.0, 1.0),
        Limit(1.0, 2.0),
        Limit(2.0, 3.0),
    ]
    assert e.evaluate(1.5) == pytest.approx(3.0)


def test_add_constant_extends_over_real_line():
    e = linear_piece() + 5

    assert e.evaluate(3.5) == pytest.approx(1.0)
    assert e.evaluate(10.0) == pytest.approx(5.0)
    assert e.evaluate(-10.0) == pytest.approx(5.0)


def test_subtracting_itself_gives_zero():
    e = linear_piece()

    assert (e - e).is_zero
    assert (e - e) == 0


def test_product_is_zero_outside_either_support():
    e = linear_piece() * Expression((polynomial(2), Limit.create(3.5, 10)))

    assert e.evaluate(3.75) == pytest.approx(-9.0)
    assert e.evaluate(3.25) == 0.0
    assert e.evaluate(5.0) == 0.0


def test_inverse_of_constant_and_linear_pieces():
    assert Expression((polynomial(2), Limit.create(0, 1))).inverse().evaluate(0.5) == pytest.approx(0.5)

    reciprocal = Expression((polynomial(0, 1), Limit.create(1, 2))).inverse()
    assert reciprocal.evaluate(1.5) == pytest.approx(1 / 1.5)


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Expression().inverse()


def test_rational_pieces():
    e = Expression(((polynomial(0, 1), polynomial(1, 1)), Limit.create(0, 10)))

    assert e.evaluate(1.0) == pytest.approx(0.5)
    assert (e * Expression(polynomial(1, 1))).evaluate(3.0) == pytest.approx(3.0)


def test_division_by_number():
    e = linear_piece() / 2

    assert e.evaluate(3.5) == pytest.approx(-2.0)


def test_evaluate_on_equal_interval():
    ramp = Expression((polynomial(0, 1), Limit.create(0, 4)))

    samples = ramp.evaluate_on_equal_interval(4)

    assert [x for x, _ in samples] == [0.0, 1.0, 2.0, 3.0, 4.0]
    # right end point takes the value from the left
    assert [v for _, v in samples] == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0])


def test_evaluate_on_equal_interval_validation():
    with pytest.raises(ValueError):
        Expression(polynomial(1, 1)).evaluate_on_equal_interval(4)
    with pytest.raises(ValueError):
        linear_piece().evaluate_on_equal_interval(0)


def test_constant_detection():
    assert Expression(5).is_constant
    assert Expression(5).constant_value == 5.0
    assert Expression().constant_value == 0.0
    assert not linear_piece().is_constant
    assert linear_piece().constant_value is None


def test_equality_and_hash():
    assert Expression(5) == 5
    assert hash(Expression(5)) == hash(5)
    assert linear_piece() == linear_piece()
    assert hash(linear_piece()) == hash(linear_piece())
    assert linear_piece() != Expression((polynomial(3, -2), Limit.create(3, 5)))


def test_clone_is_independent_and_equal():
    e = linear_piece()
    copy = e.clone()

    assert copy == e
    assert copy.pieces[0].numerator is not e.pieces[0].numerator


def test_string_renderings():
    ramp = Expression((polynomial(0, 1), Limit.create(0, 4)))

    assert str(Expression(polynomial(3, -2))) == "3.00 - 2.00x"
    assert str(Expression()) == "0.00"
    assert str(ramp) == "1.00x, 0.00≤x<4.00"
    assert ramp.to_string_piecewise() == "{■(1.00x&0.00≤x<4.00)┤"
    assert Expression(polynomial(0, 0, 0.5)).to_string_piecewise() == "0.50x^2"


def test_unbounded_pieces_render_infinite_bounds():
    e = linear_piece() + 1

    assert str(e).startswith("1.00, -∞≤x<3.00")
    assert math.isinf(e.pieces[-1].limit.upper)
