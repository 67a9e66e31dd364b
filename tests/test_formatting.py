"""Tests for number and matrix text renderings."""

import pytest

from blockalg.utils.formatting import (
    format_complex,
    format_number,
    plain_rows,
    word_math_rows,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0.00"),
        (0.5, "0.50"),
        (7, "7.00"),
        (2.1, "2.10"),
        (-2.1234, "-2.123"),
        (0.0005, "0.001"),
        (-0.0004, "0.00"),
        (1234.5678, "1234.568"),
        (-7124.35, "-7124.35"),
        (1e20, "100000000000000000000.00"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_non_finite():
    assert format_number(float("inf")) == "inf"


def test_format_complex():
    assert format_complex(complex(1.5, -0.25)) == "1.50-0.25i"
    assert format_complex(complex(0, 2)) == "0.00+2.00i"


def test_row_renderings():
    rows = [["a", "b"], ["c", "d"]]

    assert plain_rows(rows) == "[a, b]\n[c, d]"
    assert word_math_rows(rows) == "[■(a&b@c&d)]"
    assert word_math_rows([["x"]]) == "[■(x)]"
