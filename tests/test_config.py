"""Tests for kernel configuration."""

import pytest

from blockalg.config import (
    KernelConfig,
    NumericTolerance,
    get_config,
    override,
    set_config,
)
from blockalg.core import DenseMatrix


def test_defaults():
    config = get_config()

    assert config.tolerance.epsilon == 1e-10
    assert config.max_block_depth == 16


def test_tolerance_helpers():
    tol = NumericTolerance(1e-3)

    assert tol.near_zero(5e-4)
    assert not tol.near_zero(-2e-3)
    assert tol.near_equal(1.0, 1.0005)
    assert not tol.near_equal(1.0, 1.01)


def test_validation():
    with pytest.raises(ValueError):
        NumericTolerance(0.0)
    with pytest.raises(ValueError):
        KernelConfig(max_block_depth=0)
    with pytest.raises(TypeError):
        set_config({"epsilon": 1e-3})


def test_override_is_scoped():
    before = get_config()

    with override(epsilon=1e-6) as config:
        assert config.tolerance.epsilon == 1e-6
        assert DenseMatrix([[1e-7]]).is_zero

    assert get_config() is before
    assert not DenseMatrix([[1e-7]]).is_zero


def test_override_restores_on_error():
    before = get_config()

    with pytest.raises(RuntimeError):
        with override(max_block_depth=3):
            raise RuntimeError("boom")

    assert get_config() is before
