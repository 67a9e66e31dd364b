"""Comparison tests against scipy.linalg."""

import numpy as np
import pytest
import scipy.linalg

from blockalg.core import DenseMatrix, Matrix
from blockalg.solvers import solve, solve_dense


def well_conditioned(n, seed):
    """Random matrix with a dominant diagonal."""
    rng = np.random.default_rng(seed)
    return rng.uniform(-1.0, 1.0, size=(n, n)) + n * np.eye(n)


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_inverse_vs_scipy(n):
    a = well_conditioned(n, seed=n)
    expected = scipy.linalg.inv(a)

    assert np.allclose(Matrix(a).inverse().to_array(), expected, atol=1e-10)
    assert np.allclose(DenseMatrix(a).inverse().to_array(), expected, atol=1e-10)


@pytest.mark.parametrize("n", [1, 2, 4, 5])
def test_determinant_vs_scipy(n):
    a = well_conditioned(n, seed=10 + n)
    expected = scipy.linalg.det(a)

    assert Matrix(a).determinant().to_double() == pytest.approx(expected, rel=1e-9)
    assert DenseMatrix(a).determinant() == pytest.approx(expected, rel=1e-9)


def test_solve_vs_scipy():
    a = well_conditioned(4, seed=42)
    b = np.random.default_rng(7).uniform(size=(4, 2))
    expected = scipy.linalg.solve(a, b)

    assert np.allclose(solve_dense(a, b), expected, atol=1e-10)
    assert np.allclose(solve(Matrix(a), Matrix(b)).to_array(), expected, atol=1e-10)


def test_permutation_needing_pivot_swaps():
    """Zero leading pivots are resolved by row swaps, as in LU with pivoting."""
    a = np.array([
        [0.0, 2.0, 1.0],
        [0.0, 0.0, 3.0],
        [4.0, 1.0, 0.0],
    ])

    assert np.allclose(solve_dense(a, np.eye(3)), scipy.linalg.inv(a))
    assert np.allclose(Matrix(a).inverse().to_array(), scipy.linalg.inv(a))
