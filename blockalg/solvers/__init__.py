"""Linear system solvers."""

from blockalg.solvers.gauss_jordan import eliminate, solve, solve_dense

__all__ = [
    "eliminate",
    "solve",
    "solve_dense",
]
