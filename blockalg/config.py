"""Kernel-wide numeric settings."""

from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Iterator


@dataclass(frozen=True)
class NumericTolerance:
    """Absolute tolerance used by the float64 fast path."""

    epsilon: float = 1e-10

    def __post_init__(self):
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")

    def near_zero(self, x: float) -> bool:
        """|x| < epsilon."""
        return abs(x) < self.epsilon

    def near_equal(self, a: float, b: float) -> bool:
        """|a - b| < epsilon."""
        return abs(a - b) < self.epsilon


@dataclass(frozen=True)
class KernelConfig:
    """Settings shared by all matrix types."""

    tolerance: NumericTolerance = field(default_factory=NumericTolerance)
    max_block_depth: int = 16  # matrices nested inside matrices

    def __post_init__(self):
        if self.max_block_depth < 1:
            raise ValueError(
                f"max_block_depth must be at least 1, got {self.max_block_depth}"
            )


_config = KernelConfig()


def get_config() -> KernelConfig:
    """Return the active configuration."""
    return _config


def set_config(config: KernelConfig) -> None:
    """Replace the active configuration."""
    global _config
    if not isinstance(config, KernelConfig):
        raise TypeError(f"Expected KernelConfig, got {type(config).__name__}")
    _config = config


@contextmanager
def override(**changes) -> Iterator[KernelConfig]:
    """
    Temporarily change configuration fields.

    ``epsilon`` may be given directly as a shortcut for
    ``tolerance=NumericTolerance(epsilon)``.

    Example:
        with override(epsilon=1e-6):
            assert DenseMatrix([[1e-7]]).is_zero
    """
    previous = get_config()
    if "epsilon" in changes:
        changes["tolerance"] = NumericTolerance(changes.pop("epsilon"))
    set_config(replace(previous, **changes))
    try:
        yield get_config()
    finally:
        set_config(previous)
