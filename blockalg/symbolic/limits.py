"""Half-open intervals bounding expression pieces."""

import math
from dataclasses import dataclass

from blockalg.utils.formatting import format_number


@dataclass(frozen=True, order=True)
class Limit:
    """Interval ``[lower, upper)``; bounds may be infinite."""

    lower: float
    upper: float

    def __post_init__(self):
        if math.isnan(self.lower) or math.isnan(self.upper):
            raise ValueError("Limit bounds cannot be NaN")
        if not self.lower < self.upper:
            raise ValueError(f"Empty limit [{self.lower}, {self.upper})")

    @classmethod
    def create(cls, a: float, b: float) -> "Limit":
        """Build a limit from two bounds given in either order."""
        a, b = float(a), float(b)
        return cls(min(a, b), max(a, b))

    @classmethod
    def unbounded(cls) -> "Limit":
        """The whole real line."""
        return cls(-math.inf, math.inf)

    @property
    def is_bounded(self) -> bool:
        return math.isfinite(self.lower) and math.isfinite(self.upper)

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.lower) and math.isinf(self.upper)

    def contains(self, x: float) -> bool:
        return self.lower <= x < self.upper

    def __str__(self) -> str:
        return f"{_format_bound(self.lower)}≤x<{_format_bound(self.upper)}"


def _format_bound(value: float) -> str:
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"
    return format_number(value)
