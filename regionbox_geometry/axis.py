"""
Bounded Axis Module
===================

A single validated closed interval on one coordinate axis.

Design:
- Immutable (frozen dataclass)
- Order-normalized at construction (low <= high, whatever the input order)
- Fail-fast validation: non-finite bounds are rejected, never stored
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple


class InvalidBound(ValueError):
    """
    Raised when a bound value is NaN or infinite.

    Attributes:
        parameter: Name of the offending bound (e.g. "b1", "a2")
        axis: 1-based axis index, or None when the bound is not tied to an axis
        value: The rejected value
    """

    def __init__(self, parameter: str, value: float, axis: Optional[int] = None):
        self.parameter = parameter
        self.value = value
        self.axis = axis
        super().__init__(f"{parameter} must be a finite number, got {value}")


def validate_finite(value: float, parameter: str, axis: Optional[int] = None) -> float:
    """
    Check that a bound is a finite real number.

    Args:
        value: Bound to check
        parameter: Parameter name reported on failure
        axis: Axis index reported on failure

    Returns:
        The value as float

    Raises:
        InvalidBound: If value is NaN or +/- infinity
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidBound(parameter, value, axis)
    return value


@dataclass(frozen=True)
class BoundedAxis:
    """
    Closed interval [low, high] on one axis.

    Invariants:
        - low and high are finite
        - low <= high (equal values give a single-point axis)

    Example:
        >>> axis = BoundedAxis.from_bounds(10, 0)
        >>> axis
        BoundedAxis(low=0.0, high=10.0)
        >>> axis.contains(10)
        True
    """

    low: float
    high: float

    def __post_init__(self):
        """Validate invariants."""
        object.__setattr__(self, "low", validate_finite(self.low, "low"))
        object.__setattr__(self, "high", validate_finite(self.high, "high"))
        if self.low > self.high:
            raise ValueError(
                f"low must be <= high, got low={self.low}, high={self.high}"
            )

    @classmethod
    def from_bounds(
        cls,
        v1: float,
        v2: float,
        names: Tuple[str, str] = ("b", "a"),
        axis: Optional[int] = None,
    ) -> "BoundedAxis":
        """
        Build an axis from two bounds given in any order.

        Args:
            v1: First bound
            v2: Second bound
            names: Parameter names of (v1, v2), used in error reports
            axis: Axis index, used in error reports

        Returns:
            BoundedAxis with low = min(v1, v2), high = max(v1, v2)

        Raises:
            InvalidBound: If v1 or v2 is not finite (v1 is checked first)
        """
        v1 = validate_finite(v1, names[0], axis)
        v2 = validate_finite(v2, names[1], axis)
        if v1 <= v2:
            return cls(low=v1, high=v2)
        return cls(low=v2, high=v1)

    def contains(self, x: float) -> bool:
        """Inclusive membership test. NaN is never contained."""
        return self.low <= x <= self.high
