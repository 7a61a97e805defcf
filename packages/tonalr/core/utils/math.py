"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def signed_pow(x: float, exponent: float) -> float:
    """Raise |x| to a power and keep the sign of x.

    Out-of-gamut colors produce negative cone responses; a plain ``**``
    would turn those into complex numbers.

    Example:
        >>> signed_pow(-8.0, 1 / 3)
        -2.0
    """
    return math.copysign(abs(x) ** exponent, x)
