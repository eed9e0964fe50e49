"""
Real Interval - Single-Precision Interval Arithmetic

Closed, bounded intervals [low, high] over float32 with:
- Scalar and interval arithmetic (+, -, *, /) with sign-correct bounds
- Intersection (&) returning None for disjoint operands
- Convex-hull union (|)
- Integer/real powers, absolute value, rounding, exact power-of-2 scaling

Example:
    >>> from real_interval import Interval
    >>> Interval.min_max(-2.0, 3.0) * Interval.min_max(-1.0, 2.0)
    Interval(-4.0, 6.0)
"""

from .errors import (
    IntervalError,
    InvalidBoundsError,
    DivisionByZeroError,
    DomainError,
)
from .interval import (
    Interval,
    DTYPE,
)
from .ops import (
    hull,
    intersection,
    enclose,
)

__version__ = "0.1.0"

__all__ = [
    # Interval
    "Interval",
    "DTYPE",
    # Helpers
    "hull",
    "intersection",
    "enclose",
    # Errors
    "IntervalError",
    "InvalidBoundsError",
    "DivisionByZeroError",
    "DomainError",
]
