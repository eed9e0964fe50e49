"""
Single-Precision Real Intervals

A closed, bounded interval [low, high] over float32 values with
scalar arithmetic, interval arithmetic and set operations.

Bounds are always stored sorted: every constructor, including the one
used for operation results, accepts its two bounds in either order.
An empty result (disjoint intersection) is returned as None, never as
an interval with low > high.

Example:
    >>> iv = Interval.min_max(-1.0, 2.0)
    >>> shifted = iv + 0.5
    >>> iv & shifted
    Interval(-0.5, 2.0)
    >>> iv | shifted
    Interval(-1.0, 2.5)
"""

import functools
import logging
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .errors import DivisionByZeroError, DomainError, InvalidBoundsError

logger = logging.getLogger(__name__)

# Storage and arithmetic type for every bound
DTYPE = np.float32

Scalar = Union[int, float, np.integer, np.floating]


def _is_scalar(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _quiet_overflow(func):
    """Run func with numpy overflow warnings off; the constructor checks finiteness."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(over="ignore", invalid="ignore"):
            return func(*args, **kwargs)
    return wrapper


def _round_half_away(value: np.float32) -> np.float32:
    whole = np.trunc(value)
    if np.abs(value - whole) >= 0.5:
        whole = whole + np.copysign(DTYPE(1.0), value)
    return whole


@dataclass(frozen=True, repr=False)
class Interval:
    """
    A closed interval [low, high] of float32 values.

    Intervals are immutable; every operation returns a new one.
    """
    low: float = 0.0
    high: float = 0.0

    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    @_quiet_overflow
    def __post_init__(self):
        if isinstance(self.low, (bool, np.bool_)) or isinstance(self.high, (bool, np.bool_)):
            raise TypeError(f"Interval bounds must be numbers, got [{self.low!r}, {self.high!r}]")
        low = DTYPE(self.low)
        high = DTYPE(self.high)
        if not (np.isfinite(low) and np.isfinite(high)):
            raise InvalidBoundsError(
                f"Interval bounds must be finite, got [{low}, {high}]"
            )
        if low > high:
            low, high = high, low
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    @classmethod
    def from_bounds(cls, a: Scalar, b: Scalar) -> 'Interval':
        """Create [min(a, b), max(a, b)]."""
        return cls(a, b)

    @classmethod
    def min_max(cls, low: Scalar, high: Scalar) -> 'Interval':
        """Create [low, high]. Out-of-order bounds are swapped."""
        return cls(low, high)

    @classmethod
    def from_point(cls, value: Scalar) -> 'Interval':
        """Create a degenerate interval [value, value]."""
        return cls(value, value)

    point = from_point

    @classmethod
    @_quiet_overflow
    def point_extents(cls, value: Scalar, half_extent: Scalar) -> 'Interval':
        """Create [value - half_extent, value + half_extent]."""
        value = DTYPE(value)
        half_extent = DTYPE(half_extent)
        if not half_extent >= 0:
            raise InvalidBoundsError(f"Extent {half_extent} was less than 0")
        return cls(value - half_extent, value + half_extent)

    # Queries

    @property
    @_quiet_overflow
    def width(self) -> np.float32:
        """high - low; inf if the span exceeds the float32 range."""
        return self.high - self.low

    @property
    def midpoint(self) -> np.float32:
        return self.low / DTYPE(2.0) + self.high / DTYPE(2.0)

    @property
    def is_degenerate(self) -> bool:
        return bool(self.low == self.high)

    def contains(self, value: Scalar) -> bool:
        value = DTYPE(value)
        return bool(self.low <= value <= self.high)

    def contains_zero(self) -> bool:
        return bool(self.low <= 0 <= self.high)

    # Set operations

    def intersect(self, other: 'Interval') -> Optional['Interval']:
        """
        Intersection of two intervals.

        Returns None when the intervals are disjoint. Touching intervals
        intersect in their shared point.
        """
        low = max(self.low, other.low)
        high = min(self.high, other.high)
        if low > high:
            return None
        return Interval(low, high)

    def hull_union(self, other: 'Interval') -> 'Interval':
        """
        Convex hull of two intervals.

        This is the smallest interval containing both, so the gap between
        disjoint operands is included.
        """
        return Interval(min(self.low, other.low), max(self.high, other.high))

    def __and__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersect(other)

    def __or__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.hull_union(other)

    # Arithmetic

    def __neg__(self) -> 'Interval':
        return Interval(-self.high, -self.low)

    @_quiet_overflow
    def __add__(self, other) -> 'Interval':
        if isinstance(other, Interval):
            return Interval(self.low + other.low, self.high + other.high)
        if _is_scalar(other):
            s = DTYPE(other)
            return Interval(self.low + s, self.high + s)
        return NotImplemented

    def __radd__(self, other) -> 'Interval':
        return self.__add__(other)

    @_quiet_overflow
    def __sub__(self, other) -> 'Interval':
        if isinstance(other, Interval):
            # Worst-case spread, so I - I is only [0, 0] for a point
            return Interval(self.low - other.high, self.high - other.low)
        if _is_scalar(other):
            s = DTYPE(other)
            return Interval(self.low - s, self.high - s)
        return NotImplemented

    @_quiet_overflow
    def __rsub__(self, other) -> 'Interval':
        if not _is_scalar(other):
            return NotImplemented
        s = DTYPE(other)
        return Interval(s - self.high, s - self.low)

    @_quiet_overflow
    def __mul__(self, other) -> 'Interval':
        if isinstance(other, Interval):
            products = [
                self.low * other.low,
                self.low * other.high,
                self.high * other.low,
                self.high * other.high
            ]
            return Interval(min(products), max(products))
        if _is_scalar(other):
            s = DTYPE(other)
            if s >= 0:
                return Interval(self.low * s, self.high * s)
            return Interval(self.high * s, self.low * s)
        return NotImplemented

    def __rmul__(self, other) -> 'Interval':
        return self.__mul__(other)

    @_quiet_overflow
    def __truediv__(self, other) -> 'Interval':
        if isinstance(other, Interval):
            return self * other.reciprocal()
        if _is_scalar(other):
            s = DTYPE(other)
            if s == 0:
                logger.debug("rejected division of %s by zero", self)
                raise DivisionByZeroError(f"Cannot divide {self} by zero")
            return self * (DTYPE(1.0) / s)
        return NotImplemented

    def __rtruediv__(self, other) -> 'Interval':
        if not _is_scalar(other):
            return NotImplemented
        return self.reciprocal() * other

    @_quiet_overflow
    def reciprocal(self) -> 'Interval':
        """[1/high, 1/low]; undefined when the interval contains zero."""
        if self.contains_zero():
            logger.debug("rejected reciprocal of %s", self)
            raise DivisionByZeroError(
                f"Cannot take the reciprocal of {self}, which contains zero"
            )
        one = DTYPE(1.0)
        return Interval(one / self.high, one / self.low)

    # Named forms of the operators

    def add(self, other) -> 'Interval':
        return self + other

    def sub(self, other) -> 'Interval':
        return self - other

    def mul(self, other) -> 'Interval':
        return self * other

    def div(self, other) -> 'Interval':
        return self / other

    # Elementary functions

    def abs(self) -> 'Interval':
        """Absolute value."""
        if self.low < 0 <= self.high:
            return Interval(0.0, max(self.high, -self.low))
        return Interval(np.abs(self.low), np.abs(self.high))

    def __abs__(self) -> 'Interval':
        return self.abs()

    def min(self, other: 'Interval') -> 'Interval':
        """Bound-wise minimum of two intervals."""
        return Interval(min(self.low, other.low), min(self.high, other.high))

    def max(self, other: 'Interval') -> 'Interval':
        """Bound-wise maximum of two intervals."""
        return Interval(max(self.low, other.low), max(self.high, other.high))

    @_quiet_overflow
    def minf(self, value: Scalar) -> 'Interval':
        value = DTYPE(value)
        return Interval(min(self.low, value), min(self.high, value))

    @_quiet_overflow
    def maxf(self, value: Scalar) -> 'Interval':
        value = DTYPE(value)
        return Interval(max(self.low, value), max(self.high, value))

    @_quiet_overflow
    def powi(self, n: int) -> 'Interval':
        """
        Integer power.

        Even powers of an interval spanning zero start at zero. Negative
        powers are the reciprocal of the positive power.
        """
        n = int(n)
        if n == 0:
            return Interval.point(1.0)
        if n < 0:
            return self.powi(-n).reciprocal()

        low_pow = self.low ** n
        high_pow = self.high ** n
        if n % 2 == 0 and self.low < 0 <= self.high:
            return Interval(0.0, max(low_pow, high_pow))
        return Interval(low_pow, high_pow)

    @_quiet_overflow
    def powf(self, exponent: Scalar) -> 'Interval':
        """
        Real power of a non-negative interval.

        Increasing for a positive exponent, decreasing for a negative one.
        """
        exponent = DTYPE(exponent)
        if self.low < 0:
            raise DomainError(f"Real power of {self} requires a non-negative interval")
        if exponent < 0 and self.low == 0:
            raise DivisionByZeroError(
                f"Negative power {exponent} of {self}, which contains zero"
            )
        return Interval(np.power(self.low, exponent), np.power(self.high, exponent))

    def __pow__(self, exponent) -> 'Interval':
        if isinstance(exponent, (int, np.integer)) and not isinstance(exponent, bool):
            return self.powi(int(exponent))
        if _is_scalar(exponent):
            if float(exponent).is_integer():
                return self.powi(int(exponent))
            return self.powf(exponent)
        return NotImplemented

    def mul_pow2(self, n: int) -> Optional['Interval']:
        """
        Multiply by 2**n exactly.

        Returns None if either bound would overflow or lose precision
        to underflow.
        """
        with np.errstate(over="ignore", under="ignore"):
            low = np.ldexp(self.low, n)
            high = np.ldexp(self.high, n)
            if not (np.isfinite(low) and np.isfinite(high)):
                return None
            if np.ldexp(low, -n) != self.low or np.ldexp(high, -n) != self.high:
                return None
        return Interval(low, high)

    def mul_pow2_unchecked(self, n: int) -> 'Interval':
        """Multiply by 2**n. Overflow raises InvalidBoundsError; underflow rounds."""
        with np.errstate(over="ignore", under="ignore"):
            low = np.ldexp(self.low, n)
            high = np.ldexp(self.high, n)
        return Interval(low, high)

    def round(self) -> 'Interval':
        """Round both bounds to the nearest integer, halves away from zero."""
        return Interval(_round_half_away(self.low), _round_half_away(self.high))

    def __str__(self) -> str:
        return f"[{self.low}, {self.high}]"

    def __repr__(self) -> str:
        return f"Interval({self.low}, {self.high})"
