"""
Interval Errors

Exceptions raised by the interval engine. Each one also derives from the
matching builtin so callers can catch either.
"""


class IntervalError(Exception):
    """Base class for interval errors."""


class InvalidBoundsError(IntervalError, ValueError):
    """A bound is not a finite single-precision value."""


class DivisionByZeroError(IntervalError, ZeroDivisionError):
    """Division by zero, or by an interval that contains zero."""


class DomainError(IntervalError, ValueError):
    """Operation applied outside its domain (e.g. real power of a negative)."""
