"""
N-ary Interval Helpers

Folds of the binary set operations over any number of intervals, and
enclosure of a collection of sample values.
"""

import logging
from functools import reduce
from typing import Iterable, Optional

import numpy as np

from .interval import DTYPE, Interval

logger = logging.getLogger(__name__)


def hull(*intervals: Interval) -> Interval:
    """Smallest interval containing every argument."""
    if not intervals:
        raise ValueError("hull() requires at least one interval")
    return reduce(Interval.hull_union, intervals)


def intersection(*intervals: Interval) -> Optional[Interval]:
    """
    Common part of every argument.

    Returns None as soon as the running intersection becomes empty.
    """
    if not intervals:
        raise ValueError("intersection() requires at least one interval")

    result = intervals[0]
    for index, other in enumerate(intervals[1:], start=1):
        result = result & other
        if result is None:
            logger.debug("intersection empty after %d of %d intervals",
                         index + 1, len(intervals))
            return None
    return result


def enclose(values: Iterable[float]) -> Interval:
    """Smallest interval containing every value."""
    if not isinstance(values, np.ndarray):
        values = list(values)
    arr = np.asarray(values, dtype=DTYPE)
    if arr.size == 0:
        raise ValueError("enclose() requires at least one value")
    return Interval(arr.min(), arr.max())
