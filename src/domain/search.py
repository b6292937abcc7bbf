"""Nearest-sample lookup over an x-sorted coordinate sequence."""

from __future__ import annotations

from typing import Sequence

from .coordinate import Coordinate
from .errors import NotFoundError

__all__ = ["find_coordinate"]


def find_coordinate(coordinates: Sequence[Coordinate], x: float) -> Coordinate:
    """Return the coordinate whose x is closest to ``x``.

    Queries at or beyond either end return that end. Inside the range the
    search bisects ``[lo, hi]`` (both ends kept in the next range) until one
    or two candidates remain; an exact hit on the midpoint returns
    immediately. Between two candidates the nearer wins and a tie goes to
    the lower index.

    Raises:
        NotFoundError: ``coordinates`` is empty.
    """
    if len(coordinates) == 0:
        raise NotFoundError("Cannot search an empty coordinate sequence", context={"x": x})

    lo, hi = 0, len(coordinates) - 1
    while True:
        low = coordinates[lo]
        high = coordinates[hi]
        if x <= low.x:
            return low
        if x >= high.x:
            return high

        count = hi - lo + 1
        if count == 1:
            return low
        if count == 2:
            return low if abs(low.x - x) <= abs(high.x - x) else high

        mid = (lo + hi) // 2
        middle = coordinates[mid]
        if x > middle.x:
            lo = mid
        elif x < middle.x:
            hi = mid
        else:
            return middle
