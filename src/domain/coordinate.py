"""Coordinate value type and the x-unique ordered container holding a series.

Two coordinates are the *same sample* when their x values are equal,
whatever their y values: equality, hashing and ordering all look at ``x``
only. ``CoordinateSet`` turns that into an explicit container rule: an
insert whose x already exists is rejected and the first sample stays
(first-write-wins).
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Iterator, List, overload

__all__ = ["Coordinate", "CoordinateSet"]


@total_ordering
@dataclass(frozen=True, eq=False, slots=True)
class Coordinate:
    x: float
    y: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x == other.x

    def __lt__(self, other: "Coordinate") -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x < other.x

    def __hash__(self) -> int:
        return hash(self.x)

    def compare(self, other: "Coordinate") -> int:
        """Sign of ``self.x - other.x``."""
        return (self.x > other.x) - (self.x < other.x)


def _x(c: Coordinate) -> float:
    return c.x


class CoordinateSet:
    """Coordinates kept sorted by x with at most one entry per x."""

    __slots__ = ("_items",)

    def __init__(self, coordinates: Iterable[Coordinate] = ()) -> None:
        self._items: List[Coordinate] = []
        self.update(coordinates)

    def add(self, coordinate: Coordinate) -> bool:
        """Insert ``coordinate``; returns False if its x is already present."""
        pos = bisect_left(self._items, coordinate.x, key=_x)
        if pos < len(self._items) and self._items[pos].x == coordinate.x:
            return False
        self._items.insert(pos, coordinate)
        return True

    def update(self, coordinates: Iterable[Coordinate]) -> None:
        for c in coordinates:
            self.add(c)

    def clear(self) -> None:
        self._items.clear()

    def first(self) -> Coordinate:
        if not self._items:
            raise IndexError("first() on empty CoordinateSet")
        return self._items[0]

    def last(self) -> Coordinate:
        if not self._items:
            raise IndexError("last() on empty CoordinateSet")
        return self._items[-1]

    def max_y(self) -> float:
        return max(c.y for c in self._items)

    def xs(self) -> List[float]:
        return [c.x for c in self._items]

    def ys(self) -> List[float]:
        return [c.y for c in self._items]

    def copy(self) -> "CoordinateSet":
        clone = CoordinateSet()
        clone._items = list(self._items)
        return clone

    # Sequence protocol -----------------------------------------------
    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> Coordinate: ...

    @overload
    def __getitem__(self, index: slice) -> List[Coordinate]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Coordinate):
            return False
        pos = bisect_left(self._items, item.x, key=_x)
        return pos < len(self._items) and self._items[pos].x == item.x

    def __repr__(self) -> str:
        return f"CoordinateSet({self._items!r})"
