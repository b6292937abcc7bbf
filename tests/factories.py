from __future__ import annotations

from typing import Iterable, Tuple

from domain.coordinate import Coordinate, CoordinateSet
from domain.plot import Plot


def build_plot(label: str, points: Iterable[Tuple[float, float]], *, currency: bool = True) -> Plot:
    builder = Plot.builder().set_label(label).set_has_currency(currency)
    for x, y in points:
        builder.add(x, y)
    return builder.build()


def make_coordinates(ys: Iterable[float], start: int = 0) -> CoordinateSet:
    return CoordinateSet(Coordinate(float(start + i), float(y)) for i, y in enumerate(ys))
