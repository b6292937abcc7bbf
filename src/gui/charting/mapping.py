"""Data-space to drawing-space transform for line graphs.

Drawing space has its origin at the top-left with y growing downward, so
``scale_y`` is negative and ``to_drawing_y`` yields values in ``[-H, 0]``;
callers translate by ``H`` when their surface wants ``[0, H]`` (the
matplotlib backend does this in ``to_pixel_y``).

Degenerate bounds (a single distinct x, or an all-zero y ceiling) would
divide by zero; they fall back to unit scales instead of producing NaN or
infinity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from domain.coordinate import Coordinate
from domain.errors import InvalidArgumentError
from domain.graph import Graph
from domain.plot import Plot

__all__ = ["DrawingTransform", "Point"]

log = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class DrawingTransform:
    width: float
    height: float
    minx: float
    max: Coordinate
    scale_x: float
    scale_y: float

    @classmethod
    def from_bounds(cls, width: float, height: float, minx: float, maximum: Coordinate) -> "DrawingTransform":
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(
                "Drawing size must be positive", context={"width": width, "height": height}
            )
        span = maximum.x - minx
        if span == 0:
            log.debug("degenerate x-span at minx=%s; using unit x scale", minx)
            scale_x = 1.0
        else:
            scale_x = width / span
        if maximum.y == 0:
            log.debug("zero y ceiling; using unit y scale")
            scale_y = -1.0
        else:
            scale_y = -(height / maximum.y)
        return cls(float(width), float(height), minx, maximum, scale_x, scale_y)

    @classmethod
    def for_graph(cls, graph: Graph, width: float, height: float) -> "DrawingTransform":
        return cls.from_bounds(width, height, graph.minx, graph.max)

    # Scalar mapping --------------------------------------------------
    def to_drawing_x(self, x: float) -> float:
        return (x - self.minx) * self.scale_x

    def to_data_x(self, draw_x: float) -> float:
        return self.minx + draw_x / self.scale_x

    def to_drawing_y(self, y: float) -> float:
        return y * self.scale_y

    def to_pixel_y(self, y: float) -> float:
        """Drawing y shifted into ``[0, H]`` with the x-axis at the bottom."""
        return self.height + self.to_drawing_y(y)

    def to_drawing(self, coordinate: Coordinate) -> Point:
        return self.to_drawing_x(coordinate.x), self.to_pixel_y(coordinate.y)

    # Paths -----------------------------------------------------------
    def line_path(self, plot: Plot) -> List[Point]:
        return [self.to_drawing(c) for c in plot.coordinates]

    def area_path(self, plot: Plot) -> List[Point]:
        """Line closed down to the x-axis: right edge first, then under the first point."""
        path = self.line_path(plot)
        if not path:
            return path
        first_x = path[0][0]
        path.append((self.width, self.height))
        path.append((first_x, self.height))
        path.append(path[0])
        return path
