"""A single labelled time series and its builder.

Plots are assembled with ``PlotBuilder``: raw ``(x, y)`` samples go into an
x-unique ``CoordinateSet``, optional smoothing runs next, and only then are
the bounds (``minx``, ``maxx``, ``maxy``) derived, so the bounds always
describe the post-smoothing data.

``maxy`` is not the raw maximum but the tightest "round" ceiling
``d * 10^k`` above it that still leaves the data filling at least
``MAXY_OCCUPANCY`` of the y-range (see ``nice_ceiling``).
"""

from __future__ import annotations

import logging
import math

from config import settings

from . import palette
from .coordinate import Coordinate, CoordinateSet
from .errors import InvalidArgumentError
from .smoothing import SmoothingMode, smoothen_graph

__all__ = ["Plot", "PlotBuilder", "nice_ceiling"]

log = logging.getLogger(__name__)


def nice_ceiling(max_y: float, occupancy: float = settings.MAXY_OCCUPANCY) -> float:
    """Round ``max_y`` up to ``d * 10^k`` so that ``max_y / result >= occupancy``.

    Starts from the power of ten one digit longer than ``ceil(max_y)`` and
    divides the multiplicand by ten until the occupancy holds. The loop is
    bounded: once the multiplicand reaches 1 the whole-number ceiling is
    returned. Non-positive maxima have no ceiling and yield 0.0.
    """
    if max_y <= 0:
        return 0.0
    length = len(str(int(math.ceil(max_y))))
    multiplicand = 10**length
    while True:
        multiplicand //= 10
        candidate = math.ceil(max_y / multiplicand) * multiplicand
        if max_y / candidate >= occupancy or multiplicand <= 1:
            return float(candidate)


class Plot:
    """One labelled series with derived bounds. Build via ``PlotBuilder``."""

    def __init__(
        self,
        label: str,
        coordinates: CoordinateSet,
        *,
        has_currency: bool,
        color: str,
        smoothing_threshold: int,
        smoothing_mode: SmoothingMode,
        smoothen_graph: bool,
        minx: float,
        maxx: float,
        maxy: float,
    ) -> None:
        self.label = label
        self.has_currency = has_currency
        self._color = color
        self._coordinates = coordinates
        self.smoothing_threshold = smoothing_threshold
        self.smoothing_mode = smoothing_mode
        self.smoothen_graph = smoothen_graph
        self.minx = minx
        self.maxx = maxx
        self.maxy = maxy

    @classmethod
    def builder(cls) -> "PlotBuilder":
        return PlotBuilder()

    @property
    def coordinates(self) -> CoordinateSet:
        return self._coordinates

    @property
    def color(self) -> str:
        return self._color

    def with_color(self, color: str) -> "Plot":
        """Independent copy of this plot (own coordinate set) drawn in ``color``."""
        return Plot(
            self.label,
            self._coordinates.copy(),
            has_currency=self.has_currency,
            color=color,
            smoothing_threshold=self.smoothing_threshold,
            smoothing_mode=self.smoothing_mode,
            smoothen_graph=self.smoothen_graph,
            minx=self.minx,
            maxx=self.maxx,
            maxy=self.maxy,
        )

    def __len__(self) -> int:
        return len(self._coordinates)

    def __repr__(self) -> str:
        return (
            f"Plot(label={self.label!r}, points={len(self._coordinates)}, "
            f"minx={self.minx}, maxx={self.maxx}, maxy={self.maxy})"
        )


class PlotBuilder:
    def __init__(self) -> None:
        self._label = ""
        self._color = palette.POSITIVE
        self._has_currency = settings.DEFAULT_HAS_CURRENCY
        self._smoothing_threshold = settings.DEFAULT_SMOOTHING_THRESHOLD
        self._smoothing_mode = SmoothingMode.MEAN
        self._smoothen_graph = False
        self._coordinates = CoordinateSet()

    def set_label(self, label: str) -> "PlotBuilder":
        self._label = label
        return self

    def set_color(self, percent: float) -> "PlotBuilder":
        """Negative change colours the plot red, anything else green."""
        self._color = palette.NEGATIVE if percent < 0 else palette.POSITIVE
        return self

    def set_has_currency(self, has_currency: bool = True) -> "PlotBuilder":
        self._has_currency = has_currency
        return self

    def set_has_no_currency(self) -> "PlotBuilder":
        return self.set_has_currency(False)

    def set_smoothen_graph(self, smoothen: bool) -> "PlotBuilder":
        self._smoothen_graph = smoothen
        return self

    def set_smoothing_threshold(self, threshold: int) -> "PlotBuilder":
        # Windows are centred on a sample, so the width must be odd
        if threshold % 2 == 0:
            threshold += 1
        if threshold < 3:
            raise InvalidArgumentError(
                "Smoothing threshold must be at least 3", context={"threshold": threshold}
            )
        self._smoothing_threshold = threshold
        return self

    def set_smoothing_mode(self, mode: SmoothingMode) -> "PlotBuilder":
        self._smoothing_mode = mode
        return self

    def add(self, x: float, y: float) -> "PlotBuilder":
        """Insert a sample; a repeated x keeps the first sample."""
        if not self._coordinates.add(Coordinate(float(x), float(y))):
            log.debug("duplicate x=%s ignored for plot %r", x, self._label)
        return self

    def add_coordinates(self, *coordinates: Coordinate) -> "PlotBuilder":
        self._coordinates.update(coordinates)
        return self

    def set(self, *coordinates: Coordinate) -> "PlotBuilder":
        self._coordinates.clear()
        return self.add_coordinates(*coordinates)

    def build(self) -> Plot:
        coordinates = self._coordinates.copy()
        if not coordinates:
            raise InvalidArgumentError("A plot needs at least one coordinate", context={"label": self._label})
        if self._smoothen_graph:
            smoothen_graph(coordinates, self._smoothing_threshold, self._smoothing_mode)
            if not coordinates:
                raise InvalidArgumentError(
                    "Smoothing left no coordinates; add more samples or lower the threshold",
                    context={"label": self._label, "threshold": self._smoothing_threshold},
                )
        return Plot(
            self._label,
            coordinates,
            has_currency=self._has_currency,
            color=self._color,
            smoothing_threshold=self._smoothing_threshold,
            smoothing_mode=self._smoothing_mode,
            smoothen_graph=self._smoothen_graph,
            minx=coordinates.first().x,
            maxx=coordinates.last().x,
            maxy=nice_ceiling(coordinates.max_y()),
        )
