"""ViewModel backing the line graph widget.

Holds the mutable view state around an immutable ``Graph``: drawing size,
selected series, last touched values and the derived guide / x-axis
labels. ``initialise`` swaps in a new Graph and recomputes everything
derived from it as one step under a single-writer lock, so readers never
observe labels from one graph paired with bounds from another.

Nothing here needs Qt; the widget forwards pointer positions and sizes.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from domain import palette
from domain.coordinate import Coordinate
from domain.errors import IndexOutOfRangeError, NotFoundError
from domain.graph import Graph
from domain.search import find_coordinate
from gui.charting.axes import AxisLabel, guide_lines, x_axis_labels
from gui.charting.mapping import DrawingTransform
from utils.dates import tooltip_date
from utils.labels import guide_labels, value_text

__all__ = ["GraphViewModel", "TouchedValue", "TouchResult"]

log = logging.getLogger(__name__)

CompareListener = Callable[[], bool]
DataChangedListener = Callable[[], None]


@dataclass(frozen=True)
class TouchedValue:
    label: str
    coordinate: Coordinate
    text: str
    color: str
    position: tuple[float, float]  # drawing space, pixel y


@dataclass(frozen=True)
class TouchResult:
    values: List[TouchedValue]
    date: str
    anchor: TouchedValue


class GraphViewModel:
    def __init__(self, width: float = 640, height: float = 360) -> None:
        self._lock = threading.RLock()
        self._width = width
        self._height = height
        self._graph: Optional[Graph] = None
        self._transform: Optional[DrawingTransform] = None
        self._selected: Optional[str] = None
        self._touched: Optional[TouchResult] = None
        self._maximum: Optional[float] = None
        self._guide_labels: List[str] = []
        self._x_axis_labels: List[AxisLabel] = []
        self._colors: Dict[str, str] = {}
        self._compare_listener: Optional[CompareListener] = None
        self._data_listeners: List[DataChangedListener] = []

    # Listeners -------------------------------------------------------
    def set_compare_listener(self, listener: Optional[CompareListener]) -> None:
        """``listener()`` returning True colours every plot of a multi-plot graph positive."""
        self._compare_listener = listener

    def add_data_changed_listener(self, listener: DataChangedListener) -> None:
        self._data_listeners.append(listener)

    def remove_data_changed_listener(self, listener: DataChangedListener) -> None:
        if listener in self._data_listeners:
            self._data_listeners.remove(listener)

    # State swaps -----------------------------------------------------
    def initialise(self, graph: Graph) -> None:
        with self._lock:
            transform = DrawingTransform.for_graph(graph, self._width, self._height)
            self._graph = graph
            self._transform = transform
            self._colors = {label: plot.color for label, plot in graph.plots.items()}
            self._selected = None
            self._touched = None
            self._recompute(graph, transform)
        self._invalidate()

    def resize(self, width: float, height: float) -> None:
        with self._lock:
            # validate before touching state
            transform = (
                DrawingTransform.for_graph(self._graph, width, height) if self._graph is not None else None
            )
            self._width = width
            self._height = height
            if transform is not None:
                self._transform = transform
                self._touched = None
                self._x_axis_labels = x_axis_labels(self._graph, transform)

    def select(self, key: str) -> None:
        """Select the plot named ``key``; ignored when only one plot is shown."""
        with self._lock:
            graph = self._require_graph()
            if graph.is_single:
                return
            if key not in graph:
                raise NotFoundError(f"Unknown plot key: {key}", context={"keys": graph.keys()})
            self._selected = key
        self._invalidate()

    def _invalidate(self) -> None:
        with self._lock:
            graph = self._graph
            if graph is not None and not graph.is_single and self._compare_listener is not None:
                color = palette.POSITIVE if self._compare_listener() else palette.NEGATIVE
                # view-level override; the Graph and its plots stay untouched
                self._colors = {label: color for label in graph.keys()}
        for listener in list(self._data_listeners):
            listener()

    def _recompute(self, graph: Graph, transform: DrawingTransform) -> None:
        maximum = graph.max.y
        if maximum != self._maximum:
            self._guide_labels = guide_labels(maximum)
            self._maximum = maximum
            log.debug("guide labels recomputed for maximum %s: %s", maximum, self._guide_labels)
        self._x_axis_labels = x_axis_labels(graph, transform)

    def _require_graph(self) -> Graph:
        return self._require_view()[0]

    def _require_view(self) -> Tuple[Graph, DrawingTransform]:
        if self._graph is None or self._transform is None:
            raise NotFoundError("No graph has been initialised")
        return self._graph, self._transform

    # Queries ---------------------------------------------------------
    @property
    def graph(self) -> Optional[Graph]:
        return self._graph

    @property
    def transform(self) -> Optional[DrawingTransform]:
        return self._transform

    @property
    def selected(self) -> Optional[str]:
        return self._selected

    @property
    def size(self) -> tuple[float, float]:
        return self._width, self._height

    def keys(self) -> List[str]:
        return self._require_graph().keys()

    def plot_colors(self) -> Dict[str, str]:
        """Colour each plot is drawn in, including any compare-listener override."""
        self._require_graph()
        return dict(self._colors)

    def guide_labels(self) -> List[str]:
        return list(self._guide_labels)

    def guide_lines(self) -> List[AxisLabel]:
        with self._lock:
            graph, transform = self._require_view()
            return guide_lines(graph.max.y, transform)

    def x_axis_labels(self) -> List[AxisLabel]:
        return list(self._x_axis_labels)

    # Touch -----------------------------------------------------------
    def touch(self, draw_x: float) -> TouchResult:
        """Nearest sample of every plot under drawing-space ``draw_x``."""
        with self._lock:
            graph, transform = self._require_view()
            data_x = transform.to_data_x(draw_x)
            multi = not graph.is_single
            values: List[TouchedValue] = []
            for label, plot in graph.plots.items():
                nearest = find_coordinate(plot.coordinates, data_x)
                text = value_text(nearest.y, currency=plot.has_currency)
                if multi:
                    text = f"{label}: {text}"
                color = self._colors.get(label, plot.color)
                values.append(TouchedValue(label, nearest, text, color, transform.to_drawing(nearest)))
            index = round(values[0].coordinate.x)
            try:
                date = tooltip_date(graph.period, index)
            except IndexOutOfRangeError:
                log.debug("index %d lies beyond %r; tooltip date left empty", index, graph.period)
                date = ""
            anchor = max(values, key=lambda v: v.coordinate.y)
            self._touched = TouchResult(values, date, anchor)
            return self._touched

    @property
    def touched(self) -> Optional[TouchResult]:
        return self._touched

    def clear_touched(self) -> None:
        with self._lock:
            self._touched = None
