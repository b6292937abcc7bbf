"""Qt widget hosting the line graph.

The figure is drawn by the chart registry ('graph.line') and re-hosted in a
``FigureCanvasQTAgg``. Clicks call ``GraphViewModel.touch`` with the
clicked drawing-space x; a double click clears the touched values.
"""

from __future__ import annotations

import logging
from typing import Optional

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from domain.graph import Graph
from gui.charting import ChartRequest, chart_registry
from gui.viewmodels.graph_viewmodel import GraphViewModel, TouchResult

__all__ = ["GraphWidget"]

log = logging.getLogger(__name__)


class GraphWidget(QWidget):
    touched = pyqtSignal(object)  # TouchResult
    touch_cleared = pyqtSignal()

    def __init__(self, view_model: GraphViewModel | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = view_model or GraphViewModel()
        self._canvas: Optional[FigureCanvasQTAgg] = None
        self._markers: list = []
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._vm.add_data_changed_listener(self._redraw)

    @property
    def view_model(self) -> GraphViewModel:
        return self._vm

    @property
    def canvas(self) -> Optional[FigureCanvasQTAgg]:
        return self._canvas

    def set_graph(self, graph: Graph) -> None:
        self._vm.initialise(graph)

    def select(self, key: str) -> None:
        self._vm.select(key)

    # Rendering -------------------------------------------------------
    def _redraw(self) -> None:
        graph = self._vm.graph
        if graph is None:
            return
        width, height = self._vm.size
        result = chart_registry.build(
            ChartRequest(
                "graph.line",
                graph,
                {
                    "size": (int(width), int(height)),
                    "highlight": self._vm.selected,
                    "colors": self._vm.plot_colors(),
                },
            )
        )
        canvas = FigureCanvasQTAgg(result.widget.figure)
        canvas.mpl_connect("button_press_event", self._on_press)
        if self._canvas is not None:
            self._layout.removeWidget(self._canvas)
            self._canvas.deleteLater()
        self._canvas = canvas
        self._markers = []
        self._layout.addWidget(canvas)
        log.debug("graph widget redrawn in %.1f ms", result.meta.get("build_ms", 0.0))

    def _clear_markers(self) -> None:
        for artist in self._markers:
            artist.remove()
        self._markers = []

    def _show_touch(self, result: TouchResult) -> None:
        if self._canvas is None:
            return
        self._clear_markers()
        ax = self._canvas.figure.axes[0]
        for value in result.values:
            (marker,) = ax.plot(*value.position, marker="o", color=value.color)
            self._markers.append(marker)
        lines = [result.date] + [v.text for v in result.values]
        self._markers.append(
            ax.annotate(
                "\n".join(lines),
                xy=result.anchor.position,
                xytext=(10, 10),
                textcoords="offset points",
                bbox={"boxstyle": "round", "fc": "w", "alpha": 0.8},
            )
        )
        self._canvas.draw_idle()

    # Events ----------------------------------------------------------
    def _on_press(self, event) -> None:
        if event.xdata is None or self._vm.graph is None:
            return
        if event.dblclick:
            self._vm.clear_touched()
            self._clear_markers()
            if self._canvas is not None:
                self._canvas.draw_idle()
            self.touch_cleared.emit()
            return
        result = self._vm.touch(event.xdata)
        self._show_touch(result)
        self.touched.emit(result)

    def resizeEvent(self, event) -> None:  # noqa: N802 - Qt override
        size = event.size()
        if size.width() > 0 and size.height() > 0 and (size.width(), size.height()) != self._vm.size:
            self._vm.resize(size.width(), size.height())
            # figure data space must track the drawing size
            self._redraw()
        super().resizeEvent(event)
