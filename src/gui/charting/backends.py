"""Matplotlib chart backend.

Charts are drawn on a plain ``Figure`` attached to an Agg canvas, which
renders without a display or a QApplication. The Qt widget layer wraps the
same figure in ``FigureCanvasQTAgg`` when it needs an on-screen canvas.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence, Tuple

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import Wedge

from config import settings
from domain.graph import Graph
from domain.pie import PieChartData

from .axes import guide_lines, x_axis_labels
from .mapping import DrawingTransform
from .types import ChartBackendProtocol

log = logging.getLogger(__name__)

DEFAULT_SIZE: Tuple[int, int] = (640, 360)
DEFAULT_DPI = 100
AREA_ALPHA = 0.15
RING_WIDTH = 0.35


class MatplotlibChartBackend(ChartBackendProtocol):
    def _new_canvas(self, size: Tuple[int, int], dpi: int) -> FigureCanvasAgg:
        width, height = size
        fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        return FigureCanvasAgg(fig)

    # --- line graph ----------------------------------------------------
    def create_graph_chart(
        self,
        graph: Graph,
        *,
        size: Tuple[int, int] = DEFAULT_SIZE,
        dpi: int = DEFAULT_DPI,
        title: str | None = None,
        fill: bool = True,
        highlight: str | None = None,
        colors: Mapping[str, str] | None = None,
    ) -> FigureCanvasAgg:
        """Draw every plot in drawing space (pixels, y pointing down).

        ``highlight`` names the selected plot; it is drawn last with a
        thicker line so it sits on top of the others. ``colors`` overrides
        the colour of plots by label.
        """
        canvas = self._new_canvas(size, dpi)
        fig = canvas.figure
        ax = fig.add_subplot(111)
        transform = DrawingTransform.for_graph(graph, *size)

        plots = list(graph.plots.values())
        if highlight is not None and highlight in graph:
            plots.sort(key=lambda p: p.label == highlight)
        for plot in plots:
            path = transform.line_path(plot)
            xs = [p[0] for p in path]
            ys = [p[1] for p in path]
            width = 2.5 if plot.label == highlight else 1.5
            color = (colors or {}).get(plot.label, plot.color)
            ax.plot(xs, ys, color=color, linewidth=width, label=plot.label)
            if fill:
                area = transform.area_path(plot)
                ax.fill([p[0] for p in area], [p[1] for p in area], color=color, alpha=AREA_ALPHA)

        ax.set_xlim(0, transform.width)
        ax.set_ylim(transform.height, 0)
        guides = guide_lines(graph.max.y, transform)
        ax.set_yticks([g.position for g in guides])
        ax.set_yticklabels([g.text for g in guides])
        ax.grid(axis="y", alpha=0.3)
        axis = x_axis_labels(graph, transform)
        ax.set_xticks([a.position for a in axis])
        ax.set_xticklabels([a.text for a in axis])
        if title:
            ax.set_title(title)
        if not graph.is_single:
            ax.legend(loc="upper left", fontsize=8)
        fig.tight_layout()
        log.debug("graph chart drawn: %d plots, size=%s", len(plots), size)
        return canvas

    # --- pie chart -----------------------------------------------------
    def create_pie_chart(
        self,
        chart: PieChartData,
        *,
        size: Tuple[int, int] = DEFAULT_SIZE,
        dpi: int = DEFAULT_DPI,
        title: str | None = None,
        gap: float = settings.PIE_SLICE_GAP_DEGREES,
    ) -> FigureCanvasAgg:
        """Ring chart; each slice sweeps its ``angle`` followed by ``gap`` degrees."""
        canvas = self._new_canvas(size, dpi)
        fig = canvas.figure
        ax = fig.add_subplot(111)
        ax.set_aspect("equal")
        ax.set_xlim(-1.1, 1.1)
        ax.set_ylim(-1.1, 1.1)
        ax.axis("off")

        start = 90.0
        for pie in chart.slices:
            wedge = Wedge((0, 0), 1.0, start, start + pie.angle, width=RING_WIDTH, facecolor=pie.color, label=pie.label)
            ax.add_patch(wedge)
            start += pie.angle + gap
        ax.text(0, 0, chart.total_text, ha="center", va="center")
        if title:
            ax.set_title(title)
        if len(chart):
            ax.legend(loc="center left", bbox_to_anchor=(1.0, 0.5), fontsize=8)
        fig.tight_layout()
        return canvas

    # --- export --------------------------------------------------------
    def export_widget(self, canvas: Any, path: str, *, format: str = "png", dpi: int = 120) -> None:
        fig = getattr(canvas, "figure", None)
        if fig is None:
            raise ValueError("Unsupported canvas type for export")
        fmt = format.lower()
        if fmt not in {"png", "svg"}:
            raise ValueError("format must be 'png' or 'svg'")
        fig.savefig(path, format=fmt, dpi=dpi if fmt == "png" else None)

    def render_rgba(self, canvas: FigureCanvasAgg) -> Sequence[Any]:
        """Rasterise ``canvas`` and return its RGBA buffer as a numpy array."""
        import numpy as _np  # local import to keep startup light

        canvas.draw()
        return _np.asarray(canvas.buffer_rgba())
