"""Line graph chart builder ('graph.line')."""
from __future__ import annotations

from domain.graph import Graph

from .backends import MatplotlibChartBackend
from .registry import register_chart_type
from .types import ChartRequest, ChartResult


def _graph_line_builder(req: ChartRequest, backend: MatplotlibChartBackend) -> ChartResult:
    graph = req.data
    if not isinstance(graph, Graph):
        raise TypeError("Line graph chart expects a Graph payload")
    opts = req.options or {}
    kwargs = {k: opts[k] for k in ("size", "dpi", "title", "fill", "highlight", "colors") if k in opts}
    widget = backend.create_graph_chart(graph, **kwargs)
    return ChartResult(
        widget=widget,
        meta={
            "plot_count": len(graph),
            "unit": graph.period.unit.name,
            "maxy": graph.max.y,
        },
    )


register_chart_type("graph.line", _graph_line_builder, "Multi-plot line graph over a period")
