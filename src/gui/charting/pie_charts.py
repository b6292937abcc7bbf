"""Pie (ring) chart builder ('pie.basic')."""
from __future__ import annotations

from domain.pie import PieChartData

from .backends import MatplotlibChartBackend
from .registry import register_chart_type
from .types import ChartRequest, ChartResult


def _pie_builder(req: ChartRequest, backend: MatplotlibChartBackend) -> ChartResult:
    chart = req.data
    if not isinstance(chart, PieChartData):
        raise TypeError("Pie chart expects a PieChartData payload")
    opts = req.options or {}
    kwargs = {k: opts[k] for k in ("size", "dpi", "title", "gap") if k in opts}
    widget = backend.create_pie_chart(chart, **kwargs)
    return ChartResult(widget=widget, meta={"slice_count": len(chart), "total": chart.total_text})


register_chart_type("pie.basic", _pie_builder, "Ring chart with gaps between slices")
