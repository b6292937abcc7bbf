"""Tests for chart registry, graph/pie chart builders and export (headless Agg)."""

from __future__ import annotations

import pytest

from domain.pie import Pie, PieChartData
from gui.charting import ChartRequest, chart_registry
from gui.charting.export import export_chart
from gui.charting.registry import register_chart_type
from gui.charting.types import ChartResult


def test_register_duplicate_chart_type():
    def _dummy(req, backend):  # pragma: no cover - simple stub
        return ChartResult(widget=None, meta={})

    # register unique type
    unique_type = "custom.unique"
    register_chart_type(unique_type, _dummy, "Unique")
    # duplicate should raise
    with pytest.raises(ValueError):
        register_chart_type(unique_type, _dummy, "Duplicate")


def test_builtin_types_listed():
    types = chart_registry.list_types()
    assert "graph.line" in types
    assert "pie.basic" in types


def test_unknown_chart_type():
    with pytest.raises(KeyError):
        chart_registry.build(ChartRequest(chart_type="unknown.type", data={}))


def test_graph_line_chart_build(dual_graph):
    req = ChartRequest("graph.line", dual_graph, {"title": "Demo", "size": (400, 300), "highlight": "Visits"})
    result = chart_registry.build(req)
    assert result.meta["plot_count"] == 2
    assert result.meta["unit"] == "MONTH"
    assert result.meta["maxy"] == 160.0
    assert result.meta["build_ms"] >= 0
    ax = result.widget.figure.axes[0]
    assert [t.get_text() for t in ax.get_yticklabels()] == ["0", "80.0", "160.0"]
    assert [t.get_text() for t in ax.get_xticklabels()] == ["10 Jan", "20 Jan"]
    assert ax.get_title() == "Demo"
    assert len(ax.get_lines()) == 2
    # selected plot drawn last
    assert ax.get_lines()[-1].get_label() == "Visits"


def test_graph_line_chart_input_validation():
    with pytest.raises(TypeError):
        chart_registry.build(ChartRequest("graph.line", {"series": [[1, 2]]}))


def test_pie_chart_build():
    chart = PieChartData()
    chart.add([Pie(30.0, "Rent", "#FF0000"), Pie(10.0, "Food", "#00FF00")])
    result = chart_registry.build(ChartRequest("pie.basic", chart))
    assert result.meta["slice_count"] == 2
    assert result.meta["total"] == "$40.00"
    ax = result.widget.figure.axes[0]
    assert len(ax.patches) == 2
    with pytest.raises(TypeError):
        chart_registry.build(ChartRequest("pie.basic", [1, 2]))


def test_export_png_and_svg(tmp_path, single_graph):
    result = chart_registry.build(ChartRequest("graph.line", single_graph, {"size": (320, 240)}))
    png = tmp_path / "graph.png"
    svg = tmp_path / "graph.svg"
    export_chart(result.widget, str(png))
    export_chart(result.widget, str(svg), format="svg")
    assert png.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert b"<svg" in svg.read_bytes()
    with pytest.raises(ValueError):
        export_chart(result.widget, str(tmp_path / "graph.gif"), format="gif")
    with pytest.raises(ValueError):
        export_chart(object(), str(png))


def test_render_rgba_matches_requested_size(single_graph):
    result = chart_registry.build(ChartRequest("graph.line", single_graph, {"size": (320, 240), "dpi": 80}))
    pixels = chart_registry.backend.render_rgba(result.widget)
    assert pixels.shape == (240, 320, 4)
