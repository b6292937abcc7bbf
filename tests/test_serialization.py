"""Tests for the dict / JSON save-restore codecs."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from domain.coordinate import Coordinate
from domain.errors import InvalidArgumentError
from domain.pie import Pie, PieChartData
from domain.plot import Plot
from domain.serialization import (
    coordinate_to_dict,
    dumps_graph,
    graph_from_dict,
    graph_to_dict,
    loads_graph,
    period_from_dict,
    period_to_dict,
    pie_chart_from_dict,
    pie_chart_to_dict,
    plot_from_dict,
    plot_to_dict,
)
from domain.smoothing import SmoothingMode
from utils.chrono_unit import ChronoUnit
from utils.period import Period


def test_coordinate_rounded_to_float32():
    data = coordinate_to_dict(Coordinate(0.1, 2.5))
    assert data["x"] != 0.1
    assert data["x"] == pytest.approx(0.1)
    assert data["y"] == 2.5


def test_plot_keys_in_fixed_order():
    plot = Plot.builder().set_label("Sales").add(1, 10).add(2, 20).build()
    data = plot_to_dict(plot)
    assert list(data) == [
        "smoothing_mode",
        "smoothen_graph",
        "has_currency",
        "label",
        "maxx",
        "minx",
        "maxy",
        "smoothing_threshold",
        "coordinates",
        "color",
    ]
    assert data["coordinates"] == [{"x": 1.0, "y": 10.0}, {"x": 2.0, "y": 20.0}]


def test_restore_does_not_smooth_again():
    builder = Plot.builder().set_label("s").set_smoothen_graph(True).set_smoothing_mode(SmoothingMode.MEDIAN)
    for i in range(9):
        builder.add(i, i * 2)
    plot = builder.build()
    restored = plot_from_dict(plot_to_dict(plot))
    assert restored.smoothen_graph is True
    assert restored.smoothing_mode is SmoothingMode.MEDIAN
    assert restored.coordinates.xs() == plot.coordinates.xs()
    assert (restored.minx, restored.maxx, restored.maxy) == (plot.minx, plot.maxx, plot.maxy)


def test_restored_bounds_agree_with_restored_coordinates():
    plot = Plot.builder().set_label("Sales").add(0.1, 3.3).add(2.7, 0.2).build()
    data = plot_to_dict(plot)
    assert data["minx"] == data["coordinates"][0]["x"] != 0.1
    restored = plot_from_dict(data)
    assert restored.minx == restored.coordinates.first().x
    assert restored.maxx == restored.coordinates.last().x
    assert restored.maxy == pytest.approx(plot.maxy)


def test_period_codec():
    period = Period.of_quarter(datetime(2023, 5, 5))
    data = period_to_dict(period)
    assert data == {"unit": "QUARTER", "start": "2023-04-01T00:00:00", "end": "2023-06-30T23:59:59"}
    restored = period_from_dict(data)
    assert restored == period
    assert restored.unit is ChronoUnit.QUARTER


def test_graph_json_keeps_colors(dual_graph):
    text = dumps_graph(dual_graph)
    assert json.loads(text)["period"]["unit"] == "MONTH"
    restored = loads_graph(text)
    assert restored.keys() == dual_graph.keys()
    assert [p.color for p in restored.plots.values()] == [p.color for p in dual_graph.plots.values()]
    assert restored.max.y == dual_graph.max.y
    assert graph_to_dict(restored) == graph_to_dict(dual_graph)


def test_malformed_payloads_rejected():
    with pytest.raises(InvalidArgumentError):
        plot_from_dict({"label": "x"})
    with pytest.raises(InvalidArgumentError):
        period_from_dict({"unit": "FORTNIGHT", "start": "2023-01-01T00:00:00", "end": "2023-01-02T00:00:00"})
    with pytest.raises(InvalidArgumentError):
        graph_from_dict({"period": period_to_dict(Period.of_day(datetime(2023, 1, 1))), "plots": []})
    with pytest.raises(InvalidArgumentError):
        loads_graph("{not json")


def test_pie_chart_codec():
    chart = PieChartData()
    chart.add([Pie(30.0, "Rent", "#FF0000"), Pie(10.0, "Food", "#00FF00")])
    restored = pie_chart_from_dict(pie_chart_to_dict(chart))
    assert [p.name for p in restored.slices] == ["Food", "Rent"]
    assert restored.total == 40.0
