"""Save/restore codecs turning graph objects into JSON-friendly dicts.

Coordinates travel as 32-bit floats, so values are rounded through
``numpy.float32`` on the way out. Plot dicts list their keys in the fixed
order readers expect; restoring a plot never re-runs smoothing, the stored
coordinates are already the post-smoothing series.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, List

import numpy as np

from utils.chrono_unit import ChronoUnit
from utils.period import Period

from .coordinate import Coordinate, CoordinateSet
from .errors import InvalidArgumentError
from .graph import Graph
from .pie import Pie, PieChartData
from .plot import Plot
from .smoothing import SmoothingMode

__all__ = [
    "coordinate_to_dict",
    "coordinate_from_dict",
    "plot_to_dict",
    "plot_from_dict",
    "period_to_dict",
    "period_from_dict",
    "graph_to_dict",
    "graph_from_dict",
    "pie_to_dict",
    "pie_from_dict",
    "pie_chart_to_dict",
    "pie_chart_from_dict",
    "dumps_graph",
    "loads_graph",
]


def _f32(value: float) -> float:
    return float(np.float32(value))


def coordinate_to_dict(coordinate: Coordinate) -> Dict[str, float]:
    return {"x": _f32(coordinate.x), "y": _f32(coordinate.y)}


def coordinate_from_dict(data: Dict[str, Any]) -> Coordinate:
    return Coordinate(_f32(data["x"]), _f32(data["y"]))


def plot_to_dict(plot: Plot) -> Dict[str, Any]:
    return {
        "smoothing_mode": plot.smoothing_mode.value,
        "smoothen_graph": plot.smoothen_graph,
        "has_currency": plot.has_currency,
        "label": plot.label,
        "maxx": _f32(plot.maxx),
        "minx": _f32(plot.minx),
        "maxy": _f32(plot.maxy),
        "smoothing_threshold": plot.smoothing_threshold,
        "coordinates": [coordinate_to_dict(c) for c in plot.coordinates],
        "color": plot.color,
    }


def plot_from_dict(data: Dict[str, Any]) -> Plot:
    try:
        coordinates = CoordinateSet(coordinate_from_dict(c) for c in data["coordinates"])
        return Plot(
            data["label"],
            coordinates,
            has_currency=bool(data["has_currency"]),
            color=data["color"],
            smoothing_threshold=int(data["smoothing_threshold"]),
            smoothing_mode=SmoothingMode(data["smoothing_mode"]),
            smoothen_graph=bool(data["smoothen_graph"]),
            minx=float(data["minx"]),
            maxx=float(data["maxx"]),
            maxy=float(data["maxy"]),
        )
    except (KeyError, ValueError, TypeError) as exc:
        raise InvalidArgumentError("Malformed plot payload", context={"error": str(exc)}) from exc


def period_to_dict(period: Period) -> Dict[str, str]:
    return {
        "unit": period.unit.name,
        "start": period.start.isoformat(),
        "end": period.end.isoformat(),
    }


def period_from_dict(data: Dict[str, Any]) -> Period:
    try:
        unit = ChronoUnit.from_name(data["unit"])
        start = datetime.fromisoformat(data["start"])
        end = datetime.fromisoformat(data["end"])
    except (KeyError, ValueError, TypeError) as exc:
        raise InvalidArgumentError("Malformed period payload", context={"error": str(exc)}) from exc
    return Period(unit, start, end)


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    return {
        "period": period_to_dict(graph.period),
        "plots": [plot_to_dict(p) for p in graph.plots.values()],
    }


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """Rebuild a graph; stored plot colours are kept as saved."""
    period = period_from_dict(data.get("period", {}))
    plots = [plot_from_dict(p) for p in data.get("plots", [])]
    if not plots:
        raise InvalidArgumentError("Graph payload holds no plots")
    return Graph(period, {p.label: p for p in plots})


def pie_to_dict(pie: Pie) -> Dict[str, Any]:
    return {"name": pie.name, "value": pie.value, "color": pie.color}


def pie_from_dict(data: Dict[str, Any]) -> Pie:
    try:
        return Pie(value=float(data["value"]), name=data["name"], color=data["color"])
    except (KeyError, ValueError, TypeError) as exc:
        raise InvalidArgumentError("Malformed pie payload", context={"error": str(exc)}) from exc


def pie_chart_to_dict(chart: PieChartData) -> Dict[str, List[Dict[str, Any]]]:
    return {"slices": [pie_to_dict(p) for p in chart.slices]}


def pie_chart_from_dict(data: Dict[str, Any]) -> PieChartData:
    chart = PieChartData()
    chart.add(pie_from_dict(p) for p in data.get("slices", []))
    return chart


def dumps_graph(graph: Graph) -> str:
    return json.dumps(graph_to_dict(graph))


def loads_graph(text: str) -> Graph:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidArgumentError("Graph payload is not valid JSON", context={"error": str(exc)}) from exc
    return graph_from_dict(payload)
