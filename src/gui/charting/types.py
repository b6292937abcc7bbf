"""Core charting types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple


@dataclass(frozen=True)
class ChartRequest:
    """Represents a logical chart request.

    Attributes:
        chart_type: Identifier registered in the chart registry (e.g. 'graph.line').
        data: Payload understood by the chart builder (a Graph, PieChartData, ...).
        options: Optional rendering hints (title, size, dpi, highlight).
    """

    chart_type: str
    data: Any
    options: Optional[Dict[str, Any]] = None


@dataclass
class ChartResult:
    """Represents the outcome of building a chart.

    ``widget`` is the matplotlib canvas holding the drawn figure.
    """

    widget: Any  # FigureCanvasAgg (Qt type avoided to keep tests headless)
    meta: Dict[str, Any]


class ChartBackendProtocol(Protocol):  # pragma: no cover - structural only
    """Protocol all chart backends must implement."""

    def create_graph_chart(
        self,
        graph: Any,
        *,
        size: Tuple[int, int] = ...,
        dpi: int = ...,
        title: str | None = None,
        fill: bool = True,
        highlight: str | None = None,
    ) -> Any:
        ...

    def create_pie_chart(
        self,
        chart: Any,
        *,
        size: Tuple[int, int] = ...,
        dpi: int = ...,
        title: str | None = None,
        gap: float = ...,
    ) -> Any:
        ...

    def export_widget(self, canvas: Any, path: str, *, format: str = "png", dpi: int = 120) -> None:
        ...
