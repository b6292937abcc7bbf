"""Chart registry.

Maps logical chart types ('graph.line', 'pie.basic') to builder callables
so view code can request charts without touching matplotlib directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict

from .backends import MatplotlibChartBackend
from .types import ChartRequest, ChartResult

log = logging.getLogger(__name__)

ChartBuilder = Callable[[ChartRequest, MatplotlibChartBackend], ChartResult]


@dataclass
class ChartType:
    """Metadata for a registered chart type."""

    chart_type: str
    builder: ChartBuilder
    description: str


class ChartRegistry:
    def __init__(self, backend: MatplotlibChartBackend | None = None) -> None:
        self._types: Dict[str, ChartType] = {}
        self._backend = backend or MatplotlibChartBackend()

    @property
    def backend(self) -> MatplotlibChartBackend:
        return self._backend

    def register(self, chart_type: str, builder: ChartBuilder, description: str) -> None:
        if chart_type in self._types:
            raise ValueError(f"Chart type already registered: {chart_type}")
        self._types[chart_type] = ChartType(chart_type, builder, description)

    def build(self, req: ChartRequest) -> ChartResult:
        """Eagerly build the requested chart and record build duration (ms)."""
        ct = self._types.get(req.chart_type)
        if ct is None:
            raise KeyError(f"Unknown chart type: {req.chart_type}")
        start = perf_counter()
        result = ct.builder(req, self._backend)
        elapsed = (perf_counter() - start) * 1000.0
        # Do not override if builder already set build_ms
        result.meta.setdefault("build_ms", elapsed)
        log.debug("built chart %s in %.1f ms", req.chart_type, result.meta["build_ms"])
        return result

    def list_types(self) -> Dict[str, str]:
        return {k: v.description for k, v in self._types.items()}


chart_registry = ChartRegistry()


def register_chart_type(chart_type: str, builder: ChartBuilder, description: str) -> None:
    chart_registry.register(chart_type, builder, description)
