"""Graph view GUI public API.

Curated, intentionally small surface for callers that want charts without
depending on deep internal module paths.

Design Principles:
- Avoid side-effect heavy imports (no implicit QApplication creation, no Qt import).
- Qt widgets live in `gui.widgets` and are imported explicitly by callers.
"""

from __future__ import annotations

from .charting import (  # noqa: F401
    ChartRequest,
    ChartResult,
    DrawingTransform,
    MatplotlibChartBackend,
    chart_registry,
    register_chart_type,
)
from .services.logging_service import configure_logging, get_logging_service  # noqa: F401
from .viewmodels.graph_viewmodel import GraphViewModel, TouchedValue, TouchResult  # noqa: F401

__all__ = [
    "ChartRequest",
    "ChartResult",
    "DrawingTransform",
    "MatplotlibChartBackend",
    "chart_registry",
    "register_chart_type",
    "configure_logging",
    "get_logging_service",
    "GraphViewModel",
    "TouchedValue",
    "TouchResult",
]
