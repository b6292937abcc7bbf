"""Charting abstraction layer

Provides a thin wrapper API that hides the concrete plotting backend so
view models and widgets can request charts without coupling to
matplotlib directly.

Backend: matplotlib on an Agg canvas, so charts build headless; the Qt
widget re-hosts the figure in a QtAgg canvas for display.
"""

from .backends import MatplotlibChartBackend  # noqa: F401
from .mapping import DrawingTransform  # noqa: F401
from .registry import chart_registry, register_chart_type  # noqa: F401
from .types import ChartRequest, ChartResult  # noqa: F401
from . import line_charts  # noqa: F401  # registers graph.line
from . import pie_charts  # noqa: F401  # registers pie.basic
