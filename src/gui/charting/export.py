"""Chart export helper.

Keeps higher-level code decoupled from the backend's concrete export API.
"""
from __future__ import annotations

from .registry import chart_registry


def export_chart(chart_widget, path: str, *, format: str = "png", dpi: int = 120) -> None:
    """Export a chart canvas to disk via the backend.

    Args:
        chart_widget: The canvas returned in ChartResult.widget.
        path: Destination file path (existing directory required).
        format: 'png' or 'svg'.
        dpi: Raster resolution for PNG.
    """
    chart_registry.backend.export_widget(chart_widget, path, format=format, dpi=dpi)
