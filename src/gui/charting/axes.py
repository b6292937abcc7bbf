"""Axis decorations derived from a Graph: horizontal guides and x-axis dates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from config import settings
from domain.errors import IndexOutOfRangeError
from domain.graph import Graph
from domain.search import find_coordinate
from utils.dates import axis_date
from utils.labels import guide_labels

from .mapping import DrawingTransform

__all__ = ["AxisLabel", "guide_lines", "x_axis_labels"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisLabel:
    position: float  # drawing-space x (x-axis) or pixel y (guides)
    text: str


def guide_lines(maximum: float, transform: DrawingTransform) -> List[AxisLabel]:
    """Evenly spaced guides from 0 to ``maximum``, labelled via ``guide_labels``."""
    texts = guide_labels(maximum)
    count = len(texts) - 1
    return [
        AxisLabel(transform.to_pixel_y(i / count * maximum), text)
        for i, text in enumerate(texts)
    ]


def x_axis_labels(
    graph: Graph,
    transform: DrawingTransform,
    fractions: Sequence[float] = settings.X_AXIS_LABEL_FRACTIONS,
) -> List[AxisLabel]:
    """Date labels at fixed fractions of the width, snapped to the first plot's samples."""
    coordinates = graph.first_plot().coordinates
    labels: List[AxisLabel] = []
    for fraction in fractions:
        target = transform.to_data_x(transform.width * fraction)
        nearest = find_coordinate(coordinates, target)
        try:
            text = axis_date(graph.period, round(nearest.x))
        except IndexOutOfRangeError:
            log.debug("x=%s lies beyond %r; axis label skipped", nearest.x, graph.period)
            continue
        labels.append(AxisLabel(transform.to_drawing_x(nearest.x), text))
    return labels
