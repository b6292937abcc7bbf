"""Windowed smoothing of a coordinate series.

``smoothen_graph`` replaces a series with one synthetic sample per window
centre ``i`` (``step <= i <= size - step - 2`` where ``step = threshold // 2``).
The synthetic sample's x is the window centre's *position*, not the
input x value.

Window bounds differ between the two modes and observable output depends
on it:
    - MEAN averages positions ``[i - step, i + step)`` (right edge excluded)
    - MEDIAN takes the median of ``[i - step, i + step]`` (right edge included)
"""

from __future__ import annotations

import logging
from enum import Enum

import numpy as np

from .coordinate import Coordinate, CoordinateSet

__all__ = ["SmoothingMode", "smoothen_graph", "mean_of_range", "median_of_range"]

log = logging.getLogger(__name__)


class SmoothingMode(Enum):
    MEAN = "mean"
    MEDIAN = "median"


def mean_of_range(ys: np.ndarray, start: int, end: int) -> float:
    """Arithmetic mean of ``ys[start:end]`` (``end`` excluded)."""
    return float(np.mean(ys[start:end]))


def median_of_range(ys: np.ndarray, start: int, end: int) -> float:
    """Upper median of ``ys[start:end + 1]`` (``end`` included)."""
    window = np.sort(ys[start : end + 1])
    return float(window[len(window) // 2])


def smoothen_graph(coordinates: CoordinateSet, threshold: int, mode: SmoothingMode) -> None:
    """Smooth ``coordinates`` in place; no-op when fewer than ``threshold`` samples."""
    size = len(coordinates)
    if size < threshold:
        log.debug("smoothing skipped: %d samples below threshold %d", size, threshold)
        return

    ys = np.fromiter((c.y for c in coordinates), dtype=float, count=size)
    step = threshold // 2
    last = size - (step + 1)
    smoothed = []
    for i in range(step, last):
        if mode is SmoothingMode.MEAN:
            y = mean_of_range(ys, i - step, i + step)
        else:
            y = median_of_range(ys, i - step, i + step)
        smoothed.append(Coordinate(float(i), y))

    coordinates.clear()
    coordinates.update(smoothed)
    log.debug("smoothed %d samples into %d (%s, threshold %d)", size, len(smoothed), mode.name, threshold)
