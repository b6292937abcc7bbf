"""Tests for windowed MEAN / MEDIAN smoothing.

The MEAN window excludes its right edge while the MEDIAN window includes
it; these tests pin both behaviours.
"""

from __future__ import annotations

import pytest

from domain.smoothing import SmoothingMode, mean_of_range, median_of_range, smoothen_graph
from factories import make_coordinates


def test_median_31_points_threshold_5_keeps_26():
    coords = make_coordinates(range(31))
    smoothen_graph(coords, 5, SmoothingMode.MEDIAN)
    assert len(coords) == 26
    assert coords.xs() == [float(i) for i in range(2, 28)]
    # inclusive window [i-2, i+2] over 0..30 has median i
    assert coords.ys() == [float(i) for i in range(2, 28)]


def test_mean_window_excludes_right_edge():
    coords = make_coordinates(range(31))
    smoothen_graph(coords, 5, SmoothingMode.MEAN)
    assert len(coords) == 26
    # mean of [i-2, i+2) = i - 0.5
    assert coords[0].y == pytest.approx(1.5)
    assert coords[-1].y == pytest.approx(26.5)


def test_smoothing_replaces_x_with_window_index():
    coords = make_coordinates([1, 9, 2, 8, 3, 7, 4], start=100)
    smoothen_graph(coords, 3, SmoothingMode.MEDIAN)
    # step 1: i runs 1..4
    assert coords.xs() == [1.0, 2.0, 3.0, 4.0]
    assert coords.ys() == [2.0, 8.0, 3.0, 7.0]


def test_fewer_points_than_threshold_is_noop():
    coords = make_coordinates([4, 1, 3], start=10)
    smoothen_graph(coords, 5, SmoothingMode.MEAN)
    assert coords.xs() == [10.0, 11.0, 12.0]
    assert coords.ys() == [4.0, 1.0, 3.0]


def test_range_helpers():
    ys = [1.0, 2.0, 10.0, 3.0]
    assert mean_of_range(ys, 0, 2) == pytest.approx(1.5)
    assert median_of_range(ys, 0, 2) == 2.0
    assert median_of_range(ys, 1, 3) == 3.0
