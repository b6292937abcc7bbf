"""Tests for the x-keyed Coordinate and the x-unique CoordinateSet."""

from __future__ import annotations

import pytest

from domain.coordinate import Coordinate, CoordinateSet


def test_equality_and_hash_ignore_y():
    a = Coordinate(2.0, 5.0)
    b = Coordinate(2.0, 4.0)
    assert a == b
    assert hash(a) == hash(b)
    assert a.compare(Coordinate(3.0, 0.0)) == -1
    assert Coordinate(3.0, 0.0).compare(a) == 1
    assert a.compare(b) == 0
    assert Coordinate(1.0, 9.0) < a


def test_duplicate_x_keeps_first_sample():
    coords = CoordinateSet()
    assert coords.add(Coordinate(2, 5)) is True
    assert coords.add(Coordinate(2, 4)) is False
    assert len(coords) == 1
    assert coords.first().y == 5


def test_set_keeps_x_order():
    coords = CoordinateSet([Coordinate(5, 1), Coordinate(1, 2), Coordinate(3, 3)])
    assert coords.xs() == [1, 3, 5]
    assert coords.ys() == [2, 3, 1]
    assert coords.first() == Coordinate(1, 0)
    assert coords.last().x == 5
    assert coords.max_y() == 3
    assert Coordinate(3, 99) in coords
    assert Coordinate(4, 3) not in coords
    assert coords[1].y == 3


def test_copy_is_independent():
    coords = CoordinateSet([Coordinate(1, 1)])
    clone = coords.copy()
    clone.add(Coordinate(2, 2))
    assert len(coords) == 1
    assert len(clone) == 2


def test_first_and_last_on_empty_set_raise():
    coords = CoordinateSet()
    with pytest.raises(IndexError):
        coords.first()
    with pytest.raises(IndexError):
        coords.last()
