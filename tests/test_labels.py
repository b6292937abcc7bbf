"""Tests for magnitude labels, guide labels and per-unit date text."""

from __future__ import annotations

from datetime import datetime

import pytest

from utils.dates import axis_date, tooltip_date
from utils.labels import guide_labels, label, parse, value_text
from utils.period import Period


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0.0"),
        (999, "999.0"),
        (1000, "1.0k"),
        (1_500_000, "1.5m"),
        (2_300_000_000, "2.3b"),
        (4_000_000_000_000, "4.0t"),
    ],
)
def test_label(value, expected):
    assert label(value) == expected


def test_parse_drops_suffix():
    assert parse("1.5m") == 1.5
    assert parse("999.0") == 999.0
    assert parse(label(2_300_000_000)) == 2.3


def test_guide_labels_two_intervals():
    assert guide_labels(100) == ["0", "50.0", "100.0"]


def test_guide_labels_three_intervals_when_divisible_by_three():
    assert guide_labels(300) == ["0", "100.0", "200.0", "300.0"]
    assert guide_labels(6000) == ["0", "2.0k", "4.0k", "6.0k"]


def test_value_text():
    assert value_text(1234.5, currency=True) == "$1,234.50"
    assert value_text(12.345, currency=False) == "12.3"


def test_tooltip_and_axis_dates_per_unit():
    day = Period.of_day(datetime(2023, 1, 20))
    assert tooltip_date(day, 14) == "14:00"
    assert axis_date(day, 14) == "14:00"

    week = Period.of_week(datetime(2023, 1, 5))
    assert tooltip_date(week, 1) == "Monday"
    assert axis_date(week, 1) == "02 Jan"

    month = Period.of_month(datetime(2023, 3, 3))
    assert tooltip_date(month, 15) == "15 Mar"

    span = Period.of_max(datetime(2023, 1, 1), datetime(2023, 6, 30))
    assert tooltip_date(span, 32) == "01/02/2023"
