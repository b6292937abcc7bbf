"""Per-unit text for period indices (tooltip dates and x-axis labels)."""

from __future__ import annotations

from datetime import datetime

from config import settings
from utils.chrono_unit import ChronoUnit
from utils.period import Period

__all__ = ["tooltip_date", "axis_date"]


def _tooltip_format(unit: ChronoUnit) -> str:
    if unit is ChronoUnit.DAY:
        return settings.HOUR_FORMAT
    if unit is ChronoUnit.WEEK:
        return settings.WEEKDAY_FORMAT
    if unit is ChronoUnit.MAX:
        return settings.SHORT_DATE_FORMAT
    return settings.DAY_MONTH_FORMAT


def _axis_format(unit: ChronoUnit) -> str:
    if unit is ChronoUnit.DAY:
        return settings.HOUR_FORMAT
    return settings.DAY_MONTH_FORMAT


def tooltip_date(period: Period, index: int) -> str:
    moment: datetime = period.time_at(index)
    return moment.strftime(_tooltip_format(period.unit))


def axis_date(period: Period, index: int) -> str:
    return period.time_at(index).strftime(_axis_format(period.unit))
