"""Pie chart data: slices with share of total and sweep angle.

Slices are drawn with a fixed gap between neighbours, so the angles share
``360 - gap * count`` degrees rather than a full circle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from config import settings
from utils.labels import value_text

__all__ = ["Pie", "PieChartData", "format_currency"]

log = logging.getLogger(__name__)


def format_currency(value: float) -> str:
    return value_text(value, currency=True)


@dataclass(order=True)
class Pie:
    value: float
    name: str = field(compare=False)
    color: str = field(compare=False)
    percentage: float = field(default=0.0, compare=False)
    angle: float = field(default=0.0, compare=False)

    @property
    def label(self) -> str:
        return f"{self.name} - {format_currency(self.value)}"

    def set_percentage(self, percentage: float, count: int) -> None:
        self.percentage = percentage
        self.angle = percentage * (360.0 - settings.PIE_SLICE_GAP_DEGREES * count)


class PieChartData:
    """Slices keyed by display label, capped at ``MAX_PIE_SLICES``."""

    def __init__(self) -> None:
        self._slices: Dict[str, Pie] = {}
        self._total = 0.0

    def add(self, pies: Iterable[Pie]) -> List[Pie]:
        """Replace the slices with ``pies`` (ascending by value).

        Slices beyond the cap are logged and skipped. Returns the kept slices.
        """
        self._slices.clear()
        total = 0.0
        for pie in sorted(pies):
            if len(self._slices) == settings.MAX_PIE_SLICES:
                log.warning("pie chart holds at most %d slices; skipping the rest", settings.MAX_PIE_SLICES)
                break
            self._slices[pie.label] = pie
            total += pie.value

        count = len(self._slices)
        for pie in self._slices.values():
            pie.set_percentage(pie.value / total if total else 0.0, count)
        self._total = total
        return self.slices

    @property
    def slices(self) -> List[Pie]:
        return list(self._slices.values())

    @property
    def total(self) -> float:
        return self._total

    @property
    def total_text(self) -> str:
        return format_currency(self._total)

    def __len__(self) -> int:
        return len(self._slices)
