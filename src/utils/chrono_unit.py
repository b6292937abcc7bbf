"""Calendar units a Period can be aligned to."""

from __future__ import annotations

from enum import Enum


class ChronoUnit(Enum):
    HOUR = "Hour"
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    QUARTER = "Quarter"
    SEMI_ANNUAL = "Semiannual"
    ANNUAL = "Annual"
    MAX = "Max"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "ChronoUnit":
        """Resolve a unit from its member name ("SEMI_ANNUAL") or display value ("Semiannual")."""
        key = name.strip()
        for unit in cls:
            if key.upper() == unit.name or key.lower() == unit.value.lower():
                return unit
        raise ValueError(f"Unknown chrono unit: {name!r}")

    @property
    def months_per_block(self) -> int | None:
        """Length in months of the year partition used by QUARTER / SEMI_ANNUAL."""
        if self is ChronoUnit.QUARTER:
            return 12 // 4
        if self is ChronoUnit.SEMI_ANNUAL:
            return 12 // 2
        return None


__all__ = ["ChronoUnit"]
