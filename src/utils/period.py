"""Calendar-aligned time intervals used to bucket and label graph x-values.

A Period is a closed interval ``[start, end]`` whose edges sit on the
floor / ceiling of a calendar unit (midnight and 23:59:59 of the first and
last day). Factories take the reference time explicitly; only when it is
omitted is the current local time used.

Index semantics (``time_at`` / ``index_of``):
    - DAY: index is the hour of the day, 0..23 (``start + index`` hours).
    - every other unit: 1-based day offset from ``start``. For WEEK this is
      the ISO day of week (1 = Monday), for MONTH the day of month and for
      ANNUAL the day of year.

Weeks run Monday..Sunday for both edges.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Iterator

from domain.errors import IncompatibleUnitError, IndexOutOfRangeError, InvalidArgumentError
from utils.chrono_unit import ChronoUnit

__all__ = ["Period"]

_HOUR = timedelta(hours=1)


def _reference(reference: datetime | None) -> datetime:
    return reference if reference is not None else datetime.now()


def _floor_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _ceil_day(value: datetime) -> datetime:
    return value.replace(hour=23, minute=59, second=59, microsecond=0)


def _last_day_of_month(value: datetime) -> datetime:
    return value.replace(day=calendar.monthrange(value.year, value.month)[1])


class Period:
    __slots__ = ("unit", "_start", "_end")

    def __init__(self, unit: ChronoUnit, start: datetime, end: datetime) -> None:
        if start > end:
            raise InvalidArgumentError(
                "Period start must not be after its end",
                context={"unit": unit.name, "start": start, "end": end},
            )
        self.unit = unit
        self._start = start
        self._end = end

    # Factories -------------------------------------------------------
    @classmethod
    def of_day(cls, reference: datetime | None = None) -> "Period":
        ref = _reference(reference)
        return cls(ChronoUnit.DAY, _floor_day(ref), _ceil_day(ref))

    @classmethod
    def of_week(cls, reference: datetime | None = None) -> "Period":
        ref = _reference(reference)
        monday = ref - timedelta(days=ref.weekday())
        return cls(ChronoUnit.WEEK, _floor_day(monday), _ceil_day(monday + timedelta(days=6)))

    @classmethod
    def of_month(cls, reference: datetime | None = None) -> "Period":
        ref = _reference(reference)
        return cls(
            ChronoUnit.MONTH,
            _floor_day(ref.replace(day=1)),
            _ceil_day(_last_day_of_month(ref)),
        )

    @classmethod
    def of_quarter(cls, reference: datetime | None = None) -> "Period":
        return cls._of_month_block(ChronoUnit.QUARTER, _reference(reference))

    @classmethod
    def of_semi_annual(cls, reference: datetime | None = None) -> "Period":
        return cls._of_month_block(ChronoUnit.SEMI_ANNUAL, _reference(reference))

    of_semi = of_semi_annual

    @classmethod
    def of_year(cls, reference: datetime | None = None) -> "Period":
        ref = _reference(reference)
        return cls(
            ChronoUnit.ANNUAL,
            _floor_day(ref.replace(month=1, day=1)),
            _ceil_day(ref.replace(month=12, day=31)),
        )

    @classmethod
    def of_max(cls, start: datetime, end: datetime) -> "Period":
        return cls(ChronoUnit.MAX, _floor_day(start), _ceil_day(end))

    @classmethod
    def _of_month_block(cls, unit: ChronoUnit, ref: datetime) -> "Period":
        # 12 months split into equal blocks; the block holding ref.month wins
        block = unit.months_per_block
        if block is None:
            raise InvalidArgumentError(
                "Unit does not partition the year into month blocks", context={"unit": unit.name}
            )
        first_month = ref.month - (ref.month - 1) % block
        last_month = first_month + block - 1
        start = _floor_day(ref.replace(day=1, month=first_month))
        end = _ceil_day(_last_day_of_month(ref.replace(day=1, month=last_month)))
        return cls(unit, start, end)

    # Accessors -------------------------------------------------------
    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def duration(self) -> int:
        """Hours spanned + 1 for DAY, whole days spanned + 1 otherwise."""
        span = self._end - self._start
        if self.unit is ChronoUnit.DAY:
            return int(span // _HOUR) + 1
        return span.days + 1

    def indices(self) -> Iterator[int]:
        """Every index ``time_at`` accepts: hours 0..23 for DAY, days 1..duration otherwise."""
        if self.unit is ChronoUnit.DAY:
            return iter(range(self.duration))
        return iter(range(1, self.duration + 1))

    def contains(self, moment: datetime) -> bool:
        return self._start <= moment <= self._end

    # Index mapping ---------------------------------------------------
    def time_at(self, index: int) -> datetime:
        """Map an index within the period to an absolute timestamp."""
        if self.unit is ChronoUnit.DAY:
            return self._start + timedelta(hours=index)
        if self.unit in (ChronoUnit.QUARTER, ChronoUnit.SEMI_ANNUAL) and index > self.duration:
            raise IndexOutOfRangeError(
                f"Index {index} exceeds period duration {self.duration}",
                context={"unit": self.unit.name, "index": index},
            )
        return self._start + timedelta(days=index - 1)

    def index_of(self, moment: datetime) -> int:
        """Bucket a timestamp into the index ``time_at`` would map back onto."""
        if not self.contains(moment):
            raise InvalidArgumentError(
                "Timestamp lies outside the period",
                context={"moment": moment, "start": self._start, "end": self._end},
            )
        offset = moment - self._start
        if self.unit is ChronoUnit.DAY:
            return int(offset // _HOUR)
        return offset.days + 1

    # Combination -----------------------------------------------------
    def union(self, other: "Period") -> None:
        """Widen this period in place so it also spans ``other``."""
        if self.unit is not other.unit:
            raise IncompatibleUnitError(
                "Cannot combine periods of different units",
                context={"left": self.unit.name, "right": other.unit.name},
            )
        if other._start < self._start:
            self._start = other._start
        if other._end > self._end:
            self._end = other._end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (self.unit, self._start, self._end) == (other.unit, other._start, other._end)

    __hash__ = None  # type: ignore[assignment]  # union() mutates in place

    def __repr__(self) -> str:
        return f"Period({self.unit.name}, {self._start.isoformat()} .. {self._end.isoformat()})"
