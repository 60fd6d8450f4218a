from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterator, Optional, Tuple


# Plain "Y-M-D" with unpadded numerals; see core.time.date_key.
DateKey = str


@dataclass(frozen=True)
class Instant:
    """Wall-clock point in time, millisecond resolution."""
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        # Aware datetimes keep their own wall clock.
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.microsecond // 1000)

    @classmethod
    def from_date(cls, d: date) -> "Instant":
        return cls(d.year, d.month, d.day)

    @property
    def weekday(self) -> int:
        """0=Sunday .. 6=Saturday."""
        from .time import jdn_from_ymd, weekday_of_jdn
        return weekday_of_jdn(jdn_from_ymd(self.year, self.month, self.day))

    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second, self.millisecond * 1000)

    def midnight(self) -> "Instant":
        return Instant(self.year, self.month, self.day)


@dataclass(frozen=True)
class CalendarDay:
    instant: Instant
    in_target_month: bool

    @property
    def day(self) -> int:
        return self.instant.day


@dataclass(frozen=True)
class CalendarGrid:
    """Whole weeks (Sunday first) covering one month plus spill-over days."""
    year: int
    month: int
    days: Tuple[CalendarDay, ...]

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[CalendarDay]:
        return iter(self.days)

    def __getitem__(self, i: int) -> CalendarDay:
        return self.days[i]

    def weeks(self) -> Tuple[Tuple[CalendarDay, ...], ...]:
        return tuple(self.days[i:i + 7] for i in range(0, len(self.days), 7))


@dataclass(frozen=True)
class YearProgressStats:
    percentage: float
    day_of_year: int
    days_in_year: int
    days_remaining: int


@dataclass(frozen=True)
class AlmanacSnapshot:
    rokuyo: str
    lunar_phase: str
    year_progress: YearProgressStats


@dataclass(frozen=True)
class CalendarView:
    """Everything one dashboard frame needs, derived from a single Instant."""
    instant: Instant
    era: str
    holiday: Optional[str]
    current_grid: CalendarGrid
    next_grid: CalendarGrid
    almanac: AlmanacSnapshot


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    weekday: int
    date_key: DateKey
    holiday: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
