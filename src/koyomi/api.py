from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence, Union

from .core.time import DateLike, as_instant, date_key
from .core.types import CalendarView, DateKey, DayInfo
from .attributes.registry import compute_attributes
from .engines.almanac import almanac
from .engines.era import era_label
from .engines.grid import generate_grid, next_month_start
from .engines.holidays import HolidayTable, load_holiday_table

_holidays: Optional[HolidayTable] = None

def set_holiday_table(table: HolidayTable) -> None:
    global _holidays
    _holidays = table

def get_holiday_table() -> HolidayTable:
    if _holidays is None:
        raise RuntimeError("Holiday table not initialized")
    return _holidays

def use_holiday_file(path: Optional[Union[str, Path]] = None) -> HolidayTable:
    """Load a holiday CSV (packaged table when path is None) and make it active."""
    table = load_holiday_table(path)
    set_holiday_table(table)
    return table

def holiday_for(value: Union[DateKey, DateLike]) -> Optional[str]:
    """Holiday name for a DateKey (or a date-like value), None on a miss."""
    if isinstance(value, str):
        return get_holiday_table().lookup(value)
    return get_holiday_table().get(value)

def day_info(
    d: DateLike,
    *,
    attributes: Sequence[str] = (),
) -> DayInfo:
    t = as_instant(d)
    key = date_key(t)
    info = DayInfo(
        civil_date=t.date(),
        weekday=t.weekday,
        date_key=key,
        holiday=get_holiday_table().lookup(key),
    )
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def calendar_view(now: DateLike) -> CalendarView:
    """
    One frame of the calendar clock.

    Every figure is derived from the same instant: both month panels, the
    holiday banner for today, the era and the almanac.
    """
    t = as_instant(now)
    return CalendarView(
        instant=t,
        era=era_label(t.year),
        holiday=holiday_for(date_key(t)),
        current_grid=generate_grid(t),
        next_grid=generate_grid(next_month_start(t)),
        almanac=almanac(t),
    )
