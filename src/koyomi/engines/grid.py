"""
koyomi.engines.grid
-------------------
Month panels for a Sunday-first calendar. A panel always holds whole weeks:
the first week is padded with the tail of the previous month, the last week
with the head of the next month.

Days are stepped as Julian Day Numbers, so spill-over into year 0 or year
10000 (outside datetime.date) still works.
"""

from __future__ import annotations

from datetime import date

from koyomi.core.time import DateLike, as_instant, jdn_from_ymd, weekday_of_jdn, ymd_from_jdn
from koyomi.core.types import CalendarDay, CalendarGrid, Instant


def _month_jdn_bounds(year: int, month: int) -> tuple[int, int]:
    first = jdn_from_ymd(year, month, 1)
    nxt = next_month_start(Instant(year, month, 1))
    return first, jdn_from_ymd(nxt.year, nxt.month, 1) - 1


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last civil day of a Gregorian month."""
    first_jdn, last_jdn = _month_jdn_bounds(year, month)
    return date(year, month, 1), date(year, month, last_jdn - first_jdn + 1)


def generate_grid(target: DateLike) -> CalendarGrid:
    """
    Expand the month containing `target` into a full display grid.

    The day-of-month (and time of day) of `target` is ignored.
    """
    t = as_instant(target)
    first_jdn, last_jdn = _month_jdn_bounds(t.year, t.month)
    # back to the Sunday on or before day 1
    jdn = first_jdn - weekday_of_jdn(first_jdn)

    days: list[CalendarDay] = []
    while jdn <= last_jdn or weekday_of_jdn(jdn) != 0:
        y, m, d = ymd_from_jdn(jdn)
        days.append(CalendarDay(instant=Instant(y, m, d), in_target_month=(m == t.month)))
        jdn += 1

    return CalendarGrid(year=t.year, month=t.month, days=tuple(days))


def next_month_start(value: DateLike) -> Instant:
    """Day 1 of the month after `value` (December rolls into January)."""
    t = as_instant(value)
    if t.month == 12:
        return Instant(t.year + 1, 1, 1)
    return Instant(t.year, t.month + 1, 1)
