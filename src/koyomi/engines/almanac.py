"""
koyomi.engines.almanac
----------------------
Almanac figures shown next to the calendar.

rokuyo() and moon_age() are deliberately simple closed forms, not lunisolar
calendar arithmetic: rokuyo uses the Gregorian month/day instead of the
old-calendar ones, and the moon age is a day-count approximation. Their
exact arithmetic (including the truncating remainder of the moon age) is
what callers rely on, so do not "correct" them.
"""

from __future__ import annotations

import math

from koyomi.core.time import DateLike, as_instant, jdn_from_ymd
from koyomi.core.types import AlmanacSnapshot, YearProgressStats

ROKUYO_NAMES = ("大安", "赤口", "先勝", "友引", "先負", "仏滅")

# (exclusive upper bound, label); ages at or above the last bound are 有明月
LUNAR_PHASES = (
    (2, "新月"),
    (6, "三日月"),
    (9, "上弦"),
    (13, "十三夜"),
    (17, "満月"),
    (20, "十八夜"),
    (24, "下弦"),
)
LAST_PHASE = "有明月"

DAY_MS = 86_400_000


def rokuyo(value: DateLike) -> str:
    """Six-day cycle label from (day + month) mod 6."""
    t = as_instant(value)
    return ROKUYO_NAMES[(t.day + t.month) % 6]


six_day_label = rokuyo


def moon_age(value: DateLike) -> int:
    """
    Approximate moon age in days.

    The remainder truncates toward zero, so dates where the day count is
    negative (e.g. early spring of 2000-2099) give a negative age; those
    fall into the first phase bucket.
    """
    t = as_instant(value)
    c = t.year // 100
    y = t.year % 100
    m = t.month + 12 if t.month < 3 else t.month
    yy = y - 1 if t.month < 3 else y

    d = t.day + (26 * (m + 1)) // 10 + yy + yy // 4 + c // 4 - 2 * c
    return int(math.fmod(d, 30))


def phase_label_for_age(age: int) -> str:
    for bound, label in LUNAR_PHASES:
        if age < bound:
            return label
    return LAST_PHASE


def lunar_phase_label(value: DateLike) -> str:
    return phase_label_for_age(moon_age(value))


def year_progress(value: DateLike) -> YearProgressStats:
    """
    Share of the instant's year already elapsed, at millisecond resolution.

    Both year bounds are local midnight on January 1; the day counts come
    from the elapsed time itself, so leap years yield 366 without a lookup.
    """
    t = as_instant(value)
    start = jdn_from_ymd(t.year, 1, 1)
    end = jdn_from_ymd(t.year + 1, 1, 1)

    # integer milliseconds; no datetime, so year 9999 works too
    total = (end - start) * DAY_MS
    time_of_day = ((t.hour * 60 + t.minute) * 60 + t.second) * 1000 + t.millisecond
    elapsed = (jdn_from_ymd(t.year, t.month, t.day) - start) * DAY_MS + time_of_day
    day_of_year = elapsed // DAY_MS + 1
    days_in_year = total // DAY_MS

    return YearProgressStats(
        percentage=100.0 * elapsed / total,
        day_of_year=day_of_year,
        days_in_year=days_in_year,
        days_remaining=days_in_year - day_of_year,
    )


def almanac(value: DateLike) -> AlmanacSnapshot:
    t = as_instant(value)
    return AlmanacSnapshot(
        rokuyo=rokuyo(t),
        lunar_phase=lunar_phase_label(t),
        year_progress=year_progress(t),
    )
