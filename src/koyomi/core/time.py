from __future__ import annotations
from datetime import date, datetime, tzinfo
from typing import Callable, Optional, Tuple, Union

from .types import DateKey, Instant

DateLike = Union[Instant, datetime, date]


def jdn_from_ymd(y: int, m: int, day: int) -> int:
    """Julian Day Number of a proleptic Gregorian (year, month, day); any year."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def ymd_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of jdn_from_ymd (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def weekday_of_jdn(jdn: int) -> int:
    """Day of week for a JDN, 0=Sunday .. 6=Saturday."""
    return (jdn + 1) % 7


def as_instant(value: DateLike) -> Instant:
    if isinstance(value, Instant):
        return value
    # datetime is a subclass of date, test it first
    if isinstance(value, datetime):
        return Instant.from_datetime(value)
    if isinstance(value, date):
        return Instant.from_date(value)
    raise TypeError(f"Expected Instant, datetime or date, got {type(value).__name__}")


def date_key(value: DateLike) -> DateKey:
    """
    Holiday lookup key for a calendar day.

    Components are plain decimal integers with no zero padding:
    2025-01-01 -> "2025-1-1". Time of day never enters the key.
    """
    t = as_instant(value)
    return f"{t.year}-{t.month}-{t.day}"


def sample_now(*, tz: Optional[tzinfo] = None, clock: Optional[Callable[[], datetime]] = None) -> Instant:
    """
    Current wall-clock Instant.

    tz selects whose wall clock is read (default: the process local time).
    clock replaces datetime.now, mainly for tests.
    """
    if clock is not None:
        return Instant.from_datetime(clock())
    return Instant.from_datetime(datetime.now(tz))
