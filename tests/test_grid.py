# tests/test_grid.py

import pytest
from datetime import date, datetime, timedelta

from koyomi.core.time import jdn_from_ymd
from koyomi.core.types import Instant
from koyomi.engines.grid import generate_grid, month_bounds, next_month_start


def _all_months():
    for year in range(1990, 2031):
        for month in range(1, 13):
            yield year, month


def test_grid_is_whole_weeks_sunday_to_saturday():
    for year, month in _all_months():
        grid = generate_grid(Instant(year, month, 1))
        assert len(grid) % 7 == 0
        assert grid[0].instant.weekday == 0
        assert grid[-1].instant.weekday == 6
        assert 28 <= len(grid) <= 42

def test_grid_is_gapless_and_increasing():
    for year, month in _all_months():
        days = [cd.instant.date() for cd in generate_grid(Instant(year, month, 1))]
        for a, b in zip(days, days[1:]):
            assert b - a == timedelta(days=1)

def test_in_month_flags_form_single_run():
    """
    The flagged days are exactly the target month's days, in one run.
    """
    for year, month in _all_months():
        grid = generate_grid(Instant(year, month, 1))
        flags = [cd.in_target_month for cd in grid]
        first = flags.index(True)
        last = len(flags) - 1 - flags[::-1].index(True)
        assert all(flags[first:last + 1])
        assert not any(flags[:first]) and not any(flags[last + 1:])

        d0, d1 = month_bounds(year, month)
        in_month = [cd.instant.date() for cd in grid if cd.in_target_month]
        assert in_month[0] == d0
        assert in_month[-1] == d1
        assert len(in_month) == d1.day

def test_month_starting_on_sunday():
    # 2025-06-01 is a Sunday, 2025-06-30 a Monday
    grid = generate_grid(Instant(2025, 6, 15))
    assert grid[0].instant == Instant(2025, 6, 1)
    assert grid[-1].instant == Instant(2025, 7, 5)
    assert len(grid) == 35

def test_month_ending_on_sunday_still_completes_week():
    # 2025-08-31 is a Sunday: the grid runs through the following Saturday
    grid = generate_grid(Instant(2025, 8, 1))
    assert grid[0].instant == Instant(2025, 7, 27)
    assert grid[-1].instant == Instant(2025, 9, 6)
    assert len(grid) == 42

def test_four_week_february():
    # 2015-02-01 is a Sunday and 2015 is not a leap year
    grid = generate_grid(Instant(2015, 2, 1))
    assert len(grid) == 28
    assert all(cd.in_target_month for cd in grid)

def test_leap_february():
    grid = generate_grid(Instant(2024, 2, 10))
    in_month = [cd for cd in grid if cd.in_target_month]
    assert len(in_month) == 29
    assert grid[0].instant == Instant(2024, 1, 28)
    assert grid[-1].instant == Instant(2024, 3, 2)

def test_day_and_time_of_target_are_ignored():
    a = generate_grid(Instant(2025, 3, 1))
    b = generate_grid(datetime(2025, 3, 31, 23, 59, 59))
    c = generate_grid(date(2025, 3, 17))
    assert a == b == c
    assert (a.year, a.month) == (2025, 3)

def test_grid_days_are_midnight_instants():
    for cd in generate_grid(Instant(2025, 4, 20, 13, 45, 10, 500)):
        assert (cd.instant.hour, cd.instant.minute, cd.instant.second, cd.instant.millisecond) == (0, 0, 0, 0)

def test_weeks_split():
    grid = generate_grid(Instant(2025, 8, 1))
    weeks = grid.weeks()
    assert len(weeks) == 6
    assert all(len(w) == 7 for w in weeks)
    assert weeks[0][0].instant == Instant(2025, 7, 27)

@pytest.mark.parametrize(
    "value, expected",
    [
        (Instant(2025, 1, 31, 12), Instant(2025, 2, 1)),
        (Instant(2025, 12, 31, 23, 59, 59), Instant(2026, 1, 1)),
        (date(2024, 2, 29), Instant(2024, 3, 1)),
    ],
)
def test_next_month_start(value, expected):
    assert next_month_start(value) == expected


# --- edges of the civil date range ---

def _jdn(t):
    return jdn_from_ymd(t.year, t.month, t.day)

def test_grid_for_last_supported_month_spills_into_year_10000():
    grid = generate_grid(Instant(9999, 12, 1))
    assert len(grid) % 7 == 0
    assert grid[0].instant.weekday == 0
    assert grid[-1].instant.weekday == 6
    assert sum(cd.in_target_month for cd in grid) == 31
    last = grid[-1].instant
    assert (last.year, last.month) == (10000, 1)
    for a, b in zip(grid.days, grid.days[1:]):
        assert _jdn(b.instant) - _jdn(a.instant) == 1

def test_grid_for_first_supported_month_spills_into_year_0():
    grid = generate_grid(Instant(1, 1, 1))
    # 0001-01-01 is a Monday
    assert grid[0].instant == Instant(0, 12, 31)
    assert not grid[0].in_target_month
    assert grid[1].instant == Instant(1, 1, 1)
    assert grid[1].in_target_month
    for a, b in zip(grid.days, grid.days[1:]):
        assert _jdn(b.instant) - _jdn(a.instant) == 1

def test_next_month_start_past_year_9999():
    assert next_month_start(Instant(9999, 12, 31, 23, 59)) == Instant(10000, 1, 1)
