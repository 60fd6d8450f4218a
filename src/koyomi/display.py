"""
Plain-text rendering of the calendar clock.

This is the presentation side: it only formats what koyomi.api.calendar_view
computed. A frame with no sampled instant yet renders LOADING_TEXT.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .attributes.standard import WEEKDAY_NAMES
from .core.time import date_key
from .core.types import CalendarGrid, CalendarView, Instant

MONTH_NAMES = tuple(f"{m}月" for m in range(1, 13))
LOADING_TEXT = "読み込み中..."

HolidayLookup = Callable[[str], Optional[str]]


def format_clock(t: Instant) -> str:
    return f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"


def format_date_line(t: Instant, era: str) -> str:
    return f"（{era}）{t.year}年{t.month}月{t.day}日 （{WEEKDAY_NAMES[t.weekday]}曜日）"


def dow_header() -> str:
    # CJK names are two columns wide
    return " ".join(f" {name} " for name in WEEKDAY_NAMES)


def render_grid(
    grid: CalendarGrid,
    holidays: HolidayLookup,
    *,
    today: Optional[Instant] = None,
    annotate: bool = True,
) -> str:
    """
    Month panel as text, four columns per day.

    Days outside the target month show as '.'. A holiday gets a '*' and
    today a '<'; a holiday that is today shows both. With annotate=True
    holiday names are listed under their week.
    """
    lines: List[str] = [f"{grid.year}年 {MONTH_NAMES[grid.month - 1]}", dow_header()]
    today_mid = today.midnight() if today is not None else None
    for week in grid.weeks():
        cells = []
        notes = []
        for cd in week:
            if not cd.in_target_month:
                cells.append("   .")
                continue
            name = holidays(date_key(cd.instant))
            holiday_mark = "*" if name else " "
            today_mark = "<" if cd.instant == today_mid else " "
            cells.append(f"{cd.day:>2d}{holiday_mark}{today_mark}")
            if name and annotate:
                notes.append(f"{cd.day}日 {name}")
        lines.append(" ".join(cells))
        if notes:
            lines.append("    " + " / ".join(notes))
    return "\n".join(lines)


def render_view(view: CalendarView, holidays: HolidayLookup) -> str:
    t = view.instant
    ap = view.almanac
    yp = ap.year_progress
    out = [
        format_clock(t),
        format_date_line(t, view.era),
    ]
    if view.holiday:
        out.append(f"🎌 {view.holiday}")
    out += [
        "",
        render_grid(view.current_grid, holidays, today=t, annotate=True),
        "",
        f"本日の六曜: {ap.rokuyo}   月齢: {ap.lunar_phase}   "
        f"今年の進捗: {yp.percentage:.1f}% (残り{yp.days_remaining}日)",
        "",
        render_grid(view.next_grid, holidays, annotate=False),
    ]
    return "\n".join(out)


def render_frame(view: Optional[CalendarView], holidays: HolidayLookup) -> str:
    if view is None:
        return LOADING_TEXT
    return render_view(view, holidays)
