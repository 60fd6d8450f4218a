"""koyomi public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Load the holiday table and standard attributes on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    holiday_for,
    day_info,
    calendar_view,
    get_holiday_table,
    set_holiday_table,
    use_holiday_file,
)
from .core.time import sample_now, as_instant, date_key
from .core.types import (
    Instant,
    CalendarDay,
    CalendarGrid,
    YearProgressStats,
    AlmanacSnapshot,
    CalendarView,
    DayInfo,
)
from .engines.grid import generate_grid, next_month_start
from .engines.holidays import HolidayTable, load_holiday_table
from .engines.era import era_label, era_year
from .engines.almanac import (
    rokuyo,
    six_day_label,
    moon_age,
    lunar_phase_label,
    year_progress,
    almanac,
)

__all__ = [
    "sample_now",
    "as_instant",
    "date_key",
    "generate_grid",
    "next_month_start",
    "holiday_for",
    "HolidayTable",
    "load_holiday_table",
    "get_holiday_table",
    "set_holiday_table",
    "use_holiday_file",
    "era_label",
    "era_year",
    "rokuyo",
    "six_day_label",
    "moon_age",
    "lunar_phase_label",
    "year_progress",
    "almanac",
    "calendar_view",
    "day_info",
    "Instant",
    "CalendarDay",
    "CalendarGrid",
    "YearProgressStats",
    "AlmanacSnapshot",
    "CalendarView",
    "DayInfo",
]
