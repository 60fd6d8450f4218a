"""Holiday table bootstrap (import side-effect)."""
from .api import set_holiday_table
from .bootstrap import build_holiday_table
from .attributes import standard as _standard  # noqa: F401  (registers attributes)

set_holiday_table(build_holiday_table())
