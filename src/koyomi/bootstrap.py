from __future__ import annotations
import logging
from typing import Mapping, Optional

from koyomi.core.config import load_config
from koyomi.engines.holidays import HolidayTable, load_holiday_table

logger = logging.getLogger(__name__)

def build_holiday_table(environ: Optional[Mapping[str, str]] = None) -> HolidayTable:
    # runs at import: a bad tick setting must not break it
    cfg = load_config(environ, strict=False)
    if cfg.holidays_path is not None:
        logger.debug("Using holiday table from %s", cfg.holidays_path)
    return load_holiday_table(cfg.holidays_path)
