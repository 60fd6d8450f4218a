from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ConfigError

logger = logging.getLogger(__name__)

ENV_HOLIDAYS = "KOYOMI_HOLIDAYS"
ENV_TICK_MS = "KOYOMI_TICK_MS"
ENV_TZ = "KOYOMI_TZ"


@dataclass(frozen=True)
class KoyomiConfig:
    """
    Runtime settings.

    holidays_path: CSV replacing the packaged holiday table (year,month,day,name).
    tick_interval_ms: refresh cadence of the watch loop.
    tz: IANA zone whose wall clock is sampled; None means process local time.
    """
    holidays_path: Optional[Path] = None
    tick_interval_ms: int = 1000
    tz: Optional[str] = None

    def zone(self) -> Optional[ZoneInfo]:
        if self.tz is None:
            return None
        try:
            return ZoneInfo(self.tz)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown time zone '{self.tz}'") from e


def _parse_tick(raw: str) -> int:
    try:
        tick = int(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_TICK_MS} must be an integer, got '{raw}'") from e
    if tick <= 0:
        raise ConfigError(f"{ENV_TICK_MS} must be positive, got {tick}")
    return tick


def load_config(environ: Optional[Mapping[str, str]] = None, *, strict: bool = True) -> KoyomiConfig:
    """
    Read settings from the environment.

    With strict=False a bad KOYOMI_TICK_MS is logged and replaced by the
    default instead of raising; import-time callers use this.
    """
    env = os.environ if environ is None else environ

    raw_path = env.get(ENV_HOLIDAYS, "").strip()
    holidays_path = Path(raw_path).expanduser() if raw_path else None

    raw_tick = env.get(ENV_TICK_MS, "").strip()
    tick = 1000
    if raw_tick:
        try:
            tick = _parse_tick(raw_tick)
        except ConfigError as e:
            if strict:
                raise
            logger.warning("%s; using %s ms", e, tick)

    tz = env.get(ENV_TZ, "").strip() or None

    cfg = KoyomiConfig(holidays_path=holidays_path, tick_interval_ms=tick, tz=tz)
    logger.debug("Loaded config: %s", cfg)
    return cfg
