"""
Holiday table: DateKey -> display name.

The packaged table covers the Japanese public holidays of 2025 only; any
other date simply misses. A different year is supplied as a CSV file with
columns year,month,day,name.
"""

from __future__ import annotations

import csv
import importlib.resources
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from koyomi.core.errors import HolidayTableError
from koyomi.core.time import DateLike, date_key
from koyomi.core.types import DateKey

logger = logging.getLogger(__name__)

PACKAGED_TABLE = "holidays_2025.csv"
_COLUMNS = ("year", "month", "day", "name")


@dataclass(frozen=True)
class HolidayTable:
    """Read-only lookup from DateKey to holiday name."""
    _names: Mapping[DateKey, str] = field(default_factory=dict)

    @classmethod
    def from_dates(cls, entries: Iterable[Tuple[date, str]]) -> "HolidayTable":
        return cls({date_key(d): name for d, name in entries})

    def lookup(self, key: DateKey) -> Optional[str]:
        # Exact key match only; "2025-01-01" is not "2025-1-1".
        return self._names.get(key)

    def get(self, value: DateLike) -> Optional[str]:
        return self.lookup(date_key(value))

    def __contains__(self, key: object) -> bool:
        return key in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[DateKey]:
        return iter(self._names)


def _read_csv_rows(rows: Iterable[Dict[str, str]], *, source: str) -> HolidayTable:
    entries: List[Tuple[date, str]] = []
    for lineno, r in enumerate(rows, start=2):
        missing = [c for c in _COLUMNS if not (r.get(c) or "").strip()]
        if missing:
            raise HolidayTableError(f"{source}:{lineno}: missing {', '.join(missing)}")
        try:
            d = date(int(r["year"]), int(r["month"]), int(r["day"]))
        except ValueError as e:
            raise HolidayTableError(f"{source}:{lineno}: invalid date ({e})") from e
        entries.append((d, r["name"].strip()))
    return HolidayTable.from_dates(entries)


def _read_csv_file(f, *, source: str) -> HolidayTable:
    reader = csv.DictReader(f)
    header = tuple(reader.fieldnames or ())
    if not set(_COLUMNS) <= set(header):
        raise HolidayTableError(f"{source}: expected columns {','.join(_COLUMNS)}, got {','.join(header)}")
    return _read_csv_rows(reader, source=source)


def load_holiday_table(path: Optional[Union[str, Path]] = None) -> HolidayTable:
    """
    Load a holiday table.

    path=None loads the packaged 2025 table.
    """
    if path is None:
        res = importlib.resources.files("koyomi").joinpath("data").joinpath(PACKAGED_TABLE)
        with res.open("r", encoding="utf-8", newline="") as f:
            table = _read_csv_file(f, source=PACKAGED_TABLE)
        logger.debug("Loaded packaged holiday table (%s entries)", len(table))
        return table

    p = Path(path).expanduser()
    if not p.is_file():
        raise HolidayTableError(f"Holiday table not found: {p}")
    with p.open("r", encoding="utf-8", newline="") as f:
        table = _read_csv_file(f, source=str(p))
    logger.debug("Loaded holiday table %s (%s entries)", p, len(table))
    return table
