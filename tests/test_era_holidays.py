# tests/test_era_holidays.py

import pytest
from datetime import date

from koyomi.core.errors import HolidayTableError
from koyomi.engines.era import ERAS, EraSpec, era_label, era_year
from koyomi.engines.holidays import HolidayTable, load_holiday_table


@pytest.mark.parametrize(
    "year, label",
    [
        (2025, "令和7年"),
        (2019, "令和1年"),
        (2018, "平成30年"),
        (2000, "平成12年"),
        (1989, "平成1年"),
        (1988, ""),
        (1900, ""),
    ],
)
def test_era_label(year, label):
    assert era_label(year) == label

def test_era_year():
    assert era_year(2025) == ("令和", 7)
    assert era_year(1988) is None

def test_era_table_is_two_bands():
    assert [e.first_year for e in ERAS] == [2019, 1989]

def test_custom_era_table():
    eras = (EraSpec("令和", 2019), EraSpec("平成", 1989), EraSpec("昭和", 1926))
    assert era_label(1988, eras) == "昭和63年"


@pytest.fixture
def packaged():
    return load_holiday_table()

def test_packaged_table(packaged):
    assert len(packaged) == 19
    assert packaged.lookup("2025-1-1") == "元日"
    assert packaged.lookup("2025-1-2") is None
    assert packaged.lookup("2025-11-24") == "振替休日"

def test_keys_are_unpadded(packaged):
    assert "2025-1-13" in packaged
    assert packaged.lookup("2025-01-13") is None
    assert packaged.get(date(2025, 1, 13)) == "成人の日"

def test_other_years_miss(packaged):
    assert packaged.get(date(2024, 1, 1)) is None
    assert packaged.get(date(2026, 1, 1)) is None

def test_from_dates():
    t = HolidayTable.from_dates([(date(2026, 1, 1), "元日")])
    assert t.lookup("2026-1-1") == "元日"
    assert list(t) == ["2026-1-1"]
    assert len(t) == 1
    assert "2026-1-1" in t

def test_load_csv(tmp_path):
    p = tmp_path / "h.csv"
    p.write_text("year,month,day,name\n2026,1,1,元日\n2026,1,12,成人の日\n", encoding="utf-8")
    t = load_holiday_table(p)
    assert len(t) == 2
    assert t.lookup("2026-1-12") == "成人の日"

def test_load_csv_missing_file(tmp_path):
    with pytest.raises(HolidayTableError):
        load_holiday_table(tmp_path / "nope.csv")

def test_load_csv_bad_header(tmp_path):
    p = tmp_path / "h.csv"
    p.write_text("date,name\n2026-1-1,元日\n", encoding="utf-8")
    with pytest.raises(HolidayTableError, match="expected columns"):
        load_holiday_table(p)

def test_load_csv_invalid_date(tmp_path):
    p = tmp_path / "h.csv"
    p.write_text("year,month,day,name\n2026,2,30,bad\n", encoding="utf-8")
    with pytest.raises(HolidayTableError, match=":2: invalid date"):
        load_holiday_table(p)

def test_load_csv_missing_value(tmp_path):
    p = tmp_path / "h.csv"
    p.write_text("year,month,day,name\n2026,1,,元日\n", encoding="utf-8")
    with pytest.raises(HolidayTableError, match="missing day"):
        load_holiday_table(p)
