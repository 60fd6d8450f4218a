from __future__ import annotations
from dataclasses import asdict
from typing import Any, Dict

from ..engines.almanac import lunar_phase_label, moon_age, rokuyo, year_progress
from ..engines.era import era_label
from .registry import register_attribute, day_instant

WEEKDAY_NAMES = ("日", "月", "火", "水", "木", "金", "土")

def weekday(info) -> Dict[str, Any]:
    # 0=Sun..6=Sat
    return {"weekday": info.weekday}

def weekday_name(info) -> Dict[str, Any]:
    return {"weekday_name": WEEKDAY_NAMES[info.weekday]}

def holiday(info) -> Dict[str, Any]:
    return {"holiday": info.holiday}

def era(info) -> Dict[str, Any]:
    return {"era": era_label(info.civil_date.year)}

def rokuyo_attr(info) -> Dict[str, Any]:
    return {"rokuyo": rokuyo(day_instant(info))}

def moon(info) -> Dict[str, Any]:
    t = day_instant(info)
    return {"moon_age": moon_age(t), "lunar_phase": lunar_phase_label(t)}

def progress(info) -> Dict[str, Any]:
    # evaluated at midnight of the day
    return {"year_progress": asdict(year_progress(day_instant(info)))}

register_attribute("weekday", weekday)
register_attribute("weekday_name", weekday_name)
register_attribute("holiday", holiday)
register_attribute("era", era)
register_attribute("rokuyo", rokuyo_attr)
register_attribute("moon", moon)
register_attribute("year_progress", progress)
