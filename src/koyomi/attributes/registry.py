"""Named per-day attributes for koyomi.day_info(d, attributes=[...])."""
from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.types import DayInfo, Instant

# An attribute reads a DayInfo and returns the keys it contributes.
AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_ATTRIBUTES: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc, *, overwrite: bool = False) -> None:
    if (not overwrite) and (name in _ATTRIBUTES):
        raise KeyError(f"Attribute '{name}' already registered. Use overwrite=True to replace.")
    _ATTRIBUTES[name] = fn

def attribute_names() -> List[str]:
    return sorted(_ATTRIBUTES)

def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    unknown = [n for n in names if n not in _ATTRIBUTES]
    if unknown:
        raise KeyError(f"Unknown attribute(s) {unknown}. Available: {attribute_names()}")
    values: Dict[str, Any] = {}
    for name in names:
        values.update(_ATTRIBUTES[name](info))
    return values

def day_instant(info: DayInfo) -> Instant:
    """Midnight Instant of the annotated day."""
    return Instant.from_date(info.civil_date)
