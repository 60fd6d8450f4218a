from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class EraSpec:
    name: str
    first_year: int  # Gregorian year counted as year 1 of the era

    @property
    def offset(self) -> int:
        return self.first_year - 1


# Newest first. Only whole Gregorian years are modeled; eras before Heisei
# are intentionally absent.
ERAS: Tuple[EraSpec, ...] = (
    EraSpec("令和", 2019),
    EraSpec("平成", 1989),
)


def era_year(year: int, eras: Sequence[EraSpec] = ERAS) -> Optional[Tuple[str, int]]:
    """(era name, year within era), or None before the oldest break point."""
    for era in eras:
        if year >= era.first_year:
            return era.name, year - era.offset
    return None


def era_label(year: int, eras: Sequence[EraSpec] = ERAS) -> str:
    """
    Japanese era label for a Gregorian year.

    >>> era_label(2025)
    '令和7年'
    >>> era_label(2000)
    '平成12年'
    >>> era_label(1988)
    ''
    """
    hit = era_year(year, eras)
    if hit is None:
        return ""
    name, n = hit
    return f"{name}{n}年"
