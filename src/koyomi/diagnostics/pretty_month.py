from __future__ import annotations

import argparse
from datetime import date

import koyomi
from koyomi.attributes.standard import WEEKDAY_NAMES


def dow_header(w: int = 6) -> str:
    # each name is two columns wide on a terminal
    return " ".join(n + " " * (w - 2) for n in WEEKDAY_NAMES)


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * (7 * 7 - 1))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def almanac_month_calendar(gy: int, gm: int) -> None:
    """Sunday-first month with the day number on top and its rokuyo below."""
    grid = koyomi.generate_grid(date(gy, gm, 1))

    weeks: list[list[tuple[str, str]]] = []
    for week in grid.weeks():
        wk: list[tuple[str, str]] = []
        for cd in week:
            if not cd.in_target_month:
                wk.append(cell("", ""))
                continue
            holiday = koyomi.holiday_for(cd.instant)
            top = f"{cd.day:2d}" + ("*" if holiday else "")
            wk.append(cell(top, koyomi.rokuyo(cd.instant)))
        weeks.append(wk)

    era = koyomi.era_label(gy)
    title = f"{gy}-{gm:02d}" + (f"  ({era})" if era else "")
    print_grid(title, weeks)

    for cd in grid:
        if cd.in_target_month:
            name = koyomi.holiday_for(cd.instant)
            if name:
                print(f"  {cd.instant.month}/{cd.day} {name}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month calendar with rokuyo labels and holidays."
    )
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 5)")
    args = p.parse_args(argv)

    if not args.greg:
        now = koyomi.sample_now()
        almanac_month_calendar(now.year, now.month)
        return 0

    gy, gm = args.greg
    if not 1 <= gm <= 12:
        p.error(f"month must be 1..12, got {gm}")
    almanac_month_calendar(gy, gm)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
