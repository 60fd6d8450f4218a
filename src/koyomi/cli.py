from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect
import time
from typing import Optional

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$")
_CLEAR = "\x1b[2J\x1b[H"


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import koyomi
    from koyomi.attributes.registry import attribute_names

    p = argparse.ArgumentParser(prog="koyomi day", description="Holiday, era and almanac for one date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], choices=attribute_names(), help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        d = _parse_ymd(args.date)
    except ValueError as e:
        p.error(f"invalid date '{args.date}': {e}")

    info = koyomi.day_info(d, attributes=tuple(args.attr))
    print(info)
    return 0

def cmd_now(argv: list[str]) -> int:
    import koyomi
    from koyomi.core.config import load_config
    from koyomi.display import render_view

    p = argparse.ArgumentParser(prog="koyomi now", description="Render one frame of the calendar clock.")
    p.add_argument("--at", default=None, help="YYYY-MM-DD instead of the current time (midnight)")
    args = p.parse_args(argv)

    if args.at is not None:
        try:
            t = koyomi.as_instant(_parse_ymd(args.at))
        except ValueError as e:
            p.error(f"invalid date '{args.at}': {e}")
    else:
        t = koyomi.sample_now(tz=load_config().zone())
    print(render_view(koyomi.calendar_view(t), koyomi.holiday_for))
    return 0

def cmd_watch(argv: list[str]) -> int:
    import koyomi
    from koyomi.core.config import load_config
    from koyomi.core.types import CalendarView
    from koyomi.display import render_frame

    cfg = load_config()
    p = argparse.ArgumentParser(prog="koyomi watch", description="Live calendar clock, refreshed every tick.")
    p.add_argument("--interval-ms", type=int, default=cfg.tick_interval_ms, help="tick interval (default: KOYOMI_TICK_MS or 1000)")
    p.add_argument("--count", type=int, default=None, help="stop after N ticks (default: run until Ctrl-C)")
    args = p.parse_args(argv)
    if args.interval_ms <= 0:
        p.error("--interval-ms must be positive")

    tz = cfg.zone()
    clear = _CLEAR if sys.stdout.isatty() else ""
    view: Optional[CalendarView] = None

    # first frame is the placeholder, before any sample exists
    print(clear + render_frame(view, koyomi.holiday_for), flush=True)
    ticks = 0
    try:
        while args.count is None or ticks < args.count:
            time.sleep(args.interval_ms / 1000.0)
            view = koyomi.calendar_view(koyomi.sample_now(tz=tz))
            print(clear + render_frame(view, koyomi.holiday_for), flush=True)
            ticks += 1
            logger.debug("tick %s at %s", ticks, view.instant)
    except KeyboardInterrupt:
        logger.debug("watch stopped after %s ticks", ticks)
    return 0

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `koyomi YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="koyomi", description="Japanese calendar clock toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Holiday, era and almanac for one date")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    # month
    sub.add_parser("month", help="Print a month calendar with rokuyo (diagnostics)")

    # clock
    sub.add_parser("now", help="Render one frame of the calendar clock")
    sub.add_parser("watch", help="Live calendar clock")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        day_argv = [args.date]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "month":
        return _run_module_main("koyomi.diagnostics.pretty_month", rest)

    if args.cmd == "now":
        return cmd_now(rest)

    if args.cmd == "watch":
        return cmd_watch(rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
