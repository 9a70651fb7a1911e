from __future__ import annotations

import argparse
import re
import sys
from datetime import date

import structlog

from caldate.core.errors import CaldateError
from caldate.core.types import RecurringDate, Weekday
from caldate.logconfig import configure_logging

log = structlog.get_logger("caldate.cli")

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_DAY_RE = re.compile(r"^\d{1,2}-\d{1,2}$")

_WEEKDAYS = {w.name[:3].lower(): w for w in Weekday}
_WEEKDAYS.update({w.name.lower(): w for w in Weekday})


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_operand(s: str):
    """YYYY-MM-DD is a full date, MM-DD a recurring one."""
    if _DATE_RE.match(s):
        return _parse_ymd(s)
    if _MONTH_DAY_RE.match(s):
        m, d = map(int, s.split("-"))
        return RecurringDate(m, d)
    raise ValueError(f"Expected YYYY-MM-DD or MM-DD, got {s!r}")


def _parse_weekday(s: str) -> Weekday:
    key = s.strip().lower()
    if key in _WEEKDAYS:
        return _WEEKDAYS[key]
    if key.isdigit() and int(key) in range(7):
        return Weekday(int(key))
    raise ValueError(f"Unknown weekday {s!r}")


def _print_bool(flag: bool) -> None:
    print("true" if flag else "false")


def cmd_cmp(argv: list[str]) -> int:
    from caldate.compare import compare_date, compare_date_strict

    p = argparse.ArgumentParser(prog="caldate cmp", description="Compare two dates, ignoring time of day")
    p.add_argument("a", help="YYYY-MM-DD or MM-DD")
    p.add_argument("b", help="YYYY-MM-DD or MM-DD")
    p.add_argument("--strict", action="store_true", help="never report equality (ties give 1)")
    args = p.parse_args(argv)

    fn = compare_date_strict if args.strict else compare_date
    print(int(fn(_parse_operand(args.a), _parse_operand(args.b))))
    return 0


def cmd_nth_weekday(argv: list[str]) -> int:
    from caldate.civil import nth_weekday_of_month

    p = argparse.ArgumentParser(prog="caldate nth-weekday", description="Day of month of the n-th weekday")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("weekday", help="mon..sun, monday..sunday or 0..6")
    p.add_argument("n", type=int, help="1..5 from the start, -1..-5 from the end")
    args = p.parse_args(argv)

    day = nth_weekday_of_month(args.year, args.month, _parse_weekday(args.weekday), args.n)
    if day is None:
        print("none")
        return 1
    print(day)
    return 0


def cmd_last_feb(argv: list[str]) -> int:
    from caldate.civil import is_last_day_of_february

    p = argparse.ArgumentParser(prog="caldate last-feb", description="Is DATE the last day of February?")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    _print_bool(is_last_day_of_february(_parse_ymd(args.date)))
    return 0


def cmd_weekend(argv: list[str]) -> int:
    from caldate.civil import is_weekend_day

    p = argparse.ArgumentParser(prog="caldate weekend", description="Is DATE a Saturday or a Sunday?")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    _print_bool(is_weekend_day(_parse_ymd(args.date)))
    return 0


_COMMANDS = {
    "cmp": cmd_cmp,
    "nth-weekday": cmd_nth_weekday,
    "last-feb": cmd_last_feb,
    "weekend": cmd_weekend,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="caldate", description="Date-only comparisons and calendar helpers.")
    p.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("cmp", help="Compare two dates, ignoring time of day", add_help=False)
    sub.add_parser("nth-weekday", help="Day of month of the n-th weekday", add_help=False)
    sub.add_parser("last-feb", help="Is DATE the last day of February?", add_help=False)
    sub.add_parser("weekend", help="Is DATE a Saturday or a Sunday?", add_help=False)

    args, rest = p.parse_known_args(argv)
    configure_logging(verbose=args.verbose)
    log.debug("command", cmd=args.cmd, argv=rest)

    try:
        return _COMMANDS[args.cmd](rest)
    except (CaldateError, ValueError) as e:
        log.debug("command failed", cmd=args.cmd, error=type(e).__name__)
        print(f"caldate: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
