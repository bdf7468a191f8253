from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

from ethiocal.core.errors import EthiocalError, MalformedDateError
from ethiocal.core.types import Era


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_ERAS = {
    "amete-alem": Era.AMETE_ALEM,
    "amete-mihret": Era.AMETE_MIHRET,
    "coptic": Era.COPTIC,
    "gregorian": Era.GREGORIAN,
}

_CALENDARS = ("ethiopic", "coptic", "gregorian")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise MalformedDateError(s, f"Invalid date supplied: {s!r} ({e})") from e


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


def _add_era(p: argparse.ArgumentParser) -> None:
    p.add_argument("--era", choices=sorted(_ERAS), default=None,
                   help="Era of the Ethiopic side (default: auto)")


def _era(args: argparse.Namespace):
    return None if args.era is None else _ERAS[args.era]


def _fmt(d) -> str:
    from ethiocal.text import format_date_string

    era = f"  [{d.era.name}]" if d.era is not None else ""
    return format_date_string(d) + era


def cmd_convert(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal convert", description="Convert a day/month/year date between calendars")
    p.add_argument("source", choices=_CALENDARS)
    p.add_argument("target", choices=_CALENDARS)
    p.add_argument("date", help="day/month/year")
    _add_era(p)
    args = p.parse_args(argv)

    d = ethiocal.parse_date_string(args.date)
    print(_fmt(ethiocal.convert(args.source, args.target, d, _era(args))))
    return 0


def cmd_jdn(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal jdn", description="Julian Day Number of a day/month/year date")
    p.add_argument("calendar", choices=_CALENDARS)
    p.add_argument("date", help="day/month/year")
    _add_era(p)
    args = p.parse_args(argv)

    print(ethiocal.to_jdn(args.calendar, ethiocal.parse_date_string(args.date), _era(args)))
    return 0


def cmd_from_jdn(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal from-jdn", description="Date of a Julian Day Number")
    p.add_argument("calendar", choices=_CALENDARS)
    p.add_argument("jdn", type=int)
    _add_era(p)
    args = p.parse_args(argv)

    print(_fmt(ethiocal.from_jdn(args.calendar, args.jdn, _era(args))))
    return 0


def cmd_day(argv: list[str]) -> int:
    import ethiocal

    p = argparse.ArgumentParser(prog="ethiocal day", description="Gregorian -> Ethiopic/Coptic day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = ethiocal.day_info(_parse_ymd(args.date), attributes=tuple(args.attr))
    print(f"gregorian  {_fmt(info.gregorian)}")
    print(f"jdn        {info.jdn}")
    print(f"ethiopic   {_fmt(info.ethiopic)}")
    print(f"coptic     {_fmt(info.coptic)}")
    for k, v in (info.attributes or {}).items():
        print(f"{k:<10} {v}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `ethiocal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="ethiocal", description="Ethiopic / Coptic / Gregorian calendar converter.")
    p.add_argument("--log-level", default="WARNING",
                   choices=("DEBUG", "INFO", "WARNING", "ERROR"), help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Convert a date between calendars", add_help=False)
    sub.add_parser("jdn", help="Date -> Julian Day Number", add_help=False)
    sub.add_parser("from-jdn", help="Julian Day Number -> date", add_help=False)
    sub.add_parser("day", help="Gregorian -> Ethiopic/Coptic day", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print paired month calendars (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print New Year table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "reference", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "convert": cmd_convert,
        "jdn": cmd_jdn,
        "from-jdn": cmd_from_jdn,
        "day": cmd_day,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "pretty-month":
            return _run_module_main("ethiocal.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("ethiocal.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "ethiocal.diagnostics.round_trip",
                "reference": "ethiocal.diagnostics.reference",
                "new-year-scatter": "ethiocal.diagnostics.new_year_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except EthiocalError as e:
        print(f"ethiocal: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
