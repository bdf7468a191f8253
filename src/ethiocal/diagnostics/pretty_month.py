from __future__ import annotations

import argparse

import ethiocal
from ethiocal.core.time import weekday


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def layout(first_jdn: int, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(weekday(first_jdn)):  # Monday=0
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def local_month_calendar(calendar: str, Y: int, M: int) -> None:
    n = ethiocal.days_in_month(calendar, Y, M)
    j0 = ethiocal.to_jdn(calendar, (Y, M, 1))
    days = []
    for k in range(n):
        g = ethiocal.from_jdn("gregorian", j0 + k)
        days.append((f"{k + 1:2d}", f"{g.month:02d}-{g.day:02d}"))

    g0 = ethiocal.from_jdn("gregorian", j0)
    g1 = ethiocal.from_jdn("gregorian", j0 + n - 1)
    title = f"{calendar} month  Y={Y}  M={M}   ({g0.year}-{g0.month:02d}-{g0.day:02d} .. {g1.year}-{g1.month:02d}-{g1.day:02d})"
    print_grid(title, layout(j0, days))


def gregorian_month_calendar(calendar: str, gy: int, gm: int) -> None:
    n = ethiocal.days_in_month("gregorian", gy, gm)
    j0 = ethiocal.to_jdn("gregorian", (gy, gm, 1))
    days = []
    for k in range(n):
        t = ethiocal.from_jdn(calendar, j0 + k)
        days.append((f"{k + 1:2d}", f"{t.month:02d}-{t.day:02d}"))

    title = f"{calendar} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, layout(j0, days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print an Ethiopic/Coptic month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--calendar", default="ethiopic", choices=("ethiopic", "coptic"))

    p.add_argument("--local", nargs=2, type=int, metavar=("Y", "M"),
                   help="Ethiopic/Coptic month to print: Y M (e.g. 2018 13)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 9)")

    args = p.parse_args(argv)

    if not args.local and not args.greg:
        # sensible default demo
        local_month_calendar(args.calendar, Y=2018, M=13)
        gregorian_month_calendar(args.calendar, gy=2026, gm=9)
        return 0

    if args.local:
        Y, M = args.local
        local_month_calendar(args.calendar, Y=Y, M=M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.calendar, gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
