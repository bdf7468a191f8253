from __future__ import annotations

import argparse

import ethiocal
from ethiocal.core.types import CalendarDate

# Ethiopic (Amete Mihret) and Coptic years that begin in a given Gregorian year.
ETHIOPIC_YEAR_SHIFT = 7
COPTIC_YEAR_SHIFT = 283


def mmdd(d: CalendarDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def iso(d: CalendarDate) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Ethiopic (Enkutatash) and Coptic (Nayrouz) New Year dates per Gregorian year."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    fmt = mmdd if args.dates == "mmdd" else iso

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Ethiopic", "New Year", "Coptic", "New Year"]
    colw = [5, 8, 10, 6, 10]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        ey = Y - ETHIOPIC_YEAR_SHIFT
        cy = Y - COPTIC_YEAR_SHIFT
        eny = ethiocal.new_year_day(ey, calendar="ethiopic")
        cny = ethiocal.new_year_day(cy, calendar="coptic")
        leap = "*" if ethiocal.is_leap_year("ethiopic", ey - 1) else ""
        row = [str(Y), f"{ey}", fmt(eny) + leap, f"{cy}", fmt(cny)]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    print("\n* previous Ethiopic year had a 6-day Pagume")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
