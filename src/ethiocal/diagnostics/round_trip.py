from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import ethiocal


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_calendars(s: str) -> List[str]:
    # "ethiopic,coptic" -> ["ethiopic", "coptic"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        local = ethiocal.convert("gregorian", calendar, d0)
        back = ethiocal.convert(calendar, "gregorian", local, local.era)
        if back.as_tuple() != (d0.year, d0.month, d0.day):
            failures += 1
            print("\nFAIL (date)")
            print("calendar:", calendar)
            print("d0:", d0)
            print("local:", local)
            print("back:", back)
            if failures >= max_failures:
                return failures

        jdn = ethiocal.to_jdn(calendar, local, local.era)
        if ethiocal.from_jdn(calendar, jdn, local.era) != local:
            failures += 1
            print("\nFAIL (jdn)")
            print("calendar:", calendar)
            print("local:", local)
            print("jdn:", jdn)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> calendar -> gregorian.")
    p.add_argument("--calendars", type=str, default="ethiopic,coptic",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="0001-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="9999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        f = roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
