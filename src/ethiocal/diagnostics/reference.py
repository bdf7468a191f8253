"""
Exhaustive check of the Gregorian JDN formulas against the standard library's
proleptic Gregorian ordinal (``date.toordinal``), which counts 0001-01-01 as 1.
"""

from __future__ import annotations

import argparse
from datetime import date
from typing import List, Tuple

from ethiocal.core.time import GREGORIAN_OFFSET, gregorian_to_jdn, jdn_to_gregorian

# JDN of ordinal 0
ORDINAL_SHIFT = GREGORIAN_OFFSET - 1


def compare_range(from_year: int, to_year: int, *, max_failures: int = 10) -> List[Tuple[int, Tuple[int, int, int], Tuple[int, int, int]]]:
    """Return (jdn, expected, got) for every mismatch, stopping at ``max_failures``."""
    failures = []
    first = date(from_year, 1, 1).toordinal()
    last = date(to_year, 12, 31).toordinal()
    for ordinal in range(first, last + 1):
        d = date.fromordinal(ordinal)
        expected = (d.year, d.month, d.day)
        jdn = ordinal + ORDINAL_SHIFT
        got = jdn_to_gregorian(jdn)
        if got != expected or gregorian_to_jdn(*expected) != jdn:
            failures.append((jdn, expected, got))
            if len(failures) >= max_failures:
                break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare Gregorian <-> JDN against datetime over a year range.")
    p.add_argument("--from-year", type=int, default=1)
    p.add_argument("--to-year", type=int, default=2800)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    if not (1 <= args.from_year <= args.to_year <= 9999):
        raise SystemExit("need 1 <= --from-year <= --to-year <= 9999")

    failures = compare_range(args.from_year, args.to_year, max_failures=args.max_failures)
    for jdn, expected, got in failures:
        print(f"jdn={jdn}  expected={expected}  got={got}")
    if failures:
        print(f"Mismatches: {len(failures)}")
        return 1
    print(f"Years {args.from_year}..{args.to_year}: no mismatches.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
