#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import argparse

import ethiocal
from ethiocal.core.time import gregorian_to_jdn
from ethiocal.diagnostics.new_years_table import COPTIC_YEAR_SHIFT, ETHIOPIC_YEAR_SHIFT


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ethiocal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ethiocal[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    year_shift: int
    color: str
    marker: str
    size: float = 14.0


def build_series(np, calendar: str, year_shift: int, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian years and the day-of-year (Jan 1 = 1) of the New Year falling in each."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        jdn = ethiocal.to_jdn(calendar, (int(Y) - year_shift, 1, 1))
        g = ethiocal.from_jdn("gregorian", jdn)
        y[i] = float(jdn - gregorian_to_jdn(g.year, 1, 1) + 1)
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Ethiopic and Coptic New Year day-of-year against Gregorian years.")
    p.add_argument("--start-year", type=int, default=300)
    p.add_argument("--end-year", type=int, default=2800)
    p.add_argument("--outbase", default="new_year_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "ethiopic": Style("Enkutatash", ETHIOPIC_YEAR_SHIFT, "tab:green", "o", size=10),
        "coptic": Style("Nayrouz", COPTIC_YEAR_SHIFT, "tab:red", "_", size=18),
    }

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    ax.set_title("Ethiopic / Coptic New Year in the proleptic Gregorian calendar")

    for cal, st in styles.items():
        x, y = build_series(np, cal, st.year_shift, args.start_year, args.end_year)
        ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, alpha=0.45, label=st.label)

    ax.legend(loc="upper left", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
