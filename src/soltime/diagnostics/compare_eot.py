#!/usr/bin/env python3
"""
Equation of time over one year for every registered calculator.

Prints extremes and the largest deviation from the TIME4J curve; writes a
plot unless --no-plot is given.
"""
from __future__ import annotations

import argparse
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional

import soltime
from soltime.reference import time_scales as ts


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "soltime"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "soltime[diagnostics]"') from e


def year_days(year: int) -> List[date]:
    d = date(year, 1, 1)
    out = []
    while d.year == year:
        out.append(d)
        d += timedelta(days=1)
    return out


def eot_series(np, name: str, days: List[date]):
    """Equation of time (minutes) at 12:00 UTC of each day."""
    calc = soltime.get_calculator(name)
    vals = [
        calc.equation_of_time(ts.to_jde(datetime(d.year, d.month, d.day, 12, tzinfo=timezone.utc)))
        for d in days
    ]
    return np.asarray(vals, dtype=float) / 60.0


def build_all(np, year: int, names: Optional[List[str]] = None) -> Dict[str, object]:
    days = year_days(year)
    names = names or soltime.list_calculators()
    return {name: eot_series(np, name, days) for name in names}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare the equation of time across calculators.")
    p.add_argument("--year", type=int, default=2024)
    p.add_argument("--reference", default="TIME4J", help="Calculator the others are compared against")
    p.add_argument("--outbase", default="eot_compare", help="Output base name (writes .png)")
    p.add_argument("--no-plot", action="store_true", help="Only print the summary")
    args = p.parse_args(argv)

    np = _need_numpy()
    series = build_all(np, args.year)
    ref = series[args.reference]

    print(f"Equation of time {args.year} (minutes, 12:00 UTC)")
    print(f"  {'calc':<8} {'min':>8} {'max':>8} {'max|d-' + args.reference + '|':>16}")
    for name, y in series.items():
        dev = float(np.max(np.abs(y - ref)))
        print(f"  {name:<8} {float(np.min(y)):8.3f} {float(np.max(y)):8.3f} {dev:16.3f}")

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, (ax, ax_d) = plt.subplots(2, 1, figsize=(9.2, 6.4), sharex=True, constrained_layout=True)
    x = np.arange(1, len(ref) + 1)
    for name, y in series.items():
        ax.plot(x, y, linewidth=1.2, label=name)
        if name != args.reference:
            ax_d.plot(x, (y - ref) * 60.0, linewidth=1.0, label=name)

    ax.set_ylabel("EoT (minutes)")
    ax.set_title(f"Equation of time {args.year}")
    ax.grid(True, color="0.88", linewidth=0.7)
    ax.legend(frameon=False)
    ax_d.set_xlabel("Day of year")
    ax_d.set_ylabel(f"minus {args.reference} (s)")
    ax_d.grid(True, color="0.88", linewidth=0.7)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
