"""
soltime.reference.deltat
------------------------
ΔT (= TT − UT) in seconds, used to move between civil time and ephemeris time.

Two sources are combined:
- the Espenak–Meeus (NASA Five Millennium Canon) piecewise polynomials,
  valid across roughly −1999..+3000;
- an optional tabulated series (CSV with ``decimal_year`` and
  ``delta_t_seconds`` columns) named by ``SOLTIME_DELTAT_TABLE``, typically
  derived from IERS UT1−UTC data. Inside its range the table wins.

The method is chosen by ``SOLTIME_DELTAT_METHOD`` (see soltime.config).
"""

from __future__ import annotations

import csv
import datetime as _dt
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Tuple

from ..config import load_settings

logger = logging.getLogger(__name__)


def decimal_year(d: _dt.date) -> float:
    """Decimal year at the middle of the given day."""
    start = _dt.date(d.year, 1, 1)
    span = (_dt.date(d.year + 1, 1, 1) - start).days
    return d.year + ((d - start).days + 0.5) / span


# ---------------------------------------------------------------------------
# Espenak–Meeus polynomials
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class _Branch:
    """ΔT = Σ coeffs[k] u^k with u = (y - origin) / scale, for y < upper."""
    upper: float
    origin: float
    scale: float
    coeffs: Tuple[float, ...]

    def eval(self, y: float) -> float:
        u = (y - self.origin) / self.scale
        acc = 0.0
        for c in reversed(self.coeffs):
            acc = acc * u + c
        return acc


_PARABOLA = _Branch(float("inf"), 1820.0, 100.0, (-20.0, 0.0, 32.0))

_BRANCHES: Tuple[_Branch, ...] = (
    _Branch(-500.0, 1820.0, 100.0, (-20.0, 0.0, 32.0)),
    _Branch(500.0, 0.0, 100.0, (
        10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521,
    )),
    _Branch(1600.0, 1000.0, 100.0, (
        1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073,
    )),
    _Branch(1700.0, 1600.0, 1.0, (120.0, -0.9808, -0.01532, 1.0 / 7129.0)),
    _Branch(1800.0, 1700.0, 1.0, (8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0)),
    _Branch(1860.0, 1800.0, 1.0, (
        13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875,
    )),
    _Branch(1900.0, 1860.0, 1.0, (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1.0 / 233174.0)),
    _Branch(1920.0, 1900.0, 1.0, (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)),
    _Branch(1941.0, 1920.0, 1.0, (21.20, 0.84493, -0.076100, 0.0020936)),
    _Branch(1961.0, 1950.0, 1.0, (29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0)),
    _Branch(1986.0, 1975.0, 1.0, (45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0)),
    _Branch(2005.0, 2000.0, 1.0, (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599)),
    _Branch(2050.0, 2000.0, 1.0, (62.92, 0.32217, 0.005589)),
)


def delta_t_em2006(y: float) -> float:
    """Espenak–Meeus ΔT(y) in seconds for decimal year y."""
    for branch in _BRANCHES:
        if y < branch.upper:
            return branch.eval(y)
    if y < 2150.0:
        # joins the 2005-2050 branch to the long-term parabola
        return _PARABOLA.eval(y) - 0.5628 * (2150.0 - y)
    return _PARABOLA.eval(y)


# ---------------------------------------------------------------------------
# Tabulated ΔT
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeltaTTable:
    """Piecewise-linear ΔT over decimal years (x strictly increasing)."""
    x: Tuple[float, ...]
    y: Tuple[float, ...]

    @property
    def range(self) -> Tuple[float, float]:
        return (self.x[0], self.x[-1])

    def eval(self, xq: float) -> float:
        if not (self.x[0] <= xq <= self.x[-1]):
            raise ValueError(f"x out of range [{self.x[0]}, {self.x[-1]}]: {xq}")
        lo, hi = 0, len(self.x) - 1
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self.x[mid] <= xq:
                lo = mid
            else:
                hi = mid
        x0, x1 = self.x[lo], self.x[hi]
        if x1 == x0:
            return self.y[lo]
        return self.y[lo] + (xq - x0) / (x1 - x0) * (self.y[hi] - self.y[lo])


def parse_table(rows: Iterable[dict]) -> DeltaTTable:
    xs: list[float] = []
    ys: list[float] = []
    for r in rows:
        xs.append(float(r["decimal_year"]))
        ys.append(float(r["delta_t_seconds"]))
    if not xs:
        raise ValueError("ΔT table is empty")
    for i in range(1, len(xs)):
        if not (xs[i] > xs[i - 1]):
            raise ValueError("ΔT table x is not strictly increasing")
    return DeltaTTable(tuple(xs), tuple(ys))


@lru_cache(maxsize=4)
def load_table(path: Path) -> Optional[DeltaTTable]:
    """Read a ΔT CSV. Returns None (and logs) if the file is missing or malformed."""
    if not path.is_file():
        logger.warning("ΔT table %s not found; using polynomial model", path)
        return None
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            table = parse_table(csv.DictReader(f))
    except (OSError, KeyError, ValueError) as e:
        logger.warning("Cannot read ΔT table %s (%s); using polynomial model", path, e)
        return None
    logger.debug("Loaded ΔT table %s covering %.2f..%.2f", path, *table.range)
    return table


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def delta_t_seconds(y: float, *, method: Optional[str] = None, blend_years: float = 30.0) -> float:
    """
    ΔT(y) in seconds, y a decimal year.

    method:
      - "best": table when configured and in range, else polynomial, blended
                linearly over ``blend_years`` after the table's last entry.
      - "table": require a configured table covering y.
      - "em2006": polynomial only.
    Defaults to SOLTIME_DELTAT_METHOD.
    """
    settings = load_settings()
    method = (method or settings.deltat_method).lower().strip()
    if method not in {"best", "table", "em2006"}:
        raise ValueError("method must be one of: best, table, em2006")

    if method == "em2006":
        return delta_t_em2006(y)

    tbl = load_table(settings.deltat_table) if settings.deltat_table is not None else None
    if tbl is None:
        if method == "table":
            raise RuntimeError("ΔT table not configured; set SOLTIME_DELTAT_TABLE")
        return delta_t_em2006(y)

    a, b = tbl.range
    if a <= y <= b:
        return tbl.eval(y)
    if method == "table":
        raise ValueError(f"y={y} out of ΔT table range [{a},{b}]")

    if y > b and blend_years > 0.0:
        offset = tbl.eval(b) - delta_t_em2006(b)
        w = min(1.0, (y - b) / blend_years)
        return delta_t_em2006(y) + (1.0 - w) * offset

    return delta_t_em2006(y)


def delta_t_for_date(d: _dt.date, *, method: Optional[str] = None) -> float:
    """ΔT for a civil date."""
    return delta_t_seconds(decimal_year(d), method=method)
