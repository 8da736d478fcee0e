"""
soltime.reference.leapseconds
-----------------------------
TAI − UTC (ΔAT) from a built-in step table and the leap-second switch.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Tuple

from ..config import load_settings

# (MJD, ΔAT seconds) effective from MJD at 00:00 UTC onward.
_STEPS: Tuple[Tuple[int, float], ...] = (
    (41317, 10.0), (41499, 11.0), (41683, 12.0), (42048, 13.0),
    (42413, 14.0), (42778, 15.0), (43144, 16.0), (43509, 17.0),
    (43874, 18.0), (44239, 19.0), (44786, 20.0), (45151, 21.0),
    (45516, 22.0), (46247, 23.0), (47161, 24.0), (47892, 25.0),
    (48257, 26.0), (48804, 27.0), (49169, 28.0), (49534, 29.0),
    (50083, 30.0), (50630, 31.0), (51179, 32.0), (53736, 33.0),
    (54832, 34.0), (56109, 35.0), (57204, 36.0), (57754, 37.0),  # 2017-01-01
)

FIRST_MJD = _STEPS[0][0]   # 1972-01-01
TT_MINUS_TAI = 32.184

_MJD_UNIX_EPOCH = 40587


def is_enabled() -> bool:
    """True if calculations should honour leap seconds (SOLTIME_LEAP_SECONDS)."""
    return load_settings().leap_seconds


def mjd_of(d: date) -> int:
    return d.toordinal() - date(1970, 1, 1).toordinal() + _MJD_UNIX_EPOCH


def delta_at(mjd_utc: float) -> Optional[float]:
    """TAI − UTC in seconds, or None before the leap-second era."""
    if mjd_utc < FIRST_MJD:
        return None
    value = _STEPS[0][1]
    for start, dat in _STEPS:
        if mjd_utc >= start:
            value = dat
        else:
            break
    return value


def delta_at_for(dt: datetime) -> Optional[float]:
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    d = dt.astimezone(timezone.utc).date()
    return delta_at(mjd_of(d))


def last_leap_second() -> date:
    """Date on which the most recent table entry took effect."""
    return date.fromordinal(_STEPS[-1][0] - _MJD_UNIX_EPOCH + date(1970, 1, 1).toordinal())
