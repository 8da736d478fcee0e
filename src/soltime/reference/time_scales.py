from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Callable

from . import leapseconds
from .deltat import delta_t_for_date
from ..core.types import TimeScale


# ============================================================
# Julian Day Numbers and calendar dates
# ============================================================

_JDN_ORDINAL_OFFSET = 1721425   # JDN(0001-01-01) - 1


def date_to_jdn(d: date) -> int:
    """Gregorian date -> Julian Day Number (the JD at noon of that day)."""
    return d.toordinal() + _JDN_ORDINAL_OFFSET


def jdn_to_date(jdn: int) -> date:
    return date.fromordinal(jdn - _JDN_ORDINAL_OFFSET)


def jd_at_midnight(d: date) -> float:
    """JD at 00:00 of the civil date (JD starts at noon)."""
    return date_to_jdn(d) - 0.5


def day_of_year(d: date) -> int:
    return d.timetuple().tm_yday


# ============================================================
# datetime(UTC) <-> JD(UTC)
# ============================================================

_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _require_aware(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return dt.astimezone(timezone.utc)


def datetime_to_jd(dt: datetime) -> float:
    """datetime -> JD (UTC)."""
    delta = _require_aware(dt) - _UNIX_EPOCH
    return _JD_UNIX_EPOCH + delta.days + (delta.seconds + delta.microseconds / 1e6) / 86400.0


def jd_to_datetime(jd: float) -> datetime:
    """JD (UTC) -> timezone-aware datetime in UTC."""
    return _UNIX_EPOCH + timedelta(days=jd - _JD_UNIX_EPOCH)


def from_scale_seconds(secs: float, scale: TimeScale) -> datetime:
    """Elapsed seconds on the given counting scale -> datetime in UTC."""
    return scale.epoch + timedelta(seconds=secs)


# ============================================================
# Civil time <-> ephemeris time (TT)
# ============================================================

def tt_minus_utc(dt: datetime) -> float:
    """
    TT − UTC in seconds at the given instant.

    Inside the leap-second era (and with leap seconds enabled) this is
    ΔAT + 32.184 s, otherwise the ΔT model (UT is taken as UTC).
    """
    dt = _require_aware(dt)
    if leapseconds.is_enabled():
        dat = leapseconds.delta_at_for(dt)
        if dat is not None:
            return dat + leapseconds.TT_MINUS_TAI
    return delta_t_for_date(dt.date())


def to_jde(dt: datetime) -> float:
    """Civil instant -> Julian Ephemeris Day."""
    return datetime_to_jd(dt) + tt_minus_utc(dt) / 86400.0


def from_jde(jde: float) -> datetime:
    """
    Julian Ephemeris Day -> civil instant (UTC).

    Inverts to_jde by fixed-point iteration; the offset is piecewise
    constant or slowly varying so three passes settle it.
    """
    jd_utc = jde
    for _ in range(3):
        jd_utc = jde - tt_minus_utc(jd_to_datetime(jd_utc)) / 86400.0
    return jd_to_datetime(jd_utc)


# ============================================================
# Local events
# ============================================================

def longitude_offset_seconds(longitude: float) -> int:
    """Integral seconds of the local-mean-time offset at a longitude (4 min per degree)."""
    return int(longitude * 240)


def local_event(
    d: date,
    hour: int,
    longitude: float,
    equation_of_time: Callable[[float], float],
) -> datetime:
    """
    UTC instant of the given hour of local apparent solar time.

    ``equation_of_time`` maps JDE to seconds (apparent minus mean time).
    """
    midnight = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    mean = midnight + timedelta(seconds=hour * 3600 - longitude * 240)
    eot = equation_of_time(to_jde(mean))
    return mean - timedelta(seconds=eot)


def floor_seconds(dt: datetime) -> datetime:
    return dt.replace(microsecond=0)
