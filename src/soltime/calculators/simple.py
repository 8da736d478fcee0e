"""
soltime.calculators.simple
--------------------------
Sunrise/sunset after the "Almanac for Computers, 1990" (Nautical Almanac
Office, USNO), as popularised by Ed Williams.

Closed form, no iteration. Results are rounded to full minutes and are good
to about two minutes for current years. The method is unsuitable for polar
regions: outside -65 <= latitude <= +65 the results are expected to be
unusable, but such input is not rejected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..astro.angles import wrap_deg
from ..core.types import DECLINATION, RIGHT_ASCENSION, STD_ZENITH, Precision, SolarEvent, TimeScale
from ..reference import leapseconds
from ..reference import time_scales as ts


def _true_longitude(t: float) -> float:
    """Sun's true longitude (degrees) at day-of-year time t."""
    m = 0.9856 * t - 3.289
    m_rad = math.radians(m)
    return wrap_deg(m + 1.916 * math.sin(m_rad) + 0.020 * math.sin(2 * m_rad) + 282.634)


def _right_ascension(L: float) -> float:
    """Right ascension (degrees) moved into the same quadrant as L."""
    ra = wrap_deg(math.degrees(math.atan(0.91764 * math.tan(math.radians(L)))))
    return ra + (math.floor(L / 90) * 90 - math.floor(ra / 90) * 90)


def _time0(jde: float) -> float:
    """Day of year plus fraction of day (UTC) of the ephemeris instant."""
    dt = ts.from_jde(jde)
    secs = dt.hour * 3600 + dt.minute * 60 + dt.second
    return ts.day_of_year(dt.date()) + secs / 86400.0


@dataclass(frozen=True)
class SimpleCalculator:
    name: str = "SIMPLE"

    def sunrise(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self._event(d, latitude, longitude, zenith, rise=True)

    def sunset(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self._event(d, latitude, longitude, zenith, rise=False)

    def equation_of_time(self, jde: float) -> float:
        # almanac page B8, formula 1 (about 0.8 minutes)
        t = _time0(jde)
        return (
            -7.66 * math.sin(math.radians(0.9856 * t - 3.8))
            - 9.78 * math.sin(math.radians(1.9712 * t + 17.96))
        ) * 60

    def declination(self, jde: float) -> float:
        L = _true_longitude(_time0(jde))
        return math.degrees(math.asin(0.39782 * math.sin(math.radians(L))))

    def right_ascension(self, jde: float) -> float:
        return _right_ascension(_true_longitude(_time0(jde)))

    def get_feature(self, jde: float, name: str) -> float:
        if name == DECLINATION:
            return self.declination(jde)
        if name == RIGHT_ASCENSION:
            return self.right_ascension(jde)
        return math.nan

    def geodetic_angle(self, latitude: float, altitude: int) -> float:
        return 0.0

    def zenith_angle(self, latitude: float, altitude: int) -> float:
        return STD_ZENITH

    def _event(self, d: date, latitude: float, longitude: float, zenith: float, *, rise: bool) -> Optional[SolarEvent]:
        lng_hour = longitude / 15
        t0 = ts.day_of_year(d) + ((6 if rise else 18) - lng_hour) / 24
        L = _true_longitude(t0)
        ra_hours = _right_ascension(L) / 15

        sin_dec = 0.39782 * math.sin(math.radians(L))
        cos_dec = math.cos(math.asin(sin_dec))
        lat = math.radians(latitude)
        cos_h = (math.cos(math.radians(zenith)) - sin_dec * math.sin(lat)) / (cos_dec * math.cos(lat))
        if cos_h > 1.0 or cos_h < -1.0:
            return None  # sun never rises or never sets on this date

        h = math.degrees(math.acos(cos_h))
        if rise:
            h = 360 - h
        lmt = h / 15 + ra_hours - 0.06571 * t0 - 6.622
        if lmt < 0.0:
            lmt += 24
        elif lmt >= 24.0:
            lmt -= 24
        ut = lmt - lng_hour

        # fractional seconds are dropped, then the count is rounded to full minutes
        secs = (d - TimeScale.UT.value).days * 86400 + math.floor(ut * 3600)
        scale = TimeScale.UT
        if not leapseconds.is_enabled():
            secs += 86400 * 730
            scale = TimeScale.POSIX
        instant = ts.from_scale_seconds(math.floor(secs / 60.0 + 0.5) * 60, scale)
        return SolarEvent(instant=instant, precision=Precision.MINUTE, scale=scale)
