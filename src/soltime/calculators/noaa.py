"""
soltime.calculators.noaa
------------------------
Follows the NOAA solar calculator spreadsheet (Meeus lower-accuracy model).

Reasonably good precision: often better than a minute in non-polar regions,
nearer ten minutes beyond +/-72 degrees. Observer altitude is ignored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..astro import longitude as lon
from ..astro.angles import deg_to_seconds_of_time, julian_centuries
from ..astro.nutation import true_obliquity_short
from ..core.types import DECLINATION, RIGHT_ASCENSION, STD_ZENITH, Precision, SolarEvent, TimeScale
from ..reference import time_scales as ts


def _declination_rad(T: float) -> float:
    return math.radians(lon.declination_deg(lon.apparent_longitude_low(T), true_obliquity_short(T)))


def local_hour_angle(jde: float, latitude: float, zenith: float, *, rise: bool) -> float:
    """Hour angle of the event in seconds of time (negative for rise), NaN if none."""
    dec = _declination_rad(julian_centuries(jde))
    lat = math.radians(latitude)
    cos_h = (math.cos(math.radians(zenith)) - math.sin(dec) * math.sin(lat)) / (math.cos(dec) * math.cos(lat))
    if cos_h > 1.0 or cos_h < -1.0:
        return math.nan
    h = deg_to_seconds_of_time(math.degrees(math.acos(cos_h)))
    return -h if rise else h


@dataclass(frozen=True)
class NoaaCalculator:
    name: str = "NOAA"

    def sunrise(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self._event(d, latitude, longitude, zenith, rise=True)

    def sunset(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self._event(d, latitude, longitude, zenith, rise=False)

    def equation_of_time(self, jde: float) -> float:
        T = julian_centuries(jde)
        return lon.equation_of_time_seconds(T, true_obliquity_short(T), lon.MEEUS)

    def declination(self, jde: float) -> float:
        return math.degrees(_declination_rad(julian_centuries(jde)))

    def right_ascension(self, jde: float) -> float:
        T = julian_centuries(jde)
        return lon.right_ascension_deg(lon.apparent_longitude_low(T), true_obliquity_short(T))

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
        noon = ts.local_event(d, 12, longitude, self.equation_of_time)
        jde = ts.to_jde(noon)
        h = local_hour_angle(jde, latitude, zenith, rise=rise)
        if math.isnan(h):
            return None
        # second pass corrected for the time of day of the event
        h = local_hour_angle(jde + h / 86400, latitude, zenith, rise=rise)
        if math.isnan(h):
            return None
        instant = ts.floor_seconds(noon + timedelta(seconds=h))
        return SolarEvent(instant=instant, precision=Precision.SECOND, scale=TimeScale.UT)
