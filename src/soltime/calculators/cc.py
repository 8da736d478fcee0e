"""
soltime.calculators.cc
----------------------
Follows the algorithms of Dershowitz/Reingold, "Calendrical Calculations"
(3rd ed.). Observer altitude is honoured through a spherical-Earth dip model.

Supported features (degrees): right-ascension, declination, nutation,
obliquity, mean-anomaly, solar-longitude, solar-latitude.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..astro import geodesy
from ..astro import longitude as lon
from ..astro.angles import julian_centuries
from ..astro.nutation import mean_obliquity, nutation_in_longitude_short
from ..config import load_settings
from ..core.types import (
    DECLINATION, MEAN_ANOMALY, NUTATION, OBLIQUITY, RIGHT_ASCENSION, SOLAR_LATITUDE, SOLAR_LONGITUDE,
    STD_ZENITH, Precision, SolarEvent, TimeScale,
)
from ..reference import time_scales as ts
from ..reference.deltat import delta_t_for_date

logger = logging.getLogger(__name__)

# successive estimates closer than this (seconds) end the refinement
CONVERGENCE_SECONDS = 30.0


def _solar_longitude(T: float) -> float:
    return lon.apparent_solar_longitude(T, nutation_in_longitude_short(T))


def _declination_rad(T: float) -> float:
    return math.radians(lon.declination_deg(_solar_longitude(T), mean_obliquity(T)))


def _sine_offset(jde: float, latitude: float, alpha: float) -> float:
    """Sine of the angle between the sun's path and the depression ``alpha``."""
    dec = _declination_rad(julian_centuries(jde))
    lat = math.radians(latitude)
    return math.tan(lat) * math.tan(dec) + math.sin(math.radians(alpha)) / (math.cos(dec) * math.cos(lat))


@dataclass(frozen=True)
class CalendricalCalculator:
    name: str = "CC"

    def sunrise(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self._event(d, latitude, longitude, zenith, rise=True)

    def sunset(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self._event(d, latitude, longitude, zenith, rise=False)

    def equation_of_time(self, jde: float) -> float:
        T = julian_centuries(jde)
        return lon.equation_of_time_seconds(T, mean_obliquity(T), lon.CALENDRICAL)

    def declination(self, jde: float) -> float:
        return self.get_feature(jde, DECLINATION)

    def right_ascension(self, jde: float) -> float:
        return self.get_feature(jde, RIGHT_ASCENSION)

    def get_feature(self, jde: float, name: str) -> float:
        T = julian_centuries(jde)
        if name == DECLINATION:
            return math.degrees(_declination_rad(T))
        if name == RIGHT_ASCENSION:
            return lon.right_ascension_deg(_solar_longitude(T), mean_obliquity(T))
        if name == NUTATION:
            return nutation_in_longitude_short(T)
        if name == OBLIQUITY:
            return mean_obliquity(T)
        if name == MEAN_ANOMALY:
            return lon.CALENDRICAL.M(T)
        if name == SOLAR_LONGITUDE:
            return _solar_longitude(T)
        if name == SOLAR_LATITUDE:
            return 0.0  # approximation used by this model
        return math.nan

    def geodetic_angle(self, latitude: float, altitude: int) -> float:
        return geodesy.spherical_dip(altitude)

    def zenith_angle(self, latitude: float, altitude: int) -> float:
        return STD_ZENITH + self.geodetic_angle(latitude, altitude)

    def _event(self, d: date, latitude: float, longitude: float, zenith: float, *, rise: bool) -> Optional[SolarEvent]:
        # local mean time on a midnight-based Julian day count
        day = ts.date_to_jdn(d)
        lmt = day + (0.25 if rise else 0.75)
        # JD starts at noon, hence the extra half day
        ephemeris = delta_t_for_date(d) - 43200
        offset = (ts.longitude_offset_seconds(longitude) - ephemeris) / 86400.0

        result = self.moment_of_depression(lmt, latitude, offset, zenith - 90.0, rise=rise, day=day)
        if result is None:
            return None
        if math.floor(result) != day:
            # the crossing belongs to a neighbouring local day
            logger.debug("CC %s on %s falls outside the local day", "sunrise" if rise else "sunset", d)
            return None
        instant = ts.floor_seconds(ts.from_jde(result - offset))
        return SolarEvent(instant=instant, precision=Precision.SECOND, scale=TimeScale.UT)

    def moment_of_depression(
        self,
        lmt: float,
        latitude: float,
        offset: float,
        alpha: float,
        *,
        rise: bool,
        day: Optional[int] = None,
    ) -> Optional[float]:
        """
        Local mean time at which the sun is ``alpha`` degrees below the horizon.

        Every estimate is anchored on ``day`` (default: the day of the first
        estimate).
        Re-estimates until two successive values agree within
        CONVERGENCE_SECONDS. Returns None if there is no such moment or if
        the iteration cap is reached first.
        """
        if day is None:
            day = math.floor(lmt)
        max_iterations = load_settings().max_iterations
        for i in range(1, max_iterations + 1):
            nxt = self._approx_moment_of_depression(lmt, latitude, offset, alpha, rise=rise, day=day)
            if nxt is None:
                return None
            if abs(lmt - nxt) * 86400 < CONVERGENCE_SECONDS:
                logger.debug("CC depression converged after %d iterations", i)
                return nxt
            lmt = nxt
        logger.warning(
            "CC depression did not converge within %d iterations (latitude=%s, alpha=%s)",
            max_iterations, latitude, alpha,
        )
        return None

    def _approx_moment_of_depression(
        self,
        lmt: float,
        latitude: float,
        offset: float,
        alpha: float,
        *,
        rise: bool,
        day: int,
    ) -> Optional[float]:
        value = _sine_offset(lmt - offset, latitude, alpha)
        if abs(value) > 1:
            # retry at a fallback time of the same day
            alt = (day if rise else day + 1) if alpha >= 0 else day + 0.5
            value = _sine_offset(alt - offset, latitude, alpha)
        if abs(value) > 1:
            return None
        sign = -1 if rise else 1
        tmp = day + 0.5 + sign * (((0.5 + math.degrees(math.asin(value)) / 360.0) % 1) - 0.25)
        # apparent to mean time, coarse (see Calendrical Calculations p.184)
        return tmp - self.equation_of_time(tmp - offset) / 86400
