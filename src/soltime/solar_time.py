"""
soltime.solar_time
------------------
Location-bound facade over a SolarCalculator.

    st = SolarTime.of_location(47.92, 106.92, altitude=1350, calculator="TIME4J")
    st.sunrise(date(2024, 6, 21))
    st.sunset(date(2024, 6, 21), twilight=Twilight.CIVIL)

All instants are timezone-aware UTC datetimes unless noted otherwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from . import api
from .astro.angles import julian_centuries, wrap_deg
from .core.calculator import SolarCalculator
from .core.types import GeoPosition, SolarEvent, Twilight
from .reference import time_scales as ts

J2000_UT = 2451545.0


def greenwich_mean_sidereal_time(jd_ut: float) -> float:
    """Mean sidereal time at Greenwich in degrees (Meeus 12.4)."""
    T = julian_centuries(jd_ut)
    theta = (
        280.46061837
        + 360.98564736629 * (jd_ut - J2000_UT)
        + 0.000387933 * T * T
        - T * T * T / 38710000.0
    )
    return wrap_deg(theta)


def _clamp_day(length: timedelta) -> timedelta:
    return max(timedelta(0), min(length, timedelta(days=1)))


@dataclass(frozen=True)
class SolarTime:
    position: GeoPosition
    calculator: SolarCalculator

    @classmethod
    def of_location(
        cls,
        latitude: float,
        longitude: float,
        altitude: int = 0,
        calculator: Union[str, SolarCalculator] = "NOAA",
    ) -> "SolarTime":
        calc = api.get_calculator(calculator) if isinstance(calculator, str) else calculator
        return cls(GeoPosition(latitude, longitude, altitude), calc)

    # ---- events ----

    def _zenith(self, twilight: Optional[Twilight]) -> float:
        p = self.position
        if twilight is None:
            return self.calculator.zenith_angle(p.latitude, p.altitude)
        return twilight.zenith + self.calculator.geodetic_angle(p.latitude, p.altitude)

    def sunrise(self, d: date, twilight: Optional[Twilight] = None) -> Optional[SolarEvent]:
        p = self.position
        return self.calculator.sunrise(d, p.latitude, p.longitude, self._zenith(twilight))

    def sunset(self, d: date, twilight: Optional[Twilight] = None) -> Optional[SolarEvent]:
        p = self.position
        return self.calculator.sunset(d, p.latitude, p.longitude, self._zenith(twilight))

    def transit_at_noon(self, d: date) -> datetime:
        return ts.floor_seconds(ts.local_event(d, 12, self.position.longitude, self.calculator.equation_of_time))

    def transit_at_midnight(self, d: date) -> datetime:
        return ts.floor_seconds(ts.local_event(d, 0, self.position.longitude, self.calculator.equation_of_time))

    # ---- polar conditions ----

    def _horizon(self) -> float:
        p = self.position
        return 90.0 - self.calculator.zenith_angle(p.latitude, p.altitude)

    def _no_events(self, d: date) -> bool:
        return self.sunrise(d) is None and self.sunset(d) is None

    def is_polar_night(self, d: date) -> bool:
        return self._no_events(d) and self.altitude_at(self.transit_at_noon(d)) < self._horizon()

    def is_midnight_sun(self, d: date) -> bool:
        return self._no_events(d) and self.altitude_at(self.transit_at_noon(d)) > self._horizon()

    def day_length(self, d: date) -> timedelta:
        rise = self.sunrise(d)
        set_ = self.sunset(d)
        if rise is not None and set_ is not None:
            length = set_.instant - rise.instant
            if length < timedelta(0):
                # events fell on different UTC days
                length += timedelta(days=1)
            return length
        if rise is not None:
            # sun stays up past the apparent midnight that ends the day
            return _clamp_day(self.transit_at_midnight(d + timedelta(days=1)) - rise.instant)
        if set_ is not None:
            return _clamp_day(set_.instant - self.transit_at_midnight(d))
        if self.altitude_at(self.transit_at_noon(d)) > self._horizon():
            return timedelta(days=1)
        return timedelta(0)

    # ---- sun position ----

    def apparent_solar_time(self, instant: datetime) -> datetime:
        """Local apparent (sundial) time at the instant, as a naive datetime."""
        if instant.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        utc = instant.astimezone(timezone.utc)
        eot = self.calculator.equation_of_time(ts.to_jde(utc))
        return (utc + timedelta(seconds=self.position.longitude * 240 + eot)).replace(tzinfo=None)

    def altitude_at(self, instant: datetime) -> float:
        """Geometric altitude of the sun's centre in degrees."""
        jde = ts.to_jde(instant)
        dec = math.radians(self.calculator.declination(jde))
        ra = self.calculator.right_ascension(jde)
        h = math.radians(greenwich_mean_sidereal_time(ts.datetime_to_jd(instant)) + self.position.longitude - ra)
        lat = math.radians(self.position.latitude)
        s = math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(h)
        return math.degrees(math.asin(max(-1.0, min(1.0, s))))
