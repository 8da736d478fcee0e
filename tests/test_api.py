# tests/test_api.py

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

import pytest

import soltime
from soltime import api
from soltime._bootstrap import build_registry
from soltime.core.types import STD_ZENITH, Precision, SolarEvent, TimeScale


@pytest.fixture
def fresh_registry():
    api.set_registry(build_registry())
    yield
    api.set_registry(build_registry())


@dataclass(frozen=True)
class FixedNoonCalculator:
    """Toy calculator: sunrise 06:00, sunset 18:00 UTC everywhere."""
    name: str = "FIXED"

    def _at(self, d: date, hour: int) -> SolarEvent:
        return SolarEvent(datetime(d.year, d.month, d.day, hour, tzinfo=timezone.utc), Precision.MINUTE, TimeScale.UT)

    def sunrise(self, d, latitude, longitude, zenith) -> Optional[SolarEvent]:
        return self._at(d, 6)

    def sunset(self, d, latitude, longitude, zenith) -> Optional[SolarEvent]:
        return self._at(d, 18)

    def equation_of_time(self, jde):
        return 0.0

    def declination(self, jde):
        return 0.0

    def right_ascension(self, jde):
        return 0.0

    def get_feature(self, jde, name):
        return math.nan

    def geodetic_angle(self, latitude, altitude):
        return 0.0

    def zenith_angle(self, latitude, altitude):
        return STD_ZENITH


def test_list_calculators():
    assert soltime.list_calculators() == ["CC", "NOAA", "SIMPLE", "TIME4J"]


def test_get_calculator():
    assert soltime.get_calculator("NOAA") is soltime.StdSolarCalculator.NOAA
    assert soltime.get_calculator("NOAA").name == "NOAA"


def test_unknown_calculator():
    with pytest.raises(soltime.UnknownCalculatorError) as ei:
        soltime.get_calculator("nope")
    assert isinstance(ei.value, KeyError)
    assert isinstance(ei.value, soltime.SoltimeError)


def test_register_calculator(fresh_registry):
    soltime.register_calculator(FixedNoonCalculator())
    assert "FIXED" in soltime.list_calculators()
    ev = soltime.sunrise(date(2024, 5, 1), 0.0, 0.0, calculator="FIXED")
    assert ev.instant.hour == 6


def test_register_duplicate(fresh_registry):
    soltime.register_calculator(FixedNoonCalculator())
    with pytest.raises(KeyError):
        soltime.register_calculator(FixedNoonCalculator())
    soltime.register_calculator(FixedNoonCalculator(), overwrite=True)


def test_facade_with_custom_calculator(fresh_registry):
    soltime.register_calculator(FixedNoonCalculator())
    st = soltime.SolarTime.of_location(12.0, 34.0, calculator="FIXED")
    assert st.day_length(date(2024, 5, 1)).total_seconds() == 12 * 3600


def test_convenience_functions_match_calculator():
    d = date(2024, 5, 1)
    calc = soltime.StdSolarCalculator.NOAA
    assert soltime.sunrise(d, 40.0, -3.7) == calc.sunrise(d, 40.0, -3.7, STD_ZENITH)
    assert soltime.sunset(d, 40.0, -3.7, zenith=96.0, calculator="CC") == soltime.StdSolarCalculator.CC.sunset(d, 40.0, -3.7, 96.0)


def test_uninitialized_registry():
    saved = api._registry
    api._registry = None
    try:
        with pytest.raises(RuntimeError):
            api.list_calculators()
    finally:
        api.set_registry(saved)
