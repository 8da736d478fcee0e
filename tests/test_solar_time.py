# tests/test_solar_time.py

from datetime import date, datetime, timedelta, timezone

import pytest

import soltime
from soltime import SolarTime, StdSolarCalculator, Twilight, UnknownCalculatorError

EQUINOX = date(2024, 3, 20)
TROMSO = (69.6492, 18.9553)


@pytest.fixture
def paris():
    return SolarTime.of_location(48.8566, 2.3522)


def test_of_location_resolves_name():
    st = SolarTime.of_location(10.0, 20.0, altitude=100, calculator="TIME4J")
    assert st.calculator is StdSolarCalculator.TIME4J
    assert st.position == soltime.GeoPosition(10.0, 20.0, 100)


def test_of_location_accepts_calculator_object():
    st = SolarTime.of_location(10.0, 20.0, calculator=StdSolarCalculator.CC)
    assert st.calculator is StdSolarCalculator.CC


def test_of_location_unknown_calculator():
    with pytest.raises(UnknownCalculatorError):
        SolarTime.of_location(10.0, 20.0, calculator="ASTRONOMICON")


def test_sunrise_uses_calculator_zenith():
    st = SolarTime.of_location(46.0, 8.0, altitude=1500, calculator="CC")
    calc = StdSolarCalculator.CC
    expected = calc.sunrise(EQUINOX, 46.0, 8.0, calc.zenith_angle(46.0, 1500))
    assert st.sunrise(EQUINOX) == expected


def test_twilight_adds_geodetic_angle():
    st = SolarTime.of_location(46.0, 8.0, altitude=1500, calculator="TIME4J")
    calc = StdSolarCalculator.TIME4J
    expected = calc.sunset(EQUINOX, 46.0, 8.0, 96.0 + calc.geodetic_angle(46.0, 1500))
    assert st.sunset(EQUINOX, Twilight.CIVIL) == expected


def test_twilight_sequence(paris):
    deepest_first = (Twilight.ASTRONOMICAL, Twilight.NAUTICAL, Twilight.CIVIL)
    morning = [paris.sunrise(EQUINOX, tw).instant for tw in deepest_first] + [paris.sunrise(EQUINOX).instant]
    evening = [paris.sunset(EQUINOX).instant] + [paris.sunset(EQUINOX, tw).instant for tw in reversed(deepest_first)]
    assert morning == sorted(morning)
    assert evening == sorted(evening)
    assert len(set(morning)) == 4


def test_transit_at_noon(paris):
    noon = paris.transit_at_noon(EQUINOX)
    assert datetime(2024, 3, 20, 11, 55, tzinfo=timezone.utc) < noon < datetime(2024, 3, 20, 12, 20, tzinfo=timezone.utc)
    rise = paris.sunrise(EQUINOX).instant
    set_ = paris.sunset(EQUINOX).instant
    middle = rise + (set_ - rise) / 2
    assert abs(noon - middle) < timedelta(minutes=2)


def test_transit_at_midnight(paris):
    noon = paris.transit_at_noon(EQUINOX)
    midnight = paris.transit_at_midnight(EQUINOX)
    assert abs((noon - midnight) - timedelta(hours=12)) < timedelta(minutes=1)


def test_altitude_at_transit(paris):
    noon = paris.transit_at_noon(EQUINOX)
    assert paris.altitude_at(noon) == pytest.approx(90.0 - 48.8566, abs=0.6)
    assert paris.altitude_at(paris.transit_at_midnight(EQUINOX)) == pytest.approx(-(90.0 - 48.8566), abs=0.6)


def test_altitude_at_sunrise_is_near_horizon(paris):
    rise = paris.sunrise(EQUINOX).instant
    # geometric altitude of the centre at the standard zenith
    assert paris.altitude_at(rise) == pytest.approx(-50 / 60, abs=0.15)


def test_apparent_solar_time_at_noon(paris):
    local = paris.apparent_solar_time(paris.transit_at_noon(EQUINOX))
    assert local.tzinfo is None
    assert abs(local - datetime(2024, 3, 20, 12, 0)) < timedelta(seconds=2)


def test_apparent_solar_time_rejects_naive(paris):
    with pytest.raises(ValueError):
        paris.apparent_solar_time(datetime(2024, 3, 20, 12, 0))


@pytest.mark.parametrize("calculator", ["SIMPLE", "NOAA", "CC", "TIME4J"])
def test_polar_night(calculator):
    st = SolarTime.of_location(*TROMSO, calculator=calculator)
    d = date(2024, 12, 21)
    assert st.is_polar_night(d)
    assert not st.is_midnight_sun(d)
    assert st.day_length(d) == timedelta(0)


@pytest.mark.parametrize("calculator", ["SIMPLE", "NOAA", "CC", "TIME4J"])
def test_midnight_sun(calculator):
    st = SolarTime.of_location(*TROMSO, calculator=calculator)
    d = date(2024, 6, 21)
    assert st.is_midnight_sun(d)
    assert not st.is_polar_night(d)
    assert st.day_length(d) == timedelta(days=1)


def test_ordinary_day(paris):
    assert not paris.is_polar_night(EQUINOX)
    assert not paris.is_midnight_sun(EQUINOX)
    assert timedelta(hours=12) < paris.day_length(EQUINOX) < timedelta(hours=12, minutes=20)


def test_day_length_across_utc_midnight():
    # sunrise falls on the previous UTC day far east of Greenwich
    st = SolarTime.of_location(-36.85, 174.76, calculator="SIMPLE")
    length = st.day_length(date(2024, 1, 15))
    assert timedelta(hours=14) < length < timedelta(hours=15, minutes=30)


class OneEventCalculator:
    """Sun rises at 06:00 UTC but never sets, or sets at 18:00 UTC without rising."""
    name = "ONE-EVENT"

    def __init__(self, rises: bool):
        self.rises = rises

    def _at(self, d, hour):
        return soltime.SolarEvent(
            datetime(d.year, d.month, d.day, hour, tzinfo=timezone.utc),
            soltime.Precision.SECOND,
            soltime.TimeScale.UT,
        )

    def sunrise(self, d, latitude, longitude, zenith):
        return self._at(d, 6) if self.rises else None

    def sunset(self, d, latitude, longitude, zenith):
        return None if self.rises else self._at(d, 18)

    def equation_of_time(self, jde):
        return 0.0

    def geodetic_angle(self, latitude, altitude):
        return 0.0

    def zenith_angle(self, latitude, altitude):
        return soltime.STD_ZENITH


@pytest.mark.parametrize("rises", [True, False])
def test_day_length_with_single_event(rises):
    # measured from the event to the apparent midnight bounding the day
    st = SolarTime(soltime.GeoPosition(66.0, 0.0), OneEventCalculator(rises))
    assert st.day_length(date(2024, 5, 1)) == timedelta(hours=18)
