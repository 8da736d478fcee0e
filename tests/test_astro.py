# tests/test_astro.py

import math

import numpy as np
import pytest

from soltime.astro import geodesy
from soltime.astro import longitude as lon
from soltime.astro import nutation as nut
from soltime.astro.angles import julian_centuries, wrap_deg

ARCSEC = 1.0 / 3600.0

# Meeus, Astronomical Algorithms, example 22.a: 1987 April 10, 0h TD
JDE_22A = 2446895.5
# Meeus example 25.a / 28.b: 1992 October 13.0 TD
JDE_25A = 2448908.5


def test_wrap_deg():
    assert wrap_deg(-30.0) == pytest.approx(330.0)
    assert wrap_deg(720.5) == pytest.approx(0.5)
    assert wrap_deg(-1e-18) < 360.0


def test_julian_centuries():
    assert julian_centuries(2451545.0) == 0.0
    assert julian_centuries(JDE_22A) == pytest.approx(-0.127296372348, abs=1e-12)


def test_tables_are_read_only():
    assert nut.NUTATION_TERMS == 63
    assert lon.LONGITUDE_TERMS == 49
    with pytest.raises(ValueError):
        nut._TABLE_22A[0, 0] = 1
    with pytest.raises(ValueError):
        lon._SERIES_49[0, 0] = 1


def test_fundamental_args_shape():
    args = nut.fundamental_args_rad(0.0)
    assert isinstance(args, np.ndarray)
    assert args.shape == (5,)
    assert math.degrees(args[0]) == pytest.approx(297.85036)


def test_nutation_meeus_22a():
    T = julian_centuries(JDE_22A)
    n = nut.nutation(T)
    assert n.longitude == pytest.approx(-3.788 * ARCSEC, abs=0.005 * ARCSEC)
    assert n.obliquity == pytest.approx(9.443 * ARCSEC, abs=0.005 * ARCSEC)


def test_obliquity_meeus_22a():
    T = julian_centuries(JDE_22A)
    eps0 = 23 + 26 / 60 + 27.407 * ARCSEC
    eps = 23 + 26 / 60 + 36.850 * ARCSEC
    assert nut.mean_obliquity(T) == pytest.approx(eps0, abs=0.002 * ARCSEC)
    assert nut.true_obliquity(T) == pytest.approx(eps, abs=0.01 * ARCSEC)
    # the one-term correction stays within a few arc seconds of the full one
    assert nut.true_obliquity_short(T) == pytest.approx(eps, abs=2 * ARCSEC)


def test_short_nutation_close_to_full():
    for T in (-0.5, -0.1, 0.0, 0.2, 0.6):
        assert nut.nutation_in_longitude_short(T) == pytest.approx(nut.nutation(T).longitude, abs=2 * ARCSEC)


def test_low_precision_longitude_meeus_25a():
    T = julian_centuries(JDE_25A)
    assert wrap_deg(lon.MEEUS.L0(T)) == pytest.approx(201.80720, abs=1e-4)
    assert lon.MEEUS.e(T) == pytest.approx(0.016711668, abs=1e-8)
    assert lon.equation_of_center(T) == pytest.approx(-1.89732, abs=1e-4)
    assert wrap_deg(lon.apparent_longitude_low(T)) == pytest.approx(199.90895, abs=1e-4)


def test_high_precision_longitude_meeus_25b():
    T = julian_centuries(JDE_25A)
    n = nut.nutation(T)
    lam = lon.apparent_solar_longitude(T, n.longitude)
    eps = nut.mean_obliquity(T) + n.obliquity
    # alpha = 13h13m30.749s, delta = -7°47'01.74"
    assert lon.right_ascension_deg(lam, eps) == pytest.approx((13 + 13 / 60 + 30.749 / 3600) * 15, abs=0.005)
    assert lon.declination_deg(lam, eps) == pytest.approx(-(7 + 47 / 60 + 1.74 / 3600), abs=0.005)


def test_right_ascension_wraps():
    assert 0.0 <= lon.right_ascension_deg(350.0, 23.44) < 360.0
    assert lon.right_ascension_deg(350.0, 23.44) > 340.0
    assert lon.right_ascension_deg(0.0, 23.44) == pytest.approx(0.0)


def test_equation_of_time_meeus_28b():
    T = julian_centuries(JDE_25A)
    eot = lon.equation_of_time_seconds(T, nut.true_obliquity(T))
    assert eot == pytest.approx(822.65, abs=2.0)


def test_equation_of_time_models_agree():
    T = julian_centuries(JDE_25A)
    a = lon.equation_of_time_seconds(T, nut.mean_obliquity(T), lon.MEEUS)
    b = lon.equation_of_time_seconds(T, nut.mean_obliquity(T), lon.CALENDRICAL)
    assert a == pytest.approx(b, abs=1.0)


def test_dip_at_sea_level_is_zero():
    assert geodesy.spherical_dip(0) == 0.0
    assert geodesy.ellipsoidal_dip(45.0, 0) == 0.0


def test_spherical_dip():
    expected = math.degrees(math.acos(6372000.0 / 6372100.0)) + 10 * 19 / 3600
    assert geodesy.spherical_dip(100) == pytest.approx(expected)
    assert geodesy.spherical_dip(100) == pytest.approx(0.3738, abs=1e-3)


def test_ellipsoidal_dip():
    # small-angle approximation sqrt(2h/R)
    approx = math.degrees(math.sqrt(2 * 100 / geodesy.EQUATORIAL_RADIUS))
    assert geodesy.ellipsoidal_dip(0.0, 100) == pytest.approx(approx, abs=1e-4)
    assert geodesy.ellipsoidal_dip(60.0, 1000) > geodesy.ellipsoidal_dip(60.0, 100)


def test_prime_vertical_radius():
    a, b = geodesy.EQUATORIAL_RADIUS, geodesy.POLAR_RADIUS
    assert geodesy.prime_vertical_radius(0.0) == pytest.approx(a)
    assert geodesy.prime_vertical_radius(90.0) == pytest.approx(a * a / b)


def test_refraction_factor():
    assert geodesy.refraction_factor(0) == pytest.approx((1013.25 / 1010.0) * (283.0 / 288.0))
    assert geodesy.refraction_factor(3000) < geodesy.refraction_factor(1000) < geodesy.refraction_factor(0)
