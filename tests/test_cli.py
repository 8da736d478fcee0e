# tests/test_cli.py

import pytest

from soltime import cli


def test_sunrise_atlanta(capsys):
    rc = cli.main(["sunrise", "2009-09-06", "--lat", "33.766667", "--lon", "-84.416667"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "2009-09-06T11:1" in out
    assert "calculator=NOAA" in out
    assert "precision=SECOND" in out


def test_sunset_with_options(capsys):
    rc = cli.main([
        "sunset", "2024-03-20", "--lat", "46.0", "--lon", "8.0", "--alt", "1500",
        "--calculator", "TIME4J", "--twilight", "civil",
    ])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith("2024-03-20T")
    assert "calculator=TIME4J" in out


def test_sunrise_polar_night(capsys):
    rc = cli.main(["sunrise", "2024-12-21", "--lat", "78.2", "--lon", "15.6"])
    assert rc == 0
    assert "polar night" in capsys.readouterr().out


def test_sunset_midnight_sun(capsys):
    rc = cli.main(["sunset", "2024-06-21", "--lat", "78.2", "--lon", "15.6", "--calculator", "CC"])
    assert rc == 0
    assert "midnight sun" in capsys.readouterr().out


def test_log_level_option(capsys):
    rc = cli.main(["--log-level", "DEBUG", "sunrise", "2024-03-20", "--lat", "48.85", "--lon", "2.35", "--calculator", "TIME4J"])
    assert rc == 0
    assert "2024-03-20T05:" in capsys.readouterr().out


def test_bad_date():
    with pytest.raises(SystemExit):
        cli.main(["sunrise", "2024-13-01", "--lat", "0", "--lon", "0"])


def test_unknown_calculator():
    with pytest.raises(SystemExit):
        cli.main(["sunrise", "2024-03-01", "--lat", "0", "--lon", "0", "--calculator", "FOO"])


def test_features(capsys):
    rc = cli.main(["features", "--jd-tt", "2448908.5", "--calculator", "TIME4J"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "solar-longitude" in out
    assert "199.90" in out
    assert "Equation of time = +13m" in out


def test_features_unsupported_are_nan(capsys):
    cli.main(["features", "--calculator", "NOAA"])
    out = capsys.readouterr().out
    assert "nutation" in out and "nan" in out


def test_eot(capsys):
    rc = cli.main(["eot", "--jd-tt", "2448908.5"])
    out = capsys.readouterr().out
    assert rc == 0
    for name in ("SIMPLE", "NOAA", "CC", "TIME4J"):
        assert name in out


def test_diag_compare_eot_summary(capsys):
    rc = cli.main(["diag", "compare-eot", "--year", "2023", "--no-plot"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Equation of time 2023" in out
    assert "TIME4J" in out
