# tests/conftest.py

import pytest

from soltime.reference import deltat

_ENV = ("SOLTIME_LEAP_SECONDS", "SOLTIME_DELTAT_METHOD", "SOLTIME_DELTAT_TABLE", "SOLTIME_MAX_ITERATIONS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Every test starts from the default settings and an empty ΔT table cache."""
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    deltat.load_table.cache_clear()
    yield
    deltat.load_table.cache_clear()
