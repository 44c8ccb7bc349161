# tests/conftest.py

import pytest

from sunmoon.reference import deltat


@pytest.fixture(autouse=True)
def isolated_deltat_table(tmp_path, monkeypatch):
    """
    Keep a ΔT table in the user's cache from leaking into results:
    every test starts with no table installed unless it writes one.
    """
    monkeypatch.delenv(deltat.ENV_TABLE, raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    deltat.load_table.cache_clear()
    yield
    deltat.load_table.cache_clear()
