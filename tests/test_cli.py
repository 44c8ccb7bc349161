# tests/test_cli.py

import pytest

from sunmoon import cli


def test_deltat(capsys):
    assert cli.main(["deltat", "2000", "--method", "em2006"]) == 0
    out = capsys.readouterr().out
    assert "ΔT = 63.87" in out


def test_true_phase_accepts_negative_k(capsys):
    assert cli.main(["true-phase", "-283"]) == 0
    out = capsys.readouterr().out
    assert "2443192.651" in out
    assert "1977-02-18" in out


def test_solar_dump(capsys):
    assert cli.main(["solar", "--jd", "2446895.5"]) == 0
    out = capsys.readouterr().out
    assert "theta0     = 197.69319" in out


def test_sun_prints_all_events(capsys):
    argv = ["sun", "2020-06-21", "--lat", "51.4769", "--lon", "0", "--tz", "Europe/London", "--round"]
    assert cli.main(argv) == 0
    out = capsys.readouterr().out
    for name in ("astronomical_dawn", "sunrise", "solar_noon", "sunset", "astronomical_dusk"):
        assert name in out


def test_sun_reports_missing_events(capsys):
    argv = ["sun", "2020-12-21", "--lat", "78", "--lon", "15", "--fallback"]
    assert cli.main(argv) == 0
    out = capsys.readouterr().out
    assert "06:00:00‡" in out
    assert "POLAR_NIGHT" in out


def test_moon_phases(capsys):
    assert cli.main(["moon-phases", "2020"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].startswith("2020-01-03")
    assert lines[0].endswith("first quarter")


def test_unknown_zone_exits():
    with pytest.raises(SystemExit):
        cli.main(["sun", "2020-06-21", "--lat", "0", "--lon", "0", "--tz", "Mars/Olympus_Mons"])
