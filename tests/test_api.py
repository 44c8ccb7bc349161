# tests/test_api.py

import pytest
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import sunmoon
from sunmoon import (
    MoonPhaseNumber,
    NoEventCode,
    NoEventLabel,
    NoEventTime,
    Settings,
    SunEvent,
)

LONDON = ZoneInfo("Europe/London")
OSLO = ZoneInfo("Europe/Oslo")
FALLBACK = Settings(return_time_for_no_event_case=True)


def _close(a: datetime, b: datetime, minutes: float = 2.0) -> bool:
    return abs(a - b) <= timedelta(minutes=minutes)


# --- solar events ---

def test_greenwich_day():
    dt = datetime(2020, 6, 21, 9, 0, tzinfo=LONDON)
    assert _close(sunmoon.sunrise(dt, 51.4769, 0.0), datetime(2020, 6, 21, 4, 43, tzinfo=LONDON))
    assert _close(sunmoon.sunset(dt, 51.4769, 0.0), datetime(2020, 6, 21, 21, 21, tzinfo=LONDON))
    assert _close(sunmoon.solar_noon(dt, 0.0), datetime(2020, 6, 21, 13, 2, tzinfo=LONDON))


def test_day_events_in_time_order():
    events = sunmoon.day_events(datetime(2020, 9, 1, tzinfo=timezone.utc), 45.0, 10.0)
    assert list(events) == [
        "astronomical_dawn",
        "nautical_dawn",
        "civil_dawn",
        "sunrise",
        "solar_noon",
        "sunset",
        "civil_dusk",
        "nautical_dusk",
        "astronomical_dusk",
    ]
    times = list(events.values())
    assert all(isinstance(t, datetime) for t in times)
    assert times == sorted(times)


def test_named_wrappers_match_sun_event():
    d = date(2021, 4, 2)
    assert sunmoon.civil_dawn(d, 35.0, 139.0) == sunmoon.sun_event(SunEvent.CIVIL_DAWN, d, 35.0, 139.0)
    assert sunmoon.nautical_dusk(d, 35.0, 139.0) == sunmoon.sun_event(SunEvent.NAUTICAL_DUSK, d, 35.0, 139.0)
    assert sunmoon.astronomical_dusk(d, 35.0, 139.0) == sunmoon.sun_event("astronomical_dusk", d, 35.0, 139.0)


def test_latitude_must_be_inside_the_poles():
    for lat in (90.0, -90.0, 91.0, float("nan")):
        with pytest.raises(ValueError):
            sunmoon.sunrise(date(2020, 1, 1), lat, 0.0)


# --- no-event policy ---

def test_polar_night_returns_code_by_default():
    result = sunmoon.sunrise(date(2020, 12, 21), 78.0, 15.0)
    assert result is NoEventCode.SUN_LOW
    assert sunmoon.no_event_label(SunEvent.SUNRISE, result) is NoEventLabel.POLAR_NIGHT


def test_polar_night_fallback_time():
    result = sunmoon.sunrise(date(2020, 12, 21), 78.0, 15.0, settings=FALLBACK)
    assert isinstance(result, NoEventTime)
    assert result.code is NoEventCode.SUN_LOW
    assert result.datetime == datetime(2020, 12, 21, 6, 0, tzinfo=timezone.utc)


def test_white_night_fallback_is_shifted_in_dst():
    dt = datetime(2020, 6, 21, 12, 0, tzinfo=OSLO)
    result = sunmoon.astronomical_dawn(dt, 70.0, 19.0, settings=FALLBACK)
    assert isinstance(result, NoEventTime)
    assert result.code is NoEventCode.SUN_HIGH
    # 04:30 plus the DST hour
    assert (result.datetime.hour, result.datetime.minute) == (5, 30)
    assert result.datetime.tzinfo is OSLO
    assert sunmoon.no_event_label(SunEvent.ASTRONOMICAL_DAWN, result.code) is NoEventLabel.NO_ASTRONOMICAL_DAWN


def test_handle_no_event_fallback_table():
    dt = datetime(2020, 1, 10, 15, 45, 12, tzinfo=timezone.utc)
    expected = {
        SunEvent.SUNRISE: (6, 0),
        SunEvent.SUNSET: (18, 0),
        SunEvent.CIVIL_DAWN: (5, 30),
        SunEvent.CIVIL_DUSK: (18, 30),
        SunEvent.NAUTICAL_DAWN: (5, 0),
        SunEvent.NAUTICAL_DUSK: (19, 0),
        SunEvent.ASTRONOMICAL_DAWN: (4, 30),
        SunEvent.ASTRONOMICAL_DUSK: (19, 30),
    }
    for event, (h, m) in expected.items():
        out = sunmoon.handle_no_event(dt, NoEventCode.SUN_HIGH, event, settings=FALLBACK)
        assert out.datetime == datetime(2020, 1, 10, h, m, tzinfo=timezone.utc)
    assert sunmoon.handle_no_event(dt, "SUN_LOW", SunEvent.SUNSET) is NoEventCode.SUN_LOW


def test_no_event_labels():
    assert sunmoon.no_event_label(SunEvent.SUNSET, NoEventCode.SUN_HIGH) is NoEventLabel.MIDNIGHT_SUN
    assert sunmoon.no_event_label(SunEvent.CIVIL_DUSK, NoEventCode.SUN_HIGH) is NoEventLabel.NO_CIVIL_DUSK
    assert sunmoon.no_event_label(SunEvent.NAUTICAL_DAWN, NoEventCode.SUN_HIGH) is NoEventLabel.NO_NAUTICAL_DAWN
    assert sunmoon.no_event_label(SunEvent.CIVIL_DAWN, NoEventCode.SUN_LOW) is NoEventLabel.POLAR_NIGHT


# --- formatting & settings ---

def test_format_event():
    when = datetime(2020, 12, 21, 6, 0, tzinfo=timezone.utc)
    assert sunmoon.format_event(when) == "06:00"
    assert sunmoon.format_event(NoEventTime(when, NoEventCode.SUN_LOW)) == "06:00‡"
    assert sunmoon.format_event(NoEventCode.SUN_HIGH) == "†"

    custom = replace(Settings(), date_format_keys=sunmoon.DateFormatKeys(SUN_HIGH="^", SUN_LOW="_"))
    assert sunmoon.format_event(NoEventTime(when, NoEventCode.SUN_HIGH), "%H%M", settings=custom) == "0600^"


def test_settings_from_env():
    s = Settings.from_env({"SUNMOON_ROUND_TO_NEAREST_MINUTE": "yes", "SUNMOON_SUN_LOW_KEY": "*"})
    assert s.round_to_nearest_minute is True
    assert s.return_time_for_no_event_case is False
    assert s.date_format_keys.SUN_LOW == "*"
    assert s.date_format_keys.SUN_HIGH == "†"

    with pytest.raises(ValueError):
        Settings.from_env({"SUNMOON_RETURN_TIME_FOR_NO_EVENT": "maybe"})


# --- lunar phases ---

def test_full_moon_of_january_2000():
    full = sunmoon.moon_phase_datetime(0, MoonPhaseNumber.FULL_MOON)
    assert _close(full, datetime(2000, 1, 21, 4, 40, tzinfo=timezone.utc))


def test_moon_phase_datetime_rounding_and_zone():
    tokyo = ZoneInfo("Asia/Tokyo")
    rounded = sunmoon.moon_phase_datetime(0, 0, tokyo, settings=Settings(round_to_nearest_minute=True))
    assert rounded.second == 0 and rounded.microsecond == 0
    assert rounded.utcoffset() == timedelta(hours=9)
    assert _close(rounded, datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc))


def test_year_moon_phases_2020():
    phases = sunmoon.year_moon_phases(2020)
    assert 48 <= len(phases) <= 50

    first, second = phases[0], phases[1]
    assert first.phase is MoonPhaseNumber.FIRST_QUARTER
    assert _close(first.datetime, datetime(2020, 1, 3, 4, 45, tzinfo=timezone.utc))
    assert second.phase is MoonPhaseNumber.FULL_MOON
    assert _close(second.datetime, datetime(2020, 1, 10, 19, 21, tzinfo=timezone.utc))

    new_moons = [p for p in phases if p.phase is MoonPhaseNumber.NEW_MOON]
    assert _close(new_moons[0].datetime, datetime(2020, 1, 24, 21, 42, tzinfo=timezone.utc))

    for a, b in zip(phases, phases[1:]):
        assert a.datetime < b.datetime
        assert int(b.phase) == (int(a.phase) + 1) % 4
    assert all(p.datetime.year == 2020 for p in phases)


def test_moon_phases_range_bounds():
    start = datetime(2020, 1, 10, 19, 0, tzinfo=timezone.utc)
    end = datetime(2020, 1, 24, 21, 0, tzinfo=timezone.utc)
    phases = sunmoon.moon_phases(start, end)
    assert [p.phase for p in phases] == [MoonPhaseNumber.FULL_MOON, MoonPhaseNumber.LAST_QUARTER]
    assert sunmoon.moon_phases(end, start) == []
