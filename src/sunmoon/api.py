from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Dict, List, Optional, Tuple, Union

from .core.errors import NoEventError
from .core.settings import DEFAULT_SETTINGS, Settings
from .core.time import k_floor
from .core.types import (
    EventResult,
    MoonPhase,
    MoonPhaseNumber,
    NoEventCode,
    NoEventLabel,
    NoEventTime,
    SunEvent,
)
from .reference import moon_phases as _mp
from .reference import sun_times as _st
from .reference import time_scales as ts

DateLike = Union[date, datetime]

# Wall-clock (hour, minute) returned for an event that does not occur, before DST.
FALLBACK_TIMES: Dict[SunEvent, Tuple[int, int]] = {
    SunEvent.SUNRISE: (6, 0),
    SunEvent.SUNSET: (18, 0),
    SunEvent.CIVIL_DAWN: (5, 30),
    SunEvent.CIVIL_DUSK: (18, 30),
    SunEvent.NAUTICAL_DAWN: (5, 0),
    SunEvent.NAUTICAL_DUSK: (19, 0),
    SunEvent.ASTRONOMICAL_DAWN: (4, 30),
    SunEvent.ASTRONOMICAL_DUSK: (19, 30),
}

_SUN_HIGH_LABELS: Dict[SunEvent, NoEventLabel] = {
    SunEvent.SUNRISE: NoEventLabel.MIDNIGHT_SUN,
    SunEvent.SUNSET: NoEventLabel.MIDNIGHT_SUN,
    SunEvent.CIVIL_DAWN: NoEventLabel.NO_CIVIL_DAWN,
    SunEvent.CIVIL_DUSK: NoEventLabel.NO_CIVIL_DUSK,
    SunEvent.NAUTICAL_DAWN: NoEventLabel.NO_NAUTICAL_DAWN,
    SunEvent.NAUTICAL_DUSK: NoEventLabel.NO_NAUTICAL_DUSK,
    SunEvent.ASTRONOMICAL_DAWN: NoEventLabel.NO_ASTRONOMICAL_DAWN,
    SunEvent.ASTRONOMICAL_DUSK: NoEventLabel.NO_ASTRONOMICAL_DUSK,
}


def _settings(settings: Optional[Settings]) -> Settings:
    return settings if settings is not None else DEFAULT_SETTINGS


def _check_latitude(latitude: float) -> None:
    if not -90.0 < latitude < 90.0:
        raise ValueError(f"latitude must lie strictly between -90 and 90, got {latitude}")


# ============================================================
# No-event policy
# ============================================================

def handle_no_event(
    dt: DateLike,
    code: NoEventCode,
    event: SunEvent,
    *,
    settings: Optional[Settings] = None,
) -> Union[NoEventTime, NoEventCode]:
    """
    Result for an event that does not occur on dt's local date.

    With settings.return_time_for_no_event_case, a NoEventTime at the event's
    fixed wall-clock time (one hour later in DST); otherwise the bare code.
    """
    code = NoEventCode(code)
    if not _settings(settings).return_time_for_no_event_case:
        return code
    dt = ts.as_aware(dt)
    hour, minute = FALLBACK_TIMES[SunEvent(event)]
    out = dt.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if dt.dst():
        out += timedelta(minutes=60)
    return NoEventTime(datetime=out, code=code)


def no_event_label(event: SunEvent, code: NoEventCode) -> NoEventLabel:
    """MIDNIGHT_SUN / NO_<TWILIGHT>_<DAWN|DUSK> when the sun stays too high, POLAR_NIGHT when it stays too low."""
    if NoEventCode(code) is NoEventCode.SUN_LOW:
        return NoEventLabel.POLAR_NIGHT
    return _SUN_HIGH_LABELS[SunEvent(event)]


# ============================================================
# Solar events
# ============================================================

def sun_event(
    event: SunEvent,
    dt: DateLike,
    latitude: float,
    longitude: float,
    *,
    settings: Optional[Settings] = None,
) -> EventResult:
    """Instant of a named solar event on dt's local date; longitude east positive."""
    event = SunEvent(event)
    _check_latitude(latitude)
    try:
        return _st.sun_rise_set(dt, latitude, longitude, event.flag, event.offset_deg, settings=settings)
    except NoEventError as e:
        return handle_no_event(dt, e.code, event, settings=settings)


def sunrise(dt: DateLike, latitude: float, longitude: float, *, settings: Optional[Settings] = None) -> EventResult:
    return sun_event(SunEvent.SUNRISE, dt, latitude, longitude, settings=settings)


def sunset(dt: DateLike, latitude: float, longitude: float, *, settings: Optional[Settings] = None) -> EventResult:
    return sun_event(SunEvent.SUNSET, dt, latitude, longitude, settings=settings)


def civil_dawn(dt: DateLike, latitude: float, longitude: float, *, settings: Optional[Settings] = None) -> EventResult:
    return sun_event(SunEvent.CIVIL_DAWN, dt, latitude, longitude, settings=settings)


def civil_dusk(dt: DateLike, latitude: float, longitude: float, *, settings: Optional[Settings] = None) -> EventResult:
    return sun_event(SunEvent.CIVIL_DUSK, dt, latitude, longitude, settings=settings)


def nautical_dawn(dt: DateLike, latitude: float, longitude: float, *, settings: Optional[Settings] = None) -> EventResult:
    return sun_event(SunEvent.NAUTICAL_DAWN, dt, latitude, longitude, settings=settings)


def nautical_dusk(dt: DateLike, latitude: float, longitude: float, *, settings: Optional[Settings] = None) -> EventResult:
    return sun_event(SunEvent.NAUTICAL_DUSK, dt, latitude, longitude, settings=settings)


def astronomical_dawn(dt: DateLike, latitude: float, longitude: float, *, settings: Optional[Settings] = None) -> EventResult:
    return sun_event(SunEvent.ASTRONOMICAL_DAWN, dt, latitude, longitude, settings=settings)


def astronomical_dusk(dt: DateLike, latitude: float, longitude: float, *, settings: Optional[Settings] = None) -> EventResult:
    return sun_event(SunEvent.ASTRONOMICAL_DUSK, dt, latitude, longitude, settings=settings)


def solar_noon(dt: DateLike, longitude: float, *, settings: Optional[Settings] = None) -> datetime:
    """Solar transit on dt's local date."""
    return _st.sun_transit(dt, longitude, settings=settings)


def day_events(
    dt: DateLike,
    latitude: float,
    longitude: float,
    *,
    settings: Optional[Settings] = None,
) -> Dict[str, Union[EventResult, datetime]]:
    """Every named event plus solar noon for one date, keyed by event name."""
    out: Dict[str, Union[EventResult, datetime]] = {}
    for event in (
        SunEvent.ASTRONOMICAL_DAWN,
        SunEvent.NAUTICAL_DAWN,
        SunEvent.CIVIL_DAWN,
        SunEvent.SUNRISE,
    ):
        out[event.value] = sun_event(event, dt, latitude, longitude, settings=settings)
    out["solar_noon"] = solar_noon(dt, longitude, settings=settings)
    for event in (
        SunEvent.SUNSET,
        SunEvent.CIVIL_DUSK,
        SunEvent.NAUTICAL_DUSK,
        SunEvent.ASTRONOMICAL_DUSK,
    ):
        out[event.value] = sun_event(event, dt, latitude, longitude, settings=settings)
    return out


# ============================================================
# Lunar phases
# ============================================================

def moon_phase_datetime(
    k: int,
    phase: MoonPhaseNumber,
    tz: Optional[tzinfo] = None,
    *,
    settings: Optional[Settings] = None,
) -> datetime:
    """Civil instant of phase `phase` in lunation k, in tz (UTC by default)."""
    out = ts.jde_to_datetime(_mp.true_phase(k, phase), tz)
    if _settings(settings).round_to_nearest_minute:
        out = ts.round_to_minute(out)
    return out


def moon_phases(
    start: DateLike,
    end: DateLike,
    tz: Optional[tzinfo] = None,
    *,
    settings: Optional[Settings] = None,
) -> List[MoonPhase]:
    """All principal phases with start <= instant < end, in time order."""
    start = ts.as_aware(start)
    end = ts.as_aware(end)
    if end <= start:
        return []

    # true phases stray less than a day from the mean ones
    k_lo = k_floor(ts.datetime_utc_to_jd(start)) - 1
    k_hi = int(math.ceil(ts.jd_to_k(ts.datetime_utc_to_jd(end)))) + 1

    out: List[MoonPhase] = []
    for k in range(k_lo, k_hi + 1):
        for phase in MoonPhaseNumber:
            when = ts.jde_to_datetime(_mp.true_phase(k, phase), tz)
            if start <= when < end:
                if _settings(settings).round_to_nearest_minute:
                    when = ts.round_to_minute(when)
                out.append(MoonPhase(datetime=when, phase=phase))
    return out


def year_moon_phases(
    year: int,
    tz: Optional[tzinfo] = None,
    *,
    settings: Optional[Settings] = None,
) -> List[MoonPhase]:
    """Phases falling in the civil year `year` of zone tz (UTC by default)."""
    zone = tz or timezone.utc
    return moon_phases(
        datetime(year, 1, 1, tzinfo=zone),
        datetime(year + 1, 1, 1, tzinfo=zone),
        tz,
        settings=settings,
    )


# ============================================================
# Formatting
# ============================================================

def format_event(
    result: Union[EventResult, MoonPhase],
    fmt: str = "%H:%M",
    *,
    settings: Optional[Settings] = None,
) -> str:
    """
    strftime() for instants; a NoEventTime gets its code's marker appended,
    a bare NoEventCode becomes the marker alone.
    """
    keys = _settings(settings).date_format_keys
    if isinstance(result, MoonPhase):
        return result.datetime.strftime(fmt)
    if isinstance(result, NoEventTime):
        return result.datetime.strftime(fmt) + keys.for_code(result.code)
    if isinstance(result, NoEventCode):
        return keys.for_code(result)
    return result.strftime(fmt)
