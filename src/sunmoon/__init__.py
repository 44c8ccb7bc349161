"""sunmoon public API.

Sunrise, sunset, twilight and solar noon for a date and place, and the true
instants of the principal lunar phases (Meeus, Astronomical Algorithms).
"""

from .api import (
    sunrise,
    sunset,
    civil_dawn,
    civil_dusk,
    nautical_dawn,
    nautical_dusk,
    astronomical_dawn,
    astronomical_dusk,
    solar_noon,
    sun_event,
    day_events,
    handle_no_event,
    no_event_label,
    moon_phase_datetime,
    moon_phases,
    year_moon_phases,
    format_event,
)
from .core.errors import NoEventError, InvalidFlagError, SunMoonError
from .core.settings import DateFormatKeys, Settings
from .core.types import (
    MoonPhase,
    MoonPhaseNumber,
    NoEventCode,
    NoEventLabel,
    NoEventTime,
    RiseSetFlag,
    SunEvent,
)

__all__ = [
    "sunrise",
    "sunset",
    "civil_dawn",
    "civil_dusk",
    "nautical_dawn",
    "nautical_dusk",
    "astronomical_dawn",
    "astronomical_dusk",
    "solar_noon",
    "sun_event",
    "day_events",
    "handle_no_event",
    "no_event_label",
    "moon_phase_datetime",
    "moon_phases",
    "year_moon_phases",
    "format_event",
    "NoEventError",
    "InvalidFlagError",
    "SunMoonError",
    "DateFormatKeys",
    "Settings",
    "MoonPhase",
    "MoonPhaseNumber",
    "NoEventCode",
    "NoEventLabel",
    "NoEventTime",
    "RiseSetFlag",
    "SunEvent",
]
