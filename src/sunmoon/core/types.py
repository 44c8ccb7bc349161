from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Union


class NoEventCode(str, Enum):
    SUN_HIGH = "SUN_HIGH"  # sun stays above the threshold all day
    SUN_LOW = "SUN_LOW"    # sun stays below the threshold all day


class NoEventLabel(str, Enum):
    """Domain name for a missing event, e.g. for display."""
    MIDNIGHT_SUN = "MIDNIGHT_SUN"
    POLAR_NIGHT = "POLAR_NIGHT"
    NO_CIVIL_DAWN = "NO_CIVIL_DAWN"
    NO_CIVIL_DUSK = "NO_CIVIL_DUSK"
    NO_NAUTICAL_DAWN = "NO_NAUTICAL_DAWN"
    NO_NAUTICAL_DUSK = "NO_NAUTICAL_DUSK"
    NO_ASTRONOMICAL_DAWN = "NO_ASTRONOMICAL_DAWN"
    NO_ASTRONOMICAL_DUSK = "NO_ASTRONOMICAL_DUSK"


class RiseSetFlag(str, Enum):
    RISE = "RISE"
    SET = "SET"


class MoonPhaseNumber(IntEnum):
    NEW_MOON = 0
    FIRST_QUARTER = 1
    FULL_MOON = 2
    LAST_QUARTER = 3


class SunEvent(str, Enum):
    """Named solar events with their horizon depression and direction."""
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    CIVIL_DAWN = "civil_dawn"
    CIVIL_DUSK = "civil_dusk"
    NAUTICAL_DAWN = "nautical_dawn"
    NAUTICAL_DUSK = "nautical_dusk"
    ASTRONOMICAL_DAWN = "astronomical_dawn"
    ASTRONOMICAL_DUSK = "astronomical_dusk"

    @property
    def offset_deg(self) -> float:
        return _EVENT_OFFSETS[self]

    @property
    def flag(self) -> RiseSetFlag:
        if self in (SunEvent.SUNRISE, SunEvent.CIVIL_DAWN, SunEvent.NAUTICAL_DAWN, SunEvent.ASTRONOMICAL_DAWN):
            return RiseSetFlag.RISE
        return RiseSetFlag.SET


_EVENT_OFFSETS = {
    SunEvent.SUNRISE: 50.0 / 60.0,
    SunEvent.SUNSET: 50.0 / 60.0,
    SunEvent.CIVIL_DAWN: 6.0,
    SunEvent.CIVIL_DUSK: 6.0,
    SunEvent.NAUTICAL_DAWN: 12.0,
    SunEvent.NAUTICAL_DUSK: 12.0,
    SunEvent.ASTRONOMICAL_DAWN: 18.0,
    SunEvent.ASTRONOMICAL_DUSK: 18.0,
}


@dataclass(frozen=True)
class NoEventTime:
    """Fallback clock time returned in place of an event that does not occur."""
    datetime: datetime
    code: NoEventCode


@dataclass(frozen=True)
class MoonPhase:
    datetime: datetime
    phase: MoonPhaseNumber


EventResult = Union[datetime, NoEventTime, NoEventCode]
