# reference/sun_times.py
"""
Solar transit, rise/set and twilight instants on a civil date (AA ch. 15).

Longitudes are east-positive; AA uses west-positive, so L enters every
hour-angle formula with the opposite sign.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

from . import astro_args as aa
from . import earth
from . import solar
from . import time_scales as ts
from .deltat import delta_t_for_datetime
from ..core.errors import InvalidFlagError, NoEventError
from ..core.settings import DEFAULT_SETTINGS, Settings
from ..core.types import NoEventCode, RiseSetFlag

LOGGER = logging.getLogger(__name__)

SUNRISE_OFFSET_DEG = 50.0 / 60.0

# Corrections below ~9 s stop the iteration.
CONVERGENCE_DAY_FRACTION = 0.0001
MAX_ITERATIONS = 3

_SIDEREAL_DEG_PER_DAY = 360.985647
_ONE_DAY_T = 1.0 / aa.DAYS_PER_CENTURY


# ------------------------------------------------------------
# Per-date setup
# ------------------------------------------------------------

@dataclass(frozen=True)
class _DaySetup:
    midnight_utc: datetime   # local date at 00:00, wall clock read as UTC
    utc_offset_min: float
    delta_t: float           # seconds
    T: float                 # 0h UT of midnight_utc
    TD: float                # same instant, dynamical time
    Theta0: float            # apparent sidereal time at Greenwich, 0h UT


def _setup(dt: datetime) -> _DaySetup:
    midnight = ts.utc_midnight_of_local_date(dt)
    delta_t = delta_t_for_datetime(midnight)
    T = ts.datetime_to_T(midnight)
    return _DaySetup(
        midnight_utc=midnight,
        utc_offset_min=ts.utc_offset_minutes(dt),
        delta_t=delta_t,
        T=T,
        TD=T - delta_t / (86400.0 * aa.DAYS_PER_CENTURY),
        Theta0=earth.apparent_sidereal_time_greenwich(T),
    )


# ------------------------------------------------------------
# Geometry
# ------------------------------------------------------------

def approx_local_hour_angle(phi: float, delta: float, offset: float) -> float:
    """
    H0 (15.1) in [0,180] for the sun at `offset` degrees below the horizon.

    Raises NoEventError(SUN_HIGH) when the sun never sinks that low and
    NoEventError(SUN_LOW) when it never rises that high.
    """
    cos_H0 = (aa.sind(-offset) - aa.sind(phi) * aa.sind(delta)) / (aa.cosd(phi) * aa.cosd(delta))
    if cos_H0 < -1.0:
        raise NoEventError(NoEventCode.SUN_HIGH)
    if cos_H0 > 1.0:
        raise NoEventError(NoEventCode.SUN_LOW)
    return aa.acosd(cos_H0)


def normalize_m(m: float, utc_offset_min: float) -> float:
    """Shift a day fraction by one day so the event lands on the caller's local date."""
    local_m = m + utc_offset_min / 1440.0
    if local_m < 0.0:
        return m + 1.0
    if local_m > 1.0:
        return m - 1.0
    return m


def local_hour_angle(theta0: float, L: float, alpha: float) -> float:
    """H folded to (-180,180]."""
    return aa.fold180(theta0 + L - alpha)


def altitude(phi: float, delta: float, H: float) -> float:
    """h (13.6)."""
    return aa.asind(aa.sind(phi) * aa.sind(delta) + aa.cosd(phi) * aa.cosd(delta) * aa.cosd(H))


def interpolated_ra(T: float, n: float) -> float:
    a1 = solar.sun_apparent_right_ascension(T - _ONE_DAY_T)
    a2 = solar.sun_apparent_right_ascension(T)
    a3 = solar.sun_apparent_right_ascension(T + _ONE_DAY_T)
    return aa.reduce_angle(aa.interpolate_from_three(a1, a2, a3, n, normalize=True))


def interpolated_dec(T: float, n: float) -> float:
    # declination never wraps; interpolate without re-centring
    d1 = solar.sun_apparent_declination(T - _ONE_DAY_T)
    d2 = solar.sun_apparent_declination(T)
    d3 = solar.sun_apparent_declination(T + _ONE_DAY_T)
    return aa.interpolate_from_three(d1, d2, d3, n)


# ------------------------------------------------------------
# Corrections (AA p103)
# ------------------------------------------------------------

def sun_transit_correction(T: float, Theta0: float, delta_t: float, L: float, m: float) -> float:
    theta0 = Theta0 + _SIDEREAL_DEG_PER_DAY * m
    n = m + delta_t / 864000.0
    alpha = interpolated_ra(T, n)
    H = local_hour_angle(theta0, L, alpha)
    return -H / 360.0


def sun_rise_set_correction(
    T: float,
    Theta0: float,
    delta_t: float,
    phi: float,
    L: float,
    m: float,
    offset: float,
) -> float:
    theta0 = Theta0 + _SIDEREAL_DEG_PER_DAY * m
    n = m + delta_t / 864000.0
    alpha = interpolated_ra(T, n)
    delta = interpolated_dec(T, n)
    H = local_hour_angle(theta0, L, alpha)
    h = altitude(phi, delta, H)
    return (h + offset) / (360.0 * aa.cosd(delta) * aa.cosd(phi) * aa.sind(H))


# ------------------------------------------------------------
# Localization
# ------------------------------------------------------------

def localize(midnight_utc: datetime, m: float, tz_source: datetime, settings: Settings) -> datetime:
    """UTC midnight + m days, optionally rounded to the minute, in tz_source's zone."""
    out = midnight_utc + timedelta(seconds=ts.seconds_from_day_fraction(m))
    if settings.round_to_nearest_minute:
        out = ts.round_to_minute(out)
    return out.astimezone(tz_source.tzinfo)


# ------------------------------------------------------------
# Public solver
# ------------------------------------------------------------

def sun_transit(
    dt: Union[date, datetime],
    L: float,
    *,
    settings: Optional[Settings] = None,
) -> datetime:
    """Instant of the sun's upper culmination on the local date of dt, at longitude L (east +)."""
    settings = settings or DEFAULT_SETTINGS
    dt = ts.as_aware(dt)
    day = _setup(dt)

    alpha = solar.sun_apparent_right_ascension(day.TD)
    m = normalize_m((alpha - L - day.Theta0) / 360.0, day.utc_offset_min)
    m += sun_transit_correction(day.T, day.Theta0, day.delta_t, L, m)
    return localize(day.midnight_utc, m, dt, settings)


def sun_rise_set(
    dt: Union[date, datetime],
    phi: float,
    L: float,
    flag: RiseSetFlag,
    offset: float = SUNRISE_OFFSET_DEG,
    *,
    settings: Optional[Settings] = None,
) -> datetime:
    """
    Instant the sun crosses `offset` degrees below the horizon on the local
    date of dt, rising (RiseSetFlag.RISE) or setting (RiseSetFlag.SET).

    offset: 50/60 for sunrise/sunset, 6 civil, 12 nautical, 18 astronomical.

    Raises NoEventError when the crossing does not happen that day, and
    InvalidFlagError for any other flag.
    """
    try:
        flag = RiseSetFlag(flag)
    except ValueError as e:
        raise InvalidFlagError(f"flag must be RISE or SET, got {flag!r}") from e

    settings = settings or DEFAULT_SETTINGS
    dt = ts.as_aware(dt)
    day = _setup(dt)

    alpha = solar.sun_apparent_right_ascension(day.TD)
    delta = solar.sun_apparent_declination(day.TD)
    try:
        H0 = approx_local_hour_angle(phi, delta, offset)
    except NoEventError as e:
        LOGGER.debug("no %s at phi=%.4f on %s: %s", flag.value, phi, dt.date(), e.code.value)
        raise

    m0 = normalize_m((alpha - L - day.Theta0) / 360.0, day.utc_offset_min)
    m = m0 - H0 / 360.0 if flag is RiseSetFlag.RISE else m0 + H0 / 360.0

    delta_m = 1.0
    rounds = 0
    while abs(delta_m) > CONVERGENCE_DAY_FRACTION and rounds < MAX_ITERATIONS:
        delta_m = sun_rise_set_correction(day.T, day.Theta0, day.delta_t, phi, L, m, offset)
        m += delta_m
        rounds += 1
    LOGGER.debug("%s on %s: m=%.6f after %d rounds (last Δm=%.2e)", flag.value, dt.date(), m, rounds, delta_m)

    return localize(day.midnight_utc, m, dt, settings)
