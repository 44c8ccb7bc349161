from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
import math
from typing import Optional, Union

from .deltat import delta_t_for_datetime
from .astro_args import DAYS_PER_CENTURY, J2000
from ..core.time import k_from_jde


# ============================================================
# datetime(UTC) <-> JD(UTC)
# ============================================================

_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC
_UTC_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def datetime_utc_to_jd(dt: datetime) -> float:
    """
    datetime -> JD (UTC). Requires a timezone-aware datetime.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    delta = dt.astimezone(timezone.utc) - _UTC_EPOCH
    return _JD_UNIX_EPOCH + delta.days + (delta.seconds + delta.microseconds / 1e6) / 86400.0


def jd_to_datetime_utc(jd: float) -> datetime:
    """
    JD (UTC) -> timezone-aware datetime in UTC.
    """
    # timedelta arithmetic stays valid before 1970 on every platform
    return _UTC_EPOCH + timedelta(days=jd - _JD_UNIX_EPOCH)


# ============================================================
# Julian centuries and lunations
# ============================================================

def T_from_jd(jd: float) -> float:
    """
    T = (JD - 2451545.0) / 36525
    """
    return (jd - J2000) / DAYS_PER_CENTURY


def jd_from_T(T: float) -> float:
    return J2000 + DAYS_PER_CENTURY * T


def datetime_to_T(dt: datetime) -> float:
    """Julian centuries from J2000.0 of an aware datetime, on the UT scale."""
    return T_from_jd(datetime_utc_to_jd(dt))


# Lunations per Julian century, AA (49.3)
LUNATIONS_PER_CENTURY = 1236.85


def k_to_T(k: float) -> float:
    return k / LUNATIONS_PER_CENTURY


def jd_to_k(jd: float) -> float:
    """Approximate lunation index for a JD (AA 49.2, inverted), not rounded."""
    return k_from_jde(jd)


# ============================================================
# TT -> civil time
# ============================================================

def jde_to_datetime(jde: float, tz: Optional[tzinfo] = None) -> datetime:
    """
    JDE (TT) -> aware datetime in tz (UTC when tz is None).

    Solves jde = jd_utc + ΔT(jd_utc)/86400 with 2 fixed-point iterations;
    ΔT varies slowly enough for sub-second consistency.
    """
    jd_utc = jde
    for _ in range(2):
        dT = delta_t_for_datetime(jd_to_datetime_utc(jd_utc))
        jd_utc = jde - dT / 86400.0
    out = jd_to_datetime_utc(jd_utc)
    return out.astimezone(tz or timezone.utc)


# ============================================================
# Local date helpers for the event solver
# ============================================================

def as_aware(dt: Union[date, datetime]) -> datetime:
    """
    Accept a plain date (taken as UTC midnight) or an aware datetime.
    Naive datetimes are rejected.
    """
    if isinstance(dt, datetime):
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError("datetime must be timezone-aware")
        return dt
    if isinstance(dt, date):
        return datetime(dt.year, dt.month, dt.day, tzinfo=timezone.utc)
    raise TypeError(f"expected date or datetime, got {type(dt).__name__}")


def utc_midnight_of_local_date(dt: datetime) -> datetime:
    """
    The caller's local calendar date at 00:00, with the wall clock reinterpreted as UTC.
    """
    return datetime(dt.year, dt.month, dt.day, tzinfo=timezone.utc)


def utc_offset_minutes(dt: datetime) -> float:
    """Caller's UTC offset in minutes, east positive (DST included)."""
    off = dt.utcoffset()
    if off is None:
        raise ValueError("datetime must be timezone-aware")
    return off.total_seconds() / 60.0


def seconds_from_day_fraction(m: float) -> int:
    """m·86400 rounded to whole seconds, ties away from zero."""
    return int(math.copysign(math.floor(abs(m) * 86400.0 + 0.5), m))


def round_to_minute(dt: datetime) -> datetime:
    """Nearest whole minute; half a minute rounds up."""
    return (dt + timedelta(seconds=30)).replace(second=0, microsecond=0)
