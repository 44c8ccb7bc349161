from __future__ import annotations
import math

# JDE of the Meeus k=0 mean new moon and the mean synodic month.
K0_MEAN_NEW_MOON_JDE = 2451550.09766
SYNODIC_MONTH_DAYS = 29.530588861


def decimal_year_mid_month(year: int, month: int) -> float:
    """Decimal year at the middle of a month, y = year + (month - 0.5)/12, as used for ΔT."""
    return year + (month - 0.5) / 12.0

def k_from_jde(jde: float) -> float:
    """Fractional lunation index k of a Julian ephemeris date (k=0 is the 2000-01-06 new moon)."""
    return (jde - K0_MEAN_NEW_MOON_JDE) / SYNODIC_MONTH_DAYS

def k_floor(jde: float) -> int:
    """Index of the last mean new moon at or before jde."""
    return int(math.floor(k_from_jde(jde)))
