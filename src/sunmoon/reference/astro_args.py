from __future__ import annotations

from math import fmod
from typing import Sequence

import math


# ------------------------------------------------------------
# Degree-based trigonometry
# ------------------------------------------------------------

def sind(x_deg: float) -> float:
    return math.sin(math.radians(x_deg))

def cosd(x_deg: float) -> float:
    return math.cos(math.radians(x_deg))

def tand(x_deg: float) -> float:
    return math.tan(math.radians(x_deg))

def asind(x: float) -> float:
    return math.degrees(math.asin(x))

def acosd(x: float) -> float:
    return math.degrees(math.acos(x))

def atand(x: float) -> float:
    return math.degrees(math.atan(x))

def atan2d(y: float, x: float) -> float:
    """Quadrant-preserving arctangent in degrees, in (-180, 180]."""
    return math.degrees(math.atan2(y, x))


# ------------------------------------------------------------
# Angle reduction
# ------------------------------------------------------------

def reduce_angle(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    # avoid slow % for huge values; fmod is fine
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # fmod(-tiny) + 360 rounds up to exactly 360.0
    if y >= 360.0:
        y = 0.0
    return y

def fold180(x_deg: float) -> float:
    """Reduce and fold degrees to (-180, 180]."""
    y = reduce_angle(x_deg)
    if y > 180.0:
        y -= 360.0
    return y

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0


# ------------------------------------------------------------
# Polynomials & interpolation
# ------------------------------------------------------------

def polynomial(x: float, coeffs: Sequence[float]) -> float:
    """Horner evaluation for Σ coeffs[k] x^k (lowest degree first)."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc


def interpolate_from_three(
    y1: float,
    y2: float,
    y3: float,
    n: float,
    normalize: bool = False,
) -> float:
    """
    Three-point interpolation (AA eq. 3.3) for tabulated values y1, y2, y3 at
    equally spaced arguments, evaluated at n tabular intervals from y2.

    normalize:
        Re-centre y1 and y3 on y2 by ±360 first. Needed for angles reduced to
        [0,360) that may wrap between samples, such as right ascension.
        Declination is bounded to [-90,90] and must be interpolated as is.
    """
    if normalize:
        y1 = _recentre(y1, y2)
        y3 = _recentre(y3, y2)
    a = y2 - y1
    b = y3 - y2
    c = b - a
    return y2 + 0.5 * n * (a + b + n * c)


def _recentre(y: float, ref: float) -> float:
    if y - ref > 180.0:
        return y - 360.0
    if y - ref < -180.0:
        return y + 360.0
    return y


# ------------------------------------------------------------
# Time variable
# ------------------------------------------------------------

J2000 = 2451545.0  # JD at J2000.0
DAYS_PER_CENTURY = 36525.0


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY
