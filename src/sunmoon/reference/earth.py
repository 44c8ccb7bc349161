# reference/earth.py
"""
Earth orientation: obliquity of the ecliptic, nutation (IAU 1980 series as
tabulated in AA table 22.A) and Greenwich sidereal time.

All functions take T, Julian centuries since J2000.0, and return degrees.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import astro_args as aa
from . import constants as c


# ------------------------------------------------------------
# Fundamental arguments (AA p144)
# ------------------------------------------------------------

def moon_mean_elongation(T: float) -> float:
    """D, mean elongation of the Moon from the Sun."""
    return aa.reduce_angle(aa.polynomial(T, c.MOON_MEAN_ELONGATION))

def sun_mean_anomaly(T: float) -> float:
    """M, mean anomaly of the Sun (Earth)."""
    return aa.reduce_angle(aa.polynomial(T, c.SUN_MEAN_ANOMALY))

def moon_mean_anomaly(T: float) -> float:
    """M', mean anomaly of the Moon."""
    return aa.reduce_angle(aa.polynomial(T, c.MOON_MEAN_ANOMALY))

def moon_argument_of_latitude(T: float) -> float:
    """F, argument of latitude of the Moon."""
    return aa.reduce_angle(aa.polynomial(T, c.MOON_ARGUMENT_OF_LATITUDE))

def moon_ascending_node_longitude(T: float) -> float:
    """Ω, longitude of the ascending node of the Moon's mean orbit, from the mean equinox of date."""
    return aa.reduce_angle(aa.polynomial(T, c.MOON_ASCENDING_NODE_LONGITUDE))


@dataclass(frozen=True)
class NutationArgs:
    D: float
    M: float
    Mp: float
    F: float
    Omega: float


def nutation_args(T: float) -> NutationArgs:
    return NutationArgs(
        D=moon_mean_elongation(T),
        M=sun_mean_anomaly(T),
        Mp=moon_mean_anomaly(T),
        F=moon_argument_of_latitude(T),
        Omega=moon_ascending_node_longitude(T),
    )


# ------------------------------------------------------------
# Nutation
# ------------------------------------------------------------

def _term_argument(term: c.NutationTerm, a: NutationArgs) -> float:
    return term.d * a.D + term.m * a.M + term.mp * a.Mp + term.f * a.F + term.omega * a.Omega


def nutation_in_longitude(T: float) -> float:
    """Δψ in degrees."""
    a = nutation_args(T)
    delta_psi = 0.0
    for term in c.NUTATION_TERMS:
        delta_psi += (term.psi_a + term.psi_b * T) * aa.sind(_term_argument(term, a))
    return delta_psi / c.NUTATION_UNITS_PER_DEGREE


def nutation_in_obliquity(T: float) -> float:
    """Δε in degrees."""
    a = nutation_args(T)
    delta_eps = 0.0
    for term in c.NUTATION_TERMS:
        delta_eps += (term.eps_a + term.eps_b * T) * aa.cosd(_term_argument(term, a))
    return delta_eps / c.NUTATION_UNITS_PER_DEGREE


# ------------------------------------------------------------
# Obliquity
# ------------------------------------------------------------

def mean_obliquity_of_ecliptic(T: float) -> float:
    """ε0 (22.3), truncated to the first five terms; argument U = T/100."""
    U = T / 100.0
    return aa.polynomial(U, c.MEAN_OBLIQUITY_OF_ECLIPTIC)


def true_obliquity_of_ecliptic(T: float) -> float:
    """ε = ε0 + Δε."""
    return mean_obliquity_of_ecliptic(T) + nutation_in_obliquity(T)


# ------------------------------------------------------------
# Sidereal time at Greenwich (AA ch. 12)
# ------------------------------------------------------------

def mean_sidereal_time_greenwich(T: float) -> float:
    """
    θ0 (12.4), not reduced. T must be referred to UT.
    """
    days = T * aa.DAYS_PER_CENTURY
    return 280.46061837 + 360.98564736629 * days + 0.000387933 * T * T - T * T * T / 38710000.0


def apparent_sidereal_time_greenwich(T: float) -> float:
    """Mean sidereal time corrected by the nutation in right ascension, reduced to [0,360)."""
    theta0 = mean_sidereal_time_greenwich(T)
    eps = true_obliquity_of_ecliptic(T)
    delta_psi = nutation_in_longitude(T)
    return aa.reduce_angle(theta0 + delta_psi * aa.cosd(eps))
