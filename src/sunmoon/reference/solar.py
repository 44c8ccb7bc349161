# reference/solar.py

from __future__ import annotations

from dataclasses import dataclass

from . import astro_args as aa
from . import constants as c
from . import earth


def sun_mean_longitude(T: float) -> float:
    """L0 (25.2), geometric mean longitude referred to the mean equinox of date."""
    return aa.reduce_angle(aa.polynomial(T, c.SUN_MEAN_LONGITUDE))


def sun_mean_anomaly(T: float) -> float:
    return earth.sun_mean_anomaly(T)


def moon_ascending_node_longitude(T: float) -> float:
    return earth.moon_ascending_node_longitude(T)


def sun_equation_of_center(T: float) -> float:
    """C, the Sun's equation of the center (AA p164)."""
    M = sun_mean_anomaly(T)
    return (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * aa.sind(M)
        + (0.019993 - 0.000101 * T) * aa.sind(2.0 * M)
        + 0.000290 * aa.sind(3.0 * M)
    )


def sun_true_longitude(T: float) -> float:
    return sun_mean_longitude(T) + sun_equation_of_center(T)


def sun_apparent_longitude(T: float) -> float:
    """λ, true longitude corrected for aberration and the leading nutation term."""
    Omega = moon_ascending_node_longitude(T)
    return sun_true_longitude(T) - 0.00569 - 0.00478 * aa.sind(Omega)


def _apparent_obliquity(T: float) -> float:
    # (25.8) correction on top of the true obliquity
    Omega = moon_ascending_node_longitude(T)
    return earth.true_obliquity_of_ecliptic(T) + 0.00256 * aa.cosd(Omega)


def sun_apparent_right_ascension(T: float) -> float:
    """α (25.6), reduced to [0,360)."""
    eps = _apparent_obliquity(T)
    lam = sun_apparent_longitude(T)
    return aa.reduce_angle(aa.atan2d(aa.cosd(eps) * aa.sind(lam), aa.cosd(lam)))


def sun_apparent_declination(T: float) -> float:
    """δ (25.7), in [-90,90]. Not reduced."""
    eps = _apparent_obliquity(T)
    lam = sun_apparent_longitude(T)
    return aa.asind(aa.sind(eps) * aa.sind(lam))


@dataclass(frozen=True)
class SolarPosition:
    """Apparent solar coordinates and intermediate quantities (degrees)."""
    T: float
    L0_deg: float
    M_deg: float
    C_deg: float
    L_true_deg: float
    L_app_deg: float
    Omega_deg: float
    eps_true_deg: float
    alpha_deg: float
    delta_deg: float


def solar_position(T: float) -> SolarPosition:
    L0 = sun_mean_longitude(T)
    C = sun_equation_of_center(T)
    return SolarPosition(
        T=T,
        L0_deg=L0,
        M_deg=sun_mean_anomaly(T),
        C_deg=C,
        L_true_deg=L0 + C,
        L_app_deg=sun_apparent_longitude(T),
        Omega_deg=moon_ascending_node_longitude(T),
        eps_true_deg=earth.true_obliquity_of_ecliptic(T),
        alpha_deg=sun_apparent_right_ascension(T),
        delta_deg=sun_apparent_declination(T),
    )
