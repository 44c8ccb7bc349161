# reference/moon_phases.py
"""
True instants of the principal lunar phases (AA ch. 49).

Accuracy is a few seconds over several centuries around J2000; results are
JDE, i.e. on the TT scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

from . import astro_args as aa
from .time_scales import k_to_T
from ..core.time import K0_MEAN_NEW_MOON_JDE, SYNODIC_MONTH_DAYS
from ..core.types import MoonPhaseNumber


@dataclass(frozen=True)
class PhaseArgs:
    """Arguments of AA (49.4)-(49.7) and the eccentricity factor E (47.6), degrees."""
    k: float
    T: float
    E: float
    M: float
    Mp: float
    F: float
    Omega: float


class PeriodicTerm(NamedTuple):
    """coeff · E^e_power · sin(m·M + mp·M' + f·F + om·Ω)"""
    coeff: float
    e_power: int
    m: int
    mp: int
    f: int
    om: int = 0


# ------------------------------------------------------------
# Mean phase and arguments
# ------------------------------------------------------------

def mean_phase(k: float) -> float:
    """JDE of the mean phase (49.1); k is already offset by the phase quarter."""
    T = k_to_T(k)
    return (
        K0_MEAN_NEW_MOON_JDE
        + SYNODIC_MONTH_DAYS * k
        + T * T * (0.00015437 + T * (-0.000000150 + T * 0.00000000073))
    )


def phase_args(k: float) -> PhaseArgs:
    T = k_to_T(k)
    T2 = T * T
    T3 = T2 * T
    T4 = T3 * T
    return PhaseArgs(
        k=k,
        T=T,
        E=1.0 - 0.002516 * T - 0.0000074 * T2,
        M=aa.reduce_angle(2.5534 + 29.10535670 * k - 0.0000014 * T2 - 0.00000011 * T3),
        Mp=aa.reduce_angle(201.5643 + 385.81693528 * k + 0.0107582 * T2 + 0.00001238 * T3 - 0.000000058 * T4),
        F=aa.reduce_angle(160.7108 + 390.67050284 * k - 0.0016118 * T2 - 0.00000227 * T3 + 0.000000011 * T4),
        Omega=aa.reduce_angle(124.7746 - 1.56375588 * k + 0.0020672 * T2 + 0.00000215 * T3),
    )


# ------------------------------------------------------------
# Periodic terms (AA p351-352)
# ------------------------------------------------------------

# fmt: off
# leading terms that differ between new and full moon: (new, full, E power, M, M', F)
_SYZYGY_LEADING: Tuple[Tuple[float, float, int, int, int, int], ...] = (
    (-0.40720, -0.40614, 0, 0, 1, 0),
    ( 0.17241,  0.17302, 1, 1, 0, 0),
    ( 0.01608,  0.01614, 0, 0, 2, 0),
    ( 0.01039,  0.01043, 0, 0, 0, 2),
    ( 0.00739,  0.00734, 1, -1, 1, 0),
    (-0.00514, -0.00515, 1, 1, 1, 0),
    ( 0.00208,  0.00209, 2, 2, 0, 0),
)

SYZYGY_SHARED_TERMS: Tuple[PeriodicTerm, ...] = tuple(PeriodicTerm(*row) for row in (
    (-0.00111, 0,  0, 1, -2),
    (-0.00057, 0,  0, 1,  2),
    ( 0.00056, 1,  1, 2,  0),
    (-0.00042, 0,  0, 3,  0),
    ( 0.00042, 1,  1, 0,  2),
    ( 0.00038, 1,  1, 0, -2),
    (-0.00024, 1, -1, 2,  0),
    (-0.00017, 0,  0, 0,  0, 1),
    (-0.00007, 0,  2, 1,  0),
    ( 0.00004, 0,  0, 2, -2),
    ( 0.00004, 0,  3, 0,  0),
    ( 0.00003, 0,  1, 1, -2),
    ( 0.00003, 0,  0, 2,  2),
    (-0.00003, 0,  1, 1,  2),
    ( 0.00003, 0, -1, 1,  2),
    (-0.00002, 0, -1, 1, -2),
    (-0.00002, 0,  1, 3,  0),
    ( 0.00002, 0,  0, 4,  0),
))

NEW_MOON_TERMS: Tuple[PeriodicTerm, ...] = tuple(
    PeriodicTerm(new, e, m, mp, f) for new, _full, e, m, mp, f in _SYZYGY_LEADING
) + SYZYGY_SHARED_TERMS

FULL_MOON_TERMS: Tuple[PeriodicTerm, ...] = tuple(
    PeriodicTerm(full, e, m, mp, f) for _new, full, e, m, mp, f in _SYZYGY_LEADING
) + SYZYGY_SHARED_TERMS

QUARTER_TERMS: Tuple[PeriodicTerm, ...] = tuple(PeriodicTerm(*row) for row in (
    (-0.62801, 0,  0, 1,  0),
    ( 0.17172, 1,  1, 0,  0),
    (-0.01183, 1,  1, 1,  0),
    ( 0.00862, 0,  0, 2,  0),
    ( 0.00804, 0,  0, 0,  2),
    ( 0.00454, 1, -1, 1,  0),
    ( 0.00204, 2,  2, 0,  0),
    (-0.00180, 0,  0, 1, -2),
    (-0.00070, 0,  0, 1,  2),
    (-0.00040, 0,  0, 3,  0),
    (-0.00034, 1, -1, 2,  0),
    ( 0.00032, 1,  1, 0,  2),
    ( 0.00032, 1,  1, 0, -2),
    (-0.00028, 2,  2, 1,  0),
    ( 0.00027, 1,  1, 2,  0),
    (-0.00017, 0,  0, 0,  0, 1),
    (-0.00005, 0, -1, 1, -2),
    ( 0.00004, 0,  0, 2,  2),
    (-0.00004, 0,  1, 1,  2),
    ( 0.00004, 0, -2, 1,  0),
    ( 0.00003, 0,  1, 1, -2),
    ( 0.00003, 0,  3, 0,  0),
    ( 0.00002, 0,  0, 2, -2),
    ( 0.00002, 0, -1, 1,  2),
    (-0.00002, 0,  1, 3,  0),
))

# A1..A14 as (constant, k rate, T² rate), and their sine amplitudes
PLANETARY_ARGUMENTS: Tuple[Tuple[float, float, float], ...] = (
    (299.77, 0.107408, -0.009173),
    (251.88, 0.016321, 0.0),
    (251.83, 26.651886, 0.0),
    (349.42, 36.412478, 0.0),
    ( 84.66, 18.206239, 0.0),
    (141.74, 53.303771, 0.0),
    (207.14, 2.453732, 0.0),
    (154.84, 7.306860, 0.0),
    ( 34.52, 27.261239, 0.0),
    (207.19, 0.121824, 0.0),
    (291.34, 1.844379, 0.0),
    (161.72, 24.198154, 0.0),
    (239.56, 25.513099, 0.0),
    (331.55, 3.592518, 0.0),
)
PLANETARY_AMPLITUDES: Tuple[float, ...] = (
    0.000325, 0.000165, 0.000164, 0.000126, 0.000110, 0.000062, 0.000060,
    0.000056, 0.000047, 0.000042, 0.000040, 0.000037, 0.000035, 0.000023,
)
# fmt: on


def periodic_sum(terms: Tuple[PeriodicTerm, ...], a: PhaseArgs) -> float:
    total = 0.0
    for t in terms:
        arg = t.m * a.M + t.mp * a.Mp + t.f * a.F + t.om * a.Omega
        total += t.coeff * a.E ** t.e_power * aa.sind(arg)
    return total


def planetary_correction(a: PhaseArgs) -> float:
    """Additional corrections for all phases, from the arguments A1..A14."""
    total = 0.0
    for (c0, ck, cT2), amp in zip(PLANETARY_ARGUMENTS, PLANETARY_AMPLITUDES):
        total += amp * aa.sind(c0 + ck * a.k + cT2 * a.T * a.T)
    return total


def quarter_correction_W(a: PhaseArgs) -> float:
    """W, added for first quarter and subtracted for last quarter."""
    return (
        0.00306
        - 0.00038 * a.E * aa.cosd(a.M)
        + 0.00026 * aa.cosd(a.Mp)
        - 0.00002 * aa.cosd(a.Mp - a.M)
        + 0.00002 * aa.cosd(a.Mp + a.M)
        + 0.00002 * aa.cosd(2.0 * a.F)
    )


def true_phase(k: float, phase: int) -> float:
    """
    JDE of the true lunar phase.

    k:     integer lunation index (k=0 is the new moon of 2000-01-06)
    phase: 0 new moon, 1 first quarter, 2 full moon, 3 last quarter
    """
    phase = MoonPhaseNumber(phase)
    k = k + int(phase) / 4.0
    a = phase_args(k)

    jde = mean_phase(k)
    if phase is MoonPhaseNumber.NEW_MOON:
        jde += periodic_sum(NEW_MOON_TERMS, a)
    elif phase is MoonPhaseNumber.FULL_MOON:
        jde += periodic_sum(FULL_MOON_TERMS, a)
    else:
        jde += periodic_sum(QUARTER_TERMS, a)
        W = quarter_correction_W(a)
        jde += W if phase is MoonPhaseNumber.FIRST_QUARTER else -W

    return jde + planetary_correction(a)
