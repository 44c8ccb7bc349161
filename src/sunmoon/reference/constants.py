# reference/constants.py
"""
Coefficient tables for the solar and Earth-orientation series (Meeus, AA ch. 12, 22, 25).

Polynomials are stored lowest degree first, for use with astro_args.polynomial().
"""

from __future__ import annotations

from typing import NamedTuple, Tuple


# (22.3), first five terms, in degrees, argument U = T/100
MEAN_OBLIQUITY_OF_ECLIPTIC: Tuple[float, ...] = (
    23.439291111,
    -1.300258333,
    -0.000430556,
    0.555347222,
    -0.014272222,
)

# Fundamental arguments for nutation (AA p144), degrees, argument T
MOON_MEAN_ELONGATION: Tuple[float, ...] = (297.85036, 445267.111480, -0.0019142, 1.0 / 189474.0)
SUN_MEAN_ANOMALY: Tuple[float, ...] = (357.52772, 35999.050340, -0.0001603, -1.0 / 300000.0)
MOON_MEAN_ANOMALY: Tuple[float, ...] = (134.96298, 477198.867398, 0.0086972, 1.0 / 56250.0)
MOON_ARGUMENT_OF_LATITUDE: Tuple[float, ...] = (93.27191, 483202.017538, -0.0036825, 1.0 / 327270.0)
MOON_ASCENDING_NODE_LONGITUDE: Tuple[float, ...] = (125.04452, -1934.136261, 0.0020708, 1.0 / 450000.0)

# (25.2) geometric mean longitude of the Sun
SUN_MEAN_LONGITUDE: Tuple[float, ...] = (280.46646, 36000.76983, 0.0003032)


class NutationTerm(NamedTuple):
    """One row of AA table 22.A; coefficients in units of 0.0001 arcsec."""
    d: int
    m: int
    mp: int
    f: int
    omega: int
    psi_a: float
    psi_b: float
    eps_a: float
    eps_b: float


# fmt: off
NUTATION_TERMS: Tuple[NutationTerm, ...] = tuple(NutationTerm(*row) for row in (
    # D   M   M'  F   Ω        Δψ            Δε
    ( 0,  0,  0,  0,  1, -171996, -174.2, 92025,  8.9),
    (-2,  0,  0,  2,  2,  -13187,   -1.6,  5736, -3.1),
    ( 0,  0,  0,  2,  2,   -2274,   -0.2,   977, -0.5),
    ( 0,  0,  0,  0,  2,    2062,    0.2,  -895,  0.5),
    ( 0,  1,  0,  0,  0,    1426,   -3.4,    54, -0.1),
    ( 0,  0,  1,  0,  0,     712,    0.1,    -7,  0.0),
    (-2,  1,  0,  2,  2,    -517,    1.2,   224, -0.6),
    ( 0,  0,  0,  2,  1,    -386,   -0.4,   200,  0.0),
    ( 0,  0,  1,  2,  2,    -301,    0.0,   129, -0.1),
    (-2, -1,  0,  2,  2,     217,   -0.5,   -95,  0.3),
    (-2,  0,  1,  0,  0,    -158,    0.0,     0,  0.0),
    (-2,  0,  0,  2,  1,     129,    0.1,   -70,  0.0),
    ( 0,  0, -1,  2,  2,     123,    0.0,   -53,  0.0),
    ( 2,  0,  0,  0,  0,      63,    0.0,     0,  0.0),
    ( 0,  0,  1,  0,  1,      63,    0.1,   -33,  0.0),
    ( 2,  0, -1,  2,  2,     -59,    0.0,    26,  0.0),
    ( 0,  0, -1,  0,  1,     -58,   -0.1,    32,  0.0),
    ( 0,  0,  1,  2,  1,     -51,    0.0,    27,  0.0),
    (-2,  0,  2,  0,  0,      48,    0.0,     0,  0.0),
    ( 0,  0, -2,  2,  1,      46,    0.0,   -24,  0.0),
    ( 2,  0,  0,  2,  2,     -38,    0.0,    16,  0.0),
    ( 0,  0,  2,  2,  2,     -31,    0.0,    13,  0.0),
    ( 0,  0,  2,  0,  0,      29,    0.0,     0,  0.0),
    (-2,  0,  1,  2,  2,      29,    0.0,   -12,  0.0),
    ( 0,  0,  0,  2,  0,      26,    0.0,     0,  0.0),
    (-2,  0,  0,  2,  0,     -22,    0.0,     0,  0.0),
    ( 0,  0, -1,  2,  1,      21,    0.0,   -10,  0.0),
    ( 0,  2,  0,  0,  0,      17,   -0.1,     0,  0.0),
    ( 2,  0, -1,  0,  1,      16,    0.0,    -8,  0.0),
    (-2,  2,  0,  2,  2,     -16,    0.1,     7,  0.0),
    ( 0,  1,  0,  0,  1,     -15,    0.0,     9,  0.0),
    (-2,  0,  1,  0,  1,     -13,    0.0,     7,  0.0),
    ( 0, -1,  0,  0,  1,     -12,    0.0,     6,  0.0),
    ( 0,  0,  2, -2,  0,      11,    0.0,     0,  0.0),
    ( 2,  0, -1,  2,  1,     -10,    0.0,     5,  0.0),
    ( 2,  0,  1,  2,  2,      -8,    0.0,     3,  0.0),
    ( 0,  1,  0,  2,  2,       7,    0.0,    -3,  0.0),
    (-2,  1,  1,  0,  0,      -7,    0.0,     0,  0.0),
    ( 0, -1,  0,  2,  2,      -7,    0.0,     3,  0.0),
    ( 2,  0,  0,  2,  1,      -7,    0.0,     3,  0.0),
    ( 2,  0,  1,  0,  0,       6,    0.0,     0,  0.0),
    (-2,  0,  2,  2,  2,       6,    0.0,    -3,  0.0),
    (-2,  0,  1,  2,  1,       6,    0.0,    -3,  0.0),
    ( 2,  0, -2,  0,  1,      -6,    0.0,     3,  0.0),
    ( 2,  0,  0,  0,  1,      -6,    0.0,     3,  0.0),
    ( 0, -1,  1,  0,  0,       5,    0.0,     0,  0.0),
    (-2, -1,  0,  2,  1,      -5,    0.0,     3,  0.0),
    (-2,  0,  0,  0,  1,      -5,    0.0,     3,  0.0),
    ( 0,  0,  2,  2,  1,      -5,    0.0,     3,  0.0),
    (-2,  0,  2,  0,  1,       4,    0.0,     0,  0.0),
    (-2,  1,  0,  2,  1,       4,    0.0,     0,  0.0),
    ( 0,  0,  1, -2,  0,       4,    0.0,     0,  0.0),
    (-1,  0,  1,  0,  0,      -4,    0.0,     0,  0.0),
    (-2,  1,  0,  0,  0,      -4,    0.0,     0,  0.0),
    ( 1,  0,  0,  0,  0,      -4,    0.0,     0,  0.0),
    ( 0,  0,  1,  2,  0,       3,    0.0,     0,  0.0),
    ( 0,  0, -2,  2,  2,      -3,    0.0,     0,  0.0),
    (-1, -1,  1,  0,  0,      -3,    0.0,     0,  0.0),
    ( 0,  1,  1,  0,  0,      -3,    0.0,     0,  0.0),
    ( 0, -1,  1,  2,  2,      -3,    0.0,     0,  0.0),
    ( 2, -1, -1,  2,  2,      -3,    0.0,     0,  0.0),
    ( 0,  0,  3,  2,  2,      -3,    0.0,     0,  0.0),
    ( 2, -1,  0,  2,  2,      -3,    0.0,     0,  0.0),
))
# fmt: on

# Nutation sums are in 0.0001 arcsec; dividing by this gives degrees.
NUTATION_UNITS_PER_DEGREE = 36_000_000.0
