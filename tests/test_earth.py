# tests/test_earth.py

import pytest

from sunmoon.reference import astro_args as aa
from sunmoon.reference import constants as c
from sunmoon.reference import earth


def test_nutation_table_shape():
    assert len(c.NUTATION_TERMS) == 63
    first = c.NUTATION_TERMS[0]
    assert (first.d, first.m, first.mp, first.f, first.omega) == (0, 0, 0, 0, 1)
    assert first.psi_a == -171996
    assert first.eps_a == 92025


def test_meeus_example_22a_nutation_and_obliquity():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 22.a.
    Date: 1987 April 10, 0h TD.
    JD: 2446895.5
    """
    T = aa.T_centuries(2446895.5)
    assert T == pytest.approx(-0.127296372348, abs=1e-12)

    a = earth.nutation_args(T)
    assert a.D == pytest.approx(136.9623, abs=1e-4)
    assert a.M == pytest.approx(94.9792, abs=1e-4)
    assert a.Mp == pytest.approx(229.2784, abs=1e-4)
    assert a.F == pytest.approx(143.4079, abs=1e-4)
    assert a.Omega == pytest.approx(11.2531, abs=1e-4)

    # arcseconds
    assert earth.nutation_in_longitude(T) * 3600.0 == pytest.approx(-3.788, abs=0.005)
    assert earth.nutation_in_obliquity(T) * 3600.0 == pytest.approx(9.443, abs=0.005)

    # eps0 = 23°26'27.407", eps = 23°26'36.850"
    assert earth.mean_obliquity_of_ecliptic(T) == pytest.approx(23.0 + 26.0 / 60 + 27.407 / 3600, abs=1e-5)
    assert earth.true_obliquity_of_ecliptic(T) == pytest.approx(23.0 + 26.0 / 60 + 36.850 / 3600, abs=1e-5)


def test_meeus_examples_12ab_sidereal_time():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Examples 12.a and 12.b.
    Date: 1987 April 10, 0h UT.
    """
    T = aa.T_centuries(2446895.5)

    # 13h10m46.3668s
    theta0 = aa.reduce_angle(earth.mean_sidereal_time_greenwich(T))
    assert theta0 == pytest.approx(197.693195, abs=1e-6)

    # 13h10m46.1351s
    theta = earth.apparent_sidereal_time_greenwich(T)
    assert theta == pytest.approx((13 + 10 / 60 + 46.1351 / 3600) * 15.0, abs=1e-5)


def test_mean_sidereal_time_is_not_reduced():
    T = aa.T_centuries(2446895.5)
    assert earth.mean_sidereal_time_greenwich(T) < 0.0
    assert 0.0 <= earth.apparent_sidereal_time_greenwich(T) < 360.0


def test_fundamental_arguments_are_reduced():
    for T in (-20.0, -1.3, 0.0, 0.2, 9.9):
        a = earth.nutation_args(T)
        for v in (a.D, a.M, a.Mp, a.F, a.Omega):
            assert 0.0 <= v < 360.0
