"""
Tests for gravity and enclosed-mass models.
"""
import math

import pytest

from olympus.models.gravity import (
    earth_mass_enclosed,
    enclosed_mass,
    gravity_acceleration,
    gravity_force,
    volume_of_sphere,
)
from olympus.models.planet import EARTH, M_EARTH, R_EARTH, Planet


def test_gravity_symmetric_in_masses():
    for m1, m2, d in [(117.0, M_EARTH, R_EARTH), (1.0, 3.3, 0.7), (2.5e3, 7.1e22, 3.84e8)]:
        assert gravity_force(m1, m2, d) == gravity_force(m2, m1, d)


def test_gravity_inverse_square():
    f1 = gravity_force(117.0, M_EARTH, R_EARTH)
    f2 = gravity_force(117.0, M_EARTH, 2 * R_EARTH)
    assert f2 == pytest.approx(f1 / 4.0, rel=1e-12)


def test_surface_gravity():
    assert gravity_acceleration(0.0) == pytest.approx(9.82, rel=1e-3)


def test_volume_of_sphere():
    assert volume_of_sphere(1.0) == pytest.approx(4.0 / 3.0 * math.pi)
    assert volume_of_sphere(0.0) == 0.0


@pytest.mark.parametrize("altitude", [1e-9, 1.0, 100_000.0, 5.7e8])
def test_full_mass_above_surface(altitude):
    assert earth_mass_enclosed(altitude) == M_EARTH


@pytest.mark.parametrize("altitude", [-1.0, -1000.0, -R_EARTH / 2, -R_EARTH + 1.0])
def test_reduced_mass_below_surface(altitude):
    m = earth_mass_enclosed(altitude)
    assert 0.0 < m < M_EARTH


def test_zero_mass_at_center():
    assert earth_mass_enclosed(-R_EARTH) == 0.0


def test_half_radius_holds_an_eighth():
    assert earth_mass_enclosed(-R_EARTH / 2) == pytest.approx(M_EARTH / 8, rel=1e-9)


def test_past_center_stays_positive():
    assert earth_mass_enclosed(-1.5 * R_EARTH) == pytest.approx(M_EARTH / 8, rel=1e-9)


def test_constant_mass_variant():
    for altitude in [1000.0, 0.0, -1000.0, -R_EARTH / 2]:
        assert enclosed_mass(altitude, EARTH, depth_aware=False) == M_EARTH


def test_gravity_decreases_linearly_inside():
    g_surface = gravity_acceleration(0.0)
    g_half = gravity_acceleration(-R_EARTH / 2)
    assert g_half == pytest.approx(g_surface / 2, rel=1e-6)


def test_other_planet():
    moon = Planet(name="Moon", mass=7.35e22, radius=1.737e6)
    assert enclosed_mass(10.0, moon) == 7.35e22
    assert gravity_acceleration(0.0, moon) == pytest.approx(1.62, rel=0.01)


def test_invalid_planet():
    with pytest.raises(ValueError):
        Planet(mass=0.0)
    with pytest.raises(ValueError):
        Planet(radius=-1.0)
    with pytest.raises(ValueError):
        Planet(density_table=(1.0,))
