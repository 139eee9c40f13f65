import math

import pytest

from olympus.models.drag import CUBE_DRAG_COEFFICIENT, drag_force, stokes_drag


def test_drag_known_value():
    expected = 0.5 * 1.225 * 10.0 ** 2 * 0.279 ** 2 * 1.09
    assert drag_force(1.225, 10.0, 0.279) == pytest.approx(expected)
    assert CUBE_DRAG_COEFFICIENT == 1.09


@pytest.mark.parametrize("v", [0.0, 0.1, 148.7, 11_000.0])
def test_drag_invariant_to_velocity_sign(v):
    assert drag_force(0.413, v, 0.279) == drag_force(0.413, -v, 0.279)


def test_drag_quadratic_in_speed():
    assert drag_force(1.0, 20.0, 1.0) == pytest.approx(4 * drag_force(1.0, 10.0, 1.0))


def test_no_drag_without_air_or_area():
    assert drag_force(0.0, 500.0, 0.279) == 0.0
    assert drag_force(1.22, 500.0, 0.0) == 0.0


def test_stokes_drag_linear():
    f = stokes_drag(1.8e-5, 0.1, 2.0)
    assert f == pytest.approx(6 * math.pi * 1.8e-5 * 0.1 * 2.0)
    assert stokes_drag(1.8e-5, 0.1, 4.0) == pytest.approx(2 * f)
