"""
Newtonian gravity with depth-dependent enclosed mass.

Below the surface only the mass at a smaller radius attracts the object
(shell theorem), assuming a planet of uniform density.
"""
from __future__ import annotations

import math

from .planet import EARTH, GRAVITATIONAL_CONSTANT, Planet


def gravity_force(m1: float, m2: float, d: float, G: float = GRAVITATIONAL_CONSTANT) -> float:
    """
    Magnitude of the gravitational force between two point masses.

    F = G * m1 * m2 / d²   ((m³/(kg s²)) kg kg / m m = kg m/s²)

    Parameters
    ----------
    m1, m2 : float
        Masses [kg]
    d : float
        Distance between the centers [m]. Undefined at 0.
    G : float
        Gravitational constant [m³/(kg·s²)]

    Returns
    -------
    float
        Force [N]
    """
    return G * (m1 * m2) / (d * d)


def volume_of_sphere(radius: float) -> float:
    """Volume of a sphere [m³]."""
    return 4.0 / 3.0 * math.pi * radius ** 3


def enclosed_mass(altitude: float, planet: Planet = EARTH, depth_aware: bool = True) -> float:
    """
    Planet mass that attracts an object at ``altitude``.

    Parameters
    ----------
    altitude : float
        Height above the surface [m]. Negative values are depths.
    planet : Planet
        Attracting body.
    depth_aware : bool
        If False, the full planet mass is used at every depth
        (constant-mass approximation).

    Returns
    -------
    float
        Enclosed mass [kg]. The full mass above the surface, the mass of the
        inner sphere of radius ``R + altitude`` below it, 0 at the center.
    """
    if altitude > 0.0 or not depth_aware:
        return planet.mass
    # abs() keeps the value well defined once the object passes the center
    return planet.mean_density * abs(volume_of_sphere(planet.radius + altitude))


def earth_mass_enclosed(altitude: float) -> float:
    """Enclosed mass of the default Earth model [kg]."""
    return enclosed_mass(altitude, EARTH)


def gravity_acceleration(
    altitude: float,
    planet: Planet = EARTH,
    depth_aware: bool = True,
) -> float:
    """Gravitational acceleration at ``altitude`` [m/s²], positive toward the center."""
    m = enclosed_mass(altitude, planet, depth_aware)
    return gravity_force(1.0, m, altitude + planet.radius, planet.G)
