"""
Olympus physics models.

Pure functions used by the integrator:
- planet.py: physical constants (Planet, EARTH)
- atmosphere.py: layered air density
- gravity.py: Newtonian gravity and shell-theorem enclosed mass
- drag.py: quadratic cube drag, Stokes drag
"""

from .atmosphere import LayeredAtmosphere, air_density, barometric_density
from .drag import CUBE_DRAG_COEFFICIENT, drag_force, stokes_drag
from .gravity import (
    earth_mass_enclosed,
    enclosed_mass,
    gravity_acceleration,
    gravity_force,
    volume_of_sphere,
)
from .planet import DENSITY_AT_10KM, EARTH, Planet

__all__ = [
    "Planet",
    "EARTH",
    "DENSITY_AT_10KM",
    "LayeredAtmosphere",
    "air_density",
    "barometric_density",
    "CUBE_DRAG_COEFFICIENT",
    "drag_force",
    "stokes_drag",
    "gravity_force",
    "gravity_acceleration",
    "volume_of_sphere",
    "enclosed_mass",
    "earth_mass_enclosed",
]
