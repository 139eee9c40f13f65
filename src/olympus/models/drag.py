"""
Drag force models.

Physical units:
- Forces: Newtons [N]
- Velocities: meters per second [m/s]
- Densities: kilograms per cubic meter [kg/m³]
"""
from __future__ import annotations

import math

CUBE_DRAG_COEFFICIENT = 1.09  # flat face of a cube, [-]


def drag_force(
    density: float,
    velocity: float,
    width: float,
    coefficient: float = CUBE_DRAG_COEFFICIENT,
) -> float:
    """
    Quadratic drag on a cube presenting one face to the flow.

    F = 0.5 * ρ * v² * w² * Cd

    The result is a magnitude and does not depend on the sign of the
    velocity; the caller applies it against the direction of motion.

    Parameters
    ----------
    density : float
        Air density [kg/m³]
    velocity : float
        Speed relative to the air [m/s]
    width : float
        Side length of the cube [m]
    coefficient : float
        Drag coefficient [-]

    Returns
    -------
    float
        Drag magnitude [N]
    """
    return 0.5 * density * velocity * velocity * width * width * coefficient


def stokes_drag(viscosity: float, radius: float, velocity: float) -> float:
    """
    Linear (Stokes) drag on a sphere, F = 6π μ r v.

    Only valid for laminar, low Reynolds number flow. Not used by the
    integrator; an anvil falling from orbit is far outside that regime.
    """
    return 6.0 * math.pi * viscosity * radius * velocity
