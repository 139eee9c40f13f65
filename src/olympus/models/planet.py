"""
Physical constants of the attracting body.

Constants are bundled in an immutable dataclass and passed into the models
instead of being read from module globals, so tests (or a curious user) can
drop an anvil on another planet.

Physical units:
- Masses: kilograms [kg]
- Lengths: meters [m]
- Densities: kilograms per cubic meter [kg/m³]
- Pressure: Pascal [Pa]
"""
from __future__ import annotations

import math
from dataclasses import dataclass

# Sampled at 10 km bands from sea level to the Kármán line.
# At -1000 m the analytic branch gives about 1.347.
DENSITY_AT_10KM: tuple[float, ...] = (
    1.22, 0.413, 8.89e-2, 1.84e-2, 4e-3, 1.03e-3, 3.1e-4, 8.3e-5, 1.85e-5, 4.12e-6, 0.0,
)

GRAVITATIONAL_CONSTANT = 6.67e-11  # m³/(kg·s²)
M_EARTH = 5.97e24  # kg
R_EARTH = 6.367e6  # average radius [m]
KARMAN_LINE = 100_000.0  # m


@dataclass(frozen=True)
class Planet:
    """
    Gravitating body with a layered atmosphere.

    Parameters
    ----------
    name : str
        Label used in reports.
    G : float
        Gravitational constant [m³/(kg·s²)].
    mass : float
        Total mass [kg].
    radius : float
        Mean radius [m].
    karman_line : float
        Altitude above which the atmosphere is treated as vacuum [m].
    density_table : tuple[float, ...]
        Air density samples, one per altitude band starting at sea level [kg/m³].
    band_width : float
        Height of one density table band [m].
    sea_level_pressure, pressure_lapse, pressure_exponent : float
        Coefficients of the barometric formula used at and below sea level.
    gas_constant, air_temperature, air_molar_mass : float
        Ideal gas law parameters for converting pressure to density.
    """

    name: str = "Earth"
    G: float = GRAVITATIONAL_CONSTANT
    mass: float = M_EARTH
    radius: float = R_EARTH
    karman_line: float = KARMAN_LINE
    density_table: tuple[float, ...] = DENSITY_AT_10KM
    band_width: float = 10_000.0
    sea_level_pressure: float = 101_325.0
    pressure_lapse: float = 2.25577e-5
    pressure_exponent: float = 5.25588
    gas_constant: float = 8.314
    air_temperature: float = 288.0
    air_molar_mass: float = 0.02897

    def __post_init__(self) -> None:
        if self.mass <= 0:
            raise ValueError(f"Planet mass must be positive, got {self.mass}")
        if self.radius <= 0:
            raise ValueError(f"Planet radius must be positive, got {self.radius}")
        if self.band_width <= 0:
            raise ValueError(f"Band width must be positive, got {self.band_width}")
        if len(self.density_table) < 2:
            raise ValueError("Density table needs at least two samples")
        # Accept lists from callers but keep the instance hashable
        object.__setattr__(self, "density_table", tuple(float(x) for x in self.density_table))

    @property
    def table_limit(self) -> float:
        """Highest tabulated band boundary; drag is only applied below it [m]."""
        return (len(self.density_table) - 1) * self.band_width

    @property
    def mean_density(self) -> float:
        """Uniform density of the planet's interior [kg/m³]."""
        return self.mass / (4.0 / 3.0 * math.pi * self.radius ** 3)


EARTH = Planet()
