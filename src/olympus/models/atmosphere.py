"""
Layered atmosphere model.

Density is a step function over 10 km bands between sea level and the
Kármán line, zero above it, and an analytic barometric/ideal-gas estimate
at and below sea level (mine shafts, and the way to Tartarus).
"""
from __future__ import annotations

import math

from .planet import EARTH, Planet


def barometric_density(altitude: float, planet: Planet = EARTH) -> float:
    """
    Air density from the barometric formula and the ideal gas law.

    p = p0 * (1 - L * h) ** n
    ρ = p * M / (R * T)

    Parameters
    ----------
    altitude : float
        Altitude above sea level [m]. Negative values are below sea level.
    planet : Planet
        Source of the gas and pressure coefficients.

    Returns
    -------
    float
        Density [kg/m³]

    Notes
    -----
    The base of the power is clamped at zero. For altitudes at or below
    sea level it is always >= 1, so the clamp only matters when the
    formula is evaluated far above the altitude it was fitted for.
    """
    base = max(0.0, 1.0 - planet.pressure_lapse * altitude)
    p = planet.sea_level_pressure * base ** planet.pressure_exponent
    return (p * planet.air_molar_mass) / (planet.gas_constant * planet.air_temperature)


def air_density(altitude: float, planet: Planet = EARTH) -> float:
    """
    Air density at ``altitude`` [kg/m³].

    - above the Kármán line: 0 (vacuum)
    - between sea level and the Kármán line: table lookup, no interpolation
    - at or below sea level: :func:`barometric_density`

    Raises
    ------
    ValueError
        If altitude is NaN.
    """
    if math.isnan(altitude):
        raise ValueError("Altitude must be a number, got NaN")
    if altitude > planet.karman_line:
        return 0.0
    if altitude > 0.0:
        index = min(int(altitude / planet.band_width), len(planet.density_table) - 1)
        return planet.density_table[index]
    return barometric_density(altitude, planet)


class LayeredAtmosphere:
    """
    Density model bound to one planet.

    Parameters
    ----------
    planet : Planet
        Body whose density table and gas constants are used.

    Examples
    --------
    >>> atmosphere = LayeredAtmosphere()
    >>> atmosphere(0.0)  # doctest: +ELLIPSIS
    1.225...
    >>> atmosphere(150_000.0)
    0.0
    """

    def __init__(self, planet: Planet = EARTH) -> None:
        self.planet = planet

    def __call__(self, altitude: float) -> float:
        return air_density(altitude, self.planet)

    @property
    def karman_line(self) -> float:
        return self.planet.karman_line

    @property
    def table_limit(self) -> float:
        return self.planet.table_limit

    def profile(self, altitudes) -> list[float]:
        """Densities for a sequence of altitudes."""
        return [air_density(float(h), self.planet) for h in altitudes]
