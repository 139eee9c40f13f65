"""
Validation utilities for simulation parameters.

Provides functions to validate inputs before integration starts,
ensuring physical consistency and numerical stability.
"""
from __future__ import annotations

import math
import warnings

from olympus.exceptions import ConfigurationError


def validate_finite(value: float, name: str) -> None:
    """Validate that a value is a finite number."""
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value}")


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Validate that a scalar value is positive.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages
    strict : bool
        If True, raise ConfigurationError. If False, issue warning.

    Raises
    ------
    ConfigurationError
        If strict=True and value <= 0 (or NaN)
    """
    if not value > 0:
        msg = f"{name} must be positive, got {value}"
        if strict:
            raise ConfigurationError(msg)
        else:
            warnings.warn(msg, RuntimeWarning, stacklevel=2)


def validate_non_negative(value: float, name: str) -> None:
    """Validate that a value is non-negative."""
    if not value >= 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value}")


def validate_timestep(dt: float, max_dt: float = 1.0) -> None:
    """
    Validate timestep is positive and reasonable.

    Parameters
    ----------
    dt : float
        Time step [s]
    max_dt : float
        Maximum reasonable timestep [s]

    Raises
    ------
    ConfigurationError
        If timestep is not a positive finite number
    """
    if not (dt > 0 and math.isfinite(dt)):
        raise ConfigurationError(f"Timestep must be positive, got {dt}")
    if dt > max_dt:
        warnings.warn(
            f"Large timestep {dt}s may cause instability in the lower atmosphere. "
            f"Consider using dt < {max_dt}s.",
            RuntimeWarning,
            stacklevel=2
        )
