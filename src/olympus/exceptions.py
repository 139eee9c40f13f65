"""
Exception hierarchy for fall simulations.

Configuration problems subclass ValueError so callers that already guard
parameter parsing with ``except ValueError`` keep working.
"""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid simulation parameters, detected before integration starts."""


class IterationLimitError(ConfigurationError):
    """The run exceeded the external iteration cap (``max_steps``)."""


class NumericDegeneracyError(RuntimeError):
    """Integration produced a non-finite acceleration or state."""
