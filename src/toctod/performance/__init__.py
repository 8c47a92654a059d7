"""Flight profile calculation systems.

This module provides:
- Speed and vertical rate unit conversion
- Top-of-climb / top-of-descent and cruise segment calculation
"""

from toctod.performance.profile_calculator import (
    FALLBACK_PADDING_NM,
    CalculationResult,
    FlightInputs,
    FlightProfileCalculator,
    compute_profile,
)
from toctod.performance.units import RateUnit, SpeedUnit, convert_rate, convert_speed

__all__ = [
    "FALLBACK_PADDING_NM",
    "CalculationResult",
    "FlightInputs",
    "FlightProfileCalculator",
    "RateUnit",
    "SpeedUnit",
    "compute_profile",
    "convert_rate",
    "convert_speed",
]
