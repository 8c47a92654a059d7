"""Speed and vertical rate unit conversion.

Speeds convert through knots; vertical rates convert between feet per
minute and meters per second. Any non-finite result is replaced by zero so a
corrupt value never reaches the profile calculation.

Typical usage:
    from toctod.performance.units import RateUnit, SpeedUnit, convert_rate, convert_speed

    speed_kt = convert_speed(463.0, SpeedUnit.KMH, SpeedUnit.KT)
    rate_fpm = convert_rate(10.0, RateUnit.M_S, RateUnit.FT_MIN)
"""

import math
from enum import Enum


class SpeedUnit(Enum):
    """Horizontal speed unit.

    Attributes:
        KT: Knots
        MPH: Statute miles per hour
        KMH: Kilometers per hour
    """

    KT = "kt"
    MPH = "mph"
    KMH = "kmh"


class RateUnit(Enum):
    """Vertical rate unit.

    Attributes:
        FT_MIN: Feet per minute
        M_S: Meters per second
    """

    FT_MIN = "ftmin"
    M_S = "ms"


# Multiply by these to get knots
_TO_KNOTS: dict[SpeedUnit, float] = {
    SpeedUnit.KT: 1.0,
    SpeedUnit.MPH: 0.868976,
    SpeedUnit.KMH: 0.539957,
}

# Multiply knots by these to get the unit
_FROM_KNOTS: dict[SpeedUnit, float] = {
    SpeedUnit.KT: 1.0,
    SpeedUnit.MPH: 1.15078,
    SpeedUnit.KMH: 1.852,
}

FT_MIN_TO_M_S = 0.00508
M_S_TO_FT_MIN = 196.85


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def convert_speed(value: float, from_unit: SpeedUnit | str, to_unit: SpeedUnit | str) -> float:
    """Convert a speed between units.

    Args:
        value: Speed in from_unit
        from_unit: Unit of value (enum member or its string value)
        to_unit: Target unit

    Returns:
        Speed in to_unit, or 0.0 if the result is not finite

    Raises:
        ValueError: If a unit is not a known speed unit

    Examples:
        >>> round(convert_speed(100.0, SpeedUnit.KT, SpeedUnit.KMH), 3)
        185.2
        >>> convert_speed(250.0, "kt", "kt")
        250.0
    """
    from_unit = SpeedUnit(from_unit)
    to_unit = SpeedUnit(to_unit)

    if from_unit is to_unit:
        return value

    return _finite_or_zero(value * _TO_KNOTS[from_unit] * _FROM_KNOTS[to_unit])


def convert_rate(value: float, from_unit: RateUnit | str, to_unit: RateUnit | str) -> float:
    """Convert a vertical rate between units.

    Args:
        value: Rate in from_unit
        from_unit: Unit of value (enum member or its string value)
        to_unit: Target unit

    Returns:
        Rate in to_unit, or 0.0 if the result is not finite

    Raises:
        ValueError: If a unit is not a known rate unit

    Examples:
        >>> round(convert_rate(1000.0, RateUnit.FT_MIN, RateUnit.M_S), 3)
        5.08
    """
    from_unit = RateUnit(from_unit)
    to_unit = RateUnit(to_unit)

    if from_unit is to_unit:
        return value

    if from_unit is RateUnit.FT_MIN:
        result = value * FT_MIN_TO_M_S
    else:
        result = value * M_S_TO_FT_MIN

    return _finite_or_zero(result)
