"""Text rendering of a computed flight profile.

Every value passes through sanitize_value before it is shown, so a profile
computed from a zero speed or rate is displayed with zeros instead of
nan or inf.
"""

import math
from dataclasses import dataclass

from toctod.airports.directory import AirportLookupResult, AirportRecord
from toctod.performance.profile_calculator import CalculationResult

DISCLAIMER = (
    "The calculations are approximate. Use them for planning and training only. "
    "Always follow the recommended procedures and the manufacturer's flight profile."
)


def sanitize_value(value: float | None) -> float:
    """Replace missing or non-finite values with zero.

    Args:
        value: Computed value

    Returns:
        value, or 0 if it is None, nan or infinite
    """
    if value is None or not math.isfinite(value):
        return 0
    return value


@dataclass(frozen=True)
class DisplayResult:
    """Profile values that are safe to show.

    Attributes:
        toc_distance_nm: Distance to TOC (NM, one decimal)
        tod_distance_nm: Distance from TOD (NM, one decimal)
        total_distance_nm: Total distance (NM, one decimal)
        climb_time_min: Climb time (whole minutes)
        cruise_time_min: Cruise time (whole minutes)
        descent_time_min: Descent time (whole minutes)
        total_time_min: Total time (whole minutes)
    """

    toc_distance_nm: float
    tod_distance_nm: float
    total_distance_nm: float
    climb_time_min: int
    cruise_time_min: int
    descent_time_min: int
    total_time_min: int

    @classmethod
    def from_result(cls, result: CalculationResult) -> "DisplayResult":
        """Sanitize a calculation result for display."""
        return cls(
            toc_distance_nm=float(sanitize_value(result.toc_distance_nm)),
            tod_distance_nm=float(sanitize_value(result.tod_distance_nm)),
            total_distance_nm=float(sanitize_value(result.total_distance_nm)),
            climb_time_min=int(sanitize_value(result.climb_time_min)),
            cruise_time_min=int(sanitize_value(result.cruise_time_min)),
            descent_time_min=int(sanitize_value(result.descent_time_min)),
            total_time_min=int(sanitize_value(result.total_time_min)),
        )


def format_airport(label: str, airport: AirportLookupResult | None) -> list[str]:
    """Format the airport summary lines shown under an identifier."""
    if airport is None:
        return [f"{label}: unknown airport (sea level, no position)"]

    return [
        f"{label}: {airport.icao} - {airport.name}",
        f"  {airport.city}, {airport.state}",
        f"  Elevation: {airport.elevation_ft} ft ({airport.elevation_m} m)",
    ]


def format_nearby(icao: str, radius_nm: float, nearby: list[tuple[AirportRecord, float]]) -> str:
    """Render airports found around an airport, nearest first."""
    lines = [f"Airports within {radius_nm:g} NM of {icao}"]
    if not nearby:
        lines.append("  none")
    for record, distance in nearby:
        lines.append(f"  {record.icao} - {record.name}: {distance:.1f} NM")
    return "\n".join(lines)


def format_profile(
    display: DisplayResult,
    departure: AirportLookupResult | None = None,
    arrival: AirportLookupResult | None = None,
) -> str:
    """Render the profile as a text block.

    Args:
        display: Sanitized profile values
        departure: Departure airport, if found
        arrival: Arrival airport, if found

    Returns:
        Multi-line text
    """
    lines = format_airport("Departure", departure) + format_airport("Arrival", arrival)
    lines += [
        "",
        "Climb phase",
        f"  Distance to TOC: {display.toc_distance_nm:.1f} NM",
        f"  Climb time: {display.climb_time_min} min",
        "Cruise phase",
        f"  Cruise time: {display.cruise_time_min} min",
        "Descent phase",
        f"  Distance from TOD: {display.tod_distance_nm:.1f} NM",
        f"  Descent time: {display.descent_time_min} min",
        "Total flight",
        f"  Total distance: {display.total_distance_nm:.1f} NM",
        f"  Total time: {display.total_time_min} min",
        "",
        f"Note: {DISCLAIMER}",
    ]
    return "\n".join(lines)
