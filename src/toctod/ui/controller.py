"""Form state for the TOC/TOD calculator.

The controller keeps what the user typed, the selected units and the
airports found so far, and recomputes the whole profile whenever results
are requested.

Typical usage:
    controller = ProfileController(directory)
    controller.set_input("departure_icao", "sbgr")
    controller.search_airport("departure")
    controller.set_input("cruise_altitude_ft", "35000")
    print(format_profile(controller.display_results()))
"""

import math
from dataclasses import fields
from typing import Any

from toctod.airports.directory import (
    AirportDirectory,
    AirportLookupResult,
    AirportRecord,
    normalize_icao,
)
from toctod.core.logging_system import get_logger
from toctod.performance.profile_calculator import (
    CalculationResult,
    FlightInputs,
    FlightProfileCalculator,
)
from toctod.performance.units import RateUnit, SpeedUnit
from toctod.ui.display import DisplayResult

logger = get_logger(__name__)

DEPARTURE = "departure"
ARRIVAL = "arrival"

MSG_ICAO_REQUIRED = "Please enter an ICAO code"
MSG_AIRPORT_NOT_FOUND = "Airport not found."

_ICAO_FIELDS = {"departure_icao", "arrival_icao"}
_NUMERIC_FIELDS = {f.name for f in fields(FlightInputs)} - _ICAO_FIELDS


def parse_number(value: Any) -> float | None:
    """Parse a form value into a number.

    Args:
        value: Number, numeric string, empty string or None

    Returns:
        The number, or None if the value is empty or not numeric
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None

    text = str(value).strip()
    if not text:
        return None

    try:
        number = float(text)
    except ValueError:
        logger.debug("Ignoring non-numeric input %r", value)
        return None

    # "inf" and "nan" parse as floats but are not usable inputs
    if not math.isfinite(number):
        logger.debug("Ignoring non-finite input %r", value)
        return None
    return number


class ProfileController:
    """Holds the form state and drives the profile calculation.

    Attributes:
        inputs: Current flight parameters
        speed_unit: Unit applied to all three speeds
        rate_unit: Unit applied to both vertical rates
        airports: Airports found by search_airport, keyed by side
        errors: Error message per side, if the last search failed
    """

    def __init__(
        self,
        directory: AirportDirectory,
        speed_unit: SpeedUnit | str = SpeedUnit.KT,
        rate_unit: RateUnit | str = RateUnit.FT_MIN,
    ) -> None:
        """Initialize controller.

        Args:
            directory: Airport directory used by search_airport
            speed_unit: Initial speed unit
            rate_unit: Initial rate unit
        """
        self.directory = directory
        self.calculator = FlightProfileCalculator(directory)
        self.inputs = FlightInputs()
        self.speed_unit = SpeedUnit(speed_unit)
        self.rate_unit = RateUnit(rate_unit)
        self.airports: dict[str, AirportLookupResult] = {}
        self.errors: dict[str, str] = {}

    def set_input(self, name: str, value: Any) -> None:
        """Update one form field.

        Numeric fields accept numbers or numeric strings; anything else
        clears the field. Emptying either identifier clears both airports.

        Args:
            name: FlightInputs field name
            value: New value

        Raises:
            KeyError: If name is not a form field
        """
        if name in _ICAO_FIELDS:
            setattr(self.inputs, name, "" if value is None else str(value))
            if not self.inputs.departure_icao or not self.inputs.arrival_icao:
                self.airports.clear()
        elif name in _NUMERIC_FIELDS:
            setattr(self.inputs, name, parse_number(value))
        else:
            raise KeyError(f"Unknown input field: {name}")

    def set_speed_unit(self, unit: SpeedUnit | str) -> None:
        """Select the unit of the three speed fields."""
        self.speed_unit = SpeedUnit(unit)

    def set_rate_unit(self, unit: RateUnit | str) -> None:
        """Select the unit of the two rate fields."""
        self.rate_unit = RateUnit(unit)

    def search_airport(self, side: str) -> AirportLookupResult | None:
        """Look up the identifier typed for one side.

        Args:
            side: "departure" or "arrival"

        Returns:
            The airport found, or None (an error message is recorded)

        Raises:
            ValueError: If side is not "departure" or "arrival"
        """
        if side not in (DEPARTURE, ARRIVAL):
            raise ValueError(f"Unknown airport side: {side}")

        icao = getattr(self.inputs, f"{side}_icao")
        if not icao:
            self.errors[side] = MSG_ICAO_REQUIRED
            return None

        self.errors.pop(side, None)

        airport = self.directory.lookup(icao)
        if airport is None:
            logger.info("%s airport %s not found", side, normalize_icao(icao))
            self.errors[side] = MSG_AIRPORT_NOT_FOUND
            return None

        self.airports[side] = airport
        logger.info("%s airport set to %s (%d ft)", side, airport.icao, airport.elevation_ft)
        return airport

    def results(self) -> CalculationResult:
        """Compute the profile from the current state.

        Returns:
            CalculationResult; values may be non-finite
        """
        return self.calculator.compute_between(
            self.inputs,
            self.airports.get(DEPARTURE),
            self.airports.get(ARRIVAL),
            self.speed_unit,
            self.rate_unit,
        )

    def nearby_airports(self, side: str, radius_nm: float) -> list[tuple[AirportRecord, float]]:
        """List other airports within a radius of a searched airport.

        Args:
            side: "departure" or "arrival"
            radius_nm: Search radius in nautical miles

        Returns:
            (record, distance_nm) tuples sorted by distance; empty if the
            airport was not found or has no position
        """
        airport = self.airports.get(side)
        if airport is None or airport.position is None:
            return []

        return [
            (record, distance)
            for record, distance in self.directory.get_airports_near(airport.position, radius_nm)
            if normalize_icao(record.icao) != normalize_icao(airport.icao)
        ]

    def display_results(self) -> DisplayResult:
        """Compute the profile and sanitize it for display."""
        return DisplayResult.from_result(self.results())
