"""Vertical flight profile calculation.

Derives top-of-climb (TOC) and top-of-descent (TOD) distances, the cruise
segment, and phase times from cruise altitude, speeds, vertical rates and
the two airports' elevations and positions.

The calculation is a pure function of its inputs. Division by zero follows
IEEE-754 (x/0 -> inf, 0/0 -> nan) and the non-finite values are returned to
the caller as they are; the display layer decides how to show them.

Typical usage:
    from toctod.performance import FlightInputs, compute_profile

    inputs = FlightInputs(
        cruise_altitude_ft=35000,
        climb_speed=250, cruise_speed=450, descent_speed=280,
        climb_rate=2000, descent_rate=1500,
    )
    result = compute_profile(inputs, "kt", "ftmin", 2459, 28, sbgr_pos, sbgl_pos)
    print(f"TOC at {result.toc_distance_nm} NM")
"""

import logging
from dataclasses import dataclass

from toctod.airports.directory import AirportDirectory, AirportLookupResult
from toctod.core.numeric import ieee_divide, round_half_up
from toctod.navigation.great_circle import GeoPosition, haversine_distance_nm
from toctod.performance.units import RateUnit, SpeedUnit, convert_rate, convert_speed

logger = logging.getLogger(__name__)

# Added to TOC + TOD when airport positions are unknown
FALLBACK_PADDING_NM = 100.0


@dataclass
class FlightInputs:
    """Pilot-entered flight parameters.

    Speeds are in the selected speed unit and rates in the selected rate
    unit. A field left as None counts as zero.

    Attributes:
        cruise_altitude_ft: Cruise altitude in feet MSL
        climb_speed: Climb ground speed
        cruise_speed: Cruise ground speed
        descent_speed: Descent ground speed
        climb_rate: Climb vertical rate
        descent_rate: Descent vertical rate
        departure_icao: Departure airport identifier
        arrival_icao: Arrival airport identifier
    """

    cruise_altitude_ft: float | None = None
    climb_speed: float | None = None
    cruise_speed: float | None = None
    descent_speed: float | None = None
    climb_rate: float | None = None
    descent_rate: float | None = None
    departure_icao: str = ""
    arrival_icao: str = ""


@dataclass(frozen=True)
class CalculationResult:
    """Rounded flight profile.

    Distances are in nautical miles with one decimal, times in whole
    minutes. Any value may be nan or inf when an input speed or rate is zero.

    Attributes:
        toc_distance_nm: Distance from departure to top of climb
        tod_distance_nm: Distance from top of descent to arrival
        total_distance_nm: Departure to arrival distance
        climb_time_min: Climb duration
        cruise_time_min: Cruise duration (negative if TOC and TOD overlap)
        descent_time_min: Descent duration
        total_time_min: Total duration, rounded from the unrounded phase sum
    """

    toc_distance_nm: float
    tod_distance_nm: float
    total_distance_nm: float
    climb_time_min: float
    cruise_time_min: float
    descent_time_min: float
    total_time_min: float


def _or_zero(value: float | None) -> float:
    return float(value) if value is not None else 0.0


def compute_profile(
    inputs: FlightInputs,
    speed_unit: SpeedUnit | str,
    rate_unit: RateUnit | str,
    departure_elevation_ft: float | None = None,
    arrival_elevation_ft: float | None = None,
    departure_position: GeoPosition | None = None,
    arrival_position: GeoPosition | None = None,
) -> CalculationResult:
    """Compute the climb, cruise and descent profile.

    Args:
        inputs: Flight parameters
        speed_unit: Unit of the three speeds
        rate_unit: Unit of the two vertical rates
        departure_elevation_ft: Departure field elevation, sea level if None
        arrival_elevation_ft: Arrival field elevation, sea level if None
        departure_position: Departure position, if known
        arrival_position: Arrival position, if known

    Returns:
        Rounded CalculationResult; values may be non-finite
    """
    climb_speed_kt = convert_speed(_or_zero(inputs.climb_speed), speed_unit, SpeedUnit.KT)
    cruise_speed_kt = convert_speed(_or_zero(inputs.cruise_speed), speed_unit, SpeedUnit.KT)
    descent_speed_kt = convert_speed(_or_zero(inputs.descent_speed), speed_unit, SpeedUnit.KT)

    climb_rate_fpm = convert_rate(_or_zero(inputs.climb_rate), rate_unit, RateUnit.FT_MIN)
    descent_rate_fpm = convert_rate(_or_zero(inputs.descent_rate), rate_unit, RateUnit.FT_MIN)

    cruise_altitude_ft = _or_zero(inputs.cruise_altitude_ft)

    # Climb phase
    climb_height_ft = cruise_altitude_ft - _or_zero(departure_elevation_ft)
    climb_time_h = ieee_divide(climb_height_ft, climb_rate_fpm * 60)
    toc_distance_nm = climb_speed_kt * climb_time_h

    # Descent phase
    descent_height_ft = cruise_altitude_ft - _or_zero(arrival_elevation_ft)
    descent_time_h = ieee_divide(descent_height_ft, descent_rate_fpm * 60)
    tod_distance_nm = descent_speed_kt * descent_time_h

    if departure_position is not None and arrival_position is not None:
        total_distance_nm = haversine_distance_nm(departure_position, arrival_position)
    else:
        total_distance_nm = toc_distance_nm + tod_distance_nm + FALLBACK_PADDING_NM

    # Not clamped: TOC and TOD may overlap on short legs
    cruise_distance_nm = total_distance_nm - (toc_distance_nm + tod_distance_nm)
    cruise_time_h = ieee_divide(cruise_distance_nm, cruise_speed_kt)

    logger.debug(
        "Profile: climb %.3f h / %.1f NM, cruise %.3f h / %.1f NM, descent %.3f h / %.1f NM",
        climb_time_h,
        toc_distance_nm,
        cruise_time_h,
        cruise_distance_nm,
        descent_time_h,
        tod_distance_nm,
    )

    return CalculationResult(
        toc_distance_nm=round_half_up(toc_distance_nm, 1),
        tod_distance_nm=round_half_up(tod_distance_nm, 1),
        total_distance_nm=round_half_up(total_distance_nm, 1),
        climb_time_min=round_half_up(climb_time_h * 60),
        cruise_time_min=round_half_up(cruise_time_h * 60),
        descent_time_min=round_half_up(descent_time_h * 60),
        total_time_min=round_half_up((climb_time_h + cruise_time_h + descent_time_h) * 60),
    )


class FlightProfileCalculator:
    """Profile calculation against an airport directory.

    Looks up both airports from the input identifiers and runs
    compute_profile. Unknown airports count as sea level with no position.

    Examples:
        >>> calculator = FlightProfileCalculator(directory)
        >>> result = calculator.compute(inputs, SpeedUnit.KT, RateUnit.FT_MIN)
    """

    def __init__(self, directory: AirportDirectory) -> None:
        """Initialize calculator.

        Args:
            directory: Airport directory used for identifier lookups
        """
        self.directory = directory

    def compute(
        self,
        inputs: FlightInputs,
        speed_unit: SpeedUnit | str = SpeedUnit.KT,
        rate_unit: RateUnit | str = RateUnit.FT_MIN,
    ) -> CalculationResult:
        """Compute the profile for the airports named in inputs.

        Args:
            inputs: Flight parameters including both identifiers
            speed_unit: Unit of the three speeds
            rate_unit: Unit of the two vertical rates

        Returns:
            Rounded CalculationResult; values may be non-finite
        """
        departure = self.directory.lookup(inputs.departure_icao)
        arrival = self.directory.lookup(inputs.arrival_icao)

        if departure is None:
            logger.info("Departure %r unknown, assuming sea level", inputs.departure_icao)
        if arrival is None:
            logger.info("Arrival %r unknown, assuming sea level", inputs.arrival_icao)

        return self.compute_between(inputs, departure, arrival, speed_unit, rate_unit)

    def compute_between(
        self,
        inputs: FlightInputs,
        departure: AirportLookupResult | None,
        arrival: AirportLookupResult | None,
        speed_unit: SpeedUnit | str = SpeedUnit.KT,
        rate_unit: RateUnit | str = RateUnit.FT_MIN,
    ) -> CalculationResult:
        """Compute the profile between airports that were already looked up.

        Args:
            inputs: Flight parameters; the identifiers are not used
            departure: Departure airport, or None for sea level and no position
            arrival: Arrival airport, or None for sea level and no position
            speed_unit: Unit of the three speeds
            rate_unit: Unit of the two vertical rates

        Returns:
            Rounded CalculationResult; values may be non-finite
        """
        return compute_profile(
            inputs,
            speed_unit,
            rate_unit,
            departure_elevation_ft=departure.elevation_ft if departure else None,
            arrival_elevation_ft=arrival.elevation_ft if arrival else None,
            departure_position=departure.position if departure else None,
            arrival_position=arrival.position if arrival else None,
        )
