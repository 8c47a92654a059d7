"""TOC/TOD calculator command line tool.

Computes the climb, cruise and descent profile between two airports and
prints it.

Typical usage:
    toctod --from-airport SBGR --to-airport SBGL --cruise-altitude 35000 \\
        --climb-speed 250 --cruise-speed 450 --descent-speed 280 \\
        --climb-rate 2000 --descent-rate 1500
    python -m toctod.main --from-airport sbgr --to-airport sbbr --speed-unit kmh ...
"""

import argparse
import sys
from pathlib import Path

from toctod.airports.loader import AirportDataError, default_airports_path, load_directory
from toctod.core.config import ConfigError, ConfigLoader
from toctod.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    set_console_level,
)
from toctod.core.resource_path import get_config_path
from toctod.performance.units import RateUnit, SpeedUnit
from toctod.ui.controller import ARRIVAL, DEPARTURE, ProfileController
from toctod.ui.display import format_nearby, format_profile

logger = get_logger(__name__)

# CLI option -> FlightInputs field
_NUMERIC_OPTIONS = {
    "cruise_altitude": "cruise_altitude_ft",
    "climb_speed": "climb_speed",
    "cruise_speed": "cruise_speed",
    "descent_speed": "descent_speed",
    "climb_rate": "climb_rate",
    "descent_rate": "descent_rate",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="TOC/TOD flight profile calculator")

    parser.add_argument("--from-airport", type=str, default="", help="Departure ICAO code (e.g., SBGR)")
    parser.add_argument("--to-airport", type=str, default="", help="Arrival ICAO code (e.g., SBGL)")
    parser.add_argument("--cruise-altitude", type=float, help="Cruise altitude in feet")
    parser.add_argument("--climb-speed", type=float, help="Climb speed in the speed unit")
    parser.add_argument("--cruise-speed", type=float, help="Cruise speed in the speed unit")
    parser.add_argument("--descent-speed", type=float, help="Descent speed in the speed unit")
    parser.add_argument("--climb-rate", type=float, help="Climb rate in the rate unit")
    parser.add_argument("--descent-rate", type=float, help="Descent rate in the rate unit")
    parser.add_argument(
        "--speed-unit",
        choices=[u.value for u in SpeedUnit],
        help="Unit of the three speeds (default from settings)",
    )
    parser.add_argument(
        "--rate-unit",
        choices=[u.value for u in RateUnit],
        help="Unit of the two rates (default from settings)",
    )
    parser.add_argument(
        "--alternates",
        type=float,
        metavar="NM",
        help="Also list airports within NM nautical miles of the arrival airport",
    )
    parser.add_argument("--airports", type=Path, help="Airport table (.yaml or OurAirports .csv)")
    parser.add_argument("--config", type=Path, help="Settings file merged over the defaults")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging on the console")

    return parser.parse_args(argv)


def _setup_logging(config: ConfigLoader) -> None:
    """Initialize logging from the logging section of the settings."""
    settings = config.get_section("logging")
    config_file = settings.get("config_file", "logging.yaml")
    use_platform_dir = bool(settings.get("use_platform_dir", True))
    config_path = get_config_path(config_file) if not Path(config_file).is_absolute() else Path(config_file)

    if config_path.exists():
        initialize_logging(config_path, use_platform_dir=use_platform_dir)
    else:
        initialize_logging(use_platform_dir=use_platform_dir)


def build_controller(args: argparse.Namespace, config: ConfigLoader) -> ProfileController:
    """Create a controller filled from the command line.

    Args:
        args: Parsed arguments
        config: Merged settings

    Returns:
        ProfileController with inputs set and both airports searched

    Raises:
        AirportDataError: If the airport table cannot be loaded
    """
    data_file = args.airports or config.get("airports.data_file") or default_airports_path()
    directory = load_directory(data_file)

    controller = ProfileController(
        directory,
        speed_unit=args.speed_unit or config.get("units.speed", SpeedUnit.KT.value),
        rate_unit=args.rate_unit or config.get("units.rate", RateUnit.FT_MIN.value),
    )

    for option, field_name in _NUMERIC_OPTIONS.items():
        controller.set_input(field_name, getattr(args, option))

    controller.set_input("departure_icao", args.from_airport)
    controller.set_input("arrival_icao", args.to_airport)

    for side in (DEPARTURE, ARRIVAL):
        controller.search_airport(side)

    return controller


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)

    try:
        config = ConfigLoader.load_default(args.config)
        _setup_logging(config)
        if args.verbose:
            set_console_level("DEBUG")

        controller = build_controller(args, config)
    except (ConfigError, LoggingError, AirportDataError, ValueError) as e:
        logger.error("Cannot start: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for side, message in controller.errors.items():
        print(f"{side}: {message}", file=sys.stderr)

    print(
        format_profile(
            controller.display_results(),
            controller.airports.get(DEPARTURE),
            controller.airports.get(ARRIVAL),
        )
    )

    arrival = controller.airports.get(ARRIVAL)
    if args.alternates is not None and arrival is not None:
        print()
        print(format_nearby(arrival.icao, args.alternates, controller.nearby_airports(ARRIVAL, args.alternates)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
