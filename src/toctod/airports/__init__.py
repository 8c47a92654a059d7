"""Airport reference data and lookup.

Typical usage:
    from toctod.airports import load_directory, default_airports_path

    directory = load_directory(default_airports_path())
    airport = directory.lookup("SBGR")
"""

from toctod.airports.directory import (
    AirportDirectory,
    AirportLookupResult,
    AirportRecord,
    normalize_icao,
)
from toctod.airports.loader import (
    AirportDataError,
    default_airports_path,
    load_airports_csv,
    load_airports_yaml,
    load_directory,
)

__all__ = [
    "AirportDataError",
    "AirportDirectory",
    "AirportLookupResult",
    "AirportRecord",
    "default_airports_path",
    "load_airports_csv",
    "load_airports_yaml",
    "load_directory",
    "normalize_icao",
]
