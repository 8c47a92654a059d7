"""Airport data loading.

Reads airport reference tables into AirportRecord lists. Two formats are
supported: the bundled YAML table and an OurAirports-style airports.csv.

Typical usage:
    directory = load_directory(default_airports_path())
    directory = load_directory("data/airports/airports.csv")
"""

import csv
import logging
from pathlib import Path
from typing import Any

import yaml

from toctod.airports.directory import AirportDirectory, AirportRecord
from toctod.core.resource_path import get_data_path
from toctod.navigation.great_circle import GeoPosition

logger = logging.getLogger(__name__)


class AirportDataError(Exception):
    """Raised when an airport data file cannot be loaded."""


def default_airports_path() -> Path:
    """Get the path of the bundled airport table."""
    return get_data_path("airports.yaml")


def _parse_position(lat: Any, lon: Any) -> GeoPosition | None:
    if lat in (None, "") or lon in (None, ""):
        return None
    return GeoPosition(latitude=float(lat), longitude=float(lon))


def load_airports_yaml(path: str | Path) -> list[AirportRecord]:
    """Load airports from a YAML file.

    The file holds a list of mappings (or a mapping with an "airports" list)
    with icao, name, city, state, elevation and optional lat, lon and iata.

    Args:
        path: YAML file path

    Returns:
        Records in file order; invalid entries are skipped

    Raises:
        AirportDataError: If the file is missing, unreadable or not a list of airports
    """
    path = Path(path)
    if not path.exists():
        raise AirportDataError(f"Airports file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise AirportDataError(f"Failed to parse airports file {path}: {e}") from e
    except OSError as e:
        raise AirportDataError(f"Cannot read airports file {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("airports")
    if not isinstance(data, list):
        raise AirportDataError(f"Airports file must contain a list of airports: {path}")

    records = []
    for entry in data:
        try:
            icao = str(entry["icao"]).strip()
            if not icao:
                continue

            records.append(
                AirportRecord(
                    icao=icao,
                    name=str(entry.get("name", "")),
                    city=str(entry.get("city", "")),
                    state=str(entry.get("state", "")),
                    elevation_ft=int(entry.get("elevation") or 0),
                    position=_parse_position(entry.get("lat"), entry.get("lon")),
                    iata=entry.get("iata") or None,
                )
            )
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            logger.debug("Skipping invalid airport entry %r: %s", entry, e)
            continue

    logger.info("Loaded %d airports from %s", len(records), path)
    return records


def load_airports_csv(path: str | Path) -> list[AirportRecord]:
    """Load airports from an OurAirports airports.csv file.

    Args:
        path: CSV file path

    Returns:
        Records for rows that carry an ICAO code

    Raises:
        AirportDataError: If the file is missing or cannot be read
    """
    path = Path(path)
    if not path.exists():
        raise AirportDataError(f"Airports file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
    except OSError as e:
        raise AirportDataError(f"Cannot read airports file {path}: {e}") from e

    records = []
    for row in rows:
        try:
            # Only load airports with ICAO codes; ident alone is a local code
            icao = (row.get("icao_code") or "").strip()
            if not icao:
                continue

            # iso_region is "BR-SP"; keep the part after the country
            region = row.get("iso_region") or ""
            state = region.split("-", 1)[-1]

            elevation = row.get("elevation_ft") or "0"

            records.append(
                AirportRecord(
                    icao=icao,
                    name=row["name"],
                    city=row.get("municipality") or "",
                    state=state,
                    elevation_ft=int(float(elevation)),
                    position=_parse_position(row.get("latitude_deg"), row.get("longitude_deg")),
                    iata=row.get("iata_code") or None,
                )
            )
        except (ValueError, KeyError) as e:
            logger.debug("Skipping invalid airport row: %s", e)
            continue

    logger.info("Loaded %d airports from %s", len(records), path)
    return records


def load_directory(path: str | Path) -> AirportDirectory:
    """Load an airport file into a directory, choosing the parser by suffix.

    Args:
        path: .yaml, .yml or .csv file

    Returns:
        AirportDirectory over the loaded records

    Raises:
        AirportDataError: If the file is missing, malformed or of unknown type
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in (".yaml", ".yml"):
        records = load_airports_yaml(path)
    elif suffix == ".csv":
        records = load_airports_csv(path)
    else:
        raise AirportDataError(f"Unsupported airports file type: {path}")

    return AirportDirectory(records)
