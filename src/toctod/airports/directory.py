"""Airport directory with case-insensitive ICAO lookup.

The directory holds a fixed collection of airport records and answers
lookups by identifier. It is built once and never modified afterwards.

Typical usage:
    directory = AirportDirectory(records)

    result = directory.lookup("sbgr")
    if result is None:
        ...  # unknown airport, carry on with sea level and no position
    nearby = directory.get_airports_near(result.position, radius_nm=100)
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from toctod.core.numeric import round_half_up
from toctod.navigation.great_circle import GeoPosition, haversine_distances_nm

logger = logging.getLogger(__name__)

FEET_TO_METERS = 0.3048


@dataclass(frozen=True)
class AirportRecord:
    """Airport reference data.

    Attributes:
        icao: ICAO code (e.g., "SBGR")
        name: Airport name
        city: City served
        state: State or region code
        elevation_ft: Field elevation in feet
        position: Geographic position, if known
        iata: IATA code (3-letter, if exists)
    """

    icao: str
    name: str
    city: str
    state: str
    elevation_ft: int
    position: GeoPosition | None = None
    iata: str | None = None


@dataclass(frozen=True)
class AirportLookupResult:
    """View of an airport record returned by a lookup.

    Attributes:
        icao: ICAO code as stored in the record
        elevation_ft: Field elevation in feet
        elevation_m: Field elevation in meters, rounded to the nearest meter
        name: Airport name
        city: City served
        state: State or region code
        position: Geographic position, if known
    """

    icao: str
    elevation_ft: int
    elevation_m: int
    name: str
    city: str
    state: str
    position: GeoPosition | None = None

    @classmethod
    def from_record(cls, record: AirportRecord) -> "AirportLookupResult":
        """Build a lookup result from a stored record."""
        return cls(
            icao=record.icao,
            elevation_ft=record.elevation_ft,
            elevation_m=int(round_half_up(record.elevation_ft * FEET_TO_METERS)),
            name=record.name,
            city=record.city,
            state=record.state,
            position=record.position,
        )


def normalize_icao(identifier: str) -> str:
    """Normalize an identifier for matching.

    Args:
        identifier: Identifier as typed by the user

    Returns:
        Upper-cased identifier without surrounding whitespace
    """
    return identifier.strip().upper()


class AirportDirectory:
    """Read-only collection of airports indexed by ICAO code.

    Examples:
        >>> directory = AirportDirectory([sbgr, sbgl])
        >>> directory.lookup("SbGr").elevation_ft
        2459
        >>> directory.lookup("ZZZZ") is None
        True
    """

    def __init__(self, records: Iterable[AirportRecord]) -> None:
        """Build the directory and its case-normalized index.

        Args:
            records: Airport records; when two share a code the first one wins.
        """
        self._records: list[AirportRecord] = []
        self._index: dict[str, AirportRecord] = {}

        for record in records:
            key = normalize_icao(record.icao)
            if key in self._index:
                logger.warning("Duplicate airport %s ignored (keeping %s)", record.icao, self._index[key].name)
                continue
            self._index[key] = record
            self._records.append(record)

        self._positioned = [r for r in self._records if r.position is not None]
        self._latitudes = np.array([r.position.latitude for r in self._positioned], dtype=np.float64)
        self._longitudes = np.array([r.position.longitude for r in self._positioned], dtype=np.float64)

        logger.info("Airport directory ready with %d airports", len(self._records))

    def lookup(self, identifier: str) -> AirportLookupResult | None:
        """Look up an airport by ICAO code.

        Args:
            identifier: ICAO code in any letter case

        Returns:
            Lookup result if found, None otherwise
        """
        record = self.get_record(identifier)
        if record is None:
            logger.debug("Airport not found: %r", identifier)
            return None

        return AirportLookupResult.from_record(record)

    def get_record(self, identifier: str) -> AirportRecord | None:
        """Get the stored record for an ICAO code.

        Args:
            identifier: ICAO code in any letter case

        Returns:
            AirportRecord if found, None otherwise
        """
        if not identifier:
            return None
        return self._index.get(normalize_icao(identifier))

    def get_airports_near(
        self, position: GeoPosition, radius_nm: float
    ) -> list[tuple[AirportRecord, float]]:
        """Find airports within a radius of a position.

        Airports without a known position are never returned.

        Args:
            position: Center of the search
            radius_nm: Search radius in nautical miles

        Returns:
            List of (record, distance_nm) tuples sorted by distance
        """
        if not self._positioned:
            return []

        distances = haversine_distances_nm(position, self._latitudes, self._longitudes)
        order = np.argsort(distances, kind="stable")

        return [
            (self._positioned[i], float(distances[i]))
            for i in order
            if distances[i] <= radius_nm
        ]

    def count(self) -> int:
        """Return number of airports in the directory."""
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AirportRecord]:
        return iter(self._records)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.get_record(identifier) is not None
