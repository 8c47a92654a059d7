"""Great circle distance between geographic positions.

Typical usage:
    from toctod.navigation.great_circle import GeoPosition, haversine_distance_nm

    sbgr = GeoPosition(latitude=-23.435556, longitude=-46.473056)
    sbgl = GeoPosition(latitude=-22.808889, longitude=-43.243611)
    distance = haversine_distance_nm(sbgr, sbgl)
"""

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

EARTH_RADIUS_NM = 3440.065


@dataclass(frozen=True)
class GeoPosition:
    """Geographic position in decimal degrees.

    Attributes:
        latitude: Latitude in degrees, positive north.
        longitude: Longitude in degrees, positive east.
    """

    latitude: float
    longitude: float


def haversine_distance_nm(pos1: GeoPosition, pos2: GeoPosition) -> float:
    """Calculate great circle distance between two positions.

    Uses the Haversine formula on a spherical Earth.

    Args:
        pos1: First position
        pos2: Second position

    Returns:
        Distance in nautical miles

    Examples:
        >>> haversine_distance_nm(GeoPosition(0.0, 0.0), GeoPosition(0.0, 1.0))
        60.04...
    """
    lat1, lon1 = math.radians(pos1.latitude), math.radians(pos1.longitude)
    lat2, lon2 = math.radians(pos2.latitude), math.radians(pos2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.asin(math.sqrt(min(a, 1.0)))

    return EARTH_RADIUS_NM * c


def haversine_distances_nm(
    origin: GeoPosition,
    latitudes: npt.ArrayLike,
    longitudes: npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """Calculate great circle distances from one position to many.

    Vectorised form of haversine_distance_nm.

    Args:
        origin: Reference position
        latitudes: Target latitudes in degrees
        longitudes: Target longitudes in degrees (same length as latitudes)

    Returns:
        Array of distances in nautical miles
    """
    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)
    lat2 = np.radians(np.asarray(latitudes, dtype=np.float64))
    lon2 = np.radians(np.asarray(longitudes, dtype=np.float64))

    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = np.sin(dlat / 2) ** 2 + math.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    # Rounding can push a fraction above 1 for antipodal points
    c = 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))

    return EARTH_RADIUS_NM * c
