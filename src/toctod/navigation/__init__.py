"""Geodesy helpers for flight profile planning.

Typical usage:
    from toctod.navigation import GeoPosition, haversine_distance_nm

    distance = haversine_distance_nm(departure.position, arrival.position)
"""

from toctod.navigation.great_circle import (
    EARTH_RADIUS_NM,
    GeoPosition,
    haversine_distance_nm,
    haversine_distances_nm,
)

__all__ = [
    "EARTH_RADIUS_NM",
    "GeoPosition",
    "haversine_distance_nm",
    "haversine_distances_nm",
]
