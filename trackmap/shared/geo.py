"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import Iterable

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0

# FIT stores positions as 32-bit semicircles
SEMICIRCLES_PER_DEGREE = 2 ** 31 / 180


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def calculate_total_distance(coordinates: Iterable[tuple[float, float]]) -> float:
    """
    Calculate total distance along a path.

    Args:
        coordinates: (lat, lon) pairs in path order

    Returns:
        Total distance in kilometers
    """
    total = 0.0
    previous = None

    for lat, lon in coordinates:
        if previous is not None:
            total += haversine(previous[0], previous[1], lat, lon)
        previous = (lat, lon)

    return total


def semicircles_to_degrees(value: float | None) -> float | None:
    """Convert a FIT semicircle coordinate to degrees."""
    if value is None:
        return None
    return value / SEMICIRCLES_PER_DEGREE
