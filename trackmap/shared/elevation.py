"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import Iterable


def parse_elevation(value) -> float:
    """
    Parse a raw elevation value, falling back to 0.

    0 doubles as "missing": absent, empty or non-numeric values all
    become 0.0.
    """
    if value is None:
        return 0.0
    try:
        elevation = float(value)
    except (TypeError, ValueError):
        return 0.0
    if elevation != elevation:  # NaN
        return 0.0
    return elevation


def calculate_elevation_gain(elevations: Iterable[float]) -> float:
    """
    Sum positive elevation deltas between consecutive samples.

    A sample of 0 is treated as missing: it adds nothing itself, but it
    still becomes the anchor the next sample is compared against.

    Args:
        elevations: Elevation values in meters, in path order

    Returns:
        Total elevation gain in meters (never negative)

    Example:
        >>> calculate_elevation_gain([100, 120, 110, 130])
        40.0
    """
    gain = 0.0
    previous = None

    for elevation in elevations:
        if previous is not None and elevation != 0:
            diff = elevation - previous
            if diff > 0:
                gain += diff
        previous = elevation

    return gain
