"""Input validation helpers for coordinates and district names."""
import math
import re
from typing import Any, Optional

# Letters, digits, spaces, dots, hyphens and apostrophes; Devanagari included
DISTRICT_NAME_PATTERN = re.compile(r"^[\w\s.'\-ऀ-ॿ]+$")
MAX_DISTRICT_NAME_LENGTH = 100


def validate_coordinates(latitude: Any, longitude: Any) -> bool:
    """
    Check that a latitude/longitude pair is numeric and in range.

    Args:
        latitude: Latitude, expected in [-90, 90]
        longitude: Longitude, expected in [-180, 180]

    Returns:
        True if both values are finite numbers within range
    """
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError):
        return False

    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False

    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def sanitize_district_name(name: Any) -> Optional[str]:
    """
    Sanitize and validate a district name supplied by a client.

    Returns the trimmed name if valid, None otherwise.

    Args:
        name: District name to sanitize

    Returns:
        Trimmed name or None if invalid
    """
    if not name or not isinstance(name, str):
        return None

    name = " ".join(name.split())

    if not name or len(name) > MAX_DISTRICT_NAME_LENGTH:
        return None

    if not DISTRICT_NAME_PATTERN.match(name):
        return None

    return name
