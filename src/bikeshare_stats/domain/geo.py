"""Great-circle distance between latitude/longitude pairs."""

import math

EARTH_RADIUS_MILES = 3956.0


def great_circle_distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the haversine distance in miles between two points given in degrees."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Rounding can push a slightly above 1 for antipodal points
    c = 2 * math.asin(math.sqrt(min(1.0, a)))
    return EARTH_RADIUS_MILES * c
