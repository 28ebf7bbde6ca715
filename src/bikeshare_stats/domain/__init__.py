"""Domain layer - core models and ports."""

from bikeshare_stats.domain.geo import great_circle_distance_miles
from bikeshare_stats.domain.models import (
    NearbyStation,
    Station,
    StationReport,
    Trip,
)
from bikeshare_stats.domain.ports import (
    StationRepository,
    TripRepository,
)

__all__ = [
    "NearbyStation",
    "Station",
    "StationReport",
    "StationRepository",
    "Trip",
    "TripRepository",
    "great_circle_distance_miles",
]
