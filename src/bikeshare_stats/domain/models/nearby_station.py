"""Nearby station domain model."""

from dataclasses import dataclass

from bikeshare_stats.domain.models.station import Station


@dataclass(frozen=True)
class NearbyStation:
    """A station found by a proximity search."""

    station: Station
    distance_miles: float
