"""Ports (interfaces) for the ports-and-adapters architecture."""

from bikeshare_stats.domain.ports.station_repository import StationRepository
from bikeshare_stats.domain.ports.trip_repository import TripRepository

__all__ = [
    "StationRepository",
    "TripRepository",
]
