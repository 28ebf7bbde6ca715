"""Flat-file dataset adapters."""

from bikeshare_stats.adapters.flatfile.dataset_loader import DatasetLoadError, load_records
from bikeshare_stats.adapters.flatfile.flatfile_station_repository import (
    FlatFileStationRepository,
)
from bikeshare_stats.adapters.flatfile.flatfile_trip_repository import FlatFileTripRepository
from bikeshare_stats.adapters.flatfile.record_parser import StationParser, TripParser

__all__ = [
    "DatasetLoadError",
    "FlatFileStationRepository",
    "FlatFileTripRepository",
    "StationParser",
    "TripParser",
    "load_records",
]
