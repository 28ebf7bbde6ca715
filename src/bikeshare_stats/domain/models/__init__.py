"""Domain models for bike-share datasets."""

from bikeshare_stats.domain.models.command import Command, CommandKind
from bikeshare_stats.domain.models.dataset_summary import DatasetSummary
from bikeshare_stats.domain.models.histograms import (
    DURATION_BUCKET_BOUNDS,
    DURATION_BUCKET_LABELS,
    HOURS_PER_DAY,
    DurationHistogram,
    HourlyHistogram,
)
from bikeshare_stats.domain.models.nearby_station import NearbyStation
from bikeshare_stats.domain.models.station import Station
from bikeshare_stats.domain.models.station_report import StationReport
from bikeshare_stats.domain.models.trip import Trip

__all__ = [
    "DURATION_BUCKET_BOUNDS",
    "DURATION_BUCKET_LABELS",
    "HOURS_PER_DAY",
    "Command",
    "CommandKind",
    "DatasetSummary",
    "DurationHistogram",
    "HourlyHistogram",
    "NearbyStation",
    "Station",
    "StationReport",
    "Trip",
]
