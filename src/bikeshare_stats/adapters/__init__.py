"""Adapters layer - files, configuration and terminal integrations."""

from bikeshare_stats.adapters.config import AppConfig
from bikeshare_stats.adapters.flatfile import (
    DatasetLoadError,
    FlatFileStationRepository,
    FlatFileTripRepository,
)

__all__ = [
    "AppConfig",
    "DatasetLoadError",
    "FlatFileStationRepository",
    "FlatFileTripRepository",
]
