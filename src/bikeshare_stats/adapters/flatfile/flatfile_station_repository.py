"""Flat-file station repository adapter."""

from pathlib import Path

from bikeshare_stats.adapters.flatfile.dataset_loader import load_records
from bikeshare_stats.adapters.flatfile.record_parser import StationParser
from bikeshare_stats.domain.models.station import Station
from bikeshare_stats.domain.ports.station_repository import StationRepository


class FlatFileStationRepository(StationRepository):
    """Adapter reading stations from a whitespace-delimited text file."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path of the station file."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Station]:
        """Load every parseable station in file order."""
        stations, _count = load_records(self._path, StationParser.parse_line)
        return stations
