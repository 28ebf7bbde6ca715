"""Flat-file trip repository adapter."""

from pathlib import Path

from bikeshare_stats.adapters.flatfile.dataset_loader import load_records
from bikeshare_stats.adapters.flatfile.record_parser import TripParser
from bikeshare_stats.domain.models.trip import Trip
from bikeshare_stats.domain.ports.trip_repository import TripRepository


class FlatFileTripRepository(TripRepository):
    """Adapter reading trips from a whitespace-delimited text file."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path of the trip file."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Trip]:
        """Load every parseable trip in file order."""
        trips, _count = load_records(self._path, TripParser.parse_line)
        return trips
