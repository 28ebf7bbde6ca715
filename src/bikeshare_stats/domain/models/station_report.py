"""Station report domain model."""

from dataclasses import dataclass

from bikeshare_stats.domain.models.station import Station


@dataclass(frozen=True)
class StationReport:
    """A station together with the number of trips touching it."""

    station: Station
    trip_count: int
