"""Station repository port."""

from typing import Protocol

from bikeshare_stats.domain.models.station import Station


class StationRepository(Protocol):
    """Port for loading the station dataset."""

    def load_all(self) -> list[Station]:
        """Load every station, in source order."""
        ...
