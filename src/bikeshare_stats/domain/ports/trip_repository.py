"""Trip repository port."""

from typing import Protocol

from bikeshare_stats.domain.models.trip import Trip


class TripRepository(Protocol):
    """Port for loading the trip dataset."""

    def load_all(self) -> list[Trip]:
        """Load every trip, in source order."""
        ...
