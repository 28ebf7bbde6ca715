"""Dataset summary domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DatasetSummary:
    """Aggregate counts over the loaded datasets."""

    station_count: int
    trip_count: int
    total_capacity: int
