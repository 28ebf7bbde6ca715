"""Trip domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Trip:
    """Represents a single bike rental."""

    id: str
    bike_id: str
    start_station_id: str  # Not validated against the station dataset
    end_station_id: str
    duration: int  # Seconds, kept exactly as parsed
    start_time: str  # "H:MM" or "HH:MM"; empty if the source line had none
