"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a bike dock location."""

    id: str
    capacity: int
    latitude: float
    longitude: float
    name: str
