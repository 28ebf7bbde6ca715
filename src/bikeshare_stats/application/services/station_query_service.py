"""Read-only queries over the loaded station and trip datasets."""

import logging
from collections import Counter
from collections.abc import Iterable

from bikeshare_stats.domain.geo import great_circle_distance_miles
from bikeshare_stats.domain.models import (
    DURATION_BUCKET_BOUNDS,
    HOURS_PER_DAY,
    DatasetSummary,
    DurationHistogram,
    HourlyHistogram,
    NearbyStation,
    Station,
    StationReport,
    Trip,
)
from bikeshare_stats.domain.numbers import parse_int_prefix

logger = logging.getLogger(__name__)


class StationQueryService:
    """Service answering statistics and search queries for stations and trips.

    The datasets are copied into tuples on construction and never modified.
    Every query returns a new, transient result.
    """

    def __init__(self, stations: Iterable[Station], trips: Iterable[Trip]) -> None:
        """Initialize with the loaded datasets."""
        self._stations: tuple[Station, ...] = tuple(stations)
        self._trips: tuple[Trip, ...] = tuple(trips)
        self._trip_counts = self._index_trip_counts(self._trips)

    @property
    def stations(self) -> tuple[Station, ...]:
        return self._stations

    @property
    def trips(self) -> tuple[Trip, ...]:
        return self._trips

    @staticmethod
    def _index_trip_counts(trips: tuple[Trip, ...]) -> Counter[str]:
        """Count trips per station id, where a trip touches a station at its start or end.

        A round trip (start == end) is counted once for its station.
        """
        counts: Counter[str] = Counter()
        for trip in trips:
            counts[trip.start_station_id] += 1
            if trip.end_station_id != trip.start_station_id:
                counts[trip.end_station_id] += 1
        return counts

    def trip_count(self, station_id: str) -> int:
        """Number of trips starting or ending at ``station_id``."""
        return self._trip_counts.get(station_id, 0)

    def summary(self) -> DatasetSummary:
        """Station count, trip count and total bike capacity."""
        return DatasetSummary(
            station_count=len(self._stations),
            trip_count=len(self._trips),
            total_capacity=sum(station.capacity for station in self._stations),
        )

    def duration_histogram(self) -> DurationHistogram:
        """Partition trips into the fixed duration buckets.

        Bounds are inclusive, so a trip of exactly 1800 seconds falls in the
        first bucket. Durations above the last bound fall in the final bucket.
        """
        counts = [0] * (len(DURATION_BUCKET_BOUNDS) + 1)
        for trip in self._trips:
            counts[self._duration_bucket(trip.duration)] += 1
        return DurationHistogram(counts=tuple(counts))

    @staticmethod
    def _duration_bucket(duration: int) -> int:
        for index, upper_bound in enumerate(DURATION_BUCKET_BOUNDS):
            if duration <= upper_bound:
                return index
        return len(DURATION_BUCKET_BOUNDS)

    def hourly_histogram(self) -> HourlyHistogram:
        """Count trips by the hour of their start time.

        The hour is the leading integer of the start time. Trips without a
        start time, or whose hour falls outside 0..23, are skipped.
        """
        counts = [0] * HOURS_PER_DAY
        skipped = 0
        for trip in self._trips:
            hour = self._start_hour(trip)
            if hour is None or not 0 <= hour < HOURS_PER_DAY:
                skipped += 1
                logger.debug(f"Skipping trip {trip.id} with start time {trip.start_time!r}")
                continue
            counts[hour] += 1

        if skipped:
            logger.debug(f"Skipped {skipped} trip(s) without a usable starting hour")
        return HourlyHistogram(counts=tuple(counts), skipped=skipped)

    @staticmethod
    def _start_hour(trip: Trip) -> int | None:
        if not trip.start_time:
            return None
        return parse_int_prefix(trip.start_time)

    def stations_near(
        self, latitude: float, longitude: float, max_distance_miles: float
    ) -> list[NearbyStation]:
        """Stations within ``max_distance_miles`` of the point, nearest first.

        Stations at equal distance keep their dataset order.
        """
        results = []
        for station in self._stations:
            distance = great_circle_distance_miles(
                latitude, longitude, station.latitude, station.longitude
            )
            if distance <= max_distance_miles:
                results.append(NearbyStation(station=station, distance_miles=distance))

        results.sort(key=lambda result: result.distance_miles)
        logger.debug(
            f"Found {len(results)} station(s) within {max_distance_miles} miles of ({latitude}, {longitude})"
        )
        return results

    def find_stations(self, term: str) -> list[StationReport]:
        """Stations whose name contains ``term`` (case-sensitive), sorted by name."""
        matches = [station for station in self._stations if term in station.name]
        return self._reports_by_name(matches)

    def all_stations(self) -> list[StationReport]:
        """Every station, sorted by name."""
        return self._reports_by_name(self._stations)

    def _reports_by_name(self, stations: Iterable[Station]) -> list[StationReport]:
        ordered = sorted(stations, key=lambda station: station.name)
        return [
            StationReport(station=station, trip_count=self.trip_count(station.id))
            for station in ordered
        ]
