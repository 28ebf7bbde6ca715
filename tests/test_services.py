"""Tests for application services."""

import pytest

from bikeshare_stats.application.services import StationQueryService
from bikeshare_stats.domain.geo import great_circle_distance_miles
from bikeshare_stats.domain.models import Station, Trip


def _trip(
    trip_id: str,
    start: str = "S1",
    end: str = "S2",
    duration: int = 600,
    start_time: str = "8:15",
) -> Trip:
    return Trip(
        id=trip_id,
        bike_id="B1",
        start_station_id=start,
        end_station_id=end,
        duration=duration,
        start_time=start_time,
    )


@pytest.fixture
def sample_stations() -> list[Station]:
    """Create sample stations for testing."""
    return [
        Station(id="S3", capacity=20, latitude=41.90, longitude=-87.65, name="Lincoln Park"),
        Station(id="S1", capacity=10, latitude=41.00, longitude=-87.00, name="Park Place"),
        Station(id="S2", capacity=15, latitude=41.88, longitude=-87.63, name="Adams & Wabash"),
        Station(id="S4", capacity=5, latitude=41.88, longitude=-87.63, name="park annex"),
    ]


@pytest.fixture
def sample_trips() -> list[Trip]:
    """Create sample trips for testing."""
    return [
        _trip("T1", start="S1", end="S2"),
        _trip("T2", start="S3", end="S1"),
        _trip("T3", start="S1", end="S1"),
        _trip("T4", start="S2", end="S3"),
    ]


@pytest.fixture
def service(sample_stations: list[Station], sample_trips: list[Trip]) -> StationQueryService:
    return StationQueryService(sample_stations, sample_trips)


class TestSummary:
    """Tests for summary statistics."""

    def test_counts_and_total_capacity(self, service: StationQueryService) -> None:
        """Given stations and trips, when summarising, then counts and capacity sum are reported."""
        summary = service.summary()

        assert summary.station_count == 4
        assert summary.trip_count == 4
        assert summary.total_capacity == 50

    def test_empty_datasets(self) -> None:
        """Given no data, when summarising, then everything is zero."""
        summary = StationQueryService([], []).summary()

        assert (summary.station_count, summary.trip_count, summary.total_capacity) == (0, 0, 0)


class TestDurationHistogram:
    """Tests for the duration histogram."""

    @pytest.mark.parametrize(
        ("duration", "bucket"),
        [
            (0, 0),
            (-30, 0),
            (1800, 0),
            (1801, 1),
            (3600, 1),
            (3601, 2),
            (7200, 2),
            (7201, 3),
            (18000, 3),
            (18001, 4),
        ],
    )
    def test_bucket_boundaries(self, duration: int, bucket: int) -> None:
        """Given a single trip, when bucketing, then boundary values fall in the lower bucket."""
        histogram = StationQueryService([], [_trip("T1", duration=duration)]).duration_histogram()

        expected = [0] * 5
        expected[bucket] = 1
        assert list(histogram.counts) == expected

    def test_every_trip_lands_in_exactly_one_bucket(self) -> None:
        """Given many trips, when bucketing, then bucket counts sum to the trip count."""
        trips = [_trip(f"T{d}", duration=d) for d in range(-100, 40000, 97)]

        histogram = StationQueryService([], trips).duration_histogram()

        assert sum(histogram.counts) == len(trips)


class TestHourlyHistogram:
    """Tests for the hourly histogram."""

    def test_counts_by_leading_hour(self) -> None:
        """Given start times 5:30, 05:45 and 23:10, when histogramming, then hours 5 and 23 are counted."""
        trips = [
            _trip("T1", start_time="5:30"),
            _trip("T2", start_time="05:45"),
            _trip("T3", start_time="23:10"),
        ]

        histogram = StationQueryService([], trips).hourly_histogram()

        expected = [0] * 24
        expected[5] = 2
        expected[23] = 1
        assert list(histogram.counts) == expected
        assert histogram.skipped == 0

    def test_out_of_range_and_missing_hours_are_skipped(self) -> None:
        """Given malformed start times, when histogramming, then they are skipped and counted."""
        trips = [
            _trip("T1", start_time="24:00"),
            _trip("T2", start_time="-1:00"),
            _trip("T3", start_time=""),
            _trip("T4", start_time="99"),
            _trip("T5", start_time="0:05"),
        ]

        histogram = StationQueryService([], trips).hourly_histogram()

        assert histogram.counts[0] == 1
        assert sum(histogram.counts) == 1
        assert histogram.skipped == 4

    def test_non_numeric_start_time_reads_as_midnight(self) -> None:
        """Given a start time with no leading digits, when histogramming, then it counts at hour 0."""
        histogram = StationQueryService([], [_trip("T1", start_time="noon")]).hourly_histogram()

        assert histogram.counts[0] == 1


class TestTripCount:
    """Tests for per-station trip counts."""

    def test_counts_starts_ends_and_round_trips_once(self, service: StationQueryService) -> None:
        """Given trips S1->S2, S3->S1 and S1->S1, when counting for S1, then the count is 3."""
        assert service.trip_count("S1") == 3

    def test_unknown_station_has_no_trips(self, service: StationQueryService) -> None:
        """Given a station id no trip references, when counting, then the count is 0."""
        assert service.trip_count("S4") == 0
        assert service.trip_count("missing") == 0

    def test_matches_linear_scan(self, sample_stations: list[Station], sample_trips: list[Trip]) -> None:
        """Given the indexed counts, when compared to a linear scan, then they agree."""
        service = StationQueryService(sample_stations, sample_trips)

        for station in sample_stations:
            expected = sum(
                1
                for trip in sample_trips
                if trip.start_station_id == station.id or trip.end_station_id == station.id
            )
            assert service.trip_count(station.id) == expected


class TestStationsNear:
    """Tests for the proximity search."""

    def test_station_at_query_point_with_zero_radius(self, service: StationQueryService) -> None:
        """Given maxDistance 0 and a station exactly at the point, when searching, then it is found at 0."""
        results = service.stations_near(41.0, -87.0, 0.0)

        assert [r.station.id for r in results] == ["S1"]
        assert results[0].distance_miles == 0.0

    def test_station_just_beyond_radius_is_excluded(self, service: StationQueryService) -> None:
        """Given a radius 0.001 miles short of a station, when searching, then that station is excluded."""
        distance = great_circle_distance_miles(41.0, -87.0, 41.90, -87.65)

        inside = service.stations_near(41.0, -87.0, distance)
        outside = service.stations_near(41.0, -87.0, distance - 0.001)

        assert "S3" in [r.station.id for r in inside]
        assert "S3" not in [r.station.id for r in outside]

    def test_results_sorted_by_distance_with_stable_ties(self, service: StationQueryService) -> None:
        """Given stations at various distances, when searching, then nearest come first and ties keep order."""
        results = service.stations_near(41.88, -87.63, 100.0)

        assert [r.station.id for r in results] == ["S2", "S4", "S3", "S1"]
        distances = [r.distance_miles for r in results]
        assert distances == sorted(distances)

    def test_no_station_in_range(self, service: StationQueryService) -> None:
        """Given a remote point, when searching, then nothing is returned."""
        assert service.stations_near(0.0, 0.0, 1.0) == []


class TestFindStations:
    """Tests for name search and full listing."""

    def test_find_is_case_sensitive_and_sorted(self, service: StationQueryService) -> None:
        """Given term 'Park', when searching, then only case-matching names are returned, sorted."""
        reports = service.find_stations("Park")

        assert [r.station.name for r in reports] == ["Lincoln Park", "Park Place"]
        assert [r.trip_count for r in reports] == [2, 3]

    def test_find_term_with_spaces(self, service: StationQueryService) -> None:
        """Given a term containing a space, when searching, then it is matched verbatim."""
        reports = service.find_stations("& Wab")

        assert [r.station.id for r in reports] == ["S2"]

    def test_find_without_matches(self, service: StationQueryService) -> None:
        """Given a term matching nothing, when searching, then the result is empty."""
        assert service.find_stations("Zoo") == []

    def test_all_stations_sorted_by_name(self, service: StationQueryService) -> None:
        """Given stations, when listing, then every station is returned sorted by name."""
        reports = service.all_stations()

        assert [r.station.name for r in reports] == [
            "Adams & Wabash",
            "Lincoln Park",
            "Park Place",
            "park annex",
        ]

    def test_duplicate_ids_and_names_are_tolerated(self) -> None:
        """Given duplicate ids and names, when listing, then both appear in original order with shared counts."""
        first = Station(id="D", capacity=1, latitude=0.0, longitude=0.0, name="Same")
        second = Station(id="D", capacity=2, latitude=1.0, longitude=1.0, name="Same")
        service = StationQueryService([first, second], [_trip("T1", start="D", end="X")])

        reports = service.all_stations()

        assert [r.station for r in reports] == [first, second]
        assert [r.trip_count for r in reports] == [1, 1]
        assert service.summary().total_capacity == 3


def test_queries_do_not_mutate_inputs(sample_stations: list[Station], sample_trips: list[Trip]) -> None:
    """Given input lists, when running every query, then the lists are unchanged."""
    stations_before = list(sample_stations)
    trips_before = list(sample_trips)
    service = StationQueryService(sample_stations, sample_trips)

    service.summary()
    service.duration_histogram()
    service.hourly_histogram()
    service.stations_near(41.88, -87.63, 100.0)
    service.find_stations("Park")
    service.all_stations()

    assert sample_stations == stations_before
    assert sample_trips == trips_before
    assert list(service.stations) == stations_before
    assert list(service.trips) == trips_before
