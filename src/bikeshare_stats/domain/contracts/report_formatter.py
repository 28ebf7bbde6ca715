"""Protocol for formatting query results as text."""

from typing import Protocol

from bikeshare_stats.domain.models.dataset_summary import DatasetSummary
from bikeshare_stats.domain.models.histograms import DurationHistogram, HourlyHistogram
from bikeshare_stats.domain.models.nearby_station import NearbyStation
from bikeshare_stats.domain.models.station_report import StationReport


class ReportFormatterProtocol(Protocol):
    """Protocol for turning query results into printable lines."""

    def format_summary(self, summary: DatasetSummary) -> list[str]:
        """Format station count, trip count and total capacity.

        Args:
            summary: The aggregate counts to format.

        Returns:
            One line per statistic.
        """
        ...

    def format_durations(self, histogram: DurationHistogram) -> list[str]:
        """Format the duration histogram, one line per bucket in bucket order."""
        ...

    def format_hours(self, histogram: HourlyHistogram) -> list[str]:
        """Format the hourly histogram, one line per hour 0..23."""
        ...

    def format_nearby(self, results: list[NearbyStation]) -> list[str]:
        """Format proximity search results.

        Args:
            results: Stations sorted by ascending distance.

        Returns:
            One line per station, or a single "none found" line.
        """
        ...

    def format_station_reports(self, reports: list[StationReport]) -> list[str]:
        """Format station reports (name search and full listing).

        Args:
            reports: Stations sorted by name with their trip counts.

        Returns:
            One line per station, or a single "none found" line.
        """
        ...
