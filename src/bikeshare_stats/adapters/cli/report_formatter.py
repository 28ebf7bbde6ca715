"""Text formatter for query results."""

from bikeshare_stats.adapters.config.app_config import AppConfig
from bikeshare_stats.domain.contracts.report_formatter import ReportFormatterProtocol
from bikeshare_stats.domain.models import (
    DatasetSummary,
    DurationHistogram,
    HourlyHistogram,
    NearbyStation,
    StationReport,
)

NONE_FOUND = " none found"


def format_coordinate(value: float) -> str:
    """Format a coordinate with up to 6 decimals and no trailing zeros (41.0 -> '41')."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class ReportFormatter(ReportFormatterProtocol):
    """Formatter for query results based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with display settings.
        """
        self.config = config

    def format_summary(self, summary: DatasetSummary) -> list[str]:
        return [
            f" stations: {summary.station_count}",
            f" trips: {summary.trip_count}",
            f" total bike capacity: {summary.total_capacity}",
        ]

    def format_durations(self, histogram: DurationHistogram) -> list[str]:
        return [f" {label}: {count}" for label, count in histogram.labelled()]

    def format_hours(self, histogram: HourlyHistogram) -> list[str]:
        return [f" {hour}: {count}" for hour, count in enumerate(histogram.counts)]

    def format_nearby(self, results: list[NearbyStation]) -> list[str]:
        if not results:
            return [NONE_FOUND]
        decimals = self.config.distance_decimals
        return [
            f" station {result.station.id} ({result.station.name}): "
            f"{result.distance_miles:.{decimals}f} miles"
            for result in results
        ]

    def format_station_reports(self, reports: list[StationReport]) -> list[str]:
        if not reports:
            return [NONE_FOUND]
        return [self.format_station_report(report) for report in reports]

    def format_station_report(self, report: StationReport) -> str:
        """Format one station as 'name (id) @ (lat, lon), N capacity, M trips'."""
        station = report.station
        return (
            f" {station.name} ({station.id}) @ "
            f"({format_coordinate(station.latitude)}, {format_coordinate(station.longitude)}), "
            f"{station.capacity} capacity, {report.trip_count} trips"
        )
