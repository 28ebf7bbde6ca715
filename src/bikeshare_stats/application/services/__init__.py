"""Application services (use cases) for station and trip queries."""

from bikeshare_stats.application.services.station_query_service import StationQueryService

__all__ = ["StationQueryService"]
