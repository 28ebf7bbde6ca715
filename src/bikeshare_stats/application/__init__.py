"""Application layer - query use cases."""

from bikeshare_stats.application.services import StationQueryService

__all__ = ["StationQueryService"]
