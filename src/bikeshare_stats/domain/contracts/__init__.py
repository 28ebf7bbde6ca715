"""Contracts (protocols) shared between the domain and its adapters."""

from bikeshare_stats.domain.contracts.report_formatter import ReportFormatterProtocol

__all__ = ["ReportFormatterProtocol"]
