"""Command-line adapters: command parsing, dispatch and report formatting."""

from bikeshare_stats.adapters.cli.command_dispatcher import CommandDispatcher
from bikeshare_stats.adapters.cli.command_parser import CommandParser
from bikeshare_stats.adapters.cli.report_formatter import ReportFormatter

__all__ = ["CommandDispatcher", "CommandParser", "ReportFormatter"]
