"""Command-line entry point for the bike-share analyzer."""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from bikeshare_stats.adapters.cli import CommandDispatcher, ReportFormatter
from bikeshare_stats.adapters.config import AppConfig
from bikeshare_stats.adapters.flatfile import (
    DatasetLoadError,
    FlatFileStationRepository,
    FlatFileTripRepository,
)
from bikeshare_stats.application.services import StationQueryService

logger = logging.getLogger(__name__)

STATIONS_PROMPT = "Please enter name of stations file> "
TRIPS_PROMPT = "Please enter name of bike trips file> "

EXIT_OK = 0
EXIT_LOAD_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configure root logging on stderr so report output on stdout stays clean."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bikeshare-stats",
        description="Load bike-share station and trip files and answer interactive queries.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands (one per line):
  stats                           Station count, trip count, total capacity
  durations                       Trip duration histogram
  starting                        Trips per starting hour
  nearme <lat> <lon> <maxMiles>   Stations within a distance, nearest first
  stations                        All stations, sorted by name
  find <term>                     Stations whose name contains term
  #                               Quit
        """,
    )
    parser.add_argument("--stations", help="Path to the stations file (prompted if omitted)")
    parser.add_argument("--trips", help="Path to the bike trips file (prompted if omitted)")
    parser.add_argument("--config", help="Path to a TOML configuration file")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Build configuration from environment, optional TOML file and command-line flags.

    Command-line flags take precedence over the TOML file, which takes
    precedence over environment variables.
    """
    overrides = {}
    if args.config:
        overrides["config_file"] = args.config
    config = AppConfig(**overrides)
    config.apply_toml_overrides()

    if args.stations:
        config.stations_file = args.stations
    if args.trips:
        config.trips_file = args.trips
    if args.log_level:
        config.log_level = args.log_level
    return config


def _resolve_path(configured: str | None, prompt: str, input_func: Callable[[str], str]) -> str:
    if configured:
        return configured
    return input_func(prompt).strip()


def main(
    argv: Sequence[str] | None = None,
    input_func: Callable[[str], str] = input,
) -> int:
    """Run the analyzer.

    Returns:
        Process exit status: 0 on a clean quit, 1 if a dataset cannot be
        opened, 2 on invalid configuration.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (ValueError, OSError) as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG_ERROR

    configure_logging(config.log_level)

    try:
        stations_path = _resolve_path(config.stations_file, STATIONS_PROMPT, input_func)
        trips_path = _resolve_path(config.trips_file, TRIPS_PROMPT, input_func)
    except EOFError:
        logger.error("No dataset file names given")
        return EXIT_LOAD_FAILURE

    try:
        stations = FlatFileStationRepository(stations_path).load_all()
        trips = FlatFileTripRepository(trips_path).load_all()
    except DatasetLoadError as e:
        print(f'**Error: unable to open file "{e.path}"')
        logger.debug(f"Load failure: {e}")
        return EXIT_LOAD_FAILURE

    logger.info(f"Ready with {len(stations)} station(s) and {len(trips)} trip(s)")

    service = StationQueryService(stations, trips)
    dispatcher = CommandDispatcher(
        service,
        ReportFormatter(config),
        prompt=config.prompt,
        input_func=input_func,
    )
    dispatcher.run()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
