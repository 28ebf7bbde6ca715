"""Interactive read-eval loop dispatching commands to the query service."""

import logging
import math
from collections.abc import Callable

from bikeshare_stats.adapters.cli.command_parser import CommandParser
from bikeshare_stats.application.services.station_query_service import StationQueryService
from bikeshare_stats.domain.contracts.report_formatter import ReportFormatterProtocol
from bikeshare_stats.domain.models.command import Command, CommandKind

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Enter command (# to stop)> "
UNKNOWN_COMMAND_MESSAGE = " **Error, unknown command, try again..."
NEARME_USAGE_MESSAGE = " **Error, usage: nearme <latitude> <longitude> <max miles>"
FIND_USAGE_MESSAGE = " **Error, usage: find <name substring>"


def parse_nearme_arguments(argument: str) -> tuple[float, float, float] | None:
    """Parse ``<lat> <lon> <maxMiles>``.

    Returns:
        The three values, or None unless there are exactly three finite numbers.
    """
    parts = argument.split()
    if len(parts) != 3:
        return None
    try:
        values = tuple(float(part) for part in parts)
    except ValueError:
        return None
    if not all(math.isfinite(value) for value in values):
        return None
    latitude, longitude, max_distance = values
    return latitude, longitude, max_distance


class CommandDispatcher:
    """Runs the command loop against a query service.

    Holds no state between commands. Input and output are injectable so the
    loop can be driven without a terminal.
    """

    def __init__(
        self,
        service: StationQueryService,
        formatter: ReportFormatterProtocol,
        prompt: str = DEFAULT_PROMPT,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            service: Query service over the loaded datasets.
            formatter: Turns query results into lines of text.
            prompt: Prompt shown before each command.
            input_func: Reads one line after showing a prompt; raises EOFError at end of input.
            output: Writes one line of output.
        """
        self._service = service
        self._formatter = formatter
        self._prompt = prompt
        self._input = input_func
        self._output = output

    def run(self) -> None:
        """Read and execute commands until '#' or end of input."""
        while True:
            try:
                line = self._input(self._prompt)
            except EOFError:
                logger.debug("End of input, leaving command loop")
                break

            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """Execute one command line.

        Returns:
            False when the loop should stop, True otherwise.
        """
        return self.dispatch(CommandParser.parse(line))

    def dispatch(self, command: Command) -> bool:
        """Execute a parsed command and write its output.

        Returns:
            False for the quit command, True otherwise.
        """
        if command.kind is CommandKind.QUIT:
            return False

        if command.kind is CommandKind.STATS:
            self._write(self._formatter.format_summary(self._service.summary()))
        elif command.kind is CommandKind.DURATIONS:
            self._write(self._formatter.format_durations(self._service.duration_histogram()))
        elif command.kind is CommandKind.STARTING:
            self._write(self._formatter.format_hours(self._service.hourly_histogram()))
        elif command.kind is CommandKind.NEARME:
            self._handle_nearme(command.argument)
        elif command.kind is CommandKind.STATIONS:
            self._write(self._formatter.format_station_reports(self._service.all_stations()))
        elif command.kind is CommandKind.FIND:
            self._handle_find(command.argument)
        else:
            logger.debug(f"Unknown command: {command.argument!r}")
            self._output(UNKNOWN_COMMAND_MESSAGE)

        return True

    def _handle_nearme(self, argument: str) -> None:
        parsed = parse_nearme_arguments(argument)
        if parsed is None:
            self._output(NEARME_USAGE_MESSAGE)
            return
        latitude, longitude, max_distance = parsed
        results = self._service.stations_near(latitude, longitude, max_distance)
        self._write(self._formatter.format_nearby(results))

    def _handle_find(self, term: str) -> None:
        if not term:
            self._output(FIND_USAGE_MESSAGE)
            return
        self._write(self._formatter.format_station_reports(self._service.find_stations(term)))

    def _write(self, lines: list[str]) -> None:
        for line in lines:
            self._output(line)
