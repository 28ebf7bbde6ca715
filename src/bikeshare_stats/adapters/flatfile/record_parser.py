"""Parsers for whitespace-delimited station and trip lines."""

import re

from bikeshare_stats.domain.models.station import Station
from bikeshare_stats.domain.models.trip import Trip
from bikeshare_stats.domain.numbers import parse_float_prefix, parse_int_prefix

# A token is a run of anything but space, tab or a line terminator, after optional blanks.
_TOKEN = re.compile(r"[ \t]*([^ \t\r\n]+)")


def _next_token(line: str, pos: int) -> tuple[str | None, int]:
    """Return the next token at or after ``pos`` and the position just past it."""
    match = _TOKEN.match(line, pos)
    if not match:
        return None, pos
    return match.group(1), match.end()


def _rest_of_line(line: str, pos: int) -> str:
    """Return the remainder of the line without leading blanks or its terminator."""
    return line[pos:].lstrip(" \t").removesuffix("\n").removesuffix("\r")


class StationParser:
    """Parses ``id capacity latitude longitude name...`` lines into Station objects."""

    @staticmethod
    def parse_line(line: str) -> Station | None:
        """Parse one station line.

        The name is everything after the longitude, so it may contain spaces.
        Numeric fields that do not start with a number read as zero.

        Args:
            line: A raw line, with or without its terminator.

        Returns:
            The station, or None if capacity, latitude or longitude is missing.
        """
        station_id, pos = _next_token(line, 0)
        capacity, pos = _next_token(line, pos)
        latitude, pos = _next_token(line, pos)
        longitude, pos = _next_token(line, pos)

        if station_id is None or capacity is None or latitude is None or longitude is None:
            return None

        return Station(
            id=station_id,
            capacity=parse_int_prefix(capacity),
            latitude=parse_float_prefix(latitude),
            longitude=parse_float_prefix(longitude),
            name=_rest_of_line(line, pos),
        )


class TripParser:
    """Parses ``id bike start end duration start_time`` lines into Trip objects."""

    @staticmethod
    def parse_line(line: str) -> Trip | None:
        """Parse one trip line.

        Returns:
            The trip, or None if the line ends before the duration field.
            A missing start time is kept as an empty string.
        """
        trip_id, pos = _next_token(line, 0)
        bike_id, pos = _next_token(line, pos)
        start_station_id, pos = _next_token(line, pos)
        end_station_id, pos = _next_token(line, pos)
        duration, pos = _next_token(line, pos)
        start_time, _ = _next_token(line, pos)

        if (
            trip_id is None
            or bike_id is None
            or start_station_id is None
            or end_station_id is None
            or duration is None
        ):
            return None

        return Trip(
            id=trip_id,
            bike_id=bike_id,
            start_station_id=start_station_id,
            end_station_id=end_station_id,
            duration=parse_int_prefix(duration),
            start_time=start_time or "",
        )
