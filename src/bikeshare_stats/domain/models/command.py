"""Command domain model for the interactive loop."""

from dataclasses import dataclass
from enum import Enum


class CommandKind(Enum):
    """Kinds of command understood by the dispatcher."""

    QUIT = "#"
    STATS = "stats"
    DURATIONS = "durations"
    STARTING = "starting"
    NEARME = "nearme"
    STATIONS = "stations"
    FIND = "find"
    INVALID = "invalid"


@dataclass(frozen=True)
class Command:
    """A parsed command line.

    ``argument`` holds everything after the keyword and one separating space,
    verbatim. It is empty for commands without arguments. INVALID commands
    carry the whole trimmed line.
    """

    kind: CommandKind
    argument: str = ""
