"""Parser for interactive command lines."""

from bikeshare_stats.domain.models.command import Command, CommandKind

# Commands that take no arguments and must match exactly
_BARE_COMMANDS: dict[str, CommandKind] = {
    "#": CommandKind.QUIT,
    "stats": CommandKind.STATS,
    "durations": CommandKind.DURATIONS,
    "starting": CommandKind.STARTING,
    "stations": CommandKind.STATIONS,
}

# Commands followed by one space and an argument string
_ARGUMENT_COMMANDS: dict[str, CommandKind] = {
    "nearme": CommandKind.NEARME,
    "find": CommandKind.FIND,
}


class CommandParser:
    """Maps a typed line to a Command."""

    @staticmethod
    def parse(line: str) -> Command:
        """Parse one command line.

        Surrounding whitespace is ignored. For ``nearme`` and ``find`` the
        argument is the rest of the line after the keyword and one space,
        kept verbatim. Anything unrecognised becomes an INVALID command that
        carries the trimmed line.
        """
        text = line.strip()

        if text in _BARE_COMMANDS:
            return Command(kind=_BARE_COMMANDS[text])

        for keyword, kind in _ARGUMENT_COMMANDS.items():
            if text == keyword:
                return Command(kind=kind)
            if text.startswith(keyword + " "):
                return Command(kind=kind, argument=text[len(keyword) + 1 :])

        return Command(kind=CommandKind.INVALID, argument=text)
