"""Loads flat-file datasets line by line."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class DatasetLoadError(Exception):
    """Raised when a dataset file cannot be opened for reading."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f'unable to open file "{self.path}": {reason}')


def load_records(
    path: str | Path, parse_line: Callable[[str], RecordT | None]
) -> tuple[list[RecordT], int]:
    """Read every line of ``path`` and keep the ones ``parse_line`` accepts.

    Args:
        path: File to read.
        parse_line: Returns a record for a line, or None to drop it.

    Returns:
        Tuple of (records in file order, number of records).

    Raises:
        DatasetLoadError: If the file cannot be opened or read.
    """
    records: list[RecordT] = []
    dropped = 0
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                record = parse_line(line)
                if record is None:
                    dropped += 1
                    continue
                records.append(record)
    except OSError as e:
        raise DatasetLoadError(path, e.strerror or str(e)) from e

    if dropped:
        logger.debug(f"Dropped {dropped} unparseable line(s) from {path}")
    logger.info(f"Loaded {len(records)} record(s) from {path}")
    return records, len(records)
