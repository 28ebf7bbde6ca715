"""Lenient numeric conversion used for flat-file fields.

Both helpers convert the longest numeric prefix of a token and fall back to
zero when there is none, so ``"12abc"`` reads as 12 and ``"abc"`` as 0. They
never raise.
"""

import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int_prefix(text: str) -> int:
    """Convert the leading integer of ``text``, or return 0."""
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    return int(match.group(1))


def parse_float_prefix(text: str) -> float:
    """Convert the leading decimal number of ``text``, or return 0.0."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(1))
