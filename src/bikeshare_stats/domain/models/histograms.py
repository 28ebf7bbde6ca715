"""Histogram domain models for trip durations and starting hours."""

from dataclasses import dataclass

# Inclusive upper bounds in seconds; anything above the last bound lands in the final bucket.
DURATION_BUCKET_BOUNDS: tuple[int, ...] = (1800, 3600, 7200, 18000)

DURATION_BUCKET_LABELS: tuple[str, ...] = (
    "trips <= 30 mins",
    "trips 30..60 mins",
    "trips 1-2 hrs",
    "trips 2-5 hrs",
    "trips > 5 hrs",
)

HOURS_PER_DAY = 24


@dataclass(frozen=True)
class DurationHistogram:
    """Trip counts per duration bucket, in bucket order."""

    counts: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.counts) != len(DURATION_BUCKET_LABELS):
            raise ValueError(
                f"DurationHistogram needs {len(DURATION_BUCKET_LABELS)} counts, got {len(self.counts)}"
            )

    def labelled(self) -> list[tuple[str, int]]:
        """Return (label, count) pairs in bucket order."""
        return list(zip(DURATION_BUCKET_LABELS, self.counts, strict=True))


@dataclass(frozen=True)
class HourlyHistogram:
    """Trip counts per starting hour 0..23."""

    counts: tuple[int, ...]
    skipped: int = 0  # Trips whose start time gave no usable hour

    def __post_init__(self) -> None:
        if len(self.counts) != HOURS_PER_DAY:
            raise ValueError(f"HourlyHistogram needs {HOURS_PER_DAY} counts, got {len(self.counts)}")
