"""Interactive analyzer for bike-share station and trip datasets."""

__version__ = "0.1.0"
