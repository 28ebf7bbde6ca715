"""Allow running the analyzer with ``python -m bikeshare_stats``."""

from bikeshare_stats.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
