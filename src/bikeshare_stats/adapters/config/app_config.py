"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="BIKESHARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Dataset files; prompted for interactively when unset
    stations_file: str | None = Field(default=None, description="Path to the stations file")
    trips_file: str | None = Field(default=None, description="Path to the bike trips file")

    log_level: str = Field(default="WARNING", description="Logging level name (e.g. 'INFO')")

    # Display configuration
    distance_decimals: int = Field(
        default=4, ge=0, le=10, description="Decimals printed for 'nearme' distances"
    )
    prompt: str = Field(
        default="Enter command (# to stop)> ", description="Prompt shown before each command"
    )

    # Optional TOML file with [files] and [display] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding dataset paths and display settings",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def apply_toml_overrides(self) -> None:
        """Update settings from the TOML file when ``config_file`` is set.

        Supports ``[files]`` with ``stations``/``trips`` and ``[display]`` with
        ``distance_decimals``/``prompt``.
        """
        if not self.config_file:
            return

        toml_data = self._load_toml_data()

        files = toml_data.get("files", {})
        if not isinstance(files, dict):
            raise ValueError("TOML config 'files' must be a table")
        if "stations" in files:
            self.stations_file = str(files["stations"])
        if "trips" in files:
            self.trips_file = str(files["trips"])

        display = toml_data.get("display", {})
        if not isinstance(display, dict):
            raise ValueError("TOML config 'display' must be a table")
        if "distance_decimals" in display:
            self.distance_decimals = display["distance_decimals"]
        if "prompt" in display:
            self.prompt = display["prompt"]
