"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (DUNGEON_MINI_*)
3. Defaults (lowest priority)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class OpenTelemetrySettings(BaseSettings):
    """Settings for OpenTelemetry tracing."""

    enabled: bool = Field(
        default=False,
        description="Export spans to the console",
    )
    service_name: str = Field(
        default="dungeon-mini",
        description="Service name reported on spans",
    )

    model_config = {"env_prefix": "DUNGEON_MINI_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".dungeon-mini",
        description="Directory for save files and the scoreboard",
    )
    save_file: str = Field(
        default="save.json",
        description="Save file name inside data_dir",
    )
    scores_file: str = Field(
        default="scores.json",
        description="Scoreboard file name inside data_dir",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )

    # New-game player stats
    player_name: str = Field(default="Hero", min_length=1)
    player_hp: int = Field(default=20, gt=0)
    player_attack: int = Field(default=5, gt=0)

    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="OpenTelemetry settings",
    )

    model_config = {"env_prefix": "DUNGEON_MINI_"}

    def save_path(self) -> Path:
        """Get the save file path."""
        return self.data_dir / self.save_file

    def scores_path(self) -> Path:
        """Get the scoreboard file path."""
        return self.data_dir / self.scores_file


def get_settings(**overrides: object) -> Settings:
    """Get application settings, loading from environment.

    Keyword overrides (typically CLI flags) win over the environment.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(otel=OpenTelemetrySettings(), **values)
