"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator


class GameConfig(BaseModel):
    """Game configuration."""

    seed: int | None = None  # None = new random deal every run
    player_names: list[str] = ["Player 1", "Player 2"]

    @field_validator("player_names")
    @classmethod
    def _two_names(cls, names: list[str]) -> list[str]:
        if len(names) != 2:
            raise ValueError("Exactly two player names are required")
        return names


class DisplayConfig(BaseModel):
    """Terminal display configuration."""

    color: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: str | None = None  # curses owns the terminal, so log to a file


class GameLogConfig(BaseModel):
    """Game event log configuration."""

    enabled: bool = False
    output_path: str = "logs"  # Directory; filename is generated per game


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
