"""Configuration management."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from factors_multiples.models.board import DEFAULT_SIZE


class GameMode(str, Enum):
    """Who plays Player 2 (or Player 1 with --ai-first)."""

    PVP = "pvp"  # Player vs Player
    AI = "ai"  # Player vs AI


class GameConfig(BaseModel):
    """Game configuration."""

    model_config = ConfigDict(validate_assignment=True)

    # Below 4 there is no even number <= size / 2 to open with
    size: int = Field(default=DEFAULT_SIZE, ge=4)
    mode: GameMode = GameMode.PVP
    automated_player: int = Field(default=2, ge=1, le=2)
    ai_delay: float = Field(default=1.0, ge=0)  # Seconds of cosmetic "thinking"
    seed: int | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_history: bool = True


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()


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
