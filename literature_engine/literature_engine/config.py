"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from literature_engine.logging.game_logger import GameLogConfig
from literature_engine.models.card import Variant


class GameConfig(BaseModel):
    """Game configuration."""

    variant: Variant = Variant.SIX_PLAYER
    num_games: int = 1
    seed: int | None = None
    max_turns: int = 2000  # Self-play stops a game after this many actions


class BotConfig(BaseModel):
    """Self-play bot configuration."""

    strategy: str = "random"
    declare_rate: float = 0.05  # Chance of declaring a pit on a guess


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    bots: BotConfig = BotConfig()
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
