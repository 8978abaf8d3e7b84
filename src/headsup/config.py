"""Application configuration for headsup."""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from .errors import ConfigError


@dataclass
class GameConfig:
    """Stakes for a new match."""

    starting_chips: int = 1000
    small_blind: int = 10
    big_blind: int = 20

    def __post_init__(self) -> None:
        if self.starting_chips <= 0:
            raise ConfigError(f"starting_chips must be positive, got {self.starting_chips}")
        if self.small_blind <= 0:
            raise ConfigError(f"small_blind must be positive, got {self.small_blind}")
        if self.big_blind < self.small_blind:
            raise ConfigError(
                f"big_blind ({self.big_blind}) cannot be below small_blind ({self.small_blind})"
            )


@dataclass
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ConfigError(f"Unknown log level: {self.level}")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level.upper())


@dataclass
class Config:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from file, falling back to defaults."""
        config_paths = [
            Path.cwd() / "headsup.toml",
            Path.cwd() / ".headsup.toml",
            Path.home() / ".config" / "headsup" / "config.toml",
            Path.home() / ".headsup.toml",
        ]

        for path in config_paths:
            if path.exists():
                return cls.from_file(path)

        return cls()

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load config from a TOML file."""
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        game_data = data.get("game", {})
        game = GameConfig(
            starting_chips=game_data.get("starting_chips", 1000),
            small_blind=game_data.get("small_blind", 10),
            big_blind=game_data.get("big_blind", 20),
        )

        log_data = data.get("logging", {})
        log_config = LoggingConfig(level=log_data.get("level", "WARNING"))

        return cls(game=game, logging=log_config)


# Global config instance (loaded lazily)
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config
