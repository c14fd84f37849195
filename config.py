"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field

from core.rules import TableRules


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to ``default``."""
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    num_decks: int = field(default_factory=lambda: _env_int("BLACKJACK_DECKS", 4))
    starting_balance: int = field(
        default_factory=lambda: _env_int("BLACKJACK_STARTING_BALANCE", 1000)
    )
    max_players: int = 9
    min_bet: int = 1
    dealer_stands_on: int = 17

    def __post_init__(self) -> None:
        """Validate configured values."""
        if self.starting_balance < 1:
            raise ValueError("starting_balance must be at least 1")
        # TableRules validates the rest
        self.to_rules()

    def to_rules(self) -> TableRules:
        """Build the table rules this configuration describes."""
        return TableRules(
            num_decks=self.num_decks,
            max_players=self.max_players,
            min_bet=self.min_bet,
            dealer_stands_on=self.dealer_stands_on,
        )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def configure_logging(settings: LoggingConfig, debug: bool = False) -> None:
    """Install the root logging handler once for the process."""
    level = logging.DEBUG if debug else getattr(logging, settings.level, logging.WARNING)
    logging.basicConfig(level=level, format=settings.format)


# Global configuration instance
config = AppConfig()
