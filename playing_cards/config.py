"""Configuration management."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

from playing_cards.logging import DealLogConfig
from playing_cards.models.card import DeckType


class ShoeConfig(BaseModel):
    """Shoe configuration (standard decks only)."""

    deck_type: DeckType = DeckType.POKER
    num_decks: int = 1
    num_jokers: int = 0
    is_ace_high: bool = True
    are_faces_ten: bool = False
    shuffle: bool = True
    seed: int | None = None

    @field_validator("deck_type", mode="before")
    @classmethod
    def _parse_deck_type(cls, value: Any) -> Any:
        # Accept names such as "poker" or "EUCHRE" from YAML
        if isinstance(value, str):
            try:
                return DeckType[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown deck type: {value}") from None
        return value

    @field_validator("deck_type")
    @classmethod
    def _reject_custom(cls, value: DeckType) -> DeckType:
        if value == DeckType.CUSTOM:
            raise ValueError("Custom decks cannot be configured from a file")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseModel):
    """Root configuration."""

    shoe: ShoeConfig = ShoeConfig()
    logging: LoggingConfig = LoggingConfig()
    deal_log: DealLogConfig = DealLogConfig()


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
