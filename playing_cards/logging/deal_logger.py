"""Deal logger for replaying a dealing session."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from pydantic import BaseModel

from playing_cards.models.card import Card

from .formatters import format_card

if TYPE_CHECKING:
    from playing_cards.deck.shoe import Shoe


class DealLogConfig(BaseModel):
    """Configuration for deal logging."""

    enabled: bool = False
    output_path: str = "deals.jsonl"


class DealLogger:
    """Logger for shoe events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    """

    def __init__(self, config: DealLogConfig | None = None):
        """Initialize deal logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or DealLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "DealLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_shoe_created(self, shoe: Shoe) -> None:
        """Log shoe creation with its deck setup."""
        deck = shoe.deck
        self._write({
            "type": "shoe_created",
            "timestamp": datetime.now().isoformat(),
            "deck_type": deck.deck_type.name.lower(),
            "num_decks": shoe.num_decks,
            "num_cards": shoe.num_cards,
            "ace_high": deck.is_ace_high,
            "faces_ten": deck.are_faces_ten,
        })

    def log_shuffle(self, shoe: Shoe) -> None:
        """Log a shuffle with the resulting card order."""
        self._write({
            "type": "shuffle",
            "order": list(shoe.card_ids),
        })

    def log_reset(self) -> None:
        """Log a reset without shuffling."""
        self._write({"type": "reset"})

    def log_deal(self, position: int, card: Card, is_custom: bool = False) -> None:
        """Log a dealt card.

        Args:
            position: 1-based position of the card in the shoe.
            card: Card dealt.
            is_custom: Whether the card comes from a custom deck.
        """
        self._write({
            "type": "deal",
            "position": position,
            "card_id": card.id,
            "card": format_card(card, is_custom),
        })

    def log_exhausted(self, shoe: Shoe) -> None:
        """Log an attempt to deal from an empty shoe."""
        self._write({
            "type": "exhausted",
            "num_cards": shoe.num_cards,
        })
