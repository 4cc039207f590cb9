"""Card and deck models."""

from .card import (
    CARD_ID_MULTIPLIER,
    Card,
    DeckType,
    StdFace,
    StdSuit,
    decode_card_id,
    encode_card_id,
)
from .deck_config import DeckConfig

__all__ = [
    "CARD_ID_MULTIPLIER",
    "Card",
    "DeckConfig",
    "DeckType",
    "StdFace",
    "StdSuit",
    "decode_card_id",
    "encode_card_id",
]
