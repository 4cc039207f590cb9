"""Playing card decks and shoes."""

from .deck import (
    Deck,
    Shoe,
    compare_cards,
    create_custom_deck,
    create_custom_shoe,
    create_deck,
    create_poker_deck,
    create_shoe,
    sort_cards,
)
from .imaging import CardImage, CardSpriteSize, Font
from .models import Card, DeckConfig, DeckType, StdFace, StdSuit

__all__ = [
    "Card",
    "CardImage",
    "CardSpriteSize",
    "Deck",
    "DeckConfig",
    "DeckType",
    "Font",
    "Shoe",
    "StdFace",
    "StdSuit",
    "compare_cards",
    "create_custom_deck",
    "create_custom_shoe",
    "create_deck",
    "create_poker_deck",
    "create_shoe",
    "sort_cards",
]
