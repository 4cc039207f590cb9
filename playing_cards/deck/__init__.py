"""Deck composition, dealing and comparison."""

from .builders import (
    create_custom_deck,
    create_custom_shoe,
    create_deck,
    create_poker_deck,
    create_shoe,
    create_shoe_from_config,
)
from .comparison import compare_cards, sort_cards
from .composer import compose_deck, standard_faces
from .deck import Deck
from .shoe import Shoe

__all__ = [
    "Deck",
    "Shoe",
    "compare_cards",
    "compose_deck",
    "create_custom_deck",
    "create_custom_shoe",
    "create_deck",
    "create_poker_deck",
    "create_shoe",
    "create_shoe_from_config",
    "sort_cards",
    "standard_faces",
]
