"""Two-card ranking for sorting."""

from functools import cmp_to_key
from typing import Iterable

from playing_cards.models.card import Card, StdFace


def _is_high_ace(card: Card) -> bool:
    return card.is_ace_high and card.pip_id == StdFace.ACE


def compare_cards(card1: Card, card2: Card) -> int:
    """Compare the ranks of two cards.

    Both cards are checked for high aces. A high Ace beats any card that is
    neither an Ace nor a Joker; otherwise face values decide.

    Args:
        card1: First ("left") card.
        card2: Second ("right") card.

    Returns:
        Negative if card1 is higher, 0 if equal, positive if card2 is higher.
    """
    left_ace = _is_high_ace(card1)
    right_ace = _is_high_ace(card2)
    if left_ace and not right_ace and card2.pip_id not in (StdFace.ACE, StdFace.JOKER):
        return -1
    if right_ace and not left_ace and card1.pip_id not in (StdFace.ACE, StdFace.JOKER):
        return 1
    return card2.face_value - card1.face_value


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    """Sort cards highest first using compare_cards."""
    return sorted(cards, key=cmp_to_key(compare_cards))
