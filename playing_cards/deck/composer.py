"""Enumerate the card IDs that make up one deck."""

from typing import Iterator

from playing_cards.models.card import DeckType, StdFace, StdSuit, encode_card_id
from playing_cards.models.deck_config import DeckConfig

# Euchre and Pinochle share the Ace plus Nine through King
SHORT_DECK_FACES: tuple[StdFace, ...] = (StdFace.ACE,) + tuple(
    StdFace(face) for face in range(StdFace.NINE, StdFace.KING + 1)
)
POKER_FACES: tuple[StdFace, ...] = tuple(
    StdFace(face) for face in range(StdFace.ACE, StdFace.KING + 1)
)


def standard_faces(deck_type: DeckType) -> tuple[tuple[StdFace, ...], int]:
    """Get the faces used by a standard deck and how often each repeats.

    Args:
        deck_type: Standard deck type.

    Returns:
        Tuple of (faces in ascending order, repeats per suit).
    """
    if deck_type == DeckType.POKER:
        return POKER_FACES, 1
    if deck_type == DeckType.EUCHRE:
        return SHORT_DECK_FACES, 1
    if deck_type == DeckType.PINOCHLE:
        return SHORT_DECK_FACES, 2
    raise ValueError(f"Not a standard deck type: {deck_type!r}")


def _iter_standard(config: DeckConfig) -> Iterator[int]:
    faces, repeats = standard_faces(config.deck_type)
    for suit in (StdSuit.HEARTS, StdSuit.SPADES, StdSuit.DIAMONDS, StdSuit.CLUBS):
        for face in faces:
            for _ in range(repeats):
                yield encode_card_id(suit, face)

    for _ in range(config.num_jokers):
        yield encode_card_id(StdSuit.UNSUITED, StdFace.JOKER)


def _iter_custom(config: DeckConfig) -> Iterator[int]:
    unsuited = set(config.unsuited_pips)
    for suit in range(len(config.suit_names)):
        for pip in range(len(config.pip_names)):
            if pip in unsuited:
                continue
            for _ in range(config.pip_repeats):
                yield encode_card_id(suit, pip)

    # Unsuited pips go in the slot after the last suit
    for pip in config.unsuited_pips:
        for _ in range(config.pip_repeats):
            yield encode_card_id(len(config.suit_names), pip)


def compose_deck(config: DeckConfig) -> tuple[int, ...]:
    """Build the ordered card IDs for one deck.

    Standard decks list suits in Hearts, Spades, Diamonds, Clubs order with
    jokers at the end. Custom decks list suited pips first, then each
    unsuited pip in the order given.

    Args:
        config: Deck configuration.

    Returns:
        Card IDs for exactly one physical deck.
    """
    if config.is_custom:
        return tuple(_iter_custom(config))
    return tuple(_iter_standard(config))
