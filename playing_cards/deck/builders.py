"""Factory functions for decks and shoes."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Sequence

from playing_cards.imaging.image import DEFAULT_FONT, CardImage, Font
from playing_cards.imaging.sprites import blank_card_base
from playing_cards.models.card import DeckType
from playing_cards.models.deck_config import DeckConfig

from .shoe import Shoe

if TYPE_CHECKING:
    from playing_cards.config import ShoeConfig
    from playing_cards.logging import DealLogger


def create_deck(
    deck_type: DeckType = DeckType.POKER,
    num_jokers: int = 0,
    is_ace_high: bool = True,
    are_faces_ten: bool = False,
) -> Shoe:
    """Create a single standard deck."""
    return create_shoe(deck_type, 1, num_jokers, is_ace_high, are_faces_ten)


def create_poker_deck() -> Shoe:
    """Create a single 52-card Poker deck with aces high."""
    return Shoe()


def create_shoe(
    deck_type: DeckType = DeckType.POKER,
    num_decks: int = 3,
    num_jokers: int = 0,
    is_ace_high: bool = True,
    are_faces_ten: bool = False,
    rng: random.Random | None = None,
) -> Shoe:
    """Create a shoe of standard decks.

    Args:
        deck_type: Standard deck type (Poker, Pinochle or Euchre)
        num_decks: Number of decks in the shoe
        num_jokers: Jokers added to each deck
        is_ace_high: Whether aces rank highest
        are_faces_ten: Whether Jack, Queen and King are worth 10
        rng: Random source for shuffling

    Returns:
        Unshuffled shoe.
    """
    if deck_type == DeckType.CUSTOM:
        raise ValueError("Use create_custom_shoe for custom decks")
    config = DeckConfig(
        deck_type=deck_type,
        num_jokers=num_jokers,
        is_ace_high=is_ace_high,
        are_faces_ten=are_faces_ten,
    )
    return Shoe(config, num_decks, rng=rng)


def create_custom_deck(
    suit_names: Sequence[str],
    suit_colors: Sequence[int],
    pip_names: Sequence[str],
    pip_values: Sequence[int],
    pip_repeats: int = 1,
    pip_print: Sequence[str] | None = None,
    unsuited_pips: Sequence[int] | None = None,
    card_bases: Sequence[CardImage] | None = None,
    font: Font | None = None,
) -> Shoe:
    """Create a single custom deck. See create_custom_shoe."""
    return create_custom_shoe(
        1,
        suit_names,
        suit_colors,
        pip_names,
        pip_values,
        pip_repeats,
        pip_print,
        unsuited_pips,
        card_bases,
        font,
    )


def create_custom_shoe(
    num_decks: int,
    suit_names: Sequence[str],
    suit_colors: Sequence[int],
    pip_names: Sequence[str],
    pip_values: Sequence[int],
    pip_repeats: int = 1,
    pip_print: Sequence[str] | None = None,
    unsuited_pips: Sequence[int] | None = None,
    card_bases: Sequence[CardImage] | None = None,
    font: Font | None = None,
    rng: random.Random | None = None,
) -> Shoe:
    """Create a shoe of custom decks.

    Args:
        num_decks: Number of decks in the shoe
        suit_names: Suit names, without an "unsuited" entry
        suit_colors: Print color for each suit
        pip_names: Face names, including any unsuited faces
        pip_values: Face value for each face
        pip_repeats: Times each face appears per suit
        pip_print: Text printed on each face (first letter of the name if not provided)
        unsuited_pips: Indices into pip_names of faces with no suit (e.g. jokers)
        card_bases: Base image per suit plus one for unsuited cards
        font: Font for printing faces (built-in font if not provided)
        rng: Random source for shuffling

    Returns:
        Unshuffled shoe.
    """
    if pip_print is None:
        pip_print = [name[:1] for name in pip_names]
    if card_bases is None:
        card_bases = [blank_card_base() for _ in range(len(suit_names) + 1)]

    config = DeckConfig(
        deck_type=DeckType.CUSTOM,
        is_ace_high=False,
        suit_names=tuple(suit_names),
        suit_colors=tuple(suit_colors),
        pip_names=tuple(pip_names),
        pip_values=tuple(pip_values),
        pip_repeats=pip_repeats,
        pip_print=tuple(pip_print),
        unsuited_pips=tuple(unsuited_pips or ()),
        card_bases=tuple(card_bases),
        font=font or DEFAULT_FONT,
    )
    return Shoe(config, num_decks, rng=rng)


def create_shoe_from_config(
    config: ShoeConfig,
    deal_logger: DealLogger | None = None,
) -> Shoe:
    """Create a standard shoe from configuration.

    The shoe is shuffled when ``config.shuffle`` is set.
    """
    rng = random.Random(config.seed) if config.seed is not None else None
    deck_config = DeckConfig(
        deck_type=config.deck_type,
        num_jokers=config.num_jokers,
        is_ace_high=config.is_ace_high,
        are_faces_ten=config.are_faces_ten,
    )
    shoe = Shoe(deck_config, config.num_decks, rng=rng, deal_logger=deal_logger)
    if config.shuffle:
        shoe.shuffle()
    return shoe
