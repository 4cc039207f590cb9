"""Shoe: one or more decks dealt in sequence."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterator

from playing_cards.imaging.image import CardImage
from playing_cards.imaging.sprites import CardSpriteSize
from playing_cards.models.card import Card
from playing_cards.models.deck_config import DeckConfig

from .deck import Deck

if TYPE_CHECKING:
    from playing_cards.logging import DealLogger

logger = logging.getLogger(__name__)


class Shoe:
    """Dealing sequence over ``num_decks`` copies of a deck.

    The cursor marks the next card to deal. ``reset`` rewinds without
    changing the order; ``shuffle`` reorders every card and rewinds.
    Not thread-safe: callers sharing a shoe must serialize access.
    """

    def __init__(
        self,
        config: DeckConfig | None = None,
        num_decks: int = 1,
        rng: random.Random | None = None,
        deal_logger: DealLogger | None = None,
    ):
        """Initialize a shoe.

        Args:
            config: Deck configuration (standard Poker deck if not provided)
            num_decks: Number of decks in the shoe (at least 1)
            rng: Random source for shuffling
            deal_logger: DealLogger for detailed deal records
        """
        if num_decks < 1:
            raise ValueError(f"num_decks must be >= 1, got {num_decks}")

        self._deck = Deck(config)
        self._num_decks = num_decks
        self._rng = rng or random.Random()
        self.deal_logger = deal_logger

        self._cards: list[int] = list(self._deck.card_ids) * num_decks
        self._cursor = 0

        logger.debug(f"Created {self!r}")
        if self.deal_logger:
            self.deal_logger.log_shoe_created(self)

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def num_decks(self) -> int:
        return self._num_decks

    @property
    def card_ids(self) -> tuple[int, ...]:
        """Current dealing order."""
        return tuple(self._cards)

    @property
    def num_cards(self) -> int:
        """Total number of cards in the shoe."""
        return len(self._cards)

    @property
    def num_cards_remain(self) -> int:
        """Number of cards not yet dealt."""
        return len(self._cards) - self._cursor

    @property
    def has_more_cards(self) -> bool:
        return self._cursor < len(self._cards)

    @property
    def are_faces_ten(self) -> bool:
        return self._deck.are_faces_ten

    @property
    def is_ace_high(self) -> bool:
        return self._deck.is_ace_high

    @is_ace_high.setter
    def is_ace_high(self, value: bool) -> None:
        self._deck.is_ace_high = value

    def next_card(self) -> Card | None:
        """Deal the next card.

        Returns:
            The next Card, or None when the shoe is exhausted.
        """
        if self._cursor >= len(self._cards):
            logger.debug("Shoe exhausted, no card dealt")
            if self.deal_logger:
                self.deal_logger.log_exhausted(self)
            return None

        card = self._deck.get_card(self._cards[self._cursor])
        self._cursor += 1
        if self.deal_logger:
            self.deal_logger.log_deal(
                self._cursor, card, self._deck.config.is_custom
            )
        return card

    def deal(self, count: int) -> list[Card]:
        """Deal up to ``count`` cards (fewer if the shoe runs out)."""
        cards = []
        for _ in range(count):
            card = self.next_card()
            if card is None:
                break
            cards.append(card)
        return cards

    def reset(self) -> None:
        """Return all cards to the shoe without shuffling."""
        self._cursor = 0
        logger.debug("Shoe reset")
        if self.deal_logger:
            self.deal_logger.log_reset()

    def shuffle(self) -> None:
        """Return all cards to the shoe and shuffle them.

        Every position is swapped with a partner drawn from the whole shoe,
        matching the original dealing order for a given random sequence.
        """
        last = len(self._cards) - 1
        for index in range(len(self._cards)):
            swap = self._rng.randint(0, last)
            if swap != index:
                self._cards[index], self._cards[swap] = self._cards[swap], self._cards[index]

        self._cursor = 0
        logger.info(f"Shuffled {len(self._cards)} cards")
        if self.deal_logger:
            self.deal_logger.log_shuffle(self)

    def get_card_image(
        self,
        card: Card,
        size: CardSpriteSize = CardSpriteSize.SIZE_16X16,
    ) -> CardImage:
        """Build the sprite image for a card dealt from this shoe."""
        return self._deck.get_card_image(card, size)

    def __iter__(self) -> Iterator[Card]:
        """Deal the remaining cards."""
        while self.has_more_cards:
            yield self.next_card()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return (
            f"Shoe(type={self._deck.deck_type.name}, decks={self._num_decks}, "
            f"remaining={self.num_cards_remain}/{self.num_cards})"
        )
