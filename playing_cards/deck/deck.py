"""A single deck: composed card IDs plus card resolution."""

import logging

from playing_cards.imaging.image import CardImage
from playing_cards.imaging.sprites import CardSpriteSize, render_card
from playing_cards.models.card import (
    STD_PIP_NAMES,
    STD_PIP_VALUES,
    STD_SUIT_NAMES,
    UNSUITED_NAME,
    Card,
    DeckType,
    StdFace,
    decode_card_id,
)
from playing_cards.models.deck_config import DeckConfig

from .composer import compose_deck

logger = logging.getLogger(__name__)


class Deck:
    """One physical deck.

    The card ID list is built once. The only mutable state is the ace-high
    flag on standard decks, which affects cards resolved after the change.
    """

    def __init__(self, config: DeckConfig | None = None):
        """Initialize a deck.

        Args:
            config: Deck configuration (a standard Poker deck if not provided)
        """
        self.config = config or DeckConfig()
        self._is_ace_high = self.config.is_ace_high and not self.config.is_custom
        self._card_ids = compose_deck(self.config)
        logger.debug(
            f"Composed {self.config.deck_type.name} deck with {len(self._card_ids)} cards"
        )

    @property
    def deck_type(self) -> DeckType:
        return self.config.deck_type

    @property
    def card_ids(self) -> tuple[int, ...]:
        """Card IDs in this deck, in build order."""
        return self._card_ids

    @property
    def are_faces_ten(self) -> bool:
        return self.config.are_faces_ten and not self.config.is_custom

    @property
    def has_jokers(self) -> bool:
        """Check if jokers were added. Always False for custom decks."""
        return self.config.num_jokers > 0 and not self.config.is_custom

    @property
    def is_ace_high(self) -> bool:
        """Check if aces rank highest. Always False for custom decks."""
        return self._is_ace_high

    @is_ace_high.setter
    def is_ace_high(self, value: bool) -> None:
        if self.config.is_custom:
            logger.debug("Ignoring ace-high change on a custom deck")
            return
        self._is_ace_high = value

    def get_card(self, card_id: int) -> Card:
        """Resolve a card ID into a Card.

        Args:
            card_id: ID produced by this deck's composition.

        Returns:
            Card with names and face value resolved under the current policy.
        """
        suit, pip = decode_card_id(card_id)
        config = self.config

        if config.is_custom:
            suit_names = config.suit_names
            pip_name = config.pip_names[pip]
            face_value = config.pip_values[pip]
        else:
            suit_names = STD_SUIT_NAMES
            pip_name = STD_PIP_NAMES[pip]
            if config.are_faces_ten and StdFace.JACK <= pip <= StdFace.KING:
                face_value = 10
            else:
                face_value = STD_PIP_VALUES[pip]

        if suit >= len(suit_names):
            suit_name = UNSUITED_NAME
            name = f"{pip_name} ({UNSUITED_NAME})"
        else:
            suit_name = suit_names[suit]
            name = f"{pip_name} of {suit_name}"

        return Card(
            id=card_id,
            name=name,
            pip_id=pip,
            face_value=face_value,
            pip_name=pip_name,
            suit_value=suit,
            suit_name=suit_name,
            is_ace_high=self._is_ace_high,
        )

    def get_card_image(
        self,
        card: Card,
        size: CardSpriteSize = CardSpriteSize.SIZE_16X16,
    ) -> CardImage:
        """Build the sprite image for a card. ``size`` is ignored for custom decks."""
        return render_card(self.config, card, size)

    def __len__(self) -> int:
        return len(self._card_ids)

    def __repr__(self) -> str:
        return f"Deck(type={self.deck_type.name}, cards={len(self._card_ids)})"
