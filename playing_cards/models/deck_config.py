"""Deck configuration model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from .card import CARD_ID_MULTIPLIER, STD_SUIT_NAMES, DeckType


class DeckConfig(BaseModel):
    """Immutable description of one physical deck.

    Standard decks (Poker, Pinochle, Euchre) use ``num_jokers``,
    ``is_ace_high`` and ``are_faces_ten``. Custom decks use the suit and
    pip tables; ``card_bases`` holds one image per suit plus a trailing
    image for unsuited cards.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    deck_type: DeckType = DeckType.POKER

    # Standard decks
    num_jokers: int = 0
    is_ace_high: bool = True
    are_faces_ten: bool = False

    # Custom decks
    suit_names: tuple[str, ...] = ()
    suit_colors: tuple[int, ...] = ()
    pip_names: tuple[str, ...] = ()
    pip_values: tuple[int, ...] = ()
    pip_repeats: int = 1
    pip_print: tuple[str, ...] = ()
    unsuited_pips: tuple[int, ...] = ()
    card_bases: tuple[Any, ...] = ()  # CardImage, one per suit + unsuited
    font: Any = None  # imaging.Font

    @property
    def is_custom(self) -> bool:
        """Check if this is a custom deck."""
        return self.deck_type == DeckType.CUSTOM

    @property
    def num_suits(self) -> int:
        """Number of declared suits (the unsuited slot is not counted)."""
        if self.is_custom:
            return len(self.suit_names)
        return len(STD_SUIT_NAMES)

    @model_validator(mode="after")
    def _check_tables(self) -> "DeckConfig":
        if not self.is_custom:
            if self.num_jokers < 0:
                raise ValueError(f"num_jokers must be >= 0, got {self.num_jokers}")
            return self

        if not self.suit_names or not self.pip_names:
            raise ValueError("Custom decks need suit_names and pip_names")
        if len(self.pip_names) > CARD_ID_MULTIPLIER:
            raise ValueError(
                f"Custom decks support at most {CARD_ID_MULTIPLIER} pips, "
                f"got {len(self.pip_names)}"
            )
        if len(self.pip_values) != len(self.pip_names):
            raise ValueError("pip_values must parallel pip_names")
        if self.pip_print and len(self.pip_print) != len(self.pip_names):
            raise ValueError("pip_print must parallel pip_names")
        if len(self.suit_colors) > len(self.suit_names):
            raise ValueError("suit_colors has more entries than suit_names")
        if self.card_bases and len(self.card_bases) != len(self.suit_names) + 1:
            raise ValueError(
                "card_bases needs one image per suit plus one for unsuited cards"
            )
        if self.pip_repeats < 1:
            raise ValueError(f"pip_repeats must be >= 1, got {self.pip_repeats}")
        for pip in self.unsuited_pips:
            if not 0 <= pip < len(self.pip_names):
                raise ValueError(f"Unsuited pip index out of range: {pip}")
        return self
