"""Card identity, standard tables and the resolved Card model."""

from enum import IntEnum

from pydantic import BaseModel

# Card IDs are suit * 100 + face, so a deck can hold at most 100 faces.
CARD_ID_MULTIPLIER = 100


class StdSuit(IntEnum):
    """Standard suits (order is the deck build order)."""

    HEARTS = 0
    SPADES = 1
    DIAMONDS = 2
    CLUBS = 3
    UNSUITED = 4


class StdFace(IntEnum):
    """Standard faces (value is the face index used in card IDs)."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12
    JOKER = 13


class DeckType(IntEnum):
    """Deck shapes."""

    POKER = 0
    PINOCHLE = 1
    EUCHRE = 2
    CUSTOM = 3


UNSUITED_NAME = "Unsuited"

STD_SUIT_NAMES: tuple[str, ...] = ("Hearts", "Spades", "Diamonds", "Clubs")

# Indexed by StdSuit, including the unsuited slot
STD_SUIT_COLORS: tuple[int, ...] = (2, 15, 2, 15, 1)

STD_PIP_NAMES: tuple[str, ...] = (
    "Ace", "Two", "Three", "Four", "Five", "Six", "Seven",
    "Eight", "Nine", "Ten", "Jack", "Queen", "King", "Joker",
)

STD_PIP_VALUES: tuple[int, ...] = (
    1, 2, 3, 4, 5, 6, 7,
    8, 9, 10, 11, 12, 13, 99,
)


def encode_card_id(suit_index: int, face_index: int) -> int:
    """Build a card ID from its suit and face indices.

    Args:
        suit_index: Suit index (one past the last suit means unsuited).
        face_index: Face index, 0-99.

    Returns:
        Card ID.
    """
    if not 0 <= face_index < CARD_ID_MULTIPLIER:
        raise ValueError(f"Face index out of range: {face_index}")
    return suit_index * CARD_ID_MULTIPLIER + face_index


def decode_card_id(card_id: int) -> tuple[int, int]:
    """Split a card ID into (suit_index, face_index)."""
    return card_id // CARD_ID_MULTIPLIER, card_id % CARD_ID_MULTIPLIER


class Card(BaseModel, frozen=True):
    """Resolved playing card.

    Cards are detached values: ``is_ace_high`` is a snapshot of the deck
    policy at the time the card was dealt and does not follow later changes.
    Two cards are the same card when their IDs match.
    """

    id: int
    name: str
    pip_id: int
    face_value: int
    pip_name: str
    suit_value: int
    suit_name: str
    is_ace_high: bool = True

    @property
    def is_unsuited(self) -> bool:
        """Check if this card belongs to no suit."""
        return self.suit_name == UNSUITED_NAME

    @property
    def is_joker(self) -> bool:
        """Check if this is a standard joker.

        Only meaningful for standard decks; custom decks have no joker face.
        """
        return (
            self.pip_id == StdFace.JOKER
            and self.pip_name == STD_PIP_NAMES[StdFace.JOKER]
            and self.is_unsuited
        )

    def _beats_as_high_ace(self, card: "Card") -> bool:
        return (
            self.is_ace_high
            and self.pip_id == StdFace.ACE
            and card.pip_id != StdFace.ACE
            and card.pip_id != StdFace.JOKER
        )

    def is_equal_to(self, card: "Card") -> bool:
        """Check if face values match (suits are ignored).

        With faces worth ten, Jack, Queen and King are all equal.
        """
        return self.face_value == card.face_value

    def is_greater_than(self, card: "Card") -> bool:
        """Check if this card outranks another.

        When aces are high, an Ace beats anything but another Ace or a Joker.
        """
        if self._beats_as_high_ace(card):
            return True
        return self.face_value > card.face_value

    def is_less_than(self, card: "Card") -> bool:
        """Check if this card ranks below another."""
        if self._beats_as_high_ace(card):
            return False
        return self.face_value < card.face_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Card(id={self.id}, name={self.name!r})"
