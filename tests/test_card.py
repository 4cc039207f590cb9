"""Tests for card models."""

import pytest
from pydantic import ValidationError

from playing_cards.deck.deck import Deck
from playing_cards.models.card import (
    CARD_ID_MULTIPLIER,
    Card,
    DeckType,
    StdFace,
    StdSuit,
    decode_card_id,
    encode_card_id,
)
from playing_cards.models.deck_config import DeckConfig


@pytest.fixture
def deck():
    return Deck(DeckConfig(num_jokers=1))


class TestCardId:
    """Tests for card ID encoding."""

    def test_encode(self):
        """Test suit * 100 + face."""
        assert encode_card_id(StdSuit.SPADES, StdFace.KING) == 112
        assert encode_card_id(StdSuit.UNSUITED, StdFace.JOKER) == 413

    def test_decode(self):
        """Test splitting an ID into suit and face."""
        assert decode_card_id(0) == (0, 0)
        assert decode_card_id(309) == (StdSuit.CLUBS, StdFace.TEN)

    def test_face_out_of_range(self):
        """Test that faces must fit below the multiplier."""
        with pytest.raises(ValueError):
            encode_card_id(0, CARD_ID_MULTIPLIER)
        with pytest.raises(ValueError):
            encode_card_id(0, -1)


class TestCard:
    """Tests for Card class."""

    def test_equality_by_id(self):
        """Test that cards with the same ID are the same card."""
        card1 = Card(id=5, name="Six of Hearts", pip_id=5, face_value=6,
                     pip_name="Six", suit_value=0, suit_name="Hearts")
        card2 = Card(id=5, name="Six of Hearts", pip_id=5, face_value=6,
                     pip_name="Six", suit_value=0, suit_name="Hearts",
                     is_ace_high=False)
        assert card1 == card2
        assert len({card1, card2}) == 1

    def test_frozen(self, deck):
        """Test that cards are immutable."""
        card = deck.get_card(0)
        with pytest.raises(ValidationError):
            card.face_value = 42

    def test_is_joker(self, deck):
        """Test joker detection."""
        assert deck.get_card(413).is_joker
        assert deck.get_card(413).is_unsuited
        assert not deck.get_card(12).is_joker

    def test_custom_pip_at_joker_index(self):
        """Test that a custom unsuited face at index 13 is not a joker."""
        names = tuple(f"P{i}" for i in range(13)) + ("Wild",)
        custom = Deck(DeckConfig(
            deck_type=DeckType.CUSTOM,
            suit_names=("Red",),
            pip_names=names,
            pip_values=tuple(range(14)),
            unsuited_pips=(13,),
        ))
        wild = custom.get_card(113)
        assert wild.is_unsuited
        assert not wild.is_joker

    def test_str(self, deck):
        """Test string representation."""
        assert str(deck.get_card(100)) == "Ace of Spades"


class TestCardComparison:
    """Tests for single-card comparison methods."""

    def test_ace_high_beats_king(self, deck):
        """Test that a high Ace beats a King."""
        ace = deck.get_card(100)
        king = deck.get_card(112)
        assert ace.is_greater_than(king)
        assert not ace.is_less_than(king)

    def test_ace_does_not_beat_joker(self, deck):
        """Test that a Joker outranks a high Ace."""
        ace = deck.get_card(100)
        joker = deck.get_card(413)
        assert not ace.is_greater_than(joker)
        assert ace.is_less_than(joker)

    def test_aces_equal_across_suits(self, deck):
        """Test that suits are ignored for equality."""
        assert deck.get_card(100).is_equal_to(deck.get_card(200))
        assert not deck.get_card(100).is_greater_than(deck.get_card(200))

    def test_only_left_card_checked_for_ace(self, deck):
        """Test that the ace rule applies only to the card being asked."""
        ace = deck.get_card(100)
        king = deck.get_card(112)
        # King compares on face value alone: 13 > 1
        assert king.is_greater_than(ace)

    def test_ace_low(self):
        """Test plain face value comparison when aces are low."""
        deck = Deck(DeckConfig(is_ace_high=False))
        ace = deck.get_card(100)
        king = deck.get_card(112)
        assert not ace.is_greater_than(king)
        assert ace.is_less_than(king)

    def test_faces_ten_are_equal(self):
        """Test that Jack, Queen and King tie when worth 10."""
        deck = Deck(DeckConfig(are_faces_ten=True))
        jack, queen, king = (deck.get_card(face) for face in (10, 11, 12))
        assert jack.face_value == queen.face_value == king.face_value == 10
        assert jack.is_equal_to(queen)
        assert queen.is_equal_to(king)
        assert jack.is_equal_to(king)
        assert not king.is_greater_than(jack)
