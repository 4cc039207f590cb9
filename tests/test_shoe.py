"""Tests for shoe dealing and shuffling."""

import random

import pytest

from playing_cards.deck.builders import (
    create_custom_deck,
    create_deck,
    create_poker_deck,
    create_shoe,
)
from playing_cards.deck.shoe import Shoe
from playing_cards.models.card import DeckType
from playing_cards.models.deck_config import DeckConfig


@pytest.fixture
def shoe():
    return create_shoe(DeckType.POKER, num_decks=3)


class TestShoeDealing:
    """Tests for sequential dealing."""

    def test_num_cards(self, shoe):
        """Test three Poker decks hold 156 cards."""
        assert shoe.num_cards == 156
        assert shoe.num_cards_remain == 156
        assert len(shoe) == 156
        assert shoe.num_decks == 3

    def test_deal_until_exhausted(self, shoe):
        """Test has_more_cards through a full pass and a reset."""
        for _ in range(156):
            assert shoe.has_more_cards
            assert shoe.next_card() is not None
        assert not shoe.has_more_cards
        assert shoe.num_cards_remain == 0

        shoe.reset()
        assert shoe.has_more_cards
        assert shoe.num_cards_remain == 156

    def test_exhausted_returns_none(self):
        """Test that dealing past the end returns None."""
        shoe = create_deck(DeckType.EUCHRE)
        shoe.deal(24)
        assert shoe.next_card() is None
        assert shoe.next_card() is None
        assert shoe.num_cards_remain == 0

    def test_decks_concatenated(self, shoe):
        """Test that the shoe repeats the whole deck in order."""
        ids = shoe.card_ids
        assert ids[:52] == ids[52:104] == ids[104:]
        assert shoe.deck.card_ids == ids[:52]

    def test_deal_order(self):
        """Test that cards come out in build order before shuffling."""
        shoe = create_poker_deck()
        first = shoe.next_card()
        second = shoe.next_card()
        assert first.name == "Ace of Hearts"
        assert second.name == "Two of Hearts"

    def test_reset_keeps_order(self):
        """Test that reset deals the same cards again."""
        shoe = create_deck()
        shoe.shuffle()
        first_pass = [c.id for c in shoe.deal(10)]
        shoe.reset()
        assert [c.id for c in shoe.deal(10)] == first_pass

    def test_deal_stops_at_end(self):
        shoe = create_deck(DeckType.EUCHRE)
        assert len(shoe.deal(30)) == 24

    def test_iterate_remaining(self):
        """Test that iteration deals the remaining cards."""
        shoe = create_deck(DeckType.EUCHRE)
        shoe.deal(4)
        remaining = list(shoe)
        assert len(remaining) == 20
        assert all(card is not None for card in remaining)
        assert [c.id for c in remaining] == list(shoe.card_ids[4:])
        assert not shoe.has_more_cards

    def test_invalid_num_decks(self):
        with pytest.raises(ValueError):
            Shoe(num_decks=0)

    def test_custom_shoe(self):
        """Test dealing the Red/Black example deck."""
        shoe = create_custom_deck(
            ["Red", "Black"], [2, 15], ["Low", "High", "Joker"], [1, 2, 0],
            unsuited_pips=[2],
        )
        names = [c.name for c in shoe]
        assert names == [
            "Low of Red", "High of Red", "Low of Black", "High of Black",
            "Joker (Unsuited)",
        ]


class TestShoeShuffle:
    """Tests for shuffling."""

    def test_shuffle_keeps_cards(self, shoe):
        """Test that shuffling reorders but keeps the same cards."""
        before = sorted(shoe.card_ids)
        for _ in range(3):
            shoe.shuffle()
            assert sorted(shoe.card_ids) == before
        assert shoe.num_cards == 156

    def test_shuffle_resets_cursor(self, shoe):
        shoe.deal(20)
        shoe.shuffle()
        assert shoe.num_cards_remain == shoe.num_cards
        shoe.reset()
        assert shoe.num_cards_remain == shoe.num_cards

    def test_shuffle_seeded(self):
        """Test that the same random source gives the same order."""
        shoe1 = create_shoe(num_decks=2, rng=random.Random(42))
        shoe2 = create_shoe(num_decks=2, rng=random.Random(42))
        shoe1.shuffle()
        shoe2.shuffle()
        assert shoe1.card_ids == shoe2.card_ids

    def test_shuffle_swaps_across_whole_shoe(self):
        """Test each position swaps with a partner drawn from the full range."""
        shoe = Shoe(DeckConfig(), rng=random.Random(7))
        expected = list(shoe.card_ids)
        rng = random.Random(7)
        for index in range(len(expected)):
            swap = rng.randint(0, len(expected) - 1)
            expected[index], expected[swap] = expected[swap], expected[index]

        shoe.shuffle()
        assert list(shoe.card_ids) == expected

    def test_shuffle_changes_order(self):
        shoe = create_shoe(num_decks=1, rng=random.Random(1))
        before = shoe.card_ids
        shoe.shuffle()
        assert shoe.card_ids != before


class TestShoeAceHigh:
    """Tests for the ace-high toggle."""

    def test_toggle_through_shoe(self):
        shoe = create_deck(is_ace_high=True)
        shoe.is_ace_high = False
        assert not shoe.is_ace_high
        assert not shoe.deck.is_ace_high

    def test_dealt_cards_keep_old_flag(self):
        """Test that cards dealt before a toggle keep their snapshot."""
        shoe = create_poker_deck()
        ace = shoe.next_card()
        shoe.is_ace_high = False
        shoe.reset()
        ace_again = shoe.next_card()

        assert ace == ace_again
        assert ace.is_ace_high
        assert not ace_again.is_ace_high

    def test_custom_ignores_toggle(self):
        shoe = create_custom_deck(["Red"], [2], ["One", "Two"], [1, 2])
        shoe.is_ace_high = True
        assert not shoe.is_ace_high
