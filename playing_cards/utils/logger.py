"""Logging utilities and deal display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playing_cards.deck.shoe import Shoe
    from playing_cards.models.card import Card


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class DealDisplay:
    """Display dealt cards to stdout."""

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_shoe(self, shoe: "Shoe") -> None:
        """Print shoe setup."""
        self.print_separator()
        print(f"Deck: {shoe.deck.deck_type.name.title()} x {shoe.num_decks}")
        print(f"Cards: {shoe.num_cards}")
        print(f"Aces high: {shoe.is_ace_high}  Faces ten: {shoe.are_faces_ten}")
        self.print_separator()

    def print_card(self, position: int, card: "Card") -> None:
        """Print a dealt card."""
        print(f"{position:4d}. {card.name} (value {card.face_value})")

    def print_exhausted(self) -> None:
        print("  -> No cards left")

    def print_summary(self, cards: list["Card"], remaining: int) -> None:
        """Print dealt cards ranked highest first."""
        print()
        print(f"Dealt {len(cards)} cards, {remaining} remaining")
        if cards:
            print("Ranked: " + ", ".join(c.name for c in cards))
