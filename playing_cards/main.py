"""Main entry point for dealing cards from the command line."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from playing_cards.config import ShoeConfig, load_config
from playing_cards.deck.builders import create_shoe_from_config
from playing_cards.deck.comparison import sort_cards
from playing_cards.logging import DealLogConfig, DealLogger
from playing_cards.utils.logger import DealDisplay, setup_logging

logger = logging.getLogger(__name__)

DECK_TYPE_CHOICES = ["poker", "pinochle", "euchre"]


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Deal playing cards from a shuffled shoe"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-t",
        "--deck-type",
        choices=DECK_TYPE_CHOICES,
        help="Deck type (overrides config)",
    )
    parser.add_argument(
        "-d",
        "--num-decks",
        type=int,
        help="Number of decks in the shoe (overrides config)",
    )
    parser.add_argument(
        "-j",
        "--jokers",
        type=int,
        help="Jokers per deck (overrides config)",
    )
    parser.add_argument(
        "--ace-low",
        action="store_true",
        help="Treat aces as low cards",
    )
    parser.add_argument(
        "--faces-ten",
        action="store_true",
        help="Count Jack, Queen and King as 10",
    )
    parser.add_argument(
        "-n",
        "--deal",
        type=int,
        help="Number of cards to deal (default: all)",
    )
    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        help="Deal in build order",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for shuffling",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--deal-log",
        type=Path,
        help="Path for the JSONL deal log",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)

    config = load_config(args.config)

    # Apply command-line overrides
    overrides: dict[str, Any] = {}
    if args.deck_type:
        overrides["deck_type"] = args.deck_type
    if args.num_decks:
        overrides["num_decks"] = args.num_decks
    if args.jokers is not None:
        overrides["num_jokers"] = args.jokers
    if args.ace_low:
        overrides["is_ace_high"] = False
    if args.faces_ten:
        overrides["are_faces_ten"] = True
    if args.no_shuffle:
        overrides["shuffle"] = False
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.deal_log:
        config.deal_log = DealLogConfig(enabled=True, output_path=str(args.deal_log))

    setup_logging(config.logging.level)
    display = DealDisplay()

    try:
        shoe_config = ShoeConfig(**{**config.shoe.model_dump(), **overrides})
        with DealLogger(config.deal_log) as deal_logger:
            shoe = create_shoe_from_config(shoe_config, deal_logger)
            display.print_shoe(shoe)

            count = args.deal if args.deal is not None else shoe.num_cards
            dealt = []
            for _ in range(count):
                card = shoe.next_card()
                if card is None:
                    display.print_exhausted()
                    break
                dealt.append(card)
                display.print_card(len(dealt), card)

            display.print_summary(sort_cards(dealt), shoe.num_cards_remain)
        return 0

    except ValueError as e:
        logger.error(f"Invalid shoe configuration: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
