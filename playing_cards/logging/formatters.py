"""Formatters for deal log output."""

from playing_cards.models.card import Card, StdFace

# Suit codes for log output, indexed by StdSuit
SUIT_CODES: tuple[str, ...] = ("H", "S", "D", "C")

# Face codes for log output, indexed by StdFace
FACE_CODES: tuple[str, ...] = (
    "A", "2", "3", "4", "5", "6", "7",
    "8", "9", "10", "J", "Q", "K", "Jo",
)


def format_card(card: Card, is_custom: bool = False) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.
        is_custom: Whether the card comes from a custom deck.

    Returns:
        Formatted string (e.g., "AS" for Ace of Spades, "Jo" for a Joker).
        Custom cards use "<pip name>/<suit name>".
    """
    if is_custom:
        return f"{card.pip_name}/{card.suit_name}"
    if card.pip_id == StdFace.JOKER:
        return FACE_CODES[StdFace.JOKER]
    return f"{FACE_CODES[card.pip_id]}{SUIT_CODES[card.suit_value]}"


def format_cards(cards: list[Card], is_custom: bool = False) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format, in order.
        is_custom: Whether the cards come from a custom deck.

    Returns:
        Comma-separated card strings (e.g., "AS,10H,KD").
        Empty string if no cards.
    """
    return ",".join(format_card(c, is_custom) for c in cards)
