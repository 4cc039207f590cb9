"""Card sprite generation."""

from enum import IntEnum
from functools import lru_cache

from playing_cards.models.card import STD_SUIT_COLORS, Card, StdFace, StdSuit
from playing_cards.models.deck_config import DeckConfig

from .image import DEFAULT_FONT, CardImage

CARD_FILL_COLOR = 1
CARD_BORDER_COLOR = 15
# Unsuited cards use inverted colors so their white print shows
JOKER_FILL_COLOR = 15
JOKER_BORDER_COLOR = 1
# Print color when a custom deck gives no color for a suit
DEFAULT_PRINT_COLOR = 15


class CardSpriteSize(IntEnum):
    """Standard sprite sizes."""

    SIZE_8X8 = 0
    SIZE_8X16 = 1
    SIZE_16X16 = 2
    SIZE_16X32 = 3
    SIZE_32X32 = 4


SPRITE_DIMENSIONS: dict[CardSpriteSize, tuple[int, int]] = {
    CardSpriteSize.SIZE_8X8: (8, 8),
    CardSpriteSize.SIZE_8X16: (8, 16),
    CardSpriteSize.SIZE_16X16: (16, 16),
    CardSpriteSize.SIZE_16X32: (16, 32),
    CardSpriteSize.SIZE_32X32: (32, 32),
}


@lru_cache(maxsize=None)
def _standard_card_base(size: CardSpriteSize, suit: int) -> CardImage:
    width, height = SPRITE_DIMENSIONS[size]
    if suit == StdSuit.UNSUITED:
        base = CardImage(width, height, JOKER_FILL_COLOR)
        base.draw_rect(0, 0, width, height, JOKER_BORDER_COLOR)
    else:
        base = CardImage(width, height, CARD_FILL_COLOR)
        base.draw_rect(0, 0, width, height, CARD_BORDER_COLOR)
    base.draw_line(1, height - 2, width - 2, height - 2, STD_SUIT_COLORS[suit])
    return base


def standard_card_base(size: CardSpriteSize, suit: int) -> CardImage:
    """Get the base image for a standard card.

    Args:
        size: Sprite size.
        suit: Suit index (StdSuit.UNSUITED for jokers).

    Returns:
        New card outline with a suit-colored stripe along the bottom edge.
    """
    return _standard_card_base(size, suit).clone()


def blank_card_base(width: int = 32, height: int = 32) -> CardImage:
    """Create a plain card base for custom decks."""
    return CardImage(width, height, CARD_FILL_COLOR)


def standard_print_text(card: Card) -> str:
    """Get the text printed on a standard card."""
    if card.pip_id == StdFace.ACE:
        return "A"
    if card.pip_id == StdFace.TEN:
        return "10"
    if card.pip_id in (StdFace.JACK, StdFace.JOKER):
        return "J"
    if card.pip_id == StdFace.QUEEN:
        return "Q"
    if card.pip_id == StdFace.KING:
        return "K"
    return str(card.face_value)


def render_standard_card(
    card: Card,
    size: CardSpriteSize = CardSpriteSize.SIZE_16X16,
) -> CardImage:
    """Render a card from a standard deck.

    Args:
        card: Card to render.
        size: Sprite size.

    Returns:
        New image for the card.
    """
    suit = min(card.suit_value, StdSuit.UNSUITED)
    image = standard_card_base(size, suit)
    color = STD_SUIT_COLORS[suit]
    text = standard_print_text(card)
    is_ten = card.pip_id == StdFace.TEN
    doubled = DEFAULT_FONT.doubled()

    if size == CardSpriteSize.SIZE_8X8:
        if is_ten:
            # "10" does not fit at this size, so draw it by hand
            image.draw_line(0, 0, 0, 4, color)
            image.draw_line(2, 1, 2, 3, color)
            image.draw_line(4, 1, 4, 3, color)
            image.set_pixel(3, 0, color)
            image.set_pixel(3, 4, color)
        else:
            image.print_center(text, 0, color, DEFAULT_FONT)
    elif size == CardSpriteSize.SIZE_8X16:
        if is_ten:
            image.draw_line(1, 1, 1, 6, color)
            image.print_text("0", 2, 0, color, DEFAULT_FONT)
        else:
            image.print_center(text, 0, color, DEFAULT_FONT)
    elif size == CardSpriteSize.SIZE_16X32:
        if is_ten:
            image.print_text("1", -1, 0, color, doubled)
            image.print_text("0", 5, 0, color, doubled)
        else:
            image.print_center(text, 0, color, doubled)
    elif size == CardSpriteSize.SIZE_32X32:
        image.print_center(text, 0, color, doubled)
    else:
        image.print_center(text, 0, color, DEFAULT_FONT)
    return image


def render_custom_card(config: DeckConfig, card: Card) -> CardImage:
    """Render a card from a custom deck.

    Args:
        config: Custom deck configuration (bases, colors, glyphs, font).
        card: Card to render.

    Returns:
        New image for the card.
    """
    if config.card_bases:
        image = config.card_bases[card.suit_value].clone()
    else:
        image = blank_card_base()

    if card.suit_value < len(config.suit_colors):
        color = config.suit_colors[card.suit_value]
    else:
        color = DEFAULT_PRINT_COLOR

    if config.pip_print:
        text = config.pip_print[card.pip_id]
    else:
        text = card.pip_name[:1]
    image.print_center(text, 0, color, config.font or DEFAULT_FONT)
    return image


def render_card(
    config: DeckConfig,
    card: Card,
    size: CardSpriteSize = CardSpriteSize.SIZE_16X16,
) -> CardImage:
    """Render a card image for a deck. ``size`` is ignored for custom decks."""
    if config.is_custom:
        return render_custom_card(config, card)
    return render_standard_card(card, size)
