"""Card sprite images."""

from .image import DEFAULT_FONT, CardImage, Font
from .sprites import CardSpriteSize, render_card

__all__ = [
    "DEFAULT_FONT",
    "CardImage",
    "CardSpriteSize",
    "Font",
    "render_card",
]
