"""Pixel-grid images and bitmap fonts for card sprites.

An image is a height x width grid of palette color indices (0 = transparent).
Drawing outside the grid is clipped silently.
"""

from dataclasses import dataclass, field


class CardImage:
    """Palette-indexed pixel grid."""

    def __init__(self, width: int, height: int, color: int = 0):
        """Initialize an image filled with one color.

        Args:
            width: Width in pixels.
            height: Height in pixels.
            color: Initial fill color.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid image size: {width}x{height}")
        self.width = width
        self.height = height
        self.data: list[list[int]] = [[color] * width for _ in range(height)]

    @classmethod
    def create(cls, width: int, height: int) -> "CardImage":
        """Create a transparent image."""
        return cls(width, height)

    def clone(self) -> "CardImage":
        """Return an independent copy of this image."""
        copy = CardImage(self.width, self.height)
        copy.data = [row[:] for row in self.data]
        return copy

    def fill(self, color: int) -> None:
        """Set every pixel to one color."""
        for y in range(self.height):
            for x in range(self.width):
                self.data[y][x] = color

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if a coordinate is inside the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        """Get the color at a pixel (0 when out of bounds)."""
        if not self.in_bounds(x, y):
            return 0
        return self.data[y][x]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set the color at a pixel."""
        if self.in_bounds(x, y):
            self.data[y][x] = color

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line between two points (inclusive) using Bresenham."""
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self.set_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Draw a rectangle outline."""
        right = x + width - 1
        bottom = y + height - 1
        self.draw_line(x, y, right, y, color)
        self.draw_line(x, bottom, right, bottom, color)
        self.draw_line(x, y, x, bottom, color)
        self.draw_line(right, y, right, bottom, color)

    def print_text(self, text: str, x: int, y: int, color: int, font: "Font") -> None:
        """Draw text with its top-left corner at (x, y)."""
        for ch in text:
            glyph = font.glyph(ch)
            if glyph is not None:
                for row, bits in enumerate(glyph):
                    for col, bit in enumerate(bits):
                        if bit == "#":
                            self._fill_block(
                                x + col * font.scale,
                                y + row * font.scale,
                                font.scale,
                                color,
                            )
            x += font.advance

    def print_center(self, text: str, y: int, color: int, font: "Font") -> None:
        """Draw text horizontally centered at row y."""
        x = (self.width - font.text_width(text)) // 2
        self.print_text(text, x, y, color, font)

    def _fill_block(self, x: int, y: int, size: int, color: int) -> None:
        for dy in range(size):
            for dx in range(size):
                self.set_pixel(x + dx, y + dy, color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardImage):
            return NotImplemented
        return self.data == other.data

    def __str__(self) -> str:
        """String representation for debugging."""
        return "\n".join(
            "".join("." if c == 0 else format(c, "x") for c in row)
            for row in self.data
        )

    def __repr__(self) -> str:
        return f"CardImage({self.width}x{self.height})"


@dataclass(frozen=True)
class Font:
    """Fixed-width bitmap font.

    Each glyph is a tuple of rows, where "#" marks a set pixel.
    """

    char_width: int
    char_height: int
    glyphs: dict[str, tuple[str, ...]] = field(default_factory=dict)
    scale: int = 1

    @property
    def advance(self) -> int:
        """Horizontal distance between characters, including spacing."""
        return (self.char_width + 1) * self.scale

    def glyph(self, ch: str) -> tuple[str, ...] | None:
        """Get the bitmap rows for a character, or None if not covered."""
        return self.glyphs.get(ch, self.glyphs.get(ch.upper()))

    def text_width(self, text: str) -> int:
        """Width in pixels of rendered text (no trailing spacing)."""
        if not text:
            return 0
        return len(text) * self.advance - self.scale

    def doubled(self) -> "Font":
        """Return this font at twice the scale."""
        return Font(self.char_width, self.char_height, self.glyphs, self.scale * 2)


# 3x5 glyphs for digits and uppercase letters
_GLYPHS_3X5: dict[str, tuple[str, ...]] = {
    "0": ("###", "#.#", "#.#", "#.#", "###"),
    "1": (".#.", "##.", ".#.", ".#.", "###"),
    "2": ("###", "..#", "###", "#..", "###"),
    "3": ("###", "..#", ".##", "..#", "###"),
    "4": ("#.#", "#.#", "###", "..#", "..#"),
    "5": ("###", "#..", "###", "..#", "###"),
    "6": ("###", "#..", "###", "#.#", "###"),
    "7": ("###", "..#", ".#.", ".#.", ".#."),
    "8": ("###", "#.#", "###", "#.#", "###"),
    "9": ("###", "#.#", "###", "..#", "###"),
    "A": (".#.", "#.#", "###", "#.#", "#.#"),
    "B": ("##.", "#.#", "##.", "#.#", "##."),
    "C": (".##", "#..", "#..", "#..", ".##"),
    "D": ("##.", "#.#", "#.#", "#.#", "##."),
    "E": ("###", "#..", "##.", "#..", "###"),
    "F": ("###", "#..", "##.", "#..", "#.."),
    "G": (".##", "#..", "#.#", "#.#", ".##"),
    "H": ("#.#", "#.#", "###", "#.#", "#.#"),
    "I": ("###", ".#.", ".#.", ".#.", "###"),
    "J": ("..#", "..#", "..#", "#.#", ".#."),
    "K": ("#.#", "#.#", "##.", "#.#", "#.#"),
    "L": ("#..", "#..", "#..", "#..", "###"),
    "M": ("#.#", "###", "###", "#.#", "#.#"),
    "N": ("##.", "#.#", "#.#", "#.#", "#.#"),
    "O": (".#.", "#.#", "#.#", "#.#", ".#."),
    "P": ("##.", "#.#", "##.", "#..", "#.."),
    "Q": (".#.", "#.#", "#.#", "##.", ".##"),
    "R": ("##.", "#.#", "##.", "#.#", "#.#"),
    "S": (".##", "#..", ".#.", "..#", "##."),
    "T": ("###", ".#.", ".#.", ".#.", ".#."),
    "U": ("#.#", "#.#", "#.#", "#.#", "###"),
    "V": ("#.#", "#.#", "#.#", "#.#", ".#."),
    "W": ("#.#", "#.#", "###", "###", "#.#"),
    "X": ("#.#", "#.#", ".#.", "#.#", "#.#"),
    "Y": ("#.#", "#.#", ".#.", ".#.", ".#."),
    "Z": ("###", "..#", ".#.", "#..", "###"),
}

DEFAULT_FONT = Font(char_width=3, char_height=5, glyphs=_GLYPHS_3X5)
