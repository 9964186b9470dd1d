"""A software frame buffer of 0xRRGGBB pixels with simple drawing primitives."""

from __future__ import annotations

import math

CENTER_LINE_COLOR = 0x444444
SEGMENT_COLOR = 0x00FFFF

_DASH_LENGTH = 20
_DASH_GAP = 15
_LINE_WIDTH = 4

_CHAR_WIDTH = 8
_CHAR_HEIGHT = 12
_CHAR_SPACING = 2

# Seven-segment patterns, bits from high to low:
# top, top-right, bottom-right, bottom, bottom-left, top-left, middle.
_DIGIT_PATTERNS = (
    0b1111110,
    0b0110000,
    0b1101101,
    0b1111001,
    0b0110011,
    0b1011011,
    0b1011111,
    0b1110000,
    0b1111111,
    0b1111011,
)

_GLYPHS: dict[str, tuple[int, ...]] = {
    "P": (0b11111000, 0b10001000, 0b10001000, 0b11111000,
          0b10000000, 0b10000000, 0b10000000, 0b10000000),
    "L": (0b10000000, 0b10000000, 0b10000000, 0b10000000,
          0b10000000, 0b10000000, 0b10000000, 0b11111000),
    "A": (0b01110000, 0b10001000, 0b10001000, 0b10001000,
          0b11111000, 0b10001000, 0b10001000, 0b10001000),
    "Y": (0b10001000, 0b10001000, 0b10001000, 0b01010000,
          0b00100000, 0b00100000, 0b00100000, 0b00100000),
    "E": (0b11111000, 0b10000000, 0b10000000, 0b11110000,
          0b10000000, 0b10000000, 0b10000000, 0b11111000),
    "R": (0b11111000, 0b10001000, 0b10001000, 0b11111000,
          0b11000000, 0b10100000, 0b10010000, 0b10001000),
    "I": (0b11111000, 0b00100000, 0b00100000, 0b00100000,
          0b00100000, 0b00100000, 0b00100000, 0b11111000),
    "W": (0b10001000, 0b10001000, 0b10001000, 0b10001000,
          0b10101000, 0b10101000, 0b11011000, 0b10001000),
    "N": (0b10001000, 0b11001000, 0b10101000, 0b10101000,
          0b10101000, 0b10011000, 0b10001000, 0b10001000),
    "!": (0b00100000, 0b00100000, 0b00100000, 0b00100000,
          0b00100000, 0b00000000, 0b00100000, 0b00100000),
}
_BLANK_GLYPH = (0,) * 8


def to_pixel(value: float) -> int:
    """Convert a coordinate to a pixel index, truncating and saturating at zero."""
    if math.isnan(value) or value <= 0.0:
        return 0
    return int(value)


class FrameBuffer:
    """A width x height grid of 0xRRGGBB colours, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid frame size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: list[int] = [0] * (width * height)

    def clear(self, color: int = 0x000000) -> None:
        """Fill the whole frame with one colour."""
        self.pixels[:] = [color] * len(self.pixels)

    def get_pixel(self, x: int, y: int) -> int:
        """The colour at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return self.pixels[y * self.width + x]

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle, clipped to the frame."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + width, self.width), min(y + height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        run = [color] * (x1 - x0)
        for row in range(y0, y1):
            start = row * self.width
            self.pixels[start + x0:start + x1] = run

    def draw_center_line(self) -> None:
        """Draw the dashed vertical line down the middle of the field."""
        left = self.width // 2 - _LINE_WIDTH // 2
        for top in range(0, self.height, _DASH_LENGTH + _DASH_GAP):
            length = min(_DASH_LENGTH, self.height - top)
            self.draw_rect(left, top, _LINE_WIDTH, length, CENTER_LINE_COLOR)

    def draw_digital_number(
        self, number: int, x: float, y: float, width: float, height: float, thickness: int
    ) -> None:
        """Draw the last decimal digit of ``number`` as a seven-segment figure."""
        if number < 0:
            raise ValueError(f"number must not be negative, got {number}")
        pattern = _DIGIT_PATTERNS[number % 10]
        half = height / 2.0
        t = float(thickness)

        if pattern & 0b1000000:
            self._horizontal_segment(x, y, width, t)
        if pattern & 0b0100000:
            self._vertical_segment(x + width - t, y, half, t)
        if pattern & 0b0010000:
            self._vertical_segment(x + width - t, y + half, half, t)
        if pattern & 0b0001000:
            self._horizontal_segment(x, y + height - t, width, t)
        if pattern & 0b0000100:
            self._vertical_segment(x, y + half, half, t)
        if pattern & 0b0000010:
            self._vertical_segment(x, y, half, t)
        if pattern & 0b0000001:
            self._horizontal_segment(x, y + half - t / 2.0, width, t)

    def _horizontal_segment(self, x: float, y: float, width: float, thickness: float) -> None:
        self.draw_rect(
            to_pixel(x), to_pixel(y), to_pixel(width), to_pixel(thickness), SEGMENT_COLOR
        )

    def _vertical_segment(self, x: float, y: float, height: float, thickness: float) -> None:
        self.draw_rect(
            to_pixel(x), to_pixel(y), to_pixel(thickness), to_pixel(height), SEGMENT_COLOR
        )

    def draw_char(
        self, ch: str, x: float, y: float, width: int, height: int, color: int
    ) -> None:
        """Draw one character of the built-in bitmap font; unknown ones draw nothing."""
        glyph = _GLYPHS.get(ch, _BLANK_GLYPH)
        for row, bits in enumerate(glyph[:height]):
            for col in range(width):
                if bits & (0b10000000 >> col):
                    px, py = x + col, y + row
                    if px >= 0.0 and py >= 0.0:
                        self.draw_rect(to_pixel(px), to_pixel(py), 1, 1, color)

    def draw_text_label(self, text: str, x: float, y: float, color: int) -> None:
        """Draw a line of text in the built-in bitmap font."""
        advance = _CHAR_WIDTH + _CHAR_SPACING
        for i, ch in enumerate(text):
            self.draw_char(ch, x + i * advance, y, _CHAR_WIDTH, _CHAR_HEIGHT, color)