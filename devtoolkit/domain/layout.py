"""
Text layout for the bitmap font
===============================

Font size
---------
fontSize = max(8, floor(size x f)), f = 0.6 / 0.45 / 0.35 for 1 / 2 / 3
characters and 0.3 otherwise (upper-casing can lengthen the text, e.g.
``"ß" -> "SS"``).  Percentages are applied in integer arithmetic so the
result never depends on float rounding.

Block size
----------
pixelSize = clamp(fontSize // 8, 1, 8).  One glyph cell is
``5 x pixelSize`` wide and ``7 x pixelSize`` tall; the same clamped value
drives both centering and drawing.

Spacing
-------
0 for one character, ``max(cell // 2, 6)`` for two, ``max(cell // 3, 4)``
for three and ``max(cell // 4, 3)`` beyond that.

Placement
---------
Horizontally centered when the run fits inside the drawable width
(85 % of the canvas for circles, 90 % for squares), otherwise pinned to
``max(size // 10, 2)``.  Vertically centered when the glyph height is
smaller than the canvas, otherwise pinned to ``max(size // 8, 2)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import IconShape
from .glyphs import GLYPH_COLS, GLYPH_ROWS

MAX_DISPLAY_CHARS = 3
MAX_PIXEL_SIZE = 8

# percent of the canvas edge used as the base font size, by character count
_FONT_PERCENT = {1: 60, 2: 45, 3: 35}
_FONT_PERCENT_DEFAULT = 30

# percent of the canvas edge the text run may occupy before it is pinned left
_EFFECTIVE_PERCENT = {IconShape.CIRCLE: 85, IconShape.SQUARE: 90}


@dataclass(frozen=True)
class TextLayout:
    text: str
    font_size: int
    pixel_size: int
    char_width: int
    char_spacing: int
    start_x: int
    start_y: int

    @property
    def advance(self) -> int:
        """Horizontal distance between the left edges of consecutive glyphs."""
        return self.char_width + self.char_spacing

    @property
    def total_width(self) -> int:
        return text_width(len(self.text), self.char_width, self.char_spacing)

    @property
    def glyph_height(self) -> int:
        return GLYPH_ROWS * self.pixel_size


def display_text(text: str) -> str:
    """Clip to the first three characters, then upper-case."""
    return text[:MAX_DISPLAY_CHARS].upper()


def font_size_for(size: int, char_count: int) -> int:
    percent = _FONT_PERCENT.get(char_count, _FONT_PERCENT_DEFAULT)
    return max(8, size * percent // 100)


def pixel_size_for(font_size: int) -> int:
    return max(1, min(font_size // 8, MAX_PIXEL_SIZE))


def spacing_for(char_count: int, char_width: int) -> int:
    if char_count <= 1:
        return 0
    if char_count == 2:
        return max(char_width // 2, 6)
    if char_count == 3:
        return max(char_width // 3, 4)
    return max(char_width // 4, 3)


def text_width(char_count: int, char_width: int, char_spacing: int) -> int:
    if char_count <= 0:
        return 0
    return char_count * char_width + (char_count - 1) * char_spacing


def layout_text(text: str, size: int, shape: IconShape) -> TextLayout:
    shown = display_text(text)
    count = len(shown)

    font_size = font_size_for(size, count)
    pixel_size = pixel_size_for(font_size)
    char_width = GLYPH_COLS * pixel_size
    char_spacing = spacing_for(count, char_width)

    total_width = text_width(count, char_width, char_spacing)
    effective = size * _EFFECTIVE_PERCENT[IconShape(shape)] // 100
    if total_width < effective:
        start_x = (size - total_width) // 2
    else:
        start_x = max(size // 10, 2)

    glyph_height = GLYPH_ROWS * pixel_size
    if glyph_height < size:
        start_y = (size - glyph_height) // 2
    else:
        start_y = max(size // 8, 2)

    return TextLayout(
        text=shown,
        font_size=font_size,
        pixel_size=pixel_size,
        char_width=char_width,
        char_spacing=char_spacing,
        start_x=start_x,
        start_y=start_y,
    )
