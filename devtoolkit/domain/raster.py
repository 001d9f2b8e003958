"""
Raster canvas, shape mask and glyph stamping.

Every pixel write goes through ``RasterImage.fill_rect``, which clips the
rectangle to the canvas.  Blocks that land partly or wholly outside the
canvas are trimmed or skipped; nothing here raises on extreme sizes.
"""

from __future__ import annotations

import io
import math
from typing import Callable

from PIL import Image

from .colors import RGB, WHITE
from .enums import IconShape
from .glyphs import GLYPH_COLS, glyph_for
from .layout import spacing_for

PixelPredicate = Callable[[int, int], bool]


class RasterImage:
    """Square RGB canvas owned by a single generation call."""

    def __init__(self, size: int, fill: RGB = WHITE):
        if size <= 0:
            raise ValueError(f"Canvas size must be positive, got {size}")
        self.width = size
        self.height = size
        self._image = Image.new("RGB", (size, size), tuple(fill))

    def fill_rect(self, x: int, y: int, w: int, h: int, color: RGB) -> bool:
        """Fill the clipped rectangle; returns False when nothing was on-canvas."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 >= x1 or y0 >= y1:
            return False
        self._image.paste(tuple(color), (x0, y0, x1, y1))
        return True

    def get_pixel(self, x: int, y: int) -> RGB:
        return RGB(*self._image.getpixel((x, y)))

    def encode_png(self) -> bytes:
        buf = io.BytesIO()
        self._image.save(buf, format="PNG")
        return buf.getvalue()


# ── Shape mask ────────────────────────────────────────────────────────


def circle_geometry(size: int) -> tuple[float, float]:
    center = size / 2
    return center, max(center - 2.0, 1.0)


def paint_mask(size: int, shape: IconShape) -> PixelPredicate:
    """Return the foreground predicate for *shape* on a ``size`` x ``size`` canvas."""
    if IconShape(shape) is IconShape.SQUARE:
        return lambda x, y: True

    center, radius = circle_geometry(size)
    r2 = radius * radius

    def inside(x: int, y: int) -> bool:
        dx, dy = x - center, y - center
        return dx * dx + dy * dy <= r2

    return inside


def _row_span(
    y: int, size: int, center: float, radius: float, inside: PixelPredicate
) -> tuple[int, int] | None:
    """First and last foreground column of row *y*, or None for an empty row."""
    dy = y - center
    rem = radius * radius - dy * dy
    if rem < 0:
        return None
    half = math.sqrt(rem)
    x0 = max(0, math.ceil(center - half))
    x1 = min(size - 1, math.floor(center + half))
    # sqrt rounding can be off by one column either way; settle on the predicate
    while x0 <= x1 and not inside(x0, y):
        x0 += 1
    while x0 > 0 and inside(x0 - 1, y):
        x0 -= 1
    while x1 >= x0 and not inside(x1, y):
        x1 -= 1
    while x1 < size - 1 and inside(x1 + 1, y):
        x1 += 1
    if x0 > x1:
        return None
    return x0, x1


def paint_shape(canvas: RasterImage, shape: IconShape, color: RGB) -> None:
    """Fill the foreground of *shape* with *color*; the rest stays white."""
    size = canvas.width
    if IconShape(shape) is IconShape.SQUARE:
        canvas.fill_rect(0, 0, size, size, color)
        return

    inside = paint_mask(size, shape)
    center, radius = circle_geometry(size)
    for y in range(size):
        span = _row_span(y, size, center, radius, inside)
        if span is not None:
            x0, x1 = span
            canvas.fill_rect(x0, y, x1 - x0 + 1, 1, color)


# ── Glyphs ────────────────────────────────────────────────────────────


def rasterize_glyphs(
    canvas: RasterImage,
    text: str,
    start_x: int,
    start_y: int,
    pixel_size: int,
    color: RGB,
) -> int:
    """Stamp *text* onto *canvas*; returns the number of blocks actually drawn."""
    if not text:
        return 0

    char_width = GLYPH_COLS * pixel_size
    advance = char_width + spacing_for(len(text), char_width)
    drawn = 0

    for index, ch in enumerate(text):
        char_x = start_x + index * advance
        if char_x >= canvas.width or start_y >= canvas.height:
            break
        for row, bits in enumerate(glyph_for(ch)):
            for col, bit in enumerate(bits):
                if not bit:
                    continue
                if canvas.fill_rect(
                    char_x + col * pixel_size,
                    start_y + row * pixel_size,
                    pixel_size,
                    pixel_size,
                    color,
                ):
                    drawn += 1
    return drawn
