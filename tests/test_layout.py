"""Unit tests for bitmap text layout (font size, spacing, centering)."""

import pytest

from devtoolkit.domain.enums import IconShape
from devtoolkit.domain.layout import (
    display_text,
    font_size_for,
    layout_text,
    pixel_size_for,
    spacing_for,
)


class TestHelpers:
    def test_display_text_clips_then_uppercases(self):
        assert display_text("abcd") == "ABC"
        assert display_text("x") == "X"

    def test_uppercasing_can_lengthen_text(self):
        assert display_text("aaß") == "AASS"

    @pytest.mark.parametrize(
        "size,count,expected",
        [(128, 1, 76), (128, 2, 57), (128, 3, 44), (128, 4, 38), (16, 3, 8), (20, 2, 9)],
    )
    def test_font_size(self, size, count, expected):
        assert font_size_for(size, count) == expected

    @pytest.mark.parametrize("font,expected", [(8, 1), (15, 1), (16, 2), (57, 7), (614, 8)])
    def test_pixel_size_is_clamped(self, font, expected):
        assert pixel_size_for(font) == expected

    @pytest.mark.parametrize(
        "count,width,expected",
        [(1, 35, 0), (2, 35, 17), (2, 5, 6), (3, 30, 10), (3, 5, 4), (4, 40, 10), (4, 5, 3)],
    )
    def test_spacing(self, count, width, expected):
        assert spacing_for(count, width) == expected


class TestLayoutFixtures:
    def test_two_chars_circle_128(self):
        layout = layout_text("AB", 128, IconShape.CIRCLE)
        assert layout.font_size == 57
        assert layout.pixel_size == 7
        assert layout.char_width == 35
        assert layout.char_spacing == 17
        assert layout.total_width == 87
        assert (layout.start_x, layout.start_y) == (20, 39)

    def test_single_char_smallest_circle(self):
        layout = layout_text("a", 16, IconShape.CIRCLE)
        assert layout.text == "A"
        assert (layout.font_size, layout.pixel_size) == (9, 1)
        assert (layout.start_x, layout.start_y) == (5, 4)

    def test_overflowing_text_pinned_to_margin(self):
        layout = layout_text("ABC", 16, IconShape.SQUARE)
        assert layout.total_width == 23
        assert layout.start_x == 2
        assert layout.start_y == 4

    def test_three_chars_circle_64(self):
        layout = layout_text("WWW", 64, IconShape.CIRCLE)
        assert (layout.pixel_size, layout.char_spacing) == (2, 4)
        assert (layout.start_x, layout.start_y) == (13, 25)

    def test_large_canvas_uses_capped_block_size(self):
        layout = layout_text("A", 1024, IconShape.CIRCLE)
        assert layout.pixel_size == 8
        assert (layout.start_x, layout.start_y) == (492, 484)

    def test_four_glyphs_after_uppercasing(self):
        layout = layout_text("aaß", 100, IconShape.CIRCLE)
        assert layout.text == "AASS"
        assert (layout.font_size, layout.pixel_size) == (30, 3)
        assert layout.char_spacing == 3
        assert (layout.start_x, layout.start_y) == (15, 39)

    def test_square_allows_wider_run_than_circle(self):
        # 4 x 30 + 3 x 7 = 141 px of text on a 160 px canvas:
        # circle drawable width 136 -> pinned, square 144 -> centered
        circle = layout_text("aaß", 160, IconShape.CIRCLE)
        square = layout_text("aaß", 160, IconShape.SQUARE)
        assert circle.total_width == square.total_width == 141
        assert circle.start_x == 16
        assert square.start_x == 9

    @pytest.mark.parametrize("size", [16, 17, 33, 100, 128, 255, 512, 1024])
    @pytest.mark.parametrize("text", ["A", "AB", "ABC"])
    def test_centered_text_stays_on_canvas(self, size, text):
        layout = layout_text(text, size, IconShape.CIRCLE)
        assert 0 <= layout.start_x
        assert 0 <= layout.start_y
        assert layout.start_y + layout.glyph_height <= size
