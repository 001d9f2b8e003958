"""Vector live preview rendered as an SVG document."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from .enums import IconShape


def preview_font_size(size: int, char_count: int) -> int:
    if char_count == 1:
        return size // 2
    if char_count == 2:
        return size // 3
    return size // 4


def render_preview_svg(
    text: str,
    shape: IconShape,
    size: int,
    background_color: str,
    text_color: str,
) -> str:
    shown = text[:3]
    font_size = preview_font_size(size, len(shown))

    if IconShape(shape) is IconShape.CIRCLE:
        radius = size // 2
        shape_element = (
            f'<circle cx="{radius}" cy="{radius}" r="{radius}" '
            f"fill={quoteattr(background_color)}/>"
        )
    else:
        shape_element = (
            f'<rect width="{size}" height="{size}" fill={quoteattr(background_color)}/>'
        )

    text_element = ""
    if shown:
        text_element = (
            '<text x="50%" y="50%" text-anchor="middle" dominant-baseline="middle" '
            f"fill={quoteattr(text_color)} "
            f'font-family="Arial, sans-serif" font-size="{font_size}" font-weight="bold">'
            f"{escape(shown)}</text>"
        )

    return (
        f'<svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg">'
        f"{shape_element}{text_element}</svg>"
    )
