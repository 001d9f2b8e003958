"""Hex colour parsing."""

from __future__ import annotations

import re
from typing import NamedTuple

from .errors import InvalidColorFormat

_HEX6 = re.compile(r"[0-9a-fA-F]{6}")


class RGB(NamedTuple):
    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


WHITE = RGB(255, 255, 255)


def parse_color(value: str) -> RGB:
    """Parse ``#RRGGBB`` (the ``#`` is optional) into an ``RGB`` triple."""
    digits = value.lstrip("#")
    if len(digits) != 6:
        raise InvalidColorFormat(value)
    if not _HEX6.fullmatch(digits):
        raise InvalidColorFormat(value, "Color components must be hexadecimal digits")
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
