"""RGB colour model: hex parsing/formatting and Euclidean distance.

Channels are plain ints. A colour parsed from hex is always in [0, 255];
a Color built directly is not range-checked, and format_hex renders
whatever the channel holds.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass

_HEX_DIGITS = frozenset(string.hexdigits)


class FormatError(ValueError):
    """Raised when a web colour string is not exactly six hex digits."""

    def __init__(self, text: str, reason: str):
        super().__init__(f'invalid colour {text!r}: {reason}')
        self.text = text
        self.reason = reason


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, text: str) -> Color:
        return parse_hex(text)

    @property
    def hex(self) -> str:
        return format_hex(self)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def distance_to(self, other: Color) -> float:
        return distance(self, other)

    def __str__(self) -> str:
        return self.hex


def parse_hex(text: str) -> Color:
    """Parse '#RRGGBB' or 'RRGGBB' (either case) into a Color."""
    digits = text[1:] if text.startswith('#') else text
    if len(digits) != 6:
        raise FormatError(text, f'expected 6 hex digits, got {len(digits)}')
    bad = [c for c in digits if c not in _HEX_DIGITS]
    if bad:
        raise FormatError(text, f'non-hex character {bad[0]!r}')
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def format_hex(color: Color) -> str:
    """Render as '#RRGGBB' with uppercase digits."""
    return f'#{color.red:02X}{color.green:02X}{color.blue:02X}'


def distance(a: Color, b: Color) -> float:
    """Euclidean distance in RGB space. Plain ints, so no uint8 wrap-around."""
    dr = a.red - b.red
    dg = a.green - b.green
    db = a.blue - b.blue
    return math.sqrt(dr * dr + dg * dg + db * db)
