"""Colour value object used for status badges and document styling.

A Color built directly is range-checked per channel. Parsing from hex is
lenient: unparseable input falls back to black.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from portal.domain.exceptions import ValidationError

_HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)

# Relative luminance above which white text stops being legible.
LIGHT_FILL_THRESHOLD = 0.6


@dataclass(frozen=True)
class Color:
    """An sRGB colour with 0-255 channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise ValidationError(
                    f"Color channel must be an integer, got {type(channel).__name__}"
                )
            if not 0 <= channel <= 255:
                raise ValidationError(f"Color channel out of range: {channel}")

    # --- Conversions ----------------------------------------------------------

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_fractions(self) -> tuple[float, float, float]:
        """Channels scaled to 0..1, the form PDF drawing APIs expect."""
        return (self.r / 255, self.g / 255, self.b / 255)

    # --- Legibility -----------------------------------------------------------

    def relative_luminance(self) -> float:
        """WCAG relative luminance in the range 0..1."""

        def linear(channel: int) -> float:
            c = channel / 255
            return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

        return 0.2126 * linear(self.r) + 0.7152 * linear(self.g) + 0.0722 * linear(self.b)

    def contrasting_text(self) -> Color:
        """White on dark and mid-tone fills, near-black on light ones."""
        if self.relative_luminance() > LIGHT_FILL_THRESHOLD:
            return NEAR_BLACK
        return WHITE

    def __str__(self) -> str:
        return self.hex

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_hex(value: str) -> Color:
        """Parse ``#rrggbb`` (``#`` optional).

        Anything that is not a six-digit hex colour yields black.
        """
        match = _HEX_PATTERN.match(value or "")
        if match is None:
            return BLACK
        r, g, b = (int(part, 16) for part in match.groups())
        return Color(r, g, b)


BLACK = Color(0, 0, 0)
NEAR_BLACK = Color(17, 24, 39)
WHITE = Color(255, 255, 255)
