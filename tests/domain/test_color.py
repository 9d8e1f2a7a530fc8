"""Unit tests for the Color value object."""

import pytest

from portal.domain.exceptions import ValidationError
from portal.domain.model.value_objects import BLACK, NEAR_BLACK, WHITE, Color


class TestColor:

    def test_from_hex(self):
        assert Color.from_hex("#3b82f6") == Color(59, 130, 246)

    def test_from_hex_without_hash_and_uppercase(self):
        assert Color.from_hex("10B981") == Color(16, 185, 129)

    def test_invalid_hex_is_black(self):
        assert Color.from_hex("blue") == BLACK
        assert Color.from_hex("") == BLACK

    def test_hex_property(self):
        assert Color(245, 158, 11).hex == "#f59e0b"

    def test_channel_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="out of range"):
            Color(256, 0, 0)

    def test_as_fractions(self):
        assert WHITE.as_fractions() == (1.0, 1.0, 1.0)


class TestContrastingText:

    @pytest.mark.parametrize("hex_value", ["#f59e0b", "#3b82f6", "#8b5cf6", "#10b981", "#6b7280"])
    def test_status_colours_take_white_text(self, hex_value):
        assert Color.from_hex(hex_value).contrasting_text() == WHITE

    def test_light_fill_takes_dark_text(self):
        assert Color.from_hex("#fde68a").contrasting_text() == NEAR_BLACK

    def test_luminance_bounds(self):
        assert BLACK.relative_luminance() == 0
        assert WHITE.relative_luminance() == pytest.approx(1.0)
