"""Tests for color notation conversions."""

import pytest

from visionaid.colors.convert import (
    format_hsl,
    format_rgb,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)


class TestHex:
    """Tests for hex conversion."""

    @pytest.mark.parametrize(
        "rgb,expected",
        [
            ((255, 0, 0), "#ff0000"),
            ((0, 0, 1), "#000001"),
            ((10, 11, 12), "#0a0b0c"),
            ((0, 0, 0), "#000000"),
            ((255, 255, 255), "#ffffff"),
        ],
    )
    def test_rgb_to_hex(self, rgb, expected):
        """Test six lowercase digits, including leading zeros."""
        assert rgb_to_hex(*rgb) == expected

    def test_hex_to_rgb(self):
        """Test parsing hex strings."""
        assert hex_to_rgb("#e08000") == (224, 128, 0)
        assert hex_to_rgb("E08000") == (224, 128, 0)
        assert hex_to_rgb(rgb_to_hex(1, 2, 3)) == (1, 2, 3)

    @pytest.mark.parametrize("value", ["", "#fff", "#gg0000", "#12345678", "red"])
    def test_hex_to_rgb_invalid(self, value):
        """Test malformed hex strings."""
        with pytest.raises(ValueError):
            hex_to_rgb(value)


class TestHsl:
    """Tests for HSL conversion."""

    @pytest.mark.parametrize(
        "rgb,expected",
        [
            ((255, 0, 0), (0, 100, 50)),
            ((0, 255, 0), (120, 100, 50)),
            ((0, 0, 255), (240, 100, 50)),
            ((255, 255, 0), (60, 100, 50)),
            ((0, 255, 255), (180, 100, 50)),
            ((255, 0, 255), (300, 100, 50)),
            ((0, 0, 0), (0, 0, 0)),
            ((255, 255, 255), (0, 0, 100)),
            ((128, 128, 128), (0, 0, 50)),
            ((224, 128, 0), (34, 100, 44)),
            ((128, 0, 128), (300, 100, 25)),
        ],
    )
    def test_rgb_to_hsl(self, rgb, expected):
        """Test known conversions."""
        assert rgb_to_hsl(*rgb) == expected

    def test_hue_stays_below_360(self):
        """Test that a hue rounding up to 360 wraps to 0."""
        assert rgb_to_hsl(255, 0, 1) == (0, 100, 50)

    def test_light_saturation_branch(self):
        """Test saturation when lightness is above one half."""
        # l = (1 + 0.5) / 2, s = 0.5 / (2 - 1.5)
        hue, saturation, lightness = rgb_to_hsl(255, 127.5, 127.5)
        assert (hue, saturation, lightness) == (0, 100, 75)

    @pytest.mark.parametrize(
        "rgb",
        [
            (255, 0, 0),
            (0, 255, 0),
            (0, 0, 255),
            (255, 255, 0),
            (0, 255, 255),
            (255, 0, 255),
            (0, 0, 0),
            (255, 255, 255),
            (224, 128, 0),
        ]
        + [(v, v, v) for v in range(0, 256, 32)],
    )
    def test_round_trip(self, rgb):
        """Test HSL back to RGB within one step for representative colors."""
        back = hsl_to_rgb(*rgb_to_hsl(*rgb))

        assert all(abs(a - b) <= 1 for a, b in zip(rgb, back))

    def test_round_trip_bound(self):
        """Test the worst-case drift of whole-number HSL over a coarse grid."""
        # Per channel: 255 * (2 * 0.005 for l + 0.5 * 0.005 for s + 0.5 / 60
        # for h) plus 0.5 for the final rounding stays below 6.
        levels = range(0, 256, 17)
        worst = 0
        for rgb in ((r, g, b) for r in levels for g in levels for b in levels):
            back = hsl_to_rgb(*rgb_to_hsl(*rgb))
            worst = max(worst, *(abs(a - b) for a, b in zip(rgb, back)))

        assert worst <= 6

    def test_hsl_to_rgb_sectors(self):
        """Test each hue sector of the inverse conversion."""
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(60, 100, 50) == (255, 255, 0)
        assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
        assert hsl_to_rgb(180, 100, 50) == (0, 255, 255)
        assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)
        assert hsl_to_rgb(300, 100, 50) == (255, 0, 255)
        assert hsl_to_rgb(360, 100, 50) == (255, 0, 0)


class TestFormatting:
    """Tests for notation helpers."""

    def test_format_rgb(self):
        assert format_rgb(1, 22, 255) == "rgb(1,22,255)"

    def test_format_hsl(self):
        assert format_hsl(34, 100, 44) == "hsl(34,100%,44%)"

    @pytest.mark.parametrize(
        "value,expected",
        [(12.5, 13), (87.5, 88), (0.5, 1), (2.4999, 2), (99.5, 100), (0.0, 0)],
    )
    def test_round_half_up(self, value, expected):
        """Test halves round up rather than to even."""
        assert round_half_up(value) == expected
