"""Color space and notation conversions."""

from __future__ import annotations

import math
import re

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Python's round() uses banker's rounding, which would report 12.5% as 12.
    """
    return math.floor(value + 0.5)


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """Pack channels into a lowercase ``#rrggbb`` string."""
    return f"#{red:02x}{green:02x}{blue:02x}"


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` (or ``rrggbb``) into channel values.

    Raises:
        ValueError: If the string is not a 6-digit hex color.
    """
    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")

    packed = int(match.group(1), 16)
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def rgb_to_hsl(red: int, green: int, blue: int) -> tuple[int, int, int]:
    """Convert RGB to integer HSL.

    Args:
        red: Red channel (0-255).
        green: Green channel (0-255).
        blue: Blue channel (0-255).

    Returns:
        Tuple of hue in degrees (0-359), saturation and lightness in percent.
    """
    r = red / 255
    g = green / 255
    b = blue / 255

    high = max(r, g, b)
    low = min(r, g, b)
    h = 0.0
    s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)

        if high == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return (
        round_half_up(h * 360) % 360,
        round_half_up(s * 100),
        round_half_up(lightness * 100),
    )


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """Convert HSL back to RGB.

    Args:
        hue: Hue in degrees.
        saturation: Saturation in percent (0-100).
        lightness: Lightness in percent (0-100).

    Returns:
        Channel values (0-255).
    """
    s = saturation / 100
    lum = lightness / 100
    h = (hue % 360) / 60

    chroma = (1 - abs(2 * lum - 1)) * s
    x = chroma * (1 - abs(h % 2 - 1))
    m = lum - chroma / 2

    sector = int(h) % 6
    r, g, b = (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[sector]

    def channel(value: float) -> int:
        return min(255, max(0, round_half_up((value + m) * 255)))

    return channel(r), channel(g), channel(b)


def format_rgb(red: int, green: int, blue: int) -> str:
    """CSS-style ``rgb(r,g,b)`` notation."""
    return f"rgb({red},{green},{blue})"


def format_hsl(hue: int, saturation: int, lightness: int) -> str:
    """CSS-style ``hsl(h,s%,l%)`` notation."""
    return f"hsl({hue},{saturation}%,{lightness}%)"
