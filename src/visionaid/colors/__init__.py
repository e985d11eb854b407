"""On-device color detection.

Example usage:

    from visionaid.colors import PixelBuffer, extract_dominant_colors

    pixels = PixelBuffer.from_encoded(jpeg_bytes)
    for color in extract_dominant_colors(pixels, pixels.width, pixels.height):
        print(color.name, color.hex, color.description)

"""

from visionaid.colors.buffer import PixelBuffer
from visionaid.colors.convert import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from visionaid.colors.errors import ColorError, InvalidBufferError, OutOfBoundsError
from visionaid.colors.naming import NAMED_COLORS, NamedColor, nearest_color_name
from visionaid.colors.sampler import (
    ColorDescriptor,
    ColorSampler,
    color_at_point,
    extract_dominant_colors,
)

__all__ = [
    "PixelBuffer",
    "ColorDescriptor",
    "ColorSampler",
    "extract_dominant_colors",
    "color_at_point",
    "NAMED_COLORS",
    "NamedColor",
    "nearest_color_name",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "ColorError",
    "InvalidBufferError",
    "OutOfBoundsError",
]
