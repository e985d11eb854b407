"""Canonical color names and nearest-name lookup."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence


class NamedColor(NamedTuple):
    """Reference color used for naming."""

    name: str
    red: int
    green: int
    blue: int


# Declaration order matters: earlier entries win distance ties.
NAMED_COLORS: tuple[NamedColor, ...] = (
    NamedColor("Red", 255, 0, 0),
    NamedColor("Green", 0, 255, 0),
    NamedColor("Blue", 0, 0, 255),
    NamedColor("Yellow", 255, 255, 0),
    NamedColor("Orange", 255, 165, 0),
    NamedColor("Purple", 128, 0, 128),
    NamedColor("Pink", 255, 192, 203),
    NamedColor("Brown", 165, 42, 42),
    NamedColor("Black", 0, 0, 0),
    NamedColor("White", 255, 255, 255),
    NamedColor("Gray", 128, 128, 128),
    NamedColor("Cyan", 0, 255, 255),
    NamedColor("Magenta", 255, 0, 255),
)


def color_distance(
    rgb: tuple[float, float, float],
    other: tuple[float, float, float],
) -> float:
    """Euclidean distance between two colors in RGB space."""
    return math.sqrt(
        (rgb[0] - other[0]) ** 2
        + (rgb[1] - other[1]) ** 2
        + (rgb[2] - other[2]) ** 2
    )


def nearest_color(
    red: float,
    green: float,
    blue: float,
    table: Sequence[NamedColor] = NAMED_COLORS,
) -> NamedColor:
    """Find the table entry closest to a color.

    Args:
        red: Red channel (0-255).
        green: Green channel (0-255).
        blue: Blue channel (0-255).
        table: Reference colors, scanned in order.

    Returns:
        The first entry with the minimal distance.
    """
    if not table:
        raise ValueError("Color table is empty")

    closest = table[0]
    min_distance = math.inf

    for entry in table:
        distance = color_distance((red, green, blue), entry[1:])
        if distance < min_distance:
            min_distance = distance
            closest = entry

    return closest


def nearest_color_name(
    red: float,
    green: float,
    blue: float,
    table: Sequence[NamedColor] = NAMED_COLORS,
) -> str:
    """Human-readable name of the closest reference color."""
    return nearest_color(red, green, blue, table).name
