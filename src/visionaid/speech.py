"""Spoken phrasing for color results."""

from __future__ import annotations

from typing import Sequence

from visionaid.colors.sampler import ColorDescriptor

NO_COLORS = "No colors detected."
UNABLE_TO_DETECT = "Unable to detect color at that point."


def summarize_colors(colors: Sequence[ColorDescriptor]) -> str:
    """One sentence listing dominant colors in rank order."""
    if not colors:
        return NO_COLORS
    return f"The main colors are: {', '.join(c.name for c in colors)}"


def announce_point(color: ColorDescriptor) -> str:
    """Announcement for a color picked at a point."""
    return f"Color detected: {color.name}. {color.description}"


def read_color(color: ColorDescriptor) -> str:
    return f"{color.name}. {color.description}"


def unable_to_detect() -> str:
    return UNABLE_TO_DETECT
