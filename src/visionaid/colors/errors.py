"""Errors raised by the color pipeline."""

from __future__ import annotations


class ColorError(ValueError):
    """Base class for color pipeline contract violations."""


class InvalidBufferError(ColorError):
    """Pixel buffer does not match its declared dimensions."""


class OutOfBoundsError(ColorError):
    """Point query outside the buffer's pixel grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Point ({x}, {y}) is outside the {width}x{height} pixel grid"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height
