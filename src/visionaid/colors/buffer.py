"""RGBA pixel buffers handed over by frame capture."""

from __future__ import annotations

import io
from typing import Any

import numpy as np
from PIL import Image, UnidentifiedImageError

from visionaid.colors.errors import InvalidBufferError, OutOfBoundsError

CHANNELS = 4


def _as_flat_uint8(data: Any) -> np.ndarray:
    """View caller data as a flat array of 8-bit samples."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            return np.frombuffer(data, dtype=np.uint8)
        except ValueError as e:
            raise InvalidBufferError(f"Unreadable pixel buffer: {e}") from e

    try:
        array = np.asarray(data)
    except (TypeError, ValueError) as e:
        raise InvalidBufferError(f"Unreadable pixel buffer: {e}") from e

    if array.dtype != np.uint8:
        if array.size and (
            not np.issubdtype(array.dtype, np.integer)
            or array.min() < 0
            or array.max() > 255
        ):
            raise InvalidBufferError("Pixel samples must be integers in 0-255")
        array = array.astype(np.uint8)

    return array.reshape(-1)


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidBufferError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidBufferError(f"{name} must be positive, got {value}")
    return int(value)


class PixelBuffer:
    """Row-major RGBA pixels with known dimensions.

    The buffer is a read-only view over the caller's data; nothing is
    copied for bytes-like input.
    """

    def __init__(self, data: Any, width: int, height: int) -> None:
        """Wrap and validate pixel data.

        Args:
            data: Flat RGBA samples (bytes-like, numpy array or int sequence).
            width: Width in pixels.
            height: Height in pixels.

        Raises:
            InvalidBufferError: If dimensions are not positive or the sample
                count is not width * height * 4.
        """
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)

        flat = _as_flat_uint8(data)
        expected = self.width * self.height * CHANNELS
        if flat.size != expected:
            raise InvalidBufferError(
                f"Buffer holds {flat.size} samples, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

        pixels = flat.reshape(self.width * self.height, CHANNELS)
        pixels.flags.writeable = False
        self._pixels = pixels

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelBuffer:
        """Build a buffer from a Pillow image in any mode."""
        rgba = image.convert("RGBA")
        return cls(rgba.tobytes(), rgba.width, rgba.height)

    @classmethod
    def from_encoded(cls, data: bytes) -> PixelBuffer:
        """Decode JPEG/PNG (or any Pillow-readable) bytes.

        Raises:
            InvalidBufferError: If the bytes are not a readable image.
        """
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.load()
                return cls.from_image(image)
        except (UnidentifiedImageError, OSError) as e:
            raise InvalidBufferError(f"Cannot decode image data: {e}") from e

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def rgba(self) -> np.ndarray:
        """Read-only ``(pixel_count, 4)`` view of the samples."""
        return self._pixels

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Get the RGBA sample at a pixel coordinate.

        Raises:
            OutOfBoundsError: If the point lies outside the grid.
        """
        if isinstance(x, bool) or isinstance(y, bool) or not (
            isinstance(x, (int, np.integer)) and isinstance(y, (int, np.integer))
        ):
            raise TypeError(f"Pixel coordinates must be integers, got ({x!r}, {y!r})")
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

        r, g, b, a = self._pixels[y * self.width + x]
        return int(r), int(g), int(b), int(a)

    def __len__(self) -> int:
        return self.pixel_count * CHANNELS

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
