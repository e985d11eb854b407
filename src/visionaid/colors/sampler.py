"""Dominant color extraction and point color lookup.

Frames are summarized by stride sampling: one pixel out of every
``SAMPLE_STRIDE`` is read, its channels are quantized into buckets of
``QUANTIZATION_STEP`` and the most populated buckets are reported. Point
lookups read a single pixel without quantizing it.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

import numpy as np

from visionaid.colors.buffer import PixelBuffer
from visionaid.colors.convert import (
    format_hsl,
    format_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)
from visionaid.colors.errors import InvalidBufferError
from visionaid.colors.naming import NAMED_COLORS, NamedColor, nearest_color_name
from visionaid.config import ColorConfig

SAMPLE_STRIDE = 10
QUANTIZATION_STEP = 32
MAX_COLORS = 5


@dataclass(frozen=True)
class ColorDescriptor:
    """A named color with its hex, RGB and HSL notations."""

    name: str
    hex: str
    rgb: str
    hsl: str
    description: str
    red: int
    green: int
    blue: int
    count: int | None = None
    percentage: int | None = None

    @property
    def channels(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output, omitting unset statistics."""
        data = asdict(self)
        return {k: v for k, v in data.items() if v is not None}


class ColorSampler:
    """Extracts and names colors from RGBA pixel buffers.

    Instances hold only immutable settings, so one sampler can serve
    concurrent callers.
    """

    def __init__(
        self,
        sample_stride: int = SAMPLE_STRIDE,
        quantization_step: int = QUANTIZATION_STEP,
        max_colors: int = MAX_COLORS,
        table: Sequence[NamedColor] = NAMED_COLORS,
    ) -> None:
        """Initialize sampler.

        Args:
            sample_stride: Read one pixel out of every ``sample_stride``.
            quantization_step: Channel bucket width.
            max_colors: Maximum number of dominant colors reported.
            table: Reference colors used for naming.
        """
        if sample_stride < 1:
            raise ValueError(f"sample_stride must be >= 1, got {sample_stride}")
        if not 1 <= quantization_step <= 256:
            raise ValueError(
                f"quantization_step must be in 1-256, got {quantization_step}"
            )
        if max_colors < 1:
            raise ValueError(f"max_colors must be >= 1, got {max_colors}")

        self.sample_stride = sample_stride
        self.quantization_step = quantization_step
        self.max_colors = max_colors
        self.table = tuple(table)

    @classmethod
    def from_config(cls, config: ColorConfig) -> ColorSampler:
        return cls(
            sample_stride=config.sample_stride,
            quantization_step=config.quantization_step,
            max_colors=config.max_colors,
        )

    def extract_dominant_colors(
        self,
        buffer: Any,
        width: int,
        height: int,
    ) -> list[ColorDescriptor]:
        """Find the most common quantized colors in a frame.

        Args:
            buffer: Flat RGBA samples, or a ``PixelBuffer``.
            width: Width in pixels.
            height: Height in pixels.

        Returns:
            Up to ``max_colors`` descriptors ordered by descending pixel
            count; equal counts keep the order buckets were first seen.
            Empty when the frame is smaller than the sampling stride.

        Raises:
            InvalidBufferError: If the buffer does not match the dimensions.
        """
        pixels = _wrap(buffer, width, height)

        # Last pixel of each stride window
        samples = pixels.rgba[self.sample_stride - 1 :: self.sample_stride, :3]
        total = len(samples)
        if total == 0:
            return []

        step = self.quantization_step
        quantized = (samples.astype(np.int64) // step) * step

        buckets, first_seen, counts = np.unique(
            quantized, axis=0, return_index=True, return_counts=True
        )
        ranking = np.lexsort((first_seen, -counts))
        percentages = _apportion(counts, ranking, total)

        colors = []
        for index in ranking[: self.max_colors]:
            red, green, blue = (int(c) for c in buckets[index])
            count = int(counts[index])
            percentage = int(percentages[index])
            name = nearest_color_name(red, green, blue, self.table)

            colors.append(
                self._describe(
                    red,
                    green,
                    blue,
                    name=name,
                    description=f"{name} - appears {percentage}% of the image",
                    count=count,
                    percentage=percentage,
                )
            )

        return colors

    def color_at_point(
        self,
        buffer: Any,
        width: int,
        height: int,
        x: int,
        y: int,
    ) -> ColorDescriptor:
        """Describe the exact color of one pixel.

        Channel values are reported as stored, without quantization.

        Raises:
            InvalidBufferError: If the buffer does not match the dimensions.
            OutOfBoundsError: If (x, y) is outside the pixel grid.
        """
        pixels = _wrap(buffer, width, height)
        red, green, blue, _ = pixels.pixel(x, y)
        name = nearest_color_name(red, green, blue, self.table)

        return self._describe(
            red,
            green,
            blue,
            name=name,
            description=f"A {name} color with RGB values of {red}, {green}, {blue}",
        )

    def _describe(
        self,
        red: int,
        green: int,
        blue: int,
        name: str,
        description: str,
        count: int | None = None,
        percentage: int | None = None,
    ) -> ColorDescriptor:
        return ColorDescriptor(
            name=name,
            hex=rgb_to_hex(red, green, blue),
            rgb=format_rgb(red, green, blue),
            hsl=format_hsl(*rgb_to_hsl(red, green, blue)),
            description=description,
            red=red,
            green=green,
            blue=blue,
            count=count,
            percentage=percentage,
        )


def _apportion(counts: np.ndarray, ranking: np.ndarray, total: int) -> np.ndarray:
    """Integer percent share of every bucket, summing to at most 100.

    Shares are rounded half-up. When that overshoots 100, the buckets that
    were rounded up the most give back one point each, lowest ranked first.
    """
    counts = counts.astype(np.int64)
    # Half-up rounding of count * 100 / total in integer arithmetic
    percentages = (counts * 200 + total) // (2 * total)

    overshoot = int(percentages.sum()) - 100
    if overshoot > 0:
        excess = percentages * total - counts * 100
        rank = np.empty_like(ranking)
        rank[ranking] = np.arange(len(ranking))
        percentages[np.lexsort((-rank, -excess))[:overshoot]] -= 1

    return percentages


def _wrap(buffer: Any, width: int, height: int) -> PixelBuffer:
    if isinstance(buffer, PixelBuffer):
        if (buffer.width, buffer.height) != (width, height):
            raise InvalidBufferError(
                f"Buffer is {buffer.width}x{buffer.height}, "
                f"called with {width}x{height}"
            )
        return buffer
    return PixelBuffer(buffer, width, height)


_default_sampler = ColorSampler()


def extract_dominant_colors(buffer: Any, width: int, height: int) -> list[ColorDescriptor]:
    """Dominant colors with the default sampling policy."""
    return _default_sampler.extract_dominant_colors(buffer, width, height)


def color_at_point(buffer: Any, width: int, height: int, x: int, y: int) -> ColorDescriptor:
    """Exact color of one pixel, named against the default table."""
    return _default_sampler.color_at_point(buffer, width, height, x, y)
