"""Color analysis of captured frames.

Local extraction always runs. When a remote describer is configured its
free-text answer is attached to the result; if it fails the local result is
returned on its own.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

from visionaid.colors.sampler import ColorDescriptor, ColorSampler
from visionaid.common.logging import get_logger
from visionaid.config import Config
from visionaid.describer import ColorDescriber, DescriptionError
from visionaid.frame import Frame
from visionaid.speech import summarize_colors


@dataclass
class ColorAnalysis:
    """Color analysis result for a frame."""

    frame_id: str
    colors: list[ColorDescriptor]
    summary: str
    analysis: str | None = None
    latency_ms: int = 0

    @property
    def used_remote(self) -> bool:
        return self.analysis is not None

    def to_dict(self) -> dict:
        return {
            "frame_id": self.frame_id,
            "colors": [c.to_dict() for c in self.colors],
            "summary": self.summary,
            "analysis": self.analysis,
            "latency_ms": self.latency_ms,
        }


def scale_point(
    x: float,
    y: float,
    display_size: tuple[float, float],
    buffer_size: tuple[int, int],
) -> tuple[int, int]:
    """Map a point on a scaled display to buffer pixel coordinates.

    Args:
        x: Horizontal position on the display.
        y: Vertical position on the display.
        display_size: (width, height) the frame is shown at.
        buffer_size: (width, height) of the pixel buffer.

    Returns:
        Integer buffer coordinates, rounded down. Points left of or above
        the display map to negative coordinates.
    """
    display_width, display_height = display_size
    if display_width <= 0 or display_height <= 0:
        raise ValueError(f"Display size must be positive, got {display_size}")

    buffer_width, buffer_height = buffer_size
    return (
        math.floor(x * buffer_width / display_width),
        math.floor(y * buffer_height / display_height),
    )


class ColorAnalyzer:
    """Analyzes frames for dominant colors and point colors."""

    def __init__(
        self,
        config: Config,
        describer: ColorDescriber | None = None,
        sampler: ColorSampler | None = None,
    ) -> None:
        """Initialize analyzer.

        Args:
            config: Configuration.
            describer: Remote describer. None analyzes locally only.
            sampler: Color sampler. Defaults to one built from config.
        """
        self.config = config
        self.describer = describer
        self.sampler = sampler or ColorSampler.from_config(config.colors)
        self.logger = get_logger("analyzer")

    async def analyze(self, frame: Frame, prompt: str | None = None) -> ColorAnalysis:
        """Find the dominant colors of a frame.

        Args:
            frame: Frame to analyze.
            prompt: Optional prompt for the remote describer.

        Returns:
            Analysis with local colors and, when available, remote text.

        Raises:
            InvalidBufferError: If the frame cannot be decoded.
        """
        start_time = time.time()

        pixels = frame.pixels()
        colors = self.sampler.extract_dominant_colors(pixels, pixels.width, pixels.height)

        analysis: str | None = None
        if self.describer is not None:
            try:
                analysis = await self.describer.describe(
                    frame.data, prompt or self.config.describer.prompt
                )
            except DescriptionError as e:
                self.logger.warning(
                    "remote_description_failed",
                    frame_id=frame.frame_id,
                    error=str(e),
                )

        latency_ms = int((time.time() - start_time) * 1000)
        self.logger.info(
            "colors_analyzed",
            frame_id=frame.frame_id,
            colors=[c.name for c in colors],
            remote=analysis is not None,
            latency_ms=latency_ms,
        )

        return ColorAnalysis(
            frame_id=frame.frame_id,
            colors=colors,
            summary=summarize_colors(colors),
            analysis=analysis,
            latency_ms=latency_ms,
        )

    def pick(
        self,
        frame: Frame,
        x: float,
        y: float,
        display_size: tuple[float, float] | None = None,
    ) -> ColorDescriptor:
        """Get the exact color at a point of a frame.

        Args:
            frame: Frame to sample.
            x: Horizontal position.
            y: Vertical position.
            display_size: Size the frame is displayed at, when the point was
                taken on a scaled display. None means buffer coordinates.

        Raises:
            OutOfBoundsError: If the point falls outside the frame.
        """
        pixels = frame.pixels()
        if display_size is not None:
            x, y = scale_point(x, y, display_size, (pixels.width, pixels.height))

        color = self.sampler.color_at_point(pixels, pixels.width, pixels.height, x, y)
        self.logger.debug(
            "color_picked", frame_id=frame.frame_id, x=x, y=y, color=color.name
        )
        return color
