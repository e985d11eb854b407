"""Captured camera frames."""

from __future__ import annotations

import io
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from visionaid.colors.buffer import PixelBuffer


@dataclass
class Frame:
    """Captured frame, kept in its encoded form."""

    frame_id: str
    data: bytes
    width: int
    height: int
    format: str
    timestamp: float
    metadata: dict = field(default_factory=dict)

    @classmethod
    def from_image(
        cls,
        image: Image.Image,
        format: str = "png",
        quality: int = 85,
        **metadata,
    ) -> Frame:
        """Encode a Pillow image as a frame.

        Args:
            image: Source image.
            format: Encoding ("png" keeps exact pixel values, "jpeg" is lossy).
            quality: JPEG quality (1-100).
            **metadata: Extra frame metadata.
        """
        buffer = io.BytesIO()
        if format.lower() in ("jpeg", "jpg"):
            image.convert("RGB").save(buffer, format="JPEG", quality=quality)
        else:
            image.save(buffer, format=format.upper())

        return cls(
            frame_id=str(uuid.uuid4()),
            data=buffer.getvalue(),
            width=image.width,
            height=image.height,
            format=format.lower(),
            timestamp=time.time(),
            metadata=metadata,
        )

    @classmethod
    def from_file(cls, path: Path | str) -> Frame:
        """Load an image file as a frame without re-encoding it."""
        path = Path(path)
        data = path.read_bytes()

        with Image.open(io.BytesIO(data)) as image:
            width, height = image.size
            image_format = (image.format or path.suffix.lstrip(".")).lower()

        return cls(
            frame_id=str(uuid.uuid4()),
            data=data,
            width=width,
            height=height,
            format=image_format,
            timestamp=time.time(),
            metadata={"source": str(path)},
        )

    def pixels(self) -> PixelBuffer:
        """Decode the frame into RGBA pixels."""
        return PixelBuffer.from_encoded(self.data)
