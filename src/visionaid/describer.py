"""Remote color description.

The remote model is an opaque collaborator: it receives an encoded frame and
a prompt and answers with free text, or fails.
"""

from __future__ import annotations

import asyncio
import base64
import io
import json

import httpx
from PIL import Image

from visionaid.common.logging import get_logger
from visionaid.config import Config, DescriberConfig
from visionaid.frame import Frame

JPEG_MAGIC = b"\xff\xd8"


class DescriptionError(Exception):
    """Remote description failed or returned an unusable answer."""


def to_jpeg(image_data: bytes, quality: int = 80) -> bytes:
    """Re-encode an image as JPEG, passing JPEG input through unchanged.

    Raises:
        DescriptionError: If the data is not a readable image.
    """
    if image_data.startswith(JPEG_MAGIC):
        return image_data

    try:
        with Image.open(io.BytesIO(image_data)) as image:
            return Frame.from_image(image, format="jpeg", quality=quality).data
    except OSError as e:
        raise DescriptionError(f"Cannot encode frame as JPEG: {e}") from e


class ColorDescriber:
    """Abstract color describer."""

    async def describe(self, image_data: bytes, prompt: str | None = None) -> str:
        """Describe the colors in an encoded image.

        Raises:
            DescriptionError: If no description could be obtained.
        """
        raise NotImplementedError


class MockColorDescriber(ColorDescriber):
    """Mock describer for testing."""

    def __init__(self, text: str | None = None, fail: bool = False) -> None:
        self.text = text or "The image is dominated by blue with some white areas."
        self.fail = fail
        self.calls = 0

    async def describe(self, image_data: bytes, prompt: str | None = None) -> str:
        """Mock description."""
        self.calls += 1
        await asyncio.sleep(0.01)  # Simulate network latency

        if self.fail:
            raise DescriptionError("Mock describer configured to fail")
        return self.text


class HttpColorDescriber(ColorDescriber):
    """Describer backed by an HTTP color analysis endpoint.

    Request body is ``{"image": <base64 JPEG>, "prompt": <text>}``; the
    answer is read from the ``analysis`` field of the JSON response. Frames in
    other encodings are converted to JPEG before sending.
    """

    def __init__(
        self,
        config: DescriberConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize describer.

        Args:
            config: Describer configuration.
            transport: Optional httpx transport (used by tests).
        """
        self.endpoint = config.endpoint
        self.api_key = config.api_key
        self.timeout = config.timeout_seconds
        self.default_prompt = config.prompt
        self.jpeg_quality = config.jpeg_quality
        self._transport = transport
        self.logger = get_logger("describer.http", endpoint=self.endpoint)

    async def describe(self, image_data: bytes, prompt: str | None = None) -> str:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "image": base64.b64encode(
                to_jpeg(image_data, self.jpeg_quality)
            ).decode("ascii"),
            "prompt": prompt or self.default_prompt,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.endpoint, headers=headers, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise DescriptionError(
                f"Describer returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise DescriptionError(f"Describer request failed: {e}") from e
        except json.JSONDecodeError as e:
            raise DescriptionError("Describer returned invalid JSON") from e

        if not isinstance(data, dict):
            raise DescriptionError("Describer returned an unexpected payload")
        if data.get("error"):
            raise DescriptionError(f"Describer error: {data['error']}")

        analysis = data.get("analysis")
        if not isinstance(analysis, str) or not analysis.strip():
            raise DescriptionError("Describer response has no analysis")

        self.logger.debug("description_received", length=len(analysis))
        return analysis


def create_describer(config: Config) -> ColorDescriber | None:
    """Build the describer selected by configuration.

    Returns:
        A mock describer in mock mode, an HTTP describer when enabled,
        otherwise None (local analysis only).
    """
    if config.mock_mode:
        return MockColorDescriber()
    if config.describer.enabled:
        return HttpColorDescriber(config.describer)
    return None
