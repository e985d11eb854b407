"""Pytest configuration and fixtures for VisionAid tests."""

from __future__ import annotations

from typing import Callable, Sequence

import pytest
import structlog
from PIL import Image

from visionaid.config import Config
from visionaid.frame import Frame

RGB = tuple[int, int, int]


def pytest_configure(config: pytest.Config) -> None:
    """Configure test markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by CLI commands."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def config() -> Config:
    """Get test configuration."""
    cfg = Config()
    cfg.device.mode = "development"
    cfg.device.log_level = "DEBUG"
    return cfg


@pytest.fixture
def mock_config() -> Config:
    """Get mock configuration."""
    cfg = Config()
    cfg.mock_mode = True
    cfg.device.mode = "development"
    return cfg


def solid_rgba(color: RGB, width: int, height: int, alpha: int = 255) -> bytes:
    """Buffer where every pixel has the same color."""
    return bytes([*color, alpha]) * (width * height)


@pytest.fixture
def sampled_buffer() -> Callable[..., tuple[bytes, int, int]]:
    """Build a one-row buffer whose stride samples are the given colors.

    Each color fills a whole stride window, so the sampled pixel of window
    ``i`` is ``samples[i]``.
    """

    def build(samples: Sequence[RGB], stride: int = 10) -> tuple[bytes, int, int]:
        data = b"".join(solid_rgba(color, stride, 1) for color in samples)
        return data, stride * len(samples), 1

    return build


@pytest.fixture
def two_tone_frame() -> Frame:
    """Lossless 40x20 frame, left half blue and right half yellow."""
    image = Image.new("RGB", (40, 20), color=(0, 0, 255))
    image.paste((255, 255, 0), (20, 0, 40, 20))
    return Frame.from_image(image, format="png")
