"""Common utilities for VisionAid."""

from visionaid.common.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
