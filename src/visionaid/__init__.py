"""VisionAid - on-device color detection for visual assistance."""

__version__ = "0.1.0"
__author__ = "VisionAid Team"

from visionaid.config import Config, load_config

__all__ = ["Config", "load_config", "__version__"]
