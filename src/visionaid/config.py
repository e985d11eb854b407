"""Configuration management for VisionAid."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeviceConfig(BaseModel):
    """Device configuration."""

    name: str = "visionaid"
    mode: Literal["production", "development"] = "development"
    log_level: str = "INFO"
    json_logs: bool = False


class ColorConfig(BaseModel):
    """On-device color sampling configuration."""

    sample_stride: int = Field(default=10, ge=1)
    quantization_step: int = Field(default=32, ge=1, le=256)
    max_colors: int = Field(default=5, ge=1)


class DescriberConfig(BaseModel):
    """Remote color description configuration."""

    enabled: bool = False
    endpoint: str = "http://localhost:3000/api/analyze-colors"
    api_key: str | None = None
    timeout_seconds: float = 30.0
    jpeg_quality: int = Field(80, ge=1, le=100)
    prompt: str = (
        "Identify the dominant colors in this image. List the top 5 most "
        "prominent colors with their approximate names and descriptions."
    )


class Config(BaseSettings):
    """Main configuration for VisionAid."""

    model_config = SettingsConfigDict(
        env_prefix="VISIONAID_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    device: DeviceConfig = Field(default_factory=DeviceConfig)
    colors: ColorConfig = Field(default_factory=ColorConfig)
    describer: DescriberConfig = Field(default_factory=DescriberConfig)

    # Mock mode for development
    mock_mode: bool = False

    @classmethod
    def from_yaml(cls, path: Path | str) -> Config:
        """Load configuration from YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)


def load_config(
    config_path: Path | str | None = None,
    env_override: bool = True,
) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Path to config file. If None, searches standard locations.
        env_override: Whether to allow environment variables to override config.

    Returns:
        Loaded configuration.
    """
    search_paths = [
        Path("/etc/visionaid/config.yaml"),
        Path.home() / ".config" / "visionaid" / "config.yaml",
        Path("config.yaml"),
        Path("configs/visionaid.yaml"),
    ]

    if config_path:
        search_paths.insert(0, Path(config_path))

    config_file: Path | None = None
    for path in search_paths:
        if path.exists():
            config_file = path
            break

    if config_file:
        config = Config.from_yaml(config_file)
    else:
        config = Config()

    if env_override:
        api_key = os.environ.get("VISIONAID_DESCRIBER_API_KEY")
        if api_key:
            config.describer.api_key = api_key

        if os.environ.get("VISIONAID_MOCK_MODE", "").lower() in ("1", "true", "yes"):
            config.mock_mode = True

    return config


def get_default_config() -> dict[str, Any]:
    """Get default configuration as dictionary."""
    return Config().model_dump()
