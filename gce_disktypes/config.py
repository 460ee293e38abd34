"""Client configuration."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from gce_disktypes.exceptions import ConfigError

DEFAULT_BASE_URL = "https://www.googleapis.com/compute/v1"


class ClientConfig(BaseModel):
    """Connection settings for a Compute Engine project."""

    project: str = Field(..., min_length=1)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)
    token: str | None = None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended.

        Args:
            v: Field value

        Returns:
            Base URL without trailing slashes

        Raises:
            ValueError: If the URL is empty
        """
        v = v.rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        return v


def load_config(path: str | Path) -> ClientConfig:
    """Load a client configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed configuration

    Raises:
        ConfigError: If the file doesn't exist or is invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found at {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return ClientConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
