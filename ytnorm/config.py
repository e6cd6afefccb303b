"""Configuration loading for ytnorm.

Settings come from ~/.ytnorm/config.toml (optional), overridden by
environment variables (a .env file in the working directory is honoured):

    debounce_ms = 300       # YTNORM_DEBOUNCE_MS
    batch_size = 5          # YTNORM_BATCH_SIZE
    batch_delay_ms = 100    # YTNORM_BATCH_DELAY_MS
"""

import os
import tomllib
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from ytnorm.logging import logger

ENV_PREFIX = "YTNORM_"
_ENV_KEYS = ("debounce_ms", "batch_size", "batch_delay_ms")


class Settings(BaseModel):  # type: ignore[misc]
    """Timing knobs for the validation pipeline."""

    debounce_ms: int = 300
    batch_size: int = 5
    batch_delay_ms: int = 100

    @field_validator("debounce_ms", "batch_delay_ms")  # type: ignore[untyped-decorator]
    @classmethod
    def validate_delay(cls, v: int) -> int:
        """Ensure delays are non-negative."""
        if v < 0:
            msg = "Delay must be non-negative"
            raise ValueError(msg)
        return v

    @field_validator("batch_size")  # type: ignore[untyped-decorator]
    @classmethod
    def validate_batch_size(cls, v: int) -> int:
        """Ensure batch size is positive."""
        if v < 1:
            msg = "Batch size must be at least 1"
            raise ValueError(msg)
        return v

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    @property
    def batch_delay_seconds(self) -> float:
        return self.batch_delay_ms / 1000


def get_config_dir() -> Path:
    """Get or create config directory."""
    config_dir = Path.home() / ".ytnorm"
    config_dir.mkdir(exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key in _ENV_KEYS:
        value = os.getenv(ENV_PREFIX + key.upper())
        if value:
            overrides[key] = value.strip()
    return overrides


def load_config(path: Path | None = None) -> Settings:
    """Load settings from TOML (if present) and environment overrides.

    Args:
        path: Config file to read (default: ~/.ytnorm/config.toml)

    Raises:
        pydantic.ValidationError: If a value is out of range or not an integer
    """
    load_dotenv()
    config_path = path or get_config_path()

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        logger.debug("Loaded config from {}", config_path)

    overrides = _env_overrides()
    if overrides:
        logger.debug("Environment overrides: {}", ", ".join(sorted(overrides)))
    data.update(overrides)

    settings: Settings = Settings.model_validate(data)
    return settings
