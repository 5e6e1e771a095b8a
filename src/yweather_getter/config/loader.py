"""YAML configuration loading utilities."""

from pathlib import Path
from typing import Any

import yaml

from yweather_getter.config.models import WeatherConfig


def load_config(path: Path | str | None = None, **overrides: Any) -> WeatherConfig:
    """Load configuration from a YAML file, with keyword overrides on top.

    Overrides replace top-level keys before validation, so a CLI flag such as
    ``unit="f"`` is checked exactly like the same key in the file.

    Args:
        path: Path to YAML config file (default: ``configs/default.yaml``).
        **overrides: Top-level config keys that win over the file.

    Returns:
        Validated WeatherConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file does not hold a mapping.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path) if path is not None else get_default_config_path()
    with path.open() as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping of settings, got {type(raw).__name__}")

    return WeatherConfig.model_validate({**raw, **overrides})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
