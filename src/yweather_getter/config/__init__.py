"""Configuration module for yweather-getter."""

from yweather_getter.config.factory import configure_logging, create_from_config
from yweather_getter.config.loader import get_default_config_path, load_config
from yweather_getter.config.models import EndpointsConfig, WeatherConfig

__all__ = [
    "EndpointsConfig",
    "WeatherConfig",
    "configure_logging",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
