"""Pipeline module for end-to-end weather queries."""

from yweather_getter.pipeline.base import WeatherErrorListener, WeatherInfoListener
from yweather_getter.pipeline.weather import QueryState, WeatherPipeline

__all__ = [
    "QueryState",
    "WeatherErrorListener",
    "WeatherInfoListener",
    "WeatherPipeline",
]
