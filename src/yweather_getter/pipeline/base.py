"""Listener protocols for callback-style consumers of ``WeatherPipeline``."""

from typing import Protocol

from yweather_getter.data import WeatherReport


class WeatherInfoListener(Protocol):
    """Receives the single result of a query."""

    def on_weather_info_received(self, report: WeatherReport | None) -> None:
        """Called once per query.

        ``None`` means there is no weather for that place (unknown location,
        provider error, or a fault already reported to the error listener).
        """
        ...


class WeatherErrorListener(Protocol):
    """Receives faults, one callback per fault kind."""

    def on_connection_unavailable(self, error: Exception) -> None:
        """The network was unreachable; no request was made."""
        ...

    def on_location_not_found(self, error: Exception) -> None:
        """The device location could not be determined."""
        ...

    def on_parsing_failure(self, error: Exception) -> None:
        """The weather feed could not be parsed."""
        ...

    def on_connection_failure(self, error: Exception) -> None:
        """A request failed or timed out."""
        ...
