"""Exception taxonomy for weather queries.

"Identifier not found" and "provider error" are deliberately absent: they are
normal empty outcomes reported through ``QueryStatus``, not exceptions.
"""


class WeatherError(Exception):
    """Base class for all weather query faults."""


class NetworkUnavailableError(WeatherError):
    """The reachability check failed before any request was made."""


class LocationNotFoundError(WeatherError):
    """The location provider could not produce a fix."""


class ConnectionFailureError(WeatherError):
    """An HTTP request failed at the protocol or I/O level."""


class FeedTimeoutError(ConnectionFailureError):
    """The connect or read phase of a request exceeded its budget."""


class ParsingError(WeatherError):
    """A response was malformed or missing a mandatory element or attribute."""
