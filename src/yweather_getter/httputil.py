"""Shared httpx helpers: timeout budgets and error translation."""

import httpx

from yweather_getter.errors import ConnectionFailureError, FeedTimeoutError

DEFAULT_CONNECT_TIMEOUT_MS = 20_000
DEFAULT_SOCKET_TIMEOUT_MS = 20_000

# InvalidURL is not an HTTPError; it surfaces when a configured endpoint is malformed.
HTTP_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def build_timeout(
    connect_timeout_ms: int = DEFAULT_CONNECT_TIMEOUT_MS,
    socket_timeout_ms: int = DEFAULT_SOCKET_TIMEOUT_MS,
) -> httpx.Timeout:
    """Build an httpx timeout with independent connect and socket budgets.

    The socket budget bounds every read and write on an open connection;
    acquiring a pooled connection shares the connect budget.
    """
    connect = connect_timeout_ms / 1000
    socket = socket_timeout_ms / 1000
    return httpx.Timeout(connect=connect, read=socket, write=socket, pool=connect)


def translate_http_error(exc: Exception, action: str) -> ConnectionFailureError:
    """Map an httpx error onto the package's connection fault types."""
    if isinstance(exc, httpx.TimeoutException):
        return FeedTimeoutError(f"{action} timed out: {exc!r}")
    return ConnectionFailureError(f"{action} failed: {exc!r}")
