"""Network reachability checks run before every query."""

import asyncio
import logging
from typing import Protocol
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class NetworkMonitor(Protocol):
    """Interface for a pre-flight connectivity check."""

    async def is_connected(self) -> bool:
        """Return True if the network is usable."""
        ...


class AlwaysOnline:
    """Network monitor that skips the check."""

    async def is_connected(self) -> bool:
        return True


class TcpNetworkMonitor:
    """Consider the network reachable if a TCP connection to a host succeeds.

    Args:
        url: URL whose host and port are probed (port defaults from the scheme).
        timeout: Seconds to wait for the connection.
    """

    def __init__(self, url: str, *, timeout: float = 3.0) -> None:
        parsed = urlparse(url)
        if not parsed.hostname:
            raise ValueError(f"Cannot probe URL without a host: {url!r}")
        self._host = parsed.hostname
        self._port = parsed.port or (443 if parsed.scheme == "https" else 80)
        self._timeout = timeout

    async def is_connected(self) -> bool:
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(self._host, self._port), timeout=self._timeout
            )
        except (OSError, asyncio.TimeoutError) as e:
            logger.debug("Reachability probe to %s:%s failed: %s", self._host, self._port, e)
            return False
        writer.close()
        await writer.wait_closed()
        return True
