"""HTTP retrieval of the raw weather feed."""

import logging

import httpx

from yweather_getter.data import Unit
from yweather_getter.httputil import HTTP_ERRORS, build_timeout, translate_http_error

logger = logging.getLogger(__name__)

FEED_URL = "http://weather.yahooapis.com/forecastrss"


class FeedFetcher:
    """Download the RSS weather feed for a WOEID.

    The body is read line by line into a single string, one ``"\\n"`` per
    line. An empty body is returned as ``""`` and left for the parser to
    reject. The client and response are closed on every exit path.

    Args:
        feed_url: Base URL of the feed (default: public Yahoo endpoint).
        timeout: httpx timeout carrying the connect and socket budgets.
        transport: Optional httpx transport, mostly for tests.
    """

    def __init__(
        self,
        *,
        feed_url: str = FEED_URL,
        timeout: httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._feed_url = feed_url
        self._timeout = timeout or build_timeout()
        self._transport = transport

    async def fetch(self, woeid: str, unit: Unit = Unit.CELSIUS) -> str:
        """Fetch the feed XML for a WOEID.

        Args:
            woeid: Identifier returned by the resolver.
            unit: Temperature unit the feed should report in.

        Returns:
            The raw feed text, possibly empty.

        Raises:
            FeedTimeoutError: If connecting or reading exceeded its budget.
            ConnectionFailureError: On any other protocol or I/O failure.
        """
        params = {"w": woeid, "u": unit.value}
        logger.debug("Fetching weather feed for WOEID %s (unit=%s)", woeid, unit.value)

        lines: list[str] = []
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                async with client.stream("GET", self._feed_url, params=params) as response:
                    logger.debug("Feed URL: %s", response.url)
                    response.raise_for_status()
                    async for line in response.aiter_lines():
                        logger.debug(line)
                        lines.append(line + "\n")
        except HTTP_ERRORS as e:
            raise translate_http_error(e, f"Weather feed request for WOEID {woeid}") from e

        return "".join(lines)
