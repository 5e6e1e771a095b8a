"""Best-effort download of condition icons into a parsed report."""

import asyncio
import dataclasses
import logging
from typing import Protocol

import httpx

from yweather_getter.data import ICON_BASE_URL, WeatherReport, icon_url
from yweather_getter.httputil import HTTP_ERRORS, build_timeout, translate_http_error

logger = logging.getLogger(__name__)


class IconFetcher(Protocol):
    """Interface for downloading an icon image."""

    async def fetch(self, url: str) -> bytes:
        """Download the image at ``url`` and return its bytes."""
        ...


class HttpIconFetcher:
    """Download icons over HTTP with httpx.

    Args:
        timeout: httpx timeout for each download.
        transport: Optional httpx transport, mostly for tests.
    """

    def __init__(
        self,
        *,
        timeout: httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout or build_timeout()
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.content
        except HTTP_ERRORS as e:
            raise translate_http_error(e, f"Icon download from {url}") from e


async def attach_icons(
    report: WeatherReport,
    fetcher: IconFetcher,
    *,
    base_url: str = ICON_BASE_URL,
) -> WeatherReport:
    """Return a copy of ``report`` with condition and forecast icons filled in.

    All icons are downloaded concurrently. A failed download is logged and
    leaves that icon as None; it never invalidates the report.

    Args:
        report: Fully parsed report.
        fetcher: Icon downloader.
        base_url: Icon URL prefix; the condition code and ``.gif`` are appended.

    Returns:
        New report with icons attached where downloads succeeded.
    """
    codes = [report.condition.code] + [day.code for day in report.forecast]
    results = await asyncio.gather(
        *(fetcher.fetch(icon_url(code, base_url)) for code in codes),
        return_exceptions=True,
    )

    icons: list[bytes | None] = []
    for code, result in zip(codes, results):
        if isinstance(result, BaseException):
            logger.warning(f"Could not download icon for condition code {code}: {result}")
            icons.append(None)
        else:
            icons.append(result)

    condition = dataclasses.replace(report.condition, icon=icons[0])
    forecast = tuple(
        dataclasses.replace(day, icon=icon) for day, icon in zip(report.forecast, icons[1:])
    )
    return dataclasses.replace(report, condition=condition, forecast=forecast)
