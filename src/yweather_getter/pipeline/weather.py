"""Weather query pipeline: resolve, fetch, parse, deliver."""

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import StrEnum

from yweather_getter.data import (
    ICON_BASE_URL,
    GPSQuery,
    LatLonQuery,
    LocationQuery,
    PlaceIdentifier,
    PlaceNameQuery,
    QueryResult,
    QueryStatus,
    Unit,
)
from yweather_getter.errors import (
    ConnectionFailureError,
    FeedTimeoutError,
    LocationNotFoundError,
    NetworkUnavailableError,
    ParsingError,
)
from yweather_getter.feed.fetcher import FeedFetcher
from yweather_getter.feed.parser import FeedParser
from yweather_getter.icons import IconFetcher, attach_icons
from yweather_getter.location import LocationProvider
from yweather_getter.network import AlwaysOnline, NetworkMonitor
from yweather_getter.pipeline.base import WeatherErrorListener, WeatherInfoListener
from yweather_getter.resolver.base import IdentifierResolver

logger = logging.getLogger(__name__)


class QueryState(StrEnum):
    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    PARSING = "parsing"
    DELIVERED = "delivered"


@dataclass
class _QueryContext:
    """Private state of one in-flight query."""

    query: LocationQuery
    query_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    state: QueryState = QueryState.IDLE
    started_at: float = field(default_factory=time.monotonic)

    def advance(self, state: QueryState) -> None:
        logger.debug(f"[{self.query_id}] {self.state} -> {state}")
        self.state = state


class WeatherPipeline:
    """Resolve a location, fetch its feed, and parse it into a report.

    Flow per query:
    1. Check network reachability
    2. For GPS queries, wait for a location fix
    3. Resolve the location to a WOEID
    4. Fetch the feed and parse it
    5. Optionally attach icons (best effort)

    The pipeline keeps no per-query state, so any number of queries may run
    concurrently on one instance.

    Args:
        resolver: WOEID resolver.
        fetcher: Feed fetcher.
        parser: Feed parser.
        unit: Temperature unit requested from the feed.
        network_monitor: Pre-flight reachability check (default: always online).
        location_provider: Source of device fixes for GPS queries.
        icon_fetcher: Icon downloader, used when ``download_icons`` is set.
        download_icons: Attach condition and forecast icons to reports.
        icon_base_url: Prefix for icon URLs.
        error_listener: Optional receiver for faults in callback-style queries.
    """

    def __init__(
        self,
        resolver: IdentifierResolver,
        fetcher: FeedFetcher,
        parser: FeedParser,
        *,
        unit: Unit = Unit.CELSIUS,
        network_monitor: NetworkMonitor | None = None,
        location_provider: LocationProvider | None = None,
        icon_fetcher: IconFetcher | None = None,
        download_icons: bool = False,
        icon_base_url: str = ICON_BASE_URL,
        error_listener: WeatherErrorListener | None = None,
    ) -> None:
        self._resolver = resolver
        self._fetcher = fetcher
        self._parser = parser
        self._unit = unit
        self._network_monitor = network_monitor or AlwaysOnline()
        self._location_provider = location_provider
        self._icon_fetcher = icon_fetcher
        self._download_icons = download_icons
        self._icon_base_url = icon_base_url
        self._error_listener = error_listener
        self._pending: set[asyncio.Task[QueryResult]] = set()

    @property
    def unit(self) -> Unit:
        return self._unit

    async def run(self, query: LocationQuery) -> QueryResult:
        """Execute one query to completion.

        Faults are never raised; they are returned as the matching
        ``QueryStatus`` with the causing exception attached.

        Args:
            query: Place name, lat/lon pair, or GPS query.

        Returns:
            The tagged result.
        """
        ctx = _QueryContext(query=query)
        logger.debug(f"[{ctx.query_id}] Starting weather query: {query}")
        try:
            result = await self._execute(ctx)
        except NetworkUnavailableError as e:
            result = self._fault(ctx, QueryStatus.NETWORK_UNAVAILABLE, e)
        except LocationNotFoundError as e:
            result = self._fault(ctx, QueryStatus.LOCATION_NOT_FOUND, e)
        except FeedTimeoutError as e:
            result = self._fault(ctx, QueryStatus.TIMEOUT, e)
        except ConnectionFailureError as e:
            result = self._fault(ctx, QueryStatus.CONNECTION_FAILURE, e)
        except ParsingError as e:
            result = self._fault(ctx, QueryStatus.PARSING_FAILURE, e)

        ctx.advance(QueryState.DELIVERED)
        duration = time.monotonic() - ctx.started_at
        logger.info(f"[{ctx.query_id}] Weather query finished: {result.status} ({duration:.2f}s)")
        return result

    async def _execute(self, ctx: _QueryContext) -> QueryResult:
        if not await self._network_monitor.is_connected():
            raise NetworkUnavailableError("Network is not available")

        query = ctx.query
        if isinstance(query, GPSQuery):
            query = await self._locate()

        ctx.advance(QueryState.RESOLVING)
        place = await self._resolve(query)
        if not place.found:
            logger.info(f"[{ctx.query_id}] No WOEID found for {query}")
            return QueryResult(status=QueryStatus.IDENTIFIER_NOT_FOUND)

        ctx.advance(QueryState.FETCHING)
        xml_text = await self._fetcher.fetch(place.woeid, self._unit)

        ctx.advance(QueryState.PARSING)
        report = self._parser.parse(xml_text, place)
        if report is None:
            logger.info(f"[{ctx.query_id}] Provider returned an error feed for WOEID {place.woeid}")
            return QueryResult(status=QueryStatus.PROVIDER_ERROR)

        if self._download_icons and self._icon_fetcher is not None:
            report = await attach_icons(report, self._icon_fetcher, base_url=self._icon_base_url)

        return QueryResult(status=QueryStatus.REPORT, report=report)

    async def _locate(self) -> LatLonQuery:
        if self._location_provider is None:
            raise LocationNotFoundError("No location provider configured")
        point = await self._location_provider.find_location()
        if point is None:
            raise LocationNotFoundError("Location cannot be found")
        return LatLonQuery(lat=str(point.latitude), lon=str(point.longitude))

    async def _resolve(self, query: PlaceNameQuery | LatLonQuery) -> PlaceIdentifier:
        if isinstance(query, PlaceNameQuery):
            return await self._resolver.resolve_place(query.text)
        if isinstance(query, LatLonQuery):
            return await self._resolver.resolve_lat_lon(query.lat, query.lon)
        msg = f"Unknown location query type: {type(query)}"
        raise TypeError(msg)

    def _fault(self, ctx: _QueryContext, status: QueryStatus, error: Exception) -> QueryResult:
        logger.warning(f"[{ctx.query_id}] Weather query failed while {ctx.state}: {error}")
        return QueryResult(status=status, error=error)

    # -- Callback-style API --

    def query_by_place_name(
        self, name: str, listener: WeatherInfoListener
    ) -> asyncio.Task[QueryResult]:
        """Query by place name, e.g. "Tokyo, Japan" or "Eiffel Tower"."""
        return self.submit(PlaceNameQuery(text=name), listener)

    def query_by_lat_lon(
        self, lat: str, lon: str, listener: WeatherInfoListener
    ) -> asyncio.Task[QueryResult]:
        """Query by a latitude/longitude pair."""
        return self.submit(LatLonQuery(lat=lat, lon=lon), listener)

    def query_by_gps(self, listener: WeatherInfoListener) -> asyncio.Task[QueryResult]:
        """Query at the position reported by the location provider."""
        return self.submit(GPSQuery(), listener)

    def submit(
        self, query: LocationQuery, listener: WeatherInfoListener
    ) -> asyncio.Task[QueryResult]:
        """Run a query in the background and deliver it to ``listener``.

        Must be called from a running event loop. Callbacks fire on that
        loop once the task completes. The result listener is not called
        when the network is unavailable or no location fix was found; those
        faults only reach the error listener. A query that crashes with an
        unexpected exception is logged and delivered as ``None``.

        Returns:
            The task running the query; awaiting it yields the ``QueryResult``.
        """
        task = asyncio.get_running_loop().create_task(self.run(query))
        self._pending.add(task)

        def _on_done(done: asyncio.Task[QueryResult]) -> None:
            self._pending.discard(done)
            if done.cancelled():
                return
            error = done.exception()
            if error is not None:
                logger.error("Weather query crashed", exc_info=error)
                listener.on_weather_info_received(None)
                return
            self._deliver(done.result(), listener)

        task.add_done_callback(_on_done)
        return task

    def _deliver(self, result: QueryResult, listener: WeatherInfoListener) -> None:
        if result.error is not None:
            self._notify_error(result.status, result.error)
        if result.status in (QueryStatus.NETWORK_UNAVAILABLE, QueryStatus.LOCATION_NOT_FOUND):
            return
        listener.on_weather_info_received(result.report)

    def _notify_error(self, status: QueryStatus, error: Exception) -> None:
        if self._error_listener is None:
            return
        if status is QueryStatus.NETWORK_UNAVAILABLE:
            self._error_listener.on_connection_unavailable(error)
        elif status is QueryStatus.LOCATION_NOT_FOUND:
            self._error_listener.on_location_not_found(error)
        elif status is QueryStatus.PARSING_FAILURE:
            self._error_listener.on_parsing_failure(error)
        else:
            self._error_listener.on_connection_failure(error)
