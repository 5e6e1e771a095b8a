"""Factory functions to create the pipeline from configuration."""

import logging

from yweather_getter.config.models import WeatherConfig
from yweather_getter.feed.fetcher import FeedFetcher
from yweather_getter.feed.parser import FeedParser
from yweather_getter.httputil import build_timeout
from yweather_getter.icons import HttpIconFetcher
from yweather_getter.location import LocationProvider
from yweather_getter.network import NetworkMonitor, TcpNetworkMonitor
from yweather_getter.pipeline.base import WeatherErrorListener
from yweather_getter.pipeline.weather import WeatherPipeline
from yweather_getter.resolver.yql import YQLPlaceResolver

PACKAGE_LOGGER = "yweather_getter"


def configure_logging(debug: bool) -> None:
    """Turn on DEBUG for the package logger when ``debug`` is set.

    With ``debug`` off the logger is left alone, so levels chosen by the
    host application still apply.
    """
    if debug:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)


def create_from_config(
    config: WeatherConfig,
    *,
    location_provider: LocationProvider | None = None,
    network_monitor: NetworkMonitor | None = None,
    error_listener: WeatherErrorListener | None = None,
) -> WeatherPipeline:
    """Create a pipeline from root config.

    Args:
        config: Root configuration.
        location_provider: Source of device fixes for GPS queries.
        network_monitor: Reachability check (default: TCP probe of the feed host).
        error_listener: Optional receiver for faults in callback-style queries.

    Returns:
        A ready-to-use WeatherPipeline.
    """
    configure_logging(config.debug)

    timeout = build_timeout(config.connect_timeout_ms, config.socket_timeout_ms)
    endpoints = config.endpoints

    return WeatherPipeline(
        resolver=YQLPlaceResolver(geo_url=endpoints.geo_url, timeout=timeout),
        fetcher=FeedFetcher(feed_url=endpoints.feed_url, timeout=timeout),
        parser=FeedParser(),
        unit=config.unit,
        network_monitor=network_monitor or TcpNetworkMonitor(endpoints.feed_url),
        location_provider=location_provider,
        icon_fetcher=HttpIconFetcher(timeout=timeout) if config.download_icons else None,
        download_icons=config.download_icons,
        icon_base_url=endpoints.icon_base_url,
        error_listener=error_listener,
    )
