"""Pydantic configuration models for yweather-getter."""

from pydantic import BaseModel, Field

from yweather_getter.data import ICON_BASE_URL, Unit
from yweather_getter.feed.fetcher import FEED_URL
from yweather_getter.httputil import DEFAULT_CONNECT_TIMEOUT_MS, DEFAULT_SOCKET_TIMEOUT_MS
from yweather_getter.resolver.yql import YQL_API_URL


class EndpointsConfig(BaseModel):
    """Remote endpoints used by the pipeline."""

    feed_url: str = FEED_URL
    geo_url: str = YQL_API_URL
    icon_base_url: str = ICON_BASE_URL

    model_config = {"frozen": True}


class WeatherConfig(BaseModel):
    """Root configuration, applied once when the pipeline is built."""

    unit: Unit = Unit.CELSIUS
    connect_timeout_ms: int = Field(default=DEFAULT_CONNECT_TIMEOUT_MS, gt=0)
    socket_timeout_ms: int = Field(default=DEFAULT_SOCKET_TIMEOUT_MS, gt=0)
    download_icons: bool = False
    debug: bool = False
    endpoints: EndpointsConfig = Field(default_factory=EndpointsConfig)

    model_config = {"frozen": True}
