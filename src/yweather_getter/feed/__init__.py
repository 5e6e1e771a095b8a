"""Weather feed retrieval and parsing."""

from yweather_getter.feed.fetcher import FEED_URL, FeedFetcher
from yweather_getter.feed.parser import FORECAST_SIZE, PROVIDER_ERROR_TITLE, FeedParser

__all__ = [
    "FEED_URL",
    "FORECAST_SIZE",
    "FeedFetcher",
    "FeedParser",
    "PROVIDER_ERROR_TITLE",
]
