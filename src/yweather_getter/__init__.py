"""yweather-getter: WOEID-based weather lookup with a typed report."""

from yweather_getter.config import (
    EndpointsConfig,
    WeatherConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from yweather_getter.data import (
    Astronomy,
    Atmosphere,
    CurrentCondition,
    ForecastDay,
    GeoPoint,
    GPSQuery,
    LatLonQuery,
    Location,
    LocationQuery,
    PlaceIdentifier,
    PlaceNameQuery,
    QueryResult,
    QueryStatus,
    Unit,
    WeatherReport,
    Wind,
    icon_url,
)
from yweather_getter.errors import (
    ConnectionFailureError,
    FeedTimeoutError,
    LocationNotFoundError,
    NetworkUnavailableError,
    ParsingError,
    WeatherError,
)
from yweather_getter.feed import FORECAST_SIZE, PROVIDER_ERROR_TITLE, FeedFetcher, FeedParser
from yweather_getter.icons import HttpIconFetcher, IconFetcher, attach_icons
from yweather_getter.location import FixedLocationProvider, LocationProvider
from yweather_getter.network import AlwaysOnline, NetworkMonitor, TcpNetworkMonitor
from yweather_getter.pipeline import (
    QueryState,
    WeatherErrorListener,
    WeatherInfoListener,
    WeatherPipeline,
)
from yweather_getter.resolver import IdentifierResolver, YQLPlaceResolver, to_ascii
from yweather_getter.units import celsius_to_fahrenheit, fahrenheit_to_celsius

__all__ = [
    # Models
    "Astronomy",
    "Atmosphere",
    "CurrentCondition",
    "ForecastDay",
    "GPSQuery",
    "GeoPoint",
    "LatLonQuery",
    "Location",
    "LocationQuery",
    "PlaceIdentifier",
    "PlaceNameQuery",
    "QueryResult",
    "QueryStatus",
    "Unit",
    "WeatherReport",
    "Wind",
    # Errors
    "ConnectionFailureError",
    "FeedTimeoutError",
    "LocationNotFoundError",
    "NetworkUnavailableError",
    "ParsingError",
    "WeatherError",
    # Functions
    "attach_icons",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "icon_url",
    "to_ascii",
    # Protocols
    "IconFetcher",
    "IdentifierResolver",
    "LocationProvider",
    "NetworkMonitor",
    "WeatherErrorListener",
    "WeatherInfoListener",
    # Components
    "AlwaysOnline",
    "FORECAST_SIZE",
    "FeedFetcher",
    "FeedParser",
    "FixedLocationProvider",
    "HttpIconFetcher",
    "PROVIDER_ERROR_TITLE",
    "TcpNetworkMonitor",
    "YQLPlaceResolver",
    # Pipeline
    "QueryState",
    "WeatherPipeline",
    # Config
    "EndpointsConfig",
    "WeatherConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
