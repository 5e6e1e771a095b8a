"""Data models for yweather-getter."""

from yweather_getter.data.models import (
    ICON_BASE_URL,
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

__all__ = [
    "ICON_BASE_URL",
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
    "icon_url",
]
