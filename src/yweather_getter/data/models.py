"""Core data models for yweather-getter."""

from dataclasses import dataclass
from enum import StrEnum

ICON_BASE_URL = "http://l.yimg.com/a/i/us/we/52/"


def icon_url(code: int, base_url: str = ICON_BASE_URL) -> str:
    """Build the provider icon URL for a condition code."""
    return f"{base_url}{code}.gif"


class Unit(StrEnum):
    """Temperature unit requested from the feed (the ``u=`` parameter)."""

    CELSIUS = "c"
    FAHRENHEIT = "f"


# -- Location queries --


@dataclass(frozen=True)
class PlaceNameQuery:
    """Look up weather by free-text place, e.g. ``"Tokyo, Japan"``."""

    text: str


@dataclass(frozen=True)
class LatLonQuery:
    """Look up weather by a latitude/longitude pair.

    Coordinates are kept as strings because they are only ever forwarded
    verbatim to the geocoding endpoint.
    """

    lat: str
    lon: str


@dataclass(frozen=True)
class GPSQuery:
    """Look up weather at the device's current location."""


LocationQuery = PlaceNameQuery | LatLonQuery | GPSQuery


@dataclass(frozen=True)
class GeoPoint:
    """A device location fix."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class PlaceIdentifier:
    """A resolved WOEID with the place metadata returned alongside it.

    ``found=False`` means the geocoder had no match. That is a normal
    outcome, callers branch on it before fetching.
    """

    woeid: str = ""
    found: bool = True
    neighborhood: str = ""
    county: str = ""
    state: str = ""
    country: str = ""

    @classmethod
    def not_found(cls) -> "PlaceIdentifier":
        return cls(found=False)


# -- Weather report --


@dataclass(frozen=True)
class Location:
    city: str
    region: str
    country: str


@dataclass(frozen=True)
class Wind:
    chill: str
    direction: str
    speed: str


@dataclass(frozen=True)
class Atmosphere:
    humidity: str
    visibility: str
    pressure: str
    rising: str


@dataclass(frozen=True)
class Astronomy:
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class CurrentCondition:
    """Current observation from the ``yweather:condition`` element."""

    code: int
    text: str
    temperature: int
    date: str
    latitude: str
    longitude: str
    title: str
    icon: bytes | None = None

    @property
    def icon_url(self) -> str:
        return icon_url(self.code)


@dataclass(frozen=True)
class ForecastDay:
    """One of the five positional ``yweather:forecast`` entries."""

    code: int
    text: str
    date: str
    day: str
    high: int
    low: int
    icon: bytes | None = None

    @property
    def icon_url(self) -> str:
        return icon_url(self.code)


@dataclass(frozen=True)
class WeatherReport:
    """A fully populated weather report for one WOEID.

    Reports are never partial: if any mandatory field is missing from the
    feed, no report is produced at all. Only the ``icon`` fields may be
    ``None`` on a valid report.
    """

    title: str
    description: str
    language: str
    last_build_date: str
    location: Location
    wind: Wind
    atmosphere: Atmosphere
    astronomy: Astronomy
    condition: CurrentCondition
    forecast: tuple[ForecastDay, ...]
    place: PlaceIdentifier


# -- Query outcome --


class QueryStatus(StrEnum):
    """Terminal outcome of a weather query."""

    REPORT = "report"
    IDENTIFIER_NOT_FOUND = "identifier_not_found"
    PROVIDER_ERROR = "provider_error"
    NETWORK_UNAVAILABLE = "network_unavailable"
    LOCATION_NOT_FOUND = "location_not_found"
    CONNECTION_FAILURE = "connection_failure"
    TIMEOUT = "timeout"
    PARSING_FAILURE = "parsing_failure"


@dataclass(frozen=True)
class QueryResult:
    """Tagged result of one query: a report, an empty answer, or a fault.

    ``report`` is set only for ``QueryStatus.REPORT``; ``error`` is set only
    for the fault statuses.
    """

    status: QueryStatus
    report: WeatherReport | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.REPORT

    @property
    def is_fault(self) -> bool:
        return self.error is not None
