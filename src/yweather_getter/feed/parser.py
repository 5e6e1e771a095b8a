"""Mapping of the RSS weather feed onto ``WeatherReport``.

Elements are addressed the way the feed names them (``yweather:wind``,
``geo:lat``); the prefixes are expanded to the provider's namespace URIs before
lookup. Every element is taken by position in document order.
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from typing import Any

from yweather_getter.data import (
    Astronomy,
    Atmosphere,
    CurrentCondition,
    ForecastDay,
    Location,
    PlaceIdentifier,
    WeatherReport,
    Wind,
)
from yweather_getter.errors import ParsingError

logger = logging.getLogger(__name__)

PROVIDER_ERROR_TITLE = "Yahoo! Weather - Error"
FORECAST_SIZE = 5

NAMESPACES = {
    "yweather": "http://xml.weather.yahoo.com/ns/rss/1.0",
    "geo": "http://www.w3.org/2003/01/geo/wgs84_pos#",
}

# field name -> (attribute name, converter)
AttributeSpec = dict[str, tuple[str, Callable[[str], Any]]]

LOCATION_ATTRS: AttributeSpec = {
    "city": ("city", str),
    "region": ("region", str),
    "country": ("country", str),
}
WIND_ATTRS: AttributeSpec = {
    "chill": ("chill", str),
    "direction": ("direction", str),
    "speed": ("speed", str),
}
ATMOSPHERE_ATTRS: AttributeSpec = {
    "humidity": ("humidity", str),
    "visibility": ("visibility", str),
    "pressure": ("pressure", str),
    "rising": ("rising", str),
}
ASTRONOMY_ATTRS: AttributeSpec = {
    "sunrise": ("sunrise", str),
    "sunset": ("sunset", str),
}
CONDITION_ATTRS: AttributeSpec = {
    "code": ("code", int),
    "text": ("text", str),
    "temperature": ("temp", int),
    "date": ("date", str),
}
FORECAST_ATTRS: AttributeSpec = {
    "code": ("code", int),
    "text": ("text", str),
    "date": ("date", str),
    "day": ("day", str),
    "high": ("high", int),
    "low": ("low", int),
}


def _qualify(name: str) -> str:
    prefix, sep, local = name.partition(":")
    if not sep:
        return name
    return f"{{{NAMESPACES[prefix]}}}{local}"


class _FeedDocument:
    """Positional element lookup over a parsed feed."""

    def __init__(self, root: ET.Element) -> None:
        self._root = root

    def elements(self, name: str) -> list[ET.Element]:
        return list(self._root.iter(_qualify(name)))

    def element(self, name: str, index: int = 0) -> ET.Element:
        found = self.elements(name)
        if index >= len(found):
            raise ParsingError(f"Feed has no <{name}> element at position {index}")
        return found[index]

    def text(self, name: str, index: int = 0) -> str:
        return "".join(self.element(name, index).itertext())

    def attributes(self, name: str, spec: AttributeSpec, index: int = 0) -> dict[str, Any]:
        return extract_attributes(self.element(name, index), name, spec)


def extract_attributes(element: ET.Element, name: str, spec: AttributeSpec) -> dict[str, Any]:
    """Read and convert the attributes named in ``spec`` from ``element``.

    Raises:
        ParsingError: If an attribute is missing or fails conversion.
    """
    values: dict[str, Any] = {}
    for field_name, (attribute, convert) in spec.items():
        raw = element.get(attribute)
        if raw is None:
            raise ParsingError(f"<{name}> is missing attribute {attribute!r}")
        try:
            values[field_name] = convert(raw)
        except ValueError as e:
            raise ParsingError(f"<{name}> attribute {attribute!r} has invalid value {raw!r}") from e
    return values


class FeedParser:
    """Parse feed XML into a ``WeatherReport``.

    There are three distinct empty outcomes upstream of a report and the
    parser owns two of them: a provider error title returns ``None``, while
    malformed or incomplete XML raises ``ParsingError``. Icons are left unset;
    see ``yweather_getter.icons.attach_icons``.
    """

    def parse(self, xml_text: str, place: PlaceIdentifier) -> WeatherReport | None:
        """Parse a feed.

        Args:
            xml_text: Raw feed body.
            place: Resolved identifier whose metadata is copied into the report.

        Returns:
            The report, or None if the feed is the provider's error document.

        Raises:
            ParsingError: If the XML is malformed, a mandatory element or
                attribute is missing, a numeric field is not an integer, or
                fewer than ``FORECAST_SIZE`` forecast entries are present.
        """
        try:
            root = ET.fromstring(xml_text)
        except ET.ParseError as e:
            raise ParsingError(f"Weather feed is not well-formed XML: {e}") from e

        doc = _FeedDocument(root)

        title = doc.text("title")
        if title == PROVIDER_ERROR_TITLE:
            logger.debug("Feed reported a provider error for WOEID %s", place.woeid)
            return None

        condition = CurrentCondition(
            **doc.attributes("yweather:condition", CONDITION_ATTRS),
            # titles: channel, image, item
            title=doc.text("title", 2),
            latitude=doc.text("geo:lat"),
            longitude=doc.text("geo:long"),
        )

        report = WeatherReport(
            title=title,
            description=doc.text("description"),
            language=doc.text("language"),
            last_build_date=doc.text("lastBuildDate"),
            location=Location(**doc.attributes("yweather:location", LOCATION_ATTRS)),
            wind=Wind(**doc.attributes("yweather:wind", WIND_ATTRS)),
            atmosphere=Atmosphere(**doc.attributes("yweather:atmosphere", ATMOSPHERE_ATTRS)),
            astronomy=Astronomy(**doc.attributes("yweather:astronomy", ASTRONOMY_ATTRS)),
            condition=condition,
            forecast=self._parse_forecast(doc),
            place=place,
        )
        logger.debug("Parsed weather report for %s", report.location.city)
        return report

    def _parse_forecast(self, doc: _FeedDocument) -> tuple[ForecastDay, ...]:
        elements = doc.elements("yweather:forecast")
        if len(elements) < FORECAST_SIZE:
            raise ParsingError(
                f"Expected {FORECAST_SIZE} forecast entries, feed has {len(elements)}"
            )
        return tuple(
            ForecastDay(**extract_attributes(element, "yweather:forecast", FORECAST_ATTRS))
            for element in elements[:FORECAST_SIZE]
        )
