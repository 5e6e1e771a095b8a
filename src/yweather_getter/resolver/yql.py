"""WOEID resolution through the YQL ``geo.places`` table."""

import logging
from typing import Any

import httpx

from yweather_getter.data import PlaceIdentifier
from yweather_getter.errors import ConnectionFailureError
from yweather_getter.httputil import HTTP_ERRORS, build_timeout, translate_http_error
from yweather_getter.resolver.text import to_ascii

logger = logging.getLogger(__name__)

YQL_API_URL = "http://query.yahooapis.com/v1/public/yql"

# The place text travels as a bind variable so quotes in it stay literal.
PLACES_STATEMENT = "select * from geo.places where text=@text"


class YQLPlaceResolver:
    """Resolve place names and coordinates to WOEIDs using YQL.

    The first place YQL returns wins. Its ``locality2``, ``admin2``,
    ``admin1`` and ``country`` parts become the neighborhood, county, state
    and country of the resulting ``PlaceIdentifier``.

    Args:
        geo_url: YQL endpoint (default: public Yahoo endpoint).
        timeout: httpx timeout for the request.
        transport: Optional httpx transport, mostly for tests.
    """

    def __init__(
        self,
        *,
        geo_url: str = YQL_API_URL,
        timeout: httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._geo_url = geo_url
        self._timeout = timeout or build_timeout()
        self._transport = transport

    async def resolve_place(self, name: str) -> PlaceIdentifier:
        """Resolve a free-text place name.

        Non-ASCII characters are transliterated first; the endpoint rejects them.
        """
        return await self._query(to_ascii(name))

    async def resolve_lat_lon(self, lat: str, lon: str) -> PlaceIdentifier:
        """Resolve a latitude/longitude pair."""
        return await self._query(f"({lat},{lon})")

    async def _query(self, text: str) -> PlaceIdentifier:
        params = {"q": PLACES_STATEMENT, "text": text, "format": "json"}
        logger.debug("Resolving WOEID for %r", text)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self._geo_url, params=params)
                response.raise_for_status()
                data = response.json()
        except HTTP_ERRORS as e:
            raise translate_http_error(e, "WOEID lookup") from e
        except ValueError as e:
            raise ConnectionFailureError(f"WOEID lookup returned invalid JSON: {e}") from e

        place = _first_place(data)
        if place is None:
            logger.debug("No WOEID found for %r", text)
            return PlaceIdentifier.not_found()

        woeid = place.get("woeid")
        if not woeid:
            raise ConnectionFailureError("WOEID lookup returned a place without a woeid")

        identifier = PlaceIdentifier(
            woeid=str(woeid),
            neighborhood=_place_part(place, "locality2"),
            county=_place_part(place, "admin2"),
            state=_place_part(place, "admin1"),
            country=_place_part(place, "country"),
        )
        logger.debug("Resolved %r to WOEID %s", text, identifier.woeid)
        return identifier


def _first_place(data: Any) -> dict[str, Any] | None:
    """Return the first place in a YQL response, or None if it has no results.

    YQL returns a single object for one match and a list for several.
    """
    try:
        results = data["query"]["results"]
    except (KeyError, TypeError) as e:
        raise ConnectionFailureError(f"Unexpected WOEID lookup response: {data!r}") from e

    if not results:
        return None
    if not isinstance(results, dict) or "place" not in results:
        raise ConnectionFailureError(f"Unexpected WOEID lookup results: {results!r}")

    place = results["place"]
    if isinstance(place, list):
        place = place[0] if place else None
    if place is not None and not isinstance(place, dict):
        raise ConnectionFailureError(f"Unexpected place entry: {place!r}")
    return place


def _place_part(place: dict[str, Any], key: str) -> str:
    """Extract the display name of an admin/locality part (may be null)."""
    part = place.get(key)
    if isinstance(part, dict):
        return str(part.get("content", ""))
    return str(part) if part else ""
