from typing import Protocol

from yweather_getter.data import PlaceIdentifier


class IdentifierResolver(Protocol):
    """Interface for mapping a location to a WOEID."""

    async def resolve_place(self, name: str) -> PlaceIdentifier:
        """Resolve a free-text place name.

        Args:
            name: Place to look up, e.g. "Tokyo, Japan" or "Eiffel Tower".

        Returns:
            The identifier, or ``PlaceIdentifier.not_found()`` if nothing matched.

        Raises:
            ConnectionFailureError: If the geocoding request failed.
        """
        ...

    async def resolve_lat_lon(self, lat: str, lon: str) -> PlaceIdentifier:
        """Resolve a latitude/longitude pair.

        Args:
            lat: Latitude in decimal degrees.
            lon: Longitude in decimal degrees.

        Returns:
            The identifier, or ``PlaceIdentifier.not_found()`` if nothing matched.

        Raises:
            ConnectionFailureError: If the geocoding request failed.
        """
        ...
