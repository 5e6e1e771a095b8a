"""Device location collaborators."""

from typing import Protocol

from yweather_getter.data import GeoPoint


class LocationProvider(Protocol):
    """Interface for a one-shot device location fix."""

    async def find_location(self) -> GeoPoint | None:
        """Return the current position, or None if no fix could be obtained."""
        ...


class FixedLocationProvider:
    """Location provider that always reports the same position.

    Useful where the position comes from somewhere other than a GPS device,
    e.g. a command-line argument. ``None`` simulates a device without a fix.
    """

    def __init__(self, point: GeoPoint | None) -> None:
        self._point = point

    async def find_location(self) -> GeoPoint | None:
        return self._point
