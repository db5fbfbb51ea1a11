"""Geolocation collaborators.

The engine only needs to know whether a position fix succeeded. The
coordinates are never used or sent anywhere: nearby-facility links are
static map searches.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class LocationError(Exception):
    """Base class for geolocation failures."""


class LocationDenied(LocationError):
    """The user refused to share their position."""


class LocationUnsupported(LocationError):
    """No geolocation capability is available."""


class Position(BaseModel):
    """A position fix."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    @classmethod
    def parse(cls, value: str) -> "Position":
        """Parse a 'lat,lon' string."""
        try:
            lat, lon = (part.strip() for part in value.split(","))
        except ValueError:
            raise ValueError(f"Expected 'lat,lon', got: {value!r}") from None
        return cls(latitude=float(lat), longitude=float(lon))


class Locator(ABC):
    """Abstract geolocation capability."""

    @property
    def supported(self) -> bool:
        """Whether this device can produce a position at all."""
        return True

    @abstractmethod
    async def locate(self) -> Position:
        """Return a position fix.

        Raises:
            LocationDenied: If the user refuses permission
            LocationUnsupported: If the capability disappears mid-request
        """


class FixedLocator(Locator):
    """Always yields the configured position."""

    def __init__(self, position: Position) -> None:
        self._position = position

    async def locate(self) -> Position:
        return self._position


class DenyingLocator(Locator):
    """Simulates a permission refusal."""

    async def locate(self) -> Position:
        raise LocationDenied("Location permission denied")


class UnsupportedLocator(Locator):
    """A device without geolocation."""

    @property
    def supported(self) -> bool:
        return False

    async def locate(self) -> Position:
        raise LocationUnsupported("Geolocation is not available")
