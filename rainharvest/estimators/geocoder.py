"""Address geocoding stub.

Resolves a handful of known cities from a fixed table and synthesizes a
plausible coordinate near the centre of India for anything else. Placeholder
for a real geocoding provider; no network access.
"""

import logging
from dataclasses import dataclass

import numpy as np

from rainharvest.errors import ConfigurationError, InvalidInputError
from rainharvest.models.domain import Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnownPlace:
    latitude: float
    longitude: float
    district: str


KNOWN_PLACES: dict[str, KnownPlace] = {
    "mumbai": KnownPlace(19.0760, 72.8777, "Mumbai"),
    "delhi": KnownPlace(28.6139, 77.2090, "New Delhi"),
    "bangalore": KnownPlace(12.9716, 77.5946, "Bangalore Urban"),
    "chennai": KnownPlace(13.0827, 80.2707, "Chennai"),
    "pune": KnownPlace(18.5204, 73.8567, "Pune"),
}

# Reference point for unrecognised addresses and the spread around it (degrees)
FALLBACK_LATITUDE = 20.5937
FALLBACK_LONGITUDE = 78.9629
FALLBACK_SPREAD_DEGREES = 10.0

CURRENT_LOCATION_ADDRESS = "Current Location"
CURRENT_LOCATION_DISTRICT = "Auto-detected District"


def validate_address(address: str | None) -> str:
    """Reject empty or whitespace-only addresses.

    Returns:
        The address with surrounding whitespace removed.

    Raises:
        InvalidInputError: If the address is empty after stripping.
    """
    if address is None or not address.strip():
        raise InvalidInputError("Address is required; please enter a valid address to search")
    return address.strip()


class Geocoder:
    """Maps free-text addresses to coordinates."""

    def __init__(self, rng: np.random.Generator | None):
        """Initialize the geocoder.

        Args:
            rng: Random generator used to place unrecognised addresses

        Raises:
            ConfigurationError: If no generator is supplied
        """
        if rng is None:
            raise ConfigurationError("Geocoder requires a random generator")
        self.rng = rng

    def geocode(self, address: str) -> Location:
        """Resolve an address to a Location.

        Known city names match case-insensitively. Any other non-empty address
        resolves to "{address} District" at a point within +-5 degrees of the
        fallback reference.

        Raises:
            InvalidInputError: If the address is empty or whitespace-only
        """
        address = validate_address(address)
        place = KNOWN_PLACES.get(address.lower())

        if place is None:
            latitude = FALLBACK_LATITUDE + (self.rng.random() - 0.5) * FALLBACK_SPREAD_DEGREES
            longitude = FALLBACK_LONGITUDE + (self.rng.random() - 0.5) * FALLBACK_SPREAD_DEGREES
            place = KnownPlace(latitude, longitude, f"{address} District")
            logger.info(f"No match for '{address}', using approximate coordinates")

        logger.info(f"Geocoded '{address}' to ({place.latitude:.4f}, {place.longitude:.4f})")

        return Location(
            address=address,
            latitude=place.latitude,
            longitude=place.longitude,
            district=place.district,
        )


def location_from_coordinates(latitude: float, longitude: float) -> Location:
    """Build a Location for device-reported coordinates.

    Raises:
        InvalidInputError: If the coordinates are out of range
    """
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        msg = f"Coordinates out of range: ({latitude}, {longitude})"
        raise InvalidInputError(msg)

    return Location(
        address=CURRENT_LOCATION_ADDRESS,
        latitude=latitude,
        longitude=longitude,
        district=CURRENT_LOCATION_DISTRICT,
    )
