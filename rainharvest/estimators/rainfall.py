"""Rainfall estimation from a table of reference cities.

The query point is matched to the nearest reference city (Euclidean distance
in degrees) and that city's monthly series becomes the profile. Only the
next-year prediction and its confidence are randomized.
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

import numpy as np

from rainharvest.calculators.rounding import round_half_away
from rainharvest.errors import ConfigurationError
from rainharvest.models.domain import RainfallPrediction, RainfallProfile
from rainharvest.models.enums import RainfallTrend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceCity:
    name: str
    latitude: float
    longitude: float
    monthly_rainfall_mm: tuple[float, ...]


# Insertion order is the tie-break order for equidistant cities
REFERENCE_CITIES: tuple[ReferenceCity, ...] = (
    ReferenceCity("mumbai", 19.076, 72.8777, (16, 6, 13, 18, 38, 585, 840, 534, 315, 125, 35, 18)),
    ReferenceCity("delhi", 28.7041, 77.1025, (25, 30, 15, 9, 13, 65, 180, 185, 125, 10, 5, 10)),
    ReferenceCity("bangalore", 12.9716, 77.5946, (5, 8, 25, 85, 125, 95, 85, 115, 155, 185, 65, 15)),
    ReferenceCity("chennai", 13.0827, 80.2707, (25, 35, 20, 45, 55, 45, 85, 125, 115, 265, 315, 145)),
    ReferenceCity("kolkata", 22.5726, 88.3639, (15, 35, 45, 55, 125, 185, 315, 325, 255, 125, 25, 5)),
    ReferenceCity("hyderabad", 17.3850, 78.4867, (5, 15, 25, 35, 45, 95, 155, 145, 135, 65, 25, 5)),
    ReferenceCity("pune", 18.5204, 73.8567, (5, 8, 15, 25, 35, 165, 185, 125, 95, 65, 15, 5)),
    ReferenceCity("ahmedabad", 23.0225, 72.5714, (5, 8, 15, 8, 15, 85, 255, 185, 115, 25, 5, 5)),
    ReferenceCity("jaipur", 26.9124, 75.7873, (8, 12, 15, 5, 15, 45, 185, 165, 95, 15, 5, 5)),
    ReferenceCity("lucknow", 26.8467, 80.9462, (15, 25, 12, 8, 15, 95, 265, 285, 155, 25, 8, 5)),
)

# June-September, zero-based
MONSOON_MONTHS = slice(5, 9)
INCREASING_THRESHOLD_MM = 200.0
DECREASING_THRESHOLD_MM = 100.0

PREDICTION_LOW_FACTOR = 0.95
PREDICTION_FACTOR_SPREAD = 0.1
CONFIDENCE_BASE = 80.0
CONFIDENCE_SPREAD = 15.0

SOURCE_TEMPLATE = "India Meteorological Department (IMD) - {region} Region"


def find_nearest_city(
    latitude: float,
    longitude: float,
    cities: tuple[ReferenceCity, ...] = REFERENCE_CITIES,
) -> ReferenceCity:
    """Return the reference city closest to the query point.

    Uses plain Euclidean distance in (lat, lon) degrees. Only a strictly
    smaller distance replaces the current best, so ties go to the city
    listed first.
    """
    nearest = cities[0]
    min_distance = math.inf

    for city in cities:
        distance = math.hypot(latitude - city.latitude, longitude - city.longitude)
        if distance < min_distance:
            min_distance = distance
            nearest = city

    return nearest


def classify_trend(monthly_rainfall_mm: tuple[float, ...] | list[float]) -> RainfallTrend:
    """Classify the rainfall trend from the June-September average.

    Above 200 mm is increasing, below 100 mm is decreasing, anything in
    between (inclusive) is stable.
    """
    monsoon_average = float(np.mean(monthly_rainfall_mm[MONSOON_MONTHS]))

    if monsoon_average > INCREASING_THRESHOLD_MM:
        return RainfallTrend.INCREASING
    if monsoon_average < DECREASING_THRESHOLD_MM:
        return RainfallTrend.DECREASING
    return RainfallTrend.STABLE


class RainfallEstimator:
    """Estimates rainfall profiles for coordinates."""

    def __init__(
        self,
        rng: np.random.Generator | None,
        clock: Callable[[], date] = date.today,
        cities: tuple[ReferenceCity, ...] = REFERENCE_CITIES,
    ):
        """Initialize the rainfall estimator.

        Args:
            rng: Random generator for the next-year prediction
            clock: Returns the date stamped on each profile
            cities: Reference city table

        Raises:
            ConfigurationError: If no generator is supplied or the table is empty
        """
        if rng is None:
            raise ConfigurationError("RainfallEstimator requires a random generator")
        if not cities:
            raise ConfigurationError("RainfallEstimator requires at least one reference city")
        self.rng = rng
        self.clock = clock
        self.cities = cities

    def estimate_rainfall(self, latitude: float, longitude: float) -> RainfallProfile:
        """Build a rainfall profile for a location.

        Args:
            latitude: Decimal degrees
            longitude: Decimal degrees

        Returns:
            RainfallProfile for the nearest reference city.
        """
        city = find_nearest_city(latitude, longitude, self.cities)
        monthly = tuple(float(month) for month in city.monthly_rainfall_mm)
        annual = float(sum(monthly))

        factor = PREDICTION_LOW_FACTOR + self.rng.random() * PREDICTION_FACTOR_SPREAD
        confidence = round_half_away(CONFIDENCE_BASE + self.rng.random() * CONFIDENCE_SPREAD)

        logger.info(
            f"Matched ({latitude:.4f}, {longitude:.4f}) to {city.name}: {annual:.0f} mm/year"
        )

        return RainfallProfile(
            annual_rainfall=annual,
            monthly_rainfall=monthly,
            prediction=RainfallPrediction(
                next_year=round_half_away(annual * factor),
                trend=classify_trend(monthly),
                confidence=confidence,
            ),
            source=SOURCE_TEMPLATE.format(region=city.name.capitalize()),
            last_updated=self.clock(),
        )
