"""Rule-based hydrogeology estimation.

Classifies a location into coastal and hard-rock zones using bounding boxes
and derives aquifer characteristics from those flags. Aquifer name (outside
the named zones), water quality and aquifer type are randomized.
"""

import logging

import numpy as np

from rainharvest.errors import ConfigurationError
from rainharvest.models.domain import AquiferProfile, AquiferSuitability, DepthRange
from rainharvest.models.enums import AquiferType, Permeability, Suitability, WaterQuality

logger = logging.getLogger(__name__)

GENERIC_AQUIFER_NAMES: tuple[str, ...] = (
    "Alluvial",
    "Hard Rock",
    "Coastal",
    "Semi-consolidated",
    "Volcanic",
)
COASTAL_AQUIFER_NAME = "Coastal Alluvial"
HARD_ROCK_AQUIFER_NAME = "Deccan Trap Hard Rock"

HARD_ROCK_DEPTH_M = (15.0, 45.0)
DEFAULT_DEPTH_M = (5.0, 25.0)
DEEP_WATER_TABLE_M = 20.0

AQUIFER_TYPES: tuple[AquiferType, ...] = tuple(AquiferType)

# Draws above this cutoff give Fair quality (30% of the time)
FAIR_QUALITY_CUTOFF = 0.7

RECHARGE_METHODS: dict[Suitability, tuple[str, ...]] = {
    Suitability.EXCELLENT: ("Recharge Pit", "Percolation Tank", "Check Dam"),
    Suitability.GOOD: ("Recharge Well", "Infiltration Trench"),
}
STORAGE_METHODS: tuple[str, ...] = ("Storage Tank", "Rooftop Collection")

COASTAL_WARNING = "Saltwater intrusion risk in coastal areas"
HARD_ROCK_WARNING = "Limited groundwater potential in hard rock areas"

BASE_RECOMMENDATIONS: tuple[str, ...] = (
    "Install first flush diverter for water quality",
    "Regular maintenance of collection system required",
)
RECHARGE_RECOMMENDATION = "Consider multiple recharge structures"
STORAGE_RECOMMENDATION = "Focus on storage-based systems"


def is_coastal_zone(latitude: float, longitude: float) -> bool:
    return 72 < longitude < 88 and 8 < latitude < 25


def is_hard_rock_zone(latitude: float, longitude: float) -> bool:
    return 15 < latitude < 25 and 74 < longitude < 85


def classify_suitability(is_coastal: bool, is_hard_rock: bool, depth: DepthRange) -> Suitability:
    """Rate rainwater harvesting suitability from the zone flags.

    Fair for hard rock with a deep water table, Good for coastal zones,
    Excellent elsewhere. Poor is never produced by the zone rules.
    """
    if is_hard_rock and depth.min > DEEP_WATER_TABLE_M:
        return Suitability.FAIR
    if is_coastal:
        return Suitability.GOOD
    return Suitability.EXCELLENT


def zone_warnings(is_coastal: bool, is_hard_rock: bool) -> tuple[str, ...]:
    """Warnings for the zone flags.

    Coastal takes priority here, whereas the aquifer name prefers hard rock.
    """
    if is_coastal:
        return (COASTAL_WARNING,)
    if is_hard_rock:
        return (HARD_ROCK_WARNING,)
    return ()


class HydrogeologyEstimator:
    """Estimates aquifer profiles for coordinates."""

    def __init__(self, rng: np.random.Generator | None):
        """Initialize the hydrogeology estimator.

        Args:
            rng: Random generator for aquifer name, quality and type

        Raises:
            ConfigurationError: If no generator is supplied
        """
        if rng is None:
            raise ConfigurationError("HydrogeologyEstimator requires a random generator")
        self.rng = rng

    def estimate_aquifer(self, latitude: float, longitude: float) -> AquiferProfile:
        """Build an aquifer profile for a location.

        Random draws happen in a fixed order (name, quality, type) so a seeded
        generator always reproduces the same profile.
        """
        is_coastal = is_coastal_zone(latitude, longitude)
        is_hard_rock = is_hard_rock_zone(latitude, longitude)

        aquifer_name = str(self.rng.choice(GENERIC_AQUIFER_NAMES))
        if is_coastal:
            aquifer_name = COASTAL_AQUIFER_NAME
        if is_hard_rock:
            aquifer_name = HARD_ROCK_AQUIFER_NAME

        depth_min, depth_max = HARD_ROCK_DEPTH_M if is_hard_rock else DEFAULT_DEPTH_M
        depth = DepthRange(min=depth_min, max=depth_max)
        permeability = Permeability.MEDIUM if is_hard_rock else Permeability.HIGH
        quality = WaterQuality.FAIR if self.rng.random() > FAIR_QUALITY_CUTOFF else WaterQuality.GOOD
        aquifer_type = AQUIFER_TYPES[int(self.rng.integers(len(AQUIFER_TYPES)))]

        suitability = classify_suitability(is_coastal, is_hard_rock, depth)
        methods = RECHARGE_METHODS.get(suitability, STORAGE_METHODS)
        final_recommendation = (
            RECHARGE_RECOMMENDATION
            if suitability is Suitability.EXCELLENT
            else STORAGE_RECOMMENDATION
        )

        logger.info(
            f"Aquifer at ({latitude:.4f}, {longitude:.4f}): {aquifer_name}, "
            f"suitability {suitability.value} (coastal={is_coastal}, hard_rock={is_hard_rock})"
        )

        return AquiferProfile(
            aquifer_name=aquifer_name,
            aquifer_type=aquifer_type,
            depth_to_water=depth,
            permeability=permeability,
            quality=quality,
            suitability=AquiferSuitability(
                rainwater_harvesting=suitability,
                recharge_method=methods,
            ),
            warnings=zone_warnings(is_coastal, is_hard_rock),
            recommendations=(*BASE_RECOMMENDATIONS, final_recommendation),
        )
