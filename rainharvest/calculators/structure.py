"""Recharge structure selection and sizing."""

import logging
import math

from rainharvest.calculators.rounding import round_half_away
from rainharvest.config import CONSTANTS, DEFAULT_CONFIG
from rainharvest.models.enums import SoilType, StructureType, Suitability

logger = logging.getLogger(__name__)

SECONDARY_STRUCTURES: tuple[str, ...] = (
    "First Flush Diverter",
    "Filter System",
    "Distribution Network",
)

# Depth in metres by structure type; anything not listed is dug to 3 m
STORAGE_TANK_DEPTH_M = 2
RECHARGE_DEPTH_M = 3


def select_structure(
    suitability: Suitability,
    soil_type: SoilType | str,
    land_area_sq_metres: float,
    small_plot_sq_metres: float = DEFAULT_CONFIG.small_plot_sq_metres,
) -> StructureType:
    """Choose the primary harvesting structure for a site.

    Rules, in priority order:
    1. Storage Tank when the aquifer is unsuitable (Poor) or the soil is clay,
       since recharge would not infiltrate.
    2. Recharge Well when the plot is smaller than small_plot_sq_metres.
    3. Recharge Pit otherwise.

    Args:
        suitability: Aquifer suitability tier
        soil_type: Dominant soil type
        land_area_sq_metres: Plot area (m2)
        small_plot_sq_metres: Plot size below which a well replaces a pit

    Returns:
        Recommended structure type.
    """
    soil = soil_type.value if isinstance(soil_type, SoilType) else str(soil_type).lower()

    if suitability is Suitability.POOR or soil == SoilType.CLAY.value:
        return StructureType.STORAGE_TANK
    if land_area_sq_metres < small_plot_sq_metres:
        return StructureType.RECHARGE_WELL
    return StructureType.RECHARGE_PIT


def calculate_dimensions(
    annual_harvest_litres: int,
    structure: StructureType,
    storage_fraction: float = DEFAULT_CONFIG.storage_fraction,
) -> tuple[int, int, int, int]:
    """Size a structure to hold a share of the annual harvest.

    Formula:
        volume_litres = round(annual_harvest * storage_fraction)
        depth = 2 m for a storage tank, 3 m otherwise
        area_m2 = volume_litres / (depth * 1000)
        length = ceil(sqrt(area_m2))
        width = ceil(area_m2 / length)

    Degenerate sizing: a zero footprint (e.g. nothing harvested) is reported
    as the minimum 1 m x 1 m structure instead of taking sqrt(0) and dividing
    by a zero length.

    Args:
        annual_harvest_litres: Annual harvest (litres)
        structure: Structure type being sized
        storage_fraction: Share of the annual harvest to store

    Returns:
        Tuple of (length_m, width_m, depth_m, capacity_litres).
    """
    volume_litres = round_half_away(annual_harvest_litres * storage_fraction)
    depth = STORAGE_TANK_DEPTH_M if structure is StructureType.STORAGE_TANK else RECHARGE_DEPTH_M
    area = volume_litres / (depth * CONSTANTS.LITRES_PER_CUBIC_METRE)

    if area <= 0:
        logger.warning(
            f"Degenerate sizing for {structure.value} ({volume_litres} L); using 1m x 1m"
        )
        return 1, 1, depth, volume_litres

    length = math.ceil(math.sqrt(area))
    width = math.ceil(area / length)

    return length, width, depth, volume_litres
