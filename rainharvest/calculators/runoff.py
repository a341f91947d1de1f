"""Roof runoff and harvest volume calculations.

Converts rainfall depth over a roof catchment into a collectable volume.
"""

from rainharvest.calculators.rounding import round_half_away
from rainharvest.config import CONSTANTS, DEFAULT_CONFIG
from rainharvest.models.enums import RoofType

# Fraction of rainfall on each roof material that becomes collectable runoff
RUNOFF_COEFFICIENTS: dict[str, float] = {
    RoofType.CONCRETE.value: 0.85,
    RoofType.TILE.value: 0.75,
    RoofType.METAL.value: 0.90,
    RoofType.ASBESTOS.value: 0.80,
    RoofType.THATCHED.value: 0.20,
}


def get_runoff_coefficient(
    roof_type: RoofType | str,
    default: float = DEFAULT_CONFIG.default_runoff_coefficient,
) -> float:
    """Look up the runoff coefficient for a roof material.

    Args:
        roof_type: Roof material (enum member or raw string)
        default: Coefficient returned for unrecognised materials

    Returns:
        Runoff coefficient between 0 and 1.
    """
    key = roof_type.value if isinstance(roof_type, RoofType) else str(roof_type).lower()
    return RUNOFF_COEFFICIENTS.get(key, default)


def calculate_harvest_volume(
    rainfall_mm: float,
    roof_area_sq_metres: float,
    runoff_coefficient: float,
) -> int:
    """Calculate harvestable volume for a depth of rainfall.

    Formula (V = P x A x Cr):
        volume_litres = (rainfall_mm / 1000) * roof_area * coefficient * 1000

    The mm -> m and m3 -> L conversions are kept as separate factors so the
    floating point result matches the reference figures exactly.

    Args:
        rainfall_mm: Rainfall depth (mm), annual or for a single month
        roof_area_sq_metres: Roof catchment area (m2)
        runoff_coefficient: Fraction of rainfall collected

    Returns:
        Harvestable volume in litres, rounded half away from zero.
    """
    rainfall_metres = rainfall_mm / CONSTANTS.MILLIMETRES_PER_METRE
    return round_half_away(
        rainfall_metres
        * roof_area_sq_metres
        * runoff_coefficient
        * CONSTANTS.LITRES_PER_CUBIC_METRE
    )


def calculate_harvest_averages(annual_harvest_litres: int) -> tuple[int, int]:
    """Spread an annual harvest evenly over months and days.

    Returns:
        Tuple of (monthly_average_litres, daily_average_litres).
    """
    monthly_average = round_half_away(annual_harvest_litres / CONSTANTS.MONTHS_PER_YEAR)
    daily_average = round_half_away(annual_harvest_litres / CONSTANTS.DAYS_PER_YEAR)
    return monthly_average, daily_average
