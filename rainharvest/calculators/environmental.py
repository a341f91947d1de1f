"""Environmental impact estimates for a harvesting installation."""

from rainharvest.calculators.rounding import round_half_away
from rainharvest.config import EnvironmentalConfig


def calculate_environmental_impact(
    annual_harvest_litres: int,
    roof_area_sq_metres: float,
    land_area_sq_metres: float,
    environmental_config: EnvironmentalConfig,
) -> tuple[int, int, int]:
    """Estimate carbon, recharge and flood benefits.

    Formula:
        carbon_kg = round(annual_harvest * 0.0005)          (0.5 g CO2 per litre)
        recharge_litres = round(annual_harvest * 0.8)       (80% reaches groundwater)
        flood_percent = min(round(roof_area / land_area * 30), 45)

    Args:
        annual_harvest_litres: Annual harvest (litres)
        roof_area_sq_metres: Roof catchment area (m2)
        land_area_sq_metres: Plot area (m2), must be positive
        environmental_config: Impact factors

    Returns:
        Tuple of (carbon_reduction_kg_yr, groundwater_recharge_litres_yr, flood_reduction_percent).
    """
    carbon_kg = round_half_away(annual_harvest_litres * environmental_config.carbon_kg_per_litre)
    recharge_litres = round_half_away(
        annual_harvest_litres * (environmental_config.recharge_percent / 100)
    )
    flood_percent = min(
        round_half_away(
            (roof_area_sq_metres / land_area_sq_metres) * environmental_config.flood_factor
        ),
        environmental_config.flood_cap_percent,
    )

    return carbon_kg, recharge_litres, flood_percent
