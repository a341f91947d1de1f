"""Installation cost and payback calculations."""

import logging

from rainharvest.calculators.rounding import round_half_away, round_half_away_to
from rainharvest.config import EconomicsConfig

logger = logging.getLogger(__name__)


def calculate_economics(
    roof_area_sq_metres: float,
    annual_harvest_litres: int,
    economics_config: EconomicsConfig,
) -> tuple[int, int, float | None, int]:
    """Estimate installation cost, savings, payback and ROI.

    Formula:
        total_cost = round(roof_area * cost_per_m2 * overhead_factor)
        annual_savings = round(annual_harvest * water_cost_per_litre)
        payback_years = total_cost / annual_savings   (one decimal)
        roi_percent = round(annual_savings / total_cost * 100)

    Degenerate economics: with zero savings the cost is never recovered, so
    payback is reported as None rather than dividing by zero. A zero total
    cost (vanishingly small roof) reports zero ROI.

    Args:
        roof_area_sq_metres: Roof catchment area (m2)
        annual_harvest_litres: Annual harvest (litres)
        economics_config: Cost and price assumptions

    Returns:
        Tuple of (total_cost, annual_savings, payback_years_or_None, roi_percent).
    """
    total_cost = round_half_away(
        roof_area_sq_metres
        * economics_config.cost_per_sq_metre
        * economics_config.overhead_factor
    )
    annual_savings = round_half_away(
        annual_harvest_litres * economics_config.water_cost_per_litre
    )

    if annual_savings == 0:
        logger.warning(
            f"Annual savings are zero for {annual_harvest_litres} L/year; "
            "installation cost is not recoverable"
        )
        payback_years = None
    else:
        payback_years = round_half_away_to(total_cost / annual_savings, 1)

    roi_percent = round_half_away(annual_savings / total_cost * 100) if total_cost else 0

    return total_cost, annual_savings, payback_years, roi_percent


def calculate_cost_per_litre(total_cost: int, annual_harvest_litres: int) -> float | None:
    """Installation cost per litre of annual harvest (two decimals), None if nothing is harvested."""
    if annual_harvest_litres == 0:
        return None
    return round_half_away_to(total_cost / annual_harvest_litres, 2)
