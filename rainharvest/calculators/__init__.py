"""Business logic calculators for rainwater harvesting feasibility.

This package contains pure functions for the harvesting formulas.
All calculators are stateless and deterministic.
"""

from rainharvest.calculators.economics import calculate_cost_per_litre, calculate_economics
from rainharvest.calculators.environmental import calculate_environmental_impact
from rainharvest.calculators.feasibility import calculate_feasibility_score, classify_feasibility
from rainharvest.calculators.rounding import round_half_away, round_half_away_to
from rainharvest.calculators.runoff import (
    calculate_harvest_averages,
    calculate_harvest_volume,
    get_runoff_coefficient,
)
from rainharvest.calculators.structure import calculate_dimensions, select_structure

__all__ = [
    "get_runoff_coefficient",
    "calculate_harvest_volume",
    "calculate_harvest_averages",
    "calculate_feasibility_score",
    "classify_feasibility",
    "calculate_economics",
    "calculate_cost_per_litre",
    "select_structure",
    "calculate_dimensions",
    "calculate_environmental_impact",
    "round_half_away",
    "round_half_away_to",
]
