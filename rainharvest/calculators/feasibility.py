"""Feasibility scoring.

Scores a site from rainfall, aquifer suitability and roof size, then maps the
score onto a status band.
"""

from rainharvest.config import DEFAULT_CONFIG, HarvestingConfig
from rainharvest.models.enums import FeasibilityStatus, Suitability

# Score bands, checked from best to worst
STATUS_THRESHOLDS: tuple[tuple[int, FeasibilityStatus], ...] = (
    (80, FeasibilityStatus.EXCELLENT),
    (65, FeasibilityStatus.GOOD),
    (50, FeasibilityStatus.FAIR),
)

HIGH_RAINFALL_BONUS = 20
MODERATE_RAINFALL_BONUS = 10
LARGE_ROOF_BONUS = 5


def calculate_feasibility_score(
    annual_rainfall_mm: float,
    suitability: Suitability,
    roof_area_sq_metres: float,
    config: HarvestingConfig = DEFAULT_CONFIG,
) -> int:
    """Calculate the 0-100 feasibility score for a site.

    Formula:
        score = base
              + 20 if rainfall > 1200 mm, else 10 if rainfall > 800 mm
              + 15 / 10 / 5 / 0 for Excellent / Good / Fair / Poor suitability
              + 5 if roof area > 200 m2
        score = min(score, max_score)

    Thresholds are strict (exactly 1200 mm earns the moderate bonus only).

    Args:
        annual_rainfall_mm: Annual rainfall (mm)
        suitability: Aquifer suitability tier for rainwater harvesting
        roof_area_sq_metres: Roof catchment area (m2)
        config: Harvesting configuration (base score, ceiling, thresholds)

    Returns:
        Feasibility score, never above config.max_score.
    """
    score = config.base_score

    if annual_rainfall_mm > config.high_rainfall_mm:
        score += HIGH_RAINFALL_BONUS
    elif annual_rainfall_mm > config.moderate_rainfall_mm:
        score += MODERATE_RAINFALL_BONUS

    score += suitability.score_bonus

    if roof_area_sq_metres > config.large_roof_sq_metres:
        score += LARGE_ROOF_BONUS

    return min(score, config.max_score)


def classify_feasibility(score: int) -> FeasibilityStatus:
    """Map a feasibility score onto its status band."""
    for threshold, status in STATUS_THRESHOLDS:
        if score >= threshold:
            return status
    return FeasibilityStatus.POOR
