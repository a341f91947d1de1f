"""Enumerations shared by the estimators, calculator and outputs.

Values are the user-facing strings, so models serialize to the same
vocabulary the report and API use.
"""

from enum import Enum


class RoofType(str, Enum):
    """Roof materials accepted by the property form."""

    CONCRETE = "concrete"
    TILE = "tile"
    METAL = "metal"
    ASBESTOS = "asbestos"
    THATCHED = "thatched"


class SoilType(str, Enum):
    SANDY = "sandy"
    LOAMY = "loamy"
    CLAY = "clay"
    ROCKY = "rocky"
    MIXED = "mixed"


class BuildingType(str, Enum):
    RESIDENTIAL = "residential"
    APARTMENT = "apartment"
    COMMERCIAL = "commercial"
    INSTITUTIONAL = "institutional"


class RainfallTrend(str, Enum):
    """Trend classification derived from the monsoon-month average."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class AquiferType(str, Enum):
    CONFINED = "Confined"
    UNCONFINED = "Unconfined"
    SEMI_CONFINED = "Semi-confined"


class Permeability(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class WaterQuality(str, Enum):
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class Suitability(str, Enum):
    """Rainwater harvesting suitability tier of an aquifer.

    Ordered from best to worst; `score_bonus` drives the feasibility score.
    """

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"

    @property
    def score_bonus(self) -> int:
        return _SUITABILITY_BONUS[self]


_SUITABILITY_BONUS = {
    Suitability.EXCELLENT: 15,
    Suitability.GOOD: 10,
    Suitability.FAIR: 5,
    Suitability.POOR: 0,
}


class FeasibilityStatus(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class StructureType(str, Enum):
    """Primary recharge or storage structure recommended for a site."""

    RECHARGE_PIT = "Recharge Pit"
    RECHARGE_WELL = "Recharge Well"
    STORAGE_TANK = "Storage Tank"
