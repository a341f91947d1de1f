"""Domain models for rainwater harvesting feasibility."""

from rainharvest.models.domain import (
    AquiferProfile,
    AquiferSuitability,
    DepthRange,
    Economics,
    EnvironmentalImpact,
    Feasibility,
    FeasibilityReport,
    HarvestingResult,
    HarvestPotential,
    Location,
    PropertyAttributes,
    RainfallPrediction,
    RainfallProfile,
    StructureDimensions,
    StructureRecommendation,
)

__all__ = [
    "Location",
    "PropertyAttributes",
    "RainfallPrediction",
    "RainfallProfile",
    "DepthRange",
    "AquiferSuitability",
    "AquiferProfile",
    "Feasibility",
    "HarvestPotential",
    "StructureDimensions",
    "StructureRecommendation",
    "Economics",
    "EnvironmentalImpact",
    "HarvestingResult",
    "FeasibilityReport",
]
