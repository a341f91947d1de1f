"""Harvesting assessment implementations.

Assessments follow the pattern:
- Constructor: __init__(property_attributes, rainfall, aquifer, config)
- Run method: run() -> HarvestingResult
"""

from rainharvest.assessments.harvesting import HarvestingAssessment, calculate

__all__ = ["HarvestingAssessment", "calculate"]
