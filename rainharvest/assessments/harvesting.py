"""Rainwater harvesting assessment.

Combines property attributes with the rainfall and aquifer profiles into a
HarvestingResult. Deterministic: no I/O and no randomness, so identical
inputs always produce identical results.
"""

import logging

from rainharvest.calculators import (
    calculate_cost_per_litre,
    calculate_dimensions,
    calculate_economics,
    calculate_environmental_impact,
    calculate_feasibility_score,
    calculate_harvest_averages,
    calculate_harvest_volume,
    classify_feasibility,
    get_runoff_coefficient,
    round_half_away,
    select_structure,
)
from rainharvest.calculators.structure import SECONDARY_STRUCTURES
from rainharvest.config import DEFAULT_CONFIG, HarvestingConfig
from rainharvest.models.domain import (
    AquiferProfile,
    Economics,
    EnvironmentalImpact,
    Feasibility,
    HarvestingResult,
    HarvestPotential,
    PropertyAttributes,
    RainfallProfile,
    StructureDimensions,
    StructureRecommendation,
)

logger = logging.getLogger(__name__)


def _format_quantity(value: float) -> str:
    """Render whole numbers without a trailing '.0' (1200.0 -> '1200')."""
    return str(int(value)) if float(value).is_integer() else str(value)


class HarvestingAssessment:
    """Harvesting feasibility assessment for a single property.

    Runs the calculation steps in order:
    runoff -> volume -> feasibility -> economics -> structure -> sizing -> environment.
    """

    def __init__(
        self,
        property_attributes: PropertyAttributes,
        rainfall: RainfallProfile,
        aquifer: AquiferProfile,
        config: HarvestingConfig = DEFAULT_CONFIG,
    ):
        self.property = property_attributes
        self.rainfall = rainfall
        self.aquifer = aquifer
        self.config = config

    def run(self) -> HarvestingResult:
        """Run the assessment.

        Returns:
            HarvestingResult with feasibility, potential, recommendation,
            economics and environmental sections.
        """
        prop = self.property
        suitability = self.aquifer.suitability.rainwater_harvesting

        coefficient = get_runoff_coefficient(
            prop.roof_type, default=self.config.default_runoff_coefficient
        )
        efficiency = round_half_away(coefficient * 100)

        annual_harvest = calculate_harvest_volume(
            self.rainfall.annual_rainfall, prop.roof_area, coefficient
        )
        monthly_average, daily_average = calculate_harvest_averages(annual_harvest)
        peak_month_harvest = calculate_harvest_volume(
            self.rainfall.peak_rainfall, prop.roof_area, coefficient
        )

        score = calculate_feasibility_score(
            self.rainfall.annual_rainfall, suitability, prop.roof_area, self.config
        )
        status = classify_feasibility(score)

        total_cost, annual_savings, payback_period, roi = calculate_economics(
            prop.roof_area, annual_harvest, self.config.economics
        )

        structure = select_structure(
            suitability,
            prop.soil_type,
            prop.land_area,
            small_plot_sq_metres=self.config.small_plot_sq_metres,
        )
        length, width, depth, capacity = calculate_dimensions(
            annual_harvest, structure, storage_fraction=self.config.storage_fraction
        )

        carbon, recharge, flood = calculate_environmental_impact(
            annual_harvest, prop.roof_area, prop.land_area, self.config.environmental
        )

        logger.info(
            f"Assessed '{prop.name or 'unnamed property'}': {annual_harvest} L/year, "
            f"score {score} ({status.value}), {structure.value}"
        )

        return HarvestingResult(
            feasibility=Feasibility(
                status=status,
                score=score,
                reasons=(
                    f"Annual rainfall: {_format_quantity(self.rainfall.annual_rainfall)}mm",
                    f"Roof area: {_format_quantity(prop.roof_area)} sq meters",
                    f"Hydrogeology suitability: {suitability.value}",
                    f"Estimated collection efficiency: {efficiency}%",
                ),
            ),
            potential=HarvestPotential(
                annual_harvest=annual_harvest,
                monthly_average=monthly_average,
                daily_average=daily_average,
                peak_month_harvest=peak_month_harvest,
                efficiency=efficiency,
            ),
            recommendation=StructureRecommendation(
                primary_structure=structure,
                secondary_structures=SECONDARY_STRUCTURES,
                dimensions=StructureDimensions(
                    length=length, width=width, depth=depth, capacity=capacity
                ),
            ),
            economics=Economics(
                total_cost=total_cost,
                annual_savings=annual_savings,
                payback_period=payback_period,
                recoverable=payback_period is not None,
                roi=roi,
                cost_per_litre=calculate_cost_per_litre(total_cost, annual_harvest),
            ),
            environmental=EnvironmentalImpact(
                carbon_reduction=carbon,
                groundwater_recharge=recharge,
                flood_reduction=flood,
            ),
        )


def calculate(
    property_attributes: PropertyAttributes,
    rainfall: RainfallProfile,
    aquifer: AquiferProfile,
    config: HarvestingConfig = DEFAULT_CONFIG,
) -> HarvestingResult:
    """Calculate the harvesting result for a property.

    Convenience wrapper around HarvestingAssessment(...).run().
    """
    return HarvestingAssessment(property_attributes, rainfall, aquifer, config).run()
