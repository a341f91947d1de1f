"""Core domain models for rainwater harvesting feasibility.

These models represent the inputs, intermediate profiles and derived results
of a feasibility assessment as immutable value objects. Each record is owned
by the call that produced it and passed by value to the next stage.

Includes models for:
- Location and property attributes (user input)
- Rainfall and aquifer profiles (estimator output)
- Harvesting result (calculator output)
- Feasibility report (everything above, bundled for outputs)
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rainharvest.config import CONSTANTS
from rainharvest.models.enums import (
    AquiferType,
    BuildingType,
    FeasibilityStatus,
    Permeability,
    RainfallTrend,
    RoofType,
    SoilType,
    StructureType,
    Suitability,
    WaterQuality,
)

# Tolerance for the monthly/annual rainfall consistency check (mm)
RAINFALL_SUM_TOLERANCE_MM = 0.5

# Upper bounds on caller-supplied quantities
MAX_AREA_SQ_METRES = 1_000_000.0
MAX_ANNUAL_RAINFALL_MM = 20_000.0


class Location(BaseModel):
    """A geocoded location.

    Attributes:
        address: Address text as entered by the user
        latitude: Decimal degrees
        longitude: Decimal degrees
        district: Administrative district name
    """

    model_config = ConfigDict(frozen=True)

    address: str = Field(description="Address text as entered")
    latitude: float = Field(ge=-90, le=90, description="Latitude (decimal degrees)")
    longitude: float = Field(ge=-180, le=180, description="Longitude (decimal degrees)")
    district: str = Field(description="District name")


class PropertyAttributes(BaseModel):
    """Property details supplied on the assessment form.

    Attributes:
        name: Owner or property name
        dwellers: Number of residents
        roof_area: Catchment roof area in square metres
        roof_type: Roof material
        soil_type: Dominant soil type
        land_area: Total plot area in square metres
        building_type: Building category
        additional_info: Free text notes
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(default="", description="Owner or property name")
    dwellers: int = Field(default=4, ge=1, description="Number of residents")
    roof_area: float = Field(gt=0, le=MAX_AREA_SQ_METRES, description="Roof area (m2)")
    roof_type: RoofType = Field(default=RoofType.CONCRETE, description="Roof material")
    soil_type: SoilType = Field(default=SoilType.LOAMY, description="Soil type")
    land_area: float = Field(gt=0, le=MAX_AREA_SQ_METRES, description="Land area (m2)")
    building_type: BuildingType = Field(
        default=BuildingType.RESIDENTIAL, description="Building category"
    )
    additional_info: str = Field(default="", description="Additional notes")


class RainfallPrediction(BaseModel):
    """Next-year rainfall outlook.

    Attributes:
        next_year: Predicted annual rainfall for next year (mm)
        trend: Trend classification from monsoon rainfall
        confidence: Confidence of the prediction (0-100)
    """

    model_config = ConfigDict(frozen=True)

    next_year: float = Field(ge=0, description="Predicted annual rainfall (mm)")
    trend: RainfallTrend = Field(description="Rainfall trend")
    confidence: float = Field(ge=0, le=100, description="Prediction confidence (%)")


class RainfallProfile(BaseModel):
    """Annual and monthly rainfall for a location.

    Attributes:
        annual_rainfall: Total annual rainfall (mm)
        monthly_rainfall: Twelve monthly totals (mm), index 0 = January
        prediction: Next-year outlook
        source: Description of the data source / matched region
        last_updated: Date the profile was produced
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    annual_rainfall: float = Field(
        ge=0, le=MAX_ANNUAL_RAINFALL_MM, description="Annual rainfall (mm)"
    )
    monthly_rainfall: tuple[float, ...] = Field(description="Monthly rainfall Jan-Dec (mm)")
    prediction: RainfallPrediction
    source: str = Field(description="Data source")
    last_updated: date = Field(description="Date the profile was produced")

    @field_validator("monthly_rainfall")
    @classmethod
    def must_have_twelve_months(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if len(v) != CONSTANTS.MONTHS_PER_YEAR:
            msg = f"monthly_rainfall must have exactly 12 entries, got {len(v)}"
            raise ValueError(msg)
        if any(month < 0 for month in v):
            raise ValueError("monthly_rainfall entries must be non-negative")
        return v

    @model_validator(mode="after")
    def annual_matches_monthly(self) -> "RainfallProfile":
        total = sum(self.monthly_rainfall)
        if abs(total - self.annual_rainfall) > RAINFALL_SUM_TOLERANCE_MM:
            msg = (
                f"annual_rainfall ({self.annual_rainfall}) does not match "
                f"sum of monthly_rainfall ({total})"
            )
            raise ValueError(msg)
        return self

    @property
    def peak_month(self) -> int:
        """Zero-based index of the wettest month (first one on ties)."""
        return max(range(len(self.monthly_rainfall)), key=self.monthly_rainfall.__getitem__)

    @property
    def peak_rainfall(self) -> float:
        return self.monthly_rainfall[self.peak_month]


class DepthRange(BaseModel):
    """Depth to the water table."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(ge=0, description="Shallowest depth")
    max: float = Field(ge=0, description="Deepest depth")
    unit: str = Field(default="meters", description="Depth unit")

    @model_validator(mode="after")
    def min_not_above_max(self) -> "DepthRange":
        if self.min > self.max:
            msg = f"depth min ({self.min}) must not exceed max ({self.max})"
            raise ValueError(msg)
        return self


class AquiferSuitability(BaseModel):
    model_config = ConfigDict(frozen=True)

    rainwater_harvesting: Suitability = Field(description="Suitability tier")
    recharge_method: tuple[str, ...] = Field(description="Recommended recharge methods")


class AquiferProfile(BaseModel):
    """Groundwater characteristics for a location.

    Attributes:
        aquifer_name: Descriptive aquifer name
        aquifer_type: Confinement type
        depth_to_water: Depth range to the water table
        permeability: Permeability class
        quality: Groundwater quality class
        suitability: Harvesting suitability and recharge methods
        warnings: Site warnings
        recommendations: General recommendations
    """

    model_config = ConfigDict(frozen=True)

    aquifer_name: str = Field(description="Aquifer name")
    aquifer_type: AquiferType = Field(description="Confinement type")
    depth_to_water: DepthRange
    permeability: Permeability
    quality: WaterQuality
    suitability: AquiferSuitability
    warnings: tuple[str, ...] = Field(default=(), description="Site warnings")
    recommendations: tuple[str, ...] = Field(default=(), description="Recommendations")


# ======================================================================================
# Harvesting result models
# ======================================================================================


class Feasibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: FeasibilityStatus
    score: int = Field(ge=0, le=100, description="Feasibility score (0-100)")
    reasons: tuple[str, ...] = Field(description="Human-readable input summary")


class HarvestPotential(BaseModel):
    """Harvestable water volumes.

    Attributes:
        annual_harvest: Litres per year
        monthly_average: Litres per month (annual / 12)
        daily_average: Litres per day (annual / 365)
        peak_month_harvest: Litres collected in the wettest month
        efficiency: Runoff coefficient as a percentage
    """

    model_config = ConfigDict(frozen=True)

    annual_harvest: int = Field(ge=0, description="Annual harvest (litres)")
    monthly_average: int = Field(ge=0, description="Monthly average harvest (litres)")
    daily_average: int = Field(ge=0, description="Daily average harvest (litres)")
    peak_month_harvest: int = Field(ge=0, description="Wettest month harvest (litres)")
    efficiency: int = Field(ge=0, le=100, description="Collection efficiency (%)")


class StructureDimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int = Field(ge=1, description="Length (m)")
    width: int = Field(ge=1, description="Width (m)")
    depth: int = Field(ge=1, description="Depth (m)")
    capacity: int = Field(ge=0, description="Capacity (litres)")


class StructureRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_structure: StructureType
    secondary_structures: tuple[str, ...]
    dimensions: StructureDimensions


class Economics(BaseModel):
    """Cost and payback estimate.

    Attributes:
        total_cost: Installation cost including overhead (INR)
        annual_savings: Water bill savings per year (INR)
        payback_period: Years to recover the cost, None when savings are zero
        recoverable: False when the installation never pays for itself
        roi: Annual return on investment (%)
        cost_per_litre: Installation cost per litre of annual harvest (INR),
            None when nothing is harvested
    """

    model_config = ConfigDict(frozen=True)

    total_cost: int = Field(ge=0, description="Total cost (INR)")
    annual_savings: int = Field(ge=0, description="Annual savings (INR)")
    payback_period: float | None = Field(
        default=None, ge=0, description="Payback period (years), None if not recoverable"
    )
    recoverable: bool = Field(description="Whether the cost is ever recovered")
    roi: int = Field(ge=0, description="Return on investment (%)")
    cost_per_litre: float | None = Field(
        default=None, ge=0, description="Cost per litre harvested (INR)"
    )


class EnvironmentalImpact(BaseModel):
    model_config = ConfigDict(frozen=True)

    carbon_reduction: int = Field(ge=0, description="CO2 reduction (kg/year)")
    groundwater_recharge: int = Field(ge=0, description="Groundwater recharge (litres/year)")
    flood_reduction: int = Field(ge=0, le=100, description="Flood runoff reduction (%)")


class HarvestingResult(BaseModel):
    """Complete harvesting calculation for a property.

    Fully determined by (PropertyAttributes, RainfallProfile, AquiferProfile).
    """

    model_config = ConfigDict(frozen=True)

    feasibility: Feasibility
    potential: HarvestPotential
    recommendation: StructureRecommendation
    economics: Economics
    environmental: EnvironmentalImpact

    def is_feasible(self) -> bool:
        """Check if harvesting is worth recommending (status better than poor)."""
        return self.feasibility.status is not FeasibilityStatus.POOR


class FeasibilityReport(BaseModel):
    """Everything produced for one assessment request.

    Aggregates the upstream profiles and the derived result so outputs can
    render a complete document.
    """

    model_config = ConfigDict(frozen=True)

    location: Location
    property: PropertyAttributes
    rainfall: RainfallProfile
    aquifer: AquiferProfile
    result: HarvestingResult
    generated_at: datetime = Field(description="When the report was assembled")
