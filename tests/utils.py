"""Builders for the records the calculator consumes."""

from datetime import UTC, date, datetime

from rainharvest.models.domain import (
    AquiferProfile,
    AquiferSuitability,
    DepthRange,
    PropertyAttributes,
    RainfallPrediction,
    RainfallProfile,
)
from rainharvest.models.enums import (
    AquiferType,
    Permeability,
    RainfallTrend,
    Suitability,
    WaterQuality,
)

FIXED_NOW = datetime(2026, 10, 17, 9, 30, tzinfo=UTC)


def flat_monthly(annual_mm: float) -> tuple[float, ...]:
    """Spread an annual total over twelve months in whole millimetres.

    December takes the remainder so the months sum exactly to the total.
    """
    month = float(annual_mm // 12)
    return (month,) * 11 + (annual_mm - month * 11,)


def make_rainfall(
    annual_mm: float = 1200.0,
    monthly_mm: tuple[float, ...] | None = None,
) -> RainfallProfile:
    """Rainfall profile whose monthly series sums to the annual total."""
    monthly = monthly_mm if monthly_mm is not None else flat_monthly(annual_mm)
    return RainfallProfile(
        annual_rainfall=sum(monthly),
        monthly_rainfall=monthly,
        prediction=RainfallPrediction(
            next_year=sum(monthly), trend=RainfallTrend.STABLE, confidence=90
        ),
        source="Test data",
        last_updated=date(2026, 10, 17),
    )


def make_aquifer(suitability: Suitability = Suitability.GOOD) -> AquiferProfile:
    return AquiferProfile(
        aquifer_name="Alluvial",
        aquifer_type=AquiferType.UNCONFINED,
        depth_to_water=DepthRange(min=5, max=25),
        permeability=Permeability.HIGH,
        quality=WaterQuality.GOOD,
        suitability=AquiferSuitability(
            rainwater_harvesting=suitability,
            recharge_method=("Recharge Well", "Infiltration Trench"),
        ),
    )


def make_property(**overrides) -> PropertyAttributes:
    values = {
        "name": "Sharma Residence",
        "dwellers": 4,
        "roof_area": 100.0,
        "roof_type": "concrete",
        "soil_type": "loamy",
        "land_area": 200.0,
        "building_type": "residential",
    }
    values.update(overrides)
    return PropertyAttributes(**values)
