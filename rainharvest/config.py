"""Configuration and constants for the rainwater harvesting calculator.

This module defines the business rules and tunable heuristics used by the
harvesting calculator and the location estimators.

Includes configuration for:
- Harvesting business rules (HarvestingConfig with HARVEST_ prefix)
- Installation economics (EconomicsConfig with ECON_ prefix)
- Environmental impact factors (EnvironmentalConfig with ENV_ prefix)
- Estimator randomness (EstimatorConfig with EST_ prefix)
- HTTP API server (ApiServerConfig with API_ prefix)

Configuration can be overridden via:
1. Environment variables (e.g., ECON_COST_PER_SQ_METRE=175, EST_SEED=42)
2. .env file in the current directory
3. Default values in code
"""

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class PhysicalConstants:
    """Unit conversion factors used in harvesting calculations.

    These are NOT configurable - they are fixed conversion factors that
    should never vary.
    """

    MILLIMETRES_PER_METRE: float = 1_000.0
    LITRES_PER_CUBIC_METRE: float = 1_000.0
    MONTHS_PER_YEAR: int = 12
    DAYS_PER_YEAR: int = 365


# Module-level singleton for physical constants
CONSTANTS = PhysicalConstants()


class EconomicsConfig(BaseSettings):
    """Installation cost and water price assumptions.

    Can be overridden via environment variables with ECON_ prefix:
    - ECON_COST_PER_SQ_METRE
    - ECON_OVERHEAD_PERCENT
    - ECON_WATER_COST_PER_LITRE

    Attributes:
        cost_per_sq_metre: Base installation cost per square metre of roof (INR)
        overhead_percent: Overhead added on top of the base cost
        water_cost_per_litre: Municipal water price used for savings (INR)
    """

    model_config = SettingsConfigDict(
        env_prefix="ECON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cost_per_sq_metre: float = Field(
        default=150.0, gt=0, description="Installation cost per m2 of roof (INR)"
    )
    overhead_percent: float = Field(
        default=20.0, ge=0, description="Overhead added to the base installation cost (%)"
    )
    water_cost_per_litre: float = Field(
        default=0.02, ge=0, description="Municipal water cost per litre (INR)"
    )

    @property
    def overhead_factor(self) -> float:
        """Multiplier applied to the base cost (e.g., 1.2 for 20% overhead)."""
        return 1 + self.overhead_percent / 100


class EnvironmentalConfig(BaseSettings):
    """Environmental impact factors.

    Can be overridden via environment variables with ENV_ prefix:
    - ENV_CARBON_KG_PER_LITRE
    - ENV_RECHARGE_PERCENT
    - ENV_FLOOD_FACTOR
    - ENV_FLOOD_CAP_PERCENT

    Attributes:
        carbon_kg_per_litre: CO2 avoided per harvested litre (kg)
        recharge_percent: Share of harvested water reaching groundwater
        flood_factor: Scale applied to the roof/land ratio for flood reduction
        flood_cap_percent: Upper bound on reported flood reduction
    """

    model_config = SettingsConfigDict(
        env_prefix="ENV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    carbon_kg_per_litre: float = Field(
        default=0.0005, ge=0, description="CO2 reduction per harvested litre (kg)"
    )
    recharge_percent: float = Field(
        default=80.0, ge=0, le=100, description="Harvest share recharging groundwater (%)"
    )
    flood_factor: float = Field(
        default=30.0, ge=0, description="Multiplier on roof/land ratio for flood reduction"
    )
    flood_cap_percent: int = Field(
        default=45, ge=0, le=100, description="Maximum reported flood reduction (%)"
    )


class HarvestingConfig(BaseSettings):
    """Main configuration for harvesting feasibility business rules.

    Can be overridden via environment variables with HARVEST_ prefix:
    - HARVEST_BASE_SCORE
    - HARVEST_MAX_SCORE
    - HARVEST_STORAGE_FRACTION
    - HARVEST_DEFAULT_RUNOFF_COEFFICIENT
    - ECON_* / ENV_* variables for the nested configurations

    Attributes:
        base_score: Feasibility score before any bonus
        max_score: Feasibility score ceiling
        high_rainfall_mm: Annual rainfall above which the full bonus applies
        moderate_rainfall_mm: Annual rainfall above which the partial bonus applies
        large_roof_sq_metres: Roof area above which the roof bonus applies
        small_plot_sq_metres: Land area below which a recharge well is preferred
        storage_fraction: Share of the annual harvest sized as structure volume
        default_runoff_coefficient: Coefficient for unrecognised roof types
        economics: Installation economics configuration
        environmental: Environmental impact configuration
    """

    model_config = SettingsConfigDict(
        env_prefix="HARVEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_score: int = Field(default=60, ge=0, le=100, description="Base feasibility score")
    max_score: int = Field(default=95, ge=0, le=100, description="Feasibility score ceiling")
    high_rainfall_mm: float = Field(default=1200.0, description="Full rainfall bonus threshold")
    moderate_rainfall_mm: float = Field(
        default=800.0, description="Partial rainfall bonus threshold"
    )
    large_roof_sq_metres: float = Field(default=200.0, description="Roof bonus threshold (m2)")
    small_plot_sq_metres: float = Field(
        default=100.0, description="Land area below which a recharge well is recommended (m2)"
    )
    storage_fraction: float = Field(
        default=0.1, gt=0, le=1, description="Share of annual harvest used for sizing"
    )
    default_runoff_coefficient: float = Field(
        default=0.75, gt=0, le=1, description="Runoff coefficient for unknown roof types"
    )
    economics: EconomicsConfig = Field(
        default_factory=EconomicsConfig, description="Installation economics"
    )
    environmental: EnvironmentalConfig = Field(
        default_factory=EnvironmentalConfig, description="Environmental impact factors"
    )


DEFAULT_CONFIG = HarvestingConfig()


class EstimatorConfig(BaseSettings):
    """Randomness configuration for the location estimators.

    Can be overridden via environment variables with EST_ prefix:
    - EST_SEED: Seed for the shared random generator (unset = OS entropy)
    """

    model_config = SettingsConfigDict(
        env_prefix="EST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    seed: int | None = Field(
        default=None, ge=0, description="Random seed for reproducible estimates"
    )


class ApiServerConfig(BaseSettings):
    """Configuration for the HTTP API server.

    Can be overridden via environment variables with API_ prefix:
    - API_HOST (default: 0.0.0.0)
    - API_PORT (default: 8085)
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface the API server binds to")
    port: int = Field(default=8085, ge=1, le=65535, description="Port for the API server")
