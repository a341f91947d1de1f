"""Location estimators: geocoding, rainfall and hydrogeology.

Every estimator takes an injected numpy Generator; none touch global random
state.
"""

import numpy as np

from rainharvest.config import EstimatorConfig
from rainharvest.estimators.geocoder import Geocoder, location_from_coordinates, validate_address
from rainharvest.estimators.hydrogeology import HydrogeologyEstimator
from rainharvest.estimators.rainfall import RainfallEstimator


def create_rng(config: EstimatorConfig | None = None) -> np.random.Generator:
    """Create the shared random generator from configuration (seeded if EST_SEED is set)."""
    config = config or EstimatorConfig()
    return np.random.default_rng(config.seed)


__all__ = [
    "Geocoder",
    "RainfallEstimator",
    "HydrogeologyEstimator",
    "create_rng",
    "location_from_coordinates",
    "validate_address",
]
