"""Shared test fixtures."""

import numpy as np
import pytest

from rainharvest.estimators import Geocoder, HydrogeologyEstimator, RainfallEstimator
from rainharvest.models.request import AssessmentRequest
from rainharvest.orchestrator import FeasibilityOrchestrator
from tests.utils import FIXED_NOW, make_aquifer, make_property, make_rainfall


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def canonical_property():
    """Roof 100 m2 concrete, land 200 m2, loamy soil."""
    return make_property()


@pytest.fixture
def canonical_rainfall():
    """1200 mm/year spread evenly."""
    return make_rainfall(1200.0)


@pytest.fixture
def good_aquifer():
    return make_aquifer()


@pytest.fixture
def orchestrator() -> FeasibilityOrchestrator:
    """Seeded orchestrator with a fixed clock."""
    rng = np.random.default_rng(7)
    return FeasibilityOrchestrator(
        geocoder=Geocoder(rng),
        rainfall_estimator=RainfallEstimator(rng),
        hydrogeology_estimator=HydrogeologyEstimator(rng),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def mumbai_report(orchestrator):
    """Seeded assessment of the reference property in Mumbai."""
    return orchestrator.assess(AssessmentRequest(address="Mumbai", property=make_property()))
