"""Assessment orchestrator - coordinates geocoding, estimation and calculation."""

import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime

import numpy as np

from rainharvest.assessments.harvesting import calculate
from rainharvest.config import DEFAULT_CONFIG, EstimatorConfig, HarvestingConfig
from rainharvest.estimators import (
    Geocoder,
    HydrogeologyEstimator,
    RainfallEstimator,
    create_rng,
    location_from_coordinates,
)
from rainharvest.errors import InvalidInputError
from rainharvest.models.domain import FeasibilityReport, Location
from rainharvest.models.request import AssessmentRequest
from rainharvest.validation import PropertyFormValidator, PropertyInputValidator

logger = logging.getLogger(__name__)


class FeasibilityOrchestrator:
    """Orchestrates one assessment: locate -> rainfall + aquifer -> calculate.

    Data flows one way; no stage reads back from a later one.
    """

    def __init__(
        self,
        geocoder: Geocoder,
        rainfall_estimator: RainfallEstimator,
        hydrogeology_estimator: HydrogeologyEstimator,
        config: HarvestingConfig = DEFAULT_CONFIG,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
        property_validator: PropertyInputValidator | None = None,
    ):
        self.geocoder = geocoder
        self.rainfall_estimator = rainfall_estimator
        self.hydrogeology_estimator = hydrogeology_estimator
        self.config = config
        self.clock = clock
        self.property_validator = property_validator or PropertyFormValidator()

    @classmethod
    def from_rng(
        cls,
        rng: np.random.Generator | None,
        config: HarvestingConfig = DEFAULT_CONFIG,
    ) -> "FeasibilityOrchestrator":
        """Build an orchestrator whose estimators share one generator.

        Raises:
            ConfigurationError: If rng is None
        """
        return cls(
            geocoder=Geocoder(rng),
            rainfall_estimator=RainfallEstimator(rng),
            hydrogeology_estimator=HydrogeologyEstimator(rng),
            config=config,
        )

    @classmethod
    def from_config(
        cls,
        estimator_config: EstimatorConfig | None = None,
        config: HarvestingConfig = DEFAULT_CONFIG,
    ) -> "FeasibilityOrchestrator":
        return cls.from_rng(create_rng(estimator_config), config)

    def locate(self, request: AssessmentRequest) -> Location:
        """Resolve the request's location.

        Raises:
            InvalidInputError: If neither usable coordinates nor a non-empty
                address are provided
        """
        if request.has_coordinates():
            return location_from_coordinates(request.latitude, request.longitude)
        return self.geocoder.geocode(request.address or "")

    def validate_property(self, request: AssessmentRequest) -> None:
        """Apply the form bounds to the request's property details.

        Raises:
            InvalidInputError: Listing every failed check
        """
        validation_errors = self.property_validator.validate(
            request.property.model_dump(mode="json")
        )
        if validation_errors:
            error_msg = "; ".join(e.message for e in validation_errors)
            logger.error(f"Property validation failed: {error_msg}")
            raise InvalidInputError(f"Invalid property details: {error_msg}")

    def assess(self, request: AssessmentRequest) -> FeasibilityReport:
        """Run a complete assessment.

        Pipeline:
        1. Validate property details against the form bounds
        2. Locate (geocode address or accept coordinates)
        3. Estimate rainfall profile
        4. Estimate aquifer profile
        5. Calculate harvesting result

        Args:
            request: Assessment request with location and property attributes

        Returns:
            FeasibilityReport bundling every intermediate record.

        Raises:
            InvalidInputError: If the property details fail validation or the
                location cannot be resolved
        """
        start_time = time.time()

        logger.info("Step 1: Validating property details")
        self.validate_property(request)

        logger.info("Step 2: Resolving location")
        location = self.locate(request)

        logger.info("Step 3: Estimating rainfall")
        rainfall = self.rainfall_estimator.estimate_rainfall(location.latitude, location.longitude)

        logger.info("Step 4: Estimating hydrogeology")
        aquifer = self.hydrogeology_estimator.estimate_aquifer(
            location.latitude, location.longitude
        )

        logger.info("Step 5: Calculating harvesting potential")
        result = calculate(request.property, rainfall, aquifer, self.config)

        processing_time = time.time() - start_time
        logger.info(f"Assessment for '{location.address}' completed in {processing_time:.3f}s")

        return FeasibilityReport(
            location=location,
            property=request.property,
            rainfall=rainfall,
            aquifer=aquifer,
            result=result,
            generated_at=self.clock(),
        )
