"""Assessment endpoints.

Estimator endpoints expose each pipeline stage on its own; /assessment runs
the whole pipeline and /calculate runs only the pure calculator on profiles
supplied by the caller.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel, Field

from rainharvest.assessments.harvesting import calculate
from rainharvest.errors import InvalidInputError
from rainharvest.models.domain import (
    AquiferProfile,
    FeasibilityReport,
    HarvestingResult,
    Location,
    PropertyAttributes,
    RainfallProfile,
)
from rainharvest.models.request import AssessmentRequest
from rainharvest.orchestrator import FeasibilityOrchestrator
from rainharvest.outputs.pdf import PDFOutputStrategy, report_filename

logger = logging.getLogger(__name__)

router = APIRouter()

_orchestrator: FeasibilityOrchestrator | None = None


def get_orchestrator() -> FeasibilityOrchestrator:
    """Return the shared orchestrator, building it on first use from EST_* settings."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = FeasibilityOrchestrator.from_config()
    return _orchestrator


class GeocodeRequest(BaseModel):
    """Request body for the geocode endpoint."""

    address: str = Field(..., description="Address or city name to geocode")


class CalculationRequest(BaseModel):
    """Request body for the calculate endpoint."""

    property: PropertyAttributes
    rainfall: RainfallProfile
    aquifer: AquiferProfile


@router.post("/geocode", response_model=Location)
def geocode(
    request: GeocodeRequest,
    orchestrator: FeasibilityOrchestrator = Depends(get_orchestrator),
):
    """Resolve an address to coordinates and a district.

    Raises:
        HTTPException 400: If the address is empty
    """
    try:
        return orchestrator.geocoder.geocode(request.address)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get("/rainfall", response_model=RainfallProfile)
def rainfall(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude"),
    orchestrator: FeasibilityOrchestrator = Depends(get_orchestrator),
):
    """Estimate the rainfall profile for a location."""
    return orchestrator.rainfall_estimator.estimate_rainfall(lat, lon)


@router.get("/aquifer", response_model=AquiferProfile)
def aquifer(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude"),
    orchestrator: FeasibilityOrchestrator = Depends(get_orchestrator),
):
    """Estimate the groundwater profile for a location."""
    return orchestrator.hydrogeology_estimator.estimate_aquifer(lat, lon)


def _run_assessment(
    request: AssessmentRequest, orchestrator: FeasibilityOrchestrator
) -> FeasibilityReport:
    try:
        return orchestrator.assess(request)
    except InvalidInputError as e:
        logger.warning(f"Rejected assessment request: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/assessment", response_model=FeasibilityReport)
def assessment(
    request: AssessmentRequest,
    orchestrator: FeasibilityOrchestrator = Depends(get_orchestrator),
):
    """Run a complete feasibility assessment and return the report as JSON.

    Raises:
        HTTPException 400: If neither coordinates nor a usable address are given
    """
    return _run_assessment(request, orchestrator)


@router.post("/assessment/report")
def assessment_report(
    request: AssessmentRequest,
    orchestrator: FeasibilityOrchestrator = Depends(get_orchestrator),
):
    """Run a complete feasibility assessment and return it as a PDF download."""
    report = _run_assessment(request, orchestrator)
    content = PDFOutputStrategy().render([report])

    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{report_filename(report)}"'},
    )


@router.post("/calculate", response_model=HarvestingResult)
def calculate_result(request: CalculationRequest):
    """Calculate harvesting feasibility from caller-supplied profiles.

    No estimation or randomness is involved, so identical requests always
    produce identical results.
    """
    return calculate(request.property, request.rainfall, request.aquifer)
