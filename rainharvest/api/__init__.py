"""HTTP API for the rainwater harvesting calculator.

Each feature has its own router module, assembled here into a single
FastAPI app.

Endpoints:
    GET  /health             - Health check
    POST /geocode            - Resolve an address to a location
    GET  /rainfall           - Rainfall profile for coordinates
    GET  /aquifer            - Aquifer profile for coordinates
    POST /assessment         - Full feasibility assessment as JSON
    POST /assessment/report  - Full feasibility assessment as a PDF document
    POST /calculate          - Harvesting calculation from supplied profiles
"""

from fastapi import FastAPI

from rainharvest.api.assessment_router import router as assessment_router
from rainharvest.api.health_router import router as health_router
from rainharvest.common.tracing import TraceIdMiddleware

app = FastAPI(title="Rainwater Harvesting Feasibility API")

app.add_middleware(TraceIdMiddleware)
app.include_router(health_router)
app.include_router(assessment_router)
