"""Unit tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from rainharvest.api import app
from rainharvest.api.assessment_router import get_orchestrator
from tests.utils import make_aquifer, make_property, make_rainfall

PROPERTY = {
    "name": "Sharma Residence",
    "dwellers": 4,
    "roof_area": 100,
    "roof_type": "concrete",
    "soil_type": "loamy",
    "land_area": 200,
    "building_type": "residential",
}


@pytest.fixture
def client(orchestrator):
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides = {}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_geocode_known_city(client):
    response = client.post("/geocode", json={"address": "Chennai"})

    assert response.status_code == 200
    assert response.json() == {
        "address": "Chennai",
        "latitude": 13.0827,
        "longitude": 80.2707,
        "district": "Chennai",
    }


def test_geocode_empty_address(client):
    response = client.post("/geocode", json={"address": "   "})

    assert response.status_code == 400
    assert "Address is required" in response.json()["detail"]


def test_rainfall(client):
    response = client.get("/rainfall", params={"lat": 19.05, "lon": 72.85})

    assert response.status_code == 200
    body = response.json()
    assert body["annual_rainfall"] == 2543
    assert len(body["monthly_rainfall"]) == 12
    assert body["source"] == "India Meteorological Department (IMD) - Mumbai Region"


def test_rainfall_rejects_out_of_range_latitude(client):
    response = client.get("/rainfall", params={"lat": 95, "lon": 72.85})

    assert response.status_code == 422


def test_aquifer(client):
    response = client.get("/aquifer", params={"lat": 28.6139, "lon": 77.209})

    assert response.status_code == 200
    assert response.json()["suitability"]["rainwater_harvesting"] == "Excellent"


def test_assessment_by_address(client):
    response = client.post("/assessment", json={"address": "Mumbai", "property": PROPERTY})

    assert response.status_code == 200
    body = response.json()
    assert body["location"]["district"] == "Mumbai"
    assert body["result"]["feasibility"]["status"] == "excellent"
    assert body["result"]["recommendation"]["primary_structure"] == "Recharge Pit"
    assert body["generated_at"].startswith("2026-10-17T09:30:00")


def test_assessment_by_coordinates(client):
    response = client.post(
        "/assessment", json={"latitude": 28.6139, "longitude": 77.209, "property": PROPERTY}
    )

    assert response.status_code == 200
    assert response.json()["location"]["address"] == "Current Location"


def test_assessment_without_location(client):
    response = client.post("/assessment", json={"property": PROPERTY})

    assert response.status_code == 400


def test_assessment_with_unpaired_coordinates(client):
    response = client.post("/assessment", json={"latitude": 18.5, "property": PROPERTY})

    assert response.status_code == 422


def test_assessment_with_invalid_property(client):
    response = client.post(
        "/assessment", json={"address": "Pune", "property": {**PROPERTY, "roof_area": 0}}
    )

    assert response.status_code == 422


def test_assessment_with_infinite_roof_area(client):
    body = '{"address": "Mumbai", "property": {"roof_area": Infinity, "land_area": 200}}'

    response = client.post(
        "/assessment", content=body, headers={"content-type": "application/json"}
    )

    assert response.status_code == 422


def test_assessment_below_form_minimums(client):
    response = client.post(
        "/assessment",
        json={"address": "Pune", "property": {**PROPERTY, "roof_area": 0.5, "dwellers": 60}},
    )

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert "'roof_area' must be at least 10" in detail
    assert "'dwellers' must be at most 50" in detail


def test_assessment_report_pdf(client):
    response = client.post("/assessment/report", json={"address": "Pune", "property": PROPERTY})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert (
        response.headers["content-disposition"]
        == 'attachment; filename="RWH_Analysis_Sharma_Residence_2026-10-17.pdf"'
    )
    assert response.content.startswith(b"%PDF-")


def test_calculate(client):
    body = {
        "property": make_property().model_dump(mode="json"),
        "rainfall": make_rainfall(1200).model_dump(mode="json"),
        "aquifer": make_aquifer().model_dump(mode="json"),
    }

    response = client.post("/calculate", json=body)

    assert response.status_code == 200
    result = response.json()
    assert result["potential"]["annual_harvest"] == 102000
    assert result["feasibility"]["score"] == 80
    assert result["economics"]["payback_period"] == 8.8


def test_calculate_rejects_inconsistent_rainfall(client):
    rainfall = make_rainfall(1200).model_dump(mode="json")
    rainfall["annual_rainfall"] = 5000
    body = {
        "property": make_property().model_dump(mode="json"),
        "rainfall": rainfall,
        "aquifer": make_aquifer().model_dump(mode="json"),
    }

    response = client.post("/calculate", json=body)

    assert response.status_code == 422


def test_trace_id_is_echoed(client):
    response = client.get("/health", headers={"x-request-id": "abc-123"})

    assert response.headers["x-request-id"] == "abc-123"
