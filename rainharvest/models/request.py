"""Assessment request schema shared by the API and CLI."""

from pydantic import BaseModel, Field, model_validator

from rainharvest.models.domain import PropertyAttributes


class AssessmentRequest(BaseModel):
    """One feasibility assessment request.

    Either an address or a latitude/longitude pair locates the property. When
    both are given the coordinates win (device location overrides typed text).

    Attributes:
        address: Free-text address to geocode
        latitude: Device-reported latitude
        longitude: Device-reported longitude
        property: Property attributes from the form
    """

    address: str | None = Field(default=None, description="Address to geocode")
    latitude: float | None = Field(default=None, ge=-90, le=90, description="Latitude")
    longitude: float | None = Field(default=None, ge=-180, le=180, description="Longitude")
    property: PropertyAttributes = Field(..., description="Property attributes")

    model_config = {
        "json_schema_extra": {
            "example": {
                "address": "Mumbai",
                "property": {
                    "name": "Sharma Residence",
                    "dwellers": 4,
                    "roof_area": 100,
                    "roof_type": "concrete",
                    "soil_type": "loamy",
                    "land_area": 200,
                    "building_type": "residential",
                },
            }
        }
    }

    @model_validator(mode="after")
    def coordinates_come_in_pairs(self) -> "AssessmentRequest":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be given together")
        return self

    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None
