"""Unit tests for property form validation."""

import pytest

from rainharvest.validation import PropertyFormValidator


@pytest.fixture
def validator():
    return PropertyFormValidator()


@pytest.fixture
def form_data():
    return {
        "name": "Sharma Residence",
        "dwellers": 4,
        "roof_area": 100,
        "roof_type": "concrete",
        "soil_type": "loamy",
        "land_area": 200,
        "building_type": "residential",
    }


def test_valid_form(validator, form_data):
    assert validator.validate(form_data) == []


def test_missing_fields_reported_together(validator, form_data):
    del form_data["land_area"]
    form_data["dwellers"] = None

    errors = validator.validate(form_data)

    assert len(errors) == 1
    assert errors[0].field == "fields"
    assert errors[0].message == "Missing required fields: dwellers, land_area"


def test_name_is_optional(validator, form_data):
    form_data["name"] = ""

    assert validator.validate(form_data) == []


@pytest.mark.parametrize(
    "field,value,message",
    [
        ("dwellers", 0, "'dwellers' must be at least 1"),
        ("dwellers", 51, "'dwellers' must be at most 50"),
        ("roof_area", 9.5, "'roof_area' must be at least 10"),
        ("land_area", 49, "'land_area' must be at least 50"),
        ("roof_area", "abc", "'roof_area' must be a number, got 'abc'"),
    ],
)
def test_range_errors(validator, form_data, field, value, message):
    form_data[field] = value

    errors = validator.validate(form_data)

    assert [(error.field, error.message) for error in errors] == [(field, message)]


def test_numeric_strings_are_accepted(validator, form_data):
    form_data["roof_area"] = "120.5"

    assert validator.validate(form_data) == []


def test_choice_fields_are_case_insensitive(validator, form_data):
    form_data["roof_type"] = "glass"
    form_data["soil_type"] = "Clay"

    errors = validator.validate(form_data)

    assert len(errors) == 1
    assert errors[0].field == "roof_type"


def test_optional_choices_may_be_omitted(validator, form_data):
    del form_data["roof_type"]
    del form_data["building_type"]

    assert validator.validate(form_data) == []


def test_all_errors_collected(validator, form_data):
    form_data["dwellers"] = 100
    form_data["land_area"] = 10
    form_data["building_type"] = "castle"

    fields = {error.field for error in validator.validate(form_data)}

    assert fields == {"dwellers", "land_area", "building_type"}
