"""Validation for user-entered assessment input.

This module provides:
1. Property form validation - checks raw form values before model construction
2. Address validation - rejects empty addresses before geocoding

Domain models still enforce their own invariants through pydantic; the form
validator adds the form's stricter bounds and reports every problem at once.
"""

from rainharvest.estimators.geocoder import validate_address
from rainharvest.validation.errors import ValidationError
from rainharvest.validation.property_form import PropertyFormValidator
from rainharvest.validation.protocols import PropertyInputValidator

__all__ = [
    "ValidationError",
    "PropertyInputValidator",
    "PropertyFormValidator",
    "validate_address",
]
