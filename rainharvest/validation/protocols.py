"""Validation protocol definitions."""

from typing import Any, Protocol

from rainharvest.validation.errors import ValidationError


class PropertyInputValidator(Protocol):
    """Protocol for property input validation strategies.

    Allows different sources of property data (web form, CLI options, CSV rows).
    """

    def required_fields(self) -> list[str]:
        """Return list of required property fields."""
        ...

    def validate(self, data: dict[str, Any]) -> list[ValidationError]:
        """Validate raw property data.

        Args:
            data: Raw field values keyed by field name

        Returns:
            List of validation errors (empty if valid)
        """
        ...
