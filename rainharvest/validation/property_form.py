"""Property form validator for raw, user-entered property data."""

from typing import Any

from rainharvest.models.enums import BuildingType, RoofType, SoilType
from rainharvest.validation.errors import ValidationError

# Bounds enforced by the property form, stricter than the domain model
MIN_DWELLERS = 1
MAX_DWELLERS = 50
MIN_ROOF_AREA_SQ_METRES = 10.0
MIN_LAND_AREA_SQ_METRES = 50.0

_CHOICES: dict[str, tuple[str, ...]] = {
    "roof_type": tuple(member.value for member in RoofType),
    "soil_type": tuple(member.value for member in SoilType),
    "building_type": tuple(member.value for member in BuildingType),
}


class PropertyFormValidator:
    """Validates property data as submitted on the assessment form.

    Collects every problem instead of stopping at the first, so the form can
    highlight all offending fields at once. Optional choice fields fall back
    to model defaults when omitted. The owner name is optional.

    The orchestrator runs this over every assessment request before any
    estimation, so the CLI and API both enforce the form bounds.
    """

    def required_fields(self) -> list[str]:
        return ["dwellers", "roof_area", "land_area"]

    def validate(self, data: dict[str, Any]) -> list[ValidationError]:
        """Validate raw property data.

        Args:
            data: Field values keyed by snake_case field name

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        missing = [
            field
            for field in self.required_fields()
            if data.get(field) is None or (isinstance(data.get(field), str) and not data[field].strip())
        ]
        if missing:
            errors.append(
                ValidationError(
                    message=f"Missing required fields: {', '.join(missing)}",
                    field="fields",
                )
            )
            return errors

        errors.extend(self._check_range("dwellers", data["dwellers"], MIN_DWELLERS, MAX_DWELLERS))
        errors.extend(self._check_range("roof_area", data["roof_area"], MIN_ROOF_AREA_SQ_METRES))
        errors.extend(self._check_range("land_area", data["land_area"], MIN_LAND_AREA_SQ_METRES))

        for field, choices in _CHOICES.items():
            value = data.get(field)
            if value is not None and str(value).lower() not in choices:
                errors.append(
                    ValidationError(
                        message=f"Invalid {field} '{value}'; expected one of {', '.join(choices)}",
                        field=field,
                    )
                )

        return errors

    def _check_range(
        self,
        field: str,
        value: Any,
        minimum: float,
        maximum: float | None = None,
    ) -> list[ValidationError]:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return [ValidationError(message=f"'{field}' must be a number, got {value!r}", field=field)]

        if number < minimum:
            return [ValidationError(message=f"'{field}' must be at least {minimum:g}", field=field)]
        if maximum is not None and number > maximum:
            return [ValidationError(message=f"'{field}' must be at most {maximum:g}", field=field)]
        return []
