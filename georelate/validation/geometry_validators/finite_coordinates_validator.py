"""Validator for coordinate values (SRP: rejects NaN and infinite coordinates only)"""
from typing import Any

from georelate.components.geometry import Geometry, GeometryOps
from georelate.validation.base import BaseValidator, ValidationResult
from georelate.validation.enums import ValidationErrorType


class FiniteCoordinatesValidator(BaseValidator):
    """Checks that every coordinate of a geometry is finite"""

    def __init__(self, parameter_name: str = "coordinates"):
        super().__init__(parameter_name)

    def validate(self, value: Any) -> ValidationResult:
        """
        Returns:
            ValidationResult with one error per non-finite coordinate, whose
            value is the (index, coordinate) pair
        """
        if not isinstance(value, Geometry):
            return self._wrong_type(value, "Geometry")

        result = ValidationResult()
        for i, coord in enumerate(value.coords()):
            if not GeometryOps.is_finite(coord):
                result.add_error(self._error(
                    ValidationErrorType.NON_FINITE_COORDINATE,
                    f"coordinate {i} is not finite: ({coord.x}, {coord.y})",
                    value=(i, coord)
                ))
        return result
