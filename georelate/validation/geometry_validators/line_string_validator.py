"""Validator for line strings (SRP: checks the number of distinct points only)"""
from typing import Any

from georelate.components.geometry import GeometryOps, LineString
from georelate.validation.base import BaseValidator, ValidationResult
from georelate.validation.enums import ValidationErrorType


class LineStringValidator(BaseValidator):
    """
    A non-empty line string needs at least two distinct consecutive points

    Empty line strings are valid.
    """

    MIN_POINTS = 2

    def __init__(self, parameter_name: str = "line"):
        super().__init__(parameter_name)

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, LineString):
            return self._wrong_type(value, "LineString")

        result = ValidationResult()
        if value.is_empty:
            return result

        distinct = GeometryOps.remove_repeated_points(value.coordinates)
        if len(distinct) < self.MIN_POINTS:
            result.add_error(self._error(
                ValidationErrorType.TOO_FEW_POINTS,
                f"must have at least {self.MIN_POINTS} distinct points, got {len(distinct)}"
            ))
        return result
