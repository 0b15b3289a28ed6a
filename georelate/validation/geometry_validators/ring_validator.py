"""Validator for polygon rings (SRP: checks closure, point count and area only)"""
from typing import Any

from georelate.components.algorithms import winding_order
from georelate.components.geometry import GeometryOps, LineString
from georelate.validation.base import BaseValidator, ValidationResult
from georelate.validation.enums import ValidationErrorType


class RingValidator(BaseValidator):
    """
    Validates one polygon ring

    A ring must be closed and enclose a non-zero area, and needs at least
    four points once consecutive duplicates are removed. Rings that
    cross themselves or other rings are not detected.
    """

    MIN_POINTS = 4

    def __init__(self, parameter_name: str = "ring"):
        """
        Args:
            parameter_name: Name used in error messages (e.g. 'exterior', 'interiors[0]')
        """
        super().__init__(parameter_name)

    def validate(self, value: Any) -> ValidationResult:
        """
        Validate a ring given as a LineString

        Only the first problem found is reported.
        """
        if not isinstance(value, LineString):
            return self._wrong_type(value, "LineString")

        result = ValidationResult()
        if value.is_empty:
            return result

        if not value.is_closed:
            first, last = value.coordinates[0], value.coordinates[-1]
            result.add_error(self._error(
                ValidationErrorType.UNCLOSED_RING,
                f"is not closed: starts at ({first.x}, {first.y}), ends at ({last.x}, {last.y})"
            ))
        elif GeometryOps.length(value.coordinates) == 0.0:
            result.add_error(self._error(ValidationErrorType.ZERO_LENGTH_RING, "has zero length"))
        else:
            distinct = GeometryOps.remove_repeated_points(value.coordinates)
            if len(distinct) < self.MIN_POINTS:
                result.add_error(self._error(
                    ValidationErrorType.TOO_FEW_POINTS,
                    f"must have at least {self.MIN_POINTS} points, got {len(distinct)}"
                ))
            elif winding_order(distinct) is None:
                result.add_error(self._error(ValidationErrorType.COLLAPSED_RING, "has zero area"))
        return result
