"""Validation of relate input geometries"""
from georelate.validation.base import BaseValidator, ValidationResult, ValidationError
from georelate.validation.enums import ValidationErrorType, ValidationType
from georelate.validation.geometry_validators import (
    FiniteCoordinatesValidator,
    LineStringValidator,
    RingValidator,
)
from georelate.validation.validator_manager import GeometryValidatorManager

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "ValidationError",
    "ValidationErrorType",
    "ValidationType",
    "FiniteCoordinatesValidator",
    "LineStringValidator",
    "RingValidator",
    "GeometryValidatorManager",
]
