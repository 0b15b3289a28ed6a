"""Geometry validators"""
from georelate.validation.geometry_validators.finite_coordinates_validator import FiniteCoordinatesValidator
from georelate.validation.geometry_validators.line_string_validator import LineStringValidator
from georelate.validation.geometry_validators.ring_validator import RingValidator

__all__ = [
    "FiniteCoordinatesValidator",
    "LineStringValidator",
    "RingValidator",
]
