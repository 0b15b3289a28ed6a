"""Validation enums for type-safe validation"""
from enum import Enum


class ValidationErrorType(Enum):
    """Types of geometry validation errors"""
    INVALID_TYPE = "invalid_type"
    NON_FINITE_COORDINATE = "non_finite_coordinate"
    TOO_FEW_POINTS = "too_few_points"
    UNCLOSED_RING = "unclosed_ring"
    ZERO_LENGTH_RING = "zero_length_ring"
    COLLAPSED_RING = "collapsed_ring"


class ValidationType(Enum):
    """Checks run by the geometry validator manager"""
    FINITE_COORDINATES = "finite_coordinates"
    LINE_STRING = "line_string"
    RING = "ring"
