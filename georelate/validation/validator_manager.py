"""Validator manager running the geometry checks on every component (Strategy Pattern)"""
from typing import Dict, Iterator, Tuple, Type

from georelate.core import InvalidGeometryError, NonFiniteCoordinateError
from georelate.components.geometry import (
    Geometry,
    GeometryCollection,
    Line,
    LineString,
    Polygon,
    Rect,
)
from georelate.validation.base import BaseValidator, ValidationResult
from georelate.validation.enums import ValidationErrorType, ValidationType
from georelate.validation.geometry_validators import (
    FiniteCoordinatesValidator,
    LineStringValidator,
    RingValidator,
)


class GeometryValidatorManager:
    """
    Validates relate input before any graph is built.

    Single Responsibility: route each component of a geometry to the
    validators that apply to it. Stateless implementation using class methods.
    """

    # Strategy Pattern: map checks to validator classes
    _VALIDATORS: Dict[ValidationType, Type[BaseValidator]] = {
        ValidationType.FINITE_COORDINATES: FiniteCoordinatesValidator,
        ValidationType.LINE_STRING: LineStringValidator,
        ValidationType.RING: RingValidator,
    }

    @classmethod
    def get_validator(cls, validation_type: ValidationType, parameter_name: str) -> BaseValidator:
        """
        Get validator instance for a check.

        Raises:
            ValueError: If validation_type is not supported
        """
        validator_class = cls._VALIDATORS.get(validation_type)
        if validator_class is None:
            raise ValueError(
                f"No validator found for validation type: {validation_type.value}. "
                f"Supported types: {', '.join(vt.value for vt in ValidationType)}"
            )
        return validator_class(parameter_name)

    @classmethod
    def _components(cls, geometry: Geometry, name: str) -> Iterator[Tuple[str, Geometry]]:
        if isinstance(geometry, GeometryCollection):
            for i, member in enumerate(geometry.geoms):
                yield from cls._components(member, f"{name}[{i}]")
        else:
            yield name, geometry

    @classmethod
    def validate(cls, geometry: Geometry) -> ValidationResult:
        """
        Run every applicable check on a geometry.

        Args:
            geometry: Geometry to validate

        Returns:
            ValidationResult holding every error found
        """
        result = ValidationResult()
        result.merge(cls.get_validator(ValidationType.FINITE_COORDINATES, geometry.geom_type.value).validate(geometry))

        for name, component in cls._components(geometry, geometry.geom_type.value):
            if isinstance(component, LineString):
                result.merge(cls.get_validator(ValidationType.LINE_STRING, name).validate(component))
            elif isinstance(component, Line):
                result.merge(cls.get_validator(ValidationType.LINE_STRING, name).validate(component.to_line_string()))
            elif isinstance(component, Rect):
                result.merge(cls.get_validator(ValidationType.RING, name).validate(component.to_polygon().exterior))
            elif isinstance(component, Polygon):
                ring_validator = cls.get_validator(ValidationType.RING, f"{name}.exterior")
                result.merge(ring_validator.validate(component.exterior))
                for i, hole in enumerate(component.interiors):
                    hole_validator = cls.get_validator(ValidationType.RING, f"{name}.interiors[{i}]")
                    result.merge(hole_validator.validate(hole))

        return result

    @classmethod
    def ensure_valid(cls, geometry: Geometry) -> None:
        """
        Validate a geometry and raise on the first problem.

        Raises:
            NonFiniteCoordinateError: If any coordinate is NaN or infinite
            InvalidGeometryError: For any other violation, with all errors attached
        """
        result = cls.validate(geometry)
        if result.is_valid:
            return

        for error in result.errors:
            if error.error_type == ValidationErrorType.NON_FINITE_COORDINATE:
                index, coord = error.value
                raise NonFiniteCoordinateError(coord.x, coord.y, index)

        raise InvalidGeometryError(geometry.geom_type.value, errors=result.errors)
