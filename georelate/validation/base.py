"""Base classes for the geometry validation system"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from georelate.validation.enums import ValidationErrorType


class ValidationError(Exception):
    """One problem found in one component of a geometry"""

    def __init__(
        self,
        error_type: ValidationErrorType,
        message: str,
        parameter_name: Optional[str] = None,
        value: Any = None
    ):
        """
        Args:
            error_type: Kind of problem
            message: Human-readable description
            parameter_name: Component that failed (e.g. 'Polygon.exterior')
            value: The offending value, when there is a single one
        """
        self.error_type = error_type
        self.parameter_name = parameter_name
        self.value = value
        super().__init__(message)


class ValidationResult:
    """Errors collected while checking a geometry; valid while empty"""

    def __init__(self):
        self._errors: List[ValidationError] = []

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> List[ValidationError]:
        return self._errors

    def add_error(self, error: ValidationError) -> None:
        self._errors.append(error)

    def merge(self, other: 'ValidationResult') -> None:
        """Take over every error of another result"""
        self._errors.extend(other.errors)


class BaseValidator(ABC):
    """
    Interface of the geometry checks

    Each validator is bound to the name of the component it checks, which
    prefixes its error messages.
    """

    def __init__(self, parameter_name: str):
        self._parameter_name = parameter_name

    @property
    def parameter_name(self) -> str:
        return self._parameter_name

    def _error(self, error_type: ValidationErrorType, message: str, value: Any = None) -> ValidationError:
        return ValidationError(
            error_type=error_type,
            message=f"{self._parameter_name} {message}",
            parameter_name=self._parameter_name,
            value=value
        )

    def _wrong_type(self, value: Any, expected: str) -> ValidationResult:
        result = ValidationResult()
        result.add_error(self._error(
            ValidationErrorType.INVALID_TYPE,
            f"must be a {expected}, got {type(value).__name__}"
        ))
        return result

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """
        Check a geometry component

        Args:
            value: Component to check

        Returns:
            ValidationResult holding every problem found
        """
