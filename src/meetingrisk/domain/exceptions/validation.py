"""Input validation exceptions."""

from typing import Optional, Any
from .base import MeetingRiskError

class ValidationError(MeetingRiskError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if field_name:
            self.add_context('field_name', field_name)
        if field_value is not None:
            self.add_context('field_value', str(field_value))

    def _get_default_error_code(self) -> str:
        return "VALIDATION_ERROR"


class ParameterValidationError(ValidationError):
    """Raised when a numeric or enum parameter is unusable at the boundary."""
    def __init__(
        self,
        parameter_name: str,
        parameter_value: Any,
        expected: Optional[str] = None,
        **kwargs
    ):
        message = f"Invalid parameter '{parameter_name}': {parameter_value}"
        super().__init__(message, field_name=parameter_name, field_value=parameter_value, **kwargs)
        if expected:
            self.add_context('expected', expected)
            self.add_suggestion(f"Provide {parameter_name} as {expected}")
        else:
            self.add_suggestion(f"Check the value and type of parameter '{parameter_name}'")

    def _get_default_error_code(self) -> str:
        return "PARAMETER_VALIDATION_FAILED"


class RecordValidationError(ValidationError):
    """Raised when an assessment cannot be turned into a saved meeting record."""

    def _get_default_error_code(self) -> str:
        return "RECORD_VALIDATION_FAILED"
