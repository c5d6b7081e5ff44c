"""Custom exceptions for the meetingrisk package."""

from .base import (
    MeetingRiskError,
    ConfigurationError,
)

from .validation import (
    ValidationError,
    ParameterValidationError,
    RecordValidationError,
)

__all__ = [
    # Base
    "MeetingRiskError",
    "ConfigurationError",

    # Validation
    "ValidationError",
    "ParameterValidationError",
    "RecordValidationError",
]
