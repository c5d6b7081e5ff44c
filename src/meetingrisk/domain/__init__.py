"""Core domain models."""

from .models import (
    Recurrence,
    Currency,
    Severity,
    MessageSeverity,
    MeetingInputs,
    QualityAnswers,
    CostResult,
    RiskResult,
    MeetingMessage,
    SavedMeeting,
)

__all__ = [
    "Recurrence",
    "Currency",
    "Severity",
    "MessageSeverity",
    "MeetingInputs",
    "QualityAnswers",
    "CostResult",
    "RiskResult",
    "MeetingMessage",
    "SavedMeeting",
]
