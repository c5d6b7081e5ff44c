"""Assessment runners."""

from .assessment import MeetingAssessment, assess_meeting
from .batch import BatchResult, load_scenarios, run_batch

__all__ = [
    "MeetingAssessment",
    "assess_meeting",
    "BatchResult",
    "load_scenarios",
    "run_batch",
]
