"""Messaging policy."""

from .policy import meeting_message, CRITICAL_WASTE_THRESHOLD, GOOD_SCORE, MID_SCORE

__all__ = ["meeting_message", "CRITICAL_WASTE_THRESHOLD", "GOOD_SCORE", "MID_SCORE"]
