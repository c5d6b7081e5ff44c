"""Meeting quality scoring."""

from .quality import quality_score, clamp_score, CHECKLIST_FIELDS, POINTS_PER_ANSWER

__all__ = [
    "quality_score",
    "clamp_score",
    "CHECKLIST_FIELDS",
    "POINTS_PER_ANSWER",
]
