"""Checklist-based meeting quality score."""

from dataclasses import fields
from typing import Tuple

from meetingrisk.domain.models import QualityAnswers
from meetingrisk.utils.numeric import _nz, clamp

POINTS_PER_ANSWER = 20

CHECKLIST_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(QualityAnswers))


def quality_score(answers: QualityAnswers) -> int:
    """20 points per satisfied checklist item, 0..100."""
    points = sum(
        POINTS_PER_ANSWER for name in CHECKLIST_FIELDS if getattr(answers, name)
    )
    return int(clamp(points, 0, 100))

def clamp_score(score) -> float:
    """Clamp an externally supplied score into 0..100 (non-finite -> 0)."""
    return clamp(_nz(score), 0, 100)
