"""End-to-end assessment of a single meeting."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from meetingrisk.config.settings import Settings
from meetingrisk.costing.calculations import cost_breakdown
from meetingrisk.domain.models import (
    CostResult,
    MeetingInputs,
    MeetingMessage,
    QualityAnswers,
    RiskResult,
)
from meetingrisk.messaging.policy import meeting_message
from meetingrisk.risk.engine import compute_risk
from meetingrisk.risk.presentation import HeatMapPosition, heat_map_position, risk_label
from meetingrisk.scoring.quality import clamp_score, quality_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeetingAssessment:
    """Everything the results view needs for one meeting."""
    inputs: MeetingInputs
    score: float
    cost: CostResult
    waste_per_meeting: float
    risk: RiskResult
    message: MeetingMessage
    heat_map: HeatMapPosition

    @property
    def risk_label(self) -> str:
        return risk_label(self.risk.severity)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "inputs": {
                "attendees": self.inputs.attendees,
                "avg_salary": self.inputs.avg_salary,
                "duration_minutes": self.inputs.duration_minutes,
                "recurrence": self.inputs.recurrence.value,
                "currency": self.inputs.currency.value,
            },
            "score": self.score,
            "cost_per_meeting": self.cost.cost_per_meeting,
            "annualized_cost": self.cost.annualized_cost,
            "cost_per_person": self.cost.cost_per_person,
            "waste_per_meeting": self.waste_per_meeting,
            "risk": self.risk.as_dict(),
            "risk_label": self.risk_label,
            "message": self.message.as_dict(),
            "heat_map": self.heat_map.as_dict(),
        }


def assess_meeting(
    inputs: MeetingInputs,
    answers: Optional[QualityAnswers] = None,
    score: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> MeetingAssessment:
    """
    Score, cost, risk and narrative for one meeting.

    An explicit score takes precedence over the checklist answers; with
    neither, the meeting scores 0. Settings only supply thresholds, the
    computation itself never reads global state.
    """
    settings = settings or Settings()

    checklist_score = quality_score(answers or QualityAnswers())
    score = clamp_score(checklist_score if score is None else score)

    cost = cost_breakdown(inputs)
    waste_per_meeting = cost.cost_per_meeting * (1 - score / 100)

    risk = compute_risk(
        score,
        cost.annualized_cost,
        max_annual_waste=settings.risk.max_annual_waste,
    )
    message = meeting_message(
        score,
        waste_per_meeting,
        risk.annualized_waste,
        cost.cost_per_meeting,
        cost.annualized_cost,
        inputs.currency,
        locale=settings.formatting.locale,
        critical_waste_threshold=settings.messaging.critical_waste_threshold,
        good_score=settings.messaging.good_score,
        mid_score=settings.messaging.mid_score,
    )

    logger.debug(
        "Assessed meeting: score=%s annualized_cost=%.2f risk=%.3f (%s) message=%s",
        score, cost.annualized_cost, risk.risk, risk.severity.value, message.severity.value,
    )
    return MeetingAssessment(
        inputs=inputs,
        score=score,
        cost=cost,
        waste_per_meeting=waste_per_meeting,
        risk=risk,
        message=message,
        heat_map=heat_map_position(score, cost.cost_per_meeting),
    )
