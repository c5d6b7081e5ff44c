# results/assemblers.py
"""Assemble persisted meeting records and the saved-meetings overview."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from meetingrisk.domain.exceptions import RecordValidationError
from meetingrisk.domain.models import Currency, SavedMeeting
from meetingrisk.formatting.money import DEFAULT_LOCALE, format_money
from meetingrisk.runners.assessment import MeetingAssessment

logger = logging.getLogger(__name__)

FREE_MEETING_LIMIT = 3


def build_saved_meeting(
    name: str, assessment: MeetingAssessment, meeting_id: Optional[str] = None
) -> SavedMeeting:
    """
    Turn an assessment into the record handed to the storage collaborator.

    Only recurring (weekly or monthly) meetings are saved.
    """
    name = (name or "").strip()
    if not name:
        raise RecordValidationError(
            "Meeting name must not be empty", field_name="name"
        ).add_suggestion("Give the meeting a short descriptive name")

    inputs = assessment.inputs
    if not inputs.recurrence.is_recurring:
        raise RecordValidationError(
            "Only recurring meetings can be saved",
            field_name="recurrence",
            field_value=inputs.recurrence.value,
        ).add_suggestion("Choose a weekly or monthly recurrence")

    return SavedMeeting(
        name=name,
        attendees=inputs.attendees,
        avg_salary=inputs.avg_salary,
        duration_minutes=inputs.duration_minutes,
        recurrence=inputs.recurrence,
        currency=inputs.currency,
        score=assessment.score,
        annualized_cost=assessment.cost.annualized_cost,
        annualized_waste=assessment.risk.annualized_waste,
        risk=assessment.risk.risk,
        severity=assessment.risk.severity,
        id=meeting_id,
    )


def free_limit_reached(meeting_count: int, limit: int = FREE_MEETING_LIMIT) -> bool:
    return meeting_count >= limit


@dataclass
class PortfolioSummary:
    meetings: List[SavedMeeting] = field(default_factory=list)
    total_annualized_cost: float = 0.0
    total_annualized_waste: float = 0.0
    display_currency: Currency = Currency.USD

    @property
    def meeting_count(self) -> int:
        return len(self.meetings)

    @property
    def highest_cost(self) -> Optional[SavedMeeting]:
        return self.meetings[0] if self.meetings else None

    def as_dict(self, locale: str = DEFAULT_LOCALE) -> Dict[str, Any]:
        top = self.highest_cost
        return {
            "meeting_count": self.meeting_count,
            "display_currency": self.display_currency.value,
            "total_annualized_cost": self.total_annualized_cost,
            "total_annualized_waste": self.total_annualized_waste,
            "total_annualized_cost_display": format_money(
                self.total_annualized_cost, self.display_currency, locale=locale
            ),
            "total_annualized_waste_display": format_money(
                self.total_annualized_waste, self.display_currency, locale=locale
            ),
            "highest_cost": top.to_row() if top else None,
            "meetings": [m.to_row() for m in self.meetings],
        }


def summarize_portfolio(
    records: Iterable[Union[SavedMeeting, Mapping[str, Any]]]
) -> PortfolioSummary:
    """
    Order saved meetings by annualized cost (highest first) and total them.

    Totals are plain sums; the display currency is that of the most
    expensive meeting (USD when there are none).
    """
    meetings = [
        r if isinstance(r, SavedMeeting) else SavedMeeting.from_row(r) for r in records
    ]
    meetings.sort(key=lambda m: m.annualized_cost, reverse=True)

    currencies = {m.currency for m in meetings}
    if len(currencies) > 1:
        logger.warning("Summing meetings in mixed currencies: %s", sorted(c.value for c in currencies))

    return PortfolioSummary(
        meetings=meetings,
        total_annualized_cost=sum(m.annualized_cost for m in meetings),
        total_annualized_waste=sum(m.annualized_waste for m in meetings),
        display_currency=meetings[0].currency if meetings else Currency.USD,
    )
