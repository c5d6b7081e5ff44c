"""Meeting cost derivation and annualisation."""

import logging

from meetingrisk.domain.models import CostResult, MeetingInputs, Recurrence
from meetingrisk.utils.numeric import _nz

logger = logging.getLogger(__name__)

ANNUAL_WORK_HOURS = 2080

# occurrences per year
_MULTIPLIERS = {
    Recurrence.ONE_TIME: 1,
    Recurrence.WEEKLY: 52,
    Recurrence.MONTHLY: 12,
}


def hourly_rate_from_salary(salary: float) -> float:
    return _nz(salary) / ANNUAL_WORK_HOURS

def meeting_cost(attendees: float, salary: float, duration_minutes: float) -> float:
    """Attendee-hours times the hourly rate for one meeting instance."""
    safe_attendees = max(1, _nz(attendees))
    safe_duration = max(0, _nz(duration_minutes))
    return safe_attendees * hourly_rate_from_salary(salary) * (safe_duration / 60)

def annualized_multiplier(recurrence) -> int:
    return _MULTIPLIERS[Recurrence.parse(recurrence)]

def annualized_cost(cost: float, recurrence) -> float:
    return _nz(cost) * annualized_multiplier(recurrence)

def cost_per_person(cost: float, attendees: float) -> float:
    attendees = _nz(attendees)
    return _nz(cost) / attendees if attendees > 0 else 0.0

def cost_breakdown(inputs: MeetingInputs) -> CostResult:
    """Cost per meeting, per year and per attendee for a meeting description."""
    cost = meeting_cost(inputs.attendees, inputs.avg_salary, inputs.duration_minutes)
    result = CostResult(
        cost_per_meeting=cost,
        annualized_cost=annualized_cost(cost, inputs.recurrence),
        cost_per_person=cost_per_person(cost, inputs.attendees),
    )
    logger.debug("Cost breakdown for %s: %s", inputs, result)
    return result
