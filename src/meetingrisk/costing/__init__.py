"""Meeting cost model."""

from .calculations import (
    ANNUAL_WORK_HOURS,
    hourly_rate_from_salary,
    meeting_cost,
    annualized_multiplier,
    annualized_cost,
    cost_per_person,
    cost_breakdown,
)

__all__ = [
    "ANNUAL_WORK_HOURS",
    "hourly_rate_from_salary",
    "meeting_cost",
    "annualized_multiplier",
    "annualized_cost",
    "cost_per_person",
    "cost_breakdown",
]
