import pytest

from meetingrisk.domain.exceptions import RecordValidationError
from meetingrisk.domain.models import Currency, MeetingInputs, Recurrence, SavedMeeting, Severity
from meetingrisk.results.assemblers import (
    FREE_MEETING_LIMIT,
    build_saved_meeting,
    free_limit_reached,
    summarize_portfolio,
)
from meetingrisk.runners.assessment import assess_meeting


def _assessment(recurrence=Recurrence.WEEKLY, score=60, **kwargs):
    return assess_meeting(MeetingInputs(recurrence=recurrence, **kwargs), score=score)


def _row(name, annualized_cost, annualized_waste, currency="USD"):
    return {
        "id": name.lower(),
        "name": name,
        "attendees": 5,
        "avg_salary": 90000,
        "duration_minutes": 30,
        "recurrence": "weekly",
        "currency": currency,
        "score": 60,
        "annualized_cost": annualized_cost,
        "annualized_waste": annualized_waste,
        "risk": 0.5,
        "severity": "mid",
    }


class TestBuildSavedMeeting:

    def test_copies_computed_fields(self):
        assessment = _assessment()
        record = build_saved_meeting("  Weekly sync ", assessment, meeting_id="m1")

        assert isinstance(record, SavedMeeting)
        assert record.name == "Weekly sync"
        assert record.id == "m1"
        assert record.recurrence is Recurrence.WEEKLY
        assert record.score == 60
        assert record.annualized_cost == assessment.cost.annualized_cost
        assert record.annualized_waste == assessment.risk.annualized_waste
        assert record.risk == assessment.risk.risk
        assert record.severity is Severity.MID

    def test_one_time_meetings_cannot_be_saved(self):
        with pytest.raises(RecordValidationError) as exc_info:
            build_saved_meeting("Kickoff", _assessment(recurrence=Recurrence.ONE_TIME))
        assert exc_info.value.context["field_name"] == "recurrence"
        assert exc_info.value.context["field_value"] == "one-time"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_name_required(self, name):
        with pytest.raises(RecordValidationError):
            build_saved_meeting(name, _assessment())


def test_free_limit():
    assert not free_limit_reached(FREE_MEETING_LIMIT - 1)
    assert free_limit_reached(FREE_MEETING_LIMIT)
    assert free_limit_reached(1, limit=1)


class TestSummarizePortfolio:

    def test_orders_by_annualized_cost_and_totals(self):
        summary = summarize_portfolio([
            _row("Standup", 5000, 1000),
            _row("Planning", 20000, 8000, currency="EUR"),
            _row("Retro", 12000, 2000),
        ])

        assert [m.name for m in summary.meetings] == ["Planning", "Retro", "Standup"]
        assert summary.meeting_count == 3
        assert summary.total_annualized_cost == 37000
        assert summary.total_annualized_waste == 11000
        assert summary.highest_cost.name == "Planning"
        assert summary.display_currency is Currency.EUR

    def test_accepts_saved_meeting_objects(self):
        meeting = SavedMeeting.from_row(_row("Standup", 5000, 1000))
        summary = summarize_portfolio([meeting])
        assert summary.meetings == [meeting]

    def test_empty(self):
        summary = summarize_portfolio([])
        assert summary.meeting_count == 0
        assert summary.highest_cost is None
        assert summary.display_currency is Currency.USD
        d = summary.as_dict()
        assert d["highest_cost"] is None
        assert d["total_annualized_cost_display"] == "$0.00"

    def test_as_dict_formats_totals(self):
        d = summarize_portfolio([_row("Planning", 20000, 8000)]).as_dict()
        assert d["total_annualized_cost_display"] == "$20,000.00"
        assert d["total_annualized_waste_display"] == "$8,000.00"
        assert d["highest_cost"]["name"] == "Planning"
        assert len(d["meetings"]) == 1
