"""Narrative selection for a scored meeting."""

import logging

from meetingrisk.domain.models import MeetingMessage, MessageSeverity
from meetingrisk.formatting.money import DEFAULT_LOCALE, format_money
from meetingrisk.utils.numeric import _nz

logger = logging.getLogger(__name__)

CRITICAL_WASTE_THRESHOLD = 2000
GOOD_SCORE = 80
MID_SCORE = 50


def meeting_message(
    score: float,
    waste_dollars: float,
    annualized_waste: float,
    cost: float,
    annualized_cost: float,
    currency,
    *,
    locale: str = DEFAULT_LOCALE,
    critical_waste_threshold: float = CRITICAL_WASTE_THRESHOLD,
    good_score: float = GOOD_SCORE,
    mid_score: float = MID_SCORE,
) -> MeetingMessage:
    """Pick one of four narratives; rules are checked in order, first match wins."""
    score = _nz(score)
    waste_dollars = _nz(waste_dollars)

    def money(amount):
        return format_money(amount, currency, locale=locale)

    if score < mid_score and waste_dollars > critical_waste_threshold:
        message = MeetingMessage(
            severity=MessageSeverity.SEVERE,
            headline="Critical Efficiency Risk",
            body=(
                f"Quality is low while spend is high. Current meeting cost is {money(cost)}, "
                f"with an annualized burn of {money(annualized_cost)}. "
                f"You likely burned {money(waste_dollars)} with limited measurable outcome."
            ),
        )
    elif score >= good_score:
        message = MeetingMessage(
            severity=MessageSeverity.GOOD,
            headline="Strong Meeting Discipline",
            body=(
                f"Execution quality is high and waste is contained at {money(waste_dollars)} "
                f"per meeting ({money(annualized_waste)} annualized). Keep this operating standard."
            ),
        )
    elif score >= mid_score:
        message = MeetingMessage(
            severity=MessageSeverity.MID,
            headline="Moderate Performance, Clear Headroom",
            body=(
                "The meeting structure is functional but leaves measurable value on the table. "
                f"Estimated waste is {money(waste_dollars)} per meeting and "
                f"{money(annualized_waste)} annually."
            ),
        )
    else:
        message = MeetingMessage(
            severity=MessageSeverity.BAD,
            headline="Low Quality Relative to Cost",
            body=(
                "Core decision hygiene is weak for this spend level. "
                f"Estimated waste is {money(waste_dollars)} per meeting and "
                f"{money(annualized_waste)} annualized."
            ),
        )

    logger.debug("score=%s waste=%s -> %s", score, waste_dollars, message.severity.value)
    return message
