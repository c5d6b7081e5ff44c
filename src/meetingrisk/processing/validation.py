"""Boundary validation for raw meeting input."""

import math
import logging
from typing import Any, Mapping, Optional

from meetingrisk.domain.exceptions import ParameterValidationError
from meetingrisk.domain.models import Currency, MeetingInputs, QualityAnswers, Recurrence

logger = logging.getLogger(__name__)

class InputValidator:
    """Validates raw (file or command line) values before they reach the core."""

    NUMERIC_FIELDS = {
        "attendees": ("attendees", "attendees"),
        "avg_salary": ("avg_salary", "avgSalary"),
        "duration_minutes": ("duration_minutes", "durationMinutes"),
    }

    @staticmethod
    def validate_number(name: str, value: Any, minimum: float = 0.0) -> float:
        """Return value as a finite float >= minimum or raise ParameterValidationError."""
        if isinstance(value, bool):
            raise ParameterValidationError(name, value, expected="a number")
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise ParameterValidationError(name, value, expected="a number") from e
        if not math.isfinite(number):
            raise ParameterValidationError(name, value, expected="a finite number")
        if number < minimum:
            raise ParameterValidationError(name, value, expected=f"a number >= {minimum:g}")
        return number

    @staticmethod
    def validate_score(value: Any) -> Optional[float]:
        if value is None:
            return None
        score = InputValidator.validate_number("score", value)
        if score > 100:
            raise ParameterValidationError("score", value, expected="a number between 0 and 100")
        return score

    @classmethod
    def parse_meeting_inputs(cls, data: Mapping[str, Any]) -> MeetingInputs:
        """Validate a loose mapping and build MeetingInputs from it."""
        values = {}
        for field_name, (snake, camel) in cls.NUMERIC_FIELDS.items():
            raw = data.get(snake, data.get(camel))
            if raw is None:
                values[field_name] = getattr(MeetingInputs, field_name)
            else:
                values[field_name] = cls.validate_number(field_name, raw)

        raw_recurrence = data.get("recurrence")
        recurrence = Recurrence.parse(raw_recurrence)
        if raw_recurrence not in (None, recurrence, recurrence.value):
            logger.warning("Unrecognised recurrence %r treated as one-time", raw_recurrence)

        raw_currency = data.get("currency")
        currency = Currency.parse(raw_currency)
        if raw_currency not in (None, currency, currency.value):
            logger.warning("Unrecognised currency %r treated as USD", raw_currency)

        return MeetingInputs(recurrence=recurrence, currency=currency, **values)

    @staticmethod
    def parse_answers(data: Mapping[str, Any]) -> QualityAnswers:
        """Checklist answers from a nested "answers" object or the row itself."""
        answers = data.get("answers")
        if answers is None:
            answers = data
        if not isinstance(answers, Mapping):
            raise ParameterValidationError("answers", answers, expected="an object")
        return QualityAnswers.from_mapping(answers)
