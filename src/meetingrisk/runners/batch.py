"""Batch assessment of many meeting scenarios."""

import os
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from tqdm import tqdm

from meetingrisk.config.settings import Settings
from meetingrisk.domain.exceptions import ValidationError
from meetingrisk.processing.validation import InputValidator
from meetingrisk.runners.assessment import MeetingAssessment, assess_meeting

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Assessments that succeeded plus per-row validation errors."""
    assessments: List[Dict[str, Any]] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def n_rows(self) -> int:
        return len(self.assessments) + len(self.errors)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "n_rows": self.n_rows,
            "n_assessed": len(self.assessments),
            "n_errors": len(self.errors),
            "assessments": self.assessments,
            "errors": self.errors,
        }


def load_scenarios(path: Path) -> List[Mapping[str, Any]]:
    """Read a JSON list of meeting scenarios (or {"meetings": [...]})."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, Mapping):
        data = data.get("meetings", [])
    if not isinstance(data, list):
        raise ValidationError(
            f"Expected a list of meetings in {path}",
            field_name="meetings",
        ).add_suggestion('Provide a JSON array or an object with a "meetings" array')
    return data


def assess_row(row: Mapping[str, Any], settings: Settings) -> MeetingAssessment:
    inputs = InputValidator.parse_meeting_inputs(row)
    answers = InputValidator.parse_answers(row)
    score = InputValidator.validate_score(row.get("score"))
    return assess_meeting(inputs, answers=answers, score=score, settings=settings)


def run_batch(
    rows: Iterable[Mapping[str, Any]],
    settings: Optional[Settings] = None,
    show_progress: Optional[bool] = None,
) -> BatchResult:
    """Assess every row; invalid rows are reported, not fatal."""
    settings = settings or Settings()
    rows = list(rows)
    if show_progress is None:
        show_progress = not os.getenv('NO_PROGRESS', '').lower() in ['1', 'true', 'yes']

    result = BatchResult()
    for index, row in enumerate(tqdm(rows, desc="Meetings", unit="meeting", disable=not show_progress)):
        if not isinstance(row, Mapping):
            result.errors.append({
                "index": index,
                "name": None,
                "error_code": "VALIDATION_ERROR",
                "message": "Meeting entry must be an object",
            })
            continue
        name = row.get("name")
        try:
            assessment = assess_row(row, settings)
        except ValidationError as e:
            logger.warning("Row %d (%s) rejected: %s", index, name, e.message)
            result.errors.append({
                "index": index,
                "name": name,
                "error_code": e.error_code,
                "message": e.message,
                "context": e.context,
            })
            continue

        entry = assessment.as_dict()
        entry["index"] = index
        entry["name"] = name
        result.assessments.append(entry)

    logger.info(
        "Batch complete: %d assessed, %d rejected", len(result.assessments), len(result.errors)
    )
    return result
