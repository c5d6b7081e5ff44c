"""Core value types for meeting cost and risk estimation."""

from dataclasses import dataclass, asdict, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class Recurrence(Enum):
    """How often a meeting happens."""
    ONE_TIME = "one-time"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: Any) -> "Recurrence":
        """Parse a recurrence; anything unrecognised is a one-time meeting."""
        if isinstance(value, cls):
            return value
        if value == cls.WEEKLY.value:
            return cls.WEEKLY
        if value == cls.MONTHLY.value:
            return cls.MONTHLY
        return cls.ONE_TIME

    @property
    def is_recurring(self) -> bool:
        return self is not Recurrence.ONE_TIME


class Currency(Enum):
    """Supported display currencies."""
    USD = "USD"
    EUR = "EUR"

    @classmethod
    def parse(cls, value: Any) -> "Currency":
        if isinstance(value, cls):
            return value
        return cls.EUR if value == cls.EUR.value else cls.USD

    @property
    def symbol(self) -> str:
        return "€" if self is Currency.EUR else "$"


class Severity(Enum):
    """Risk tier derived from the quality score."""
    GOOD = "good"
    MID = "mid"
    SEVERE = "severe"


class MessageSeverity(Enum):
    """Narrative tier chosen by the messaging policy (four levels, not the risk tier)."""
    GOOD = "good"
    MID = "mid"
    BAD = "bad"
    SEVERE = "severe"


@dataclass(frozen=True)
class MeetingInputs:
    """Raw meeting description entered by the user."""
    attendees: float = 6
    avg_salary: float = 100000
    duration_minutes: float = 60
    recurrence: Recurrence = Recurrence.ONE_TIME
    currency: Currency = Currency.USD

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MeetingInputs":
        """Build from a loose mapping (camelCase or snake_case keys)."""
        def pick(snake: str, camel: str, default):
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        return cls(
            attendees=pick("attendees", "attendees", cls.attendees),
            avg_salary=pick("avg_salary", "avgSalary", cls.avg_salary),
            duration_minutes=pick("duration_minutes", "durationMinutes", cls.duration_minutes),
            recurrence=Recurrence.parse(pick("recurrence", "recurrence", None)),
            currency=Currency.parse(pick("currency", "currency", None)),
        )


@dataclass(frozen=True)
class QualityAnswers:
    """The five-question meeting quality checklist."""
    goal_defined: bool = False
    owner_assigned: bool = False
    preread_sent: bool = False
    decision_made: bool = False
    next_actions_clear: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "QualityAnswers":
        camel = {
            "goal_defined": "goalDefined",
            "owner_assigned": "ownerAssigned",
            "preread_sent": "prereadSent",
            "decision_made": "decisionMade",
            "next_actions_clear": "nextActionsClear",
        }
        values = {}
        for f in fields(cls):
            raw = data.get(f.name, data.get(camel[f.name], False))
            # query-string style "true"/"false"
            values[f.name] = raw.lower() == "true" if isinstance(raw, str) else bool(raw)
        return cls(**values)

    def as_dict(self) -> Dict[str, bool]:
        return asdict(self)


@dataclass(frozen=True)
class CostResult:
    cost_per_meeting: float
    annualized_cost: float
    cost_per_person: float


@dataclass(frozen=True)
class RiskResult:
    risk: float                 # 0..1
    severity: Severity
    waste_pct: float            # 0..1
    annualized_waste: float
    intensity: float            # 0..1

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["severity"] = self.severity.value
        return d


@dataclass(frozen=True)
class MeetingMessage:
    headline: str
    body: str
    severity: MessageSeverity

    def as_dict(self) -> Dict[str, str]:
        return {"headline": self.headline, "body": self.body, "severity": self.severity.value}


@dataclass(frozen=True)
class SavedMeeting:
    """Persisted meeting record shape (the storage collaborator owns identity and timestamps)."""
    name: str
    attendees: float
    avg_salary: float
    duration_minutes: float
    recurrence: Recurrence
    currency: Currency
    score: float
    annualized_cost: float
    annualized_waste: float
    risk: float
    severity: Severity
    id: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        """Row dict with the column names used by the meetings table."""
        row = asdict(self)
        row.pop("id")
        row["recurrence"] = self.recurrence.value
        row["currency"] = self.currency.value
        row["severity"] = self.severity.value
        return row

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SavedMeeting":
        return cls(
            name=row.get("name", ""),
            attendees=row.get("attendees", 0),
            avg_salary=row.get("avg_salary", 0),
            duration_minutes=row.get("duration_minutes", 0),
            recurrence=Recurrence.parse(row.get("recurrence")),
            currency=Currency.parse(row.get("currency")),
            score=row.get("score", 0),
            annualized_cost=row.get("annualized_cost", 0),
            annualized_waste=row.get("annualized_waste", 0),
            risk=row.get("risk", 0),
            severity=_parse_severity(row.get("severity")),
            id=row.get("id"),
        )


def _parse_severity(value: Any) -> Severity:
    # records saved without a severity are shown as mid
    for member in Severity:
        if value == member.value or value is member:
            return member
    return Severity.MID
