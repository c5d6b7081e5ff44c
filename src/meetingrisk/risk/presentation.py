"""Helpers that place a risk result on the risk band and the impact heat map."""

from dataclasses import dataclass, asdict
from typing import Dict, Any

from meetingrisk.domain.models import Severity
from meetingrisk.utils.numeric import _nz, clamp, clamp01

RISK_LABELS = {
    Severity.GOOD: "Low risk",
    Severity.MID: "Medium risk",
    Severity.SEVERE: "High risk",
}

HIGH_COST_LOW_QUALITY = "high_cost_low_quality"
HIGH_COST_HIGH_QUALITY = "high_cost_high_quality"
LOW_COST_LOW_QUALITY = "low_cost_low_quality"
LOW_COST_HIGH_QUALITY = "low_cost_high_quality"


def risk_label(severity: Severity) -> str:
    return RISK_LABELS[severity]

def risk_marker_position(risk: float) -> float:
    """Fractional marker position along the low/medium/high band."""
    return clamp01(risk)


@dataclass(frozen=True)
class HeatMapPosition:
    x: float                    # quality axis, 0..1
    y: float                    # cost axis, 0..1 (1 = top, high cost)
    quality_divider: float      # x of the vertical divider
    cost_divider: float         # y of the horizontal divider
    cost_threshold: float
    quadrant: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def heat_map_position(
    score: float,
    cost: float,
    quality_threshold: float = 70,
    min_cost_threshold: float = 1000,
    max_cost_threshold: float = 5000,
) -> HeatMapPosition:
    """
    Place a meeting on the quality/cost heat map.

    The cost threshold scales with the meeting (1.25x its cost) inside
    [min_cost_threshold, max_cost_threshold]; the axis tops out at twice
    the threshold.
    """
    score = _nz(score)
    cost = _nz(cost)
    cost_threshold = max(min_cost_threshold, min(max_cost_threshold, cost * 1.25))
    cost_cap = cost_threshold * 2

    x = clamp01(score / 100)
    y = clamp01(cost / cost_cap) if cost_cap > 0 else 0.0
    quality_divider = clamp(quality_threshold / 100, 0.0, 1.0)
    cost_divider = cost_threshold / cost_cap if cost_cap > 0 else 0.0

    high_cost = y >= cost_divider
    high_quality = x >= quality_divider
    if high_cost:
        quadrant = HIGH_COST_HIGH_QUALITY if high_quality else HIGH_COST_LOW_QUALITY
    else:
        quadrant = LOW_COST_HIGH_QUALITY if high_quality else LOW_COST_LOW_QUALITY

    return HeatMapPosition(
        x=x,
        y=y,
        quality_divider=quality_divider,
        cost_divider=cost_divider,
        cost_threshold=cost_threshold,
        quadrant=quadrant,
    )
