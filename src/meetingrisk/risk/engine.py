# meetingrisk/risk/engine.py
"""Risk engine: severity tier, waste and log-scaled intensity."""

import math
import logging
from dataclasses import dataclass
from typing import Dict

from meetingrisk.domain.models import RiskResult, Severity
from meetingrisk.utils.numeric import _nz, clamp, clamp01, lerp

logger = logging.getLogger(__name__)

DEFAULT_MAX_ANNUAL_WASTE = 250_000


@dataclass(frozen=True)
class RiskBand:
    lo: float
    hi: float

    def interpolate(self, intensity: float) -> float:
        return lerp(self.lo, self.hi, intensity)


RISK_BANDS: Dict[Severity, RiskBand] = {
    Severity.GOOD:   RiskBand(0.05, 0.30),
    Severity.MID:    RiskBand(0.36, 0.63),
    Severity.SEVERE: RiskBand(0.70, 0.98),
}


def severity_from_score(score: float) -> Severity:
    """severe for score <= 40, mid below 70, good otherwise."""
    score = _nz(score)
    if score <= 40:
        return Severity.SEVERE
    if score < 70:
        return Severity.MID
    return Severity.GOOD

def waste_pct_from_score(score: float) -> float:
    return clamp01(1 - _nz(score) / 100)

def intensity_from_annual_waste(
    annualized_waste: float, max_annual_waste: float = DEFAULT_MAX_ANNUAL_WASTE
) -> float:
    """
    log10(waste + 1) / log10(max + 1), clamped to 0..1.

    Zero waste gives 0 and waste at the cap gives 1; growth flattens
    for large amounts.
    """
    waste = _nz(annualized_waste)
    cap = _nz(max_annual_waste, DEFAULT_MAX_ANNUAL_WASTE)
    if waste + 1 <= 0:
        return 0.0
    if cap <= 0:
        # degenerate cap: any positive waste saturates
        return 1.0 if waste > 0 else 0.0
    return clamp01(math.log10(waste + 1) / math.log10(cap + 1))

def compute_risk(
    score: float,
    annualized_cost: float,
    max_annual_waste: float = DEFAULT_MAX_ANNUAL_WASTE,
) -> RiskResult:
    waste_pct = waste_pct_from_score(score)
    annualized_waste = _nz(annualized_cost) * waste_pct
    severity = severity_from_score(score)
    intensity = intensity_from_annual_waste(annualized_waste, max_annual_waste)

    band = RISK_BANDS[severity]
    risk = clamp(band.interpolate(intensity), 0.0, 1.0)

    logger.debug(
        "score=%s annualized_cost=%s -> severity=%s intensity=%.4f risk=%.4f",
        score, annualized_cost, severity.value, intensity, risk,
    )
    return RiskResult(
        risk=risk,
        severity=severity,
        waste_pct=waste_pct,
        annualized_waste=annualized_waste,
        intensity=intensity,
    )
