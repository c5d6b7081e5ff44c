"""Risk engine and presentation helpers."""

from .engine import (
    DEFAULT_MAX_ANNUAL_WASTE,
    RISK_BANDS,
    RiskBand,
    compute_risk,
    intensity_from_annual_waste,
    severity_from_score,
    waste_pct_from_score,
)
from .presentation import (
    HeatMapPosition,
    heat_map_position,
    risk_label,
    risk_marker_position,
)

__all__ = [
    "DEFAULT_MAX_ANNUAL_WASTE",
    "RISK_BANDS",
    "RiskBand",
    "compute_risk",
    "intensity_from_annual_waste",
    "severity_from_score",
    "waste_pct_from_score",
    "HeatMapPosition",
    "heat_map_position",
    "risk_label",
    "risk_marker_position",
]
