import math

import pytest

from meetingrisk.domain.models import Severity
from meetingrisk.risk.engine import (
    DEFAULT_MAX_ANNUAL_WASTE,
    RISK_BANDS,
    compute_risk,
    intensity_from_annual_waste,
    severity_from_score,
    waste_pct_from_score,
)


class TestSeverityFromScore:

    @pytest.mark.parametrize("score, expected", [
        (0, Severity.SEVERE),
        (20, Severity.SEVERE),
        (40, Severity.SEVERE),
        (40.01, Severity.MID),
        (60, Severity.MID),
        (69.99, Severity.MID),
        (70, Severity.GOOD),
        (80, Severity.GOOD),
        (100, Severity.GOOD),
    ])
    def test_band_boundaries(self, score, expected):
        assert severity_from_score(score) is expected

    def test_bands_partition_the_score_range(self):
        for tenth in range(0, 1001):
            score = tenth / 10
            severity = severity_from_score(score)
            if score <= 40:
                assert severity is Severity.SEVERE
            elif score < 70:
                assert severity is Severity.MID
            else:
                assert severity is Severity.GOOD


class TestIntensity:

    def test_zero_waste_is_zero(self):
        assert intensity_from_annual_waste(0) == 0.0

    def test_cap_saturates(self):
        assert intensity_from_annual_waste(DEFAULT_MAX_ANNUAL_WASTE) == pytest.approx(1.0)
        assert intensity_from_annual_waste(10 * DEFAULT_MAX_ANNUAL_WASTE) == 1.0

    def test_log_scaling(self):
        expected = math.log10(1001) / math.log10(250001)
        assert intensity_from_annual_waste(1000) == pytest.approx(expected)

    def test_small_amounts_move_intensity_more_than_large_ones(self):
        small = intensity_from_annual_waste(100) - intensity_from_annual_waste(10)
        large = intensity_from_annual_waste(150000) - intensity_from_annual_waste(100000)
        assert small > large

    def test_custom_cap(self):
        assert intensity_from_annual_waste(1000, max_annual_waste=1000) == pytest.approx(1.0)

    @pytest.mark.parametrize("waste", [-0.5, -1, -5000, float("nan"), float("-inf")])
    def test_negative_or_non_finite_waste_is_zero(self, waste):
        assert intensity_from_annual_waste(waste) == 0.0

    def test_degenerate_cap(self):
        assert intensity_from_annual_waste(10, max_annual_waste=0) == 1.0
        assert intensity_from_annual_waste(0, max_annual_waste=0) == 0.0


def test_waste_pct_is_complement_of_quality():
    assert waste_pct_from_score(0) == 1.0
    assert waste_pct_from_score(60) == pytest.approx(0.4)
    assert waste_pct_from_score(100) == 0.0
    assert waste_pct_from_score(150) == 0.0
    assert waste_pct_from_score(-20) == 1.0


class TestComputeRisk:

    def test_perfect_score_sits_at_bottom_of_good_band(self):
        result = compute_risk(100, 50000)
        assert result.waste_pct == 0
        assert result.annualized_waste == 0
        assert result.intensity == 0
        assert result.risk == pytest.approx(0.05)
        assert result.severity is Severity.GOOD

    def test_zero_score_at_cap_sits_at_top_of_severe_band(self):
        result = compute_risk(0, 250000)
        assert result.waste_pct == 1
        assert result.annualized_waste == 250000
        assert result.intensity == pytest.approx(1.0)
        assert result.risk == pytest.approx(0.98)
        assert result.severity is Severity.SEVERE

    def test_annualized_waste_is_cost_times_waste_pct(self):
        result = compute_risk(60, 14999.92)
        assert result.annualized_waste == 14999.92 * result.waste_pct

    def test_risk_interpolates_within_band(self):
        result = compute_risk(60, 20000)
        band = RISK_BANDS[Severity.MID]
        assert result.risk == pytest.approx(band.lo + (band.hi - band.lo) * result.intensity)

    def test_custom_cap_is_used(self):
        result = compute_risk(0, 1000, max_annual_waste=1000)
        assert result.intensity == pytest.approx(1.0)
        assert result.risk == pytest.approx(0.98)

    @pytest.mark.parametrize("severity_score", [100, 60, 20])
    def test_monotonic_in_waste_within_a_band(self, severity_score):
        costs = [0, 10, 100, 1000, 10000, 100000, 1000000, 10000000]
        risks = [compute_risk(severity_score, c).risk for c in costs]
        assert risks == sorted(risks)

    def test_bands_never_overlap(self):
        good, mid, severe = (RISK_BANDS[s] for s in (Severity.GOOD, Severity.MID, Severity.SEVERE))
        assert good.hi < mid.lo
        assert mid.hi < severe.lo

        worst_good = compute_risk(70, 1e12).risk
        best_mid = compute_risk(69, 0).risk
        worst_mid = compute_risk(41, 1e12).risk
        best_severe = compute_risk(40, 0).risk
        assert worst_good < best_mid
        assert worst_mid < best_severe

    @pytest.mark.parametrize("score, cost", [
        (0, 0),
        (0, -1000),
        (50, -0.5),
        (120, 1000),
        (-20, 1000),
        (float("nan"), 1000),
        (60, float("inf")),
    ])
    def test_degenerate_inputs_stay_in_range(self, score, cost):
        result = compute_risk(score, cost)
        assert 0 <= result.risk <= 1
        assert 0 <= result.waste_pct <= 1
        assert 0 <= result.intensity <= 1
        assert result.severity in set(Severity)

    def test_as_dict_uses_plain_values(self):
        d = compute_risk(100, 0).as_dict()
        assert d["severity"] == "good"
        assert set(d) == {"risk", "severity", "waste_pct", "annualized_waste", "intensity"}
