"""Tests for the financial health scorer."""

import pytest

from hanvitt.financial.calculators.health_score import (
    FinancialHealthInput,
    FinancialHealthScore,
    ScoreBreakdown,
    debt_score,
    emergency_score,
    savings_score,
    score_financial_health,
)
from hanvitt.financial.models import TriState


class TestScoreFinancialHealth:
    def test_zero_income_scores_zero_everywhere(self):
        answers = FinancialHealthInput(
            monthly_income=0,
            monthly_savings=50_000,
            emergency_fund=1_000_000,
            has_health_insurance=TriState.YES,
            has_investments=TriState.YES,
        )
        score = score_financial_health(answers)
        assert score.total == 0
        assert score.breakdown == ScoreBreakdown()

    def test_perfect_answers_capped_at_100(self):
        answers = FinancialHealthInput(
            monthly_income=100_000,
            monthly_savings=30_000,
            monthly_emi=10_000,
            emergency_fund=840_000,
            has_health_insurance=TriState.YES,
            has_life_insurance=TriState.YES,
            has_investments=TriState.YES,
            has_budget=TriState.YES,
            has_will=TriState.YES,
        )
        score = score_financial_health(answers)
        assert score.breakdown.as_dict() == {
            "savings": 20,
            "debt": 20,
            "emergency": 20,
            "insurance": 20,
            "investment": 15,
            "planning": 15,
        }
        assert score.total == 100

    def test_unknown_scores_like_no(self):
        unknown = score_financial_health(FinancialHealthInput(monthly_income=50_000))
        no = score_financial_health(
            FinancialHealthInput(
                monthly_income=50_000,
                has_health_insurance=TriState.NO,
                has_life_insurance=TriState.NO,
                has_investments=TriState.NO,
                has_budget=TriState.NO,
                has_will=TriState.NO,
            )
        )
        assert unknown.total == no.total

    def test_booleans_are_coerced(self):
        answers = FinancialHealthInput(monthly_income=50_000, has_budget=True, has_will=False)
        assert answers.has_budget is TriState.YES
        assert answers.has_will is TriState.NO
        assert score_financial_health(answers).breakdown.planning == 8

    def test_total_within_bounds(self):
        for income in (1, 10_000, 1_000_000):
            score = score_financial_health(FinancialHealthInput(monthly_income=income, monthly_savings=income))
            assert 0 <= score.total <= 100


class TestSavingsScore:
    @pytest.mark.parametrize(
        "savings,expected",
        [(30_000, 20), (50_000, 20), (20_000, 16), (10_000, 10), (5_000, 5), (4_999, 0), (0, 0)],
    )
    def test_bands(self, savings, expected):
        assert savings_score(100_000, savings) == expected


class TestDebtScore:
    @pytest.mark.parametrize(
        "emi,expected",
        [(0, 20), (20_000, 20), (25_000, 14), (35_000, 10), (45_000, 6), (55_000, 2)],
    )
    def test_emi_bands(self, emi, expected):
        assert debt_score(100_000, emi, 0) == expected

    def test_high_debt_penalty(self):
        # 40 lakh against 12 lakh a year is over 300%
        assert debt_score(100_000, 0, 4_000_000) == 14

    def test_penalty_never_goes_negative(self):
        assert debt_score(100_000, 55_000, 4_000_000) == 0


class TestEmergencyScore:
    @pytest.mark.parametrize(
        "fund,expected",
        [(1_200_000, 20), (600_000, 16), (300_000, 10), (100_000, 5), (99_999, 0)],
    )
    def test_month_bands(self, fund, expected):
        assert emergency_score(100_000, 0, fund) == expected

    def test_savings_cover_all_income(self):
        assert emergency_score(50_000, 50_000, 1_000) == 20
        assert emergency_score(50_000, 60_000, 0) == 0


class TestLabelAndRecommendations:
    @pytest.mark.parametrize("total,label", [(100, "excellent"), (80, "excellent"), (60, "good"), (40, "fair"), (39, "poor")])
    def test_label(self, total, label):
        assert FinancialHealthScore(total=total).label == label

    def test_recommendations(self):
        score = FinancialHealthScore(total=50, breakdown=ScoreBreakdown(savings=20, debt=10, insurance=20))
        recs = score.recommendations()
        assert recs["savings"] is True
        assert recs["debt"] is False
        assert recs["insurance"] is True
        assert recs["planning"] is False

    def test_to_dict(self):
        data = FinancialHealthScore(total=65).to_dict()
        assert data["label"] == "good"
        assert set(data["breakdown"]) == {"savings", "debt", "emergency", "insurance", "investment", "planning"}
