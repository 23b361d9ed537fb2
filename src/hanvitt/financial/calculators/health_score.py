"""
Financial health score: a 0-100 composite over six categories.

    savings     0-20   share of income saved each month
    debt        0-20   EMI burden, penalised for very large outstanding debt
    emergency   0-20   months of expenses the emergency fund covers
    insurance   0-20   health and life cover held
    investment  0-15   invests at all
    planning    0-15   keeps a budget, has a will

Unanswered questions (TriState.UNKNOWN) score the same as "no".
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from ..models import TriState

# (minimum, points), checked from the top down
SAVINGS_RATIO_BANDS = [(30, 20), (20, 16), (10, 10), (5, 5)]
EMERGENCY_MONTHS_BANDS = [(12, 20), (6, 16), (3, 10), (1, 5)]
# (EMI-to-income percentage above which, debt score)
EMI_RATIO_BANDS = [(50, 2), (40, 6), (30, 10), (20, 14)]
DEBT_SCORE_MAX = 20
HIGH_DEBT_TO_INCOME_PERCENT = 300
HIGH_DEBT_PENALTY = 6

INSURANCE_POINTS = 10
INVESTMENT_POINTS = 15
BUDGET_POINTS = 8
WILL_POINTS = 7

# Per-category score at which the category counts as healthy
HEALTHY_THRESHOLDS = {
    "savings": 16,
    "debt": 14,
    "emergency": 16,
    "insurance": 16,
    "investment": 10,
    "planning": 10,
}


@dataclass
class FinancialHealthInput:
    """Monthly figures and yes/no answers from the score questionnaire."""

    monthly_income: float
    monthly_savings: float = 0
    total_debt: float = 0
    monthly_emi: float = 0
    emergency_fund: float = 0
    has_health_insurance: TriState = TriState.UNKNOWN
    has_life_insurance: TriState = TriState.UNKNOWN
    has_investments: TriState = TriState.UNKNOWN
    has_budget: TriState = TriState.UNKNOWN
    has_will: TriState = TriState.UNKNOWN

    def __post_init__(self):
        for name in ("has_health_insurance", "has_life_insurance", "has_investments", "has_budget", "has_will"):
            setattr(self, name, TriState.from_value(getattr(self, name)))


@dataclass(frozen=True)
class ScoreBreakdown:
    savings: int = 0
    debt: int = 0
    emergency: int = 0
    insurance: int = 0
    investment: int = 0
    planning: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "savings": self.savings,
            "debt": self.debt,
            "emergency": self.emergency,
            "insurance": self.insurance,
            "investment": self.investment,
            "planning": self.planning,
        }


@dataclass
class FinancialHealthScore:
    total: int
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    @property
    def label(self) -> str:
        """Rating key: excellent / good / fair / poor."""
        if self.total >= 80:
            return "excellent"
        if self.total >= 60:
            return "good"
        if self.total >= 40:
            return "fair"
        return "poor"

    def recommendations(self) -> dict[str, bool]:
        """Map each category to True when healthy, False when it needs work."""
        scores = self.breakdown.as_dict()
        return {name: scores[name] >= threshold for name, threshold in HEALTHY_THRESHOLDS.items()}

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "label": self.label,
            "breakdown": self.breakdown.as_dict(),
            "recommendations": self.recommendations(),
        }


def _banded(value: float, bands: list[tuple[float, int]]) -> int:
    for minimum, points in bands:
        if value >= minimum:
            return points
    return 0


def savings_score(income: float, savings: float) -> int:
    ratio = min(savings / income * 100, 100)
    return _banded(ratio, SAVINGS_RATIO_BANDS)


def debt_score(income: float, emi: float, total_debt: float) -> int:
    emi_ratio = emi / income * 100
    score = DEBT_SCORE_MAX
    for above, points in EMI_RATIO_BANDS:
        if emi_ratio > above:
            score = points
            break

    debt_to_annual_income = total_debt / (income * 12) * 100
    if debt_to_annual_income > HIGH_DEBT_TO_INCOME_PERCENT:
        score = max(score - HIGH_DEBT_PENALTY, 0)
    return score


def emergency_score(income: float, savings: float, emergency_fund: float) -> int:
    """Score months of expenses covered, where expenses = income - savings.

    When savings meet or exceed income there are no expenses left to cover:
    any positive fund counts as full cover (20), an empty fund as none (0).
    """
    monthly_expenses = income - savings
    if monthly_expenses <= 0:
        logger.debug("Savings meet or exceed income; emergency cover treated as unbounded")
        return 20 if emergency_fund > 0 else 0
    return _banded(emergency_fund / monthly_expenses, EMERGENCY_MONTHS_BANDS)


def score_financial_health(answers: FinancialHealthInput) -> FinancialHealthScore:
    """Score the questionnaire. Zero or negative income scores 0 everywhere."""
    income = answers.monthly_income
    if income <= 0:
        return FinancialHealthScore(total=0, breakdown=ScoreBreakdown())

    insurance = 0
    if answers.has_health_insurance.is_yes:
        insurance += INSURANCE_POINTS
    if answers.has_life_insurance.is_yes:
        insurance += INSURANCE_POINTS

    planning = 0
    if answers.has_budget.is_yes:
        planning += BUDGET_POINTS
    if answers.has_will.is_yes:
        planning += WILL_POINTS

    breakdown = ScoreBreakdown(
        savings=savings_score(income, answers.monthly_savings),
        debt=debt_score(income, answers.monthly_emi, answers.total_debt),
        emergency=emergency_score(income, answers.monthly_savings, answers.emergency_fund),
        insurance=insurance,
        investment=INVESTMENT_POINTS if answers.has_investments.is_yes else 0,
        planning=planning,
    )
    total = min(sum(breakdown.as_dict().values()), 100)
    return FinancialHealthScore(total=total, breakdown=breakdown)
