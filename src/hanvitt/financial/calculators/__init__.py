"""Financial calculators: savings, retirement, insurance, health score, DIME."""

from .dime import DimeGap, calculate_dime_gap
from .formatting import amount_to_words, ceil_to, format_inr, round_half_away
from .health_cover import (
    FINSCORE_VARIANT,
    GAP_VARIANT,
    HealthCoverConfig,
    HealthCoverEstimate,
    HealthCoverInput,
    PremiumModel,
    estimate_health_cover,
    estimate_parents_cover,
)
from .health_score import FinancialHealthInput, FinancialHealthScore, ScoreBreakdown, score_financial_health
from .insurance import InsuranceProfile, InsuranceRecommendation, recommend_insurance
from .retirement import RetirementGap, estimate_retirement_corpus
from .savings import SavingsProjection, YearPoint, project_savings
from .term_cover import TermCoverEstimate, TermCoverInput, calculate_term_premium, estimate_term_cover

__all__ = [
    "FINSCORE_VARIANT",
    "GAP_VARIANT",
    "DimeGap",
    "FinancialHealthInput",
    "FinancialHealthScore",
    "HealthCoverConfig",
    "HealthCoverEstimate",
    "HealthCoverInput",
    "InsuranceProfile",
    "InsuranceRecommendation",
    "PremiumModel",
    "RetirementGap",
    "SavingsProjection",
    "ScoreBreakdown",
    "TermCoverEstimate",
    "TermCoverInput",
    "YearPoint",
    "amount_to_words",
    "calculate_dime_gap",
    "calculate_term_premium",
    "ceil_to",
    "estimate_health_cover",
    "estimate_parents_cover",
    "estimate_retirement_corpus",
    "estimate_term_cover",
    "format_inr",
    "project_savings",
    "recommend_insurance",
    "round_half_away",
    "score_financial_health",
]
