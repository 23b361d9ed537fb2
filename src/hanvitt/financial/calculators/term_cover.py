"""
Term life cover estimator using the human-life-value method.

Cover = the larger of (income x working years left, capped at 25) and
(income x 10), plus outstanding debt, plus 25 lakh per child for education.
Rounded up to 5 lakh and bounded to [50 lakh, 50 crore].

Pure math; loguru is the only dependency.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from ..models import CoverVerdict, assess_cover
from .formatting import ceil_to, round_half_away
from .rate_tables import (
    LAKH,
    TERM_CHILD_EDUCATION_COVER,
    TERM_COVER_CAP,
    TERM_COVER_FLOOR,
    TERM_COVER_ROUNDING,
    TERM_INCOME_REPLACEMENT_YEARS,
    TERM_MAX_HLV_MULTIPLIER,
    TERM_MIN_WORKING_YEARS,
    TERM_PREMIUM_CAP_THRESHOLD,
    TERM_PREMIUM_FLOOR,
    TERM_PREMIUM_MAX_COVER_RATIO,
    TERM_PREMIUM_ROUNDING,
    TERM_RATE_PER_LAKH,
    TERM_RETIREMENT_AGE,
    TERM_VOLUME_DISCOUNT,
    lookup_band,
)


@dataclass
class TermCoverInput:
    monthly_income: float
    total_debt: float = 0
    age: int = 30
    num_children: int = 0
    existing_cover: float | None = None


@dataclass
class TermCoverEstimate:
    """Recommended term cover with the components that sized it.

    When income is zero the component fields are all 0 and ``cover`` is the floor.
    """

    cover: int
    premium: int
    verdict: CoverVerdict
    hlv_cover: float = 0
    income_replacement: float = 0
    debt_cover: float = 0
    child_education_cover: float = 0
    reasons: list[str] = field(default_factory=list)

    @property
    def total_need(self) -> float:
        return max(self.hlv_cover, self.income_replacement) + self.debt_cover + self.child_education_cover

    def to_dict(self) -> dict:
        return {
            "cover": self.cover,
            "premium": self.premium,
            "hlv_cover": self.hlv_cover,
            "income_replacement": self.income_replacement,
            "debt_cover": self.debt_cover,
            "child_education_cover": self.child_education_cover,
            "reasons": list(self.reasons),
            "gap": self.verdict.gap,
            "sufficient": self.verdict.sufficient,
        }


def calculate_term_premium(cover: int, age: int) -> int:
    """Annual premium for ``cover`` at ``age``.

    Per-lakh age rate with a volume discount above 1 crore, rounded up to
    100, floored at 5,000. Premiums over 5 lakh are held to 3% of cover.
    """
    cover_in_lakhs = cover / LAKH
    rate = lookup_band(TERM_RATE_PER_LAKH, age)
    discount = lookup_band(TERM_VOLUME_DISCOUNT, cover_in_lakhs)

    premium = round_half_away(cover_in_lakhs * rate * discount)
    premium = max(ceil_to(premium, TERM_PREMIUM_ROUNDING), TERM_PREMIUM_FLOOR)
    if premium > TERM_PREMIUM_CAP_THRESHOLD:
        premium = min(premium, round_half_away(cover * TERM_PREMIUM_MAX_COVER_RATIO))
    return premium


def estimate_term_cover(profile: TermCoverInput) -> TermCoverEstimate:
    """Recommend a term life sum assured and its premium.

    Zero or negative income skips the formula and returns the 50 lakh floor.
    """
    annual_income = profile.monthly_income * 12

    if annual_income <= 0:
        logger.debug("No income supplied; recommending minimum term cover")
        cover = TERM_COVER_FLOOR
        return TermCoverEstimate(
            cover=cover,
            premium=calculate_term_premium(cover, profile.age),
            verdict=assess_cover(cover, profile.existing_cover),
            reasons=["minimum"],
        )

    years_to_retirement = max(TERM_RETIREMENT_AGE - profile.age, TERM_MIN_WORKING_YEARS)
    hlv_multiplier = min(years_to_retirement, TERM_MAX_HLV_MULTIPLIER)
    hlv_cover = annual_income * hlv_multiplier
    income_replacement = annual_income * TERM_INCOME_REPLACEMENT_YEARS
    child_education = max(0, profile.num_children) * TERM_CHILD_EDUCATION_COVER

    total_need = max(hlv_cover, income_replacement) + profile.total_debt + child_education
    cover = min(max(ceil_to(total_need, TERM_COVER_ROUNDING), TERM_COVER_FLOOR), TERM_COVER_CAP)

    reasons = ["income"]
    if profile.total_debt > 0:
        reasons.append("debt")
    if profile.num_children > 0:
        reasons.append("dependents")
    reasons.append("hlv")

    return TermCoverEstimate(
        cover=cover,
        premium=calculate_term_premium(cover, profile.age),
        verdict=assess_cover(cover, profile.existing_cover),
        hlv_cover=hlv_cover,
        income_replacement=income_replacement,
        debt_cover=profile.total_debt,
        child_education_cover=child_education,
        reasons=reasons,
    )
