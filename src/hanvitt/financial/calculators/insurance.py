"""Combined insurance recommendation for the financial-score questionnaire.

Bundles a family floater, an optional separate parents policy and a term
life policy, each with a verdict against cover already held.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models import CityTier
from .health_cover import (
    FINSCORE_VARIANT,
    HealthCoverConfig,
    HealthCoverEstimate,
    HealthCoverInput,
    estimate_health_cover,
    estimate_parents_cover,
)
from .term_cover import TermCoverEstimate, TermCoverInput, estimate_term_cover

DEFAULT_AGE = 30
DEFAULT_SPOUSE_AGE_GAP = 2
DEFAULT_PARENT_AGE = 60


@dataclass
class InsuranceProfile:
    """Answers from the insurance section of the questionnaire.

    Attributes:
        age: Proposer's age; defaults to 30 when not given.
        spouse_age: Defaults to two years younger than the proposer.
        eldest_parent_age: Defaults to 60.
    """

    monthly_income: float = 0
    total_debt: float = 0
    age: int | None = None
    city_tier: CityTier = CityTier.TIER1
    has_spouse: bool = True
    spouse_age: int | None = None
    num_children: int = 0
    num_parents: int = 0
    eldest_parent_age: int | None = None
    existing_health_cover: float | None = None
    existing_term_cover: float | None = None


@dataclass
class InsuranceRecommendation:
    health: HealthCoverEstimate
    term: TermCoverEstimate
    parents: HealthCoverEstimate | None = None

    @property
    def total_annual_premium(self) -> int:
        total = self.health.premium + self.term.premium
        if self.parents:
            total += self.parents.premium
        return total

    def to_dict(self) -> dict:
        return {
            "health": self.health.to_dict(),
            "parents": self.parents.to_dict() if self.parents else None,
            "term": self.term.to_dict(),
            "total_annual_premium": self.total_annual_premium,
        }


def recommend_insurance(
    profile: InsuranceProfile,
    health_config: HealthCoverConfig = FINSCORE_VARIANT,
) -> InsuranceRecommendation:
    """Size health, parents and term cover for one household."""
    age = profile.age if profile.age and profile.age > 0 else DEFAULT_AGE
    spouse_age = profile.spouse_age if profile.spouse_age else max(age - DEFAULT_SPOUSE_AGE_GAP, 0)

    health = estimate_health_cover(
        HealthCoverInput(
            adults=2 if profile.has_spouse else 1,
            children=profile.num_children,
            city_tier=profile.city_tier,
            self_age=age,
            spouse_age=spouse_age,
            existing_cover=profile.existing_health_cover,
        ),
        health_config,
    )

    parents = estimate_parents_cover(
        profile.num_parents,
        city_tier=profile.city_tier,
        eldest_parent_age=profile.eldest_parent_age or DEFAULT_PARENT_AGE,
        config=health_config,
    )

    term = estimate_term_cover(
        TermCoverInput(
            monthly_income=profile.monthly_income,
            total_debt=profile.total_debt,
            age=age,
            num_children=profile.num_children,
            existing_cover=profile.existing_term_cover,
        )
    )

    return InsuranceRecommendation(health=health, term=term, parents=parents)
