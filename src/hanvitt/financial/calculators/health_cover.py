"""
Health insurance sum-insured and premium estimator.

One multiplier pipeline serves both calculators on the site:

- GAP_VARIANT: the protection-gap page. Larger self base, pre-existing
  condition loading, planned-procedure floor, heavy medical spend bump,
  no upper cap, and a proportional premium estimate.
- FINSCORE_VARIANT: the financial-score page. Age-loaded cover capped at
  5 crore, premium priced from the per-lakh age table with volume, family
  and city adjustments. Parents are priced on their own policy via
  ``estimate_parents_cover``.

Pipeline order (each step is recorded as a breakdown line):
    base -> city tier -> medical spend bump -> age -> pre-existing
         -> procedure floor -> medical inflation -> round/floor/cap

Pure math; loguru is the only dependency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from ..models import BreakdownItem, CityTier, CoverVerdict, TriState, assess_cover
from .formatting import ceil_to, round_half_away
from .rate_tables import (
    CITY_COVER_MULTIPLIER,
    CITY_PREMIUM_DISCOUNT,
    HEALTH_RATE_PER_LAKH,
    HEALTH_VOLUME_DISCOUNT,
    LAKH,
    MEDICAL_INFLATION_RATE,
    MEDICAL_INFLATION_YEARS,
    PARENTS_POLICY_COUPLE_MULTIPLIER,
    PROCEDURE_COST_FLOOR,
    age_cover_band,
    health_family_multiplier,
    lookup_band,
)


class PremiumModel(Enum):
    """How the annual premium is estimated from the cover."""

    RATED = "rated"  # Per-lakh age table with volume/family/city adjustments
    PROPORTIONAL = "proportional"  # Flat share of cover plus per-head loading


@dataclass(frozen=True)
class HealthCoverConfig:
    """Which modifiers apply and with what constants.

    Attributes:
        name: Variant identifier, echoed on every estimate.
        self_cover: Base sum insured for the proposer.
        adult_cover: Added for each adult beyond the proposer (spouse).
        child_cover: Added per child.
        parent_cover: Per-parent base of the separate parents policy.
        pre_existing_multiplier: Cover loading for pre-existing conditions; None disables.
        apply_procedure_floor: Raise cover to the cost of a planned procedure.
        medical_spend_threshold: Monthly medical spend above which ``medical_spend_bump``
            is added; None disables.
        cover_floor / cover_cap: Bounds applied after rounding; a None cap means uncapped.
        premium_model: RATED or PROPORTIONAL.
    """

    name: str
    self_cover: int
    premium_model: PremiumModel
    adult_cover: int = 200_000
    child_cover: int = 150_000
    parent_cover: int = 300_000
    pre_existing_multiplier: float | None = None
    apply_procedure_floor: bool = False
    medical_spend_threshold: float | None = None
    medical_spend_bump: int = 500_000
    medical_inflation_rate: float = MEDICAL_INFLATION_RATE
    medical_inflation_years: int = MEDICAL_INFLATION_YEARS
    cover_rounding: int = LAKH
    cover_floor: int = 500_000
    cover_cap: int | None = None
    # RATED premium
    premium_rounding: int = 100
    premium_floor: int = 5_000
    parents_premium_floor: int = 8_000
    # PROPORTIONAL premium
    proportional_rate: float = 0.003
    per_adult_premium: int = 5_000
    per_child_premium: int = 2_000
    pre_existing_premium_loading: float = 1.4
    proportional_rounding: int = 500


GAP_VARIANT = HealthCoverConfig(
    name="gap",
    self_cover=500_000,
    premium_model=PremiumModel.PROPORTIONAL,
    pre_existing_multiplier=1.3,
    apply_procedure_floor=True,
    medical_spend_threshold=5_000,
    cover_cap=None,
)

FINSCORE_VARIANT = HealthCoverConfig(
    name="finscore",
    self_cover=300_000,
    premium_model=PremiumModel.RATED,
    cover_cap=50_000_000,
)


@dataclass
class HealthCoverInput:
    """Family profile for a floater policy.

    Attributes:
        adults: Adults on the floater including the proposer (1 or more).
        children: Children on the floater.
        self_age / spouse_age: Ages drive the age loading and the premium rate.
            Without ``self_age`` no age loading is applied.
        pre_existing: Any pre-existing condition in the family.
        planned_procedure: Key into PROCEDURE_COST_FLOOR ("none" by default).
        monthly_medical_spend: Current monthly medical outgo.
        existing_cover: Sum insured already held, for the sufficiency verdict.
    """

    adults: int = 1
    children: int = 0
    city_tier: CityTier = CityTier.TIER1
    self_age: int | None = None
    spouse_age: int | None = None
    pre_existing: TriState = TriState.UNKNOWN
    planned_procedure: str = "none"
    monthly_medical_spend: float = 0
    existing_cover: float | None = None

    @property
    def members(self) -> int:
        return max(1, self.adults) + max(0, self.children)

    @property
    def eldest_age(self) -> int | None:
        if self.self_age is None:
            return None
        spouse = self.spouse_age if self.adults > 1 and self.spouse_age is not None else 0
        return max(self.self_age, spouse)


@dataclass
class HealthCoverEstimate:
    """Recommended cover, its premium, and how it was built up.

    ``breakdown`` amounts sum exactly to ``cover``; ``reasons`` are
    localisation keys in the order the rules fired.
    """

    variant: str
    cover: int
    premium: int
    members: int
    plan_type: str
    verdict: CoverVerdict
    breakdown: list[BreakdownItem] = field(default_factory=list)
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "variant": self.variant,
            "cover": self.cover,
            "premium": self.premium,
            "members": self.members,
            "plan_type": self.plan_type,
            "breakdown": [{"label": b.label, "amount": b.amount} for b in self.breakdown],
            "reasons": list(self.reasons),
            "gap": self.verdict.gap,
            "sufficient": self.verdict.sufficient,
        }


class _CoverBuilder:
    """Tracks the running cover and records each step as a breakdown delta."""

    def __init__(self):
        self.value = 0.0
        self.breakdown: list[BreakdownItem] = []
        self.reasons: list[str] = []

    def add(self, label: str, amount: float) -> None:
        if amount:
            self.value += amount
            self.breakdown.append(BreakdownItem(label, round_half_away(amount)))

    def scale(self, label: str, factor: float, reason: str | None = None) -> None:
        if factor == 1:
            return
        self.add(label, self.value * (factor - 1))
        if reason:
            self.reasons.append(reason)

    def finalize(self, rounding: int, floor: int, cap: int | None) -> int:
        cover = max(ceil_to(self.value, rounding), floor)
        if cap is not None:
            cover = min(cover, cap)
        adjustment = cover - sum(item.amount for item in self.breakdown)
        if adjustment:
            self.breakdown.append(BreakdownItem("rounding", adjustment))
        return cover


def _apply_city(builder: _CoverBuilder, tier: CityTier) -> None:
    reason = {CityTier.TIER1: "metro", CityTier.TIER2: "urban"}.get(tier)
    builder.scale("city", CITY_COVER_MULTIPLIER[tier], reason)


def _apply_age(builder: _CoverBuilder, age: int | None) -> None:
    if age is None:
        return
    band, multiplier = age_cover_band(age)
    builder.scale("age", multiplier, f"age{band}")


def _apply_inflation(builder: _CoverBuilder, config: HealthCoverConfig) -> None:
    factor = (1 + config.medical_inflation_rate) ** config.medical_inflation_years
    builder.scale("inflation", factor, "inflation")


def rated_premium(
    cover: int,
    age: int | None,
    family_multiplier: float,
    city_tier: CityTier,
    premium_floor: int,
    rounding: int = 100,
) -> int:
    """Price a policy from the per-lakh age table.

    rate(age) x lakhs, then volume discount, family loading, city discount;
    rounded up to ``rounding`` and held at ``premium_floor``.
    """
    si_in_lakhs = cover / LAKH
    base = si_in_lakhs * lookup_band(HEALTH_RATE_PER_LAKH, age or 0)
    adjusted = base * lookup_band(HEALTH_VOLUME_DISCOUNT, si_in_lakhs) * family_multiplier
    premium = round_half_away(adjusted)

    discount = CITY_PREMIUM_DISCOUNT[city_tier]
    if discount != 1:
        premium = round_half_away(premium * discount)

    return max(ceil_to(premium, rounding), premium_floor)


def _proportional_premium(unrounded_cover: float, profile: HealthCoverInput, config: HealthCoverConfig) -> int:
    estimate = (
        unrounded_cover * config.proportional_rate
        + max(1, profile.adults) * config.per_adult_premium
        + max(0, profile.children) * config.per_child_premium
    )
    if config.pre_existing_multiplier is not None and profile.pre_existing.is_yes:
        estimate *= config.pre_existing_premium_loading
    return ceil_to(estimate, config.proportional_rounding)


def estimate_health_cover(profile: HealthCoverInput, config: HealthCoverConfig = FINSCORE_VARIANT) -> HealthCoverEstimate:
    """Recommend a floater sum insured and estimate its annual premium.

    Args:
        profile: Family composition, location, ages and medical context.
        config: GAP_VARIANT, FINSCORE_VARIANT, or a custom HealthCoverConfig.

    Returns:
        HealthCoverEstimate. Cover is a multiple of ``config.cover_rounding``.
    """
    adults = max(1, profile.adults)
    children = max(0, profile.children)
    members = adults + children

    builder = _CoverBuilder()
    builder.add("self", config.self_cover)
    builder.add("spouse" if adults == 2 else "adults", (adults - 1) * config.adult_cover)
    builder.add("children", children * config.child_cover)
    if members > 1:
        builder.reasons.append("floater")

    _apply_city(builder, profile.city_tier)

    if config.medical_spend_threshold is not None and profile.monthly_medical_spend > config.medical_spend_threshold:
        builder.add("medical_spend", config.medical_spend_bump)
        builder.reasons.append("medical_spend")

    _apply_age(builder, profile.eldest_age)

    if config.pre_existing_multiplier is not None and profile.pre_existing.is_yes:
        builder.scale("pre_existing", config.pre_existing_multiplier, "pre_existing")

    if config.apply_procedure_floor:
        procedure_floor = PROCEDURE_COST_FLOOR.get(profile.planned_procedure, 0)
        if procedure_floor > builder.value:
            builder.add("procedure", procedure_floor - builder.value)
            builder.reasons.append("procedure")

    _apply_inflation(builder, config)

    unrounded = builder.value
    cover = builder.finalize(config.cover_rounding, config.cover_floor, config.cover_cap)

    if config.premium_model is PremiumModel.RATED:
        premium = rated_premium(
            cover,
            profile.eldest_age,
            health_family_multiplier(members, parents_in_floater=False),
            profile.city_tier,
            config.premium_floor,
            config.premium_rounding,
        )
    else:
        premium = _proportional_premium(unrounded, profile, config)

    logger.debug(f"{config.name} health cover for {members} member(s): {cover} @ {premium}/yr")

    return HealthCoverEstimate(
        variant=config.name,
        cover=cover,
        premium=premium,
        members=members,
        plan_type="individual" if members <= 1 else "family_floater",
        verdict=assess_cover(cover, profile.existing_cover),
        breakdown=builder.breakdown,
        reasons=builder.reasons,
    )


def estimate_parents_cover(
    num_parents: int,
    city_tier: CityTier = CityTier.TIER1,
    eldest_parent_age: int = 60,
    config: HealthCoverConfig = FINSCORE_VARIANT,
    existing_cover: float | None = None,
) -> HealthCoverEstimate | None:
    """Size a separate policy for parents, or None when there are none to cover.

    Same city, age and inflation steps as the floater, priced from the
    eldest parent's age with a couple loading instead of the family table.
    """
    if num_parents <= 0:
        return None

    builder = _CoverBuilder()
    builder.add("parents", num_parents * config.parent_cover)
    _apply_city(builder, city_tier)
    _apply_age(builder, eldest_parent_age)
    _apply_inflation(builder, config)

    cover = builder.finalize(config.cover_rounding, config.cover_floor, config.cover_cap)
    family_multiplier = PARENTS_POLICY_COUPLE_MULTIPLIER if num_parents >= 2 else 1.0
    premium = rated_premium(
        cover,
        eldest_parent_age,
        family_multiplier,
        city_tier,
        config.parents_premium_floor,
        config.premium_rounding,
    )

    return HealthCoverEstimate(
        variant=config.name,
        cover=cover,
        premium=premium,
        members=num_parents,
        plan_type="parents",
        verdict=assess_cover(cover, existing_cover),
        breakdown=builder.breakdown,
        reasons=builder.reasons,
    )
