"""
Rate tables for the insurance and protection calculators.

Single source of truth for every step function the estimators use.
This module has NO dependencies on other calculator modules.

Band tables are lists of ``(upper_bound, value)`` sorted ascending; a
lookup returns the value of the first band whose bound is >= the key.
The last band is always open-ended (``float("inf")``).
"""

from ..models import CityTier

LAKH = 100_000
CRORE = 10_000_000

# =============================================================================
# HEALTH INSURANCE
# =============================================================================

# Annual premium per lakh of sum insured, by age of the eldest insured
HEALTH_RATE_PER_LAKH = [
    (25, 800),
    (30, 950),
    (35, 1_100),
    (40, 1_400),
    (45, 1_800),
    (50, 2_300),
    (55, 3_000),
    (60, 4_000),
    (65, 5_200),
    (70, 6_500),
    (float("inf"), 8_500),
]

# Premium factor by sum insured in lakhs (bigger policies are cheaper per lakh)
HEALTH_VOLUME_DISCOUNT = [
    (5, 1.00),
    (10, 0.90),
    (20, 0.80),
    (50, 0.70),
    (float("inf"), 0.60),
]

# Floater premium loading by number of covered members
HEALTH_FAMILY_MULTIPLIER = [
    (1, 1.00),
    (2, 1.35),
    (3, 1.50),
    (4, 1.60),
    (float("inf"), 1.70),
]
HEALTH_PARENTS_IN_FLOATER_LOADING = 0.15

# Separate parents policy: loading when two or more parents share it
PARENTS_POLICY_COUPLE_MULTIPLIER = 1.35

# Cover multiplier by age of the eldest insured, checked from the top down
HEALTH_AGE_COVER_MULTIPLIER = [
    (55, 1.40),
    (45, 1.30),
    (35, 1.15),
]

# Sum insured scales up in expensive cities...
CITY_COVER_MULTIPLIER = {
    CityTier.TIER1: 1.5,
    CityTier.TIER2: 1.2,
    CityTier.TIER3: 1.0,
}

# ...while premiums are discounted in cheaper ones
CITY_PREMIUM_DISCOUNT = {
    CityTier.TIER1: 1.00,
    CityTier.TIER2: 0.90,
    CityTier.TIER3: 0.80,
}

# Minimum sum insured for a planned procedure
PROCEDURE_COST_FLOOR = {
    "none": 0,
    "angioplasty": 500_000,
    "bypass": 800_000,
    "knee": 600_000,
    "maternity": 200_000,
    "cataract": 100_000,
    "cancer": 2_500_000,
}

MEDICAL_INFLATION_RATE = 0.06
MEDICAL_INFLATION_YEARS = 5

# =============================================================================
# TERM LIFE INSURANCE
# =============================================================================

TERM_RETIREMENT_AGE = 60
TERM_MIN_WORKING_YEARS = 5
TERM_MAX_HLV_MULTIPLIER = 25
TERM_INCOME_REPLACEMENT_YEARS = 10
TERM_CHILD_EDUCATION_COVER = 2_500_000

TERM_COVER_ROUNDING = 500_000
TERM_COVER_FLOOR = 5_000_000
TERM_COVER_CAP = 500_000_000

# Annual premium per lakh of cover, by age
TERM_RATE_PER_LAKH = [
    (25, 70),
    (30, 100),
    (35, 140),
    (40, 220),
    (45, 300),
    (50, 480),
    (55, 750),
    (float("inf"), 1_200),
]

# Premium factor by cover in lakhs
TERM_VOLUME_DISCOUNT = [
    (100, 1.00),
    (200, 0.90),
    (float("inf"), 0.85),
]

TERM_PREMIUM_ROUNDING = 100
TERM_PREMIUM_FLOOR = 5_000
TERM_PREMIUM_CAP_THRESHOLD = 500_000
TERM_PREMIUM_MAX_COVER_RATIO = 0.03


def lookup_band(table: list[tuple[float, float]], key: float) -> float:
    """Return the value of the first ``(upper_bound, value)`` band containing ``key``."""
    for upper_bound, value in table:
        if key <= upper_bound:
            return value
    return table[-1][1]


def age_cover_band(age: float) -> tuple[int, float]:
    """Return ``(band_min_age, multiplier)`` for the eldest insured; ``(0, 1.0)`` below every band."""
    for min_age, multiplier in HEALTH_AGE_COVER_MULTIPLIER:
        if age >= min_age:
            return min_age, multiplier
    return 0, 1.0


def health_family_multiplier(members: int, parents_in_floater: bool = False) -> float:
    base = lookup_band(HEALTH_FAMILY_MULTIPLIER, members)
    if parents_in_floater:
        base += HEALTH_PARENTS_IN_FLOATER_LOADING
    return base
