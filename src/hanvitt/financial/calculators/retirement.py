"""Retirement corpus: today's expenses inflated to retirement, sized by a safe withdrawal rate."""

from dataclasses import dataclass

INFLATION_RATE = 0.06
SAFE_WITHDRAWAL_RATE = 0.04


@dataclass(frozen=True)
class RetirementGap:
    years_to_retirement: int
    future_annual_expenses: float
    corpus_needed: float


def estimate_retirement_corpus(
    current_age: int,
    retirement_age: int,
    annual_expenses: float,
    inflation_rate: float = INFLATION_RATE,
    safe_withdrawal_rate: float = SAFE_WITHDRAWAL_RATE,
) -> RetirementGap:
    """Corpus needed at retirement to fund inflated expenses indefinitely.

    A retirement age at or below the current age means zero years to go,
    i.e. today's expenses divided by the withdrawal rate.
    """
    years_to_retirement = max(0, retirement_age - current_age)
    future_annual_expenses = annual_expenses * (1 + inflation_rate) ** years_to_retirement
    return RetirementGap(
        years_to_retirement=years_to_retirement,
        future_annual_expenses=future_annual_expenses,
        corpus_needed=future_annual_expenses / safe_withdrawal_rate,
    )
