"""Savings projection: a lump sum plus monthly deposits, compounded monthly.

Pure math, no external dependencies.
"""

from dataclasses import dataclass, field

from .formatting import round_half_away


@dataclass(frozen=True)
class YearPoint:
    """Balance snapshot at the start of a year (year 0 = today)."""

    year: int
    balance: int
    invested: int
    interest: int


@dataclass
class SavingsProjection:
    """Year-by-year projection with headline totals."""

    initial: float
    monthly_contribution: float
    annual_rate_percent: float
    years: int
    points: list[YearPoint] = field(default_factory=list)

    @property
    def final_balance(self) -> int:
        return self.points[-1].balance

    @property
    def total_invested(self) -> int:
        return self.points[-1].invested

    @property
    def total_interest(self) -> int:
        return self.points[-1].interest

    def to_dict(self) -> dict:
        return {
            "final_balance": self.final_balance,
            "total_invested": self.total_invested,
            "total_interest": self.total_interest,
            "points": [
                {"year": p.year, "balance": p.balance, "invested": p.invested, "interest": p.interest}
                for p in self.points
            ],
        }


def project_savings(
    initial: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    years: int,
) -> SavingsProjection:
    """Project savings growth year by year.

    Each year's point is recorded before that year's twelve monthly
    compounding steps, so ``years`` produces ``years + 1`` points and
    point 0 is the untouched initial deposit.

    Args:
        initial: Opening deposit.
        monthly_contribution: Deposit added at the end of every month.
        annual_rate_percent: Nominal annual rate in percent (7 for 7%).
        years: Projection horizon.

    Returns:
        SavingsProjection with one YearPoint per year, 0..years inclusive.
    """
    monthly_rate = annual_rate_percent / 100 / 12
    balance = float(initial)
    invested = float(initial)
    horizon = max(0, int(years))

    points = []
    for year in range(horizon + 1):
        points.append(
            YearPoint(
                year=year,
                balance=round_half_away(balance),
                invested=round_half_away(invested),
                interest=round_half_away(balance - invested),
            )
        )
        for _ in range(12):
            balance = balance * (1 + monthly_rate) + monthly_contribution
            invested += monthly_contribution

    return SavingsProjection(
        initial=initial,
        monthly_contribution=monthly_contribution,
        annual_rate_percent=annual_rate_percent,
        years=horizon,
        points=points,
    )
