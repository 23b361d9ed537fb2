"""DIME protection gap: Debt + Income + Mortgage + Education, less existing assets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DimeGap:
    debt: float
    income: float
    mortgage: float
    education: float
    assets: float
    total_needs: float
    gap: float

    @property
    def needs_breakdown(self) -> dict[str, float]:
        return {
            "debt": self.debt,
            "income": self.income,
            "mortgage": self.mortgage,
            "education": self.education,
        }


def calculate_dime_gap(debt: float, income: float, mortgage: float, education: float, assets: float) -> DimeGap:
    """Sum the four need categories and subtract assets; the gap never goes negative."""
    total_needs = debt + income + mortgage + education
    return DimeGap(
        debt=debt,
        income=income,
        mortgage=mortgage,
        education=education,
        assets=assets,
        total_needs=total_needs,
        gap=max(0, total_needs - assets),
    )
