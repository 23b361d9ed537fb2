"""hanvitt savings / retirement / health / term / insurance / score / dime."""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from hanvitt.financial.calculators import (
    FINSCORE_VARIANT,
    GAP_VARIANT,
    FinancialHealthInput,
    HealthCoverInput,
    InsuranceProfile,
    TermCoverInput,
    calculate_dime_gap,
    estimate_health_cover,
    estimate_parents_cover,
    estimate_retirement_corpus,
    estimate_term_cover,
    project_savings,
    recommend_insurance,
    score_financial_health,
)
from hanvitt.financial.calculators.rate_tables import PROCEDURE_COST_FLOOR
from hanvitt.financial.inputs import AGE_MAX, AGE_MIN, CHILDREN_MAX, PARENTS_MAX
from hanvitt.financial.models import CityTier, TriState

from .common import AMOUNT, CITY_TIER, TRI_STATE, console, key_value_table, rupees

AGE = click.IntRange(AGE_MIN, AGE_MAX, clamp=True)
JSON_OPTION = click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON.")


def _emit_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def _health_rows(estimate) -> list[tuple[str, str]]:
    rows = [
        ("Recommended cover", rupees(estimate.cover)),
        ("Annual premium", rupees(estimate.premium)),
        ("Plan type", estimate.plan_type),
    ]
    rows += [(f"  {item.label}", rupees(item.amount)) for item in estimate.breakdown]
    if estimate.verdict.existing:
        verdict = "sufficient" if estimate.verdict.sufficient else f"short by {rupees(estimate.verdict.gap)}"
        rows.append(("Existing cover", verdict))
    return rows


@click.command()
@click.option("--initial", type=AMOUNT, default=10_000, show_default=True, help="Opening deposit.")
@click.option("--monthly", type=AMOUNT, default=500, show_default=True, help="Monthly contribution.")
@click.option("--rate", type=click.FloatRange(0, 100, clamp=True), default=7.0, show_default=True, help="Annual rate, %.")
@click.option("--years", type=click.IntRange(1, 100, clamp=True), default=20, show_default=True)
@click.option("--yearly", is_flag=True, help="Show the year-by-year table.")
@JSON_OPTION
def savings(initial: float, monthly: float, rate: float, years: int, yearly: bool, as_json: bool) -> None:
    """Project savings with monthly compounding."""
    projection = project_savings(initial, monthly, rate, years)
    if as_json:
        _emit_json(projection.to_dict())
        return

    out = console()
    out.print(
        key_value_table(
            "Savings projection",
            [
                ("Final balance", rupees(projection.final_balance)),
                ("Total invested", rupees(projection.total_invested)),
                ("Total interest", rupees(projection.total_interest)),
            ],
        )
    )
    if yearly:
        from rich.table import Table

        table = Table(title="By year", title_justify="left")
        for column in ("Year", "Balance", "Invested", "Interest"):
            table.add_column(column, justify="right")
        for p in projection.points:
            table.add_row(str(p.year), f"{p.balance:,}", f"{p.invested:,}", f"{p.interest:,}")
        out.print(table)


@click.command()
@click.option("--current-age", type=AGE, default=30, show_default=True)
@click.option("--retirement-age", type=AGE, default=60, show_default=True)
@click.option("--expenses", type=AMOUNT, default=500_000, show_default=True, help="Annual expenses today.")
@JSON_OPTION
def retirement(current_age: int, retirement_age: int, expenses: float, as_json: bool) -> None:
    """Corpus needed to retire, at 6% inflation and a 4% withdrawal rate."""
    gap = estimate_retirement_corpus(current_age, retirement_age, expenses)
    if as_json:
        _emit_json(asdict(gap))
        return
    console().print(
        key_value_table(
            "Retirement corpus",
            [
                ("Years to retirement", str(gap.years_to_retirement)),
                ("Future annual expenses", rupees(gap.future_annual_expenses)),
                ("Corpus needed", rupees(gap.corpus_needed)),
            ],
        )
    )


@click.command()
@click.option("--variant", type=click.Choice(["gap", "finscore"]), default="gap", show_default=True)
@click.option("--adults", type=click.IntRange(1, 2, clamp=True), default=2, show_default=True)
@click.option("--children", type=click.IntRange(0, CHILDREN_MAX, clamp=True), default=1, show_default=True)
@click.option("--city", type=CITY_TIER, default="tier1", show_default=True)
@click.option("--age", type=AGE, default=None, help="Proposer's age (enables age loading).")
@click.option("--spouse-age", type=AGE, default=None)
@click.option("--pre-existing", type=TRI_STATE, default="no", show_default=True)
@click.option("--procedure", type=click.Choice(sorted(PROCEDURE_COST_FLOOR)), default="none", show_default=True)
@click.option("--medical-spend", type=AMOUNT, default=2_000, show_default=True, help="Monthly medical spend.")
@click.option("--existing-cover", type=AMOUNT, default=None)
@click.option("--parents", type=click.IntRange(0, PARENTS_MAX, clamp=True), default=0, help="Parents on a separate policy.")
@click.option("--parent-age", type=AGE, default=60, show_default=True)
@JSON_OPTION
def health(
    variant: str,
    adults: int,
    children: int,
    city: str,
    age: int | None,
    spouse_age: int | None,
    pre_existing: str,
    procedure: str,
    medical_spend: float,
    existing_cover: float | None,
    parents: int,
    parent_age: int,
    as_json: bool,
) -> None:
    """Recommend a health insurance sum insured and premium."""
    config = GAP_VARIANT if variant == "gap" else FINSCORE_VARIANT
    tier = CityTier(city)
    estimate = estimate_health_cover(
        HealthCoverInput(
            adults=adults,
            children=children,
            city_tier=tier,
            self_age=age,
            spouse_age=spouse_age,
            pre_existing=TriState(pre_existing),
            planned_procedure=procedure,
            monthly_medical_spend=medical_spend,
            existing_cover=existing_cover,
        ),
        config,
    )
    parents_estimate = estimate_parents_cover(parents, city_tier=tier, eldest_parent_age=parent_age, config=config)

    if as_json:
        _emit_json(
            {
                "floater": estimate.to_dict(),
                "parents": parents_estimate.to_dict() if parents_estimate else None,
            }
        )
        return

    out = console()
    out.print(key_value_table("Health cover", _health_rows(estimate)))
    if parents_estimate:
        out.print(key_value_table("Parents cover", _health_rows(parents_estimate)))


@click.command()
@click.option("--income", type=AMOUNT, required=True, help="Monthly income.")
@click.option("--debt", type=AMOUNT, default=0, help="Total outstanding debt.")
@click.option("--age", type=AGE, default=30, show_default=True)
@click.option("--children", type=click.IntRange(0, CHILDREN_MAX, clamp=True), default=0)
@click.option("--existing-cover", type=AMOUNT, default=None)
@JSON_OPTION
def term(income: float, debt: float, age: int, children: int, existing_cover: float | None, as_json: bool) -> None:
    """Recommend term life cover using the human-life-value method."""
    estimate = estimate_term_cover(
        TermCoverInput(
            monthly_income=income,
            total_debt=debt,
            age=age,
            num_children=children,
            existing_cover=existing_cover,
        )
    )
    if as_json:
        _emit_json(estimate.to_dict())
        return

    rows = [
        ("Recommended cover", rupees(estimate.cover)),
        ("Annual premium", rupees(estimate.premium)),
    ]
    if estimate.verdict.existing:
        rows.append(("Gap", rupees(estimate.verdict.gap)))
    console().print(key_value_table("Term cover", rows))


@click.command()
@click.option("--income", type=AMOUNT, default=0, help="Monthly income.")
@click.option("--debt", type=AMOUNT, default=0)
@click.option("--age", type=AGE, default=None)
@click.option("--city", type=CITY_TIER, default="tier1", show_default=True)
@click.option("--spouse/--no-spouse", default=True, show_default=True)
@click.option("--spouse-age", type=AGE, default=None)
@click.option("--children", type=click.IntRange(0, CHILDREN_MAX, clamp=True), default=0)
@click.option("--parents", type=click.IntRange(0, PARENTS_MAX, clamp=True), default=0)
@click.option("--parent-age", type=AGE, default=None)
@click.option("--existing-health", type=AMOUNT, default=None)
@click.option("--existing-term", type=AMOUNT, default=None)
@JSON_OPTION
def insurance(
    income: float,
    debt: float,
    age: int | None,
    city: str,
    spouse: bool,
    spouse_age: int | None,
    children: int,
    parents: int,
    parent_age: int | None,
    existing_health: float | None,
    existing_term: float | None,
    as_json: bool,
) -> None:
    """Recommend health, parents and term cover together."""
    recommendation = recommend_insurance(
        InsuranceProfile(
            monthly_income=income,
            total_debt=debt,
            age=age,
            city_tier=CityTier(city),
            has_spouse=spouse,
            spouse_age=spouse_age,
            num_children=children,
            num_parents=parents,
            eldest_parent_age=parent_age,
            existing_health_cover=existing_health,
            existing_term_cover=existing_term,
        )
    )
    if as_json:
        _emit_json(recommendation.to_dict())
        return

    out = console()
    out.print(key_value_table("Health cover", _health_rows(recommendation.health)))
    if recommendation.parents:
        out.print(key_value_table("Parents cover", _health_rows(recommendation.parents)))
    out.print(
        key_value_table(
            "Term cover",
            [
                ("Recommended cover", rupees(recommendation.term.cover)),
                ("Annual premium", rupees(recommendation.term.premium)),
            ],
        )
    )
    out.print(f"Total annual premium: {rupees(recommendation.total_annual_premium)}")


@click.command()
@click.option("--income", type=AMOUNT, default=0, help="Monthly income.")
@click.option("--savings", "monthly_savings", type=AMOUNT, default=0, help="Monthly savings.")
@click.option("--debt", type=AMOUNT, default=0, help="Total outstanding debt.")
@click.option("--emi", type=AMOUNT, default=0, help="Monthly EMIs.")
@click.option("--emergency-fund", type=AMOUNT, default=0)
@click.option("--health-insurance", type=TRI_STATE, default="unknown")
@click.option("--life-insurance", type=TRI_STATE, default="unknown")
@click.option("--investments", type=TRI_STATE, default="unknown")
@click.option("--budget", type=TRI_STATE, default="unknown")
@click.option("--will", type=TRI_STATE, default="unknown")
@JSON_OPTION
def score(
    income: float,
    monthly_savings: float,
    debt: float,
    emi: float,
    emergency_fund: float,
    health_insurance: str,
    life_insurance: str,
    investments: str,
    budget: str,
    will: str,
    as_json: bool,
) -> None:
    """Score financial health out of 100."""
    result = score_financial_health(
        FinancialHealthInput(
            monthly_income=income,
            monthly_savings=monthly_savings,
            total_debt=debt,
            monthly_emi=emi,
            emergency_fund=emergency_fund,
            has_health_insurance=health_insurance,
            has_life_insurance=life_insurance,
            has_investments=investments,
            has_budget=budget,
            has_will=will,
        )
    )
    if as_json:
        _emit_json(result.to_dict())
        return

    healthy = result.recommendations()
    rows = [("Total", f"{result.total}/100 ({result.label})")]
    rows += [
        (name, f"{points} {'ok' if healthy[name] else 'needs work'}")
        for name, points in result.breakdown.as_dict().items()
    ]
    console().print(key_value_table("Financial health score", rows))


@click.command()
@click.option("--debt", type=AMOUNT, default=5_000, show_default=True)
@click.option("--income", type=AMOUNT, default=100_000, show_default=True, help="Income to replace.")
@click.option("--mortgage", type=AMOUNT, default=200_000, show_default=True)
@click.option("--education", type=AMOUNT, default=50_000, show_default=True)
@click.option("--assets", type=AMOUNT, default=25_000, show_default=True)
@JSON_OPTION
def dime(debt: float, income: float, mortgage: float, education: float, assets: float, as_json: bool) -> None:
    """DIME life-insurance protection gap."""
    result = calculate_dime_gap(debt, income, mortgage, education, assets)
    if as_json:
        _emit_json({**result.needs_breakdown, "assets": result.assets, "total_needs": result.total_needs, "gap": result.gap})
        return

    rows = [(name.capitalize(), rupees(value)) for name, value in result.needs_breakdown.items()]
    rows += [
        ("Total needs", rupees(result.total_needs)),
        ("Assets", rupees(result.assets)),
        ("Protection gap", rupees(result.gap)),
    ]
    console().print(key_value_table("DIME analysis", rows))
